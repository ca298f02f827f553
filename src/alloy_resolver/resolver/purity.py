"""
Purity Resolution - Volume-Mixing Model.

Resolves the pure gold content of a binary gold alloy from its bulk
density, assuming ideal volume additivity of the two components.

The canonical formulation works from the object volume:

    object_volume = mass / density
    volume_fraction_gold = (density - d_imp) / (19.32 - d_imp)
    pure_gold_mass = volume_fraction_gold * object_volume * 19.32

The mass-fraction formulation via reciprocal densities,

    mass_fraction = (1/density - 1/d_imp) / (1/19.32 - 1/d_imp)

is algebraically identical and agrees to rounding.
"""

from __future__ import annotations

import logging
from typing import Optional

from alloy_resolver.domain.entities import MeasuredItem, PurityResult, PurityStatus
from alloy_resolver.domain.value_objects import (
    DENSITY_TOLERANCE,
    GOLD_DENSITY,
    KARATS_PER_PERCENT,
    density_bounds,
)
from alloy_resolver.resolver.valuation import project_value

logger = logging.getLogger(__name__)


def pure_gold_mass(item: MeasuredItem) -> float:
    """
    Pure gold mass of a measured item, in grams.

    Returns 0.0 when the item fails the validity gate or has no mass.
    The result is bounded to [0, total mass].
    """
    if not item.is_density_valid() or item.total_mass_grams <= 0:
        return 0.0

    if abs(item.density - GOLD_DENSITY) < DENSITY_TOLERANCE:
        return item.total_mass_grams

    impurity_density = item.impurity.density
    if impurity_density == GOLD_DENSITY:
        # Indistinguishable from gold and not within tolerance of it
        return 0.0

    object_volume = item.total_mass_grams / item.density
    volume_fraction_gold = (item.density - impurity_density) / (
        GOLD_DENSITY - impurity_density
    )
    mass = volume_fraction_gold * object_volume * GOLD_DENSITY
    return min(max(mass, 0.0), item.total_mass_grams)


def resolve_purity(
    item: MeasuredItem,
    price_per_gram: Optional[float] = None,
) -> PurityResult:
    """
    Resolve purity, karat rating and pure gold mass of an item.

    Args:
        item: The measured specimen
        price_per_gram: Optional gold price; None means not configured

    Returns:
        PurityResult. When the density fails the validity gate the result
        is INCONCLUSIVE with purity, karats and pure gold mass all zero.
    """
    market_value = project_value(0.0, price_per_gram)

    if not item.is_density_valid():
        logger.warning(f"Inconclusive: {_inconclusive_reason(item)}")
        return PurityResult(
            status=PurityStatus.INCONCLUSIVE,
            density=item.density,
            market_value=market_value,
            impurity=item.impurity,
        )

    gold_mass = pure_gold_mass(item)
    if item.total_mass_grams <= 0 or gold_mass <= 0:
        purity_percent = 0.0
    else:
        purity_percent = 100.0 * (gold_mass / item.total_mass_grams)

    karats = purity_percent * KARATS_PER_PERCENT

    logger.debug(
        f"Resolved density={item.density:.4f}: purity={purity_percent:.4f}% "
        f"({karats:.4f}K), pure gold={gold_mass:.4f}g"
    )

    return PurityResult(
        status=PurityStatus.CONCLUSIVE,
        density=item.density,
        purity_percent=purity_percent,
        karats=karats,
        pure_gold_mass_grams=gold_mass,
        market_value=project_value(gold_mass, price_per_gram),
        impurity=item.impurity,
    )


def _inconclusive_reason(item: MeasuredItem) -> str:
    if item.density <= 0:
        return "density could not be determined from the measurement"
    if item.impurity is None:
        return f"no impurity metal given for density {item.density:.4f} g/cm^3"
    lower, upper = density_bounds(item.impurity.density)
    return (
        f"density {item.density:.4f} g/cm^3 outside the possible range "
        f"[{lower:.2f}, {upper:.2f}] for impurity {item.impurity.name}"
    )
