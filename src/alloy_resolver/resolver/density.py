"""
Density Derivation - Hydrostatic Weighing.

Archimedes' principle with water at 1 g/cm^3: the loss of weight in water
equals the displaced water mass, which is numerically the specimen volume.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from alloy_resolver.domain.entities import MeasuredItem, Metal

logger = logging.getLogger(__name__)


def derive_density(
    weight_in_air_grams: float,
    weight_in_water_grams: float,
) -> Optional[float]:
    """
    Derive density from weight in air and weight in water.

    Both readings must already be net of any excluded gemstone mass.

    Args:
        weight_in_air_grams: Specimen weight in air
        weight_in_water_grams: Specimen weight when submerged

    Returns:
        Density in g/cm^3, or None when the readings are indeterminate
        (non-finite, non-positive, or water weight >= air weight)
    """
    if not (math.isfinite(weight_in_air_grams) and math.isfinite(weight_in_water_grams)):
        logger.debug("Indeterminate density: non-finite reading")
        return None

    if weight_in_air_grams <= 0 or weight_in_water_grams < 0:
        logger.debug(
            f"Indeterminate density: air={weight_in_air_grams}, "
            f"water={weight_in_water_grams}"
        )
        return None

    if weight_in_air_grams <= weight_in_water_grams:
        logger.debug(
            f"Indeterminate density: water weight {weight_in_water_grams} "
            f">= air weight {weight_in_air_grams}"
        )
        return None

    displaced = weight_in_air_grams - weight_in_water_grams
    return weight_in_air_grams / displaced


def measure_item(
    weight_in_air_grams: float,
    weight_in_water_grams: float,
    impurity: Optional[Metal] = None,
) -> MeasuredItem:
    """
    Build a MeasuredItem from a hydrostatic weighing.

    An indeterminate reading yields an item with density 0 and no mass,
    which fails the validity gate downstream.
    """
    density = derive_density(weight_in_air_grams, weight_in_water_grams)
    if density is None:
        return MeasuredItem(impurity=impurity)

    return MeasuredItem(
        total_mass_grams=weight_in_air_grams,
        density=density,
        impurity=impurity,
    )


def is_density_valid(item: MeasuredItem) -> bool:
    """Single gate all downstream quantities pass through."""
    return item.is_density_valid()
