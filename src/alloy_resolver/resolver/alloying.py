"""
Alloying - Target-Karat Dilution and Karat Raising.

Inverse transformations of the purity calculation: how much impurity to
add to pure gold to reach a lower karat, and how much pure gold to add to
an alloy to reach a higher one. Both refuse to compute when their karat
preconditions do not hold instead of dividing by zero.
"""

from __future__ import annotations

import logging
from typing import Optional

from alloy_resolver.domain.entities import GOLD, AlloyRecipe, Metal, RecipeKind
from alloy_resolver.domain.value_objects import MAX_KARAT, karat_to_purity

logger = logging.getLogger(__name__)


class PreconditionViolated(ValueError):
    """Raised when a recipe's karat or mass preconditions do not hold."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def synthesize_alloy(
    gold_mass_grams: float,
    target_karat: float,
    impurity: Metal,
) -> AlloyRecipe:
    """
    Impurity mass needed to dilute pure gold to a target karat.

    Args:
        gold_mass_grams: Pure (24K) gold on hand
        target_karat: Desired karat, strictly between 0 and 24
        impurity: Metal to alloy with

    Returns:
        AlloyRecipe of kind DILUTION

    Raises:
        PreconditionViolated: If target_karat is not in (0, 24) or the
            gold mass is not positive
    """
    if not 0 < target_karat < MAX_KARAT:
        raise PreconditionViolated(
            f"target karat must be between 0 and {MAX_KARAT:g} (exclusive), "
            f"got {target_karat}",
            field="target_karat",
        )
    if gold_mass_grams <= 0:
        raise PreconditionViolated(
            f"gold mass must be > 0, got {gold_mass_grams}",
            field="gold_mass",
        )

    target_purity = karat_to_purity(target_karat)
    impurity_mass = gold_mass_grams * (1.0 / target_purity - 1.0)
    total_mass = gold_mass_grams + impurity_mass

    logger.debug(
        f"Dilution to {target_karat}K: {gold_mass_grams}g gold + "
        f"{impurity_mass:.4f}g {impurity.name}"
    )

    return AlloyRecipe(
        kind=RecipeKind.DILUTION,
        starting_mass_grams=gold_mass_grams,
        starting_karat=MAX_KARAT,
        target_karat=target_karat,
        added_metal=impurity,
        added_mass_grams=impurity_mass,
        resulting_total_mass_grams=total_mass,
    )


def raise_karat(
    initial_mass_grams: float,
    initial_karat: float,
    target_karat: float,
) -> AlloyRecipe:
    """
    Pure gold mass needed to raise an alloy to a higher karat.

    Solves (existing gold + added) / (existing mass + added) = target purity.

    Raises:
        PreconditionViolated: Unless 0 <= initial_karat < target_karat < 24
            and the initial mass is positive
    """
    if not 0 <= initial_karat < target_karat < MAX_KARAT:
        raise PreconditionViolated(
            f"karats must satisfy 0 <= initial < target < {MAX_KARAT:g}, "
            f"got initial={initial_karat}, target={target_karat}",
            field="target_karat",
        )
    if initial_mass_grams <= 0:
        raise PreconditionViolated(
            f"initial mass must be > 0, got {initial_mass_grams}",
            field="initial_mass",
        )

    initial_purity = karat_to_purity(initial_karat)
    target_purity = karat_to_purity(target_karat)
    added_gold = (
        initial_mass_grams * (target_purity - initial_purity) / (1.0 - target_purity)
    )

    return AlloyRecipe(
        kind=RecipeKind.ENRICHMENT,
        starting_mass_grams=initial_mass_grams,
        starting_karat=initial_karat,
        target_karat=target_karat,
        added_metal=GOLD,
        added_mass_grams=added_gold,
        resulting_total_mass_grams=initial_mass_grams + added_gold,
    )
