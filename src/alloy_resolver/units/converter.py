"""
Unit Converter - Mass Units to Grams.

Maps a (value, unit) pair to grams using a fixed rate table, and converts
prices quoted per unit into prices per gram. Gemstone weights are
converted from metric carats so they can be excluded before the resolver
sees a mass.
"""

from __future__ import annotations

from typing import Dict, Union

from alloy_resolver.domain.value_objects import GRAMS_PER_CARAT, MassUnit

GRAMS_PER_UNIT: Dict[MassUnit, float] = {
    MassUnit.GRAM: 1.0,
    MassUnit.TROY_OUNCE: 31.1034768,
    MassUnit.OUNCE: 28.3495,
    MassUnit.PENNYWEIGHT: 1.55517,
    MassUnit.TOLA: 11.6638,
}


class UnknownUnitError(ValueError):
    """Raised when a unit name is not in the rate table."""


_ALIASES: Dict[str, MassUnit] = {
    "G": MassUnit.GRAM,
    "GRAMS": MassUnit.GRAM,
    "OZT": MassUnit.TROY_OUNCE,
    "TROY OUNCE": MassUnit.TROY_OUNCE,
    "OZ": MassUnit.OUNCE,
    "AVDP": MassUnit.OUNCE,
    "DWT": MassUnit.PENNYWEIGHT,
    "TOLAS": MassUnit.TOLA,
}


def parse_unit(unit: Union[MassUnit, str]) -> MassUnit:
    """
    Resolve a unit given as enum or name.

    Accepts enum values ("TROY_OUNCE") and common abbreviations
    ("g", "ozt", "oz", "dwt", "tola"), case-insensitively.
    """
    if isinstance(unit, MassUnit):
        return unit

    key = unit.strip().upper()
    if key in MassUnit.__members__:
        return MassUnit[key]
    if key in _ALIASES:
        return _ALIASES[key]
    raise UnknownUnitError(f"Unknown mass unit: {unit}")


def to_grams(value: float, unit: Union[MassUnit, str] = MassUnit.GRAM) -> float:
    """Convert a mass in ``unit`` to grams."""
    return value * GRAMS_PER_UNIT[parse_unit(unit)]


def from_grams(grams: float, unit: Union[MassUnit, str]) -> float:
    """Convert a mass in grams to ``unit``."""
    return grams / GRAMS_PER_UNIT[parse_unit(unit)]


def carats_to_grams(carats: float) -> float:
    """Convert a gemstone weight in metric carats to grams."""
    return carats * GRAMS_PER_CARAT


def price_per_gram(price: float, unit: Union[MassUnit, str] = MassUnit.GRAM) -> float:
    """Convert a price quoted per ``unit`` into a price per gram."""
    return price / GRAMS_PER_UNIT[parse_unit(unit)]
