"""
Units Package - Mass Unit Conversion.

All masses reach the resolver in grams. This package converts caller
units (troy ounces, avoirdupois ounces, pennyweight, tola) and gemstone
carats into grams, and prices per unit into prices per gram.
"""

from alloy_resolver.units.converter import (
    GRAMS_PER_UNIT,
    UnknownUnitError,
    carats_to_grams,
    from_grams,
    parse_unit,
    price_per_gram,
    to_grams,
)

__all__ = [
    "GRAMS_PER_UNIT",
    "UnknownUnitError",
    "carats_to_grams",
    "from_grams",
    "parse_unit",
    "price_per_gram",
    "to_grams",
]
