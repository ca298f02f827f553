"""
Resolver Package - The Alloy Composition Core.

Pure, stateless functions turning measurements into purity results and
karat targets into alloying recipes. Nothing here reads files, global
state or configuration; every input arrives as an argument.

Functions:
    - derive_density / measure_item: Hydrostatic weighing
    - is_density_valid: Mixing-interval gate
    - resolve_purity: Purity, karat and pure gold mass
    - synthesize_alloy: Dilute pure gold to a target karat
    - raise_karat: Add pure gold to reach a higher karat
    - project_value / value_portfolio: Market value at a given price

Errors:
    - PreconditionViolated: Karat or mass preconditions do not hold
"""

from alloy_resolver.resolver.alloying import (
    PreconditionViolated,
    raise_karat,
    synthesize_alloy,
)
from alloy_resolver.resolver.density import (
    derive_density,
    is_density_valid,
    measure_item,
)
from alloy_resolver.resolver.purity import pure_gold_mass, resolve_purity
from alloy_resolver.resolver.valuation import (
    price_configured,
    project_value,
    value_portfolio,
)

__all__ = [
    "PreconditionViolated",
    "derive_density",
    "is_density_valid",
    "measure_item",
    "price_configured",
    "project_value",
    "pure_gold_mass",
    "raise_karat",
    "resolve_purity",
    "synthesize_alloy",
    "value_portfolio",
]
