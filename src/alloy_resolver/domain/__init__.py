"""
Domain Layer - Core Values of the Alloy Resolver.

This package contains the domain model shared by the resolver and its
collaborators. All values here are pure Python (Pydantic for validation)
with no infrastructure dependencies.

Entities:
    - Metal: A named metal with its density
    - MeasuredItem: The specimen being evaluated
    - PurityResult: Purity, karat and pure gold mass of a specimen
    - AlloyRecipe: Metal to add to move between karat levels
    - Holding / PortfolioValuation: Portfolio valuation
    - Requests: Raw caller input for each pipeline operation

Value Objects:
    - MassUnit: Accepted mass units
    - KaratGrade / KARAT_REFERENCE: Karat reference table
    - Physical constants (gold density, tolerance)

Design Principles:
    - Immutable (frozen Pydantic models)
    - Rich domain model (behavior with data)
    - No infrastructure dependencies
"""

from alloy_resolver.domain.entities import (
    GOLD,
    AlloyRecipe,
    AlloyRequest,
    CalculationRecord,
    Holding,
    MeasuredItem,
    Metal,
    PortfolioRequest,
    PortfolioValuation,
    PriceUpdateRequest,
    PurityFromDensityRequest,
    PurityFromWeightRequest,
    PurityResult,
    PurityStatus,
    RaiseKaratRequest,
    RecipeKind,
)
from alloy_resolver.domain.value_objects import (
    DENSITY_TOLERANCE,
    GOLD_DENSITY,
    GRAMS_PER_CARAT,
    KARAT_REFERENCE,
    MAX_KARAT,
    KaratGrade,
    MassUnit,
    density_bounds,
    karat_to_purity,
)

__all__ = [
    "GOLD",
    "AlloyRecipe",
    "AlloyRequest",
    "CalculationRecord",
    "Holding",
    "MeasuredItem",
    "Metal",
    "PortfolioRequest",
    "PortfolioValuation",
    "PriceUpdateRequest",
    "PurityFromDensityRequest",
    "PurityFromWeightRequest",
    "PurityResult",
    "PurityStatus",
    "RaiseKaratRequest",
    "RecipeKind",
    "DENSITY_TOLERANCE",
    "GOLD_DENSITY",
    "GRAMS_PER_CARAT",
    "KARAT_REFERENCE",
    "MAX_KARAT",
    "KaratGrade",
    "MassUnit",
    "density_bounds",
    "karat_to_purity",
]
