"""
Core Domain Entities.

This module defines the values the resolver operates on: the metals that
make up an alloy, the measured specimen, and the derived purity results
and alloying recipes. All of them are built fresh for each calculation
and discarded afterwards.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from alloy_resolver.domain.value_objects import (
    GOLD_DENSITY,
    MassUnit,
    density_bounds,
)


class Metal(BaseModel):
    """A named metal with its density."""

    name: str = Field(..., min_length=1, description="Metal name")
    density: float = Field(..., gt=0, description="Density in g/cm^3")

    model_config = {"frozen": True}

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Metal):
            return NotImplemented
        return self.name == other.name


GOLD = Metal(name="Gold", density=GOLD_DENSITY)


class MeasuredItem(BaseModel):
    """
    One physical specimen under evaluation.

    ``total_mass_grams`` is metal only; any gemstone mass must already be
    excluded. A density of 0 means "not yet determined".
    """

    total_mass_grams: float = Field(default=0.0, ge=0)
    density: float = Field(default=0.0, ge=0)
    impurity: Optional[Metal] = None

    model_config = {"frozen": True}

    def is_density_valid(self) -> bool:
        """Check the density lies inside the gold/impurity mixing interval."""
        if self.density <= 0 or self.impurity is None:
            return False
        lower, upper = density_bounds(self.impurity.density)
        return lower <= self.density <= upper


class PurityStatus(str, Enum):
    """Outcome of a purity resolution."""

    CONCLUSIVE = "CONCLUSIVE"
    INCONCLUSIVE = "INCONCLUSIVE"


class PurityResult(BaseModel):
    """Purity derived from a measured item."""

    status: PurityStatus
    density: float
    purity_percent: float = 0.0
    karats: float = 0.0
    pure_gold_mass_grams: float = 0.0
    market_value: Optional[float] = Field(
        default=None, description="None when no price is configured"
    )
    impurity: Optional[Metal] = None

    model_config = {"frozen": True}

    @property
    def is_conclusive(self) -> bool:
        return self.status == PurityStatus.CONCLUSIVE

    @property
    def price_available(self) -> bool:
        return self.market_value is not None


class RecipeKind(str, Enum):
    """Direction of an alloying recipe."""

    DILUTION = "DILUTION"  # pure gold + impurity -> lower karat
    ENRICHMENT = "ENRICHMENT"  # alloy + pure gold -> higher karat


class AlloyRecipe(BaseModel):
    """Amount of metal to add to move between two karat levels."""

    kind: RecipeKind
    starting_mass_grams: float
    starting_karat: float
    target_karat: float
    added_metal: Metal
    added_mass_grams: float
    resulting_total_mass_grams: float

    model_config = {"frozen": True}

    @property
    def impurity_mass_grams(self) -> float:
        """Impurity to add (dilution recipes only)."""
        return self.added_mass_grams if self.kind == RecipeKind.DILUTION else 0.0

    @property
    def added_gold_mass_grams(self) -> float:
        """Pure gold to add (enrichment recipes only)."""
        return self.added_mass_grams if self.kind == RecipeKind.ENRICHMENT else 0.0


class Holding(BaseModel):
    """One gold holding in a portfolio."""

    mass_grams: float = Field(..., gt=0)
    karat: float = Field(..., ge=0, le=24)
    label: Optional[str] = None

    model_config = {"frozen": True}


class PortfolioValuation(BaseModel):
    """Aggregate value of several holdings at a projected price."""

    holdings_count: int
    pure_gold_mass_grams: float
    projected_price_per_gram: float
    projected_value: float
    current_price_per_gram: Optional[float] = None
    current_value: Optional[float] = None
    percent_change: Optional[float] = None

    model_config = {"frozen": True}


# =============================================================================
# Requests (raw caller input, validated before any calculation)
# =============================================================================


class PurityFromWeightRequest(BaseModel):
    """Hydrostatic weighing of a specimen in air and in water."""

    weight_in_air: float
    weight_in_water: float
    impurity: str = Field(..., description="Catalog name of the second metal")
    unit: MassUnit = MassUnit.GRAM
    stone_carats: float = Field(default=0.0, description="Gemstone weight to exclude")

    model_config = {"frozen": True}


class PurityFromDensityRequest(BaseModel):
    """Specimen with a separately known density and mass."""

    density: float
    mass: float
    impurity: str
    unit: MassUnit = MassUnit.GRAM
    stone_carats: float = 0.0

    model_config = {"frozen": True}


class AlloyRequest(BaseModel):
    """Dilute pure gold down to a target karat."""

    gold_mass: float
    target_karat: float
    impurity: str
    unit: MassUnit = MassUnit.GRAM

    model_config = {"frozen": True}


class RaiseKaratRequest(BaseModel):
    """Raise an alloy's karat by adding pure gold."""

    initial_mass: float
    initial_karat: float
    target_karat: float
    unit: MassUnit = MassUnit.GRAM

    model_config = {"frozen": True}


class PriceUpdateRequest(BaseModel):
    """New gold price, quoted per ``unit``."""

    price: float
    unit: MassUnit = MassUnit.GRAM

    model_config = {"frozen": True}


class PortfolioRequest(BaseModel):
    """Several holdings valued at a projected (and optionally current) price."""

    holdings: List[Holding] = Field(default_factory=list)
    projected_price: float
    current_price: Optional[float] = None
    price_unit: MassUnit = MassUnit.GRAM

    model_config = {"frozen": True}


class CalculationRecord(BaseModel):
    """Durable projection of one calculation for the calculation log."""

    timestamp: datetime = Field(default_factory=datetime.now)
    operation: str
    status: str
    inputs: Dict[str, Any] = Field(default_factory=dict)
    outputs: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}
