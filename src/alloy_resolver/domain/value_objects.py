"""
Value Objects for Domain Layer.

Physical constants, mass units and the karat reference table. These have
no identity and never change during a run.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field, computed_field


# =============================================================================
# Physical constants
# =============================================================================

# Reference density of pure gold in g/cm^3
GOLD_DENSITY = 19.32

# Measurement noise absorbed by the validity gate and the pure-gold check
DENSITY_TOLERANCE = 0.05

# Karat scale: 24K is pure gold
MAX_KARAT = 24.0

KARATS_PER_PERCENT = MAX_KARAT / 100.0

# One metric carat of gemstone in grams
GRAMS_PER_CARAT = 0.2


class MassUnit(str, Enum):
    """Mass units accepted from callers."""

    GRAM = "GRAM"
    TROY_OUNCE = "TROY_OUNCE"
    OUNCE = "OUNCE"  # avoirdupois
    PENNYWEIGHT = "PENNYWEIGHT"
    TOLA = "TOLA"


def density_bounds(impurity_density: float) -> Tuple[float, float]:
    """
    Density interval a binary gold alloy can occupy.

    The impurity may be lighter (copper, silver) or heavier (platinum)
    than gold, so both ends come from min/max rather than a fixed order.

    Returns:
        Tuple of (lower, upper) including the tolerance
    """
    lower = min(GOLD_DENSITY, impurity_density) - DENSITY_TOLERANCE
    upper = max(GOLD_DENSITY, impurity_density) + DENSITY_TOLERANCE
    return lower, upper


class KaratGrade(BaseModel):
    """One row of the karat reference table."""

    karat: int = Field(ge=0, le=24)
    description: str

    model_config = {"frozen": True}

    @computed_field
    @property
    def purity_percent(self) -> float:
        return self.karat / MAX_KARAT * 100.0

    @computed_field
    @property
    def fineness(self) -> int:
        """Parts per thousand, as hallmarked."""
        return round(self.karat / MAX_KARAT * 1000)


KARAT_REFERENCE: List[KaratGrade] = [
    KaratGrade(karat=24, description="Pure gold, too soft for most jewelry"),
    KaratGrade(karat=22, description="Traditional jewelry in South Asia and the Middle East"),
    KaratGrade(karat=21, description="Common in Middle Eastern jewelry"),
    KaratGrade(karat=18, description="Fine jewelry, good balance of purity and hardness"),
    KaratGrade(karat=14, description="Most popular grade for everyday jewelry"),
    KaratGrade(karat=10, description="Lowest grade sold as gold in the US"),
    KaratGrade(karat=9, description="Lowest grade hallmarked as gold in the UK"),
]

KARAT_BY_VALUE: Dict[int, KaratGrade] = {g.karat: g for g in KARAT_REFERENCE}


def karat_to_purity(karat: float) -> float:
    """Convert a karat rating to a purity fraction (0.0 - 1.0)."""
    return karat / MAX_KARAT
