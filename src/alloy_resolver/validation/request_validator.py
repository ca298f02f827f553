"""
Request Validator - Validate Calculation Requests.

Validates caller input before any conversion or calculation:
    - Numbers are finite
    - Masses, prices and stone weights have a usable sign
    - Karat targets satisfy the recipe preconditions
    - The impurity is in the metal catalog

Measurement readings themselves (weight in air vs. in water) are not
judged here: an inverted or non-positive reading is a first-class
"indeterminate" outcome of the resolver, not an input error.

Design Notes:
    - Fail-fast principle
    - Every problem is collected before raising once
    - Clear error messages naming the offending field
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from alloy_resolver.catalog.metal_catalog import MetalCatalog
from alloy_resolver.domain.entities import (
    AlloyRequest,
    PortfolioRequest,
    PriceUpdateRequest,
    PurityFromDensityRequest,
    PurityFromWeightRequest,
    RaiseKaratRequest,
)
from alloy_resolver.domain.value_objects import MAX_KARAT
from alloy_resolver.units.converter import carats_to_grams, to_grams

logger = logging.getLogger(__name__)

# (field, message)
FieldError = Tuple[str, str]


class ValidationError(Exception):
    """Raised when request validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List[FieldError]] = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
        self.errors = errors or []

    @property
    def fields(self) -> List[str]:
        return [f for f, _ in self.errors]


class RequestValidator:
    """
    Validates calculation requests before processing.

    Usage:
        validator = RequestValidator(catalog)
        validator.validate_alloy(AlloyRequest(gold_mass=10, target_karat=18,
                                              impurity="Copper"))
    """

    def __init__(self, catalog: Optional[MetalCatalog] = None) -> None:
        """
        Initialize request validator.

        Args:
            catalog: Catalog impurity names are checked against.
                     Defaults to the standard metals.
        """
        self.catalog = catalog if catalog is not None else MetalCatalog()

    def validate_purity_from_weight(self, request: PurityFromWeightRequest) -> None:
        errors: List[FieldError] = []
        errors += self._check_finite(
            weight_in_air=request.weight_in_air,
            weight_in_water=request.weight_in_water,
            stone_carats=request.stone_carats,
        )
        errors += self._check_stone(request.stone_carats)
        errors += self._check_impurity(request.impurity)
        self._raise_if_any("purity_from_weight", errors)

    def validate_purity_from_density(self, request: PurityFromDensityRequest) -> None:
        errors: List[FieldError] = []
        errors += self._check_finite(
            density=request.density,
            mass=request.mass,
            stone_carats=request.stone_carats,
        )
        if request.density < 0:
            errors.append(("density", f"density must be >= 0, got {request.density}"))
        if request.mass <= 0:
            errors.append(("mass", f"mass must be > 0, got {request.mass}"))
        else:
            stone_errors = self._check_stone(request.stone_carats)
            errors += stone_errors
            if not stone_errors:
                net = to_grams(request.mass, request.unit) - carats_to_grams(
                    request.stone_carats
                )
                if net <= 0:
                    errors.append(
                        ("stone_carats", "stone weight exceeds the item's total mass")
                    )
        errors += self._check_impurity(request.impurity)
        self._raise_if_any("purity_from_density", errors)

    def validate_alloy(self, request: AlloyRequest) -> None:
        errors: List[FieldError] = []
        errors += self._check_finite(
            gold_mass=request.gold_mass, target_karat=request.target_karat
        )
        if request.gold_mass <= 0:
            errors.append(("gold_mass", f"gold mass must be > 0, got {request.gold_mass}"))
        if not 0 < request.target_karat < MAX_KARAT:
            errors.append(
                (
                    "target_karat",
                    f"target karat must be between 0 and {MAX_KARAT:g} (exclusive), "
                    f"got {request.target_karat}",
                )
            )
        errors += self._check_impurity(request.impurity)
        self._raise_if_any("alloy", errors)

    def validate_raise_karat(self, request: RaiseKaratRequest) -> None:
        errors: List[FieldError] = []
        errors += self._check_finite(
            initial_mass=request.initial_mass,
            initial_karat=request.initial_karat,
            target_karat=request.target_karat,
        )
        if request.initial_mass <= 0:
            errors.append(
                ("initial_mass", f"initial mass must be > 0, got {request.initial_mass}")
            )
        if request.initial_karat < 0:
            errors.append(
                ("initial_karat", f"initial karat must be >= 0, got {request.initial_karat}")
            )
        if request.target_karat >= MAX_KARAT:
            errors.append(
                ("target_karat", f"target karat must be < {MAX_KARAT:g}, got {request.target_karat}")
            )
        if request.target_karat <= request.initial_karat:
            errors.append(
                ("target_karat", "target karat must be greater than initial karat")
            )
        self._raise_if_any("raise_karat", errors)

    def validate_price_update(self, request: PriceUpdateRequest) -> None:
        errors = self._check_finite(price=request.price)
        if request.price <= 0:
            errors.append(("price", f"price must be > 0, got {request.price}"))
        self._raise_if_any("update_price", errors)

    def validate_portfolio(self, request: PortfolioRequest) -> None:
        errors: List[FieldError] = []
        prices = {"projected_price": request.projected_price}
        if request.current_price is not None:
            prices["current_price"] = request.current_price
        errors += self._check_finite(**prices)
        if not request.holdings:
            errors.append(("holdings", "at least one holding is required"))
        for index, holding in enumerate(request.holdings):
            errors += self._check_finite(
                **{
                    f"holdings[{index}].mass_grams": holding.mass_grams,
                    f"holdings[{index}].karat": holding.karat,
                }
            )
        if request.projected_price <= 0:
            errors.append(
                ("projected_price", f"projected price must be > 0, got {request.projected_price}")
            )
        if request.current_price is not None and request.current_price <= 0:
            errors.append(
                ("current_price", f"current price must be > 0, got {request.current_price}")
            )
        self._raise_if_any("portfolio", errors)

    def _check_finite(self, **values: float) -> List[FieldError]:
        return [
            (name, f"{name} must be a finite number, got {value}")
            for name, value in values.items()
            if not math.isfinite(value)
        ]

    def _check_stone(self, stone_carats: float) -> List[FieldError]:
        if stone_carats < 0:
            return [("stone_carats", f"stone weight must be >= 0, got {stone_carats}")]
        return []

    def _check_impurity(self, name: str) -> List[FieldError]:
        if name not in self.catalog:
            available = ", ".join(self.catalog.names())
            return [("impurity", f"unknown metal {name!r}. Available: {available}")]
        return []

    def _raise_if_any(self, operation: str, errors: List[FieldError]) -> None:
        if not errors:
            logger.debug(f"{operation} request validated")
            return

        error_message = "; ".join(message for _, message in errors)
        logger.error(f"{operation} request validation failed: {error_message}")
        raise ValidationError(error_message, field=errors[0][0], errors=errors)
