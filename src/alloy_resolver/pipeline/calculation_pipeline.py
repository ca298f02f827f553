"""
Calculation Pipeline - Main Orchestrator.

The CalculationPipeline is the request/response boundary around the pure
resolver. For every operation it validates the request, converts units to
grams, excludes gemstone mass, looks up the impurity, calls the resolver
and appends one record to the calculation log.

The price and the catalog live in injected collaborators and are passed
to the resolver as plain values; the resolver never reads them itself.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol

from alloy_resolver.catalog.metal_catalog import MetalCatalog
from alloy_resolver.config.models import ToolkitConfig
from alloy_resolver.domain.entities import (
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
    RaiseKaratRequest,
)
from alloy_resolver.domain.value_objects import KARAT_REFERENCE, KaratGrade
from alloy_resolver.resolver import (
    measure_item,
    raise_karat,
    resolve_purity,
    synthesize_alloy,
    value_portfolio,
)
from alloy_resolver.units.converter import carats_to_grams, price_per_gram, to_grams
from alloy_resolver.validation.request_validator import RequestValidator

logger = logging.getLogger(__name__)


class SettingsStoreProtocol(Protocol):
    """Protocol for settings stores."""

    def load_price(self) -> Optional[float]:
        ...

    def save_price(self, price_per_gram: float) -> None:
        ...

    def load_metals(self) -> List[Metal]:
        ...

    def save_metals(self, metals: List[Metal]) -> None:
        ...


class CalculationLogProtocol(Protocol):
    """Protocol for calculation logs."""

    def append(self, record: CalculationRecord) -> None:
        ...

    def read_all(self) -> List[CalculationRecord]:
        ...


class CalculationPipeline:
    """Main orchestrator for calculation requests."""

    def __init__(
        self,
        settings_store: SettingsStoreProtocol,
        calculation_log: CalculationLogProtocol,
        config: Optional[ToolkitConfig] = None,
        catalog: Optional[MetalCatalog] = None,
        request_validator: Optional[RequestValidator] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            settings_store: Source and sink of price and saved metals
            calculation_log: Sink for calculation records
            config: Toolkit configuration (default: ToolkitConfig())
            catalog: Metal catalog (default: built from config and store)
            request_validator: Validator (default: one bound to the catalog)
        """
        self.settings_store = settings_store
        self.calculation_log = calculation_log
        self.config = config or ToolkitConfig()
        self.catalog = catalog if catalog is not None else self._build_catalog()
        self.request_validator = request_validator or RequestValidator(self.catalog)

    # ------------------------------------------------------------------
    # Purity
    # ------------------------------------------------------------------

    def purity_from_weight(self, request: PurityFromWeightRequest) -> PurityResult:
        """
        Resolve purity from a hydrostatic weighing.

        Gemstone mass is deducted identically from the air and water
        readings before the density is derived.

        Raises:
            ValidationError: If the request is invalid
        """
        self.request_validator.validate_purity_from_weight(request)
        impurity = self.catalog.get(request.impurity)

        stone_grams = carats_to_grams(request.stone_carats)
        air = to_grams(request.weight_in_air, request.unit) - stone_grams
        water = to_grams(request.weight_in_water, request.unit) - stone_grams

        item = measure_item(air, water, impurity)
        result = resolve_purity(item, self.current_price())

        self._record(
            "purity_from_weight",
            result.status.value,
            inputs={
                "weight_in_air_grams": air,
                "weight_in_water_grams": water,
                "stone_grams": stone_grams,
                "impurity": impurity.name,
            },
            outputs=self._purity_outputs(result),
        )
        return result

    def purity_from_density(self, request: PurityFromDensityRequest) -> PurityResult:
        """
        Resolve purity from a known density and mass.

        Raises:
            ValidationError: If the request is invalid
        """
        self.request_validator.validate_purity_from_density(request)
        impurity = self.catalog.get(request.impurity)

        stone_grams = carats_to_grams(request.stone_carats)
        mass = to_grams(request.mass, request.unit) - stone_grams

        item = MeasuredItem(
            total_mass_grams=mass,
            density=request.density,
            impurity=impurity,
        )
        result = resolve_purity(item, self.current_price())

        self._record(
            "purity_from_density",
            result.status.value,
            inputs={
                "density": request.density,
                "mass_grams": mass,
                "stone_grams": stone_grams,
                "impurity": impurity.name,
            },
            outputs=self._purity_outputs(result),
        )
        return result

    # ------------------------------------------------------------------
    # Alloying
    # ------------------------------------------------------------------

    def alloy(self, request: AlloyRequest) -> AlloyRecipe:
        """
        Recipe for diluting pure gold to a target karat.

        Raises:
            ValidationError: If the request is invalid
        """
        self.request_validator.validate_alloy(request)
        impurity = self.catalog.get(request.impurity)
        gold_mass = to_grams(request.gold_mass, request.unit)

        recipe = synthesize_alloy(gold_mass, request.target_karat, impurity)

        self._record(
            "alloy",
            "OK",
            inputs={
                "gold_mass_grams": gold_mass,
                "target_karat": request.target_karat,
                "impurity": impurity.name,
            },
            outputs=self._recipe_outputs(recipe),
        )
        return recipe

    def raise_karat(self, request: RaiseKaratRequest) -> AlloyRecipe:
        """
        Recipe for raising an alloy's karat with pure gold.

        Raises:
            ValidationError: If the request is invalid
        """
        self.request_validator.validate_raise_karat(request)
        initial_mass = to_grams(request.initial_mass, request.unit)

        recipe = raise_karat(initial_mass, request.initial_karat, request.target_karat)

        self._record(
            "raise_karat",
            "OK",
            inputs={
                "initial_mass_grams": initial_mass,
                "initial_karat": request.initial_karat,
                "target_karat": request.target_karat,
            },
            outputs=self._recipe_outputs(recipe),
        )
        return recipe

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def current_price(self) -> Optional[float]:
        """Saved gold price per gram, None when not configured."""
        return self.settings_store.load_price()

    def update_price(self, request: PriceUpdateRequest) -> float:
        """
        Save a new gold price.

        Returns:
            The saved price per gram

        Raises:
            ValidationError: If the price is not positive
        """
        self.request_validator.validate_price_update(request)
        per_gram = price_per_gram(request.price, request.unit)
        self.settings_store.save_price(per_gram)
        logger.info(f"Gold price updated to {per_gram:.4f}/g")

        self._record(
            "update_price",
            "OK",
            inputs={"price": request.price, "unit": request.unit.value},
            outputs={"price_per_gram": per_gram},
        )
        return per_gram

    def value_portfolio(self, request: PortfolioRequest) -> PortfolioValuation:
        """
        Value holdings at a projected price, compared with a current one.

        Raises:
            ValidationError: If the request is invalid
        """
        self.request_validator.validate_portfolio(request)
        projected = price_per_gram(request.projected_price, request.price_unit)
        current = (
            price_per_gram(request.current_price, request.price_unit)
            if request.current_price is not None
            else None
        )

        valuation = value_portfolio(list(request.holdings), projected, current)

        self._record(
            "value_portfolio",
            "OK",
            inputs={
                "holdings": [self._holding_inputs(h) for h in request.holdings],
                "projected_price_per_gram": projected,
                "current_price_per_gram": current,
            },
            outputs=valuation.model_dump(
                include={"pure_gold_mass_grams", "projected_value",
                         "current_value", "percent_change"}
            ),
        )
        return valuation

    # ------------------------------------------------------------------
    # Catalog and reference data
    # ------------------------------------------------------------------

    def add_metal(self, metal: Metal) -> None:
        """Add or replace a catalog metal and persist the catalog."""
        self.catalog.add(metal)
        self.settings_store.save_metals(self.catalog.metals())

    def remove_metal(self, name: str) -> Metal:
        """Remove a catalog metal and persist the catalog."""
        removed = self.catalog.remove(name)
        self.settings_store.save_metals(self.catalog.metals())
        return removed

    def karat_reference(self) -> List[KaratGrade]:
        return list(KARAT_REFERENCE)

    def history(self) -> List[CalculationRecord]:
        """Every logged calculation, oldest first."""
        return self.calculation_log.read_all()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _build_catalog(self) -> MetalCatalog:
        """Defaults (optional), then configured metals, then saved metals."""
        catalog = MetalCatalog() if self.config.catalog.include_defaults else MetalCatalog([])
        for metal_config in self.config.catalog.metals:
            catalog.add(Metal(name=metal_config.name, density=metal_config.density))
        for metal in self.settings_store.load_metals():
            catalog.add(metal)
        logger.debug(f"Catalog ready with {len(catalog)} metals: {catalog.names()}")
        return catalog

    def _record(
        self,
        operation: str,
        status: str,
        inputs: Dict[str, Any],
        outputs: Dict[str, Any],
    ) -> None:
        record = CalculationRecord(
            operation=operation,
            status=status,
            inputs=self._round(inputs),
            outputs=self._round(outputs),
        )
        self.calculation_log.append(record)
        logger.info(f"{operation} completed with status {status}")

    def _round(self, value: Any) -> Any:
        decimals = self.config.reporting.decimals
        if isinstance(value, float):
            return round(value, decimals)
        if isinstance(value, dict):
            return {k: self._round(v) for k, v in value.items()}
        if isinstance(value, list):
            return [self._round(v) for v in value]
        return value

    @staticmethod
    def _purity_outputs(result: PurityResult) -> Dict[str, Any]:
        return {
            "density": result.density,
            "purity_percent": result.purity_percent,
            "karats": result.karats,
            "pure_gold_mass_grams": result.pure_gold_mass_grams,
            "market_value": result.market_value,
        }

    @staticmethod
    def _recipe_outputs(recipe: AlloyRecipe) -> Dict[str, Any]:
        return {
            "kind": recipe.kind.value,
            "added_metal": recipe.added_metal.name,
            "added_mass_grams": recipe.added_mass_grams,
            "resulting_total_mass_grams": recipe.resulting_total_mass_grams,
        }

    @staticmethod
    def _holding_inputs(holding: Holding) -> Dict[str, Any]:
        return {"mass_grams": holding.mass_grams, "karat": holding.karat}
