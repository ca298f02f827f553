"""
Integration Tests for CalculationPipeline.

Tests cover:
    - Full validate -> convert -> resolve -> log workflow
    - Unit conversion and gemstone deduction ahead of the resolver
    - Price and catalog persistence through the settings store
"""

from __future__ import annotations

import pytest

from alloy_resolver.adapters.memory import InMemoryCalculationLog, InMemorySettingsStore
from alloy_resolver.config.models import CatalogConfig, MetalConfig, ToolkitConfig
from alloy_resolver.domain.entities import (
    AlloyRequest,
    Holding,
    Metal,
    PortfolioRequest,
    PriceUpdateRequest,
    PurityFromDensityRequest,
    PurityFromWeightRequest,
    PurityStatus,
    RaiseKaratRequest,
)
from alloy_resolver.domain.value_objects import MassUnit
from alloy_resolver.pipeline.calculation_pipeline import CalculationPipeline
from alloy_resolver.validation.request_validator import ValidationError

REGRESSION_PURITY = 98.5434


class TestPurityOperations:
    """Integration tests for purity requests."""

    def test_purity_from_weight(
        self,
        pipeline: CalculationPipeline,
        calculation_log: InMemoryCalculationLog,
    ) -> None:
        """
        SCENARIO: 19.0g in air, 18.0g in water, copper
        EXPECTED: Regression purity and one CONCLUSIVE log record
        """
        # Act
        result = pipeline.purity_from_weight(
            PurityFromWeightRequest(weight_in_air=19.0, weight_in_water=18.0, impurity="copper")
        )

        # Assert
        assert result.purity_percent == pytest.approx(REGRESSION_PURITY, abs=1e-4)
        records = calculation_log.read_all()
        assert len(records) == 1
        assert records[0].operation == "purity_from_weight"
        assert records[0].status == "CONCLUSIVE"
        assert records[0].outputs["purity_percent"] == round(result.purity_percent, 4)
        assert records[0].outputs["market_value"] is None

    def test_weights_in_troy_ounces(self, pipeline: CalculationPipeline) -> None:
        """
        SCENARIO: Same 19:18 air/water ratio, entered in troy ounces
        EXPECTED: Same density and purity
        """
        result = pipeline.purity_from_weight(
            PurityFromWeightRequest(
                weight_in_air=1.0,
                weight_in_water=18.0 / 19.0,
                impurity="Copper",
                unit=MassUnit.TROY_OUNCE,
            )
        )

        assert result.density == pytest.approx(19.0)
        assert result.purity_percent == pytest.approx(REGRESSION_PURITY, abs=1e-4)

    def test_stone_deducted_from_both_readings(self, pipeline: CalculationPipeline) -> None:
        """
        SCENARIO: 20.0g / 19.0g readings with a 5 carat (1g) stone
        EXPECTED: Resolved as 19.0g / 18.0g
        """
        result = pipeline.purity_from_weight(
            PurityFromWeightRequest(
                weight_in_air=20.0,
                weight_in_water=19.0,
                impurity="Copper",
                stone_carats=5.0,
            )
        )

        assert result.density == pytest.approx(19.0)
        assert result.pure_gold_mass_grams == pytest.approx(18.7232, abs=1e-4)

    def test_inverted_weighing_is_logged_inconclusive(
        self,
        pipeline: CalculationPipeline,
        calculation_log: InMemoryCalculationLog,
    ) -> None:
        """
        SCENARIO: Heavier in water than in air
        EXPECTED: INCONCLUSIVE result, still logged
        """
        result = pipeline.purity_from_weight(
            PurityFromWeightRequest(weight_in_air=10.0, weight_in_water=12.0, impurity="Copper")
        )

        assert result.status == PurityStatus.INCONCLUSIVE
        assert result.density == 0.0
        assert calculation_log.read_all()[0].status == "INCONCLUSIVE"

    def test_purity_from_density(self, pipeline: CalculationPipeline) -> None:
        result = pipeline.purity_from_density(
            PurityFromDensityRequest(density=19.0, mass=19.0, impurity="Copper")
        )

        assert result.purity_percent == pytest.approx(REGRESSION_PURITY, abs=1e-4)

    def test_unknown_impurity_not_logged(
        self,
        pipeline: CalculationPipeline,
        calculation_log: InMemoryCalculationLog,
    ) -> None:
        with pytest.raises(ValidationError):
            pipeline.purity_from_weight(
                PurityFromWeightRequest(weight_in_air=19.0, weight_in_water=18.0, impurity="Zinc")
            )

        assert calculation_log.read_all() == []


class TestPricing:
    """Integration tests for price handling."""

    def test_update_price_per_troy_ounce(
        self,
        pipeline: CalculationPipeline,
        settings_store: InMemorySettingsStore,
    ) -> None:
        """
        SCENARIO: Price entered per troy ounce, then a purity calculation
        EXPECTED: Stored per gram and applied to the pure gold mass
        """
        # Act
        per_gram = pipeline.update_price(
            PriceUpdateRequest(price=3110.34768, unit=MassUnit.TROY_OUNCE)
        )
        result = pipeline.purity_from_density(
            PurityFromDensityRequest(density=19.32, mass=10.0, impurity="Copper")
        )

        # Assert
        assert per_gram == pytest.approx(100.0)
        assert settings_store.load_price() == pytest.approx(100.0)
        assert pipeline.current_price() == pytest.approx(100.0)
        assert result.market_value == pytest.approx(1000.0)

    def test_non_positive_price_rejected(self, pipeline: CalculationPipeline) -> None:
        with pytest.raises(ValidationError):
            pipeline.update_price(PriceUpdateRequest(price=0.0))

        assert pipeline.current_price() is None

    def test_nan_current_price_rejected(
        self,
        pipeline: CalculationPipeline,
        calculation_log: InMemoryCalculationLog,
    ) -> None:
        """
        SCENARIO: Portfolio with a NaN current price
        EXPECTED: ValidationError, nothing logged
        """
        with pytest.raises(ValidationError) as exc_info:
            pipeline.value_portfolio(
                PortfolioRequest(
                    holdings=[Holding(mass_grams=10.0, karat=18.0)],
                    projected_price=70.0,
                    current_price=float("nan"),
                )
            )

        assert exc_info.value.field == "current_price"
        assert calculation_log.read_all() == []

    def test_portfolio(self, pipeline: CalculationPipeline) -> None:
        """
        SCENARIO: Portfolio priced per troy ounce
        EXPECTED: Prices converted per gram before valuation
        """
        valuation = pipeline.value_portfolio(
            PortfolioRequest(
                holdings=[Holding(mass_grams=31.1034768, karat=24.0)],
                projected_price=2400.0,
                current_price=2000.0,
                price_unit=MassUnit.TROY_OUNCE,
            )
        )

        assert valuation.projected_value == pytest.approx(2400.0)
        assert valuation.current_value == pytest.approx(2000.0)
        assert valuation.percent_change == pytest.approx(20.0)


class TestAlloying:
    """Integration tests for alloying requests."""

    def test_alloy_in_tola(self, pipeline: CalculationPipeline) -> None:
        """
        SCENARIO: 1 tola of pure gold to 18K with silver
        EXPECTED: Gold mass converted to 11.6638g before the recipe
        """
        recipe = pipeline.alloy(
            AlloyRequest(gold_mass=1.0, target_karat=18.0, impurity="Silver", unit=MassUnit.TOLA)
        )

        assert recipe.starting_mass_grams == pytest.approx(11.6638)
        assert recipe.impurity_mass_grams == pytest.approx(11.6638 / 3.0)
        assert recipe.added_metal.name == "Silver"

    def test_alloy_to_24_rejected(
        self,
        pipeline: CalculationPipeline,
        calculation_log: InMemoryCalculationLog,
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            pipeline.alloy(AlloyRequest(gold_mass=10.0, target_karat=24.0, impurity="Copper"))

        assert exc_info.value.field == "target_karat"
        assert calculation_log.read_all() == []

    def test_raise_karat(self, pipeline: CalculationPipeline) -> None:
        recipe = pipeline.raise_karat(
            RaiseKaratRequest(initial_mass=100.0, initial_karat=14.0, target_karat=18.0)
        )

        assert recipe.added_gold_mass_grams == pytest.approx(200.0 / 3.0)
        assert [r.operation for r in pipeline.history()] == ["raise_karat"]


class TestCatalog:
    """Integration tests for catalog configuration and persistence."""

    def test_added_metal_persists_across_pipelines(
        self,
        settings_store: InMemorySettingsStore,
    ) -> None:
        """
        SCENARIO: Metal added through one pipeline
        EXPECTED: A new pipeline over the same store can use it
        """
        # Arrange
        first = CalculationPipeline(settings_store, InMemoryCalculationLog())

        # Act
        first.add_metal(Metal(name="Zinc", density=7.14))
        second = CalculationPipeline(settings_store, InMemoryCalculationLog())

        # Assert
        assert "Zinc" in second.catalog
        recipe = second.alloy(AlloyRequest(gold_mass=10.0, target_karat=12.0, impurity="zinc"))
        assert recipe.added_metal.density == 7.14

    def test_remove_metal(self, pipeline: CalculationPipeline) -> None:
        pipeline.remove_metal("Palladium")

        with pytest.raises(ValidationError):
            pipeline.alloy(AlloyRequest(gold_mass=10.0, target_karat=12.0, impurity="Palladium"))

    def test_configured_catalog_without_defaults(self) -> None:
        config = ToolkitConfig(
            catalog=CatalogConfig(
                include_defaults=False,
                metals=[MetalConfig(name="Nickel", density=8.908)],
            )
        )

        pipeline = CalculationPipeline(
            InMemorySettingsStore(), InMemoryCalculationLog(), config=config
        )

        assert pipeline.catalog.names() == ["Nickel"]

    def test_karat_reference(self, pipeline: CalculationPipeline) -> None:
        assert pipeline.karat_reference()[0].karat == 24
