"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from alloy_resolver.adapters.memory import InMemoryCalculationLog, InMemorySettingsStore
from alloy_resolver.catalog.metal_catalog import MetalCatalog
from alloy_resolver.config.models import ToolkitConfig
from alloy_resolver.domain.entities import Metal
from alloy_resolver.domain.value_objects import GOLD_DENSITY
from alloy_resolver.pipeline.calculation_pipeline import CalculationPipeline


def mass_fraction_gold(density: float, impurity_density: float) -> float:
    """
    Gold mass fraction via reciprocal densities.

    Alternate formulation of the volume-mixing rule, used to cross-check
    the resolver's volume route.
    """
    return (1.0 / density - 1.0 / impurity_density) / (
        1.0 / GOLD_DENSITY - 1.0 / impurity_density
    )


def mixture_density(gold_grams: float, other_grams: float, other_density: float) -> float:
    """Bulk density of a binary mixture under ideal volume additivity."""
    volume = gold_grams / GOLD_DENSITY + other_grams / other_density
    return (gold_grams + other_grams) / volume


@pytest.fixture
def copper() -> Metal:
    return Metal(name="Copper", density=8.96)


@pytest.fixture
def silver() -> Metal:
    return Metal(name="Silver", density=10.49)


@pytest.fixture
def platinum() -> Metal:
    return Metal(name="Platinum", density=21.45)


@pytest.fixture
def palladium() -> Metal:
    return Metal(name="Palladium", density=12.02)


@pytest.fixture
def catalog() -> MetalCatalog:
    """Catalog with the default metals."""
    return MetalCatalog()


@pytest.fixture
def settings_store() -> InMemorySettingsStore:
    """Settings store without a configured price."""
    return InMemorySettingsStore()


@pytest.fixture
def calculation_log() -> InMemoryCalculationLog:
    return InMemoryCalculationLog()


@pytest.fixture
def default_config() -> ToolkitConfig:
    return ToolkitConfig()


@pytest.fixture
def pipeline(
    settings_store: InMemorySettingsStore,
    calculation_log: InMemoryCalculationLog,
    default_config: ToolkitConfig,
) -> CalculationPipeline:
    """Pipeline over in-memory adapters."""
    return CalculationPipeline(
        settings_store=settings_store,
        calculation_log=calculation_log,
        config=default_config,
    )


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"
