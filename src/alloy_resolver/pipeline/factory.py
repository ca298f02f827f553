"""
Pipeline Factory - Wire Adapters from Configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from alloy_resolver.adapters.console_logger import ConsoleCalculationLog
from alloy_resolver.adapters.csv_calculation_log import CsvCalculationLog
from alloy_resolver.adapters.memory import InMemoryCalculationLog, InMemorySettingsStore
from alloy_resolver.adapters.yaml_settings_store import YamlSettingsStore
from alloy_resolver.config.loader import ConfigLoader
from alloy_resolver.config.models import StorageConfig, ToolkitConfig
from alloy_resolver.pipeline.calculation_pipeline import (
    CalculationLogProtocol,
    CalculationPipeline,
    SettingsStoreProtocol,
)

logger = logging.getLogger(__name__)


def create_pipeline(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    config: Optional[ToolkitConfig] = None,
    base_path: Optional[Path] = None,
) -> CalculationPipeline:
    """
    Build a CalculationPipeline with the adapters named in configuration.

    Args:
        config_path: YAML config file (ignored when ``config`` is given)
        profile: Optional profile overlay
        config: Already-loaded configuration
        base_path: Base for relative config, profile and storage paths

    Returns:
        Ready-to-use pipeline
    """
    base = base_path or Path(".")
    if config is None:
        loader = ConfigLoader(base_path=base)
        config = (
            loader.load(config_path, profile)
            if config_path is not None
            else loader.load_from_dict({})
        )

    logging.getLogger("alloy_resolver").setLevel(config.global_settings.log_level)

    return CalculationPipeline(
        settings_store=_settings_store(config.storage, base),
        calculation_log=_calculation_log(config.storage, base),
        config=config,
    )


def _settings_store(storage: StorageConfig, base: Path) -> SettingsStoreProtocol:
    if storage.settings_backend == "memory":
        return InMemorySettingsStore()
    return YamlSettingsStore(_resolve(storage.settings_path, base))


def _calculation_log(storage: StorageConfig, base: Path) -> CalculationLogProtocol:
    if storage.log_backend == "memory":
        return InMemoryCalculationLog()
    if storage.log_backend == "console":
        return ConsoleCalculationLog()
    return CsvCalculationLog(_resolve(storage.log_path, base))


def _resolve(path: str, base: Path) -> Path:
    p = Path(path)
    return p if p.is_absolute() else base / p
