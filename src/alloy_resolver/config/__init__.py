"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Alloy Resolver:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - ToolkitConfig: Root configuration object
    - GlobalConfig: Global settings (log level, default unit)
    - StorageConfig: Settings store and calculation log backends
    - CatalogConfig: Extra metals for the catalog
    - ReportingConfig: Rounding of logged records
"""

from alloy_resolver.config.loader import ConfigLoader, load_config
from alloy_resolver.config.models import (
    CatalogConfig,
    GlobalConfig,
    MetalConfig,
    ReportingConfig,
    StorageConfig,
    ToolkitConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "CatalogConfig",
    "GlobalConfig",
    "MetalConfig",
    "ReportingConfig",
    "StorageConfig",
    "ToolkitConfig",
]
