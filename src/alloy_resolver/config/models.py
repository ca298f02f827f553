"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator


class GlobalConfig(BaseModel):
    """Global configuration settings."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept level names in any case, e.g. "debug"."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class StorageConfig(BaseModel):
    """Where the price, catalog and calculation log are kept."""

    settings_backend: Literal["yaml", "memory"] = "yaml"
    settings_path: str = Field(default="gold_settings.yaml", min_length=1)
    log_backend: Literal["csv", "memory", "console"] = "csv"
    log_path: str = Field(default="calculation_log.csv", min_length=1)


class MetalConfig(BaseModel):
    """A metal declared in configuration."""

    name: str = Field(..., min_length=1)
    density: float = Field(..., gt=0)


class CatalogConfig(BaseModel):
    """Configuration for the metal catalog."""

    include_defaults: bool = True
    metals: List[MetalConfig] = Field(default_factory=list)


class ReportingConfig(BaseModel):
    """Configuration for logged calculation records."""

    decimals: int = Field(default=4, ge=0, le=12)


class ToolkitConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    global_settings: GlobalConfig = Field(
        default_factory=GlobalConfig,
        alias="global",
    )
    storage: StorageConfig = Field(default_factory=StorageConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    reporting: ReportingConfig = Field(default_factory=ReportingConfig)

    model_config = {"populate_by_name": True}
