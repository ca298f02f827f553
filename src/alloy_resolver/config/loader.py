"""
Configuration Loader - YAML Loading with Validation.

Loads the toolkit configuration from YAML, optionally overlays a named
profile and ``ALLOY_RESOLVER_*`` environment overrides, and validates the
result with the Pydantic models.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from alloy_resolver.config.models import ToolkitConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "ALLOY_RESOLVER_"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "LOG_LEVEL": ("global", "log_level"),
    "SETTINGS_PATH": ("storage", "settings_path"),
    "LOG_PATH": ("storage", "log_path"),
}


class ConfigLoader:
    """Loads and validates toolkit configuration."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config and profile paths
            environ: Environment to read overrides from (default: os.environ)
        """
        self._base_path = base_path or Path(".")
        self._environ = os.environ if environ is None else environ

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> ToolkitConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name from config/profiles/

        Returns:
            Validated ToolkitConfig object

        Raises:
            FileNotFoundError: If the config file or profile doesn't exist
            ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._load_yaml(path)

        if profile:
            config_dict = self._merge_configs(config_dict, self._load_profile(profile))

        return self.load_from_dict(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ToolkitConfig:
        """
        Validate a configuration dictionary after applying env overrides.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated ToolkitConfig object
        """
        merged = self._merge_configs(config_dict, self._env_overrides())
        config = ToolkitConfig.model_validate(merged)
        logger.debug(
            f"Loaded config v{config.version}: "
            f"settings={config.storage.settings_backend}, "
            f"log={config.storage.log_backend}"
        )
        return config

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        logger.info(f"Applying config profile {profile}")
        return self._load_yaml(profile_path)

    def _env_overrides(self) -> Dict[str, Any]:
        """Collect ALLOY_RESOLVER_* overrides into a nested dict."""
        overrides: Dict[str, Any] = {}
        for suffix, (section, key) in ENV_OVERRIDES.items():
            value = self._environ.get(ENV_PREFIX + suffix)
            if value:
                overrides.setdefault(section, {})[key] = value
        return overrides

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> ToolkitConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths

    Returns:
        Validated ToolkitConfig object
    """
    return ConfigLoader(base_path=base_path).load(config_path, profile)
