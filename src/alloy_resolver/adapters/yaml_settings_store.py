"""
YAML Settings Store.

Persists the gold price and the metal catalog in a single YAML document:

    price_per_gram: 65.4
    metals:
      - name: Copper
        density: 8.96

A missing file is an empty store.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from alloy_resolver.domain.entities import Metal

logger = logging.getLogger(__name__)


class YamlSettingsStore:
    """Settings store backed by one YAML file."""

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Initialize store.

        Args:
            path: Settings file; created on first save
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_price(self) -> Optional[float]:
        """Load the saved price; None when absent or not positive."""
        price = self._read().get("price_per_gram")
        if price is None:
            return None
        price = float(price)
        if price <= 0:
            logger.warning(f"Ignoring non-positive saved price {price} in {self._path}")
            return None
        return price

    def save_price(self, price_per_gram: float) -> None:
        document = self._read()
        document["price_per_gram"] = float(price_per_gram)
        self._write(document)
        logger.debug(f"Saved price {price_per_gram}/g to {self._path}")

    def load_metals(self) -> List[Metal]:
        entries = self._read().get("metals") or []
        return [Metal.model_validate(entry) for entry in entries]

    def save_metals(self, metals: List[Metal]) -> None:
        document = self._read()
        document["metals"] = [m.model_dump() for m in metals]
        self._write(document)
        logger.debug(f"Saved {len(metals)} metals to {self._path}")

    def _read(self) -> Dict[str, Any]:
        """Load YAML file."""
        if not self._path.exists():
            return {}
        with open(self._path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _write(self, document: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            yaml.safe_dump(document, f, sort_keys=False)
