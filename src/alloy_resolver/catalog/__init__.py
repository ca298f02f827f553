"""
Catalog Package - Metals Available as Alloy Impurities.
"""

from alloy_resolver.catalog.metal_catalog import (
    DEFAULT_METALS,
    MetalCatalog,
    UnknownMetalError,
)

__all__ = ["DEFAULT_METALS", "MetalCatalog", "UnknownMetalError"]
