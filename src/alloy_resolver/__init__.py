"""
Alloy Resolver - Gold Alloy Composition Calculator.

Infers the composition of a gold alloy from physical measurements and
derives related quantities: purity, karat rating, alloying and karat
raising recipes, and market value.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Pure resolver core with no I/O or shared state
    - Dependency Injection for testability
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Value objects (Metal, MeasuredItem, PurityResult, AlloyRecipe)
    - resolver: Pure density, purity, alloying and valuation functions
    - units: Mass unit conversion to grams
    - catalog: Named metals used as the second alloy component
    - interfaces: Protocols for settings storage and calculation logging
    - adapters: YAML, CSV, in-memory and console implementations
    - validation: Request validation before any calculation
    - pipeline: Orchestration of validate -> convert -> resolve -> log
    - config: Configuration models and loaders

Example:
    >>> from alloy_resolver.pipeline import create_pipeline
    >>> pipeline = create_pipeline(config_path="config/default.yaml")
    >>> result = pipeline.purity_from_weight(
    ...     PurityFromWeightRequest(weight_in_air=19.0, weight_in_water=18.0,
    ...                             impurity="Copper")
    ... )
    >>> print(f"{result.karats:.2f}K")

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Alloy Resolver.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import alloy_resolver
        >>> alloy_resolver.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("alloy_resolver").setLevel(level)
