"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for
the pipeline's external dependencies. High-level modules depend on these
abstractions, not on concrete implementations.

Protocols:
    - SettingsStore: Price per gram and metal catalog persistence
    - CalculationLog: Append-only record of past calculations

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
    - All methods have clear contracts in docstrings
"""

from alloy_resolver.interfaces.calculation_log import CalculationLog
from alloy_resolver.interfaces.settings_store import SettingsStore

__all__ = ["CalculationLog", "SettingsStore"]
