"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package. Following the
Hexagonal Architecture (Ports & Adapters) pattern.

Settings Stores:
    - YamlSettingsStore: Price and metals in one YAML file
    - InMemorySettingsStore: Values held in memory

Calculation Logs:
    - CsvCalculationLog: Append-only CSV file
    - InMemoryCalculationLog: Records held in memory
    - ConsoleCalculationLog: Prints each record

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from alloy_resolver.adapters.console_logger import ConsoleCalculationLog
from alloy_resolver.adapters.csv_calculation_log import CsvCalculationLog
from alloy_resolver.adapters.memory import (
    InMemoryCalculationLog,
    InMemorySettingsStore,
)
from alloy_resolver.adapters.yaml_settings_store import YamlSettingsStore

__all__ = [
    "ConsoleCalculationLog",
    "CsvCalculationLog",
    "InMemoryCalculationLog",
    "InMemorySettingsStore",
    "YamlSettingsStore",
]
