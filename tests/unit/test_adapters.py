"""
Unit Tests for Settings Stores and Calculation Logs.

Test Aspects Covered:
    ✅ Business Logic: Persist/restore price, metals and records
    ✅ Edge Cases: Missing files, non-positive saved price
    ✅ Contracts: Adapters satisfy their protocols
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from alloy_resolver.adapters import (
    ConsoleCalculationLog,
    CsvCalculationLog,
    InMemoryCalculationLog,
    InMemorySettingsStore,
    YamlSettingsStore,
)
from alloy_resolver.domain.entities import CalculationRecord, Metal
from alloy_resolver.interfaces import CalculationLog, SettingsStore


def make_record(operation: str = "alloy") -> CalculationRecord:
    return CalculationRecord(
        timestamp=datetime(2026, 10, 1, 12, 30),
        operation=operation,
        status="OK",
        inputs={"gold_mass_grams": 100.0, "impurity": "Copper"},
        outputs={"added_mass_grams": 33.3333, "market_value": None},
    )


class TestYamlSettingsStore:
    """Test cases for YamlSettingsStore."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        """
        SCENARIO: Settings file does not exist
        EXPECTED: No price, no metals
        """
        store = YamlSettingsStore(tmp_path / "settings.yaml")

        assert store.load_price() is None
        assert store.load_metals() == []

    def test_price_round_trip(self, tmp_path: Path) -> None:
        store = YamlSettingsStore(tmp_path / "nested" / "settings.yaml")

        store.save_price(65.25)

        assert YamlSettingsStore(store.path).load_price() == 65.25

    def test_price_and_metals_share_document(self, tmp_path: Path) -> None:
        """
        SCENARIO: Save price, then metals
        EXPECTED: Both survive in the same file
        """
        # Arrange
        store = YamlSettingsStore(tmp_path / "settings.yaml")

        # Act
        store.save_price(70.0)
        store.save_metals([Metal(name="Zinc", density=7.14)])

        # Assert
        assert store.load_price() == 70.0
        assert store.load_metals() == [Metal(name="Zinc", density=7.14)]

    def test_non_positive_saved_price_is_unset(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("price_per_gram: 0\n")

        assert YamlSettingsStore(path).load_price() is None

    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        assert isinstance(YamlSettingsStore(tmp_path / "s.yaml"), SettingsStore)
        assert isinstance(InMemorySettingsStore(), SettingsStore)


class TestCsvCalculationLog:
    """Test cases for CsvCalculationLog."""

    def test_missing_file_reads_empty(self, tmp_path: Path) -> None:
        assert CsvCalculationLog(tmp_path / "log.csv").read_all() == []

    def test_append_and_read(self, tmp_path: Path) -> None:
        """
        SCENARIO: Two records appended
        EXPECTED: Both read back in order with inputs/outputs restored
        """
        # Arrange
        log = CsvCalculationLog(tmp_path / "log.csv")

        # Act
        log.append(make_record("alloy"))
        log.append(make_record("raise_karat"))
        records = log.read_all()

        # Assert
        assert [r.operation for r in records] == ["alloy", "raise_karat"]
        assert records[0].inputs["impurity"] == "Copper"
        assert records[0].outputs["market_value"] is None
        assert records[0].timestamp == datetime(2026, 10, 1, 12, 30)

    def test_header_written_once(self, tmp_path: Path) -> None:
        path = tmp_path / "log.csv"
        log = CsvCalculationLog(path)

        log.append(make_record())
        log.append(make_record())

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("timestamp,operation")
        assert sum(1 for line in lines if line.startswith("timestamp")) == 1
        assert len(lines) == 3

    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        assert isinstance(CsvCalculationLog(tmp_path / "log.csv"), CalculationLog)
        assert isinstance(InMemoryCalculationLog(), CalculationLog)
        assert isinstance(ConsoleCalculationLog(), CalculationLog)


class TestInMemoryAdapters:
    """Test cases for in-memory adapters."""

    @pytest.mark.parametrize("price", [None, 0.0, -1.0])
    def test_unset_price(self, price) -> None:
        assert InMemorySettingsStore(price_per_gram=price).load_price() is None

    def test_log_clear(self) -> None:
        log = InMemoryCalculationLog()
        log.append(make_record())

        log.clear()

        assert log.read_all() == []


class TestConsoleCalculationLog:
    """Test cases for ConsoleCalculationLog."""

    def test_prints_record(self, capsys: pytest.CaptureFixture) -> None:
        log = ConsoleCalculationLog(verbose=True)

        log.append(make_record())

        out = capsys.readouterr().out
        assert "alloy" in out
        assert "added_mass_grams=33.33" in out
        assert len(log.read_all()) == 1

    def test_quiet_mode_omits_outputs(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleCalculationLog(verbose=False).append(make_record())

        assert "added_mass_grams" not in capsys.readouterr().out
