"""Unit tests for typed value retrieval."""

from decimal import Decimal

import pytest


class TestValue:
    """Tests for ArgumentManager.value."""

    def test_unknown_name_returns_zero_value(self, manager):
        assert manager.value("--never-declared", kind=int) == 0
        assert manager.value("--never-declared") == ""
        assert manager.value("--never-declared", kind=float) == 0.0

    def test_out_of_range_index_returns_zero_value(self, manager):
        manager.add("--size", 2)
        manager.parse(["prog", "--size", "3", "4"])
        assert manager.value("--size", 1, int) == 4
        assert manager.value("--size", 2, int) == 0
        assert manager.value("--size", -1, int) == 0

    def test_untouched_option_reads_placeholder(self, manager):
        manager.add("--count")
        manager.parse(["prog"])
        assert manager.value("--count", kind=int) == 0
        assert manager.value("--count") == "0"

    def test_float_and_decimal(self, manager):
        manager.add("--ratio")
        manager.parse(["prog", "--ratio", "0.25"])
        assert manager.value("--ratio", kind=float) == 0.25
        assert manager.value("--ratio", kind=Decimal) == Decimal("0.25")

    def test_conversion_fault_propagates(self, manager):
        manager.add("--count")
        manager.parse(["prog", "--count", "many"])
        with pytest.raises(ValueError):
            manager.value("--count", kind=int)
        # conversion faults are never collected as diagnostics
        assert manager.errors == []

    def test_unsupported_kind(self, manager):
        manager.add("--count")
        with pytest.raises(TypeError):
            manager.value("--count", kind=bool)


class TestValues:
    """Tests for ArgumentManager.values."""

    def test_unknown_name_returns_empty_list(self, manager):
        assert manager.values("--never-declared") == []

    def test_defaults_for_unmatched_option(self, manager):
        manager.add("--size", 3)
        manager.add("--mode", ["a", "b"])
        manager.parse(["prog"])
        assert manager.values("--size") == ["0", "0", "0"]
        assert manager.values("--mode") == ["a", "b"]

    def test_each_value_converted(self, manager):
        manager.add("-p", "--point", 3)
        manager.parse(["prog", "-p", "1", "2", "3"])
        assert manager.values("--point", kind=int) == [1, 2, 3]
        assert manager.values("-p", kind=float) == [1.0, 2.0, 3.0]

    def test_conversion_fault_propagates(self, manager):
        manager.add("--pair", 2)
        manager.parse(["prog", "--pair", "1", "x"])
        with pytest.raises(ValueError):
            manager.values("--pair", kind=int)

    def test_returned_list_is_a_copy(self, manager):
        manager.add("--name")
        manager.values("--name").append("extra")
        assert manager.values("--name") == ["0"]
