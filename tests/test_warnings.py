"""
Tests for the warning collector.
"""

import pytest

from modv import BuildWarning, WarningCollector


class TestWarningCollector:
    """Tests for WarningCollector."""

    def test_add_and_filter(self):
        """Test adding messages and filtering by level."""
        collector = WarningCollector()
        collector.add("INFO", "one")
        collector.add("WARNING", "two")
        collector.add("INFO", "three")

        assert [w.message for w in collector.get_by_level("INFO")] == ["one", "three"]
        assert collector.get_summary() == {"INFO": 2, "WARNING": 1, "ERROR": 0}
        assert not collector.has_errors()

    def test_has_errors(self):
        """Test error detection."""
        collector = WarningCollector()
        collector.add("ERROR", "boom")
        assert collector.has_errors()

    def test_get_all_is_copy(self):
        """Test that get_all returns a copy."""
        collector = WarningCollector()
        collector.add("INFO", "one")
        collector.get_all().clear()
        assert len(collector.get_all()) == 1

    def test_clear(self):
        """Test clearing the collector."""
        collector = WarningCollector()
        collector.add_indirect_skip("a", "b", "root")
        collector.clear()
        assert collector.get_all() == []

    def test_skip_helpers(self):
        """Test the record-skip helpers."""
        collector = WarningCollector()
        collector.add_indirect_skip("a", "b", "root")
        collector.add_exclusion_skip("b", "a", "b")
        warnings = collector.get_all()

        assert "root" in warnings[0].message
        assert warnings[1].context == "a b"
        assert all(w.level == "INFO" for w in warnings)

    def test_invalid_level(self):
        """Test that unknown levels are rejected."""
        with pytest.raises(ValueError, match="Invalid warning level"):
            BuildWarning(level="DEBUG", message="nope")
