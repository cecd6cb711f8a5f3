"""
Tests for configuration models.
"""

import pytest

from modv import OutputFormat, ParseOptions, RenderOptions
from modv.models.config import parse_exclusion_list


class TestParseOptions:
    """Tests for ParseOptions."""

    def test_defaults(self):
        """Test default settings."""
        options = ParseOptions()

        assert options.fold_versions is False
        assert options.indirect_only is False
        assert options.excluded_modules == frozenset()

    def test_excluded_modules_normalized(self):
        """Test that any iterable becomes a frozenset."""
        options = ParseOptions(excluded_modules=["b", "a", "b"])
        assert options.excluded_modules == frozenset({"a", "b"})
        assert options.is_excluded("a")
        assert not options.is_excluded("c")

    def test_string_exclusions_rejected(self):
        """Test that a bare string is not accepted as an exclusion set."""
        with pytest.raises(TypeError):
            ParseOptions(excluded_modules="golang.org/x/sys")

    def test_invalid_flag_type(self):
        """Test that non-boolean flags are rejected."""
        with pytest.raises(TypeError, match="fold_versions"):
            ParseOptions(fold_versions="yes")
        with pytest.raises(TypeError, match="indirect_only"):
            ParseOptions(indirect_only=1)

    def test_from_exclusion_list(self):
        """Test parsing a comma-separated exclusion list."""
        options = ParseOptions.from_exclusion_list(
            " golang.org/x/sys , rsc.io/quote,,", fold_versions=True
        )

        assert options.excluded_modules == {"golang.org/x/sys", "rsc.io/quote"}
        assert options.fold_versions is True

    def test_empty_exclusion_list(self):
        """Test that empty or missing lists give no exclusions."""
        assert parse_exclusion_list("") == frozenset()
        assert parse_exclusion_list(None) == frozenset()


class TestRenderOptions:
    """Tests for RenderOptions."""

    def test_hide_version_follows_folding(self):
        """Test that hide_version defaults to fold_versions."""
        assert RenderOptions.for_parse_options(ParseOptions(fold_versions=True)).hide_version
        assert not RenderOptions.for_parse_options(ParseOptions()).hide_version

    def test_hide_version_override(self):
        """Test that an explicit hide_version wins."""
        options = RenderOptions.for_parse_options(
            ParseOptions(fold_versions=True), hide_path=True, hide_version=False
        )
        assert options.hide_version is False
        assert options.hide_path is True

    def test_invalid_flag_type(self):
        """Test that non-boolean flags are rejected."""
        with pytest.raises(TypeError):
            RenderOptions(hide_path=None)


class TestOutputFormat:
    """Tests for OutputFormat."""

    def test_values(self):
        """Test the list of format values."""
        assert OutputFormat.values() == ["dot", "json", "table"]
        assert OutputFormat("json") is OutputFormat.JSON
