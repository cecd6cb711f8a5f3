"""
Tests for module identifier parsing.

This module tests splitting "path/name@version" identifiers into their
components and computing module keys.
"""

import pytest

from modv.parser.identifier import (
    module_key,
    name,
    path,
    split_identifier,
    version,
    without_version,
)


class TestVersion:
    """Tests for version extraction."""

    def test_pseudo_version(self):
        """Test a pseudo-version with dashes."""
        assert version("golang.org/x/sys@v0.0.0-20191010194322-b09") == "v0.0.0-20191010194322-b09"

    def test_semantic_version(self):
        """Test a plain semantic version."""
        assert version("github.com/fatih/color@v1.7.0") == "v1.7.0"

    @pytest.mark.parametrize(
        "identifier", ["github.com/poloxue/testmod", "a", "", "rsc.io/quote/v3"]
    )
    def test_no_version(self, identifier):
        """Test that identifiers without '@' have no version and are unchanged."""
        assert version(identifier) == ""
        assert without_version(identifier) == identifier

    def test_multiple_at_uses_last(self):
        """Test that the last '@' marks the version."""
        assert version("a@b@c") == "c"
        assert without_version("a@b@c") == "a@b"

    def test_trailing_at(self):
        """Test an identifier ending in '@'."""
        assert version("mod@") == ""
        assert without_version("mod@") == "mod"


class TestPathAndName:
    """Tests for path and name extraction."""

    def test_module_name(self):
        """Test the final path segment."""
        assert name("golang.org/x/sys@v0.0.0-20191010194322-b09") == "sys"
        assert name("github.com/fatih/color@v1.7.0") == "color"

    def test_module_path(self):
        """Test the path prefix."""
        assert path("golang.org/x/sys@v0.0.0-20191010194322-b09") == "golang.org/x"
        assert path("github.com/fatih/color@v1.7.0") == "github.com/fatih"

    def test_major_version_suffix(self):
        """Test that a /vN suffix is the module name."""
        assert path("rsc.io/quote/v3@v3.1.0") == "rsc.io/quote"
        assert name("rsc.io/quote/v3@v3.1.0") == "v3"

    def test_no_path(self):
        """Test identifiers without '/'."""
        assert path("sys@v1") == ""
        assert name("sys@v1") == "sys"

    def test_slash_in_version_is_ignored(self):
        """Test that '/' after the version marker does not affect path."""
        assert path("a/b@v1/x") == "a"
        assert name("a/b@v1/x") == "b"

    def test_split_identifier(self):
        """Test splitting a/b/c@v into all components."""
        assert split_identifier("a/b/c@v") == ("a/b", "c", "v")


class TestModuleKey:
    """Tests for module key computation."""

    def test_raw_key(self):
        """Test that the key is the raw identifier without folding."""
        assert module_key("x@1") == "x@1"

    def test_folded_key(self):
        """Test that folding drops the version."""
        assert module_key("x@1", fold_versions=True) == "x"
        assert module_key("x@2", fold_versions=True) == "x"
