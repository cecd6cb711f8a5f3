"""
Tests for JSON and table exports.
"""

import json

from modv import ModuleGraph, to_dict, to_json, to_table


class TestExporters:
    """Tests for the alternative export formats."""

    def setup_method(self):
        """Build a small graph."""
        self.graph = ModuleGraph().parse(
            ["github.com/a/app golang.org/x/sys@v0.1.0", "github.com/a/app rsc.io/quote/v3@v3.1.0"]
        )

    def test_to_dict(self):
        """Test the dictionary export."""
        data = to_dict(self.graph)

        assert data["root"] == "github.com/a/app"
        assert [node["id"] for node in data["nodes"]] == [1, 2, 3]
        assert data["nodes"][1] == {
            "key": "golang.org/x/sys@v0.1.0",
            "id": 2,
            "path": "golang.org/x",
            "name": "sys",
            "version": "v0.1.0",
        }
        assert data["edges"] == [
            {"source": 1, "target": 2},
            {"source": 1, "target": 3},
        ]
        assert data["statistics"]["total_edges"] == 2

    def test_to_json(self):
        """Test that the JSON export parses back to the dictionary."""
        assert json.loads(to_json(self.graph)) == to_dict(self.graph)

    def test_to_table(self):
        """Test the table export."""
        table = to_table(self.graph)

        assert "Version" in table
        assert "golang.org/x" in table
        assert "v3.1.0" in table
        assert len(table.strip().splitlines()) == 5
