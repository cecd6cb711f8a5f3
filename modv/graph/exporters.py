"""
Alternative exports of a module graph.

This module provides JSON and plain-text table exports, for inspecting a
graph without running Graphviz.
"""

from __future__ import annotations

import json
from typing import Any

from tabulate import tabulate

from modv.graph.module_graph import ModuleGraph


def to_dict(graph: ModuleGraph) -> dict[str, Any]:
    """Export a graph to a JSON-ready dictionary.

    Example:
        >>> data = to_dict(ModuleGraph().parse(["a b"]))
        >>> data["edges"]
        [{'source': 1, 'target': 2}]
    """
    return {
        "root": graph.root_key,
        "nodes": [
            {"key": key, **module.to_dict()}
            for key, module in graph.modules.items()
        ],
        "edges": [
            {"source": source, "target": target}
            for source, targets in graph.dependencies.items()
            for target in targets
        ],
        "statistics": graph.get_statistics(),
    }


def to_json(graph: ModuleGraph, indent: int = 2) -> str:
    """Export a graph as a JSON document."""
    return json.dumps(to_dict(graph), indent=indent, ensure_ascii=False) + "\n"


def to_table(graph: ModuleGraph) -> str:
    """Export the module table as a plain-text table.

    Columns are id, path, name, version and the number of direct
    dependencies.
    """
    rows = [
        [
            module.id,
            module.path,
            module.name,
            module.version,
            graph.graph.out_degree(module.id),
        ]
        for module in graph.modules.values()
    ]
    headers = ["ID", "Path", "Name", "Version", "Dependencies"]
    return tabulate(rows, headers=headers, tablefmt="simple") + "\n"
