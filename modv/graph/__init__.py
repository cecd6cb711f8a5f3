"""
Module graph package.

This package contains the ModuleGraph builder, the Graphviz DOT renderer and
the JSON and table exporters.
"""

from modv.graph.dot_renderer import (
    DotRenderer,
    build_dot,
    format_label,
    render,
    write_text,
)
from modv.graph.exporters import to_dict, to_json, to_table
from modv.graph.module_graph import ModuleGraph, build

__all__ = [
    "DotRenderer",
    "ModuleGraph",
    "build",
    "build_dot",
    "format_label",
    "render",
    "to_dict",
    "to_json",
    "to_table",
    "write_text",
]
