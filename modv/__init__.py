"""
modv - Go module dependency graph visualizer.

Reads "<parent> <child>" dependency records, as printed by ``go mod graph``,
and writes a Graphviz DOT description of the module graph.

Example:
    >>> from modv import DotRenderer, ModuleGraph, ParseOptions
    >>> graph = ModuleGraph(ParseOptions(fold_versions=True))
    >>> graph = graph.parse(["x@1 y@2", "x@1 y@3"])
    >>> len(graph), graph.dependencies
    (2, {1: [2]})
"""

from modv.version import __version__, __version_info__

__author__ = "modv Contributors"

from modv.exceptions import (
    MalformedRecordError,
    ModvError,
    SerializationSinkError,
)
from modv.graph.dot_renderer import DotRenderer, render
from modv.graph.exporters import to_dict, to_json, to_table
from modv.graph.module_graph import ModuleGraph, build
from modv.models.config import OutputFormat, ParseOptions, RenderOptions
from modv.models.module import EdgeRecord, Module
from modv.parser.record_reader import read_records
from modv.utils.warnings import BuildWarning, WarningCollector

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Core
    "ModuleGraph",
    "build",
    "DotRenderer",
    "render",
    # Exports
    "to_dict",
    "to_json",
    "to_table",
    # Configuration
    "ParseOptions",
    "RenderOptions",
    "OutputFormat",
    # Data models
    "Module",
    "EdgeRecord",
    "read_records",
    # Diagnostics
    "BuildWarning",
    "WarningCollector",
    # Exceptions
    "ModvError",
    "MalformedRecordError",
    "SerializationSinkError",
]
