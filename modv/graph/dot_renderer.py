"""
Graphviz DOT rendering.

This module defines the DotRenderer class, which turns a module table and
adjacency table into a DOT description suitable for piping into ``dot``,
using pydot to build and serialize the graph.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

import pydot

from modv.exceptions import SerializationSinkError
from modv.graph.module_graph import ModuleGraph
from modv.models.config import RenderOptions
from modv.models.module import Module

# Graphs with more sources than this are laid out left to right.
HORIZONTAL_LAYOUT_THRESHOLD = 15


class TextSink(Protocol):
    def write(self, text: str) -> object: ...


def escape_label(text: str) -> str:
    """Escape backslashes and double quotes for a DOT quoted string."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def format_label(module: Module, options: RenderOptions) -> str:
    """Build the escaped DOT label for a module.

    The label is "path/name" (or just "name" with hide_path or an empty
    path), followed by a DOT line break and the version unless hide_version
    is set or the version is empty.

    Example:
        >>> mod = Module(id=1, path="golang.org/x", name="sys", version="v0.1.0")
        >>> format_label(mod, RenderOptions())
        'golang.org/x/sys\\\\nv0.1.0'
        >>> format_label(mod, RenderOptions(hide_path=True, hide_version=True))
        'sys'
    """
    text = module.name if options.hide_path else module.full_name()
    label = escape_label(text)
    if not options.hide_version and module.version:
        label += "\\n" + escape_label(module.version)
    return label


def build_dot(
    modules: Mapping[str, Module],
    dependencies: Mapping[int, Sequence[int]],
    options: Optional[RenderOptions] = None,
) -> pydot.Dot:
    """Build a pydot graph from a module table and adjacency table.

    Nodes are added in ascending id order, which is also first-seen order.
    Edges follow the adjacency table's source order and each source's
    target order.

    Args:
        modules: Module table, any key type.
        dependencies: Mapping of source module id to target module ids.
        options: Label options; defaults to RenderOptions().

    Returns:
        A pydot.Dot directed graph.
    """
    options = options or RenderOptions()
    dot = pydot.Dot(graph_type="digraph")
    if len(dependencies) > HORIZONTAL_LAYOUT_THRESHOLD:
        dot.set("rankdir", "LR")
    dot.set_node_defaults(shape="box")

    for module in sorted(modules.values(), key=lambda m: m.id):
        dot.add_node(
            pydot.Node(str(module.id), label=f'"{format_label(module, options)}"')
        )

    for source_id, target_ids in dependencies.items():
        for target_id in target_ids:
            dot.add_edge(pydot.Edge(str(source_id), str(target_id)))

    return dot


def render(
    modules: Mapping[str, Module],
    dependencies: Mapping[int, Sequence[int]],
    options: Optional[RenderOptions] = None,
) -> str:
    """Render a module table and adjacency table as DOT text."""
    return build_dot(modules, dependencies, options).to_string()


def write_text(text: str, sink: TextSink) -> None:
    """Write text to a sink and flush it if the sink supports flushing.

    Raises:
        SerializationSinkError: If the sink rejects the write.
    """
    try:
        sink.write(text)
        flush = getattr(sink, "flush", None)
        if flush is not None:
            flush()
    except (OSError, ValueError) as e:
        raise SerializationSinkError(f"Failed to write graph: {e}", cause=e) from e


class DotRenderer:
    """Renders a ModuleGraph in Graphviz DOT syntax.

    Attributes:
        options: RenderOptions controlling node labels.

    Example:
        >>> graph = ModuleGraph().parse(["a b"])
        >>> "1 -> 2;" in DotRenderer().render(graph)
        True
    """

    def __init__(self, options: Optional[RenderOptions] = None) -> None:
        self.options = options or RenderOptions()

    def render(self, graph: ModuleGraph) -> str:
        """Return the DOT description of the graph."""
        return render(graph.modules, graph.dependencies, self.options)

    def write(self, graph: ModuleGraph, sink: TextSink) -> None:
        """Write the DOT description of the graph to a text sink.

        Args:
            graph: The graph to render.
            sink: Any object with a ``write(str)`` method.

        Raises:
            SerializationSinkError: If the sink rejects the write.
        """
        write_text(self.render(graph), sink)
