"""
Module dependency graph.

This module defines the ModuleGraph class, which consumes "<parent> <child>"
records, applies version folding, module exclusion and indirect-dependency
suppression, and accumulates a deduplicated directed graph of modules using
networkx.
"""

from __future__ import annotations

from typing import Iterable, Optional

import networkx as nx

from modv.models.config import ParseOptions
from modv.models.module import Module
from modv.parser.identifier import module_key, split_identifier
from modv.parser.record_reader import read_records
from modv.utils.warnings import WarningCollector


class ModuleGraph:
    """Directed graph of module dependencies.

    Modules are keyed by their module key (the raw identifier, or the
    versionless identifier when versions are folded) and receive serial ids
    in first-seen order starting at 1. Edges are stored in a networkx
    DiGraph whose nodes are module ids; an edge is added at most once and
    never removed. The adjacency table lists sources in the order they
    gained their first edge and targets in edge insertion order.

    The parent of the first record fixes the root key. With indirect
    suppression enabled, a record is kept only when its parent key equals
    the root key. This is a literal comparison, not a reachability check.

    Attributes:
        options: ParseOptions applied to every record.
        graph: networkx DiGraph keyed by module id.
        warnings: WarningCollector receiving notes about dropped records.

    Example:
        >>> mg = ModuleGraph().parse(["a b", "a c", "b c"])
        >>> mg.dependencies
        {1: [2, 3], 2: [3]}
        >>> [m.name for m in mg.modules.values()]
        ['a', 'b', 'c']
    """

    def __init__(
        self,
        options: Optional[ParseOptions] = None,
        warnings: Optional[WarningCollector] = None,
    ) -> None:
        """Initialize an empty ModuleGraph.

        Args:
            options: Parse options; defaults to ParseOptions().
            warnings: Collector for dropped-record notes; a new one is
                created if not given.
        """
        self.options = options or ParseOptions()
        self.warnings = warnings if warnings is not None else WarningCollector()
        self.graph = nx.DiGraph()
        self._modules: dict[str, Module] = {}
        self._dependencies: dict[int, list[int]] = {}
        self._next_id = 1
        self._root_key: Optional[str] = None
        self._records_read = 0
        self._skipped_indirect = 0
        self._skipped_excluded = 0

    @property
    def modules(self) -> dict[str, Module]:
        """Module table keyed by module key, in first-seen order."""
        return dict(self._modules)

    @property
    def dependencies(self) -> dict[int, list[int]]:
        """Adjacency table: source id to target ids, insertion ordered.

        Sources appear in the order they gained their first edge. Only
        modules with at least one outgoing edge appear as keys.
        """
        return {source: list(targets) for source, targets in self._dependencies.items()}

    @property
    def root_key(self) -> Optional[str]:
        """Module key of the first record's parent, or None before any record."""
        return self._root_key

    def __len__(self) -> int:
        return len(self._modules)

    def has_module(self, key: str) -> bool:
        """Return True if a module with this key is in the graph."""
        return key in self._modules

    def has_dependency(self, source_id: int, target_id: int) -> bool:
        """Return True if the edge source_id -> target_id exists."""
        return self.graph.has_edge(source_id, target_id)

    def get_module(self, module_id: int) -> Module:
        """Return the Module with the given id.

        Raises:
            KeyError: If no module has this id.
        """
        if module_id not in self.graph:
            raise KeyError(f"No module with id {module_id}")
        return self.graph.nodes[module_id]["module"]

    def source_count(self) -> int:
        """Return the number of modules that have outgoing edges."""
        return len(self._dependencies)

    def parse(self, lines: Iterable[str]) -> ModuleGraph:
        """Consume a text stream of records into the graph.

        Args:
            lines: Readable text stream or iterable of "<parent> <child>"
                lines. Blank lines are skipped.

        Returns:
            self, to allow chaining.

        Raises:
            MalformedRecordError: If a non-blank line is not a two-token
                record. Everything parsed before that line is kept.
        """
        for record in read_records(lines):
            self.add_record(record.parent, record.child)
        return self

    def add_record(self, parent: str, child: str) -> None:
        """Apply one "<parent> <child>" record to the graph.

        Args:
            parent: Raw identifier of the depending module.
            child: Raw identifier of the dependency.
        """
        self._records_read += 1
        fold = self.options.fold_versions
        parent_key = module_key(parent, fold)
        child_key = module_key(child, fold)

        if self._root_key is None:
            self._root_key = parent_key

        if self.options.indirect_only and parent_key != self._root_key:
            self._skipped_indirect += 1
            self.warnings.add_indirect_skip(parent, child, self._root_key)
            return

        source = self._resolve(parent_key, parent, parent, child)
        target = self._resolve(child_key, child, parent, child)

        if source is None or target is None:
            self._skipped_excluded += 1
            return

        if not self.graph.has_edge(source.id, target.id):
            self.graph.add_edge(source.id, target.id)
            self._dependencies.setdefault(source.id, []).append(target.id)

    def _resolve(
        self,
        key: str,
        identifier: str,
        parent: str,
        child: str,
    ) -> Optional[Module]:
        """Look up or create the module for one side of a record.

        Returns None when the key is excluded.
        """
        if self.options.is_excluded(key):
            self.warnings.add_exclusion_skip(key, parent, child)
            return None

        module = self._modules.get(key)
        if module is None:
            module_path, module_name, module_version = split_identifier(identifier)
            module = Module(
                id=self._next_id,
                path=module_path,
                name=module_name,
                version=module_version,
            )
            self._modules[key] = module
            self.graph.add_node(module.id, module=module, key=key)
            self._next_id += 1
        return module

    def get_statistics(self) -> dict[str, int]:
        """Return graph and filtering statistics.

        Example:
            >>> stats = ModuleGraph().parse(["a b", "a b"]).get_statistics()
            >>> stats["total_modules"], stats["total_edges"], stats["records_read"]
            (2, 1, 2)
        """
        return {
            "total_modules": len(self._modules),
            "total_edges": self.graph.number_of_edges(),
            "source_modules": self.source_count(),
            "records_read": self._records_read,
            "skipped_indirect": self._skipped_indirect,
            "skipped_excluded": self._skipped_excluded,
        }


def build(
    lines: Iterable[str],
    options: Optional[ParseOptions] = None,
) -> tuple[dict[str, Module], dict[int, list[int]]]:
    """Build the module table and adjacency table from a record stream.

    Args:
        lines: Readable text stream or iterable of "<parent> <child>" lines.
        options: Parse options; defaults to ParseOptions().

    Returns:
        (modules, dependencies) as exposed by ModuleGraph.

    Raises:
        MalformedRecordError: If a non-blank line is not a two-token record.
    """
    graph = ModuleGraph(options).parse(lines)
    return graph.modules, graph.dependencies
