"""
Configuration models for modv.

This module defines ParseOptions and RenderOptions, which control how the
graph builder filters records and how the DOT renderer labels nodes, and the
OutputFormat enum used by the command line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class OutputFormat(str, Enum):
    """Enumeration of output formats supported by the command line.

    Attributes:
        DOT: Graphviz DOT description, meant to be piped into ``dot``.
        JSON: Nodes and edges as a JSON document.
        TABLE: A plain-text table of modules.

    Example:
        >>> OutputFormat.values()
        ['dot', 'json', 'table']
    """

    DOT = "dot"
    JSON = "json"
    TABLE = "table"

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all possible output format values."""
        return [member.value for member in cls]


@dataclass
class ParseOptions:
    """Settings that control how records are turned into a module graph.

    Attributes:
        fold_versions: If True, identifiers differing only by version map to
            the same module key (the identifier with its "@version" suffix
            removed). Defaults to False.
        excluded_modules: Module keys to leave out of the graph entirely.
            A key is compared after folding, so with fold_versions enabled
            the entries are versionless. Any iterable is accepted and is
            stored as a frozenset; order does not matter.
        indirect_only: If True, drop every record whose parent key is not
            the root key (the parent of the first record). Defaults to False.

    Example:
        >>> options = ParseOptions.from_exclusion_list("golang.org/x/sys, rsc.io/quote")
        >>> sorted(options.excluded_modules)
        ['golang.org/x/sys', 'rsc.io/quote']
    """

    fold_versions: bool = False
    excluded_modules: frozenset[str] = field(default_factory=frozenset)
    indirect_only: bool = False

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if not isinstance(self.fold_versions, bool):
            raise TypeError("fold_versions must be a boolean")
        if not isinstance(self.indirect_only, bool):
            raise TypeError("indirect_only must be a boolean")
        if isinstance(self.excluded_modules, str):
            raise TypeError(
                "excluded_modules must be an iterable of module keys, not a string"
            )
        self.excluded_modules = frozenset(self.excluded_modules)

    @classmethod
    def from_exclusion_list(
        cls,
        exclusion_list: Optional[str],
        fold_versions: bool = False,
        indirect_only: bool = False,
    ) -> ParseOptions:
        """Build options from a comma-separated exclusion list.

        Spaces are removed and empty entries dropped, so "a, b,,c" yields
        {"a", "b", "c"}.

        Args:
            exclusion_list: Comma-separated module keys, or None.
            fold_versions: See the class attribute.
            indirect_only: See the class attribute.

        Returns:
            A new ParseOptions instance.
        """
        return cls(
            fold_versions=fold_versions,
            excluded_modules=parse_exclusion_list(exclusion_list),
            indirect_only=indirect_only,
        )

    def is_excluded(self, key: str) -> bool:
        """Return True if the module key is in the exclusion set."""
        return key in self.excluded_modules


@dataclass
class RenderOptions:
    """Settings that control node labels in the DOT output.

    Attributes:
        hide_path: If True, labels show only the module name.
        hide_version: If True, labels omit the version line.
    """

    hide_path: bool = False
    hide_version: bool = False

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if not isinstance(self.hide_path, bool):
            raise TypeError("hide_path must be a boolean")
        if not isinstance(self.hide_version, bool):
            raise TypeError("hide_version must be a boolean")

    @classmethod
    def for_parse_options(
        cls,
        parse_options: ParseOptions,
        hide_path: bool = False,
        hide_version: Optional[bool] = None,
    ) -> RenderOptions:
        """Build render options that agree with the given parse options.

        Unless hide_version is given explicitly it follows
        parse_options.fold_versions: a folded module carries only the
        version of its first occurrence, which is usually not worth showing.

        Example:
            >>> RenderOptions.for_parse_options(ParseOptions(fold_versions=True)).hide_version
            True
            >>> RenderOptions.for_parse_options(
            ...     ParseOptions(fold_versions=True), hide_version=False
            ... ).hide_version
            False
        """
        if hide_version is None:
            hide_version = parse_options.fold_versions
        return cls(hide_path=hide_path, hide_version=hide_version)


def parse_exclusion_list(exclusion_list: Optional[str]) -> frozenset[str]:
    """Split a comma-separated exclusion list into a set of module keys."""
    if not exclusion_list:
        return frozenset()
    compact = exclusion_list.replace(" ", "")
    return frozenset(entry for entry in compact.split(",") if entry)

