"""
Module and edge record models.

This module defines the Module class, one node of the dependency graph, and
the EdgeRecord class, one "<parent> <child>" line of the input.
"""

from dataclasses import dataclass


@dataclass(frozen=True, eq=True)
class Module:
    """Represents one distinct module in the dependency graph.

    A Module is created the first time its module key is seen and is never
    modified afterwards. When versions are folded, later identifiers that
    map to the same key reuse this Module, so path, name and version always
    reflect the first raw identifier encountered.

    Attributes:
        id: Positive serial number assigned in first-seen order, from 1.
        path: Text before the last '/' of the versionless identifier.
        name: Final path segment of the versionless identifier.
        version: Text after the last '@', or "" if there is none.

    Example:
        >>> mod = Module(id=1, path="golang.org/x", name="sys", version="v0.1.0")
        >>> mod.full_name()
        'golang.org/x/sys'
        >>> Module(id=2, path="", name="app", version="").full_name()
        'app'
    """

    id: int
    path: str
    name: str
    version: str = ""

    def __post_init__(self) -> None:
        """Validate that the id is a positive integer."""
        if not isinstance(self.id, int) or self.id < 1:
            raise ValueError(f"module id must be a positive integer, got {self.id!r}")

    def full_name(self) -> str:
        """Return "path/name", or just the name when there is no path."""
        if self.path:
            return f"{self.path}/{self.name}"
        return self.name

    def to_dict(self) -> dict[str, object]:
        """Export the module to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "path": self.path,
            "name": self.name,
            "version": self.version,
        }


@dataclass(frozen=True)
class EdgeRecord:
    """One dependency record read from the input stream.

    Attributes:
        line_number: 1-based line number in the input.
        parent: Raw identifier of the depending module.
        child: Raw identifier of the module depended upon.
    """

    line_number: int
    parent: str
    child: str
