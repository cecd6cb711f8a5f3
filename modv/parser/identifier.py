"""
Module identifier parsing.

A module identifier has the shape "path/name@version", for example
"golang.org/x/sys@v0.1.0". The functions here split it into its parts. They
are total: any string is accepted, and lookups always use the last '@' and
the last '/' so that odd input never raises.
"""

from __future__ import annotations


def version(identifier: str) -> str:
    """Return the text after the last '@', or "" if there is none.

    Example:
        >>> version("github.com/fatih/color@v1.7.0")
        'v1.7.0'
        >>> version("github.com/poloxue/testmod")
        ''
    """
    _, sep, tail = identifier.rpartition("@")
    return tail if sep else ""


def without_version(identifier: str) -> str:
    """Return the identifier with its last '@' and everything after removed.

    Example:
        >>> without_version("rsc.io/quote/v3@v3.1.0")
        'rsc.io/quote/v3'
        >>> without_version("rsc.io/quote/v3")
        'rsc.io/quote/v3'
    """
    head, sep, _ = identifier.rpartition("@")
    return head if sep else identifier


def path(identifier: str) -> str:
    """Return everything before the last '/' of the versionless identifier.

    Example:
        >>> path("golang.org/x/sys@v0.0.0-20191010194322-b09")
        'golang.org/x'
        >>> path("sys@v1")
        ''
    """
    head, sep, _ = without_version(identifier).rpartition("/")
    return head if sep else ""


def name(identifier: str) -> str:
    """Return the final path segment of the versionless identifier.

    Example:
        >>> name("golang.org/x/sys@v0.0.0-20191010194322-b09")
        'sys'
    """
    return without_version(identifier).rpartition("/")[2]


def split_identifier(identifier: str) -> tuple[str, str, str]:
    """Split an identifier into (path, name, version)."""
    return path(identifier), name(identifier), version(identifier)


def module_key(identifier: str, fold_versions: bool = False) -> str:
    """Return the deduplication key for an identifier.

    Args:
        identifier: Raw module identifier.
        fold_versions: If True, the version suffix is dropped so that all
            versions of a module share one key.

    Returns:
        The raw identifier, or its versionless form when folding.
    """
    if fold_versions:
        return without_version(identifier)
    return identifier
