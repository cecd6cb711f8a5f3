"""
Warning system for modv.

This module collects diagnostics produced while building a module graph,
such as records dropped by filtering, so that the command line can report
them without mixing them into the graph output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

VALID_LEVELS = ("INFO", "WARNING", "ERROR")


@dataclass
class BuildWarning:
    """Warning or informational message produced during a build.

    Attributes:
        level: Severity level ("INFO", "WARNING", "ERROR").
        message: Message text.
        context: Optional context, typically the offending input record.

    Example:
        >>> warning = BuildWarning(level="INFO", message="Skipped record")
        >>> warning.level
        'INFO'
    """

    level: str
    message: str
    context: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate warning level."""
        if self.level not in VALID_LEVELS:
            raise ValueError(
                f"Invalid warning level: {self.level}. "
                f"Must be one of {list(VALID_LEVELS)}"
            )


class WarningCollector:
    """Collects warnings produced while building a module graph.

    Example:
        >>> collector = WarningCollector()
        >>> collector.add("INFO", "Skipped indirect record", "b c")
        >>> collector.has_errors()
        False
        >>> len(collector.get_all())
        1
    """

    def __init__(self) -> None:
        self.warnings: list[BuildWarning] = []

    def add(
        self, level: str, message: str, context: Optional[str] = None
    ) -> None:
        """Add a message at the given level."""
        self.warnings.append(BuildWarning(level=level, message=message, context=context))

    def has_errors(self) -> bool:
        """Return True if any ERROR-level message was collected."""
        return any(warning.level == "ERROR" for warning in self.warnings)

    def get_all(self) -> list[BuildWarning]:
        """Return a copy of all collected messages, in insertion order."""
        return self.warnings.copy()

    def get_by_level(self, level: str) -> list[BuildWarning]:
        """Return the messages with the given level, in insertion order."""
        return [warning for warning in self.warnings if warning.level == level]

    def clear(self) -> None:
        """Remove all collected messages."""
        self.warnings.clear()

    def add_indirect_skip(self, parent: str, child: str, root_key: str) -> None:
        """Record that a record was dropped by indirect suppression."""
        self.add(
            "INFO",
            f"Skipped indirect dependency '{child}': parent is not the root '{root_key}'",
            f"{parent} {child}",
        )

    def add_exclusion_skip(self, excluded: str, parent: str, child: str) -> None:
        """Record that a record touched an excluded module."""
        self.add(
            "INFO",
            f"Excluded module '{excluded}' left out of the graph",
            f"{parent} {child}",
        )

    def get_summary(self) -> dict[str, int]:
        """Return message counts grouped by level.

        Example:
            >>> collector = WarningCollector()
            >>> collector.add("INFO", "one")
            >>> collector.add("WARNING", "two")
            >>> collector.get_summary() == {"INFO": 1, "WARNING": 1, "ERROR": 0}
            True
        """
        summary: dict[str, int] = {level: 0 for level in VALID_LEVELS}
        for warning in self.warnings:
            summary[warning.level] += 1
        return summary
