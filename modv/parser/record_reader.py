"""
Edge record reader.

This module turns a text stream of "<parent> <child>" lines, as printed by
``go mod graph``, into EdgeRecord objects. The stream is consumed once, from
start to end.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from modv.exceptions import MalformedRecordError
from modv.models.module import EdgeRecord


def parse_record(line: str, line_number: int) -> EdgeRecord:
    """Parse a single non-blank line into an EdgeRecord.

    Tokens are separated by whitespace; tokens after the second are ignored.

    Args:
        line: Raw input line.
        line_number: 1-based line number, used for error reporting.

    Returns:
        The parsed EdgeRecord.

    Raises:
        MalformedRecordError: If the line has fewer than two tokens.
    """
    tokens = line.split()
    if len(tokens) < 2:
        raise MalformedRecordError(line_number, line.strip())
    return EdgeRecord(line_number=line_number, parent=tokens[0], child=tokens[1])


def read_records(lines: Iterable[str]) -> Iterator[EdgeRecord]:
    """Yield an EdgeRecord for every non-blank line.

    Args:
        lines: A readable text stream or any iterable of lines.

    Yields:
        EdgeRecord objects in input order.

    Raises:
        MalformedRecordError: On the first non-blank line that is not a
            two-token record. Records yielded before it stay valid.

    Example:
        >>> [r.child for r in read_records(["a b\\n", "\\n", "a c\\n"])]
        ['b', 'c']
    """
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield parse_record(line, line_number)
