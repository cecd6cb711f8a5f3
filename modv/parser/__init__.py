"""
Input parsing for modv.

This package contains the module identifier functions and the reader that
turns "<parent> <child>" lines into edge records.
"""

from modv.parser.identifier import (
    module_key,
    name,
    path,
    split_identifier,
    version,
    without_version,
)
from modv.parser.record_reader import parse_record, read_records

__all__ = [
    "module_key",
    "name",
    "parse_record",
    "path",
    "read_records",
    "split_identifier",
    "version",
    "without_version",
]
