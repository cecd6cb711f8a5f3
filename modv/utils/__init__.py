"""
Utility helpers for modv.

This package contains helper classes that support the graph builder, such as
the warning collector used to report dropped records.
"""

from modv.utils.warnings import BuildWarning, WarningCollector

__all__ = [
    "BuildWarning",
    "WarningCollector",
]
