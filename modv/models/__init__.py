"""
Data models for modv.

This package contains the module and record types handled by the graph
builder, and the configuration objects for parsing and rendering.
"""

from modv.models.config import (
    OutputFormat,
    ParseOptions,
    RenderOptions,
    parse_exclusion_list,
)
from modv.models.module import EdgeRecord, Module

__all__ = [
    "EdgeRecord",
    "Module",
    "OutputFormat",
    "ParseOptions",
    "RenderOptions",
    "parse_exclusion_list",
]
