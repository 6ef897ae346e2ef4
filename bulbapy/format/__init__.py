"""Canonical text rendering and source writing."""

from bulbapy.format.canonical import INDENT_UNIT, to_canonical_string
from bulbapy.format.source import ASSIGN_OPERATOR, MAX_SECTION_DEPTH, dumps

__all__ = [
    "ASSIGN_OPERATOR",
    "INDENT_UNIT",
    "MAX_SECTION_DEPTH",
    "dumps",
    "to_canonical_string",
]
