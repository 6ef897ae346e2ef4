"""Typed document values."""

from bulbapy.document.model import (
    DocBool,
    DocList,
    DocMap,
    DocNull,
    DocNumber,
    DocScalar,
    DocString,
    DocValue,
    LeafPath,
    PlainValue,
    from_python,
    is_scalar,
    iter_leaves,
)
from bulbapy.document.scalar import (
    format_number,
    is_number_literal,
    parse_number,
    scalar_text,
)

__all__ = [
    "DocBool",
    "DocList",
    "DocMap",
    "DocNull",
    "DocNumber",
    "DocScalar",
    "DocString",
    "DocValue",
    "LeafPath",
    "PlainValue",
    "format_number",
    "from_python",
    "is_number_literal",
    "is_scalar",
    "iter_leaves",
    "parse_number",
    "scalar_text",
]
