"""Scalar literal helpers shared by the lexer and the serializers."""

from __future__ import annotations

import math
import re
from decimal import Decimal

from bulbapy.document.model import DocBool, DocNull, DocNumber, DocScalar, DocString

_NUMBER_RE = re.compile(
    r"[+-]?(?:\d+\.?\d*(?:e[+-]?\d+)?|\.\d+(?:e[+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def is_number_literal(text: str) -> bool:
    return _NUMBER_RE.fullmatch(text) is not None


def parse_number(text: str) -> float | None:
    if not is_number_literal(text):
        return None
    return float(text)


def format_number(value: float) -> str:
    """Shortest round-trip digits in plain decimal notation, no exponent.

    Integral values drop the fraction (`100`); `1e-07` is written `0.0000001`.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def scalar_text(value: DocScalar) -> str:
    match value:
        case DocString():
            return value.value
        case DocNumber():
            return format_number(value.value)
        case DocBool():
            return "true" if value.value else "false"
        case DocNull():
            return ""
    raise TypeError(f"Not a scalar document value: {type(value).__name__}")


__all__ = [
    "format_number",
    "is_number_literal",
    "parse_number",
    "scalar_text",
]
