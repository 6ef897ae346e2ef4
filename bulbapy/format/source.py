"""Write a document back out as BULBA! source text."""

from __future__ import annotations

import re
from typing import Final

from bulbapy.diagnostics import UnrepresentableDocumentError
from bulbapy.document import (
    DocBool,
    DocList,
    DocMap,
    DocNull,
    DocNumber,
    DocString,
    DocValue,
    format_number,
)
from bulbapy.lexer.tokens import (
    ARRAY_CLOSE,
    ARRAY_OPEN,
    COMMENT_MARKER,
    FALSE_LITERAL,
    HEADER_LITERAL,
    INDENT_WIDTH,
    NULL_LITERAL,
    RESERVED_KEY,
    SECTION_MARKERS,
    TRUE_LITERAL,
)

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_MARKER_BY_DEPTH: Final[dict[int, str]] = {depth: marker for marker, depth in SECTION_MARKERS}
_FORBIDDEN_CHARACTERS: Final[tuple[str, ...]] = ("\n", "\t")

INDENT_UNIT: Final[str] = " " * INDENT_WIDTH
MAX_SECTION_DEPTH: Final[int] = max(_MARKER_BY_DEPTH)
ASSIGN_OPERATOR: Final[str] = "~~~>"


def dumps(document: DocMap) -> str:
    """Render `document` as source text that parses back to an equal document.

    Within every map plain entries come first, then nested maps as sections,
    each group in sorted key order. Raises `UnrepresentableDocumentError`
    when the grammar cannot express the document.
    """
    if not isinstance(document, DocMap):
        raise TypeError(f"Only maps can be written as documents, got {type(document).__name__}")

    lines: list[str] = [HEADER_LITERAL]
    _write_map_body(document, depth=0, path="", lines=lines)
    return "\n".join(lines) + "\n"


def _write_map_body(value: DocMap, *, depth: int, path: str, lines: list[str]) -> None:
    indent = INDENT_UNIT * depth
    sections: list[tuple[str, DocMap, str]] = []

    for key in sorted(value.keys()):
        child = value[key]
        child_path = f"{path}.{key}" if path else key
        if isinstance(child, DocMap):
            sections.append((key, child, child_path))
            continue
        if _IDENTIFIER_RE.fullmatch(key) is None:
            raise UnrepresentableDocumentError(child_path, f"key {key!r} is not an identifier")
        _check_key(key, child_path)
        _append_line(lines, f"{indent}{key} {ASSIGN_OPERATOR} {_value_text(child, child_path)}", child_path)

    for key, child, child_path in sections:
        if depth + 1 > MAX_SECTION_DEPTH:
            raise UnrepresentableDocumentError(child_path, f"maps nest at most {MAX_SECTION_DEPTH} sections deep")
        _check_key(key, child_path)
        marker = _MARKER_BY_DEPTH[depth + 1]
        _append_line(lines, f"{indent}{marker} {key} {marker}", child_path)
        _write_map_body(child, depth=depth + 1, path=child_path, lines=lines)


def _value_text(value: DocValue, path: str) -> str:
    match value:
        case DocString():
            return f'"{value.value}"'
        case DocNumber():
            return format_number(value.value)
        case DocBool():
            return TRUE_LITERAL if value.value else FALSE_LITERAL
        case DocNull():
            return NULL_LITERAL
        case DocList():
            return _list_text(value, path)
        case DocMap():
            raise UnrepresentableDocumentError(path, "maps cannot appear inside arrays")
    raise TypeError(f"Unsupported document value type: {type(value).__name__}")


def _list_text(value: DocList, path: str) -> str:
    if not value.items:
        return f"{ARRAY_OPEN} {ARRAY_CLOSE}"

    elements: list[str] = []
    for index, item in enumerate(value.items):
        element = _value_text(item, f"{path}[{index}]")
        # Array elements are split on every comma.
        if "," in element:
            raise UnrepresentableDocumentError(f"{path}[{index}]", "array elements cannot contain commas")
        elements.append(element)
    return f"{ARRAY_OPEN} {', '.join(elements)} {ARRAY_CLOSE}"


def _check_key(key: str, path: str) -> None:
    if key == RESERVED_KEY:
        raise UnrepresentableDocumentError(path, f"{RESERVED_KEY!r} is a reserved key")


def _append_line(lines: list[str], line: str, path: str) -> None:
    if COMMENT_MARKER in line:
        raise UnrepresentableDocumentError(path, f"text contains the comment marker {COMMENT_MARKER!r}")
    for character in _FORBIDDEN_CHARACTERS:
        if character in line:
            raise UnrepresentableDocumentError(path, f"text contains {character!r}")
    lines.append(line)
