"""Canonical text rendering of document values."""

from __future__ import annotations

from typing import Final

from bulbapy.document import DocList, DocMap, DocNull, DocValue, scalar_text
from bulbapy.lexer.tokens import INDENT_WIDTH

INDENT_UNIT: Final[str] = " " * INDENT_WIDTH


def to_canonical_string(value: DocValue) -> str:
    """Render a document value; map keys are written in sorted order.

    ```
    app_name: Pokedex_API
    database:
        host: 127.0.0.1
    whitelist:
    - Prof_Oak
    - Mom
    ```
    """
    out: list[str] = []
    if isinstance(value, DocMap):
        _write_map(value, 0, out)
    elif isinstance(value, DocList):
        _write_list(value, 0, out)
    else:
        out.append(f"{scalar_text(value)}\n")
    return "".join(out)


def _write_map(value: DocMap, level: int, out: list[str]) -> None:
    indent = INDENT_UNIT * level
    for key in sorted(value.keys()):
        out.append(f"{indent}{key}:")
        _write_inline(value[key], level, out, list_level=level)


def _write_list(value: DocList, level: int, out: list[str]) -> None:
    indent = INDENT_UNIT * level
    for item in value.items:
        out.append(f"{indent}-")
        _write_inline(item, level, out, list_level=level + 1)


def _write_inline(value: DocValue, level: int, out: list[str], *, list_level: int) -> None:
    # Continues a `key:` or `-` prefix already written at `level`.
    if isinstance(value, DocMap):
        out.append("\n")
        _write_map(value, level + 1, out)
    elif isinstance(value, DocList):
        out.append("\n")
        _write_list(value, list_level, out)
    elif isinstance(value, DocNull):
        out.append("\n")
    else:
        out.append(f" {scalar_text(value)}\n")
