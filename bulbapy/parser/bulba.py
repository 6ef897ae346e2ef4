"""High-level parse entrypoints for BULBA! source text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from bulbapy.diagnostics import BulbaError, Diagnostic
from bulbapy.document import DocMap
from bulbapy.lexer import Token, lex, split_lines
from bulbapy.options import ParserOptions
from bulbapy.parser.parser import parse_tokens

if TYPE_CHECKING:
    from bulbapy.pipeline import BulbaParseResult

LOGGER = logging.getLogger(__name__)


def read_source(path: str | Path) -> str:
    """Read a UTF-8 source file, dropping a leading byte order mark."""
    decoded = Path(path).read_bytes().decode("utf-8")
    return decoded.removeprefix("\ufeff")


def read_lines(path: str | Path) -> list[str]:
    return split_lines(read_source(path))


def parse_text(text: str, options: ParserOptions | None = None) -> DocMap:
    """Lex and parse a whole document, raising `LexError` / `ParseError`."""
    tokens = lex(split_lines(text), options=options)
    return parse_tokens(tokens, options=options)


def parse_file(path: str | Path, options: ParserOptions | None = None) -> DocMap:
    tokens = lex(read_lines(path), options=options)
    return parse_tokens(tokens, options=options)


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    source_path: str = "<memory>",
) -> BulbaParseResult:
    """Parse without raising; failures are reported as diagnostics."""
    from bulbapy.pipeline import BulbaParseResult

    resolved_options = options or ParserOptions()
    tokens: list[Token] = []
    document: DocMap | None = None
    diagnostics: list[Diagnostic] = []

    try:
        tokens = lex(split_lines(text), options=resolved_options)
        document = parse_tokens(tokens, options=resolved_options)
    except BulbaError as error:
        LOGGER.debug("%s: %s", source_path, error)
        diagnostics.append(error.diagnostic)

    return BulbaParseResult(
        source_text=text,
        tokens=tokens,
        document=document,
        diagnostics=diagnostics,
        options=resolved_options,
        source_path=source_path,
    )


def parse_file_result(path: str | Path, options: ParserOptions | None = None) -> BulbaParseResult:
    file_path = Path(path)
    return parse_result(
        read_source(file_path),
        options=options,
        source_path=str(file_path).replace("\\", "/"),
    )
