"""Lexer."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import NoReturn

from bulbapy.diagnostics import (
    LEXER_INDENTATION,
    LEXER_INVALID_HEADER,
    LEXER_INVALID_LINE,
    LEXER_INVALID_VALUE,
    LEXER_NESTING_TOO_DEEP,
    LEXER_TAB_CHARACTER,
    DiagnosticSpec,
    LexError,
)
from bulbapy.document.scalar import is_number_literal
from bulbapy.lexer.tokens import (
    ARRAY_CLOSE,
    ARRAY_OPEN,
    COMMENT_MARKER,
    FALSE_LITERAL,
    HEADER_LITERAL,
    INDENT_WIDTH,
    NULL_LITERAL,
    SECTION_MARKERS,
    TRUE_LITERAL,
    Token,
    TokenKind,
)
from bulbapy.options import ParserOptions

LOGGER = logging.getLogger(__name__)

_ENTRY_RE = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)\s*(~+>)\s*(.*)")


class Lexer:
    """Line-oriented lexer producing a flat token stream.

    Lines may carry their `\\n` / `\\r\\n` terminators or not. Lexing stops at
    the first offending line with a `LexError`.
    """

    def __init__(self, lines: Iterable[str], options: ParserOptions | None = None) -> None:
        if isinstance(lines, str):
            raise TypeError("Lexer expects an iterable of lines; use Lexer.from_text for a whole document")
        self._lines = lines
        self._options = options or ParserOptions()
        self._tokens: list[Token] = []
        self._line_number = 0

    @classmethod
    def from_text(cls, text: str, options: ParserOptions | None = None) -> Lexer:
        return cls(split_lines(text), options=options)

    @property
    def options(self) -> ParserOptions:
        return self._options

    def lex(self) -> list[Token]:
        self._tokens = []
        self._line_number = 0

        for raw_line in self._lines:
            line = _strip_terminator(raw_line)
            self._line_number += 1
            if self._line_number == 1:
                self._lex_header(line)
                continue
            self._lex_line(line)

        if self._line_number == 0:
            self._fail(LEXER_INVALID_HEADER, detail="(empty input)")

        self._push(TokenKind.EOF)
        LOGGER.debug("lexed %d tokens from %d lines", len(self._tokens), self._line_number)
        return self._tokens

    def _lex_header(self, line: str) -> None:
        if line != HEADER_LITERAL:
            self._fail(LEXER_INVALID_HEADER)
        self._push(TokenKind.HEADER, line)

    def _lex_line(self, line: str) -> None:
        comment_index = line.find(COMMENT_MARKER)
        if comment_index != -1:
            line = line[:comment_index]

        if "\t" in line:
            self._fail(LEXER_TAB_CHARACTER)

        line = line.rstrip()
        if not line:
            return

        indent = _leading_whitespace_width(line)
        if indent % INDENT_WIDTH != 0:
            self._fail(LEXER_INDENTATION, detail=f"({indent} leading spaces)")
        self._push(TokenKind.INDENT, level=indent // INDENT_WIDTH)

        content = line.strip()
        if self._lex_section_header(content):
            return
        self._lex_entry(content)

    def _lex_section_header(self, content: str) -> bool:
        for marker, depth in SECTION_MARKERS:
            prefix = f"{marker} "
            suffix = f" {marker}"
            if len(content) < len(prefix) + len(suffix):
                continue
            if not (content.startswith(prefix) and content.endswith(suffix)):
                continue
            name = content[len(prefix) : len(content) - len(suffix)]
            self._push(TokenKind.SECTION_OPEN, level=depth)
            self._push(TokenKind.IDENTIFIER, name, level=depth)
            self._push(TokenKind.SECTION_CLOSE, level=depth)
            return True
        return False

    def _lex_entry(self, content: str) -> None:
        match = _ENTRY_RE.fullmatch(content)
        if match is None:
            self._fail(LEXER_INVALID_LINE)

        self._push(TokenKind.IDENTIFIER, match.group(1))
        self._push(TokenKind.ASSIGN, match.group(2))
        self._lex_value(match.group(3).strip(), depth=0)

    def _lex_value(self, value: str, *, depth: int) -> None:
        if not value:
            return

        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            self._push(TokenKind.STRING, value[1:-1])
            return

        if value == TRUE_LITERAL:
            self._push(TokenKind.BOOL, "true")
            return
        if value == FALSE_LITERAL:
            self._push(TokenKind.BOOL, "false")
            return

        if value == NULL_LITERAL:
            self._push(TokenKind.NULL)
            return

        if (
            len(value) >= len(ARRAY_OPEN) + len(ARRAY_CLOSE)
            and value.startswith(ARRAY_OPEN)
            and value.endswith(ARRAY_CLOSE)
        ):
            self._lex_array(value, depth=depth + 1)
            return

        if is_number_literal(value):
            self._push(TokenKind.NUMBER, value)
            return

        self._fail(LEXER_INVALID_VALUE, detail=f"({value!r})")

    def _lex_array(self, value: str, *, depth: int) -> None:
        if depth > self._options.max_nesting_depth:
            self._fail(LEXER_NESTING_TOO_DEEP)

        self._push(TokenKind.ARRAY_START)
        content = value[len(ARRAY_OPEN) : len(value) - len(ARRAY_CLOSE)].strip()
        if content:
            # Elements are split on every comma, nested arrays included.
            for index, element in enumerate(content.split(",")):
                if index > 0:
                    self._push(TokenKind.COMMA)
                self._lex_value(element.strip(), depth=depth)
        self._push(TokenKind.ARRAY_END)

    def _push(self, kind: TokenKind, literal: str = "", *, level: int = 0) -> None:
        self._tokens.append(Token(kind=kind, literal=literal, line=self._line_number, level=level))

    def _fail(self, spec: DiagnosticSpec, *, detail: str | None = None) -> NoReturn:
        raise LexError.from_spec(spec, line=self._line_number, detail=detail)


def lex(lines: Iterable[str], options: ParserOptions | None = None) -> list[Token]:
    """Lex a sequence of source lines."""
    return Lexer(lines, options=options).lex()


def lex_text(text: str, options: ParserOptions | None = None) -> list[Token]:
    """Lex a whole document held in one string."""
    return Lexer.from_text(text, options=options).lex()


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, line, level, and literal for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<14} line={tok.line:<4} level={tok.level} literal={tok.literal!r}")


def split_lines(text: str) -> list[str]:
    """Split on `\\n` only; a trailing newline does not start another line."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _leading_whitespace_width(line: str) -> int:
    width = 0
    for ch in line:
        if not ch.isspace():
            break
        width += 1
    return width
