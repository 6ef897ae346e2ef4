"""Section-aware parser from tokens to a document tree."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NoReturn

from bulbapy.diagnostics import (
    PARSER_EXPECTED_TOKEN,
    PARSER_HIERARCHY,
    PARSER_INDENTATION,
    PARSER_INSUFFICIENT_ANCESTORS,
    PARSER_RESERVED_KEY,
    DiagnosticSpec,
    ParseError,
)
from bulbapy.document import DocMap
from bulbapy.lexer.tokens import RESERVED_KEY, Token, TokenKind
from bulbapy.options import ParserOptions
from bulbapy.parser.arena import ROOT_INDEX, MapArena
from bulbapy.parser.values import parse_value

LOGGER = logging.getLogger(__name__)


class Parser:
    """Single forward pass over a token stream.

    Keeps a stack of open maps (arena indices, root first) and the
    indentation level of the current flat-key scope. Every INDENT token
    starts a line which is either a section header or a `key ~> value`
    entry; other tokens outside that dispatch are skipped.
    """

    def __init__(self, tokens: Sequence[Token], options: ParserOptions | None = None) -> None:
        self._tokens = tokens
        self._options = options or ParserOptions()
        self._position = 0
        self._arena = MapArena()
        self._stack: list[int] = [ROOT_INDEX]
        self._current_level = 0

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def position(self) -> int:
        return self._position

    @property
    def depth(self) -> int:
        """Number of currently open maps, root included."""
        return len(self._stack)

    def parse(self) -> DocMap:
        self._position = 0
        self._arena = MapArena()
        self._stack = [ROOT_INDEX]
        self._current_level = 0

        while self._position < len(self._tokens):
            token = self._tokens[self._position]
            if token.kind == TokenKind.EOF:
                break
            if token.kind == TokenKind.INDENT:
                self._parse_line(token)
                continue
            # HEADER and anything outside a line dispatch.
            self._position += 1

        LOGGER.debug("parsed %d tokens into %d maps", self._position, len(self._arena))
        return self._arena.materialize()

    def _parse_line(self, indent: Token) -> None:
        self._position += 1
        head = self._peek()
        if head is None:
            self._fail(PARSER_EXPECTED_TOKEN, indent, detail="(expected a section header or an entry)")

        if head.kind == TokenKind.SECTION_OPEN:
            self._parse_section(indent, head)
        elif head.kind == TokenKind.IDENTIFIER:
            self._parse_entry(indent, head)
        else:
            self._fail(PARSER_EXPECTED_TOKEN, head, detail=f"(got {head.kind.name})")

    def _parse_section(self, indent: Token, section_open: Token) -> None:
        depth = section_open.level
        if indent.level != depth - 1:
            self._fail(
                PARSER_HIERARCHY,
                section_open,
                detail=f"(depth {depth} section indented {indent.level} levels)",
            )
        if len(self._stack) < depth:
            self._fail(PARSER_INSUFFICIENT_ANCESTORS, section_open)

        self._position += 1
        key_token = self._expect(TokenKind.IDENTIFIER, section_open)
        validate_key(key_token)
        self._expect(TokenKind.SECTION_CLOSE, key_token)

        del self._stack[depth:]
        child = self._arena.open_child(self._stack[-1], key_token.literal)
        self._stack.append(child)
        self._current_level = depth
        LOGGER.debug("opened section %r at depth %d (line %d)", key_token.literal, depth, key_token.line)

    def _parse_entry(self, indent: Token, key_token: Token) -> None:
        level = indent.level
        if level < self._current_level:
            del self._stack[level + 1 :]
            self._current_level = level
        elif level > self._current_level:
            self._fail(
                PARSER_INDENTATION,
                key_token,
                detail=f"(entry indented {level} levels inside a level {self._current_level} scope)",
            )

        validate_key(key_token)
        self._position += 1
        self._expect(TokenKind.ASSIGN, key_token)

        value, self._position = parse_value(self._tokens, self._position, self._options)
        self._arena.insert(self._stack[-1], key_token.literal, value)

    def _peek(self) -> Token | None:
        if self._position >= len(self._tokens):
            return None
        return self._tokens[self._position]

    def _expect(self, kind: TokenKind, previous: Token) -> Token:
        token = self._peek()
        if token is None or token.kind != kind:
            self._fail(PARSER_EXPECTED_TOKEN, token or previous, detail=f"(expected {kind.name})")
        self._position += 1
        return token

    def _fail(self, spec: DiagnosticSpec, token: Token, *, detail: str | None = None) -> NoReturn:
        raise ParseError.from_spec(spec, line=token.line, detail=detail)


def validate_key(token: Token) -> None:
    """Reject the reserved key, wherever it is used."""
    if token.literal == RESERVED_KEY:
        raise ParseError.from_spec(PARSER_RESERVED_KEY, line=token.line)


def parse_tokens(tokens: Sequence[Token], options: ParserOptions | None = None) -> DocMap:
    """Parse a token stream into the root document map."""
    return Parser(tokens, options=options).parse()
