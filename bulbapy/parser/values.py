"""Value parsing over the token stream."""

from __future__ import annotations

from collections.abc import Sequence

from bulbapy.diagnostics import (
    PARSER_EXPECTED_TOKEN,
    PARSER_EXPECTED_VALUE,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNTERMINATED_ARRAY,
    ParseError,
)
from bulbapy.document import DocBool, DocList, DocNull, DocNumber, DocString, DocValue
from bulbapy.lexer.tokens import Token, TokenKind
from bulbapy.options import ParserOptions


def parse_value(
    tokens: Sequence[Token],
    index: int,
    options: ParserOptions | None = None,
    *,
    depth: int = 0,
) -> tuple[DocValue, int]:
    """Parse one value starting at `index`.

    Returns the value and the index of the first token after it.
    """
    if index >= len(tokens):
        line = tokens[-1].line if tokens else None
        raise ParseError.from_spec(PARSER_EXPECTED_TOKEN, line=line, detail="(expected a value)")

    token = tokens[index]
    match token.kind:
        case TokenKind.STRING:
            return DocString(token.literal), index + 1
        case TokenKind.NUMBER:
            return DocNumber(_to_float(token)), index + 1
        case TokenKind.BOOL:
            return DocBool(token.literal == "true"), index + 1
        case TokenKind.NULL:
            return DocNull(), index + 1
        case TokenKind.ARRAY_START:
            return _parse_array(tokens, index, options or ParserOptions(), depth=depth + 1)
        case _:
            raise ParseError.from_spec(PARSER_EXPECTED_VALUE, line=token.line, detail=f"(got {token.kind.name})")


def _parse_array(
    tokens: Sequence[Token],
    index: int,
    options: ParserOptions,
    *,
    depth: int,
) -> tuple[DocList, int]:
    start = tokens[index]
    if depth > options.max_nesting_depth:
        raise ParseError.from_spec(PARSER_NESTING_TOO_DEEP, line=start.line)

    items: list[DocValue] = []
    cursor = index + 1
    while cursor < len(tokens):
        token = tokens[cursor]
        if token.kind == TokenKind.ARRAY_END:
            return DocList(tuple(items)), cursor + 1
        if token.kind == TokenKind.COMMA:
            cursor += 1
            continue
        if token.kind == TokenKind.EOF:
            break
        value, cursor = parse_value(tokens, cursor, options, depth=depth)
        items.append(value)

    raise ParseError.from_spec(PARSER_UNTERMINATED_ARRAY, line=start.line)


def _to_float(token: Token) -> float:
    try:
        return float(token.literal)
    except ValueError:
        raise ParseError.from_spec(PARSER_EXPECTED_VALUE, line=token.line, detail=f"({token.literal!r})") from None
