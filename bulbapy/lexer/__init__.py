"""Lexer."""

from bulbapy.lexer.lexer import Lexer, dump_tokens, lex, lex_text, split_lines
from bulbapy.lexer.tokens import (
    COMMENT_MARKER,
    HEADER_LITERAL,
    INDENT_WIDTH,
    RESERVED_KEY,
    Token,
    TokenKind,
)

__all__ = [
    "COMMENT_MARKER",
    "HEADER_LITERAL",
    "INDENT_WIDTH",
    "RESERVED_KEY",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "lex",
    "lex_text",
    "split_lines",
]
