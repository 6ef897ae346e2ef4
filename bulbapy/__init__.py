"""Lexer, parser and serializers for BULBA! configuration documents."""

from bulbapy.diagnostics import (
    BulbaError,
    Diagnostic,
    ErrorKind,
    LexError,
    ParseError,
    UnrepresentableDocumentError,
)
from bulbapy.document import (
    DocBool,
    DocList,
    DocMap,
    DocNull,
    DocNumber,
    DocString,
    DocValue,
    from_python,
)
from bulbapy.format import dumps, to_canonical_string
from bulbapy.lexer import Lexer, Token, TokenKind, lex, lex_text
from bulbapy.options import ParserOptions
from bulbapy.parser import (
    Parser,
    parse_file,
    parse_file_result,
    parse_result,
    parse_text,
    parse_tokens,
)
from bulbapy.pipeline import BulbaParseResult

__all__ = [
    "BulbaError",
    "BulbaParseResult",
    "Diagnostic",
    "DocBool",
    "DocList",
    "DocMap",
    "DocNull",
    "DocNumber",
    "DocString",
    "DocValue",
    "ErrorKind",
    "LexError",
    "Lexer",
    "ParseError",
    "Parser",
    "ParserOptions",
    "Token",
    "TokenKind",
    "UnrepresentableDocumentError",
    "dumps",
    "from_python",
    "lex",
    "lex_text",
    "parse_file",
    "parse_file_result",
    "parse_result",
    "parse_text",
    "parse_tokens",
    "to_canonical_string",
]
