"""Diagnostics."""

from bulbapy.diagnostics.codes import (
    LEXER_INDENTATION,
    LEXER_INVALID_HEADER,
    LEXER_INVALID_LINE,
    LEXER_INVALID_VALUE,
    LEXER_NESTING_TOO_DEEP,
    LEXER_TAB_CHARACTER,
    PARSER_EXPECTED_TOKEN,
    PARSER_EXPECTED_VALUE,
    PARSER_HIERARCHY,
    PARSER_INDENTATION,
    PARSER_INSUFFICIENT_ANCESTORS,
    PARSER_NESTING_TOO_DEEP,
    PARSER_RESERVED_KEY,
    PARSER_UNTERMINATED_ARRAY,
    DiagnosticSpec,
    ErrorKind,
    Severity,
)
from bulbapy.diagnostics.diagnostic import Diagnostic
from bulbapy.diagnostics.errors import (
    BulbaError,
    LexError,
    ParseError,
    UnrepresentableDocumentError,
)
from bulbapy.diagnostics.report import has_errors

__all__ = [
    "LEXER_INDENTATION",
    "LEXER_INVALID_HEADER",
    "LEXER_INVALID_LINE",
    "LEXER_INVALID_VALUE",
    "LEXER_NESTING_TOO_DEEP",
    "LEXER_TAB_CHARACTER",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_EXPECTED_VALUE",
    "PARSER_HIERARCHY",
    "PARSER_INDENTATION",
    "PARSER_INSUFFICIENT_ANCESTORS",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_RESERVED_KEY",
    "PARSER_UNTERMINATED_ARRAY",
    "BulbaError",
    "Diagnostic",
    "DiagnosticSpec",
    "ErrorKind",
    "LexError",
    "ParseError",
    "Severity",
    "UnrepresentableDocumentError",
    "has_errors",
]
