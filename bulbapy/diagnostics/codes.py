"""Diagnostic codes and messages."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Literal

Severity = Literal["error", "warning"]


class ErrorKind(StrEnum):
    """Error taxonomy shared by the lexer and the parser."""

    HEADER = "header"
    TAB = "tab"
    INDENTATION = "indentation"
    HIERARCHY = "hierarchy"
    INSUFFICIENT_ANCESTORS = "insufficient_ancestors"
    RESERVED_KEY = "reserved_key"
    SYNTAX = "syntax"
    TYPE = "type"


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    kind: ErrorKind
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_INVALID_HEADER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_HEADER",
    message="Status: Fainted",
    kind=ErrorKind.HEADER,
    hint="The first line must be exactly `BULBA!`.",
    category="lexer",
)

LEXER_TAB_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_TAB_CHARACTER",
    message="Poison Type: Tab character detected",
    kind=ErrorKind.TAB,
    hint="Indent with four spaces per level; tabs are not allowed anywhere.",
    category="lexer",
)

LEXER_INDENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INDENTATION",
    message="The attack missed!",
    kind=ErrorKind.INDENTATION,
    hint="Leading whitespace must be a multiple of four spaces.",
    category="lexer",
)

LEXER_INVALID_LINE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_LINE",
    message="It hurt itself in its confusion!",
    kind=ErrorKind.SYNTAX,
    hint="Expected a section header like `(o) name (o)` or an entry like `key ~> value`.",
    category="lexer",
)

LEXER_INVALID_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_VALUE",
    message="Target is immune!",
    kind=ErrorKind.TYPE,
    hint='Values are "strings", numbers, SuperEffective, NotVeryEffective, MissingNo or <| arrays |>.',
    category="lexer",
)

LEXER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_NESTING_TOO_DEEP",
    message="It hurt itself in its confusion!",
    kind=ErrorKind.SYNTAX,
    hint="Array literals are nested deeper than the configured limit.",
    category="lexer",
)

PARSER_HIERARCHY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_HIERARCHY",
    message="The attack missed!",
    kind=ErrorKind.HIERARCHY,
    hint="A depth-N section header must be indented N - 1 levels.",
    category="parser",
)

PARSER_INDENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INDENTATION",
    message="The attack missed!",
    kind=ErrorKind.INDENTATION,
    hint="Entries cannot be indented deeper than their section.",
    category="parser",
)

PARSER_INSUFFICIENT_ANCESTORS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INSUFFICIENT_ANCESTORS",
    message="Not enough badges!",
    kind=ErrorKind.INSUFFICIENT_ANCESTORS,
    hint="Open the enclosing section one depth shallower first.",
    category="parser",
)

PARSER_RESERVED_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_RESERVED_KEY",
    message="It burns the bulb",
    kind=ErrorKind.RESERVED_KEY,
    hint="`Charizard` cannot be used as a key or section name.",
    category="parser",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="It hurt itself in its confusion!",
    kind=ErrorKind.SYNTAX,
    category="parser",
)

PARSER_UNTERMINATED_ARRAY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_ARRAY",
    message="It hurt itself in its confusion!",
    kind=ErrorKind.SYNTAX,
    hint="Close the array with `|>`.",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="It hurt itself in its confusion!",
    kind=ErrorKind.SYNTAX,
    hint="Arrays are nested deeper than the configured limit.",
    category="parser",
)

PARSER_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_VALUE",
    message="Target is immune!",
    kind=ErrorKind.TYPE,
    category="parser",
)
