"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    HEADER = 0
    EOF = 1

    # -------------------------
    # Structure
    # -------------------------
    INDENT = 10
    SECTION_OPEN = 11
    SECTION_CLOSE = 12

    # -------------------------
    # Keys / operators
    # -------------------------
    IDENTIFIER = 20
    ASSIGN = 21  # ~~~>

    # -------------------------
    # Literals
    # -------------------------
    STRING = 30
    NUMBER = 31
    BOOL = 32
    NULL = 33

    # -------------------------
    # Arrays
    # -------------------------
    ARRAY_START = 40  # <|
    ARRAY_END = 41  # |>
    COMMA = 42  # ,

    @property
    def is_literal(self) -> bool:
        return self in (
            TokenKind.STRING,
            TokenKind.NUMBER,
            TokenKind.BOOL,
            TokenKind.NULL,
        )


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `level` is the indentation depth for INDENT tokens and the declared
    section depth for section tokens; it is 0 everywhere else.
    """

    kind: TokenKind
    literal: str = ""
    line: int = 0
    level: int = 0


HEADER_LITERAL: Final[str] = "BULBA!"
COMMENT_MARKER: Final[str] = "zZz"
INDENT_WIDTH: Final[int] = 4
RESERVED_KEY: Final[str] = "Charizard"

TRUE_LITERAL: Final[str] = "SuperEffective"
FALSE_LITERAL: Final[str] = "NotVeryEffective"
NULL_LITERAL: Final[str] = "MissingNo"

ARRAY_OPEN: Final[str] = "<|"
ARRAY_CLOSE: Final[str] = "|>"

# Bracket style -> section depth.
SECTION_MARKERS: Final[tuple[tuple[str, int], ...]] = (
    ("(o)", 1),
    ("(O)", 2),
    ("(@)", 3),
)
