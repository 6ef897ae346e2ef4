"""Lexer and parser configuration options."""

from dataclasses import dataclass
from typing import Final

# Array lexing and parsing recurse twice per level; stay well inside the
# interpreter's default recursion limit.
MAX_NESTING_DEPTH: Final[int] = 256


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Limits shared by the lexer and the parser."""

    max_nesting_depth: int = 64

    def __post_init__(self) -> None:
        if not 1 <= self.max_nesting_depth <= MAX_NESTING_DEPTH:
            raise ValueError(f"max_nesting_depth must be between 1 and {MAX_NESTING_DEPTH}")
