"""Exception hierarchy raised by the lexer, the parser and the source writer."""

from __future__ import annotations

from bulbapy.diagnostics.codes import DiagnosticSpec, ErrorKind
from bulbapy.diagnostics.diagnostic import Diagnostic


class BulbaError(Exception):
    """Terminal failure of a lex or parse run.

    Carries the diagnostic describing the first offending line.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @classmethod
    def from_spec(cls, spec: DiagnosticSpec, *, line: int | None = None, detail: str | None = None) -> BulbaError:
        return cls(Diagnostic.from_spec(spec, line=line, detail=detail))

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def kind(self) -> ErrorKind:
        return self.diagnostic.kind

    @property
    def line(self) -> int | None:
        return self.diagnostic.line

    def __str__(self) -> str:
        if self.diagnostic.line is None:
            return self.diagnostic.message
        return f"line {self.diagnostic.line}: {self.diagnostic.message}"


class LexError(BulbaError):
    """Raised by the lexer."""


class ParseError(BulbaError):
    """Raised by the parser."""


class UnrepresentableDocumentError(ValueError):
    """Raised when a document cannot be written back as BULBA! source."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path or '<root>'}: {reason}")
        self.path = path
        self.reason = reason
