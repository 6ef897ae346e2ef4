"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass

from bulbapy.diagnostics.codes import DiagnosticSpec, ErrorKind, Severity


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and the parser."""

    code: str
    message: str
    kind: ErrorKind
    line: int | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, *, line: int | None = None, detail: str | None = None) -> Diagnostic:
        message = spec.message if detail is None else f"{spec.message} {detail}"
        return Diagnostic(
            code=spec.code,
            message=message,
            kind=spec.kind,
            line=line,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def render(self, source_path: str | None = None) -> str:
        location = source_path or "<memory>"
        if self.line is not None:
            location = f"{location}:{self.line}"
        return f"{location}: {self.code}: {self.message}"
