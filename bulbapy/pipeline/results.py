"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from bulbapy.diagnostics import Diagnostic
from bulbapy.pipeline.result import BulbaParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: BulbaParseResult
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool
