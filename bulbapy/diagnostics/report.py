"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from bulbapy.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    """True when any diagnostic is error severity; warnings never fail a run."""
    return any(diagnostic.severity == "error" for diagnostic in diagnostics)
