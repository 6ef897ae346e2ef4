"""Shared parse carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from bulbapy.options import ParserOptions
from bulbapy.pipeline.result import BulbaParseResult
from bulbapy.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    parse: BulbaParseResult | None = None,
) -> FormatRunResult:
    from bulbapy.format.runner import run_format as _run_format

    return _run_format(text, options=options, parse=parse)


__all__ = [
    "BulbaParseResult",
    "FormatRunResult",
    "run_format",
]
