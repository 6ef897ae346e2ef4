"""Format runner over a shared BULBA! parse result."""

from __future__ import annotations

from bulbapy.format.source import dumps
from bulbapy.options import ParserOptions
from bulbapy.parser import parse_result
from bulbapy.pipeline.result import BulbaParseResult
from bulbapy.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    parse: BulbaParseResult | None = None,
) -> FormatRunResult:
    """Rewrite source text into its normalized form.

    Text that fails to parse is returned unchanged alongside its diagnostics.
    """
    resolved_parse = _resolve_parse(text, options=options, parse=parse)

    if resolved_parse.has_errors:
        formatted_text = resolved_parse.source_text
    else:
        formatted_text = dumps(resolved_parse.root())
    diagnostics = list(resolved_parse.diagnostics)
    changed = formatted_text != resolved_parse.source_text

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        diagnostics=diagnostics,
        changed=changed,
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    parse: BulbaParseResult | None,
) -> BulbaParseResult:
    if parse is not None:
        if options is not None:
            raise ValueError("Pass either parse or options, not both")
        return parse
    return parse_result(text, options=options)
