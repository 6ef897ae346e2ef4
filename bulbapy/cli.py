"""Command-line entry point: parse a BULBA! file and print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from bulbapy.lexer import dump_tokens
from bulbapy.options import ParserOptions
from bulbapy.parser import parse_file_result
from bulbapy.pipeline import run_format

LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bulbapy",
        description="Parse a BULBA! document and print its canonical form.",
    )
    parser.add_argument("path", type=Path, help="BULBA! source file to read.")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--tokens", action="store_true", help="Print the token stream instead of the document.")
    output.add_argument(
        "--format",
        action="store_true",
        help="Print the document rewritten as normalized BULBA! source.",
    )
    parser.add_argument(
        "--max-nesting-depth",
        type=int,
        default=ParserOptions().max_nesting_depth,
        help="Deepest array nesting accepted (defaults to %(default)s).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = ParserOptions(max_nesting_depth=args.max_nesting_depth)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        result = parse_file_result(args.path, options=options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Failed to read {args.path}: {exc}", file=sys.stderr)
        return 1

    if args.tokens and result.tokens:
        dump_tokens(result.tokens)

    if result.has_errors:
        for diagnostic in result.diagnostics:
            print(diagnostic.render(result.source_path), file=sys.stderr)
            if diagnostic.hint:
                print(f"  hint: {diagnostic.hint}", file=sys.stderr)
        return 1

    if args.format:
        sys.stdout.write(run_format(result.source_text, parse=result).formatted_text)
    elif not args.tokens:
        sys.stdout.write(result.canonical_text())
    LOGGER.debug("printed %s", result.source_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
