"""Parser from token stream to document tree."""

from bulbapy.options import ParserOptions
from bulbapy.parser.arena import ROOT_INDEX, ContainerRef, MapArena
from bulbapy.parser.bulba import (
    parse_file,
    parse_file_result,
    parse_result,
    parse_text,
    read_lines,
    read_source,
)
from bulbapy.parser.parser import Parser, parse_tokens, validate_key
from bulbapy.parser.values import parse_value

__all__ = [
    "ROOT_INDEX",
    "ContainerRef",
    "MapArena",
    "Parser",
    "ParserOptions",
    "parse_file",
    "parse_file_result",
    "parse_result",
    "parse_text",
    "parse_tokens",
    "parse_value",
    "read_lines",
    "read_source",
    "validate_key",
]
