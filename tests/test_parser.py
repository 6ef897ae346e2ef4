import pytest

from bulbapy.diagnostics import ErrorKind, ParseError
from bulbapy.document import DocBool, DocList, DocMap, DocNull, DocNumber, DocString, from_python, iter_leaves
from bulbapy.lexer import Token, TokenKind, lex_text
from bulbapy.options import MAX_NESTING_DEPTH, ParserOptions
from bulbapy.parser import (
    ROOT_INDEX,
    ContainerRef,
    MapArena,
    Parser,
    parse_result,
    parse_text,
    parse_tokens,
    parse_value,
)
from tests._debug import debug_dump_document, debug_dump_tokens
from tests._shared_cases import INVALID_CASES, VALID_CASES, BulbaCase, case_id, case_source


def tok(kind: TokenKind, literal: str = "", *, line: int = 2, level: int = 0) -> Token:
    return Token(kind=kind, literal=literal, line=line, level=level)


HEADER = Token(kind=TokenKind.HEADER, literal="BULBA!", line=1)


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_valid_cases_parse_to_a_map(case: BulbaCase) -> None:
    tokens = lex_text(case.source)
    debug_dump_tokens(case.name, case.source, tokens)

    document = parse_tokens(tokens)
    debug_dump_document(case.name, document, case.source)

    assert isinstance(document, DocMap)
    assert document == parse_text(case.source)


@pytest.mark.parametrize(
    "case",
    [case for case in INVALID_CASES if case.error_code is not None and case.error_code.startswith("PARSER_")],
    ids=case_id,
)
def test_parser_rejects_invalid_cases(case: BulbaCase) -> None:
    tokens = lex_text(case.source)

    with pytest.raises(ParseError) as excinfo:
        parse_tokens(tokens)

    assert excinfo.value.code == case.error_code


def test_pokedex_document_parses() -> None:
    document = parse_text(case_source("pokedex_document"))

    assert document == from_python(
        {
            "app_name": "Pokedex_API",
            "version": 1.5,
            "is_production": False,
            "missing_data": None,
            "database": {
                "host": "127.0.0.1",
                "pool": {
                    "max_connections": 100,
                    "KERNEL_FLAGS": {"panic_on_fail": True},
                },
            },
            "whitelist": ["Prof_Oak", "Mom"],
        }
    )
    assert list(document) == ["app_name", "version", "is_production", "missing_data", "database", "whitelist"]


def test_scalar_value_types() -> None:
    document = parse_text(case_source("number_forms"))

    assert document["integer"] == DocNumber(42.0)
    assert document["negative"] == DocNumber(-7.0)
    assert document["exponent"] == DocNumber(1000.0)
    assert document["leading_dot"] == DocNumber(0.5)
    assert document["signed"] == DocNumber(3.25)

    flags = parse_text("BULBA!\nyes ~> SuperEffective\nno ~> NotVeryEffective\nnothing ~> MissingNo\n")
    assert flags["yes"] == DocBool(True)
    assert flags["no"] == DocBool(False)
    assert flags["nothing"] == DocNull()


def test_array_values() -> None:
    document = parse_text(case_source("array_values"))

    assert document["numbers"] == DocList((DocNumber(1.0), DocNumber(2.0), DocNumber(3.0)))
    assert document["empty"] == DocList()
    assert document["mixed"] == DocList((DocString("a"), DocBool(True), DocNull(), DocNumber(-2.5)))
    assert document["nested"] == DocList((DocList((DocNumber(1.0),)), DocNumber(2.0)))


def test_sibling_sections_and_dedent_to_root() -> None:
    document = parse_text(case_source("sibling_sections"))

    assert document.to_python() == {"first": {"a": 1.0}, "second": {"b": 2.0}, "top": 3.0}


def test_dedent_truncates_to_the_entry_level() -> None:
    document = parse_text(case_source("dedent_from_depth_three"))

    assert document.to_python() == {
        "a": {"b": {"c": {"deep": 1.0}}, "back_in_a": 2.0},
        "root_key": 3.0,
    }


def test_depth_two_section_attaches_to_latest_depth_one_section() -> None:
    document = parse_text(case_source("cousin_sections"))

    assert document.to_python() == {"a": {"x": {"k": 1.0}}, "b": {"y": {"k": 2.0}}}


def test_empty_section_is_an_empty_map() -> None:
    document = parse_text(case_source("empty_section"))

    assert document["empty"] == DocMap()
    assert parse_text(case_source("header_only")) == DocMap()


def test_repeated_key_keeps_the_last_value() -> None:
    document = parse_text(case_source("repeated_key_last_wins"))

    assert document.to_python() == {"a": 2.0}


def test_reopened_section_replaces_the_earlier_map() -> None:
    document = parse_text("BULBA!\n(o) a (o)\n    x ~> 1\n(o) a (o)\n    y ~> 2\n")

    assert document.to_python() == {"a": {"y": 2.0}}


def test_entry_can_replace_a_section() -> None:
    document = parse_text("BULBA!\n(o) a (o)\n    x ~> 1\na ~> 5\n")

    assert document.to_python() == {"a": 5.0}


def test_entry_at_section_level_after_nested_section_stays_in_scope() -> None:
    source = "BULBA!\n(o) a (o)\n    (O) b (O)\n        x ~> 1\n        y ~> 2\n"

    assert parse_text(source).to_python() == {"a": {"b": {"x": 1.0, "y": 2.0}}}


def test_entries_before_any_section_belong_to_root() -> None:
    document = parse_text('BULBA!\nfirst ~> "x"\n(o) s (o)\n    k ~> 1\n')

    assert document.to_python() == {"first": "x", "s": {"k": 1.0}}


def test_parsed_document_holds_no_arena_handles() -> None:
    document = parse_text(case_source("pokedex_document"))

    def walk(value: object) -> None:
        assert not isinstance(value, ContainerRef)
        if isinstance(value, DocMap):
            for child in value.entries.values():
                walk(child)
        elif isinstance(value, DocList):
            for child in value:
                walk(child)

    walk(document)
    assert sorted(path for path, _ in iter_leaves(document)) == sorted(
        [
            ("app_name",),
            ("version",),
            ("is_production",),
            ("missing_data",),
            ("database", "host"),
            ("database", "pool", "max_connections"),
            ("database", "pool", "KERNEL_FLAGS", "panic_on_fail"),
            ("whitelist", 0),
            ("whitelist", 1),
        ]
    )


@pytest.mark.parametrize(
    ("source", "line", "kind"),
    [
        ('BULBA!\nCharizard ~> "Fire"', 2, ErrorKind.RESERVED_KEY),
        ('BULBA!\n(o) level1 (o)\n        (@) level3 (@)\n            key ~> "val"', 3, ErrorKind.INSUFFICIENT_ANCESTORS),
        ("BULBA!\n(O) a (O)", 2, ErrorKind.HIERARCHY),
        ("BULBA!\n(o) a (o)\n            key ~> 1", 3, ErrorKind.INDENTATION),
        ("BULBA!\nkey ~>", 2, ErrorKind.TYPE),
    ],
)
def test_parse_error_kinds_and_lines(source: str, line: int, kind: ErrorKind) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_text(source)

    assert excinfo.value.kind == kind
    assert excinfo.value.line == line


def test_reserved_key_message() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_text('BULBA!\nCharizard ~> "Fire"')

    assert excinfo.value.diagnostic.message == "It burns the bulb"


def test_unterminated_array() -> None:
    tokens = [
        HEADER,
        tok(TokenKind.INDENT),
        tok(TokenKind.IDENTIFIER, "a"),
        tok(TokenKind.ASSIGN, "~>"),
        tok(TokenKind.ARRAY_START),
        tok(TokenKind.NUMBER, "1"),
        tok(TokenKind.EOF),
    ]

    with pytest.raises(ParseError) as excinfo:
        parse_tokens(tokens)

    assert excinfo.value.code == "PARSER_UNTERMINATED_ARRAY"
    assert excinfo.value.kind == ErrorKind.SYNTAX


def test_missing_assignment_operator() -> None:
    tokens = [
        HEADER,
        tok(TokenKind.INDENT),
        tok(TokenKind.IDENTIFIER, "a"),
        tok(TokenKind.NUMBER, "1"),
        tok(TokenKind.EOF),
    ]

    with pytest.raises(ParseError) as excinfo:
        parse_tokens(tokens)

    assert excinfo.value.code == "PARSER_EXPECTED_TOKEN"


def test_missing_section_close() -> None:
    tokens = [
        HEADER,
        tok(TokenKind.INDENT),
        tok(TokenKind.SECTION_OPEN, level=1),
        tok(TokenKind.IDENTIFIER, "a", level=1),
        tok(TokenKind.EOF),
    ]

    with pytest.raises(ParseError) as excinfo:
        parse_tokens(tokens)

    assert excinfo.value.code == "PARSER_EXPECTED_TOKEN"


def test_line_must_start_with_a_section_or_a_key() -> None:
    tokens = [HEADER, tok(TokenKind.INDENT), tok(TokenKind.COMMA), tok(TokenKind.EOF)]

    with pytest.raises(ParseError) as excinfo:
        parse_tokens(tokens)

    assert excinfo.value.code == "PARSER_EXPECTED_TOKEN"

    with pytest.raises(ParseError):
        parse_tokens([HEADER, tok(TokenKind.INDENT)])


def test_tokens_outside_a_line_are_skipped() -> None:
    tokens = [
        HEADER,
        tok(TokenKind.COMMA),
        tok(TokenKind.INDENT),
        tok(TokenKind.IDENTIFIER, "a"),
        tok(TokenKind.ASSIGN, "~>"),
        tok(TokenKind.BOOL, "true"),
        tok(TokenKind.EOF),
    ]

    assert parse_tokens(tokens).to_python() == {"a": True}


def test_stream_without_eof_still_parses() -> None:
    tokens = [
        HEADER,
        tok(TokenKind.INDENT),
        tok(TokenKind.IDENTIFIER, "a"),
        tok(TokenKind.ASSIGN, "~>"),
        tok(TokenKind.STRING, "x"),
    ]

    assert parse_tokens(tokens).to_python() == {"a": "x"}


def test_parser_nesting_limit() -> None:
    tokens = [
        HEADER,
        tok(TokenKind.INDENT),
        tok(TokenKind.IDENTIFIER, "a"),
        tok(TokenKind.ASSIGN, "~>"),
        tok(TokenKind.ARRAY_START),
        tok(TokenKind.ARRAY_START),
        tok(TokenKind.ARRAY_START),
        tok(TokenKind.ARRAY_END),
        tok(TokenKind.ARRAY_END),
        tok(TokenKind.ARRAY_END),
        tok(TokenKind.EOF),
    ]

    assert parse_tokens(tokens, options=ParserOptions(max_nesting_depth=3))["a"] == DocList((DocList((DocList(),)),))
    with pytest.raises(ParseError) as excinfo:
        parse_tokens(tokens, options=ParserOptions(max_nesting_depth=2))

    assert excinfo.value.code == "PARSER_NESTING_TOO_DEEP"


def test_bad_number_literal_in_token_stream() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_value([tok(TokenKind.NUMBER, "twelve")], 0)

    assert excinfo.value.code == "PARSER_EXPECTED_VALUE"


def test_parse_value_returns_next_index() -> None:
    tokens = [
        tok(TokenKind.ARRAY_START),
        tok(TokenKind.STRING, "a"),
        tok(TokenKind.COMMA),
        tok(TokenKind.NULL),
        tok(TokenKind.ARRAY_END),
        tok(TokenKind.EOF),
    ]

    value, index = parse_value(tokens, 0)

    assert value == DocList((DocString("a"), DocNull()))
    assert index == 5

    with pytest.raises(ParseError) as excinfo:
        parse_value(tokens, len(tokens))
    assert excinfo.value.code == "PARSER_EXPECTED_TOKEN"


def test_parser_can_run_twice() -> None:
    parser = Parser(lex_text(case_source("sibling_sections")))

    first = parser.parse()
    second = parser.parse()

    assert first == second
    assert parser.depth == 1


def test_parser_state_after_parse() -> None:
    tokens = lex_text(case_source("dedent_from_depth_three"))
    parser = Parser(tokens)

    parser.parse()

    assert parser.position == len(tokens) - 1
    assert parser.depth == 1
    assert parser.options == ParserOptions()


def test_map_arena_materializes_children() -> None:
    arena = MapArena()
    child = arena.open_child(ROOT_INDEX, "child")
    arena.insert(child, "k", DocString("v"))
    arena.insert(ROOT_INDEX, "flat", DocNumber(1.0))

    assert len(arena) == 2
    assert arena.materialize() == DocMap({"child": DocMap({"k": DocString("v")}), "flat": DocNumber(1.0)})
    assert arena.materialize(child) == DocMap({"k": DocString("v")})


def test_map_arena_drops_overwritten_children() -> None:
    arena = MapArena()
    first = arena.open_child(ROOT_INDEX, "s")
    arena.insert(first, "old", DocBool(True))
    second = arena.open_child(ROOT_INDEX, "s")

    assert second != first
    assert arena.materialize() == DocMap({"s": DocMap()})


def test_parser_options_reject_non_positive_depth() -> None:
    with pytest.raises(ValueError):
        ParserOptions(max_nesting_depth=0)


def test_parser_options_reject_depth_beyond_the_cap() -> None:
    assert ParserOptions(max_nesting_depth=MAX_NESTING_DEPTH).max_nesting_depth == MAX_NESTING_DEPTH
    with pytest.raises(ValueError):
        ParserOptions(max_nesting_depth=MAX_NESTING_DEPTH + 1)
    with pytest.raises(ValueError):
        ParserOptions(max_nesting_depth=100000)


def test_deep_arrays_at_the_cap_report_a_nesting_error() -> None:
    levels = 1500
    source = "BULBA!\nx ~> " + "<| " * levels + "1" + " |>" * levels + "\n"

    result = parse_result(source, options=ParserOptions(max_nesting_depth=MAX_NESTING_DEPTH))

    assert result.document is None
    assert [diagnostic.code for diagnostic in result.diagnostics] == ["LEXER_NESTING_TOO_DEEP"]


def test_arrays_nested_to_the_cap_parse() -> None:
    source = "BULBA!\nx ~> " + "<| " * MAX_NESTING_DEPTH + "1" + " |>" * MAX_NESTING_DEPTH + "\n"

    document = parse_text(source, options=ParserOptions(max_nesting_depth=MAX_NESTING_DEPTH))

    value = document["x"]
    for _ in range(MAX_NESTING_DEPTH):
        assert isinstance(value, DocList)
        value = value[0]
    assert value == DocNumber(1.0)
