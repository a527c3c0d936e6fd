# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the LUML nested-list reader."""

import pytest

from luml.parser.sexpr import Atom, ParseError, SList, parse_expression, parse_expressions

# ###############
# Test Helpers
# ###############


def _list(*items: object) -> SList:
    """Build an SList, turning plain strings into atoms."""
    return SList(tuple(Atom(i) if isinstance(i, str) else i for i in items))


# ###############
# Atoms
# ###############


class TestAtoms:
    def test_single_atom(self) -> None:
        assert parse_expression("Widget") == Atom("Widget")

    def test_atom_with_surrounding_whitespace(self) -> None:
        assert parse_expression("  \n\tWidget \n") == Atom("Widget")

    @pytest.mark.parametrize("text", ["_", "std::string", "a-b", "1.5", "*", "->", "Foo<T>"])
    def test_any_non_space_non_paren_run_is_an_atom(self, text: str) -> None:
        assert parse_expression(text) == Atom(text)

    def test_atom_ends_at_parenthesis(self) -> None:
        assert parse_expression("(a(b))") == _list("a", _list("b"))

    def test_atom_prints_verbatim(self) -> None:
        assert str(Atom("std::vector")) == "std::vector"


# ###############
# Lists
# ###############


class TestLists:
    def test_empty_list(self) -> None:
        result = parse_expression("()")
        assert result == SList(())
        assert len(result) == 0

    def test_empty_list_with_inner_whitespace(self) -> None:
        assert parse_expression("(  \n )") == SList(())

    def test_two_atom_list(self) -> None:
        assert parse_expression("(a b)") == _list("a", "b")

    def test_nested_lists(self) -> None:
        result = parse_expression("(class Foo (fn f () int))")
        assert result == _list("class", "Foo", _list("fn", "f", _list(), "int"))

    def test_deep_nesting(self) -> None:
        result = parse_expression("((((x))))")
        assert result == _list(_list(_list(_list("x"))))

    def test_nesting_beyond_recursion_limit(self) -> None:
        depth = 10_000
        result = parse_expression("(" * depth + "x" + ")" * depth)
        levels = 0
        while isinstance(result, SList):
            levels += 1
            (result,) = result.items
        assert levels == depth
        assert result == Atom("x")

    def test_deeply_nested_list_prints(self) -> None:
        depth = 10_000
        source = "(" * depth + "x" + ")" * depth
        assert str(parse_expression(source)) == source

    def test_whitespace_is_insignificant(self) -> None:
        compact = parse_expression("(a (b c) d)")
        spread = parse_expression("(\n  a\n  (b\tc)\n  d\n)")
        assert compact == spread

    def test_list_prints_parenthesized_and_space_joined(self) -> None:
        assert str(_list("fn", "f", _list(), "int")) == "(fn f () int)"


# ###############
# Multiple expressions
# ###############


class TestParseMany:
    def test_empty_input_yields_no_expressions(self) -> None:
        assert parse_expressions("") == []

    def test_whitespace_only_yields_no_expressions(self) -> None:
        assert parse_expressions("  \n\t ") == []

    def test_consecutive_expressions_in_order(self) -> None:
        result = parse_expressions("(class A) (interface I)\nloose")
        assert result == [_list("class", "A"), _list("interface", "I"), Atom("loose")]

    def test_adjacent_lists_without_whitespace(self) -> None:
        assert parse_expressions("(a)(b)") == [_list("a"), _list("b")]


# ###############
# Round trip
# ###############


class TestRoundTrip:
    @pytest.mark.parametrize(
        "source",
        [
            "x",
            "()",
            "(a b)",
            "(class Foo A B (fn f ((_ int) (x (List T))) bool))",
            "(\n  interface   I\n\t(fn g () ((Map string) int)))",
            "(() (()) ((()) x))",
        ],
    )
    def test_reprinted_expression_parses_to_same_tree(self, source: str) -> None:
        expr = parse_expression(source)
        assert parse_expression(str(expr)) == expr

    def test_reprinting_normalizes_whitespace(self) -> None:
        assert str(parse_expression("(  a\n (b   c) )")) == "(a (b c))"


# ###############
# Errors
# ###############


class TestErrors:
    def test_empty_input_requires_an_expression(self) -> None:
        with pytest.raises(ParseError, match="end of input"):
            parse_expression("")

    def test_whitespace_input_requires_an_expression(self) -> None:
        with pytest.raises(ParseError):
            parse_expression("   \n")

    def test_unterminated_list(self) -> None:
        with pytest.raises(ParseError, match="Unterminated list") as exc_info:
            parse_expression("(a (b c)")
        assert exc_info.value.line == 1
        assert exc_info.value.column == 1

    def test_unterminated_list_reports_opening_position(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_expressions("(a)\n  (b")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 3

    def test_unterminated_inner_list_reports_innermost_opening(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_expression("(a\n ((b) (c")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 7

    def test_stray_closing_parenthesis(self) -> None:
        with pytest.raises(ParseError, match=r"Unexpected '\)'"):
            parse_expressions("(a))")

    def test_leading_closing_parenthesis(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_expression(")")
        assert exc_info.value.line == 1
        assert exc_info.value.column == 1

    def test_trailing_content_after_single_expression(self) -> None:
        with pytest.raises(ParseError, match="after expression"):
            parse_expression("(a) (b)")

    def test_message_includes_position(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_expressions("\n\n   )")
        assert str(exc_info.value).startswith("Line 3, column 4:")
