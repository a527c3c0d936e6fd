# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Nested-list (S-expression) reader for LUML sources.

Converts raw source text into an untyped tree of atoms and lists. The
declaration grammar is applied afterwards by :mod:`luml.compiler.builder`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Atom:
    """A single text token: any maximal run of non-whitespace, non-parenthesis characters."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SList:
    """A parenthesized, ordered sequence of expressions (possibly empty)."""

    items: tuple[Expression, ...] = ()

    def __str__(self) -> str:
        parts: list[str] = []
        # Expressions still to print, interleaved with the literal text between them.
        pending: list[Expression | str] = [self]
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, Atom):
                parts.append(item.value)
            else:
                pending.append(")")
                for index in range(len(item.items) - 1, -1, -1):
                    pending.append(item.items[index])
                    if index:
                        pending.append(" ")
                pending.append("(")
        return "".join(parts)

    def __len__(self) -> int:
        return len(self.items)


Expression = Atom | SList


class ParseError(Exception):
    """Raised when the source text is not a well-formed expression sequence.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


def parse_expression(source: str) -> Expression:
    """Parse exactly one expression, optionally surrounded by whitespace.

    Args:
        source: Text containing a single expression.

    Returns:
        The parsed expression.

    Raises:
        ParseError: If the text is empty, malformed, or contains anything
            after the first expression.
    """
    reader = _Reader(source)
    reader.skip_whitespace()
    if reader.at_end():
        reader.fail("Expected an expression, got end of input")
    expr = reader.read_expression()
    reader.skip_whitespace()
    if not reader.at_end():
        reader.fail(f"Unexpected {reader.current()!r} after expression")
    return expr


def parse_expressions(source: str) -> list[Expression]:
    """Parse zero or more consecutive expressions.

    Args:
        source: Text containing any number of whitespace-separated expressions.

    Returns:
        The parsed expressions in source order.

    Raises:
        ParseError: On an unterminated list or a stray closing parenthesis.
    """
    reader = _Reader(source)
    result: list[Expression] = []
    reader.skip_whitespace()
    while not reader.at_end():
        result.append(reader.read_expression())
        reader.skip_whitespace()
    return result


# ################
# Implementation
# ################

_DELIMITERS = frozenset("()")


class _Reader:
    """Character cursor with line/column tracking."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def at_end(self) -> bool:
        return self._pos >= len(self._source)

    def current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.current().isspace():
            self._advance()

    def fail(self, message: str, line: int | None = None, column: int | None = None) -> NoReturn:
        raise ParseError(
            message,
            self._line if line is None else line,
            self._column if column is None else column,
        )

    # ------------------------------------------------------------------
    # Expression readers
    # ------------------------------------------------------------------

    def read_expression(self) -> Expression:
        """Read one expression starting at the current (non-whitespace) position."""
        ch = self.current()
        if ch == "(":
            return self._read_list()
        if ch == ")":
            self.fail("Unexpected ')' without matching '('")
        return self._read_atom()

    def _read_list(self) -> SList:
        """Read a list and everything nested in it.

        Open lists are kept on an explicit stack, so nesting depth is bounded
        by memory rather than by the interpreter's recursion limit.
        """
        # (line, column, items) for each list whose ')' has not been read yet.
        open_lists: list[tuple[int, int, list[Expression]]] = []
        while True:
            ch = self.current()
            if ch == "(":
                open_lists.append((self._line, self._column, []))
                self._advance()
            elif ch == ")":
                self._advance()
                _, _, items = open_lists.pop()
                finished = SList(tuple(items))
                if not open_lists:
                    return finished
                open_lists[-1][2].append(finished)
            elif self.at_end():
                line, column, _ = open_lists[-1]
                self.fail("Unterminated list: missing ')'", line, column)
            else:
                open_lists[-1][2].append(self._read_atom())
            self.skip_whitespace()

    def _read_atom(self) -> Atom:
        start = self._pos
        while not self.at_end():
            ch = self.current()
            if ch.isspace() or ch in _DELIMITERS:
                break
            self._advance()
        return Atom(self._source[start : self._pos])
