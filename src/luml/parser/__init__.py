# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader for the nested-list syntax of .luml files."""

from luml.parser.sexpr import Atom, Expression, ParseError, SList, parse_expression, parse_expressions

__all__ = [
    "Atom",
    "SList",
    "Expression",
    "ParseError",
    "parse_expression",
    "parse_expressions",
]
