# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Builds the LUML semantic model from parsed expressions.

Each builder checks the shape of one grammar position (keyword, arity, atom
versus list) and raises :class:`ShapeError` on the first mismatch. Nothing is
checked beyond shape: parent names and type names are taken as written.

Grammar accepted by :func:`build_declaration`::

    toplevel ::= '(' ('class'|'interface') name parent* member* ')'
    member   ::= ctor | fn | prop | section
    section  ::= '(' ('private'|'protected') member* ')'
    ctor     ::= '(' 'ctor' '(' arg* ')' ')'
    fn       ::= '(' 'fn' name '(' arg* ')' type ')'
    prop     ::= '(' 'prop' name type ')'
    arg      ::= type | '(' name type ')'
    type     ::= atom | '(' type type* ')'
"""

from __future__ import annotations

from luml.model.entities import (
    AccessModifier,
    Argument,
    ClassDecl,
    Constructor,
    Declaration,
    InterfaceDecl,
    Method,
    Property,
)
from luml.model.types import BaseType, TypeApplication, TypeRef
from luml.parser.sexpr import Atom, Expression, SList

# ###############
# Public Interface
# ###############

ANONYMOUS_NAME = "_"

# Deepest nesting of type lists accepted in a single type, e.g. 2 for `(List (List int))`.
MAX_TYPE_DEPTH = 64


class ShapeError(Exception):
    """Raised when a well-formed expression does not fit the declaration grammar.

    Attributes:
        expression: The offending expression (or fragment).
    """

    def __init__(self, message: str, expression: Expression) -> None:
        super().__init__(message)
        self.expression = expression


def build_type(expr: Expression) -> TypeRef:
    """Interpret *expr* as a type: an atom, or a non-empty list ``(head arg*)``.

    Raises:
        ShapeError: If a list is empty, or if type lists nest deeper than
            :data:`MAX_TYPE_DEPTH`.
    """
    return _build_type(expr, 1)


def build_argument(expr: Expression) -> Argument:
    """Interpret *expr* as a parameter: a bare type atom or ``(name type)``.

    The name ``_`` marks an anonymous parameter.
    """
    if isinstance(expr, Atom):
        return Argument(type=build_type(expr))
    if len(expr) != 2:
        raise ShapeError(f"Expected a named argument, got {expr}", expr)
    name_expr, type_expr = expr.items
    name = _as_atom(name_expr)
    return Argument(
        name=None if name == ANONYMOUS_NAME else name,
        type=build_type(type_expr),
    )


def build_constructor(access: AccessModifier, expr: Expression) -> Constructor:
    """Interpret *expr* as ``(ctor (arg*))``."""
    head, body = _as_headed_list(expr)
    if head != "ctor" or len(body) != 1:
        raise ShapeError(f"Expected a constructor, got {expr}", expr)
    return Constructor(access=access, arguments=_build_arguments(body[0]))


def build_method(access: AccessModifier, expr: Expression) -> Method:
    """Interpret *expr* as ``(fn name (arg*) return-type)``."""
    head, body = _as_headed_list(expr)
    if head != "fn" or len(body) != 3:
        raise ShapeError(f"Expected a method, got {expr}", expr)
    name_expr, args_expr, ret_expr = body
    return Method(
        access=access,
        name=_as_atom(name_expr),
        arguments=_build_arguments(args_expr),
        return_type=build_type(ret_expr),
    )


def build_property(access: AccessModifier, expr: Expression) -> Property:
    """Interpret *expr* as ``(prop name type)``."""
    head, body = _as_headed_list(expr)
    if head != "prop" or len(body) != 2:
        raise ShapeError(f"Expected a property, got {expr}", expr)
    name_expr, type_expr = body
    return Property(access=access, name=_as_atom(name_expr), type=build_type(type_expr))


def build_declaration(expr: Expression) -> Declaration:
    """Interpret a top-level expression as a class or interface declaration.

    After the name, the longest run of atoms is taken as parent names. The
    run ends at the first list; every later element is a member, so an atom
    following a member is rejected rather than read as a parent.

    Raises:
        ShapeError: If any part of the declaration has the wrong shape.
    """
    head, body = _as_headed_list(expr)
    if head not in _DECLARATION_KEYWORDS:
        raise ShapeError(f"Expected a top-level declaration, got {expr}", expr)
    if not body:
        raise ShapeError(f"Missing name in {expr}", expr)

    name = _as_atom(body[0])
    rest = body[1:]
    split = next(
        (index for index, item in enumerate(rest) if isinstance(item, SList)),
        len(rest),
    )
    parents = [_as_atom(item) for item in rest[:split]]
    members = rest[split:]

    if head == "interface":
        return InterfaceDecl(
            name=name,
            parents=parents,
            methods=[build_method(AccessModifier.PUBLIC, member) for member in members],
        )
    return _build_class(name, parents, members)


def build_declarations(exprs: list[Expression]) -> list[Declaration]:
    """Build every top-level expression in order, stopping at the first error."""
    return [build_declaration(expr) for expr in exprs]


# ################
# Implementation
# ################

_DECLARATION_KEYWORDS = frozenset({"class", "interface"})

_SECTIONS: dict[str, AccessModifier] = {
    "private": AccessModifier.PRIVATE,
    "protected": AccessModifier.PROTECTED,
}


class _ClassMembers:
    """Accumulates class members across top-level entries and sections."""

    def __init__(self) -> None:
        self.constructors: list[Constructor] = []
        self.methods: list[Method] = []
        self.properties: list[Property] = []

    def add(self, access: AccessModifier, expr: Expression) -> None:
        """Add a single ``ctor``/``fn``/``prop`` member with the given access."""
        keyword = _member_keyword(expr)
        if keyword == "ctor":
            self.constructors.append(build_constructor(access, expr))
        elif keyword == "fn":
            self.methods.append(build_method(access, expr))
        elif keyword == "prop":
            self.properties.append(build_property(access, expr))
        else:
            raise ShapeError(f"Expected a member, got {expr}", expr)


def _build_class(name: str, parents: list[str], members: tuple[Expression, ...]) -> ClassDecl:
    collected = _ClassMembers()
    for member in members:
        section = _SECTIONS.get(_member_keyword(member) or "")
        if section is None:
            collected.add(AccessModifier.PUBLIC, member)
            continue
        _, body = _as_headed_list(member)
        for inner in body:
            collected.add(section, inner)
    return ClassDecl(
        name=name,
        parents=parents,
        constructors=collected.constructors,
        methods=collected.methods,
        properties=collected.properties,
    )


def _build_type(expr: Expression, depth: int) -> TypeRef:
    if isinstance(expr, Atom):
        return BaseType(name=expr.value)
    if depth > MAX_TYPE_DEPTH:
        raise ShapeError(f"Type nested deeper than {MAX_TYPE_DEPTH} levels", expr)
    if not expr.items:
        raise ShapeError(f"Expected a type, got {expr}", expr)
    head, *arguments = expr.items
    return TypeApplication(
        head=_build_type(head, depth + 1),
        arguments=[_build_type(arg, depth + 1) for arg in arguments],
    )


def _member_keyword(expr: Expression) -> str | None:
    """Return the head atom of a list member, or None if *expr* has no atom head."""
    if isinstance(expr, SList) and expr.items and isinstance(expr.items[0], Atom):
        return expr.items[0].value
    return None


def _build_arguments(expr: Expression) -> list[Argument]:
    return [build_argument(arg) for arg in _as_list(expr)]


def _as_atom(expr: Expression) -> str:
    if not isinstance(expr, Atom):
        raise ShapeError(f"Expected an atom, got {expr}", expr)
    return expr.value


def _as_list(expr: Expression) -> tuple[Expression, ...]:
    if not isinstance(expr, SList):
        raise ShapeError(f"Expected a list, got {expr}", expr)
    return expr.items


def _as_headed_list(expr: Expression) -> tuple[str, tuple[Expression, ...]]:
    """Split a non-empty list whose first element is an atom into (head, rest)."""
    items = _as_list(expr)
    if not items:
        raise ShapeError(f"Expected a non-empty list, got {expr}", expr)
    return _as_atom(items[0]), items[1:]
