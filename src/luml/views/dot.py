# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Graphviz DOT rendering of LUML declarations as a UML class diagram.

Each declaration becomes one ``record`` node:

- a class renders as ``{Name|properties|operations}``, where operations are
  the constructors, the destructor (only when it is not the default one), and
  the methods, one per line;
- an interface renders as ``{<<interface>>\\nName||methods}``.

Each parent name yields one inheritance edge drawn from the parent to the
child. The arrowhead is hollow (``empty``) when the parent is a declared
interface and solid (``normal``) otherwise, including parents that are not
declared at all.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from luml.model.entities import Argument, ClassDecl, Declaration, InterfaceDecl, Method
from luml.views.config import AttributeValue, RenderConfig

# ###############
# Public Interface
# ###############


class ArrowStyle(enum.Enum):
    """Arrowhead drawn at the parent end of an inheritance edge."""

    EMPTY = "empty"  # realization of an interface
    NORMAL = "normal"  # generalization of a class


@dataclass
class GraphEdge:
    """A directed inheritance edge from *parent* to *child*.

    Attributes:
        parent: Name of the parent declaration (may be undeclared).
        child: Name of the inheriting declaration.
        arrow: Arrowhead style at the parent end.
    """

    parent: str
    child: str
    arrow: ArrowStyle


@dataclass
class GraphNode:
    """A record node and the edges to its parents.

    Attributes:
        name: Declaration name, used as the node identifier.
        label: Record label with field metacharacters escaped (before DOT quoting).
        edges: One edge per parent, in declaration order.
    """

    name: str
    label: str
    edges: list[GraphEdge] = field(default_factory=list)


@dataclass
class GraphData:
    """All nodes of a diagram in declaration order."""

    nodes: list[GraphNode] = field(default_factory=list)


def interface_names(declarations: Iterable[Declaration]) -> frozenset[str]:
    """Return the names of all interface declarations."""
    return frozenset(decl.name for decl in declarations if isinstance(decl, InterfaceDecl))


def node_label(decl: Declaration) -> str:
    """Return the record label for *decl*."""
    if isinstance(decl, InterfaceDecl):
        methods = "\n".join(_method_line(m) for m in decl.methods)
        return "{" + _escape_record(f"<<interface>>\n{decl.name}") + "||" + _escape_record(methods) + "}"
    return _class_label(decl)


def node_edges(decl: Declaration, interfaces: frozenset[str]) -> list[GraphEdge]:
    """Return one edge per parent of *decl*, styled by membership in *interfaces*."""
    return [
        GraphEdge(
            parent=parent,
            child=decl.name,
            arrow=ArrowStyle.EMPTY if parent in interfaces else ArrowStyle.NORMAL,
        )
        for parent in decl.parents
    ]


def build_graph_data(declarations: list[Declaration]) -> GraphData:
    """Build a :class:`GraphData` description from all declarations.

    The interface-name set is collected from the complete list first, so an
    interface declared after one of its implementors still yields a hollow
    arrowhead.
    """
    interfaces = interface_names(declarations)
    return GraphData(
        nodes=[
            GraphNode(name=decl.name, label=node_label(decl), edges=node_edges(decl, interfaces))
            for decl in declarations
        ]
    )


def render_dot(data: GraphData, config: RenderConfig | None = None) -> str:
    """Render *data* as a DOT ``digraph`` block terminated by a newline."""
    config = config or RenderConfig()
    header = f"digraph {_dot_id(config.graph_name)} {{" if config.graph_name else "digraph {"
    lines = [header]
    for statement, attributes in (
        ("graph", config.graph_attributes),
        ("node", config.node_attributes),
        ("edge", config.edge_attributes),
    ):
        if attributes:
            lines.append(f"\t{statement} [{_attribute_list(attributes)}];")
    for node in data.nodes:
        lines.append(f'\t{_dot_id(node.name)} [label={_quote_label(node.label)}, shape="record"];')
        for edge in node.edges:
            lines.append(
                f"\t{_dot_id(edge.parent)} -> {_dot_id(edge.child)} [arrowtail={edge.arrow.value}, dir=back];"
            )
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_declarations(declarations: list[Declaration], config: RenderConfig | None = None) -> str:
    """Build and render *declarations* in one step."""
    return render_dot(build_graph_data(declarations), config)


# ################
# Implementation
# ################

_PLAIN_ID = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMERAL_ID = re.compile(r"-?(\.[0-9]+|[0-9]+(\.[0-9]*)?)")
_DOT_KEYWORDS = frozenset({"node", "edge", "graph", "digraph", "subgraph", "strict"})


def _class_label(decl: ClassDecl) -> str:
    properties = [f"{p.access.glyph} {p.name}: {p.type}" for p in decl.properties]
    operations = [f"{c.access.glyph} {decl.name}({_argument_list(c.arguments)})" for c in decl.constructors]
    if not decl.destructor.is_default():
        operations.append(f"{decl.destructor.access.glyph} ~{decl.name}()")
    operations += [_method_line(m) for m in decl.methods]
    compartments = [decl.name, "\n".join(properties), "\n".join(operations)]
    return "{" + "|".join(_escape_record(c) for c in compartments) + "}"


def _method_line(method: Method) -> str:
    return f"{method.access.glyph} {method.name}({_argument_list(method.arguments)}) -> {method.return_type}"


def _argument_list(arguments: list[Argument]) -> str:
    return ", ".join(str(arg) for arg in arguments)


def _escape_record(text: str) -> str:
    """Escape record-label metacharacters in *text*.

    ``{``, ``}`` and ``|`` delimit record fields and are backslash-escaped, as
    is the backslash itself. Angle brackets delimit ports and are written as
    entities.
    """
    for char in "\\{}|":
        text = text.replace(char, "\\" + char)
    return text.replace("<", "&lt;").replace(">", "&gt;")


def _quote(text: str) -> str:
    """Return *text* as a double-quoted DOT string."""
    return _quote_label(text.replace("\\", "\\\\"))


def _quote_label(label: str) -> str:
    """Double-quote an escaped record label, keeping its backslash escapes."""
    escaped = label.replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _dot_id(name: str) -> str:
    """Return *name* as a DOT identifier, quoting it unless it is a plain ID or numeral."""
    if _PLAIN_ID.fullmatch(name) and name.lower() not in _DOT_KEYWORDS:
        return name
    if _NUMERAL_ID.fullmatch(name):
        return name
    return _quote(name)


def _attribute_list(attributes: Mapping[str, AttributeValue]) -> str:
    return ", ".join(f"{_dot_id(key)}={_quote(_attribute_value(value))}" for key, value in attributes.items())


def _attribute_value(value: AttributeValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
