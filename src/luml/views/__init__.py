# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagram views of LUML models."""

from luml.views.config import RenderConfig, RenderConfigError, find_render_config, load_render_config
from luml.views.dot import (
    ArrowStyle,
    GraphData,
    GraphEdge,
    GraphNode,
    build_graph_data,
    interface_names,
    node_edges,
    node_label,
    render_declarations,
    render_dot,
)

__all__ = [
    "ArrowStyle",
    "GraphData",
    "GraphEdge",
    "GraphNode",
    "build_graph_data",
    "interface_names",
    "node_edges",
    "node_label",
    "render_declarations",
    "render_dot",
    "RenderConfig",
    "RenderConfigError",
    "find_render_config",
    "load_render_config",
]
