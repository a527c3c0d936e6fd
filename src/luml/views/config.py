# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Optional YAML configuration for DOT rendering.

Example ``luml.yaml``::

    graph-name: Classes
    graph-attributes:
      rankdir: BT
    node-attributes:
      fontname: Helvetica
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = "luml.yaml"

# Scalar DOT attribute value as written in YAML; always emitted quoted.
# Booleans stay booleans (not 1/0) and are written as true/false.
AttributeValue = StrictBool | str | int | float


class RenderConfigError(Exception):
    """Raised when a rendering configuration file cannot be read or is invalid."""


class RenderConfig(BaseModel):
    """Graph-level settings applied when rendering DOT output.

    The defaults produce a plain, unnamed ``digraph`` with no attribute
    statements.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    graph_name: str | None = Field(alias="graph-name", default=None)
    graph_attributes: dict[str, AttributeValue] = Field(alias="graph-attributes", default_factory=dict)
    node_attributes: dict[str, AttributeValue] = Field(alias="node-attributes", default_factory=dict)
    edge_attributes: dict[str, AttributeValue] = Field(alias="edge-attributes", default_factory=dict)


def load_render_config(path: Path) -> RenderConfig:
    """Load and validate a rendering configuration file.

    An empty file is treated as the default configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated RenderConfig instance.

    Raises:
        RenderConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RenderConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RenderConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RenderConfigError(f"Config file '{path}' must be a YAML mapping")

    try:
        return RenderConfig.model_validate(data)
    except ValidationError as exc:
        raise RenderConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_render_config(input_file: Path) -> Path | None:
    """Return the ``luml.yaml`` next to *input_file*, or None if there is none."""
    candidate = input_file.parent / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None
