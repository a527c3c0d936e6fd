# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON export of compiled declaration models.

The document is versioned so future schema changes can be detected::

    {"v": "1", "declarations": [...]}
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter

from luml.model.entities import Declaration

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".luml.json"


def serialize(declarations: list[Declaration]) -> str:
    """Serialize declarations to a compact JSON string."""
    obj = {
        "v": ARTIFACT_FORMAT_VERSION,
        "declarations": _ADAPTER.dump_python(declarations, mode="json"),
    }
    return json.dumps(obj, separators=(",", ":"))


def deserialize(data: str) -> list[Declaration]:
    """Deserialize declarations from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed declarations in their original order.

    Raises:
        ValueError: If the format version is not recognised or the document
            does not match the model schema.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return _ADAPTER.validate_python(obj.get("declarations", []))


def write_artifact(declarations: list[Declaration], path: Path) -> None:
    """Write declarations to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(declarations), encoding="utf-8")


def read_artifact(path: Path) -> list[Declaration]:
    """Read and deserialize declarations from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################

_ADAPTER: TypeAdapter[list[Declaration]] = TypeAdapter(list[Declaration])
