# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for .luml files: reading, shape building, and model export."""

from luml.compiler.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from luml.compiler.build import CompilerError, compile_file, compile_source
from luml.compiler.builder import (
    ShapeError,
    build_argument,
    build_constructor,
    build_declaration,
    build_declarations,
    build_method,
    build_property,
    build_type,
)

__all__ = [
    "build_type",
    "build_argument",
    "build_constructor",
    "build_method",
    "build_property",
    "build_declaration",
    "build_declarations",
    "ShapeError",
    "compile_source",
    "compile_file",
    "CompilerError",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
]
