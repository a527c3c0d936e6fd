# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic model for LUML (classes, interfaces, members, and types)."""

from luml.model.entities import (
    AccessModifier,
    Argument,
    ClassDecl,
    Constructor,
    Declaration,
    Destructor,
    DestructorKind,
    InterfaceDecl,
    Method,
    Property,
)
from luml.model.types import BaseType, TypeApplication, TypeRef

__all__ = [
    # Type system
    "BaseType",
    "TypeApplication",
    "TypeRef",
    # Members
    "AccessModifier",
    "Argument",
    "Constructor",
    "Destructor",
    "DestructorKind",
    "Method",
    "Property",
    # Declarations
    "ClassDecl",
    "InterfaceDecl",
    "Declaration",
]
