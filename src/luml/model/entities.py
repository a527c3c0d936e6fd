# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Class and interface declarations for the LUML semantic model."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from luml.model.types import TypeRef

# ###############
# Public Interface
# ###############


class AccessModifier(Enum):
    """Member visibility. Members outside a section are public."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    @property
    def glyph(self) -> str:
        """The UML visibility marker (``+``, ``#`` or ``-``)."""
        return _GLYPHS[self]

    def is_default(self) -> bool:
        return self is AccessModifier.PUBLIC


class DestructorKind(Enum):
    """How a class's destructor is provided."""

    DEFAULT = "default"
    CUSTOM = "custom"
    VIRTUAL = "virtual"
    DELETED = "deleted"


class Argument(BaseModel):
    """A constructor or method parameter. ``name`` is None for anonymous parameters."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    type: TypeRef

    def __str__(self) -> str:
        if self.name is None:
            return str(self.type)
        return f"{self.name}: {self.type}"


class Constructor(BaseModel):
    model_config = ConfigDict(frozen=True)

    access: AccessModifier = AccessModifier.PUBLIC
    arguments: list[Argument] = _Field(default_factory=list)


class Destructor(BaseModel):
    """A destructor descriptor.

    The default destructor (public, compiler-provided) counts as absent and is
    not shown in diagrams.
    """

    model_config = ConfigDict(frozen=True)

    access: AccessModifier = AccessModifier.PUBLIC
    kind: DestructorKind = DestructorKind.DEFAULT

    def is_default(self) -> bool:
        """Return True if this destructor carries no information worth rendering."""
        return self.access.is_default() and self.kind is DestructorKind.DEFAULT


class Method(BaseModel):
    model_config = ConfigDict(frozen=True)

    access: AccessModifier = AccessModifier.PUBLIC
    name: str
    arguments: list[Argument] = _Field(default_factory=list)
    return_type: TypeRef


class Property(BaseModel):
    model_config = ConfigDict(frozen=True)

    access: AccessModifier = AccessModifier.PUBLIC
    name: str
    type: TypeRef


class ClassDecl(BaseModel):
    """A class with parents, constructors, a destructor, methods, and properties."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["class"] = "class"
    name: str = _Field(min_length=1)
    parents: list[str] = _Field(default_factory=list)
    constructors: list[Constructor] = _Field(default_factory=list)
    destructor: Destructor = _Field(default_factory=Destructor)
    methods: list[Method] = _Field(default_factory=list)
    properties: list[Property] = _Field(default_factory=list)


class InterfaceDecl(BaseModel):
    """An interface: a named set of public methods, optionally extending other types."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["interface"] = "interface"
    name: str = _Field(min_length=1)
    parents: list[str] = _Field(default_factory=list)
    methods: list[Method] = _Field(default_factory=list)


# A top-level declaration. Parent names refer to other declarations by name
# only; nothing checks that they exist.
Declaration = Annotated[ClassDecl | InterfaceDecl, _Field(discriminator="kind")]


# ################
# Implementation
# ################

_GLYPHS: dict[AccessModifier, str] = {
    AccessModifier.PUBLIC: "+",
    AccessModifier.PROTECTED: "#",
    AccessModifier.PRIVATE: "-",
}
