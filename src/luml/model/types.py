# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type references for the LUML semantic model."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class BaseType(BaseModel):
    """A plain, non-generic type such as ``int`` or ``Widget``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["base"] = "base"
    name: str

    def __str__(self) -> str:
        return self.name


class TypeApplication(BaseModel):
    """A generic type applied to an ordered list of type arguments, e.g. ``List<int>``.

    The head is usually a :class:`BaseType`, but may itself be an application
    (``((Map string) int)`` renders as ``Map<string><int>``).
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["app"] = "app"
    head: TypeRef
    arguments: list[TypeRef] = _Field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.head}<{', '.join(str(arg) for arg in self.arguments)}>"


# A type reference: either a plain name or a generic application.
# The `kind` discriminator keeps JSON round-trips unambiguous.
TypeRef = Annotated[BaseType | TypeApplication, _Field(discriminator="kind")]


# Resolve the self-reference through TypeRef.
TypeApplication.model_rebuild()
