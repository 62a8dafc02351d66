# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type system representations for the yangkit semantic model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Status(Enum):
    """Lifecycle marker of a definition."""

    CURRENT = "current"
    DEPRECATED = "deprecated"
    OBSOLETE = "obsolete"


class TypeBase(Enum):
    """Built-in base kind a type is ultimately derived from."""

    ENUMERATION = "enumeration"
    IDENTITYREF = "identityref"
    OTHER = "other"


class ModuleRef(BaseModel):
    """Identifies the module owning a definition.

    The prefix is the module's own prefix, used to qualify references to its
    definitions from other modules.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    prefix: str


class Definition(BaseModel):
    """Fields shared by every documented definition: status, description, reference."""

    status: Status | None = None
    description: str | None = None
    reference: str | None = None


class EnumDef(Definition):
    """A single member of an enumeration type."""

    name: str
    value: int


class Identity(Definition):
    """A named token in a base/derived identity hierarchy."""

    name: str
    module: ModuleRef
    base: Identity | None = None


class TypeRef(BaseModel):
    """A reference to a type, optionally qualified, with its kind-specific payload.

    Attributes:
        name: Name of the type this one is derived from (``string``, ``my-type`` ...).
        prefix: Prefix qualifying ``name`` when it lives in another module.
        base: Built-in base kind deciding which body is printed.
        enums: Members of an enumeration, in declaration order.
        identity: Base identity of an identity reference.
    """

    name: str
    prefix: str | None = None
    base: TypeBase = TypeBase.OTHER
    enums: list[EnumDef] = _Field(default_factory=list)
    identity: Identity | None = None


class TypeDef(Definition):
    """A named, reusable type definition at module or node scope."""

    name: str
    module: ModuleRef
    type: TypeRef


# Resolve forward references in self-referential models.
Identity.model_rebuild()
