# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Module-level entities for the yangkit semantic model."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

from yangkit.model.nodes import Node
from yangkit.model.types import Identity, ModuleRef, TypeDef

# ###############
# Public Interface
# ###############


class Import(BaseModel):
    """An import of another module under a local prefix."""

    name: str
    prefix: str
    revision_date: str | None = None
    description: str | None = None
    reference: str | None = None


class Include(BaseModel):
    """An include of a submodule."""

    name: str
    revision_date: str | None = None
    description: str | None = None
    reference: str | None = None


class Revision(BaseModel):
    """One entry of a module's revision history."""

    date: str
    description: str | None = None
    reference: str | None = None


class Module(BaseModel):
    """Top-level schema unit holding imports, definitions, and the root node forest.

    Attributes:
        version: Language version marker; ``1`` selects "1.0", any other
            non-zero value "1.1", ``None`` omits the statement.
        nodes: Root nodes of the schema tree, in declaration order.
    """

    name: str
    namespace: str
    prefix: str
    version: int | None = None
    imports: list[Import] = _Field(default_factory=list)
    includes: list[Include] = _Field(default_factory=list)
    revisions: list[Revision] = _Field(default_factory=list)
    identities: list[Identity] = _Field(default_factory=list)
    typedefs: list[TypeDef] = _Field(default_factory=list)
    nodes: list[Node] = _Field(default_factory=list)
    organization: str | None = None
    contact: str | None = None
    description: str | None = None
    reference: str | None = None

    @property
    def ref(self) -> ModuleRef:
        """Return the reference identifying this module."""
        return ModuleRef(name=self.name, prefix=self.prefix)
