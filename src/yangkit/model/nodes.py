# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema tree nodes for the yangkit semantic model.

Nodes form a forest owned top-down: every node owns its ``children`` list.
The upward link needed for config inheritance is a weak reference installed
by the parent when it is constructed, so a child never keeps its parent
alive.
"""

from __future__ import annotations

import weakref
from enum import Enum
from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, PrivateAttr
from pydantic import Field as _Field

from yangkit.model.types import Definition, ModuleRef, TypeDef, TypeRef

# ###############
# Public Interface
# ###############


class NodeKind(Enum):
    """Kinds of schema tree nodes."""

    CONTAINER = "container"
    CHOICE = "choice"
    LEAF = "leaf"
    LEAF_LIST = "leaf-list"
    LIST = "list"
    GROUPING = "grouping"
    USES = "uses"


class DataNode(Definition):
    """Attributes shared by every schema tree node.

    Attributes:
        name: Node identifier.
        module: Module the node is defined in.
        config: Explicit config value, or ``None`` to inherit from the parent.
    """

    name: str
    module: ModuleRef
    config: bool | None = None

    _parent: weakref.ref[DataNode] | None = PrivateAttr(default=None)

    def model_post_init(self, context: Any, /) -> None:
        self._link_children()

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> Self:
        # Copied children still hold the original parent link.
        clone = super().__deepcopy__(memo)
        clone._link_children()
        return clone

    def _link_children(self) -> None:
        for child in getattr(self, "children", ()):
            child._parent = weakref.ref(self)

    @property
    def parent(self) -> DataNode | None:
        """Return the parent node, or None for a module root."""
        return self._parent() if self._parent is not None else None

    @property
    def effective_config(self) -> bool | None:
        """Return the explicit config value of the nearest node up the parent chain that has one."""
        node: DataNode | None = self
        while node is not None:
            if node.config is not None:
                return node.config
            node = node.parent
        return None

    def __eq__(self, other: object) -> bool:
        # Parent links are left out: comparing them would recurse into this node again.
        if not isinstance(other, BaseModel):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__


class Container(DataNode):
    """An interior node grouping its children."""

    kind: Literal[NodeKind.CONTAINER] = NodeKind.CONTAINER
    typedefs: list[TypeDef] = _Field(default_factory=list)
    children: list[Node] = _Field(default_factory=list)


class Choice(DataNode):
    """A set of mutually exclusive alternatives."""

    kind: Literal[NodeKind.CHOICE] = NodeKind.CHOICE
    children: list[Node] = _Field(default_factory=list)


class Leaf(DataNode):
    """A single typed value."""

    kind: Literal[NodeKind.LEAF] = NodeKind.LEAF
    type: TypeRef


class LeafList(DataNode):
    """A sequence of typed values."""

    kind: Literal[NodeKind.LEAF_LIST] = NodeKind.LEAF_LIST
    type: TypeRef


class List(DataNode):
    """A keyed sequence of entries.

    ``keys`` refers to leaves among the list's own ``children``; their order is
    the declared key order.
    """

    kind: Literal[NodeKind.LIST] = NodeKind.LIST
    keys: list[Leaf] = _Field(default_factory=list)
    typedefs: list[TypeDef] = _Field(default_factory=list)
    children: list[Node] = _Field(default_factory=list)


class Grouping(DataNode):
    """A reusable set of nodes."""

    kind: Literal[NodeKind.GROUPING] = NodeKind.GROUPING
    typedefs: list[TypeDef] = _Field(default_factory=list)
    children: list[Node] = _Field(default_factory=list)


class Uses(DataNode):
    """A reference to a grouping by name."""

    kind: Literal[NodeKind.USES] = NodeKind.USES


# A schema tree node — one case per NodeKind.
# The `kind` discriminator field selects the variant.
Node = Annotated[
    Container | Choice | Leaf | LeafList | List | Grouping | Uses,
    _Field(discriminator="kind"),
]


# Resolve forward references for models that use Node.
Container.model_rebuild()
Choice.model_rebuild()
List.model_rebuild()
Grouping.model_rebuild()
