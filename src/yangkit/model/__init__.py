# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic model for yangkit (modules, definitions, and schema tree nodes)."""

from yangkit.model.entities import Import, Include, Module, Revision
from yangkit.model.nodes import (
    Choice,
    Container,
    DataNode,
    Grouping,
    Leaf,
    LeafList,
    List,
    Node,
    NodeKind,
    Uses,
)
from yangkit.model.types import (
    Definition,
    EnumDef,
    Identity,
    ModuleRef,
    Status,
    TypeBase,
    TypeDef,
    TypeRef,
)

__all__ = [
    # Type system
    "Status",
    "TypeBase",
    "ModuleRef",
    "Definition",
    "EnumDef",
    "Identity",
    "TypeRef",
    "TypeDef",
    # Nodes
    "NodeKind",
    "DataNode",
    "Container",
    "Choice",
    "Leaf",
    "LeafList",
    "List",
    "Grouping",
    "Uses",
    "Node",
    # Entities
    "Import",
    "Include",
    "Revision",
    "Module",
]
