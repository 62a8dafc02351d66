# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""YANG printer for the yangkit semantic model.

Renders a :class:`~yangkit.model.entities.Module` as YANG text by a single
read-only, depth-first walk of the model. Every decision is taken from the
model alone; the writer is only ever written to.

Two policies shape the output:

* **Config suppression** — ``config`` is printed on a root node, and on any
  other node only where its effective value differs from its parent's.
* **Legal-kind masks** — each context lists the node kinds it may contain.
  A node of any other kind is left out of the output; this is not an error.

References to identities are qualified with the owning module's prefix when
that module is not the one whose definitions are being printed.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterable
from typing import Any, BinaryIO

from yangkit.config.logging import get_logger
from yangkit.config.settings import PrinterSettings
from yangkit.model.entities import Module
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
from yangkit.model.types import Definition, Identity, ModuleRef, TypeBase, TypeDef, TypeRef
from yangkit.printer.writer import Writer

logger = get_logger(__name__)

# ###############
# Public Interface
# ###############

# Node kinds printed inside a module, container, list, or grouping.
CONTAINER_CHILDREN: frozenset[NodeKind] = frozenset(
    {
        NodeKind.CHOICE,
        NodeKind.CONTAINER,
        NodeKind.LEAF,
        NodeKind.LEAF_LIST,
        NodeKind.LIST,
        NodeKind.USES,
        NodeKind.GROUPING,
    }
)

# Node kinds printed inside a choice.
CHOICE_CHILDREN: frozenset[NodeKind] = frozenset(
    {
        NodeKind.CONTAINER,
        NodeKind.LEAF,
        NodeKind.LEAF_LIST,
        NodeKind.LIST,
    }
)


def print_module(sink: BinaryIO, module: Module, settings: PrinterSettings | None = None) -> None:
    """Print *module* as YANG text to *sink*.

    The statements are written in a fixed order: header, imports, includes,
    meta information, revisions, identities, typedefs, and the node forest.

    Args:
        sink: Byte-oriented stream receiving UTF-8 text. The caller owns it
            and disposes of partial output after a failure.
        module: The module to print. It is never modified.
        settings: Printing options; defaults to :class:`PrinterSettings`.

    Raises:
        PrinterError: If writing to *sink* fails. Printing stops at the first
            failed write.
    """
    out = Writer(sink=sink, settings=settings or PrinterSettings())
    logger.debug("Printing module '%s'", module.name)

    with out.block(f"module {module.name}"):
        out.emit(f'namespace "{module.namespace}";')
        out.emit(f'prefix "{module.prefix}";')
        if module.version:
            out.emit(f'yang-version "{"1.0" if module.version == 1 else "1.1"}";')

        _print_linkage(out, module)
        _print_meta(out, module)
        _print_revisions(out, module)

        for ident in module.identities:
            _print_identity(out, ident)
        for tpdf in module.typedefs:
            _print_typedef(out, module.ref, tpdf)

        _print_children(out, module.nodes, CONTAINER_CHILDREN)

    logger.debug("Finished module '%s'", module.name)


def dumps(module: Module, settings: PrinterSettings | None = None) -> str:
    """Return the YANG text of *module* as a string."""
    buffer = io.BytesIO()
    print_module(buffer, module, settings)
    return buffer.getvalue().decode("utf-8")


# ################
# Implementation
# ################


def _print_linkage(out: Writer, module: Module) -> None:
    """Print import and include statements."""
    for imp in module.imports:
        with out.block(f'import "{imp.name}"'):
            out.emit(f'prefix "{imp.prefix}";')
            if imp.revision_date:
                out.emit(f'revision-date "{imp.revision_date}";')

    for index, inc in enumerate(module.includes):
        if not inc.revision_date:
            out.emit(f'include "{inc.name}";')
            continue
        revision_date = _include_revision_date(module, index, out.settings)
        with out.block(f'include "{inc.name}"'):
            if revision_date:
                out.emit(f'revision-date "{revision_date}";')


def _include_revision_date(module: Module, index: int, settings: PrinterSettings) -> str | None:
    """Return the revision date printed inside the include block at *index*.

    With the legacy ``"import"`` source the date comes from the import at the
    same position, if there is one.
    """
    if settings.include_revision_source == "import":
        if index < len(module.imports):
            return module.imports[index].revision_date
        return None
    return module.includes[index].revision_date


def _print_meta(out: Writer, module: Module) -> None:
    if module.organization is not None:
        out.text("organization", module.organization)
    if module.contact is not None:
        out.text("contact", module.contact)
    if module.description is not None:
        out.text("description", module.description)
    if module.reference is not None:
        out.text("reference", module.reference)


def _print_revisions(out: Writer, module: Module) -> None:
    for rev in module.revisions:
        if rev.description is None and rev.reference is None:
            out.emit(f'revision "{rev.date}";')
            continue
        with out.block(f'revision "{rev.date}"'):
            if rev.description is not None:
                out.text("description", rev.description)
            if rev.reference is not None:
                out.text("reference", rev.reference)


def _print_common(out: Writer, definition: Definition) -> None:
    """Print status, description, and reference, in that order."""
    if definition.status is not None:
        out.emit(f'status "{definition.status.value}";')
    if definition.description is not None:
        out.text("description", definition.description)
    if definition.reference is not None:
        out.text("reference", definition.reference)


def _print_common_with_config(out: Writer, node: DataNode) -> None:
    """Print config where it is not inherited unchanged, then the common fields."""
    config = node.effective_config
    parent = node.parent
    if config is not None and (parent is None or parent.effective_config != config):
        out.emit(f'config "{"true" if config else "false"}";')
    _print_common(out, node)


def _qualify(ident: Identity, module: ModuleRef) -> str:
    """Return the name of *ident* as referenced from *module*."""
    if ident.module == module:
        return ident.name
    return f"{ident.module.prefix}:{ident.name}"


def _print_type(out: Writer, module: ModuleRef, type_ref: TypeRef) -> None:
    name = f"{type_ref.prefix}:{type_ref.name}" if type_ref.prefix else type_ref.name
    with out.block(f"type {name}"):
        if type_ref.base is TypeBase.ENUMERATION:
            for enum in type_ref.enums:
                with out.block(f'enum "{enum.name}"'):
                    _print_common(out, enum)
                    out.emit(f"value {enum.value};")
        elif type_ref.base is TypeBase.IDENTITYREF:
            if type_ref.identity is not None:
                out.emit(f"base {_qualify(type_ref.identity, module)};")
        # Other bases have no body to print.


def _print_typedef(out: Writer, module: ModuleRef, tpdf: TypeDef) -> None:
    with out.block(f"typedef {tpdf.name}"):
        _print_common(out, tpdf)
        _print_type(out, module, tpdf.type)


def _print_identity(out: Writer, ident: Identity) -> None:
    with out.block(f"identity {ident.name}"):
        _print_common(out, ident)
        if ident.base is not None:
            out.emit(f"base {_qualify(ident.base, ident.module)};")


def _print_children(out: Writer, nodes: Iterable[Node], allowed: frozenset[NodeKind]) -> None:
    for node in nodes:
        _print_node(out, node, allowed)


def _print_node(out: Writer, node: Node, allowed: frozenset[NodeKind]) -> None:
    """Print *node* with its kind's printer if the kind is in *allowed*."""
    if node.kind not in allowed:
        logger.debug("Omitting %s '%s': kind not allowed in this context", node.kind.value, node.name)
        return
    _NODE_PRINTERS[node.kind](out, node)


def _print_container(out: Writer, node: Container) -> None:
    with out.block(f"container {node.name}"):
        _print_common_with_config(out, node)
        for tpdf in node.typedefs:
            _print_typedef(out, node.module, tpdf)
        _print_children(out, node.children, CONTAINER_CHILDREN)


def _print_choice(out: Writer, node: Choice) -> None:
    with out.block(f"choice {node.name}"):
        _print_common_with_config(out, node)
        _print_children(out, node.children, CHOICE_CHILDREN)


def _print_leaf(out: Writer, node: Leaf) -> None:
    with out.block(f"leaf {node.name}"):
        _print_common_with_config(out, node)
        _print_type(out, node.module, node.type)


def _print_leaf_list(out: Writer, node: LeafList) -> None:
    with out.block(f"leaf-list {node.name}"):
        _print_common_with_config(out, node)
        _print_type(out, node.module, node.type)


def _print_list(out: Writer, node: List) -> None:
    with out.block(f"list {node.name}"):
        _print_common_with_config(out, node)
        if node.keys:
            out.emit(f'key "{" ".join(key.name for key in node.keys)}";')
        for tpdf in node.typedefs:
            _print_typedef(out, node.module, tpdf)
        _print_children(out, node.children, CONTAINER_CHILDREN)


def _print_grouping(out: Writer, node: Grouping) -> None:
    with out.block(f"grouping {node.name}"):
        _print_common(out, node)
        for tpdf in node.typedefs:
            _print_typedef(out, node.module, tpdf)
        _print_children(out, node.children, CONTAINER_CHILDREN)


def _print_uses(out: Writer, node: Uses) -> None:
    with out.block(f"uses {node.name}"):
        _print_common(out, node)


_NODE_PRINTERS: dict[NodeKind, Callable[[Writer, Any], None]] = {
    NodeKind.CONTAINER: _print_container,
    NodeKind.CHOICE: _print_choice,
    NodeKind.LEAF: _print_leaf,
    NodeKind.LEAF_LIST: _print_leaf_list,
    NodeKind.LIST: _print_list,
    NodeKind.GROUPING: _print_grouping,
    NodeKind.USES: _print_uses,
}
