# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct the yangkit semantic model."""

import gc

from yangkit.model import (
    Choice,
    Container,
    EnumDef,
    Grouping,
    Identity,
    Import,
    Leaf,
    LeafList,
    List,
    Module,
    ModuleRef,
    NodeKind,
    Status,
    TypeBase,
    TypeDef,
    TypeRef,
    Uses,
)

MOD = ModuleRef(name="example", prefix="ex")
STRING = TypeRef(name="string")


def _leaf(name: str, config: bool | None = None) -> Leaf:
    return Leaf(name=name, module=MOD, type=STRING, config=config)


def test_module_ref_equality() -> None:
    """Module references compare by value."""
    assert ModuleRef(name="example", prefix="ex") == MOD
    assert ModuleRef(name="other", prefix="ot") != MOD


def test_module_ref_of_module() -> None:
    """Module.ref identifies the module by name and prefix."""
    module = Module(name="example", namespace="urn:example", prefix="ex")
    assert module.ref == MOD


def test_node_kinds() -> None:
    """Each node variant carries its kind discriminator."""
    assert Container(name="c", module=MOD).kind is NodeKind.CONTAINER
    assert Choice(name="ch", module=MOD).kind is NodeKind.CHOICE
    assert _leaf("l").kind is NodeKind.LEAF
    assert LeafList(name="ll", module=MOD, type=STRING).kind is NodeKind.LEAF_LIST
    assert List(name="li", module=MOD).kind is NodeKind.LIST
    assert Grouping(name="g", module=MOD).kind is NodeKind.GROUPING
    assert Uses(name="u", module=MOD).kind is NodeKind.USES


def test_root_node_has_no_parent() -> None:
    """A node not placed under another node is a root."""
    assert _leaf("alone").parent is None


def test_children_point_back_to_parent() -> None:
    """Constructing a node installs the parent link on each of its children."""
    leaf = _leaf("name")
    inner = Container(name="inner", module=MOD, children=[leaf])
    outer = Container(name="outer", module=MOD, children=[inner])

    assert outer.children[0].parent is outer
    assert inner.children[0].parent is inner
    assert outer.parent is None


def test_parent_link_is_weak() -> None:
    """A child does not keep its parent alive."""
    leaf = _leaf("name")
    parent = Container(name="top", module=MOD, children=[leaf])
    assert leaf.parent is parent

    del parent
    gc.collect()
    assert leaf.parent is None


def test_deep_copy_relinks_children() -> None:
    """A deep copy's children point at the copied parent, not the original."""
    module = Module(
        name="example",
        namespace="urn:example",
        prefix="ex",
        nodes=[Container(name="top", module=MOD, config=False, children=[_leaf("name")])],
    )
    clone = module.model_copy(deep=True)
    del module
    gc.collect()

    top = clone.nodes[0]
    assert top.children[0].parent is top
    assert top.children[0].effective_config is False


def test_effective_config_inherits_from_parent() -> None:
    """A node without an explicit config value takes its parent's effective value."""
    leaf = _leaf("name")
    mid = Container(name="mid", module=MOD, children=[leaf])
    top = Container(name="top", module=MOD, config=False, children=[mid])

    assert top.effective_config is False
    assert mid.effective_config is False
    assert leaf.effective_config is False


def test_explicit_config_overrides_parent() -> None:
    """An explicit config value wins over the inherited one."""
    leaf = _leaf("counter", config=False)
    top = Container(name="top", module=MOD, config=True, children=[leaf])
    assert leaf.parent is top
    assert leaf.effective_config is False


def test_effective_config_absent_without_explicit_value() -> None:
    """With no explicit value anywhere up the chain the effective config is None."""
    leaf = _leaf("name")
    top = Container(name="top", module=MOD, children=[leaf])
    assert leaf.parent is top
    assert leaf.effective_config is None


def test_list_keys_reference_children_in_declared_order() -> None:
    """List keys keep declaration order and refer to the list's own leaves."""
    a = _leaf("a")
    b = _leaf("b")
    entry = List(name="entry", module=MOD, keys=[b, a], children=[a, b])

    assert [key.name for key in entry.keys] == ["b", "a"]
    assert entry.keys[0].parent is entry


def test_choice_children_preserve_order() -> None:
    """Children are kept in declaration order."""
    choice = Choice(name="transport", module=MOD, children=[_leaf("udp"), _leaf("tcp"), _leaf("sctp")])
    assert [child.name for child in choice.children] == ["udp", "tcp", "sctp"]


def test_enumeration_type() -> None:
    """An enumeration type lists its members with values."""
    type_ref = TypeRef(
        name="enumeration",
        base=TypeBase.ENUMERATION,
        enums=[
            EnumDef(name="up", value=1),
            EnumDef(name="down", value=2, status=Status.DEPRECATED),
        ],
    )
    assert [e.name for e in type_ref.enums] == ["up", "down"]
    assert type_ref.enums[1].status is Status.DEPRECATED


def test_identity_base_in_other_module() -> None:
    """An identity may derive from an identity owned by a different module."""
    other = ModuleRef(name="crypto-base", prefix="cb")
    base = Identity(name="crypto-alg", module=other)
    derived = Identity(name="aes", module=MOD, base=base)

    assert derived.base is not None
    assert derived.base.module == other


def test_typedef_defaults() -> None:
    """A typedef has no status, description, or reference unless given."""
    tpdf = TypeDef(name="percent", module=MOD, type=TypeRef(name="uint8"))
    assert tpdf.status is None
    assert tpdf.description is None
    assert tpdf.reference is None
    assert tpdf.type.base is TypeBase.OTHER


def test_module_collections_default_empty() -> None:
    """A freshly built module has empty ordered collections."""
    module = Module(name="example", namespace="urn:example", prefix="ex")
    assert module.imports == []
    assert module.includes == []
    assert module.revisions == []
    assert module.identities == []
    assert module.typedefs == []
    assert module.nodes == []
    assert module.version is None


def test_module_holds_root_forest() -> None:
    """Root nodes placed in a module have no parent."""
    top = Container(name="top", module=MOD)
    module = Module(
        name="example",
        namespace="urn:example",
        prefix="ex",
        imports=[Import(name="ietf-inet-types", prefix="inet")],
        nodes=[top, _leaf("flag")],
    )
    assert [node.name for node in module.nodes] == ["top", "flag"]
    assert module.nodes[0].parent is None


def test_nodes_compare_by_fields() -> None:
    """Structurally identical subtrees compare equal despite distinct parents."""
    first = Container(name="top", module=MOD, children=[_leaf("a")])
    second = Container(name="top", module=MOD, children=[_leaf("a")])
    assert first == second
    assert first.children[0] == second.children[0]
