"""Unit tests for TransactionLayer implementation."""

import pytest
from simpledb.components.layer import TransactionLayer


@pytest.fixture
def base():
    """Create base layer holding name1=value1 and name2=value."""
    layer = TransactionLayer()
    layer.set("name2", "value")
    layer.set("name1", "value1")
    return layer


@pytest.fixture
def child(base):
    """Create a layer nested in the base layer."""
    return TransactionLayer(parent=base)


def test_layer_base_properties(base, child):
    """Test parent links and depth."""
    assert base.is_base
    assert base.parent is None
    assert base.depth == 0

    assert not child.is_base
    assert child.parent is base
    assert child.depth == 1
    assert TransactionLayer(parent=child).depth == 2


def test_layer_reads_fall_through_to_parent(child):
    """Test that untouched keys resolve from the parent."""
    assert child.get("name1") == "value1"
    assert child.get("name2") == "value"
    assert child.get("missing") is None
    assert len(child) == 0


def test_layer_write_shadows_parent(base, child):
    """Test that child writes are visible only in the child."""
    child.set("name1", "value2")
    child.set("name3", "value")

    assert child.get("name1") == "value2"
    assert base.get("name1") == "value1"
    assert base.get("name3") is None
    assert child.count("value") == 2
    assert base.count("value") == 1


def test_layer_delete_shadows_parent(base, child):
    """Test that a child delete hides the parent value."""
    child.delete("name2")

    assert child.get("name2") is None
    assert child.count("value") == 0
    assert base.get("name2") == "value"
    assert base.count("value") == 1


def test_layer_counts_through_deletes(base, child):
    """Test counts as keys are shadowed and deleted."""
    child.set("name1", "value2")
    child.set("name3", "value")
    assert child.count("value") == 2

    child.delete("name3")
    assert child.count("value") == 1

    child.delete("name2")
    assert child.count("value") == 0
    assert base.count("value") == 1


def test_layer_shadow_adjustment_applied_once(child):
    """Test repeated deletes of an inherited key only adjust once."""
    child.delete("name2")
    child.delete("name2")
    child.set("name2", "other")
    child.delete("name2")

    assert child.count("value") == 0
    assert child.count("other") == 0
    assert child.get("name2") is None


def test_layer_restore_inherited_value(child):
    """Test setting an inherited key back to its parent value."""
    child.set("name2", "changed")
    assert child.count("value") == 0

    child.set("name2", "value")
    assert child.count("value") == 1
    assert child.count("changed") == 0


def test_layer_delete_missing_key_has_no_effect_on_counts(child):
    """Test deleting a key absent everywhere leaves counts alone."""
    child.delete("ghost")

    assert child.get("ghost") is None
    assert child.count("value") == 1
    assert child.count("value1") == 1


def test_layer_tombstone_shadows_across_levels(base):
    """Test a middle-layer delete hides the base value from a grandchild."""
    middle = TransactionLayer(parent=base)
    middle.delete("name1")
    top = TransactionLayer(parent=middle)

    assert top.get("name1") is None
    assert top.count("value1") == 0

    top.set("name1", "value1")
    assert top.count("value1") == 1
    assert middle.count("value1") == 0
    assert base.count("value1") == 1


def test_layer_items_are_local_only(child):
    """Test items() reports only the layer's own entries."""
    child.set("b", "x")
    child.delete("name1")

    assert list(child.items()) == [("b", "x"), ("name1", None)]


def test_layer_compact(base):
    """Test compact drops local tombstones."""
    base.delete("name1")
    base.compact()

    assert [key for key, _ in base.items()] == ["name2"]
    assert base.get("name1") is None


def test_layer_deep_nesting():
    """Test reads and counts through a long parent chain."""
    layer = TransactionLayer()
    layer.set("k", "v")
    for _ in range(5000):
        layer = TransactionLayer(parent=layer)

    assert layer.get("k") == "v"
    assert layer.count("v") == 1

    layer.delete("k")
    assert layer.count("v") == 0


def test_layer_base_delete_removes_entry(base):
    """Test the base layer drops deleted keys instead of keeping tombstones."""
    base.delete("name1")
    base.delete("ghost")

    assert not any(key in ("name1", "ghost") for key, _ in base.items())
    assert len(base) == 1
    assert base.count("value1") == 0


def test_layer_child_delete_still_tombstones(child):
    """Test nested layers keep tombstones for unknown keys."""
    child.delete("ghost")

    assert list(child.items()) == [("ghost", None)]
