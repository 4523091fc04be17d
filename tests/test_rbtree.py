import random

import pytest

from collectkit.rbtree import Color, InvariantError, RBTree, Violation


def build(keys, cmp=None):
    tree = RBTree(cmp)
    for key in keys:
        tree.insert(key, str(key))
    return tree


def test_empty_tree():
    tree = RBTree()
    assert len(tree) == 0
    assert tree.minimum() is None
    assert tree.maximum() is None
    assert tree.find(1) is None
    assert list(tree.nodes()) == []
    assert tree.check_invariants() == 1


def test_insert_and_find():
    tree = build([5, 2, 8, 1, 9])
    assert len(tree) == 5
    node = tree.find(8)
    assert node.key == 8
    assert node.value == "8"
    assert tree.find(7) is None


def test_insert_existing_key_replaces_value():
    tree = build([1, 2, 3])
    first = tree.find(2)
    again = tree.insert(2, "two")
    assert again is first
    assert len(tree) == 3
    assert tree.find(2).value == "two"


def test_three_keys_shape():
    tree = build([1, 2, 3])
    root = tree.find(2)
    assert root.color is Color.BLACK
    assert tree.find(1).color is Color.RED
    assert tree.find(3).color is Color.RED
    assert tree.check_invariants() == 2


def test_nodes_in_order_and_invariants():
    keys = list(range(100))
    random.Random(7).shuffle(keys)
    tree = RBTree()
    for key in keys:
        tree.insert(key, key * 2)
        tree.check_invariants()
    assert [n.key for n in tree.nodes()] == list(range(100))
    assert [n.value for n in tree.nodes()] == [k * 2 for k in range(100)]


def test_minimum_maximum():
    tree = build([40, 10, 70, 30])
    assert tree.minimum().key == 10
    assert tree.maximum().key == 70


def test_successor_and_predecessor():
    tree = build([5, 3, 9, 1, 4])
    keys = []
    node = tree.minimum()
    while node is not None:
        keys.append(node.key)
        node = tree.successor(node)
    assert keys == [1, 3, 4, 5, 9]
    back = []
    node = tree.maximum()
    while node is not None:
        back.append(node.key)
        node = tree.predecessor(node)
    assert back == [9, 5, 4, 3, 1]
    assert tree.successor(tree.maximum()) is None
    assert tree.predecessor(tree.minimum()) is None
    assert tree.successor(None) is None


def test_delete_in_random_order_keeps_invariants():
    keys = list(range(60))
    tree = build(keys)
    order = keys[:]
    random.Random(3).shuffle(order)
    remaining = set(keys)
    for key in order:
        tree.delete(tree.find(key))
        remaining.discard(key)
        tree.check_invariants()
        assert len(tree) == len(remaining)
        assert [n.key for n in tree.nodes()] == sorted(remaining)
    assert tree.minimum() is None


def test_delete_keeps_other_nodes_identity():
    tree = build(range(20))
    held = tree.find(11)
    tree.delete(tree.find(10))
    assert tree.find(11) is held
    assert tree.successor(tree.find(9)) is held


def test_delete_foreign_node_raises():
    tree = build([1, 2])
    node = tree.find(1)
    tree.delete(node)
    with pytest.raises(ValueError):
        tree.delete(node)
    with pytest.raises(ValueError):
        tree.delete(None)


def test_clear():
    tree = build(range(10))
    tree.clear()
    assert len(tree) == 0
    assert tree.find(3) is None
    tree.insert(4, "x")
    assert [n.key for n in tree.nodes()] == [4]


def test_custom_comparator_reverses_order():
    tree = build([3, 1, 2], cmp=lambda a, b: (b > a) - (b < a))
    assert [n.key for n in tree.nodes()] == [3, 2, 1]
    assert tree.minimum().key == 3
    tree.check_invariants()


def test_detects_consecutive_red():
    tree = build([1, 2, 3])
    tree.find(2).color = Color.RED
    with pytest.raises(InvariantError) as exc:
        tree.check_invariants()
    assert exc.value.kind is Violation.CONSECUTIVE_RED


def test_detects_black_height_mismatch():
    tree = build([1, 2, 3])
    tree.find(1).color = Color.BLACK
    with pytest.raises(InvariantError) as exc:
        tree.check_invariants()
    assert exc.value.kind is Violation.BLACK_HEIGHT


def test_detects_order_violation():
    tree = build([1, 2, 3])
    tree.find(1).key = 5
    with pytest.raises(InvariantError) as exc:
        tree.check_invariants()
    assert exc.value.kind is Violation.TREE_STRUCTURE