"""Sorted key-value table backed by a red-black tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from collectkit.rbtree import RBNode, RBTree


@dataclass(frozen=True)
class TreeTableEntry:
    """A key and the value it maps to."""

    key: Any
    value: Any


class TreeTable:
    """A mapping that keeps its keys ordered by ``cmp(k1, k2)``.

    ``cmp`` returns a negative number, zero or a positive number when the
    first key sorts before, equal to or after the second. Without one the
    keys' own ordering is used. Lookups that find nothing raise KeyError.
    """

    def __init__(self, cmp: Optional[Callable[[Any, Any], int]] = None) -> None:
        self._tree = RBTree(cmp)

    def __len__(self) -> int:
        return len(self._tree)

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[Any]:
        for node in self._tree.nodes():
            yield node.key

    def __repr__(self) -> str:
        items = ", ".join(f"{n.key!r}: {n.value!r}" for n in self._tree.nodes())
        return f"{type(self).__name__}({{{items}}})"

    def _node(self, key: Any) -> RBNode:
        node = self._tree.find(key)
        if node is None:
            raise KeyError(key)
        return node

    def _first(self) -> RBNode:
        node = self._tree.minimum()
        if node is None:
            raise KeyError("table is empty")
        return node

    def _last(self) -> RBNode:
        node = self._tree.maximum()
        if node is None:
            raise KeyError("table is empty")
        return node

    def get(self, key: Any) -> Any:
        """Return the value mapped to ``key``."""
        return self._node(key).value

    def get_first_value(self) -> Any:
        """Return the value of the lowest key."""
        return self._first().value

    def get_last_value(self) -> Any:
        """Return the value of the highest key."""
        return self._last().value

    def get_first_key(self) -> Any:
        """Return the lowest key."""
        return self._first().key

    def get_last_key(self) -> Any:
        """Return the highest key."""
        return self._last().key

    def get_greater_than(self, key: Any) -> Any:
        """Return the key that immediately follows ``key``.

        Raises KeyError if ``key`` is absent or is the highest key.
        """
        successor = self._tree.successor(self._node(key))
        if successor is None:
            raise KeyError(f"no key greater than {key!r}")
        return successor.key

    def get_lesser_than(self, key: Any) -> Any:
        """Return the key that immediately precedes ``key``.

        Raises KeyError if ``key`` is absent or is the lowest key.
        """
        predecessor = self._tree.predecessor(self._node(key))
        if predecessor is None:
            raise KeyError(f"no key lesser than {key!r}")
        return predecessor.key

    def contains_key(self, key: Any) -> bool:
        """Return whether ``key`` is in the table."""
        return self._tree.find(key) is not None

    def contains_value(self, value: Any) -> int:
        """Return how many keys map to ``value`` itself (matched by identity)."""
        return sum(1 for node in self._tree.nodes() if node.value is value)

    def add(self, key: Any, value: Any) -> None:
        """Map ``key`` to ``value``, replacing any value it already had."""
        self._tree.insert(key, value)

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return the value it mapped to."""
        node = self._node(key)
        self._tree.delete(node)
        return node.value

    def remove_first(self) -> Any:
        """Remove the lowest key and return its value."""
        node = self._first()
        self._tree.delete(node)
        return node.value

    def remove_last(self) -> Any:
        """Remove the highest key and return its value."""
        node = self._last()
        self._tree.delete(node)
        return node.value

    def remove_all(self) -> None:
        """Remove every entry."""
        self._tree.clear()

    def foreach_key(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on every key in ascending order."""
        for node in self._tree.nodes():
            fn(node.key)

    def foreach_value(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on every value in ascending key order."""
        for node in self._tree.nodes():
            fn(node.value)

    def check_invariants(self) -> int:
        """Verify the red-black rules and return the tree's black height."""
        return self._tree.check_invariants()


class TreeTableIter:
    """Iterator over a table's entries in key order that can remove entries."""

    def __init__(self, table: TreeTable) -> None:
        self._table = table
        self._current: Optional[RBNode] = None
        self._next: Optional[RBNode] = table._tree.minimum()

    def __iter__(self) -> "TreeTableIter":
        return self

    def __next__(self) -> TreeTableEntry:
        node = self._next
        if node is None:
            raise StopIteration
        self._current = node
        self._next = self._table._tree.successor(node)
        return TreeTableEntry(node.key, node.value)

    def remove(self) -> Any:
        """Remove the entry last returned and return its value.

        Raises KeyError if no entry has been returned yet or it was
        already removed.
        """
        node = self._current
        if node is None:
            raise KeyError("no entry to remove")
        self._table._tree.delete(node)
        self._current = None
        return node.value