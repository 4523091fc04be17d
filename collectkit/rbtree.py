"""Red-black tree keyed by a three-way comparator, with a shared sentinel leaf."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


class Color(enum.IntEnum):
    """Node colour."""

    RED = 0
    BLACK = 1


class Violation(enum.Enum):
    """Kinds of red-black rule violation found by :meth:`RBTree.check_invariants`."""

    TREE_STRUCTURE = "tree structure"
    CONSECUTIVE_RED = "consecutive red nodes"
    BLACK_HEIGHT = "unequal black height"


class InvariantError(Exception):
    """Raised when a tree breaks the ordering or red-black rules."""

    def __init__(self, kind: Violation) -> None:
        super().__init__(f"red-black tree invariant violated: {kind.value}")
        self.kind = kind


@dataclass(eq=False, repr=False)
class RBNode:
    """A tree node holding a key, its value, a colour and three links."""

    key: Any = None
    value: Any = None
    color: Color = Color.BLACK
    parent: Optional["RBNode"] = None
    left: Optional["RBNode"] = None
    right: Optional["RBNode"] = None

    def __repr__(self) -> str:
        return f"RBNode(key={self.key!r}, value={self.value!r}, color={self.color.name})"


def _natural_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class RBTree:
    """A red-black tree ordered by ``cmp(k1, k2)``, which returns <0, 0 or >0.

    Without a comparator the keys' own ordering is used. Each key occurs
    at most once; inserting an existing key replaces its value.
    """

    def __init__(self, cmp: Optional[Callable[[Any, Any], int]] = None) -> None:
        self._cmp = cmp if cmp is not None else _natural_cmp
        self._nil = RBNode(color=Color.BLACK)
        self._root = self._nil
        self._size = 0

    def __len__(self) -> int:
        return self._size

    # rotations and rebalancing

    def _rotate_left(self, x: RBNode) -> None:
        nil = self._nil
        y = x.right
        x.right = y.left
        if y.left is not nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: RBNode) -> None:
        nil = self._nil
        y = x.left
        x.left = y.right
        if y.right is not nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _rebalance_after_insert(self, z: RBNode) -> None:
        while z.parent.color is Color.RED:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_left(z.parent.parent)
        self._root.color = Color.BLACK

    def _rebalance_after_delete(self, x: RBNode) -> None:
        while x is not self._root and x.color is Color.BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.right.color is Color.BLACK:
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_right(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if w.right.color is Color.BLACK and w.left.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.left.color is Color.BLACK:
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_left(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self._rotate_right(x.parent)
                    x = self._root
        x.color = Color.BLACK

    def _transplant(self, u: RBNode, v: RBNode) -> None:
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _subtree_min(self, node: RBNode) -> RBNode:
        while node.left is not self._nil:
            node = node.left
        return node

    def _subtree_max(self, node: RBNode) -> RBNode:
        while node.right is not self._nil:
            node = node.right
        return node

    # public operations

    def insert(self, key: Any, value: Any = None) -> RBNode:
        """Map ``key`` to ``value`` and return the node that holds them."""
        nil = self._nil
        parent = nil
        x = self._root
        while x is not nil:
            c = self._cmp(key, x.key)
            parent = x
            if c < 0:
                x = x.left
            elif c > 0:
                x = x.right
            else:
                x.value = value
                return x
        node = RBNode(key, value, Color.RED, parent, nil, nil)
        self._size += 1
        if parent is nil:
            self._root = node
            node.color = Color.BLACK
        else:
            if self._cmp(key, parent.key) < 0:
                parent.left = node
            else:
                parent.right = node
            self._rebalance_after_insert(node)
        return node

    def find(self, key: Any) -> Optional[RBNode]:
        """Return the node holding ``key``, or None."""
        node = self._root
        while node is not self._nil:
            c = self._cmp(key, node.key)
            if c < 0:
                node = node.left
            elif c > 0:
                node = node.right
            else:
                return node
        return None

    def minimum(self) -> Optional[RBNode]:
        """Return the node with the lowest key, or None if the tree is empty."""
        if self._root is self._nil:
            return None
        return self._subtree_min(self._root)

    def maximum(self) -> Optional[RBNode]:
        """Return the node with the highest key, or None if the tree is empty."""
        if self._root is self._nil:
            return None
        return self._subtree_max(self._root)

    def successor(self, node: Optional[RBNode]) -> Optional[RBNode]:
        """Return the node that follows ``node`` in key order, or None."""
        if node is None or node is self._nil:
            return None
        if node.right is not self._nil:
            return self._subtree_min(node.right)
        parent = node.parent
        while parent is not self._nil and node is parent.right:
            node = parent
            parent = parent.parent
        return None if parent is self._nil else parent

    def predecessor(self, node: Optional[RBNode]) -> Optional[RBNode]:
        """Return the node that precedes ``node`` in key order, or None."""
        if node is None or node is self._nil:
            return None
        if node.left is not self._nil:
            return self._subtree_max(node.left)
        parent = node.parent
        while parent is not self._nil and node is parent.left:
            node = parent
            parent = parent.parent
        return None if parent is self._nil else parent

    def delete(self, node: RBNode) -> None:
        """Unlink ``node`` from the tree and rebalance.

        Other nodes keep their identity, so references to them stay valid.
        """
        if node is None or node is self._nil or node.left is None:
            raise ValueError("node is not part of this tree")
        nil = self._nil
        y = node
        y_color = y.color
        if node.left is nil:
            x = node.right
            self._transplant(node, node.right)
        elif node.right is nil:
            x = node.left
            self._transplant(node, node.left)
        else:
            y = self._subtree_min(node.right)
            y_color = y.color
            x = y.right
            if y.parent is node:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = node.right
                y.right.parent = y
            self._transplant(node, y)
            y.left = node.left
            y.left.parent = y
            y.color = node.color
        if y_color is Color.BLACK:
            self._rebalance_after_delete(x)
        node.parent = node.left = node.right = None
        self._size -= 1

    def clear(self) -> None:
        """Remove every node."""
        self._root = self._nil
        self._nil.parent = None
        self._size = 0

    def nodes(self) -> Iterator[RBNode]:
        """Yield the nodes in ascending key order."""
        node = self.minimum()
        while node is not None:
            following = self.successor(node)
            yield node
            node = following

    def check_invariants(self) -> int:
        """Verify ordering and red-black rules and return the black height.

        The sentinel leaves count as one black node. Raises InvariantError
        naming the first violation found.
        """
        return self._check(self._root)

    def _check(self, node: RBNode) -> int:
        nil = self._nil
        if node is nil:
            return 1
        if node.left is not nil and self._cmp(node.left.key, node.key) >= 0:
            raise InvariantError(Violation.TREE_STRUCTURE)
        if node.right is not nil and self._cmp(node.right.key, node.key) <= 0:
            raise InvariantError(Violation.TREE_STRUCTURE)
        if node.color is Color.RED and node.parent.color is Color.RED:
            raise InvariantError(Violation.CONSECUTIVE_RED)
        left_height = self._check(node.left)
        right_height = self._check(node.right)
        if left_height != right_height:
            raise InvariantError(Violation.BLACK_HEIGHT)
        return left_height + (1 if node.color is Color.BLACK else 0)