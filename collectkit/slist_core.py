"""Core of a singly linked list: nodes, insertion, removal and access."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class SNode:
    """A single list node holding one element and a link to the next node."""

    data: Any = None
    next: Optional["SNode"] = None


class SListCore:
    """A singly linked list with head and tail references.

    Elements are matched by identity, the way stored references are
    compared, not by value.
    """

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[SNode] = None
        self._tail: Optional[SNode] = None
        self._size = 0
        if iterable is not None:
            for element in iterable:
                self.add_last(element)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # internal helpers

    def _nodes(self) -> Iterator[SNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> tuple[SNode, Optional[SNode]]:
        """Return the node at ``index`` and the node before it."""
        index = operator.index(index)
        if index < 0 or index >= self._size:
            raise IndexError(f"index {index} out of range for list of size {self._size}")
        prev: Optional[SNode] = None
        node = self._head
        for _ in range(index):
            prev = node
            node = node.next
        return node, prev

    def _find(self, element: Any) -> tuple[SNode, Optional[SNode]]:
        prev: Optional[SNode] = None
        for node in self._nodes():
            if node.data is element:
                return node, prev
            prev = node
        raise ValueError("element not found in list")

    def _unlink(self, node: SNode, prev: Optional[SNode]) -> Any:
        """Detach ``node`` (preceded by ``prev``) and return its data."""
        if prev is not None:
            prev.next = node.next
        else:
            self._head = node.next
        if node.next is None:
            self._tail = prev
        node.next = None
        self._size -= 1
        return node.data

    @staticmethod
    def _chain(elements: Iterable[Any]) -> tuple[Optional[SNode], Optional[SNode]]:
        head: Optional[SNode] = None
        tail: Optional[SNode] = None
        for element in elements:
            node = SNode(element)
            if head is None:
                head = tail = node
            else:
                tail.next = node
                tail = node
        return head, tail

    def _take_all(self) -> tuple[Optional[SNode], Optional[SNode], int]:
        head, tail, size = self._head, self._tail, self._size
        self._head = self._tail = None
        self._size = 0
        return head, tail, size

    # insertion

    def add(self, element: Any) -> None:
        """Append ``element`` to the end of the list."""
        self.add_last(element)

    def add_first(self, element: Any) -> None:
        """Prepend ``element``, making it the new head."""
        node = SNode(element, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_last(self, element: Any) -> None:
        """Append ``element``, making it the new tail."""
        node = SNode(element)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def add_at(self, element: Any, index: int) -> None:
        """Insert ``element`` before the element now at ``index``.

        The index must name an existing element, so this cannot insert
        into an empty list or past the last element.
        """
        node, prev = self._node_at(index)
        new = SNode(element, node)
        if prev is None:
            self._head = new
        else:
            prev.next = new
        self._size += 1

    def add_all(self, other: "SListCore") -> None:
        """Append copies of the references held by ``other``."""
        count = len(other)
        if count == 0:
            return
        head, tail = self._chain(list(other))
        if self._tail is None:
            self._head = head
        else:
            self._tail.next = head
        self._tail = tail
        self._size += count

    def add_all_at(self, other: "SListCore", index: int) -> None:
        """Insert the elements of ``other`` before the element at ``index``."""
        count = len(other)
        if count == 0:
            return
        node, prev = self._node_at(index)
        head, tail = self._chain(list(other))
        tail.next = node
        if prev is None:
            self._head = head
        else:
            prev.next = head
        self._size += count

    def splice(self, other: "SListCore") -> None:
        """Move every node of ``other`` to the end of this list, emptying it."""
        if len(other) == 0:
            return
        head, tail, size = other._take_all()
        if self._tail is None:
            self._head = head
        else:
            self._tail.next = head
        self._tail = tail
        self._size += size

    def splice_at(self, other: "SListCore", index: int) -> None:
        """Move every node of ``other`` in before the element at ``index``."""
        if len(other) == 0:
            return
        node, prev = self._node_at(index)
        head, tail, size = other._take_all()
        tail.next = node
        if prev is None:
            self._head = head
        else:
            prev.next = head
        self._size += size

    # removal

    def remove(self, element: Any) -> Any:
        """Remove the first occurrence of ``element`` and return it."""
        node, prev = self._find(element)
        return self._unlink(node, prev)

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        node, prev = self._node_at(index)
        return self._unlink(node, prev)

    def remove_first(self) -> Any:
        """Remove and return the head element."""
        if self._head is None:
            raise IndexError("remove from empty list")
        return self._unlink(self._head, None)

    def remove_last(self) -> Any:
        """Remove and return the tail element."""
        if self._head is None:
            raise IndexError("remove from empty list")
        node, prev = self._node_at(self._size - 1)
        return self._unlink(node, prev)

    def remove_all(self, callback: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element, passing each to ``callback`` if one is given."""
        if self._size == 0:
            raise IndexError("remove from empty list")
        head, _, _ = self._take_all()
        node = head
        while node is not None:
            following = node.next
            if callback is not None:
                callback(node.data)
            node.next = None
            node = following

    # access

    def replace_at(self, element: Any, index: int) -> Any:
        """Replace the element at ``index`` and return the old one."""
        node, _ = self._node_at(index)
        old, node.data = node.data, element
        return old

    def get_first(self) -> Any:
        """Return the head element."""
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.data

    def get_last(self) -> Any:
        """Return the tail element."""
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.data

    def get_at(self, index: int) -> Any:
        """Return the element at ``index``."""
        node, _ = self._node_at(index)
        return node.data