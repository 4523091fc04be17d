"""Singly linked list with copying, searching, sorting and filtering."""

from __future__ import annotations

import operator
from typing import Any, Callable, Optional

from collectkit.slist_core import SListCore


class SList(SListCore):
    """A singly linked list.

    Membership tests and lookups match elements by identity. Value-based
    matching goes through :meth:`contains_value`.
    """

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        if self._size < 2:
            return
        prev = None
        node = self._head
        self._tail = self._head
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head = prev

    def sublist(self, start: int, end: int) -> "SList":
        """Return a new list of the elements from ``start`` to ``end`` inclusive.

        Raises ValueError if ``start`` is negative, ``start`` is greater
        than ``end``, or ``end`` is not an index of this list.
        """
        start = operator.index(start)
        end = operator.index(end)
        if start < 0 or start > end or end >= self._size:
            raise ValueError(
                f"invalid range {start}..{end} for list of size {self._size}"
            )
        sub = type(self)()
        node, _ = self._node_at(start)
        for _ in range(end - start + 1):
            sub.add_last(node.data)
            node = node.next
        return sub

    def copy_shallow(self) -> "SList":
        """Return a new list holding the same element references."""
        return type(self)(self)

    def copy_deep(self, copier: Callable[[Any], Any]) -> "SList":
        """Return a new list holding ``copier(element)`` for each element."""
        return type(self)(copier(element) for element in self)

    def contains(self, element: Any) -> int:
        """Return how many times ``element`` itself occurs in the list."""
        return sum(1 for item in self if item is element)

    def contains_value(
        self,
        element: Any,
        cmp: Optional[Callable[[Any, Any], int]] = None,
    ) -> int:
        """Return how many elements compare equal to ``element``.

        ``cmp(item, element)`` must return 0 for equal values; without it
        the ``==`` operator is used.
        """
        if cmp is None:
            return sum(1 for item in self if item == element)
        return sum(1 for item in self if cmp(item, element) == 0)

    def index_of(self, element: Any) -> int:
        """Return the index of the first occurrence of ``element``."""
        for index, item in enumerate(self):
            if item is element:
                return index
        raise ValueError("element not found in list")

    def to_list(self) -> list[Any]:
        """Return the elements as a Python list."""
        return list(self)

    def sort(self, key: Optional[Callable[[Any], Any]] = None) -> None:
        """Sort the elements in place, ordered by ``key`` if one is given."""
        if self._size < 2:
            return
        ordered = sorted(self, key=key)
        for node, element in zip(self._nodes(), ordered):
            node.data = element

    def foreach(self, op: Callable[[Any], Any]) -> None:
        """Call ``op`` on every element, from head to tail."""
        for element in self:
            op(element)

    def filter(self, pred: Callable[[Any], bool]) -> "SList":
        """Return a new list of the elements for which ``pred`` is true.

        Raises IndexError on an empty list.
        """
        if self._size == 0:
            raise IndexError("cannot filter an empty list")
        return type(self)(element for element in self if pred(element))

    def filter_mut(self, pred: Callable[[Any], bool]) -> None:
        """Remove every element for which ``pred`` is false.

        Raises IndexError on an empty list.
        """
        if self._size == 0:
            raise IndexError("cannot filter an empty list")
        prev = None
        node = self._head
        while node is not None:
            following = node.next
            if pred(node.data):
                prev = node
            else:
                self._unlink(node, prev)
            node = following