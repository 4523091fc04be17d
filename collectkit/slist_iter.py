"""Iterators over singly linked lists that can edit the list while walking it."""

from __future__ import annotations

from typing import Any, Optional

from collectkit.slist_core import SListCore, SNode


class _Cursor:
    """Position within a list, between the last returned node and the next one."""

    def __init__(self, slist: SListCore) -> None:
        self.slist = slist
        self.index = 0
        self.current: Optional[SNode] = None
        self.prev: Optional[SNode] = None
        self.before_next: Optional[SNode] = None
        self.next: Optional[SNode] = slist._head
        self.advanced = False

    @property
    def exhausted(self) -> bool:
        return self.next is None

    def advance(self) -> Any:
        node = self.next
        self.prev = self.before_next
        self.current = node
        self.before_next = node
        self.next = node.next
        self.index += 1
        self.advanced = True
        return node.data

    def require_current(self) -> None:
        if self.current is None:
            raise ValueError("no element to operate on: call next() first")

    def require_advanced(self) -> None:
        if not self.advanced:
            raise ValueError("no position to insert at: call next() first")

    def remove(self) -> Any:
        node = self.current
        if self.before_next is node:
            self.before_next = self.prev
        data = self.slist._unlink(node, self.prev)
        self.current = None
        self.index -= 1
        return data

    def insert(self, element: Any) -> None:
        node = SNode(element, self.next)
        if self.before_next is None:
            self.slist._head = node
        else:
            self.before_next.next = node
        if self.next is None:
            self.slist._tail = node
        self.slist._size += 1
        self.before_next = node
        self.index += 1

    def replace(self, element: Any) -> Any:
        old, self.current.data = self.current.data, element
        return old


class SListIter:
    """Iterator over a list that can remove, add and replace elements.

    ``remove`` and ``replace`` act on the element last returned by
    ``next()``; ``add`` inserts after it, before the element that the
    following ``next()`` returns.
    """

    def __init__(self, slist: SListCore) -> None:
        self._cursor = _Cursor(slist)

    def __iter__(self) -> "SListIter":
        return self

    def __next__(self) -> Any:
        if self._cursor.exhausted:
            raise StopIteration
        return self._cursor.advance()

    def remove(self) -> Any:
        """Remove the element last returned and return it."""
        self._cursor.require_current()
        return self._cursor.remove()

    def add(self, element: Any) -> None:
        """Insert ``element`` after the element last returned."""
        self._cursor.require_advanced()
        self._cursor.insert(element)

    def replace(self, element: Any) -> Any:
        """Replace the element last returned and return the old one."""
        self._cursor.require_current()
        return self._cursor.replace(element)

    def index(self) -> int:
        """Return the index of the element last returned."""
        return self._cursor.index - 1


class SListZipIter:
    """Iterator over two lists in step, yielding pairs until either ends."""

    def __init__(self, first: SListCore, second: SListCore) -> None:
        self._first = _Cursor(first)
        self._second = _Cursor(second)

    def __iter__(self) -> "SListZipIter":
        return self

    def __next__(self) -> tuple[Any, Any]:
        if self._first.exhausted or self._second.exhausted:
            raise StopIteration
        return self._first.advance(), self._second.advance()

    def add(self, e1: Any, e2: Any) -> None:
        """Insert ``e1`` and ``e2`` after the pair last returned."""
        self._first.require_advanced()
        self._second.require_advanced()
        self._first.insert(e1)
        self._second.insert(e2)

    def remove(self) -> tuple[Any, Any]:
        """Remove the pair last returned and return it."""
        self._first.require_current()
        self._second.require_current()
        return self._first.remove(), self._second.remove()

    def replace(self, e1: Any, e2: Any) -> tuple[Any, Any]:
        """Replace the pair last returned and return the old pair."""
        self._first.require_current()
        self._second.require_current()
        return self._first.replace(e1), self._second.replace(e2)

    def index(self) -> int:
        """Return the index of the pair last returned."""
        return self._first.index - 1