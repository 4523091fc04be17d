"""Sorted set backed by a red-black tree table."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from collectkit.treetable import TreeTable, TreeTableIter


class TreeSet:
    """A set that keeps its elements ordered by ``cmp(e1, e2)``.

    ``cmp`` returns a negative number, zero or a positive number when the
    first element sorts before, equal to or after the second. Without one
    the elements' own ordering is used. Lookups that find nothing raise
    KeyError.
    """

    def __init__(self, cmp: Optional[Callable[[Any, Any], int]] = None) -> None:
        self._table = TreeTable(cmp)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._table)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add(self, element: Any) -> None:
        """Add ``element``; an element that compares equal keeps its place."""
        if not self._table.contains_key(element):
            self._table.add(element, element)

    def remove(self, element: Any) -> Any:
        """Remove ``element`` and return the stored element it matched."""
        return self._table.remove(element)

    def remove_all(self) -> None:
        """Remove every element."""
        self._table.remove_all()

    def get_first(self) -> Any:
        """Return the lowest element."""
        return self._table.get_first_key()

    def get_last(self) -> Any:
        """Return the highest element."""
        return self._table.get_last_key()

    def get_greater_than(self, element: Any) -> Any:
        """Return the element that immediately follows ``element``.

        Raises KeyError if ``element`` is absent or is the highest.
        """
        return self._table.get_greater_than(element)

    def get_lesser_than(self, element: Any) -> Any:
        """Return the element that immediately precedes ``element``.

        Raises KeyError if ``element`` is absent or is the lowest.
        """
        return self._table.get_lesser_than(element)

    def contains(self, element: Any) -> bool:
        """Return whether ``element`` is in the set."""
        return self._table.contains_key(element)

    def foreach(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on every element in ascending order."""
        self._table.foreach_key(fn)


class TreeSetIter:
    """Iterator over a set's elements in order that can remove elements."""

    def __init__(self, tree_set: TreeSet) -> None:
        self._entries = TreeTableIter(tree_set._table)

    def __iter__(self) -> "TreeSetIter":
        return self

    def __next__(self) -> Any:
        return next(self._entries).key

    def remove(self) -> Any:
        """Remove the element last returned and return it.

        Raises KeyError if no element has been returned yet or it was
        already removed.
        """
        return self._entries.remove()