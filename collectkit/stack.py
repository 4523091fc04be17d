"""Last-in first-out stack with in-place iterators."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional


class Stack:
    """A LIFO stack. Iteration runs from the bottom element to the top."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = list(iterable) if iterable is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def push(self, element: Any) -> None:
        """Push ``element`` onto the top of the stack."""
        self._items.append(element)

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def map(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on every element, from bottom to top."""
        for element in self._items:
            fn(element)


class StackIter:
    """Iterator over a stack that can replace the element last returned."""

    def __init__(self, stack: Stack) -> None:
        self._items = stack._items
        self._position = 0
        self._last: Optional[int] = None

    def __iter__(self) -> "StackIter":
        return self

    def __next__(self) -> Any:
        if self._position >= len(self._items):
            raise StopIteration
        self._last = self._position
        self._position += 1
        return self._items[self._last]

    def replace(self, element: Any) -> Any:
        """Replace the element last returned and return the old one."""
        if self._last is None:
            raise IndexError("no element to replace: call next() first")
        old = self._items[self._last]
        self._items[self._last] = element
        return old


class StackZipIter:
    """Iterator over two stacks in step, yielding pairs until either ends."""

    def __init__(self, first: Stack, second: Stack) -> None:
        self._first = first._items
        self._second = second._items
        self._position = 0
        self._last: Optional[int] = None

    def __iter__(self) -> "StackZipIter":
        return self

    def __next__(self) -> tuple[Any, Any]:
        if self._position >= min(len(self._first), len(self._second)):
            raise StopIteration
        self._last = self._position
        self._position += 1
        return self._first[self._last], self._second[self._last]

    def replace(self, e1: Any, e2: Any) -> tuple[Any, Any]:
        """Replace the pair last returned and return the old pair."""
        if self._last is None:
            raise IndexError("no pair to replace: call next() first")
        old = (self._first[self._last], self._second[self._last])
        self._first[self._last] = e1
        self._second[self._last] = e2
        return old