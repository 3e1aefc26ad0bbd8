"""A singly linked list of floating-point values."""

from __future__ import annotations

import operator
import sys
from functools import reduce
from typing import Callable, Iterable, Iterator, Optional, TextIO


class LinkedListError(ValueError):
    """Raised when an operation cannot be carried out on a list."""


class _Node:
    __slots__ = ("x", "next")

    def __init__(self, x: float, next: Optional[_Node] = None) -> None:
        self.x = x
        self.next = next


def _check_non_negative(value: int, what: str) -> None:
    if value < 0:
        raise LinkedListError(f"{what} must be non-negative, got {value}")


class LinkedList:
    """Singly linked list holding floats, with O(1) append and prepend."""

    __slots__ = ("_first", "_final", "_length")

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._first: Optional[_Node] = None
        self._final: Optional[_Node] = None
        self._length = 0
        for x in values:
            self.append(x)

    def __len__(self) -> int:
        return self._length

    def _nodes(self) -> Iterator[_Node]:
        node = self._first
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[float]:
        return (node.x for node in self._nodes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __str__(self) -> str:
        return self.render()

    def _clear(self) -> None:
        self._first = self._final = None
        self._length = 0

    def _node_at(self, position: int) -> _Node:
        node = self._first
        for _ in range(position):
            node = node.next
        return node

    def append(self, x: float) -> None:
        """Add a value at the end."""
        node = _Node(float(x))
        if self._final is None:
            self._first = node
        else:
            self._final.next = node
        self._final = node
        self._length += 1

    def prepend(self, x: float) -> None:
        """Add a value at the front."""
        node = _Node(float(x), self._first)
        if self._first is None:
            self._final = node
        self._first = node
        self._length += 1

    def insert(self, position: int, x: float) -> None:
        """Insert a value before ``position``; past the end it is appended."""
        _check_non_negative(position, "position")
        if self._first is None or position >= self._length:
            self.append(x)
        elif position == 0:
            self.prepend(x)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(float(x), previous.next)
            self._length += 1

    def render(self) -> str:
        """Return the printed form of the list."""
        lines = ["", "---", f"LINKED LIST WITH {self._length} ENTRIE(S)", ""]
        lines.extend(f"{x:+.3E}{0.0:+.3E}*I" for x in self)
        lines.append("---")
        return "\n".join(lines) + "\n"

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the printed form to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.render())

    def copy(self) -> LinkedList:
        """Return an independent copy."""
        return LinkedList(self)

    def concatenate(self, other: LinkedList) -> None:
        """Move all entries of ``other`` to the end of this list, emptying ``other``."""
        if other is self:
            raise LinkedListError("Cannot concatenate a list with itself")
        if other._first is not None:
            if self._final is None:
                self._first = other._first
            else:
                self._final.next = other._first
            self._final = other._final
            self._length += other._length
        other._clear()

    def _check_same_length(self, other: LinkedList, operation: str) -> None:
        if len(self) != len(other):
            raise LinkedListError(f"Dimension mismatch in {operation}")

    def add(self, other: LinkedList) -> None:
        """Add ``other`` element-wise in place."""
        self._check_same_length(other, "add")
        for mine, theirs in zip(self._nodes(), list(other)):
            mine.x += theirs

    def multiply(self, other: LinkedList) -> None:
        """Multiply by ``other`` element-wise in place."""
        self._check_same_length(other, "multiply")
        for mine, theirs in zip(self._nodes(), list(other)):
            mine.x *= theirs

    def scale(self, alpha: float) -> None:
        """Multiply every entry by ``alpha`` in place."""
        for node in self._nodes():
            node.x *= alpha

    def remove_first(self) -> float:
        """Remove and return the first entry."""
        if self._first is None:
            raise LinkedListError("Cannot remove entry from empty list")
        node = self._first
        self._first = node.next
        if self._first is None:
            self._final = None
        self._length -= 1
        return node.x

    def remove_last(self) -> float:
        """Remove and return the last entry."""
        if self._first is None:
            raise LinkedListError("Cannot remove entry from empty list")
        if self._length == 1:
            x = self._first.x
            self._clear()
            return x
        previous = self._node_at(self._length - 2)
        x = previous.next.x
        previous.next = None
        self._final = previous
        self._length -= 1
        return x

    def remove(self, position: int) -> float:
        """Remove and return the entry at ``position``."""
        if position < 0 or position >= self._length:
            raise LinkedListError("Cannot remove non-existent entry")
        if position == 0:
            return self.remove_first()
        if position == self._length - 1:
            return self.remove_last()
        previous = self._node_at(position - 1)
        removed = previous.next
        previous.next = removed.next
        self._length -= 1
        return removed.x

    def sum(self) -> float:
        """Sum of the entries, added in order."""
        return reduce(operator.add, self, 0.0)

    def product(self) -> float:
        """Product of the entries, multiplied in order."""
        return reduce(operator.mul, self, 1.0)

    def map(self, func: Callable[[int, float], float]) -> None:
        """Replace each entry ``x`` at index ``i`` with ``func(i, x)``."""
        for i, node in enumerate(self._nodes()):
            node.x = float(func(i, node.x))

    def get(self, position: int) -> float:
        """Return the entry at ``position``; past the end the last is returned."""
        if self._first is None:
            raise LinkedListError("Cannot get entry from empty list")
        _check_non_negative(position, "position")
        node = self._first
        for _ in range(position):
            if node.next is None:
                break
            node = node.next
        return node.x

    def swap(self, i: int, j: int) -> None:
        """Exchange the entries at positions ``i`` and ``j``."""
        if not (0 <= i < self._length and 0 <= j < self._length):
            raise LinkedListError("Cannot swap non-existent entries")
        if i == j:
            return
        low, high = sorted((i, j))
        low_node = self._node_at(low)
        high_node = low_node
        for _ in range(high - low):
            high_node = high_node.next
        low_node.x, high_node.x = high_node.x, low_node.x

    def split(self, i: int) -> LinkedList:
        """Detach and return the first ``i`` entries; this list keeps the rest."""
        if i < 0 or i > self._length:
            raise LinkedListError("Cannot split at non-existent position")
        left = LinkedList()
        if i == 0:
            return left
        last_left = self._node_at(i - 1)
        left._first = self._first
        left._final = last_left
        left._length = i
        self._first = last_left.next
        last_left.next = None
        if self._first is None:
            self._final = None
        self._length -= i
        return left

    def qsort(self, cmp: Callable[[float, float], bool]) -> LinkedList:
        """Return a sorted copy using quicksort with the first entry as pivot.

        An entry ``x`` is placed before the pivot ``p`` when ``cmp(p, x)`` holds.
        """
        result = LinkedList()
        pending: list[tuple[bool, object]] = [(False, list(self))]
        while pending:
            is_value, item = pending.pop()
            if is_value:
                result.append(item)
                continue
            if len(item) <= 1:
                for x in item:
                    result.append(x)
                continue
            pivot, *rest = item
            before: list[float] = []
            after: list[float] = []
            for x in rest:
                (before if cmp(pivot, x) else after).append(x)
            pending.append((False, after))
            pending.append((True, pivot))
            pending.append((False, before))
        return result


def zeros(length: int) -> LinkedList:
    """List of ``length`` zeros."""
    _check_non_negative(length, "length")
    return LinkedList(0.0 for _ in range(length))


def ones(length: int) -> LinkedList:
    """List of ``length`` ones."""
    _check_non_negative(length, "length")
    return LinkedList(1.0 for _ in range(length))


def from_func(func: Callable[[int], float], length: int) -> LinkedList:
    """List ``[func(0), func(1), ..., func(length - 1)]``."""
    _check_non_negative(length, "length")
    return LinkedList(func(i) for i in range(length))