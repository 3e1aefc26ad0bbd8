"""Demonstration: shuffle and sort a list, then print permutations."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, TextIO

from llist.linked_list import LinkedList, from_func

_SHUFFLE = ((1, 0), (9, 7), (7, 6), (4, 2), (1, 4), (3, 5))


def f(i: int) -> float:
    """Initializer giving the values 1, 2, 3, ..."""
    return float(i + 1)


def cmp(x: float, y: float) -> bool:
    """Comparer placing smaller values first."""
    return y < x


def perm(values: Iterable[float]) -> list[LinkedList]:
    """All permutations of ``values``, each element taken first in turn."""
    items = LinkedList(values)
    if len(items) <= 1:
        return [items.copy()]
    result = []
    for i, _ in enumerate(items):
        rest = items.copy()
        head = rest.remove(i)
        for tail in perm(rest):
            tail.prepend(head)
            result.append(tail)
    return result


def print_perm(n: int, file: Optional[TextIO] = None) -> None:
    """Print every permutation of ``[1, 2, ..., n]``."""
    for permutation in perm(from_func(f, n)):
        permutation.print(file)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration on standard output."""
    values = from_func(f, 10)
    for i, j in _SHUFFLE:
        values.swap(i, j)
    values.print()
    values.qsort(cmp).print()
    print_perm(3)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())