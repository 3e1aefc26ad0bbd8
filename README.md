# llist

A small library of singly linked lists that hold floating-point numbers. It
offers element-wise arithmetic, reductions, in-place edits, splitting and a
quicksort that takes a comparison function.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Usage

```python
from llist.linked_list import LinkedList, LinkedListError, zeros, ones, from_func

values = from_func(lambda i: float(i + 1), 5)   # [1.0, 2.0, 3.0, 4.0, 5.0]
values.swap(0, 4)                                 # [5.0, 2.0, 3.0, 4.0, 1.0]
values.insert(2, 9.5)                             # [5.0, 2.0, 9.5, 3.0, 4.0, 1.0]
values.scale(2.0)

print(values.sum(), values.product())
print(values.get(100))                            # an index past the end gives the last entry

left = values.split(2)                            # left holds the first two, values the rest
left.concatenate(values)                          # appends values to left; values is left empty

ordered = left.qsort(lambda x, y: y < x)          # a new list in ascending order; left is unchanged
ordered.print()
```

`LinkedList(values)` builds a list from any iterable of numbers; entries are
stored as floats. A list supports `len()`, iteration and `==` against another
`LinkedList`.

`zeros(n)` and `ones(n)` build lists of `n` zeros or ones, and
`from_func(func, n)` builds `[func(0), ..., func(n - 1)]`.

- `append(x)` and `prepend(x)` add at either end; `insert(position, x)` puts a
  value before `position`, or appends it when `position` is past the end.
- `remove_first()`, `remove_last()` and `remove(position)` delete an entry and
  return its value.
- `add(other)` and `multiply(other)` combine two lists of the same length entry
  by entry, in place; `scale(alpha)` multiplies every entry by `alpha`.
- `map(func)` replaces each entry with `func(index, value)`.
- `sum()` and `product()` reduce the entries in order.
- `get(position)` returns an entry; `swap(i, j)` exchanges two entries.
- `split(i)` detaches and returns the first `i` entries; the list keeps the rest.
- `concatenate(other)` moves every entry of `other` to the end of the list,
  leaving `other` empty.
- `qsort(cmp)` returns a sorted copy, using the first entry as pivot; an entry
  `x` goes before the pivot `p` when `cmp(p, x)` is true.
- `copy()` returns an independent copy.

Operations that cannot work raise `LinkedListError` (a subclass of
`ValueError`): adding or multiplying lists of different lengths, removing from
or reading an empty list, removing or swapping positions that do not exist,
splitting past the end, concatenating a list with itself, and negative
positions or lengths.

`render()` returns the text that `print(file=None)` writes (to standard output
by default), and `str()` gives the same text: a header with the number of
entries, then one line per entry in scientific notation, as a complex number
with imaginary part zero.

## Demo

```
llist-demo
```

This builds the list 1 to 10, mixes up its order with a few swaps, prints it,
sorts it back with quicksort and prints it again. It then prints every
permutation of 1, 2, 3.

The functions behind it are in `llist.demo`: `perm(values)` returns every
permutation of the given values as a list of `LinkedList`, and
`print_perm(n, file=None)` prints every permutation of `1, ..., n`.