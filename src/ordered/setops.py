"""
Merge-based set operations over sorted iterables.

All inputs must be sorted under the same comparator; nothing here checks
that. Results are single-pass generators, duplicates are treated as a
multiset.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, TypeVar

from .ordering import Comparer, require, resolve_compare

T = TypeVar("T")

_END = object()


def difference(first: Iterable[T], second: Iterable[T], *, compare: Optional[Comparer] = None) -> Iterator[T]:
    """
    Items of ``first`` without a matching item in ``second``.

    Each item of ``second`` cancels at most one equal item of ``first``, so a
    value seen k1 times in ``first`` and k2 times in ``second`` is yielded
    max(k1 - k2, 0) times. Complexity O(n + m).
    """
    require(first=first, second=second)
    return _difference(iter(first), iter(second), resolve_compare(compare))


def _difference(it1: Iterator[T], it2: Iterator[T], cmp: Comparer) -> Iterator[T]:
    cur1 = next(it1, _END)
    cur2 = next(it2, _END)

    while cur1 is not _END and cur2 is not _END:
        if cmp(cur1, cur2) < 0:
            yield cur1
            cur1 = next(it1, _END)
        elif cmp(cur2, cur1) < 0:
            cur2 = next(it2, _END)
        else:
            cur1 = next(it1, _END)
            cur2 = next(it2, _END)

    # rest of the first sequence
    if cur1 is not _END:
        yield cur1
        yield from it1


def intersect(first: Iterable[T], second: Iterable[T], *, compare: Optional[Comparer] = None) -> Iterator[T]:
    """
    Items present in both sequences, taken from ``first``.

    A value seen k1 and k2 times is yielded min(k1, k2) times.
    """
    require(first=first, second=second)
    return _intersect(iter(first), iter(second), resolve_compare(compare))


def _intersect(it1: Iterator[T], it2: Iterator[T], cmp: Comparer) -> Iterator[T]:
    cur1 = next(it1, _END)
    cur2 = next(it2, _END)

    while cur1 is not _END and cur2 is not _END:
        if cmp(cur1, cur2) < 0:
            cur1 = next(it1, _END)
        elif cmp(cur2, cur1) < 0:
            cur2 = next(it2, _END)
        else:
            yield cur1
            cur1 = next(it1, _END)
            cur2 = next(it2, _END)


def union(first: Iterable[T], second: Iterable[T], *, compare: Optional[Comparer] = None) -> Iterator[T]:
    """
    Sorted merge of both sequences. An equal pair collapses into the item
    from ``first``; whichever side is left over is drained as is.
    """
    require(first=first, second=second)
    return _union(iter(first), iter(second), resolve_compare(compare))


def _union(it1: Iterator[T], it2: Iterator[T], cmp: Comparer) -> Iterator[T]:
    cur1 = next(it1, _END)
    cur2 = next(it2, _END)

    while cur1 is not _END and cur2 is not _END:
        if cmp(cur1, cur2) < 0:
            yield cur1
            cur1 = next(it1, _END)
        elif cmp(cur2, cur1) < 0:
            yield cur2
            cur2 = next(it2, _END)
        else:
            yield cur1
            cur1 = next(it1, _END)
            cur2 = next(it2, _END)

    if cur1 is not _END:
        yield cur1
        yield from it1
    elif cur2 is not _END:
        yield cur2
        yield from it2
