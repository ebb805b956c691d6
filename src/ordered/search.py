"""
Binary search over sorted random-access containers.

``binary_search_first`` and ``binary_search_last`` return the index of a
matching item, or the one's complement (``~i == -i - 1``) of the insertion
point ``i`` when nothing matches. ``insertion_point`` decodes both cases.

The loops call the three-way comparator directly rather than wrapping it
with ``cmp_to_key`` for ``bisect``. ``lower_bound`` and ``upper_bound``
always return a value in ``[0, len(container)]``.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .ordering import Comparer, require, resolve_compare


def lower_bound(container: Sequence[Any], value: Any, *, compare: Optional[Comparer] = None) -> int:
    """First index whose item is not less than ``value``."""
    require(container=container)
    cmp = resolve_compare(compare)
    lo, hi = 0, len(container)
    while lo < hi:
        mid = (lo + hi) // 2
        if cmp(container[mid], value) < 0:
            lo = mid + 1
        else:
            hi = mid
    return lo


def upper_bound(container: Sequence[Any], value: Any, *, compare: Optional[Comparer] = None) -> int:
    """First index whose item is greater than ``value``."""
    require(container=container)
    cmp = resolve_compare(compare)
    lo, hi = 0, len(container)
    while lo < hi:
        mid = (lo + hi) // 2
        if cmp(container[mid], value) <= 0:
            lo = mid + 1
        else:
            hi = mid
    return lo


def binary_search_first(container: Sequence[Any], value: Any, *, compare: Optional[Comparer] = None) -> int:
    cmp = resolve_compare(compare)
    index = lower_bound(container, value, compare=cmp)
    if index < len(container) and cmp(container[index], value) == 0:
        return index
    return ~index


def binary_search_last(container: Sequence[Any], value: Any, *, compare: Optional[Comparer] = None) -> int:
    cmp = resolve_compare(compare)
    index = upper_bound(container, value, compare=cmp)
    if index > 0 and cmp(container[index - 1], value) == 0:
        return index - 1
    # upper and lower bound coincide on a miss
    return ~index


def insertion_point(index: int) -> int:
    return index if index >= 0 else ~index
