from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, MutableSequence, Optional, TypeVar

from .ordering import Comparer, require, resolve_compare
from .search import binary_search_first, insertion_point, lower_bound, upper_bound

logger = logging.getLogger(__name__)

T = TypeVar("T")


def insert_ordered(container: MutableSequence[T], value: T, *, compare: Optional[Comparer] = None) -> None:
    """Insert ``value`` before any equal items so ``container`` stays sorted."""
    require(container=container)
    index = binary_search_first(container, value, compare=compare)
    container.insert(insertion_point(index), value)


def remove_ordered(container: MutableSequence[T], value: T, *, compare: Optional[Comparer] = None) -> None:
    """Remove the first item equal to ``value``; does nothing if there is none."""
    require(container=container)
    index = binary_search_first(container, value, compare=compare)
    if index < 0:
        logger.debug("remove_ordered: no item equal to %r", value)
        return
    del container[index]


class OrderedSequence(Generic[T]):
    """
    Sorted list where duplicates are allowed; equal items keep insertion order.

    ``add`` places a new item after its equals, whereas ``insert_ordered``
    places it before them.
    """

    def __init__(self, items: Optional[Iterable[T]] = None, *, compare: Optional[Comparer] = None):
        self._cmp = resolve_compare(compare)
        self._items: list[T] = []
        if items is not None:
            for item in items:
                self.add(item)

    def add(self, item: T) -> None:
        index = upper_bound(self._items, item, compare=self._cmp)
        self._items.insert(index, item)

    def remove(self, item: T) -> None:
        lo = lower_bound(self._items, item, compare=self._cmp)
        hi = upper_bound(self._items, item, compare=self._cmp)
        for idx in range(lo, hi):
            if self._items[idx] is item:
                del self._items[idx]
                return
        raise ValueError("item not found in ordered sequence")

    def discard(self, item: T) -> None:
        try:
            self.remove(item)
        except ValueError:
            pass

    def pop_first(self) -> T:
        if not self._items:
            raise ValueError("pop from empty ordered sequence")
        return self._items.pop(0)

    def index(self, item: T) -> int:
        idx = binary_search_first(self._items, item, compare=self._cmp)
        if idx < 0:
            raise ValueError("item not found in ordered sequence")
        return idx

    def __contains__(self, item: object) -> bool:
        return binary_search_first(self._items, item, compare=self._cmp) >= 0

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"OrderedSequence({self._items!r})"
