from __future__ import annotations

from typing import Iterable, Iterator, Optional, TypeVar

from .ordering import Equality, require, resolve_equals

T = TypeVar("T")

_END = object()


def distinct(seq: Iterable[T], *, equals: Optional[Equality] = None) -> Iterator[T]:
    """Drop items equal to the previously yielded one (runs collapse to their first item)."""
    require(seq=seq)
    return _distinct(iter(seq), resolve_equals(equals))


def _distinct(it: Iterator[T], eq: Equality) -> Iterator[T]:
    last = next(it, _END)
    if last is _END:
        return
    yield last

    for item in it:
        if not eq(last, item):
            yield item
            last = item
