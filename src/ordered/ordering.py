from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparer = Callable[[T, T], int]
Equality = Callable[[T, T], bool]


def natural_compare(one: Any, other: Any) -> int:
    if one < other:
        return -1
    if other < one:
        return 1
    return 0


def natural_equals(one: Any, other: Any) -> bool:
    return one == other


def resolve_compare(compare: Optional[Comparer] = None) -> Comparer:
    return natural_compare if compare is None else compare


def resolve_equals(equals: Optional[Equality] = None) -> Equality:
    return natural_equals if equals is None else equals


def compare_by(key: Callable[[T], K], compare: Optional[Comparer] = None) -> Comparer:
    """Order items by a projected key, e.g. ``compare_by(attrgetter("time"))``."""
    require(key=key)
    cmp = resolve_compare(compare)

    def _compare(one: T, other: T) -> int:
        return cmp(key(one), key(other))

    return _compare


def reverse_compare(compare: Optional[Comparer] = None) -> Comparer:
    cmp = resolve_compare(compare)

    def _compare(one: Any, other: Any) -> int:
        return cmp(other, one)

    return _compare


def require(**arguments: Any) -> None:
    """Raise ``ValueError`` naming the first argument that is ``None``."""
    for name, value in arguments.items():
        if value is None:
            raise ValueError(f"{name} must not be None")
