from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, TypeVar

from .ordering import Comparer, require, resolve_compare

logger = logging.getLogger(__name__)

TOuter = TypeVar("TOuter")
TInner = TypeVar("TInner")
TKey = TypeVar("TKey")

JoinAction = Callable[[TOuter, TInner], None]

_END = object()


def group_join(
    outer: Iterable[TOuter],
    inner: Iterable[TInner],
    outer_key: Callable[[TOuter], TKey],
    inner_key: Callable[[TInner], TKey],
    join_action: JoinAction,
    *,
    compare: Optional[Comparer] = None,
) -> None:
    """
    Sort-merge join of parents (``outer``) with their children (``inner``).

    Both sequences must be sorted by key. ``join_action(parent, child)`` is
    called once per child whose key equals the current parent key, in child
    order. Parents without children and children without a parent are
    skipped.

    The inner cursor never moves back: a child is consumed by the first
    parent it matches, so a repeated parent key only sees children that are
    still ahead of the cursor.
    """
    require(
        outer=outer,
        inner=inner,
        outer_key=outer_key,
        inner_key=inner_key,
        join_action=join_action,
    )
    cmp = resolve_compare(compare)

    it1 = iter(outer)
    it2 = iter(inner)
    parent = next(it1, _END)
    child = next(it2, _END)

    joined = 0
    while parent is not _END and child is not _END:
        order = cmp(outer_key(parent), inner_key(child))
        if order < 0:
            parent = next(it1, _END)
        elif order > 0:
            child = next(it2, _END)
        else:
            join_action(parent, child)
            joined += 1
            child = next(it2, _END)

    logger.debug("group_join: %d pairs joined", joined)
