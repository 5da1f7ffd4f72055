# adjgraph/ordering.py

"""
Neighbor ordering.

An ordering is either a built-in ``SortPolicy`` or a caller comparator
``cmp(a, b) -> int`` over ``Neighbor`` entries (negative when ``a`` sorts
first, zero when tied, positive otherwise). A comparator returning a ``bool``
is rejected with ``TypeError``. Sorting is stable: entries that
compare equal keep their current relative order.
"""

from __future__ import annotations
from enum import IntFlag
from functools import cmp_to_key
from typing import Any, Callable, List, Sequence, Union

from .entries import Neighbor

Comparator = Callable[[Neighbor, Neighbor], int]


class SortPolicy(IntFlag):
    """Direction bit combined with a by-weight bit."""

    ASCENDING = 0
    DESCENDING = 1
    BY_WEIGHT = 2

    KEY_ASCENDING = 0
    KEY_DESCENDING = 1
    WEIGHT_ASCENDING = 2
    WEIGHT_DESCENDING = 3

    @property
    def descending(self) -> bool:
        return bool(self & SortPolicy.DESCENDING)

    @property
    def by_weight(self) -> bool:
        return bool(self & SortPolicy.BY_WEIGHT)


Ordering = Union[SortPolicy, Comparator]


def _policy_key(policy: SortPolicy) -> Callable[[Neighbor], Any]:
    if policy.by_weight:
        return lambda n: n.weight
    return lambda n: n.key


def _three_way(cmp: Comparator) -> Comparator:
    def compare(a: Neighbor, b: Neighbor) -> int:
        result = cmp(a, b)
        # a "less than" predicate would silently mis-sort under cmp_to_key
        if isinstance(result, bool):
            raise TypeError("Comparator must return a negative, zero or positive int, not bool")
        return result
    return compare


def ordered(entries: Sequence[Neighbor], order: Ordering) -> List[Neighbor]:
    """Return a new list of ``entries`` arranged by ``order``."""
    if isinstance(order, SortPolicy):
        return sorted(entries, key=_policy_key(order), reverse=order.descending)
    if callable(order):
        return sorted(entries, key=cmp_to_key(_three_way(order)))
    raise TypeError(f"Ordering must be a SortPolicy or a comparator; got {type(order).__name__}")


def sort_in_place(entries: List[Neighbor], order: Ordering) -> None:
    entries[:] = ordered(entries, order)
