# adjgraph/entries.py

from typing import Any, Hashable, NamedTuple

DEFAULT_WEIGHT = 1.0

# Any totally ordered value that compares against 1.0 (float, int, Decimal, Fraction, ...)
Weight = Any


class Neighbor(NamedTuple):
    """One adjacency entry: the neighbor's key and the weight of the edge to it."""

    key: Hashable
    weight: Weight = DEFAULT_WEIGHT


class Edge(NamedTuple):
    source: Hashable
    target: Hashable
    weight: Weight = DEFAULT_WEIGHT
