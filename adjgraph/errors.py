# adjgraph/errors.py

from __future__ import annotations
from enum import Enum
from typing import Hashable, Optional


class ErrorKind(Enum):
    NODE_EXISTS = "node exists"
    NODE_NOT_FOUND = "node not found"
    EDGE_EXISTS = "edge exists"
    EDGE_NOT_FOUND = "edge not found"


class GraphError(Exception):
    """
    Structural failure raised by graph operations.

    Every failure carries a ``kind`` so callers can tell the four cases apart:

        try:
            g.insert_edge("A", "B")
        except GraphError as ex:
            if ex.kind is ErrorKind.EDGE_EXISTS:
                ...

    It is always raised before the graph is touched; a failed call leaves no
    partial mutation behind.
    """

    def __init__(self, kind: ErrorKind, message: str, key: Optional[Hashable] = None):
        super().__init__(message)
        self.kind = kind
        self.key = key

    def __repr__(self) -> str:
        return f"GraphError({self.kind.name}, {str(self)!r})"


def node_exists(key: Hashable) -> GraphError:
    return GraphError(ErrorKind.NODE_EXISTS, f"Node {key!r} already exists", key)


def node_not_found(key: Hashable) -> GraphError:
    return GraphError(ErrorKind.NODE_NOT_FOUND, f"Node {key!r} does not exist", key)


def edge_exists(src: Hashable, dest: Hashable) -> GraphError:
    return GraphError(ErrorKind.EDGE_EXISTS, f"Edge {src!r} -> {dest!r} already exists", (src, dest))


def edge_not_found(src: Hashable, dest: Hashable) -> GraphError:
    return GraphError(ErrorKind.EDGE_NOT_FOUND, f"Edge {src!r} -> {dest!r} does not exist", (src, dest))
