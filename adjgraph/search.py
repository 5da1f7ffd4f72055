# adjgraph/search.py

"""
Breadth-first and depth-first search over a ``Graph``.

Both searches take the same knobs:

    order     SortPolicy or comparator applied to each node's neighbors
              before they are enumerated (the stored order is not touched)
    accept    predicate over a ``Neighbor`` entry; entries it rejects are
              never put on the frontier, which masks nodes or edges out of
              the search without editing the graph
    on_found  handler ``(start, end, parent) -> R`` called once when ``end``
              is taken off the frontier; its return value replaces the
              default path result

Without ``on_found`` a search returns the path ``[start, ..., end]`` or ``[]``
when ``end`` cannot be reached. With ``on_found`` an unreachable ``end``
returns ``None`` and the handler is not called.

Neither search checks that ``start`` or ``end`` exist. A missing ``start``
surfaces as ``GraphError`` (node not found) when its neighbors are first
read; a missing ``end`` is simply never reached.
"""

from __future__ import annotations
from collections import deque
from typing import TYPE_CHECKING, Any, Callable, Deque, Dict, Hashable, List, Optional, Set, TypeVar
import logging

from ._text import safe_str
from .entries import Neighbor
from .ordering import Ordering

if TYPE_CHECKING:
    from .graph import Graph

K = TypeVar("K", bound=Hashable)

Filter = Callable[[Neighbor], bool]
FoundHandler = Callable[[Any, Any, Dict[Any, Any]], Any]

logger = logging.getLogger(__name__)


def reconstruct_path(parent: Dict[K, K], start: K, end: K) -> List[K]:
    """
    Walk ``parent`` back from ``end`` to ``start``.

    Returns the nodes in travel order, both ends included. ``parent`` must
    hold an unbroken chain from ``end`` to ``start``; a search that reached
    ``end`` always leaves one.
    """
    path = [end]
    node = end
    while node != start:
        node = parent[node]
        path.append(node)
    path.reverse()
    return path


def _finish(start, end, parent, on_found: Optional[FoundHandler]):
    if on_found is not None:
        return on_found(start, end, parent)
    return reconstruct_path(parent, start, end)


def _exhausted(start, end, on_found: Optional[FoundHandler]):
    logger.debug(f"{safe_str(end)} not reachable from {safe_str(start)}")
    return None if on_found is not None else []


def breadth_first(
    graph: Graph,
    start: K,
    end: K,
    *,
    order: Optional[Ordering] = None,
    accept: Optional[Filter] = None,
    on_found: Optional[FoundHandler] = None,
):
    """
    FIFO search; the default result is a shortest path by edge count.

    Nodes are marked visited when first discovered, so each one is enqueued
    at most once.
    """
    visited: Set[K] = {start}
    parent: Dict[K, K] = {}
    frontier: Deque[K] = deque([start])

    while frontier:
        node = frontier.popleft()
        if node == end:
            logger.debug(f"BFS reached {safe_str(end)} from {safe_str(start)} after visiting {len(visited)} nodes")
            return _finish(start, end, parent, on_found)

        for entry in graph.neighbors(node, order):
            if accept is not None and not accept(entry):
                continue
            if entry.key in visited:
                continue
            visited.add(entry.key)
            parent[entry.key] = node
            frontier.append(entry.key)

    return _exhausted(start, end, on_found)


def depth_first(
    graph: Graph,
    start: K,
    end: K,
    *,
    order: Optional[Ordering] = None,
    accept: Optional[Filter] = None,
    on_found: Optional[FoundHandler] = None,
):
    """
    Stack search; the default result is a valid path, not necessarily the
    shortest.

    The frontier is a deque pushed and popped at the front. Nodes are marked
    visited when popped and expanded, not when pushed, so a node can sit on
    the frontier several times; only its first pop expands it and later pops
    are skipped.
    """
    visited: Set[K] = set()
    parent: Dict[K, K] = {}
    frontier: Deque[K] = deque([start])

    while frontier:
        node = frontier.popleft()
        if node in visited:
            continue
        visited.add(node)
        if node == end:
            logger.debug(f"DFS reached {safe_str(end)} from {safe_str(start)} after expanding {len(visited)} nodes")
            return _finish(start, end, parent, on_found)

        for entry in graph.neighbors(node, order):
            if accept is not None and not accept(entry):
                continue
            if entry.key in visited:
                continue
            # the latest push is popped first, so it owns the parent link
            parent[entry.key] = node
            frontier.appendleft(entry.key)

    return _exhausted(start, end, on_found)


# ---------- stock completion handlers ----------

def parent_tree(start: K, end: K, parent: Dict[K, K]) -> Dict[K, K]:
    """Copy of the discovery tree built up to the moment ``end`` was reached."""
    return dict(parent)


def hop_count(start: K, end: K, parent: Dict[K, K]) -> int:
    return len(reconstruct_path(parent, start, end)) - 1
