# adjgraph/graph.py


from __future__ import annotations
from typing import Callable, Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Tuple, Type, TypeVar
import logging

from . import search
from ._text import safe_str
from .entries import DEFAULT_WEIGHT, Edge, Neighbor, Weight
from .errors import edge_exists, edge_not_found, node_exists, node_not_found
from .ordering import Ordering, ordered, sort_in_place

K = TypeVar("K", bound=Hashable)

logger = logging.getLogger(__name__)


class Graph(Generic[K]):
    """
    Adjacency-list graph with weighted edges:
    - each node owns an ordered list of ``Neighbor(key, weight)`` entries
    - undirected edges are mirrored into both endpoints' lists
    - every structural failure raises ``GraphError`` before anything changes
    - getters hand out immutable snapshots, never the stored lists
    - optional validation and capacity guards for untrusted keys
    """

    def __init__(
        self,
        nodes: Optional[Iterable[K]] = None,
        *,
        directed: bool = False,
        allow_self_loops: bool = True,
        # Validation knobs (all optional; defaults are permissive)
        restrict_key_types: Optional[Tuple[Type, ...]] = None,
        key_validator: Optional[Callable[[K], bool]] = None,
        # Capacity guards
        max_nodes: Optional[int] = None,
        max_degree: Optional[int] = None,
    ):
        self._adj: Dict[K, List[Neighbor]] = {}
        self._node_count = 0
        self._edge_count = 0
        self._weighted = False
        self.directed = directed
        self.allow_self_loops = allow_self_loops
        self._restrict_key_types = restrict_key_types
        self._key_validator = key_validator
        self._max_nodes = max_nodes
        self._max_degree = max_degree

        if nodes is not None:
            for key in nodes:
                self.insert_node(key)

    # ---------- internal helpers ----------

    def _validate_key(self, key: K) -> None:
        try:
            hash(key)
        except TypeError as e:
            raise TypeError(f"Node key must be hashable; got {type(key).__name__}") from e

        if self._restrict_key_types is not None and not isinstance(key, self._restrict_key_types):
            allowed = ", ".join(t.__name__ for t in self._restrict_key_types)
            raise TypeError(f"Node key type {type(key).__name__} not allowed (allowed: {allowed})")

        if self._key_validator is not None and not self._key_validator(key):
            raise ValueError("Node key failed custom validation")

    def _check_capacity_before_insert_node(self) -> None:
        if self._max_nodes is not None and len(self._adj) >= self._max_nodes:
            raise OverflowError(f"Node cap exceeded (max_nodes={self._max_nodes})")

    def _check_degree_before_insert_edge(self, src: K, dest: K) -> None:
        # Applies to the outgoing list (and the mirrored list for undirected graphs)
        if self._max_degree is None:
            return
        if len(self._adj[src]) >= self._max_degree:
            raise OverflowError(f"Degree cap exceeded for {src!r} (max_degree={self._max_degree})")
        if not self.directed:
            # an undirected self-loop lands twice in the same list
            pending = 1 if src == dest else 0
            if len(self._adj[dest]) + pending >= self._max_degree:
                raise OverflowError(f"Degree cap exceeded for {dest!r} (max_degree={self._max_degree})")

    def _entries(self, key: K) -> List[Neighbor]:
        try:
            return self._adj[key]
        except KeyError:
            raise node_not_found(key) from None

    @staticmethod
    def _index_of(entries: List[Neighbor], key: K) -> int:
        for i, entry in enumerate(entries):
            if entry.key == key:
                return i
        return -1

    def _edge_exists(self, src: K, dest: K) -> bool:
        if self._index_of(self._adj[src], dest) < 0:
            return False
        if self.directed:
            return True
        return self._index_of(self._adj[dest], src) >= 0

    # ---------- mutation ----------

    def insert_node(self, key: K) -> None:
        self._validate_key(key)
        if key in self._adj:
            raise node_exists(key)
        self._check_capacity_before_insert_node()
        self._adj[key] = []
        self._node_count += 1
        logger.debug(f"Inserted node {safe_str(key)}")

    def remove_node(self, key: K) -> None:
        """
        Remove ``key`` together with every edge that touches it.

        The node's own entries and every entry in other lists that points at
        it are dropped, and each dropped entry is taken off the edge count,
        so an undirected edge costs 2 and a directed one 1.
        """
        removed = len(self._entries(key))
        del self._adj[key]
        self._node_count -= 1

        for entries in self._adj.values():
            kept = [entry for entry in entries if entry.key != key]
            removed += len(entries) - len(kept)
            entries[:] = kept

        self._edge_count -= removed
        logger.debug(f"Removed node {safe_str(key)} and {removed} adjacency entries")

    def insert_edge(self, src: K, dest: K, weight: Weight = DEFAULT_WEIGHT) -> None:
        src_entries = self._entries(src)
        dest_entries = self._entries(dest)

        if not self.allow_self_loops and src == dest:
            raise ValueError("Self-loops are disabled (set allow_self_loops=True to permit)")
        if self._edge_exists(src, dest):
            raise edge_exists(src, dest)
        self._check_degree_before_insert_edge(src, dest)

        src_entries.append(Neighbor(dest, weight))
        if self.directed:
            self._edge_count += 1
        else:
            dest_entries.append(Neighbor(src, weight))
            self._edge_count += 2
        if weight != DEFAULT_WEIGHT:
            self._weighted = True
        logger.debug(f"Inserted edge {safe_str(src)} -> {safe_str(dest)} (weight={weight})")

    def remove_edge(self, src: K, dest: K) -> None:
        src_entries = self._entries(src)
        dest_entries = self._entries(dest)

        if not self._edge_exists(src, dest):
            raise edge_not_found(src, dest)

        del src_entries[self._index_of(src_entries, dest)]
        if self.directed:
            self._edge_count -= 1
        else:
            del dest_entries[self._index_of(dest_entries, src)]
            self._edge_count -= 2
        logger.debug(f"Removed edge {safe_str(src)} -> {safe_str(dest)}")

    def sort_neighbors(self, key: K, order: Ordering) -> Tuple[Neighbor, ...]:
        """
        Reorder ``key``'s stored adjacency list in place and return a snapshot.

        The new order sticks: later reads and traversals without an explicit
        ordering see it until the list is sorted again.
        """
        entries = self._entries(key)
        sort_in_place(entries, order)
        return tuple(entries)

    def clear(self) -> None:
        self._adj.clear()
        self._node_count = 0
        self._edge_count = 0
        self._weighted = False

    # ---------- queries ----------

    def neighbors(self, key: K, order: Optional[Ordering] = None) -> Tuple[Neighbor, ...]:
        """
        Snapshot of ``key``'s adjacency entries.

        Without ``order`` the entries come back in stored order (insertion
        order unless ``sort_neighbors`` was called). With a ``SortPolicy`` or
        a comparator, a freshly ordered copy is returned and the stored list
        is left alone.
        """
        entries = self._entries(key)
        if order is None:
            return tuple(entries)
        return tuple(ordered(entries, order))

    def weight(self, src: K, dest: K) -> Weight:
        entries = self._entries(src)
        self._entries(dest)  # must exist too
        i = self._index_of(entries, dest)
        if i < 0:
            raise edge_not_found(src, dest)
        return entries[i].weight

    def has_node(self, key: K) -> bool:
        return key in self._adj

    def has_edge(self, src: K, dest: K) -> bool:
        return src in self._adj and dest in self._adj and self._edge_exists(src, dest)

    def nodes(self) -> Tuple[K, ...]:
        return tuple(self._adj.keys())

    def edges(self) -> Tuple[Edge, ...]:
        if self.directed:
            return tuple(Edge(u, n.key, n.weight) for u, entries in self._adj.items() for n in entries)
        # undirected: emit each edge once, skipping its mirror entry
        mirrors: Dict[Tuple[K, K], int] = {}
        out = []
        for u, entries in self._adj.items():
            for n in entries:
                pair = (u, n.key)
                if mirrors.get(pair):
                    mirrors[pair] -= 1
                    continue
                mirror = (n.key, u)
                mirrors[mirror] = mirrors.get(mirror, 0) + 1
                out.append(Edge(u, n.key, n.weight))
        return tuple(out)

    def node_count(self) -> int:
        return self._node_count

    def edge_count(self) -> int:
        return self._edge_count

    def size(self) -> int:
        return len(self._adj)

    def empty(self) -> bool:
        return not self._adj

    @property
    def weighted(self) -> bool:
        """True once any edge was inserted with a weight other than 1.0."""
        return self._weighted

    # degrees
    def out_degree(self, key: K) -> int:
        return len(self._entries(key))

    def in_degree(self, key: K) -> int:
        entries = self._entries(key)
        if not self.directed:
            return len(entries)
        return sum(1 for others in self._adj.values() for n in others if n.key == key)

    def degree(self, key: K) -> int:
        if self.directed:
            return self.out_degree(key) + self.in_degree(key)
        return self.out_degree(key)

    # ---------- traversal ----------

    def bfs(
        self,
        start: K,
        end: K,
        *,
        order: Optional[Ordering] = None,
        accept: Optional[search.Filter] = None,
        on_found: Optional[search.FoundHandler] = None,
    ):
        """Breadth-first search; see ``adjgraph.search.breadth_first``."""
        return search.breadth_first(self, start, end, order=order, accept=accept, on_found=on_found)

    def dfs(
        self,
        start: K,
        end: K,
        *,
        order: Optional[Ordering] = None,
        accept: Optional[search.Filter] = None,
        on_found: Optional[search.FoundHandler] = None,
    ):
        """Depth-first search; see ``adjgraph.search.depth_first``."""
        return search.depth_first(self, start, end, order=order, accept=accept, on_found=on_found)

    # ---------- dunder ----------

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, key: object) -> bool:
        return key in self._adj

    def __iter__(self) -> Iterator[K]:
        return iter(tuple(self._adj))

    def __str__(self) -> str:
        kind = "Directed" if self.directed else "Undirected"
        lines = []
        for u, entries in self._adj.items():
            if self._weighted:
                nbrs = ", ".join(f"{safe_str(n.key)} ({safe_str(n.weight)})" for n in entries)
            else:
                nbrs = ", ".join(safe_str(n.key) for n in entries)
            lines.append(f"{safe_str(u)}: [{nbrs}]")
        return f"{kind}Graph {{\n  " + "\n  ".join(lines) + "\n}"

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(directed={self.directed}, "
                f"nodes={self._node_count}, edges={self._edge_count})")


class DiGraph(Graph[K]):
    """``Graph`` with ``directed=True`` fixed at construction."""

    def __init__(self, nodes: Optional[Iterable[K]] = None, **options):
        super().__init__(nodes, directed=True, **options)
