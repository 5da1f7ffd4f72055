"""
adjgraph - in-memory adjacency-list graphs.

Nodes map to ordered lists of ``(neighbor, weight)`` entries; edges are
optionally weighted and optionally directed. Breadth-first and depth-first
search accept a neighbor ordering, a neighbor filter and a completion handler.

Example:
    >>> from adjgraph import Graph
    >>> g = Graph[str](["A", "B", "C", "D"])
    >>> for a, b in [("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")]:
    ...     g.insert_edge(a, b)
    >>> g.bfs("A", "D")
    ['A', 'D']
"""

__version__ = "0.1.0"

from adjgraph.entries import DEFAULT_WEIGHT, Edge, Neighbor, Weight
from adjgraph.errors import ErrorKind, GraphError
from adjgraph.graph import DiGraph, Graph
from adjgraph.ordering import SortPolicy
from adjgraph.search import breadth_first, depth_first, hop_count, parent_tree, reconstruct_path

__all__ = [
    'Graph',
    'DiGraph',
    'Neighbor',
    'Edge',
    'DEFAULT_WEIGHT',
    'Weight',
    'SortPolicy',
    'GraphError',
    'ErrorKind',
    'breadth_first',
    'depth_first',
    'reconstruct_path',
    'parent_tree',
    'hop_count',
]
