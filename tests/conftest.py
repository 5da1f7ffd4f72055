# adjgraph/tests/conftest.py
import os
import sys

import pytest

# Add the project root (the parent of tests/) to sys.path so `import adjgraph` works from a checkout
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from adjgraph import DiGraph, Graph  # noqa: E402


@pytest.fixture
def diamond() -> Graph[str]:
    """Undirected square A-B-C-D-A."""
    g = Graph[str](["A", "B", "C", "D"])
    for a, b in [("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")]:
        g.insert_edge(a, b)
    return g


@pytest.fixture
def dag() -> DiGraph[str]:
    """Directed S->A->C->T and S->B->T, with a dead end A->X."""
    g = DiGraph[str](["S", "A", "B", "C", "T", "X"])
    for a, b in [("S", "A"), ("S", "B"), ("A", "C"), ("C", "T"), ("B", "T"), ("A", "X")]:
        g.insert_edge(a, b)
    return g
