from adjgraph import DiGraph, Neighbor, SortPolicy
from helpers import neighbor_keys
import pytest


@pytest.fixture
def star() -> DiGraph[str]:
    g = DiGraph[str](["hub", "b", "d", "a", "c"])
    g.insert_edge("hub", "b", 2.0)
    g.insert_edge("hub", "d", 1.0)
    g.insert_edge("hub", "a", 3.0)
    g.insert_edge("hub", "c", 1.0)
    return g


def test_stored_order_is_insertion_order(star):
    assert neighbor_keys(star, "hub") == ["b", "d", "a", "c"]

@pytest.mark.parametrize("policy, expected", [
    (SortPolicy.KEY_ASCENDING, ["a", "b", "c", "d"]),
    (SortPolicy.KEY_DESCENDING, ["d", "c", "b", "a"]),
    (SortPolicy.WEIGHT_ASCENDING, ["d", "c", "b", "a"]),
    (SortPolicy.WEIGHT_DESCENDING, ["a", "b", "d", "c"]),
])
def test_policy_ordering_is_a_pure_read(star, policy, expected):
    assert [n.key for n in star.neighbors("hub", policy)] == expected
    assert neighbor_keys(star, "hub") == ["b", "d", "a", "c"]

def test_policy_bits_combine():
    assert SortPolicy.DESCENDING | SortPolicy.BY_WEIGHT == SortPolicy.WEIGHT_DESCENDING
    assert SortPolicy.WEIGHT_ASCENDING.by_weight and not SortPolicy.WEIGHT_ASCENDING.descending
    assert SortPolicy.KEY_DESCENDING.descending and not SortPolicy.KEY_DESCENDING.by_weight

def test_weight_ties_keep_current_order(star):
    ordered = star.neighbors("hub", SortPolicy.WEIGHT_ASCENDING)
    assert ordered[:2] == (Neighbor("d", 1.0), Neighbor("c", 1.0))

def test_comparator_ordering(star):
    by_weight_then_key_desc = lambda x, y: (x.weight > y.weight) - (x.weight < y.weight) or (
        (y.key > x.key) - (y.key < x.key))
    assert [n.key for n in star.neighbors("hub", by_weight_then_key_desc)] == ["d", "c", "b", "a"]

def test_sort_neighbors_mutates_stored_order(star):
    snapshot = star.sort_neighbors("hub", SortPolicy.KEY_ASCENDING)
    assert [n.key for n in snapshot] == ["a", "b", "c", "d"]
    assert neighbor_keys(star, "hub") == ["a", "b", "c", "d"]
    star.sort_neighbors("hub", lambda x, y: (x.weight > y.weight) - (x.weight < y.weight))
    assert neighbor_keys(star, "hub") == ["c", "d", "b", "a"]
    assert star.edge_count() == 4

def test_bad_ordering_rejected(star):
    with pytest.raises(TypeError):
        star.neighbors("hub", "ascending")
    assert neighbor_keys(star, "hub") == ["b", "d", "a", "c"]

def test_boolean_comparator_rejected(star):
    less_than = lambda x, y: x.weight < y.weight
    with pytest.raises(TypeError):
        star.neighbors("hub", less_than)
    with pytest.raises(TypeError):
        star.sort_neighbors("hub", less_than)
    assert neighbor_keys(star, "hub") == ["b", "d", "a", "c"]

def test_sorted_order_drives_later_searches(diamond):
    assert diamond.bfs("B", "D") == ["B", "A", "D"]
    diamond.sort_neighbors("B", SortPolicy.KEY_DESCENDING)
    assert diamond.bfs("B", "D") == ["B", "C", "D"]
    assert diamond.dfs("B", "D") == ["B", "A", "D"]
    diamond.sort_neighbors("B", SortPolicy.KEY_ASCENDING)
    assert diamond.bfs("B", "D") == ["B", "A", "D"]
    assert diamond.dfs("B", "D") == ["B", "C", "D"]
