"""
Unit tests for the adjacency-list graph store.
"""
import pytest

from socnet.graphs.errors import GraphFrozenError, NodeIndexError
from socnet.graphs.store import GraphStore


def test_add_node_assigns_dense_indices_in_first_seen_order():
    store = GraphStore()
    assert store.add_node(236) == 0
    assert store.add_node(186) == 1
    assert store.add_node(236) == 0
    assert store.add_node(5) == 2

    assert store.node_count() == 3
    assert list(store.nodes()) == [236, 186, 5]
    assert store.node_id(1) == 186
    assert store.index_of(5) == 2
    assert 186 in store
    assert 999 not in store


def test_index_of_unknown_identifier_raises_key_error():
    store = GraphStore()
    store.add_node(1)
    with pytest.raises(KeyError):
        store.index_of(2)


def test_add_edge_is_undirected():
    store = GraphStore()
    a, b, c = store.add_node(1), store.add_node(2), store.add_node(3)
    store.add_edge(a, b)
    store.add_edge(b, c)

    assert store.edge_count() == 2
    assert store.neighbors(a) == [b]
    assert sorted(store.neighbors(b)) == [a, c]
    assert store.neighbors(c) == [b]
    assert list(store.edges()) == [(a, b), (b, c)]


def test_parallel_edges_and_self_loops_are_preserved():
    store = GraphStore()
    a, b = store.add_node(1), store.add_node(2)
    store.add_edge(a, b)
    store.add_edge(a, b)
    store.add_edge(a, a)

    assert store.edge_count() == 3
    assert sorted(store.neighbors(a)) == [a, a, b, b]
    assert store.neighbors(b) == [a, a]
    assert store.degree(a) == 4


def test_neighbors_returns_a_copy():
    store = GraphStore()
    a, b = store.add_node(1), store.add_node(2)
    store.add_edge(a, b)

    store.neighbors(a).append(99)
    assert store.neighbors(a) == [b]


def test_unknown_index_raises():
    store = GraphStore()
    a = store.add_node(1)

    with pytest.raises(NodeIndexError):
        store.add_edge(a, 1)
    with pytest.raises(IndexError):
        store.neighbors(-1)
    with pytest.raises(NodeIndexError):
        store.node_id(3)


def test_frozen_store_rejects_mutation():
    store = GraphStore()
    a, b = store.add_node(1), store.add_node(2)
    store.add_edge(a, b)
    store.freeze()

    assert store.is_frozen
    # Looking up a known identifier is still allowed
    assert store.add_node(1) == a

    with pytest.raises(GraphFrozenError):
        store.add_node(3)
    with pytest.raises(GraphFrozenError):
        store.add_edge(a, b)

    assert store.node_count() == 2
    assert store.edge_count() == 1


def test_freeze_is_idempotent():
    store = GraphStore()
    assert store.freeze() is store
    assert store.freeze() is store
    assert store.is_frozen
    assert len(store) == 0
    assert "frozen" in repr(store)
