"""
Pytest configuration file for the social graph statistics project.

This file contains shared fixtures and configuration for the test suite.
"""
import random

import pytest

from socnet.graphs.edge_list import build_graph_store
from socnet.graphs.store import GraphStore


def make_store(edges, isolated=()):
    """Build a frozen store from identifier pairs plus isolated identifiers."""
    store = GraphStore()
    for source, target in edges:
        store.add_edge(store.add_node(source), store.add_node(target))
    for identifier in isolated:
        store.add_node(identifier)
    return store.freeze()


@pytest.fixture
def empty_store():
    """A frozen graph with no nodes."""
    return GraphStore().freeze()


@pytest.fixture
def single_node_store():
    """A frozen graph with one isolated node."""
    return make_store([], isolated=[7])


@pytest.fixture
def path_store():
    """The 4-node path 1-2-3-4."""
    return make_store([(1, 2), (2, 3), (3, 4)])


@pytest.fixture
def triangle_store():
    """The 3-cycle 1-2-3-1."""
    return make_store([(1, 2), (2, 3), (3, 1)])


@pytest.fixture
def degree_store():
    """Edges (1,2),(2,3) over nodes {1,2,3,4}; node 4 is isolated."""
    return make_store([(1, 2), (2, 3)], isolated=[4])


@pytest.fixture
def two_component_store():
    """A triangle {10,11,12}, an edge {20,21} and an isolated node 30."""
    return make_store([(10, 11), (11, 12), (12, 10), (20, 21)], isolated=[30])


@pytest.fixture
def random_edges():
    """A seeded random simple graph with a few isolated-looking stragglers."""
    rng = random.Random(18755)
    nodes = list(range(60))
    edges = set()
    while len(edges) < 120:
        a, b = rng.sample(nodes, 2)
        edges.add((min(a, b), max(a, b)))
    return sorted(edges)


@pytest.fixture
def random_store(random_edges):
    return build_graph_store(random_edges)


@pytest.fixture
def edge_file(tmp_path):
    """A small SNAP-style edge list with one malformed line."""
    content = """# ego network sample
236 186
122 285
24 346
236 122
186 122

71 x
24 285
"""
    path = tmp_path / "0.edges"
    path.write_text(content)
    return path


@pytest.fixture
def clean_edge_file(tmp_path):
    """An edge list forming a triangle plus a pendant node."""
    path = tmp_path / "clean.edges"
    path.write_text("1 2\n2 3\n3 1\n3 4\n")
    return path


@pytest.fixture
def store_factory():
    """Return the helper that builds frozen stores from identifier pairs."""
    return make_store
