"""
Core graph analytics for undirected social networks.

This module provides functions to:
1. Count node degrees and triangles
2. Calculate graph density and degree centrality
3. Find connected components and assign partition labels
4. Run the full statistics battery, optionally on a process pool

Every function is a read-only query over a frozen GraphStore.
"""

import logging
import multiprocessing as mp
from collections import deque
from typing import Any, Callable, Dict, List, Set

from .store import GraphStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def calculate_node_degrees(store: GraphStore) -> Dict[int, int]:
    """
    Calculate the degree of every node.

    Args:
        store: Graph store to analyze

    Returns:
        Dict[int, int]: Internal index -> number of incident edge endpoints
    """
    degrees = {index: store.degree(index) for index in range(store.node_count())}
    logger.info(f"Calculated degrees for {len(degrees):,} nodes")
    return degrees


def _neighbor_sets(store: GraphStore) -> List[Set[int]]:
    # Self-loops never close a triangle
    return [
        {m for m in store.neighbors(n) if m != n}
        for n in range(store.node_count())
    ]


def count_triangles(store: GraphStore) -> int:
    """
    Count triangles by intersecting neighbor sets.

    For every node n and every neighbor m of n, the common neighbors of n and m
    are added to a running total. Each triangle is seen once per ordered pair of
    its vertices, six times in all. Parallel edges collapse into a single
    adjacency and self-loops are ignored.

    Args:
        store: Graph store to analyze

    Returns:
        int: Number of unordered triangles
    """
    neighbor_sets = _neighbor_sets(store)

    total = 0
    for n, n_neighbors in enumerate(neighbor_sets):
        for m in n_neighbors:
            total += len(n_neighbors & neighbor_sets[m])

    triangles = total // 6
    logger.info(f"Triangle count: {triangles:,}")
    return triangles


def calculate_graph_density(store: GraphStore) -> float:
    """
    Calculate undirected graph density 2|E| / (|V| (|V| - 1)).

    Graphs with fewer than two nodes have density 0.0.
    """
    node_count = store.node_count()
    edge_count = store.edge_count()
    if node_count < 2:
        return 0.0

    density = (2.0 * edge_count) / (node_count * (node_count - 1))
    logger.info(f"Graph density: {density:.4f}")
    return density


def calculate_degree_centrality(store: GraphStore) -> Dict[int, float]:
    """
    Calculate degree centrality, degree / (|V| - 1), for every node.

    Args:
        store: Graph store to analyze

    Returns:
        Dict[int, float]: Internal index -> centrality. Every node gets 0.0
        when the graph has a single node.
    """
    node_count = store.node_count()
    if node_count < 2:
        if node_count == 1:
            logger.warning("Degree centrality is undefined for a single-node graph; reporting 0.0")
        return {index: 0.0 for index in range(node_count)}

    divisor = float(node_count - 1)
    return {index: store.degree(index) / divisor for index in range(node_count)}


def find_connected_components(store: GraphStore) -> Dict[int, int]:
    """
    Label every node with the connected component it belongs to.

    Components are discovered by breadth-first search from each unvisited node
    in index order, so labels are 0, 1, 2, ... in order of each component's
    lowest index.

    Args:
        store: Graph store to analyze

    Returns:
        Dict[int, int]: Internal index -> component label
    """
    labels: Dict[int, int] = {}
    next_label = 0

    for start in range(store.node_count()):
        if start in labels:
            continue

        labels[start] = next_label
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in store.neighbors(current):
                if neighbor not in labels:
                    labels[neighbor] = next_label
                    queue.append(neighbor)

        next_label += 1

    logger.info(f"Found {next_label:,} connected components")
    return dict(sorted(labels.items()))


def count_connected_components(store: GraphStore) -> int:
    """Return the number of distinct connected components."""
    return len(set(find_connected_components(store).values()))


def component_sizes(labels: Dict[int, int]) -> Dict[int, int]:
    """
    Count nodes per component label.

    Args:
        labels: Output of find_connected_components

    Returns:
        Dict[int, int]: Component label -> node count, largest component first
    """
    sizes: Dict[int, int] = {}
    for label in labels.values():
        sizes[label] = sizes.get(label, 0) + 1
    return dict(sorted(sizes.items(), key=lambda item: (-item[1], item[0])))


def detect_communities(store: GraphStore) -> Dict[int, int]:
    """
    Assign partition labels to nodes.

    This is a placeholder, not community detection: nodes are visited in index
    order and each one receives a fresh label without looking at adjacency, so
    every node ends up in its own partition.

    Args:
        store: Graph store to analyze

    Returns:
        Dict[int, int]: Internal index -> partition label
    """
    communities: Dict[int, int] = {}
    current_community = 0

    for index in range(store.node_count()):
        if index not in communities:
            communities[index] = current_community
            current_community += 1

    logger.info(f"Assigned {current_community:,} partition labels")
    return communities


# Name of each statistic -> analyzer producing it
ANALYZERS: Dict[str, Callable[[GraphStore], Any]] = {
    "node_degrees": calculate_node_degrees,
    "triangle_count": count_triangles,
    "graph_density": calculate_graph_density,
    "degree_centrality": calculate_degree_centrality,
    "connected_components": find_connected_components,
    "communities": detect_communities,
}


def compute_graph_statistics(store: GraphStore, n_jobs: int = 1) -> Dict[str, Any]:
    """
    Run the full statistics battery over a graph store.

    Args:
        store: Graph store to analyze; frozen first if still under construction
        n_jobs: Number of worker processes. 1 runs every analyzer in this process.

    Returns:
        Dict[str, Any]: Statistic name -> result, plus ``node_count``,
        ``edge_count``, ``component_count`` and ``component_sizes``
    """
    store.freeze()
    logger.info(
        f"Computing graph statistics for |V|={store.node_count():,}, "
        f"|E|={store.edge_count():,} (n_jobs={n_jobs})"
    )

    if n_jobs > 1:
        with mp.Pool(processes=min(n_jobs, len(ANALYZERS))) as pool:
            pending = {
                name: pool.apply_async(analyzer, (store,))
                for name, analyzer in ANALYZERS.items()
            }
            results = {name: result.get() for name, result in pending.items()}
    else:
        results = {name: analyzer(store) for name, analyzer in ANALYZERS.items()}

    labels = results["connected_components"]
    results["node_count"] = store.node_count()
    results["edge_count"] = store.edge_count()
    results["component_count"] = len(set(labels.values()))
    results["component_sizes"] = component_sizes(labels)
    return results
