"""
Graph visualization utilities for social network statistics.

This module provides functions to create figures from a GraphStore and its
statistics. networkx is used here only for layout and drawing.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from .store import GraphStore

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_VISUALS_DIR = Path("visuals")


def to_networkx(store: GraphStore, use_identifiers: bool = True) -> nx.MultiGraph:
    """
    Convert a graph store into a networkx MultiGraph.

    Args:
        store: Graph store to convert
        use_identifiers: Name nodes by external identifier instead of internal index

    Returns:
        nx.MultiGraph: Graph with every node, self-loop and parallel edge preserved
    """
    G = nx.MultiGraph()
    for index, identifier in enumerate(store.nodes()):
        G.add_node(identifier if use_identifiers else index, index=index)

    for index_a, index_b in store.edges():
        if use_identifiers:
            G.add_edge(store.node_id(index_a), store.node_id(index_b))
        else:
            G.add_edge(index_a, index_b)
    return G


def plot_degree_distribution(
    degrees: Dict[int, int],
    output_file: Path = None,
    visuals_dir: Path = DEFAULT_VISUALS_DIR,
    bins: int = 50,
    figsize: Tuple[int, int] = (10, 6),
    dpi: int = 150
) -> Optional[Path]:
    """
    Create a log-log histogram of node degrees.

    Args:
        degrees: Internal index -> degree
        output_file: Path to save the visualization
        visuals_dir: Directory to save visualizations
        bins: Number of histogram bins
        figsize: Figure size
        dpi: Output DPI

    Returns:
        Optional[Path]: Path to the saved visualization, None for an empty graph
    """
    logger.info("Creating degree distribution histogram")

    if output_file is None:
        visuals_dir.mkdir(parents=True, exist_ok=True)
        output_file = visuals_dir / "degree_distribution.png"

    values = np.fromiter(degrees.values(), dtype=np.int64, count=len(degrees))
    if values.size == 0:
        logger.warning("No nodes to plot; skipping degree distribution")
        return None

    positive = values[values > 0]

    plt.figure(figsize=figsize)
    if positive.size > 0 and positive.max() > positive.min():
        edges = np.logspace(np.log10(positive.min()), np.log10(positive.max() + 1), bins)
        plt.hist(positive, bins=edges, color="skyblue", edgecolor="black", alpha=0.8)
        plt.xscale("log")
        plt.yscale("log")
    else:
        plt.hist(values, bins=max(1, min(bins, int(values.max()) + 1)), color="skyblue", edgecolor="black")

    isolated = int(values.size - positive.size)
    plt.title(f"Degree Distribution ({values.size:,} nodes, {isolated:,} isolated)")
    plt.xlabel("Degree")
    plt.ylabel("Frequency")
    plt.tight_layout()
    plt.savefig(output_file, dpi=dpi, bbox_inches="tight")
    plt.close()

    logger.info(f"Saved degree distribution to {output_file}")
    return Path(output_file)


def plot_social_graph(
    store: GraphStore,
    stats: Dict[str, Any],
    output_file: Path = None,
    visuals_dir: Path = DEFAULT_VISUALS_DIR,
    node_limit: int = 200,
    layout: str = "spring",
    figsize: Tuple[int, int] = (10, 8),
    dpi: int = 150
) -> Optional[Path]:
    """
    Draw the graph, sized by degree and colored by connected component.

    Args:
        store: Graph store to draw
        stats: Output of compute_graph_statistics
        output_file: Path to save the visualization
        visuals_dir: Directory to save visualizations
        node_limit: Maximum number of nodes to include (highest degree first)
        layout: Graph layout algorithm ('spring', 'kamada_kawai', 'circular')
        figsize: Figure size
        dpi: Output DPI

    Returns:
        Optional[Path]: Path to the saved visualization, None for an empty graph
    """
    logger.info("Creating social graph visualization")

    if output_file is None:
        visuals_dir.mkdir(parents=True, exist_ok=True)
        output_file = visuals_dir / "social_graph.png"

    if store.node_count() == 0:
        logger.warning("Graph is empty; skipping drawing")
        return None

    G = nx.Graph(to_networkx(store, use_identifiers=False))
    degrees = stats["node_degrees"]

    # If the graph is too large, select top nodes by degree
    if G.number_of_nodes() > node_limit:
        logger.info(f"Selecting top {node_limit} nodes from graph with {G.number_of_nodes()} nodes")
        top_nodes = sorted(degrees.keys(), key=lambda x: degrees[x], reverse=True)[:node_limit]
        G = G.subgraph(top_nodes)

    components = stats["connected_components"]
    node_sizes = [20 + degrees[node] * 5 for node in G.nodes()]
    node_colors = [components[node] for node in G.nodes()]

    plt.figure(figsize=figsize)

    # Choose layout
    if layout == "kamada_kawai":
        pos = nx.kamada_kawai_layout(G)
    elif layout == "circular":
        pos = nx.circular_layout(G)
    else:
        pos = nx.spring_layout(G, k=0.3, iterations=50, seed=42)

    nx.draw_networkx_nodes(G, pos, node_size=node_sizes, node_color=node_colors, cmap="tab20", alpha=0.8)
    nx.draw_networkx_edges(G, pos, width=0.5, alpha=0.3)

    plt.axis("off")
    plt.tight_layout()
    plt.savefig(output_file, dpi=dpi, bbox_inches="tight")
    plt.close()

    logger.info(f"Saved social graph visualization to {output_file}")
    return Path(output_file)
