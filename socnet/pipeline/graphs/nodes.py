"""
Pipeline node function definitions for social graph statistics.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from kedro.pipeline import Pipeline, node

from socnet.graphs.core import compute_graph_statistics
from socnet.graphs.edge_list import build_graph_store, read_edge_list
from socnet.graphs.export import render_dot, summarize_statistics, write_dot, write_statistics
from socnet.graphs.store import GraphStore
from socnet.graphs.visualization import plot_degree_distribution, plot_social_graph


logger = logging.getLogger(__name__)


def ingest_edges_node(params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Node function for reading the edge list.

    Args:
        params: Pipeline parameters

    Returns:
        Dict[str, Any]: Source path, identifier pairs and skipped line count
    """
    return read_edge_list(
        Path(params.get("edge_file", "data/facebook/0.edges")),
        strict=params.get("strict", False),
        show_progress=params.get("show_progress", False),
    )


def build_graph_node(edge_list: Dict[str, Any]) -> GraphStore:
    """
    Node function for building the frozen graph store.

    Args:
        edge_list: Output of ingest_edges_node

    Returns:
        GraphStore: The built graph store
    """
    store = build_graph_store(edge_list["edges"])
    logger.info(f"Social graph: |V|={store.node_count():,}, |E|={store.edge_count():,}")
    return store


def compute_statistics_node(store: GraphStore, params: Dict[str, Any]) -> Dict[str, Any]:
    """Node function for running the statistics battery."""
    return compute_graph_statistics(store, n_jobs=params.get("n_jobs", 1))


def export_results_node(
    store: GraphStore,
    stats: Dict[str, Any],
    edge_list: Dict[str, Any],
    params: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Node function for writing statistics, the DOT description and its rendering.

    Args:
        store: Graph store the statistics were computed on
        stats: Output of compute_statistics_node
        edge_list: Output of ingest_edges_node
        params: Pipeline parameters

    Returns:
        Dict[str, Any]: ``statistics``, ``summary`` and ``files`` (name -> path or None)
    """
    output_dir = Path(params.get("output_dir", "data/graph"))
    skipped_lines = edge_list.get("skipped_lines", 0)

    files = write_statistics(store, stats, output_dir=output_dir, skipped_lines=skipped_lines)
    files["dot"] = write_dot(store, output_dir / "graph.dot")

    files["image"] = None
    if params.get("render_image", True):
        image_format = params.get("image_format", "png")
        files["image"] = render_dot(
            files["dot"],
            output_dir / f"graph.{image_format}",
            image_format=image_format,
            dot_binary=params.get("dot_binary", "dot"),
        )

    return {
        "statistics": stats,
        "summary": summarize_statistics(stats, skipped_lines),
        "files": files,
    }


def create_visualizations_node(
    store: GraphStore,
    stats: Dict[str, Any],
    params: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Node function for creating the matplotlib figures.

    Args:
        store: Graph store the statistics were computed on
        stats: Output of compute_statistics_node
        params: Pipeline parameters

    Returns:
        Dict[str, Any]: Figure name -> path (None when skipped)
    """
    if not params.get("make_plots", True):
        logger.info("Plotting disabled; skipping visualizations")
        return {"degree_distribution": None, "social_graph": None}

    output_dir = Path(params.get("visuals_dir", "visuals"))
    output_dir.mkdir(parents=True, exist_ok=True)

    degree_plot = plot_degree_distribution(
        stats["node_degrees"],
        output_file=output_dir / "degree_distribution.png",
    )
    graph_plot = plot_social_graph(
        store,
        stats,
        output_file=output_dir / "social_graph.png",
        node_limit=params.get("plot_node_limit", 200),
    )

    return {"degree_distribution": degree_plot, "social_graph": graph_plot}


def create_pipeline(**kwargs) -> Pipeline:
    """Create the social graph statistics pipeline."""
    return Pipeline(
        [
            node(
                ingest_edges_node,
                inputs="params:graph_stats",
                outputs="edge_list",
                name="ingest_edges",
            ),
            node(
                build_graph_node,
                inputs="edge_list",
                outputs="graph_store",
                name="build_graph",
            ),
            node(
                compute_statistics_node,
                inputs=["graph_store", "params:graph_stats"],
                outputs="graph_statistics",
                name="compute_graph_statistics",
            ),
            node(
                export_results_node,
                inputs=["graph_store", "graph_statistics", "edge_list", "params:graph_stats"],
                outputs="graph_outputs",
                name="export_graph_results",
            ),
            node(
                create_visualizations_node,
                inputs=["graph_store", "graph_statistics", "params:graph_stats"],
                outputs="graph_visualizations",
                name="create_graph_visualizations",
            ),
        ]
    )
