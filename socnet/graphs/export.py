"""
Export utilities for social graph statistics.

This module turns the plain result mappings produced by ``core`` into files
and text: per-node parquet tables, a JSON summary, a Graphviz DOT description
and a rendered image produced by the external ``dot`` tool.
"""

import json
import logging
import shutil
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional

import polars as pl

from .store import GraphStore

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_OUTPUT_DIR = Path("data/graph")


def to_dot(store: GraphStore) -> str:
    """
    Render the graph as an undirected Graphviz DOT document.

    Nodes are named by internal index and labelled with their identifier;
    edges carry no label.
    """
    lines = ["graph {"]
    for index, identifier in enumerate(store.nodes()):
        lines.append(f'    {index} [ label = "{identifier}" ]')
    for index_a, index_b in store.edges():
        lines.append(f"    {index_a} -- {index_b} [ ]")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(store: GraphStore, output_file: Path) -> Path:
    """
    Write the DOT description of a graph.

    Args:
        store: Graph store to describe
        output_file: Path of the .dot file

    Returns:
        Path: Path to the saved DOT file
    """
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(to_dot(store), encoding="utf-8")
    logger.info(f"Saved DOT description to {output_file}")
    return output_file


def render_dot(
    dot_file: Path,
    output_file: Path,
    image_format: str = "png",
    dot_binary: str = "dot",
) -> Optional[Path]:
    """
    Render a DOT file with Graphviz.

    Args:
        dot_file: Path to the DOT description
        output_file: Path of the rendered image
        image_format: Graphviz output format (png, svg, pdf, ...)
        dot_binary: Name or path of the Graphviz layout program

    Returns:
        Optional[Path]: Path to the rendered image, or None if rendering failed
    """
    executable = shutil.which(dot_binary)
    if executable is None:
        logger.error(f"Graphviz executable '{dot_binary}' not found; skipping rendering")
        return None

    command = [executable, f"-T{image_format}", str(dot_file), "-o", str(output_file)]
    logger.info(f"Rendering {dot_file} with Graphviz")
    try:
        subprocess.run(command, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        logger.error(f"Error executing Graphviz: {e.stderr.strip() or e}")
        return None
    except OSError as e:
        logger.error(f"Error executing Graphviz: {e}")
        return None

    logger.info(f"Saved graph rendering to {output_file}")
    return Path(output_file)


def node_statistics_frame(store: GraphStore, stats: Dict[str, Any]) -> pl.DataFrame:
    """
    Collect the per-node statistics into one DataFrame.

    Args:
        store: Graph store the statistics were computed on
        stats: Output of compute_graph_statistics

    Returns:
        pl.DataFrame: One row per node, in internal index order
    """
    indices = list(range(store.node_count()))
    return pl.DataFrame(
        {
            "index": indices,
            "node_id": list(store.nodes()),
            "degree": [stats["node_degrees"][i] for i in indices],
            "degree_centrality": [stats["degree_centrality"][i] for i in indices],
            "component": [stats["connected_components"][i] for i in indices],
            "community": [stats["communities"][i] for i in indices],
        },
        schema={
            "index": pl.UInt64,
            "node_id": pl.UInt64,
            "degree": pl.UInt64,
            "degree_centrality": pl.Float64,
            "component": pl.UInt64,
            "community": pl.UInt64,
        },
    )


def summarize_statistics(stats: Dict[str, Any], skipped_lines: int = 0) -> Dict[str, Any]:
    """Collect the scalar statistics into a JSON-serializable summary."""
    sizes = stats.get("component_sizes", {})
    return {
        "node_count": stats["node_count"],
        "edge_count": stats["edge_count"],
        "triangle_count": stats["triangle_count"],
        "graph_density": stats["graph_density"],
        "component_count": stats["component_count"],
        "largest_component_size": max(sizes.values()) if sizes else 0,
        "community_count": len(set(stats["communities"].values())),
        "skipped_lines": skipped_lines,
    }


def write_statistics(
    store: GraphStore,
    stats: Dict[str, Any],
    output_dir: Path = DEFAULT_OUTPUT_DIR,
    skipped_lines: int = 0,
) -> Dict[str, Path]:
    """
    Save node statistics as parquet and the graph summary as JSON.

    Args:
        store: Graph store the statistics were computed on
        stats: Output of compute_graph_statistics
        output_dir: Directory to save the output
        skipped_lines: Malformed input lines skipped during ingestion

    Returns:
        Dict[str, Path]: Paths to ``node_statistics`` and ``graph_summary``
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    node_stats_path = output_dir / "node_statistics.parquet"
    node_statistics_frame(store, stats).write_parquet(node_stats_path)
    logger.info(f"Saved node statistics to {node_stats_path}")

    summary_path = output_dir / "graph_summary.json"
    with open(summary_path, "w") as f:
        json.dump(summarize_statistics(stats, skipped_lines), f, indent=2)
    logger.info(f"Saved graph summary to {summary_path}")

    return {"node_statistics": node_stats_path, "graph_summary": summary_path}


def format_report(stats: Dict[str, Any], max_items: Optional[int] = None) -> List[str]:
    """
    Format the statistics battery as printable lines.

    Args:
        stats: Output of compute_graph_statistics
        max_items: Truncate per-node maps to this many entries (None prints all)

    Returns:
        List[str]: Report lines
    """
    def _mapping(values: Dict[int, Any], fmt: str = "{}") -> str:
        items = list(values.items())
        shown = items if max_items is None else items[:max_items]
        body = ", ".join(f"{k}: {fmt.format(v)}" for k, v in shown)
        if len(shown) < len(items):
            body += f", ... ({len(items) - len(shown)} more)"
        return "{" + body + "}"

    return [
        f"Nodes: {stats['node_count']}",
        f"Edges: {stats['edge_count']}",
        f"Communities: {_mapping(stats['communities'])}",
        f"Node Degrees: {_mapping(stats['node_degrees'])}",
        f"Triangle Count: {stats['triangle_count']}",
        f"Connected Components: {stats['component_count']}",
        f"Graph Density: {stats['graph_density']:.4f}",
        f"Node Centrality: {_mapping(stats['degree_centrality'], '{:.4f}')}",
    ]
