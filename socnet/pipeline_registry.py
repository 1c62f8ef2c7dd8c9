"""Project pipelines."""

from typing import Dict

from kedro.pipeline import Pipeline
from socnet.pipeline.graphs import create_pipeline as create_graphs_pipeline


def register_pipelines() -> Dict[str, Pipeline]:
    """Register the project's pipelines."""
    graphs_pipeline = create_graphs_pipeline()

    return {
        "__default__": graphs_pipeline,
        "graph_stats": graphs_pipeline,
    }
