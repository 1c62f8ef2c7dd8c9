"""
Main entry point for running kedro pipelines.
"""

import logging
from typing import Any, Dict, Optional

from kedro.io import DataCatalog, MemoryDataset
from kedro.runner import SequentialRunner

from socnet.config import DEFAULT_PARAMETERS
from socnet.pipeline_registry import register_pipelines
from socnet.settings import PARAMETERS_KEY

logger = logging.getLogger(__name__)

# Datasets shared between nodes; everything else is copied on load
SHARED_DATASETS = {"edge_list", "graph_store", "graph_statistics"}


def build_datasets(pipeline, params: Dict[str, Any]) -> Dict[str, MemoryDataset]:
    """
    Create a memory dataset for every dataset of a pipeline.

    Args:
        pipeline: Pipeline to be run
        params: Graph statistics parameters

    Returns:
        Dict[str, MemoryDataset]: The parameters plus one empty dataset per name
    """
    datasets = {f"params:{PARAMETERS_KEY}": MemoryDataset(params)}
    for name in sorted(pipeline.datasets()):
        if name not in datasets:
            copy_mode = "assign" if name in SHARED_DATASETS else None
            datasets[name] = MemoryDataset(copy_mode=copy_mode)
    return datasets


def run_pipeline(
    params: Optional[Dict[str, Any]] = None,
    pipeline_name: str = "graph_stats",
) -> Dict[str, Any]:
    """
    Run the specified pipeline.

    Args:
        params: Graph statistics parameters, overlaid on DEFAULT_PARAMETERS
        pipeline_name: Name of the registered pipeline to run

    Returns:
        Dict[str, Any]: Pipeline output name -> loaded value
    """
    pipelines = register_pipelines()
    if pipeline_name not in pipelines:
        raise ValueError(f"Unknown pipeline '{pipeline_name}'. Available: {', '.join(sorted(pipelines))}")

    run_params = dict(DEFAULT_PARAMETERS)
    run_params.update(params or {})

    pipeline = pipelines[pipeline_name]
    datasets = build_datasets(pipeline, run_params)

    logging.info(f"Running pipeline: {pipeline_name}")
    SequentialRunner().run(pipeline, DataCatalog(datasets))

    return {name: datasets[name].load() for name in sorted(pipeline.outputs())}
