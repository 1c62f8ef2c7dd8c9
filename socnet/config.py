"""
Parameter loading for the graph statistics pipeline.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from kedro.config import OmegaConfigLoader

from socnet.settings import BASE_ENV, CONF_SOURCE, PARAMETERS_KEY

logger = logging.getLogger(__name__)

DEFAULT_PARAMETERS: Dict[str, Any] = {
    "edge_file": "data/facebook/0.edges",
    "output_dir": "data/graph",
    "visuals_dir": "visuals",
    "strict": False,
    "show_progress": False,
    "n_jobs": 1,
    "render_image": True,
    "image_format": "png",
    "dot_binary": "dot",
    "make_plots": True,
    "plot_node_limit": 200,
}


def load_parameters(
    conf_source: Optional[Union[str, Path]] = None,
    env: str = BASE_ENV,
) -> Dict[str, Any]:
    """
    Load graph statistics parameters from a Kedro configuration directory.

    Args:
        conf_source: Configuration root containing ``<env>/parameters*.yml``
        env: Configuration environment to read

    Returns:
        Dict[str, Any]: DEFAULT_PARAMETERS overlaid with the configured values
    """
    conf_source = Path(conf_source) if conf_source is not None else CONF_SOURCE
    logger.info(f"Loading parameters from {conf_source / env}")

    config_loader = OmegaConfigLoader(
        conf_source=str(conf_source),
        base_env=env,
        default_run_env=env,
    )
    configured = config_loader["parameters"].get(PARAMETERS_KEY) or {}

    unknown = set(configured) - set(DEFAULT_PARAMETERS)
    if unknown:
        logger.warning(f"Ignoring unknown parameters: {', '.join(sorted(unknown))}")

    params = dict(DEFAULT_PARAMETERS)
    params.update({k: v for k, v in configured.items() if k in DEFAULT_PARAMETERS})
    return params
