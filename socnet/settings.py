"""Project settings."""

from pathlib import Path

# The location of the project root directory.
PROJECT_ROOT = Path(__file__).parents[1]  # Going up from socnet to the project root

# This is the location of the project configuration directory
CONF_SOURCE = PROJECT_ROOT / "conf"

# Configuration environment holding the shipped defaults
BASE_ENV = "base"

# Top-level key of the graph statistics parameters
PARAMETERS_KEY = "graph_stats"
