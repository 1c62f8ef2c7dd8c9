#!/usr/bin/env python
"""
Run the social graph statistics pipeline.

This script reads an undirected edge list, computes node degrees, triangle count,
density, degree centrality, connected components and partition labels, writes
the results and a Graphviz rendering, and prints the statistics.

Example:
    $ python run_graph_stats.py facebook/0.edges
    $ python run_graph_stats.py facebook/0.edges --strict --no-render
    $ python run_graph_stats.py --conf conf --n-jobs 4 --max-items 20
"""

import sys
import argparse
import logging
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from socnet.config import load_parameters
from socnet.graphs.errors import MalformedEdgeError
from socnet.graphs.export import format_report
from socnet.main import run_pipeline

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compute structural statistics for a social network edge list"
    )

    parser.add_argument(
        "edge_file",
        nargs="?",
        help="Edge list with one 'source target' pair per line (defaults to the configured edge_file)"
    )

    parser.add_argument(
        "--conf",
        dest="conf_source",
        help="Configuration directory containing base/parameters.yml"
    )

    parser.add_argument(
        "--output-dir",
        help="Directory for parquet, JSON and DOT outputs"
    )

    parser.add_argument(
        "--visuals-dir",
        help="Directory for matplotlib figures"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Abort on the first malformed edge line instead of skipping it"
    )

    parser.add_argument(
        "--n-jobs",
        type=int,
        help="Number of worker processes for the analyzers"
    )

    parser.add_argument(
        "--no-render",
        action="store_false",
        dest="render_image",
        default=None,
        help="Do not invoke Graphviz on the DOT output"
    )

    parser.add_argument(
        "--no-plots",
        action="store_false",
        dest="make_plots",
        default=None,
        help="Do not create matplotlib figures"
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        dest="show_progress",
        default=None,
        help="Show a progress bar while reading the edge list"
    )

    parser.add_argument(
        "--max-items",
        type=int,
        help="Print at most this many entries of each per-node map"
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    params = load_parameters(args.conf_source)

    overrides = {
        "edge_file": args.edge_file,
        "output_dir": args.output_dir,
        "visuals_dir": args.visuals_dir,
        "strict": args.strict,
        "n_jobs": args.n_jobs,
        "render_image": args.render_image,
        "make_plots": args.make_plots,
        "show_progress": args.show_progress,
    }
    params.update({k: v for k, v in overrides.items() if v is not None})

    try:
        outputs = run_pipeline(params)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 2
    except MalformedEdgeError as e:
        logger.error(str(e))
        return 3

    graph_outputs = outputs["graph_outputs"]
    for line in format_report(graph_outputs["statistics"], max_items=args.max_items):
        print(line)

    skipped = graph_outputs["summary"]["skipped_lines"]
    if skipped:
        print(f"Skipped Lines: {skipped}")

    for name, path in graph_outputs["files"].items():
        if path is not None:
            print(f"{name}: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
