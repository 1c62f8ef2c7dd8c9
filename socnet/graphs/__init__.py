"""
Graph analytics module for social network edge lists.

This module builds a GraphStore from an edge list and computes:
- Node degrees and degree centrality
- Triangle count and graph density
- Connected components
- Partition labels
"""

from .core import (
    calculate_degree_centrality,
    calculate_graph_density,
    calculate_node_degrees,
    compute_graph_statistics,
    count_connected_components,
    count_triangles,
    detect_communities,
    find_connected_components,
)
from .edge_list import build_graph_store, parse_edge_lines, read_edge_list
from .errors import GraphFrozenError, MalformedEdgeError, NodeIndexError, SocialGraphError
from .store import GraphStore
