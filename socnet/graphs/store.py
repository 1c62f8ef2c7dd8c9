"""
In-memory adjacency-list store for undirected social graphs.

Nodes are external integer identifiers mapped to dense, zero-based internal
indices in first-seen order. The store is built incrementally and then frozen;
every analyzer reads it without mutating it.
"""

import logging
from typing import Dict, Iterator, List, Tuple

from .errors import GraphFrozenError, NodeIndexError

logger = logging.getLogger(__name__)


class GraphStore:
    """Undirected multigraph keyed by dense internal indices.

    Self-loops and parallel edges are kept exactly as they were added.
    A self-loop on ``u`` contributes two entries of ``u`` to ``neighbors(u)``,
    one per edge endpoint.
    """

    def __init__(self):
        self._node_ids: List[int] = []
        self._index_of: Dict[int, int] = {}
        self._adjacency: List[List[int]] = []
        self._edges: List[Tuple[int, int]] = []
        self._frozen = False

    def add_node(self, identifier: int) -> int:
        """
        Register a node identifier.

        Args:
            identifier: External node identifier

        Returns:
            int: The existing internal index, or the next free one
        """
        index = self._index_of.get(identifier)
        if index is not None:
            return index

        self._check_mutable()
        index = len(self._node_ids)
        self._index_of[identifier] = index
        self._node_ids.append(identifier)
        self._adjacency.append([])
        return index

    def add_edge(self, index_a: int, index_b: int) -> None:
        """
        Connect two internal indices with an undirected edge.

        Args:
            index_a: Internal index of one endpoint
            index_b: Internal index of the other endpoint
        """
        self._check_mutable()
        self._check_index(index_a)
        self._check_index(index_b)

        self._edges.append((index_a, index_b))
        self._adjacency[index_a].append(index_b)
        self._adjacency[index_b].append(index_a)

    def neighbors(self, index: int) -> List[int]:
        """Return the neighbor multiset of ``index`` (one entry per endpoint occurrence)."""
        self._check_index(index)
        return list(self._adjacency[index])

    def degree(self, index: int) -> int:
        self._check_index(index)
        return len(self._adjacency[index])

    def node_count(self) -> int:
        return len(self._node_ids)

    def edge_count(self) -> int:
        return len(self._edges)

    def node_id(self, index: int) -> int:
        """Return the external identifier stored at ``index``."""
        self._check_index(index)
        return self._node_ids[index]

    def index_of(self, identifier: int) -> int:
        """Return the internal index of ``identifier``; raises KeyError if unknown."""
        return self._index_of[identifier]

    def nodes(self) -> Iterator[int]:
        """Iterate external identifiers in internal index order."""
        return iter(self._node_ids)

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Iterate edges as internal index pairs in insertion order."""
        return iter(self._edges)

    def freeze(self) -> "GraphStore":
        """Mark construction as finished. Further additions raise GraphFrozenError."""
        if not self._frozen:
            self._frozen = True
            logger.info(f"Graph store frozen: |V|={self.node_count():,}, |E|={self.edge_count():,}")
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._node_ids)

    def __contains__(self, identifier) -> bool:
        return identifier in self._index_of

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "building"
        return f"GraphStore(nodes={self.node_count()}, edges={self.edge_count()}, {state})"

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph store is frozen; no further nodes or edges can be added")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._node_ids):
            raise NodeIndexError(f"Unknown node index {index} (graph has {len(self._node_ids)} nodes)")
