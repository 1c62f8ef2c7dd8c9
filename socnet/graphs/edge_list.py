"""
Edge list ingestion for social graphs.

Reads whitespace-separated ``source target`` lines, such as the SNAP ego
network ``*.edges`` files, and builds a frozen GraphStore from them.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Tuple, Union

from tqdm import tqdm

from .errors import MalformedEdgeError
from .store import GraphStore

logger = logging.getLogger(__name__)

COMMENT_PREFIXES = ("#", "%")

# Identifiers are stored as unsigned 64-bit integers
MAX_IDENTIFIER = 2**64 - 1


def _parse_identifier(token: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise ValueError("node identifiers must be unsigned integers")
    value = int(token)
    if value > MAX_IDENTIFIER:
        raise ValueError("identifier out of range")
    return value


class EdgeLineParser:
    """
    Iterate edges from text or UTF-8 byte lines, tracking malformed ones.

    In strict mode the first malformed line raises MalformedEdgeError. Otherwise
    the line is skipped with a warning and counted in ``skipped_lines``.
    """

    def __init__(self, lines: Iterable[Union[str, bytes]], strict: bool = False):
        self.lines = lines
        self.strict = strict
        self.skipped_lines = 0

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for line_number, raw in enumerate(self.lines, start=1):
            if isinstance(raw, bytes):
                try:
                    raw = raw.decode("utf-8")
                except UnicodeDecodeError:
                    line = raw.decode("utf-8", errors="replace").strip()
                    self._reject(line_number, line, "line is not valid UTF-8")
                    continue

            line = raw.strip()
            if not line or line.startswith(COMMENT_PREFIXES):
                continue

            tokens = line.split()
            if len(tokens) < 2:
                self._reject(line_number, line, "expected two node identifiers")
                continue

            try:
                source = _parse_identifier(tokens[0])
                target = _parse_identifier(tokens[1])
            except ValueError as e:
                self._reject(line_number, line, str(e))
                continue

            yield source, target

    def _reject(self, line_number: int, line: str, reason: str) -> None:
        if self.strict:
            raise MalformedEdgeError(line_number, line, reason)
        self.skipped_lines += 1
        logger.warning(f"Skipping line {line_number}: {reason} ({line!r})")


def parse_edge_lines(lines: Iterable[Union[str, bytes]], strict: bool = False) -> Iterator[Tuple[int, int]]:
    """
    Parse edge lines into ``(source, target)`` identifier pairs.

    Use EdgeLineParser directly when the skipped-line count is needed.
    """
    return iter(EdgeLineParser(lines, strict=strict))


def read_edge_list(
    edge_file: Union[str, Path],
    strict: bool = False,
    show_progress: bool = False,
) -> Dict[str, Any]:
    """
    Read an edge list file.

    Args:
        edge_file: Path to the edge list
        strict: Abort on the first malformed line instead of skipping it
        show_progress: Display a tqdm progress bar while reading

    Returns:
        Dict[str, Any]: ``source`` path, ``edges`` as identifier pairs and
        the number of ``skipped_lines``
    """
    edge_file = Path(edge_file)
    if not edge_file.is_file():
        raise FileNotFoundError(f"Edge list not found: {edge_file}")

    logger.info(f"Reading edge list from {edge_file}")
    with open(edge_file, "rb") as f:
        lines = tqdm(f, desc=f"Reading {edge_file.name}", unit=" lines", disable=not show_progress)
        parser = EdgeLineParser(lines, strict=strict)
        edges: List[Tuple[int, int]] = list(parser)

    if parser.skipped_lines:
        logger.warning(f"Skipped {parser.skipped_lines:,} malformed lines in {edge_file}")
    logger.info(f"Read {len(edges):,} edges from {edge_file}")

    return {
        "source": str(edge_file),
        "edges": edges,
        "skipped_lines": parser.skipped_lines,
    }


def build_graph_store(edges: Iterable[Tuple[int, int]]) -> GraphStore:
    """
    Build and freeze a graph store from identifier pairs.

    Identifiers are indexed in first-seen order, source before target.
    """
    store = GraphStore()
    for source, target in edges:
        index_a = store.add_node(source)
        index_b = store.add_node(target)
        store.add_edge(index_a, index_b)
    return store.freeze()
