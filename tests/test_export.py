"""
Tests for statistics export, DOT rendering and text reports.
"""
import json
import shutil

import polars as pl
import pytest

from socnet.graphs.core import compute_graph_statistics
from socnet.graphs.edge_list import build_graph_store, parse_edge_lines
from socnet.graphs.export import (
    format_report,
    node_statistics_frame,
    render_dot,
    summarize_statistics,
    to_dot,
    write_dot,
    write_statistics,
)


@pytest.fixture
def degree_stats(degree_store):
    return compute_graph_statistics(degree_store)


def test_to_dot(degree_store):
    assert to_dot(degree_store) == (
        "graph {\n"
        '    0 [ label = "1" ]\n'
        '    1 [ label = "2" ]\n'
        '    2 [ label = "3" ]\n'
        '    3 [ label = "4" ]\n'
        "    0 -- 1 [ ]\n"
        "    1 -- 2 [ ]\n"
        "}\n"
    )


def test_to_dot_empty_graph(empty_store):
    assert to_dot(empty_store) == "graph {\n}\n"


def test_write_dot(degree_store, tmp_path):
    path = write_dot(degree_store, tmp_path / "out" / "graph.dot")
    assert path.exists()
    assert path.read_text() == to_dot(degree_store)


def test_render_dot_missing_binary(degree_store, tmp_path):
    dot_file = write_dot(degree_store, tmp_path / "graph.dot")
    result = render_dot(dot_file, tmp_path / "graph.png", dot_binary="no-such-graphviz-binary")
    assert result is None
    assert not (tmp_path / "graph.png").exists()


def test_render_dot_binary_cannot_execute(degree_store, tmp_path, monkeypatch):
    dot_file = write_dot(degree_store, tmp_path / "graph.dot")

    def fail_to_execute(command, **kwargs):
        raise PermissionError(13, "Permission denied", command[0])

    monkeypatch.setattr("socnet.graphs.export.shutil.which", lambda name: str(tmp_path / name))
    monkeypatch.setattr("socnet.graphs.export.subprocess.run", fail_to_execute)

    result = render_dot(dot_file, tmp_path / "graph.png", dot_binary="dot")
    assert result is None
    assert not (tmp_path / "graph.png").exists()


def test_write_statistics_after_out_of_range_identifier(tmp_path):
    lines = ["1 2", "99999999999999999999999 3", str(2**64 - 1) + " 2"]
    store = build_graph_store(parse_edge_lines(lines))

    paths = write_statistics(store, compute_graph_statistics(store), output_dir=tmp_path / "graph")

    df = pl.read_parquet(paths["node_statistics"])
    assert df["node_id"].to_list() == [1, 2, 2**64 - 1]


@pytest.mark.skipif(shutil.which("dot") is None, reason="Graphviz is not installed")
def test_render_dot_with_graphviz(degree_store, tmp_path):
    dot_file = write_dot(degree_store, tmp_path / "graph.dot")
    result = render_dot(dot_file, tmp_path / "graph.svg", image_format="svg")
    assert result == tmp_path / "graph.svg"
    assert result.exists()


def test_node_statistics_frame(degree_store, degree_stats):
    df = node_statistics_frame(degree_store, degree_stats)

    assert df.columns == ["index", "node_id", "degree", "degree_centrality", "component", "community"]
    assert df["node_id"].to_list() == [1, 2, 3, 4]
    assert df["degree"].to_list() == [1, 2, 1, 0]
    assert df["degree_centrality"].to_list() == pytest.approx([1 / 3, 2 / 3, 1 / 3, 0.0])
    assert df["component"].to_list() == [0, 0, 0, 1]
    assert df["community"].to_list() == [0, 1, 2, 3]


def test_node_statistics_frame_empty(empty_store):
    df = node_statistics_frame(empty_store, compute_graph_statistics(empty_store))
    assert len(df) == 0
    assert "degree" in df.columns


def test_summarize_statistics(degree_stats):
    summary = summarize_statistics(degree_stats, skipped_lines=2)

    assert summary == {
        "node_count": 4,
        "edge_count": 2,
        "triangle_count": 0,
        "graph_density": pytest.approx(2 * 2 / (4 * 3)),
        "component_count": 2,
        "largest_component_size": 3,
        "community_count": 4,
        "skipped_lines": 2,
    }


def test_write_statistics(degree_store, degree_stats, tmp_path):
    paths = write_statistics(degree_store, degree_stats, output_dir=tmp_path / "graph", skipped_lines=1)

    df = pl.read_parquet(paths["node_statistics"])
    assert len(df) == 4
    assert df["degree"].sum() == 2 * degree_store.edge_count()

    with open(paths["graph_summary"]) as f:
        summary = json.load(f)
    assert summary["node_count"] == 4
    assert summary["skipped_lines"] == 1


def test_format_report(degree_stats):
    lines = format_report(degree_stats)

    assert "Node Degrees: {0: 1, 1: 2, 2: 1, 3: 0}" in lines
    assert "Communities: {0: 0, 1: 1, 2: 2, 3: 3}" in lines
    assert "Triangle Count: 0" in lines
    assert "Connected Components: 2" in lines
    assert "Graph Density: 0.3333" in lines
    assert "Node Centrality: {0: 0.3333, 1: 0.6667, 2: 0.3333, 3: 0.0000}" in lines


def test_format_report_truncates(degree_stats):
    lines = format_report(degree_stats, max_items=2)
    assert "Node Degrees: {0: 1, 1: 2, ... (2 more)}" in lines
