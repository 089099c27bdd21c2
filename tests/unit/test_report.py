from __future__ import annotations

import math

import numpy as np

from tiny_graphstats.analysis.report import TSV_HEADER, NodeStatisticsReport, analyze_nodes
from tiny_graphstats.graph.builders import from_connections
from tiny_graphstats.utils.profiling import Profiler


def _triangle_and_edge():
    return from_connections(5, [(0, 1), (1, 2), (0, 2), (3, 4)])


def test_analyze_largest_component() -> None:
    report = analyze_nodes(_triangle_and_edge())

    assert isinstance(report, NodeStatisticsReport)
    assert report.size() == 3
    assert report.nodes == (0, 1, 2)
    assert report.num_components == 2
    assert report.isolated_nodes == 0
    assert report.leaf_nodes == 2
    np.testing.assert_array_equal(report.degree, [2, 2, 2])
    np.testing.assert_array_equal(report.clustering_coefficient, [1, 1, 1])
    np.testing.assert_array_equal(report.average_path_length, [1, 1, 1])
    np.testing.assert_array_equal(report.spreading_speed, [1, 1, 1])
    np.testing.assert_array_equal(report.interconnections(), [1, 1, 1])
    assert report.summary() == {"ND": 2.0, "CC": 1.0, "APL": 1.0, "SS": 1.0}


def test_report_rows_and_tsv() -> None:
    graph = from_connections(6, [(5, 4), (4, 3), (3, 5), (3, 2)])
    report = analyze_nodes(graph)

    rows = list(report.rows())
    assert [row.original_index for row in rows] == [2, 3, 4, 5]
    assert rows[1].degree == 3
    assert rows[1].interconnections == 1

    lines = report.to_tsv().splitlines()
    assert lines[0] == TSV_HEADER
    assert len(lines) == 5
    assert lines[1].split("\t")[:3] == ["0", "1", "0"]
    assert lines[1].split("\t")[3].strip() == "nan"


def test_analyze_whole_graph_is_degenerate() -> None:
    report = analyze_nodes(_triangle_and_edge(), largest_component_only=False)

    assert report.size() == 5
    assert np.isnan(report.average_path_length).all()
    assert math.isnan(report.summary()["APL"])
    assert report.summary()["ND"] == 1.6


def test_profiler_receives_stage_timings() -> None:
    profiler = Profiler()
    report = analyze_nodes(_triangle_and_edge(), profiler=profiler)

    assert [t.description for t in report.timings] == ["load", "split", "ND", "CC", "APL", "SS"]
    assert all(t.seconds >= 0 for t in report.timings)
    assert len(profiler.format_results(report.size())) == 6


def test_reports_compare_by_identity() -> None:
    first = analyze_nodes(_triangle_and_edge())
    second = analyze_nodes(_triangle_and_edge())

    assert first == first
    assert first != second
