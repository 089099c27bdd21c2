"""
Representation conversion and simple whole-graph counts.
"""

from __future__ import annotations

import math
from typing import Iterable, List

from .base import Graph
from .dense import DenseGraph
from .sparse import SparseGraph


def to_dense(graph: Graph) -> DenseGraph:
    """Return ``graph`` itself if already dense, otherwise a dense copy."""
    if isinstance(graph, DenseGraph):
        return graph
    return DenseGraph.from_graph(graph)


def to_sparse(graph: Graph) -> SparseGraph:
    """Return ``graph`` itself if already sparse, otherwise a sparse copy."""
    if isinstance(graph, SparseGraph):
        return graph
    return SparseGraph.from_graph(graph)


def degrees(graph: Graph) -> List[int]:
    return [graph.degree(node) for node in range(graph.size())]


def count_connections(graph: Graph) -> int:
    return sum(degrees(graph)) // 2


def count_isolated_nodes(graph: Graph) -> int:
    """Number of nodes with degree 0."""
    return sum(1 for d in degrees(graph) if d == 0)


def count_leaf_nodes(graph: Graph) -> int:
    """Number of nodes with degree 1."""
    return sum(1 for d in degrees(graph) if d == 1)


def network_average(values: Iterable[float], skip_invalid: bool) -> float:
    """
    Arithmetic mean of ``values``.

    With ``skip_invalid`` NaN entries are excluded. Returns NaN when nothing
    is left to average.
    """
    total = 0.0
    count = 0
    for value in values:
        value = float(value)
        if skip_invalid and math.isnan(value):
            continue
        total += value
        count += 1

    if count == 0:
        return math.nan
    return total / count
