"""
Local clustering coefficient.

Two conventions exist for nodes with fewer than two neighbors:

- Watts & Strogatz (1998) count them as 0, so every node contributes to an
  unconditional network average.
- Bansal, Khandelwal & Meyers (2008) leave them undefined (NaN), so they drop
  out of a NaN-skipping average.
"""

from __future__ import annotations

import math

import numpy as np

from tiny_graphstats.graph.base import Graph
from tiny_graphstats.graph.sparse import SparseGraph
from tiny_graphstats.graph.utilities import to_sparse

from .base import LocalStatisticCalculator


def count_neighbor_connections(graph: SparseGraph, node: int) -> int:
    """Number of connected pairs among the neighbors of ``node``."""
    neighbors = graph.neighbors(node)
    count = 0
    for j, first in enumerate(neighbors):
        for second in neighbors[:j]:
            if graph.is_connected(first, second):
                count += 1
    return count


def clustering_coefficient(graph: Graph, node: int, *, undefined: float = math.nan) -> float:
    """
    Fraction of neighbor pairs of ``node`` that are themselves connected.

    Returns ``undefined`` when ``node`` has fewer than two neighbors.
    """
    graph = to_sparse(graph)
    d = graph.num_neighbors(node)
    if d < 2:
        return undefined
    return count_neighbor_connections(graph, node) / (d * (d - 1) / 2)


class ClusteringCoefficientCalculator(LocalStatisticCalculator):
    name = "Clustering Coefficient"
    abbreviation = "CC"

    def __init__(self, undefined: float) -> None:
        self.undefined = undefined

    def _calculate_all(self, graph: SparseGraph) -> np.ndarray:
        return np.array(
            [clustering_coefficient(graph, node, undefined=self.undefined) for node in range(graph.size())],
            dtype=np.float64,
        )


WATTS_STROGATZ_CLUSTERING = ClusteringCoefficientCalculator(undefined=0.0)
BANSAL_CLUSTERING = ClusteringCoefficientCalculator(undefined=math.nan)
