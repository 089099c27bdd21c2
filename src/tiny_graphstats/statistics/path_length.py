"""
Average shortest-path length per node.

Instead of one BFS per node, reachability sets are grown one hop per pass: a
node sees at distance ``k`` everything its neighbors saw at distance ``k - 1``.
The union is taken over the previous pass's snapshot of the visibility map so
that every pair discovered in pass ``k`` is credited exactly ``k``.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from tiny_graphstats.graph.base import IterationOverflowError
from tiny_graphstats.graph.dense import DenseGraph
from tiny_graphstats.graph.sparse import SparseGraph
from tiny_graphstats.utils.logging import get_logger

from .base import LocalStatisticCalculator

log = get_logger(__name__)


def _prepare_buffer(buffer: Optional[DenseGraph], source: SparseGraph) -> DenseGraph:
    if buffer is None:
        return DenseGraph.from_graph(source)
    buffer.set_graph(source)
    return buffer


def average_path_lengths(
    graph: SparseGraph,
    *,
    visibility: Optional[DenseGraph] = None,
    snapshot: Optional[DenseGraph] = None,
) -> np.ndarray:
    """
    Mean distance from each node to every other node.

    If any node cannot reach another, the result is NaN for *all* nodes.

    Args:
        graph: Graph to measure.
        visibility: Optional reusable working buffer of the same size; its
            contents are overwritten.
        snapshot: Optional reusable buffer holding the previous pass; must
            not be the same object as ``visibility``.
    """
    if visibility is not None and visibility is snapshot:
        raise ValueError("visibility and snapshot must be distinct buffers.")
    if graph is visibility or graph is snapshot:
        raise ValueError("The measured graph cannot double as a working buffer.")

    n = graph.size()
    if n == 1:
        return np.full(1, math.nan)

    visibility = _prepare_buffer(visibility, graph)
    snapshot = _prepare_buffer(snapshot, graph)

    degrees = np.array([graph.num_neighbors(node) for node in range(n)], dtype=np.int64)
    path_length_sums = degrees.copy()
    unvisited = (n - 1) - degrees

    if not unvisited.any():
        return path_length_sums / (n - 1)

    # Passes up to n - 1 can discover pairs; pass n can only confirm a stall.
    for path_length in range(2, n + 1):
        snapshot.set_graph(visibility)
        previous = snapshot.matrix
        current = visibility.matrix

        changed = False
        for node in range(n - 1):
            if unvisited[node] == 0:
                continue

            neighbors = np.asarray(graph.neighbors(node), dtype=np.intp)
            visible = previous[neighbors, node + 1:].any(axis=0)
            newly_visible = np.nonzero(visible & ~current[node, node + 1:])[0] + node + 1
            if newly_visible.size == 0:
                continue

            for other in newly_visible.tolist():
                visibility.set_connection(node, other)
            unvisited[node] -= newly_visible.size
            unvisited[newly_visible] -= 1
            path_length_sums[node] += path_length * newly_visible.size
            path_length_sums[newly_visible] += path_length
            changed = True

        if not unvisited.any():
            log.debug("Average path length converged at path length %d on %d nodes", path_length, n)
            return path_length_sums / (n - 1)

        if not changed:
            log.debug("Graph of %d nodes is disconnected; stalled at path length %d", n, path_length)
            return np.full(n, math.nan)

    raise IterationOverflowError(f"Reachability expansion did not converge within {n} passes")


class AveragePathLengthCalculator(LocalStatisticCalculator):
    name = "Average Path Length"
    abbreviation = "APL"

    def _calculate_all(self, graph: SparseGraph) -> np.ndarray:
        return average_path_lengths(graph)


AVERAGE_PATH_LENGTH = AveragePathLengthCalculator()
