from __future__ import annotations

import numpy as np

from tiny_graphstats.graph.sparse import SparseGraph

from .base import LocalStatisticCalculator


class NodeDegreeCalculator(LocalStatisticCalculator):
    name = "Node degree"
    abbreviation = "ND"

    def _calculate_all(self, graph: SparseGraph) -> np.ndarray:
        return np.array(
            [graph.num_neighbors(node) for node in range(graph.size())],
            dtype=np.float64,
        )


NODE_DEGREE = NodeDegreeCalculator()
