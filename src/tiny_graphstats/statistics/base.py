from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from tiny_graphstats.graph.base import Graph
from tiny_graphstats.graph.sparse import SparseGraph
from tiny_graphstats.graph.utilities import network_average, to_sparse


class LocalStatisticCalculator(ABC):
    """
    Per-node statistic over an undirected graph.

    ``calculate_all`` returns one float per node, NaN where the value is
    undefined. ``calculate`` averages the valid entries into a single
    network-level value.
    """

    name: str = ""
    abbreviation: str = ""

    def calculate_all(self, graph: Graph) -> np.ndarray:
        return self._calculate_all(to_sparse(graph))

    def calculate(self, graph: Graph) -> float:
        return network_average(self.calculate_all(graph), skip_invalid=True)

    @abstractmethod
    def _calculate_all(self, graph: SparseGraph) -> np.ndarray:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.abbreviation})"
