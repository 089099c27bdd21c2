from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from tiny_graphstats.graph.base import Graph
from tiny_graphstats.graph.components import split_graph
from tiny_graphstats.graph.sparse import SparseGraph
from tiny_graphstats.graph.utilities import (
    count_isolated_nodes,
    count_leaf_nodes,
    network_average,
    to_sparse,
)
from tiny_graphstats.statistics.clustering import BANSAL_CLUSTERING
from tiny_graphstats.statistics.degree import NODE_DEGREE
from tiny_graphstats.statistics.path_length import AVERAGE_PATH_LENGTH
from tiny_graphstats.statistics.spreading import SpreadingParameters, SpreadingSpeedCalculator
from tiny_graphstats.utils.logging import get_logger
from tiny_graphstats.utils.profiling import Profiler, StageTiming

log = get_logger(__name__)

TSV_HEADER = "i\tDegree\tInterconnections\tCC\tAPL\tSS"


@dataclass(frozen=True)
class NodeStatisticsRow:
    index: int
    original_index: int
    degree: int
    interconnections: int
    clustering_coefficient: float
    average_path_length: float
    spreading_speed: float

    def to_tsv(self) -> str:
        return (
            f"{self.index}\t{self.degree}\t{self.interconnections}\t"
            f"{self.clustering_coefficient:7.5f}\t{self.average_path_length:7.5f}\t"
            f"{self.spreading_speed:7.5f}"
        )


@dataclass(frozen=True, eq=False)
class NodeStatisticsReport:
    graph: SparseGraph
    nodes: Tuple[int, ...]
    degree: np.ndarray
    clustering_coefficient: np.ndarray
    average_path_length: np.ndarray
    spreading_speed: np.ndarray
    num_components: int
    isolated_nodes: int
    leaf_nodes: int
    timings: List[StageTiming] = field(default_factory=list)

    def size(self) -> int:
        return self.graph.size()

    def interconnections(self) -> np.ndarray:
        """Connected neighbor pairs per node, recovered from degree and CC."""
        d = self.degree
        cc = np.nan_to_num(self.clustering_coefficient, nan=0.0)
        return np.rint(d * (d - 1) / 2 * cc).astype(np.int64)

    def rows(self) -> Iterator[NodeStatisticsRow]:
        interconnections = self.interconnections()
        for i in range(self.size()):
            yield NodeStatisticsRow(
                index=i,
                original_index=self.nodes[i],
                degree=int(self.degree[i]),
                interconnections=int(interconnections[i]),
                clustering_coefficient=float(self.clustering_coefficient[i]),
                average_path_length=float(self.average_path_length[i]),
                spreading_speed=float(self.spreading_speed[i]),
            )

    def to_tsv(self) -> str:
        lines = [TSV_HEADER]
        lines.extend(row.to_tsv() for row in self.rows())
        return "\n".join(lines) + "\n"

    def summary(self) -> Dict[str, float]:
        """Network averages keyed by statistic abbreviation, NaN entries skipped."""
        return {
            "ND": network_average(self.degree, skip_invalid=True),
            "CC": network_average(self.clustering_coefficient, skip_invalid=True),
            "APL": network_average(self.average_path_length, skip_invalid=True),
            "SS": network_average(self.spreading_speed, skip_invalid=True),
        }


def analyze_nodes(
    graph: Graph,
    *,
    spreading: Optional[SpreadingParameters] = None,
    largest_component_only: bool = True,
    profiler: Optional[Profiler] = None,
) -> NodeStatisticsReport:
    """
    Run every per-node statistic over ``graph``.

    By default only the largest connected component is analysed, since path
    length and spreading speed are degenerate on disconnected graphs.
    """
    profiler = profiler if profiler is not None else Profiler()
    profiler.start()

    sparse = to_sparse(graph)
    isolated = count_isolated_nodes(sparse)
    leaves = count_leaf_nodes(sparse)
    profiler.record("load")

    components = split_graph(sparse)
    if largest_component_only:
        target = components[0].graph
        nodes = components[0].nodes
    else:
        target = sparse
        nodes = tuple(range(sparse.size()))
    profiler.record("split")

    degree = NODE_DEGREE.calculate_all(target)
    profiler.record(NODE_DEGREE.abbreviation)
    cc = BANSAL_CLUSTERING.calculate_all(target)
    profiler.record(BANSAL_CLUSTERING.abbreviation)
    apl = AVERAGE_PATH_LENGTH.calculate_all(target)
    profiler.record(AVERAGE_PATH_LENGTH.abbreviation)
    ss_calculator = SpreadingSpeedCalculator(spreading)
    ss = ss_calculator.calculate_all(target)
    profiler.record(ss_calculator.abbreviation)

    timings = profiler.results(target.size())
    for line in profiler.format_results(target.size()):
        log.debug(line)

    return NodeStatisticsReport(
        graph=target,
        nodes=nodes,
        degree=degree,
        clustering_coefficient=cc,
        average_path_length=apl,
        spreading_speed=ss,
        num_components=len(components),
        isolated_nodes=isolated,
        leaf_nodes=leaves,
        timings=timings,
    )
