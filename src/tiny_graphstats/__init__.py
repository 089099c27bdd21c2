"""
tiny-graphstats

Undirected graph engine with per-node network statistics.
"""

from .graph import DenseGraph, Graph, SparseGraph, split_graph
from .statistics import (
    AVERAGE_PATH_LENGTH,
    BANSAL_CLUSTERING,
    NODE_DEGREE,
    WATTS_STROGATZ_CLUSTERING,
    SpreadingParameters,
    SpreadingSpeedCalculator,
)
from .analysis import analyze_nodes

__all__ = [
    "Graph",
    "DenseGraph",
    "SparseGraph",
    "split_graph",
    "NODE_DEGREE",
    "BANSAL_CLUSTERING",
    "WATTS_STROGATZ_CLUSTERING",
    "AVERAGE_PATH_LENGTH",
    "SpreadingParameters",
    "SpreadingSpeedCalculator",
    "analyze_nodes",
]
