"""
Per-node statistic calculators.

Each calculator maps a graph to one float per node (NaN where undefined):

- node degree
- clustering coefficient (Watts-Strogatz and Bansal conventions)
- average path length
- spreading speed of a diffusion process.
"""

from .base import LocalStatisticCalculator
from .clustering import (
    BANSAL_CLUSTERING,
    WATTS_STROGATZ_CLUSTERING,
    ClusteringCoefficientCalculator,
    clustering_coefficient,
)
from .degree import NODE_DEGREE, NodeDegreeCalculator
from .path_length import AVERAGE_PATH_LENGTH, AveragePathLengthCalculator, average_path_lengths
from .spreading import SpreadingParameters, SpreadingSpeedCalculator, spreading_time

__all__ = [
    "LocalStatisticCalculator",
    "BANSAL_CLUSTERING",
    "WATTS_STROGATZ_CLUSTERING",
    "ClusteringCoefficientCalculator",
    "clustering_coefficient",
    "NODE_DEGREE",
    "NodeDegreeCalculator",
    "AVERAGE_PATH_LENGTH",
    "AveragePathLengthCalculator",
    "average_path_lengths",
    "SpreadingParameters",
    "SpreadingSpeedCalculator",
    "spreading_time",
]
