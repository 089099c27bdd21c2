"""
Whole-graph analysis built on the per-node statistics.
"""

from .report import NodeStatisticsReport, NodeStatisticsRow, analyze_nodes

__all__ = [
    "NodeStatisticsReport",
    "NodeStatisticsRow",
    "analyze_nodes",
]
