"""
Undirected graph representations and structural utilities.

- `Graph` capability contract (see `base.py`)
- `DenseGraph` adjacency matrix and `SparseGraph` sorted neighbor lists
- Conversion and counting helpers (`utilities.py`)
- Connected-component splitting (`components.py`)
- Builders for common and random graphs.
"""

from .base import Graph, IterationOverflowError
from .dense import DenseGraph
from .sparse import SparseGraph
from .components import Component, find_components, largest_component, split_graph
from .utilities import (
    count_connections,
    count_isolated_nodes,
    count_leaf_nodes,
    network_average,
    to_dense,
    to_sparse,
)
from . import builders

__all__ = [
    "Graph",
    "IterationOverflowError",
    "DenseGraph",
    "SparseGraph",
    "Component",
    "find_components",
    "largest_component",
    "split_graph",
    "count_connections",
    "count_isolated_nodes",
    "count_leaf_nodes",
    "network_average",
    "to_dense",
    "to_sparse",
    "builders",
]
