"""
Builders for common and random graphs.
"""

from __future__ import annotations

from typing import Iterable, Tuple, Union

import numpy as np

from .base import Graph, check_size
from .dense import DenseGraph
from .sparse import SparseGraph

SeedLike = Union[None, int, np.random.Generator]


def _new_graph(size: int, sparse: bool) -> Graph:
    return SparseGraph(size) if sparse else DenseGraph(size)


def from_connections(
    size: int,
    connections: Iterable[Tuple[int, int]],
    *,
    sparse: bool = True,
) -> Graph:
    """
    Build a graph of ``size`` nodes from ``(x, y)`` pairs.

    Duplicate pairs and self-connections are ignored, as ``set_connection`` is.
    """
    graph = _new_graph(size, sparse)
    for x, y in connections:
        graph.set_connection(x, y)
    return graph


def complete_graph(size: int, *, sparse: bool = True) -> Graph:
    graph = _new_graph(size, sparse)
    for x in range(size):
        for y in range(x + 1, size):
            graph.set_connection(x, y)
    return graph


def path_graph(size: int, *, sparse: bool = True) -> Graph:
    return from_connections(size, ((i, i + 1) for i in range(size - 1)), sparse=sparse)


def random_graph(
    size: int,
    num_connections: int,
    *,
    rng: SeedLike = None,
    sparse: bool = True,
) -> Graph:
    """
    Uniformly place ``num_connections`` distinct connections among ``size`` nodes.

    Args:
        size: Number of nodes, at least 1.
        num_connections: In ``[0, size * (size - 1) / 2]``.
        rng: ``numpy.random.Generator`` or seed for reproducible graphs.
    """
    size = check_size(size)
    max_connections = size * (size - 1) // 2
    if not 0 <= num_connections <= max_connections:
        raise ValueError(
            f"num_connections should be in the range [0, {max_connections}]: {num_connections}"
        )

    generator = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    graph = _new_graph(size, sparse)
    placed = 0
    while placed < num_connections:
        x, y = (int(v) for v in generator.integers(0, size, size=2))
        if x == y or graph.is_connected(x, y):
            continue
        graph.set_connection(x, y)
        placed += 1
    return graph
