from __future__ import annotations

from typing import Iterator

import numpy as np

from .base import Connection, Graph, check_size


class DenseGraph(Graph):
    """
    Adjacency-matrix graph.

    Constant-time edge test and mutation at ``O(n^2)`` memory. Also used as a
    reusable scratch buffer: ``set_graph`` from another ``DenseGraph`` copies
    rows in place without reallocating.
    """

    def __init__(self, size: int) -> None:
        size = check_size(size)
        self._matrix = np.zeros((size, size), dtype=bool)

    @classmethod
    def from_graph(cls, other: Graph) -> "DenseGraph":
        graph = cls(other.size())
        graph.set_graph(other)
        return graph

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the symmetric boolean adjacency matrix."""
        view = self._matrix.view()
        view.flags.writeable = False
        return view

    def size(self) -> int:
        return self._matrix.shape[0]

    def set_connection(self, x: int, y: int) -> None:
        x = self.check_index(x)
        y = self.check_index(y)
        if x == y:
            return
        self._matrix[x, y] = True
        self._matrix[y, x] = True

    def remove_connection(self, x: int, y: int) -> None:
        x = self.check_index(x)
        y = self.check_index(y)
        self._matrix[x, y] = False
        self._matrix[y, x] = False

    def is_connected(self, x: int, y: int) -> bool:
        return bool(self._matrix[self.check_index(x), self.check_index(y)])

    def set_graph(self, other: Graph) -> None:
        self._check_same_size(other)
        if isinstance(other, DenseGraph):
            np.copyto(self._matrix, other._matrix)
            return
        self._matrix.fill(False)
        for x, y in other.iter_connections():
            self.set_connection(x, y)

    def iter_connections(self) -> Iterator[Connection]:
        xs, ys = np.nonzero(np.triu(self._matrix, k=1))
        for x, y in zip(xs.tolist(), ys.tolist()):
            yield x, y

    def degree(self, node: int) -> int:
        return int(np.count_nonzero(self._matrix[self.check_index(node)]))

    def __str__(self) -> str:
        lines = []
        for y, row in enumerate(self._matrix):
            lines.append(
                "".join("＼" if x == y else ("●" if cell else "○") for x, cell in enumerate(row))
            )
        return "\n".join(lines)
