from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import Iterator, Tuple

Connection = Tuple[int, int]


class IterationOverflowError(AssertionError):
    """
    An iterative algorithm did not converge within its hard iteration cap.

    This signals a broken structural assumption (e.g. a non-symmetric
    adjacency), never an ordinary property of the input graph.
    """


class Graph(ABC):
    """
    Undirected, unweighted graph without self-loops over nodes ``[0, n)``.

    The node count is fixed at construction. Connections are symmetric and
    irreflexive; ``set_connection``/``remove_connection`` are idempotent and
    ignore ``x == y``.
    """

    @abstractmethod
    def size(self) -> int:
        ...

    @abstractmethod
    def set_connection(self, x: int, y: int) -> None:
        ...

    @abstractmethod
    def remove_connection(self, x: int, y: int) -> None:
        ...

    @abstractmethod
    def is_connected(self, x: int, y: int) -> bool:
        ...

    @abstractmethod
    def set_graph(self, other: "Graph") -> None:
        """Replace all connections with those of ``other`` (same size)."""

    def iter_connections(self) -> Iterator[Connection]:
        """
        Yield every connection exactly once as ``(x, y)`` with ``x < y``,
        ordered by ``x`` then ``y``.
        """
        n = self.size()
        for x in range(n):
            for y in range(x + 1, n):
                if self.is_connected(x, y):
                    yield x, y

    def degree(self, node: int) -> int:
        node = self.check_index(node)
        return sum(1 for other in range(self.size()) if other != node and self.is_connected(node, other))

    def __iter__(self) -> Iterator[Connection]:
        return self.iter_connections()

    def __len__(self) -> int:
        return self.size()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        if self.size() != other.size():
            return False
        return list(self.iter_connections()) == list(other.iter_connections())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()})"

    def check_index(self, node: int) -> int:
        node = operator.index(node)
        if not 0 <= node < self.size():
            raise IndexError(f"Node index out of range [0, {self.size()}): {node}")
        return node

    def _check_same_size(self, other: "Graph") -> None:
        if other is None:
            raise TypeError("other graph must not be None.")
        if self.size() != other.size():
            raise ValueError(f"Network sizes differ: {self.size()} vs {other.size()}")


def check_size(size: int) -> int:
    size = operator.index(size)
    if size < 1:
        raise ValueError(f"size should be at least 1: {size}")
    return size
