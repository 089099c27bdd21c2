from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterator, List, Tuple

from tiny_graphstats.utils.config import config

from .base import Connection, Graph, check_size


class SparseGraph(Graph):
    """
    Neighbor-list graph.

    Each node keeps a strictly ascending, duplicate-free list of neighbors.
    Edge tests are binary searches (``O(log d)``); mutation shifts the list
    (``O(d)``). Statistic calculators need this representation for ordered,
    indexable neighbor access.
    """

    def __init__(self, size: int) -> None:
        size = check_size(size)
        self._neighbors: List[List[int]] = [[] for _ in range(size)]

    @classmethod
    def from_graph(cls, other: Graph) -> "SparseGraph":
        graph = cls(other.size())
        graph.set_graph(other)
        return graph

    def size(self) -> int:
        return len(self._neighbors)

    def set_connection(self, x: int, y: int) -> None:
        x = self.check_index(x)
        y = self.check_index(y)
        if x == y or self._contains(x, y):
            return
        insort(self._neighbors[x], y)
        insort(self._neighbors[y], x)
        if config.debug:
            self._verify_node(x)
            self._verify_node(y)

    def remove_connection(self, x: int, y: int) -> None:
        x = self.check_index(x)
        y = self.check_index(y)
        if x == y or not self._contains(x, y):
            return
        self._remove_neighbor(x, y)
        self._remove_neighbor(y, x)
        if config.debug:
            self._verify_node(x)
            self._verify_node(y)

    def is_connected(self, x: int, y: int) -> bool:
        return self._contains(self.check_index(x), self.check_index(y))

    def set_graph(self, other: Graph) -> None:
        self._check_same_size(other)
        if isinstance(other, SparseGraph):
            self._neighbors = [list(row) for row in other._neighbors]
            return
        n = self.size()
        for y in range(n):
            row = self._neighbors[y]
            row.clear()
            row.extend(x for x in range(n) if x != y and other.is_connected(x, y))

    def num_neighbors(self, node: int) -> int:
        return len(self._neighbors[self.check_index(node)])

    def get_neighbor(self, node: int, index: int) -> int:
        row = self._neighbors[self.check_index(node)]
        if not 0 <= index < len(row):
            raise IndexError(f"Neighbor index out of range [0, {len(row)}) for node {node}: {index}")
        return row[index]

    def neighbors(self, node: int) -> Tuple[int, ...]:
        """Neighbors of ``node`` in ascending order."""
        return tuple(self._neighbors[self.check_index(node)])

    def degree(self, node: int) -> int:
        return self.num_neighbors(node)

    def iter_connections(self) -> Iterator[Connection]:
        for x, row in enumerate(self._neighbors):
            for y in row[bisect_left(row, x + 1):]:
                yield x, y

    def _contains(self, x: int, y: int) -> bool:
        row = self._neighbors[y]
        i = bisect_left(row, x)
        return i < len(row) and row[i] == x

    def _remove_neighbor(self, node: int, neighbor: int) -> None:
        row = self._neighbors[node]
        i = bisect_left(row, neighbor)
        if i == len(row) or row[i] != neighbor:
            raise AssertionError(f"Node {node} lost neighbor {neighbor} from its adjacency list.")
        del row[i]

    def _verify_node(self, node: int) -> None:
        row = self._neighbors[node]
        for a, b in zip(row, row[1:]):
            if a >= b:
                raise AssertionError(f"Adjacency list of node {node} is not strictly ascending: {row}")
        for neighbor in row:
            if neighbor == node or not self._contains(node, neighbor):
                raise AssertionError(f"Adjacency of node {node} is not symmetric with {neighbor}")

    def __str__(self) -> str:
        return "\n".join(
            f"{node} " + "".join(f" {x}" for x in row) for node, row in enumerate(self._neighbors)
        )
