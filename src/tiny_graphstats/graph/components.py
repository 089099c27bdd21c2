"""
Connected-component detection and subgraph extraction.

Components are found by propagating the minimum node label across every
connection until a pass changes nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from tiny_graphstats.utils.config import config
from tiny_graphstats.utils.logging import get_logger

from .base import Graph, IterationOverflowError
from .sparse import SparseGraph

log = get_logger(__name__)


@dataclass(frozen=True)
class Component:
    """
    A connected component rebuilt as its own graph.

    ``nodes[i]`` is the original index of component node ``i``.
    """

    graph: SparseGraph
    nodes: Tuple[int, ...]

    @property
    def index_map(self) -> Dict[int, int]:
        """Original node index -> component node index."""
        return {old: new for new, old in enumerate(self.nodes)}

    def size(self) -> int:
        return len(self.nodes)


def component_labels(graph: Graph) -> List[int]:
    """
    Label every node with the smallest node index of its component.

    Example: ``[0, 1, 1, 3, 1, 1, 0, 1, 1, 1]``.
    """
    n = graph.size()
    labels = list(range(n))
    connections = list(graph.iter_connections())

    # n - 1 merging passes at most, plus the pass that confirms the fixed point.
    for step in range(1, n + 1):
        changed = False
        for x, y in connections:
            if labels[x] != labels[y]:
                low = min(labels[x], labels[y])
                labels[x] = low
                labels[y] = low
                changed = True

        if not changed:
            log.debug("Label propagation converged after %d pass(es) on %d nodes", step, n)
            return labels

    raise IterationOverflowError(f"Label propagation did not converge within {n} passes")


def group_by_label(labels: Sequence[int]) -> List[List[int]]:
    """
    Group node indices by label, in order of first appearance.

    Example: ``[0, 1, 1, 3, 1, 1, 0, 1, 1, 1]`` -> ``[[0, 6], [1, 2, 4, 5, 7, 8, 9], [3]]``.
    """
    groups: Dict[int, List[int]] = {}
    for node, label in enumerate(labels):
        groups.setdefault(label, []).append(node)
    return list(groups.values())


def find_components(graph: Graph) -> List[List[int]]:
    """Node lists of every connected component, largest first."""
    groups = group_by_label(component_labels(graph))
    groups.sort(key=len, reverse=True)
    return groups


def split_graph(graph: Graph) -> List[Component]:
    """
    Split ``graph`` into its connected components, largest first.

    Each component graph is relabelled to ``[0, component_size)`` preserving
    the relative order of the original node indices.
    """
    labels = component_labels(graph)
    groups = group_by_label(labels)

    owner: List[int] = [0] * graph.size()
    new_index: List[int] = [0] * graph.size()
    for group_index, nodes in enumerate(groups):
        for i, node in enumerate(nodes):
            owner[node] = group_index
            new_index[node] = i

    subgraphs = [SparseGraph(len(nodes)) for nodes in groups]
    for x, y in graph.iter_connections():
        if owner[x] != owner[y]:
            raise AssertionError(f"Connection ({x}, {y}) crosses components")
        subgraphs[owner[x]].set_connection(new_index[x], new_index[y])

    components = [Component(graph=sub, nodes=tuple(nodes)) for sub, nodes in zip(subgraphs, groups)]
    components.sort(key=Component.size, reverse=True)

    log.debug(
        "Split %d nodes into %d component(s); sizes %s",
        graph.size(),
        len(components),
        [c.size() for c in components],
    )
    if config.debug:
        for component in components:
            if any(label != 0 for label in component_labels(component.graph)):
                raise AssertionError("Extracted component is not internally connected")
    return components


def largest_component(graph: Graph) -> Component:
    return split_graph(graph)[0]


def is_connected_graph(graph: Graph) -> bool:
    """True if every node is reachable from every other node."""
    return all(label == 0 for label in component_labels(graph))
