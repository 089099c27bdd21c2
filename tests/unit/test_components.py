from __future__ import annotations

import pytest

from tiny_graphstats.graph.builders import from_connections, random_graph
from tiny_graphstats.graph.components import (
    component_labels,
    find_components,
    group_by_label,
    is_connected_graph,
    largest_component,
    split_graph,
)
from tiny_graphstats.graph.sparse import SparseGraph
from tiny_graphstats.utils.config import config


def _three_component_graph() -> SparseGraph:
    return from_connections(
        10,
        [(0, 6), (1, 2), (2, 4), (4, 5), (5, 7), (7, 8), (8, 9)],
    )


def test_component_labels_use_smallest_member() -> None:
    assert component_labels(_three_component_graph()) == [0, 1, 1, 3, 1, 1, 0, 1, 1, 1]


def test_group_by_label_keeps_first_appearance_order() -> None:
    groups = group_by_label([0, 1, 1, 3, 1, 1, 0, 1, 1, 1])
    assert groups == [[0, 6], [1, 2, 4, 5, 7, 8, 9], [3]]


def test_find_components_largest_first() -> None:
    assert find_components(_three_component_graph()) == [[1, 2, 4, 5, 7, 8, 9], [0, 6], [3]]


def test_labels_converge_when_minimum_is_far_away() -> None:
    # Connection order forces the smallest label to travel one hop per pass.
    graph = from_connections(6, [(0, 5), (4, 5), (3, 4), (2, 3), (1, 2)])
    assert component_labels(graph) == [0] * 6
    assert component_labels(from_connections(2, [(0, 1)])) == [0, 0]


def test_split_graph_relabels_components() -> None:
    components = split_graph(_three_component_graph())

    assert [c.size() for c in components] == [7, 2, 1]
    largest = components[0]
    assert largest.nodes == (1, 2, 4, 5, 7, 8, 9)
    assert largest.index_map == {1: 0, 2: 1, 4: 2, 5: 3, 7: 4, 8: 5, 9: 6}
    assert list(largest.graph.iter_connections()) == [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6)]
    assert list(components[1].graph.iter_connections()) == [(0, 1)]
    assert components[2].graph.size() == 1


def test_two_disjoint_edges() -> None:
    components = split_graph(from_connections(4, [(0, 1), (2, 3)]))

    assert [c.nodes for c in components] == [(0, 1), (2, 3)]
    for component in components:
        assert component.graph.size() == 2
        assert component.graph.is_connected(0, 1)


def test_single_node_graph() -> None:
    components = split_graph(SparseGraph(1))
    assert len(components) == 1
    assert components[0].nodes == (0,)
    assert largest_component(SparseGraph(1)).size() == 1


@pytest.mark.parametrize("seed", range(8))
def test_components_partition_nodes(seed: int, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "debug", True)
    graph = random_graph(25, 18, rng=seed)
    components = split_graph(graph)

    all_nodes = sorted(node for c in components for node in c.nodes)
    assert all_nodes == list(range(25))
    assert sum(c.graph.size() for c in components) == 25
    sizes = [c.size() for c in components]
    assert sizes == sorted(sizes, reverse=True)

    for component in components:
        assert is_connected_graph(component.graph)
        mapping = component.index_map
        for x, y in graph.iter_connections():
            if x in mapping:
                assert y in mapping
                assert component.graph.is_connected(mapping[x], mapping[y])
    total = sum(len(list(c.graph.iter_connections())) for c in components)
    assert total == len(list(graph.iter_connections()))


def test_is_connected_graph() -> None:
    assert is_connected_graph(from_connections(3, [(0, 1), (1, 2)]))
    assert not is_connected_graph(from_connections(3, [(0, 1)]))
    assert is_connected_graph(SparseGraph(1))
