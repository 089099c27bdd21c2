from __future__ import annotations

import math

import numpy as np
import pytest

from tiny_graphstats.graph.base import IterationOverflowError
from tiny_graphstats.graph.builders import complete_graph, from_connections, path_graph
from tiny_graphstats.graph.sparse import SparseGraph
from tiny_graphstats.statistics.spreading import (
    SpreadingParameters,
    SpreadingSpeedCalculator,
    spreading_time,
)


@pytest.mark.parametrize(
    "field",
    ["seed_value", "transfer_probability", "target_value", "finish_factor"],
)
@pytest.mark.parametrize("value", [0.0, -0.5, 1.5, math.nan])
def test_parameters_must_be_in_unit_interval(field: str, value: float) -> None:
    with pytest.raises(ValueError, match=field):
        SpreadingParameters(**{field: value})


def test_parameters_reject_non_positive_step_cap() -> None:
    with pytest.raises(ValueError):
        SpreadingParameters(max_steps=0)


def test_default_step_limit() -> None:
    params = SpreadingParameters()
    assert params.step_limit(5) == 10
    assert params.step_limit(1) == 1
    assert SpreadingParameters(max_steps=3).step_limit(100) == 3


def test_triangle_informs_everyone_in_one_step() -> None:
    calculator = SpreadingSpeedCalculator()
    np.testing.assert_array_equal(calculator.calculate_all(complete_graph(3)), [1, 1, 1])


def test_path_spreads_one_hop_per_step() -> None:
    calculator = SpreadingSpeedCalculator(SpreadingParameters(1, 1, 1, 1))
    np.testing.assert_array_equal(calculator.calculate_all(path_graph(4)), [3, 2, 2, 3])
    assert calculator.calculate(path_graph(4)) == 2.5


def test_disconnected_graph_stalls() -> None:
    graph = from_connections(4, [(0, 1), (2, 3)])

    values = SpreadingSpeedCalculator().calculate_all(graph)
    assert np.isnan(values).all()

    half = SpreadingSpeedCalculator(SpreadingParameters(finish_factor=0.5))
    np.testing.assert_array_equal(half.calculate_all(graph), [1, 1, 1, 1])


def test_seed_alone_can_finish_immediately() -> None:
    assert spreading_time(SparseGraph(1), 0, SpreadingParameters()) == 0.0
    params = SpreadingParameters(finish_factor=0.25)
    assert spreading_time(path_graph(4), 2, params) == 0.0


def test_partial_transfers_accumulate() -> None:
    graph = path_graph(2)
    params = SpreadingParameters(seed_value=0.5, target_value=1.0, max_steps=10)

    # Step 1 brings node 1 to 0.5; step 2 saturates both nodes.
    assert spreading_time(graph, 0, params) == 2.0


def test_step_cap_overflow_is_fatal() -> None:
    graph = path_graph(2)
    params = SpreadingParameters(seed_value=0.5, target_value=1.0)

    with pytest.raises(IterationOverflowError):
        spreading_time(graph, 0, params)


def test_calculate_node_and_index_checks() -> None:
    calculator = SpreadingSpeedCalculator()
    assert calculator.calculate_node(path_graph(4), 0) == 3.0
    with pytest.raises(IndexError):
        calculator.calculate_node(path_graph(4), 4)
