"""
Spreading speed: how many discrete diffusion steps a seed node needs to
inform a given fraction of the network.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from tiny_graphstats.graph.base import Graph, IterationOverflowError
from tiny_graphstats.graph.sparse import SparseGraph
from tiny_graphstats.graph.utilities import to_sparse
from tiny_graphstats.utils.logging import get_logger

from .base import LocalStatisticCalculator

log = get_logger(__name__)


@dataclass(frozen=True)
class SpreadingParameters:
    """
    Diffusion settings, each of the first four in ``(0, 1]``.

    Attributes:
        seed_value: Value given to the seed node before the first step.
        transfer_probability: Fraction of a sender's value passed to each
            receiving neighbor per step.
        target_value: Value at which a node counts as informed.
        finish_factor: Fraction of all nodes that must be informed.
        max_steps: Hard iteration cap; ``None`` means ``n * (n - 1) / 2``.
    """

    seed_value: float = 1.0
    transfer_probability: float = 1.0
    target_value: float = 1.0
    finish_factor: float = 1.0
    max_steps: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("seed_value", "transfer_probability", "target_value", "finish_factor"):
            value = getattr(self, name)
            if not 0 < value <= 1:
                raise ValueError(f"'{name}' should be in the range (0, 1]: {value}")
        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError(f"'max_steps' should be positive: {self.max_steps}")

    def step_limit(self, num_nodes: int) -> int:
        if self.max_steps is not None:
            return self.max_steps
        return max(1, num_nodes * (num_nodes - 1) // 2)


def spreading_time(graph: SparseGraph, seed: int, params: SpreadingParameters) -> float:
    """
    Number of steps until ``ceil(finish_factor * n)`` nodes are informed when
    diffusion starts at ``seed``; NaN if the diffusion stalls before that.

    Every node that received in step ``k - 1`` sends in step ``k``. A node
    stops receiving once its value saturates at 1.
    """
    n = graph.size()
    seed = graph.check_index(seed)

    values = np.zeros(n)
    senders = np.zeros(n, dtype=bool)
    receivers = np.ones(n, dtype=bool)
    informed = np.zeros(n, dtype=bool)

    values[seed] = params.seed_value
    senders[seed] = True
    receivers[seed] = params.seed_value < 1
    informed[seed] = params.seed_value >= params.target_value

    remaining = math.ceil(params.finish_factor * n)
    if informed[seed]:
        remaining -= 1
    if remaining <= 0:
        return 0.0

    limit = params.step_limit(n)
    for step in range(1, limit + 1):
        values_of_last_step = values.copy()
        senders_of_last_step = senders.copy()

        changed = False
        for sender in np.flatnonzero(senders_of_last_step).tolist():
            amount = params.transfer_probability * values_of_last_step[sender]
            for receiver in graph.neighbors(sender):
                if not receivers[receiver]:
                    continue

                values[receiver] += amount
                senders[receiver] = True

                if values[receiver] >= params.target_value and not informed[receiver]:
                    remaining -= 1
                    informed[receiver] = True

                if values[receiver] >= 1:
                    values[receiver] = 1
                    receivers[receiver] = False

                changed = True

        if remaining <= 0:
            return float(step)

        if not changed:
            log.debug("Diffusion from node %d stalled after %d step(s)", seed, step)
            return math.nan

    raise IterationOverflowError(f"Diffusion from node {seed} did not finish within {limit} steps")


class SpreadingSpeedCalculator(LocalStatisticCalculator):
    name = "Spreading Speed"
    abbreviation = "SS"

    def __init__(self, params: Optional[SpreadingParameters] = None) -> None:
        self.params = params if params is not None else SpreadingParameters()

    def calculate_node(self, graph: Graph, node: int) -> float:
        return spreading_time(to_sparse(graph), node, self.params)

    def _calculate_all(self, graph: SparseGraph) -> np.ndarray:
        return np.array(
            [spreading_time(graph, node, self.params) for node in range(graph.size())],
            dtype=np.float64,
        )
