"""
Lightweight stage timing for analysis runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import List


@dataclass(frozen=True)
class StageTiming:
    description: str
    seconds: float
    seconds_per_unit: float


class Profiler:
    def __init__(self) -> None:
        self._times: List[float] = []
        self._descriptions: List[str] = []

    def start(self) -> None:
        self._times = [perf_counter()]
        self._descriptions = []

    def record(self, description: str) -> None:
        if not self._times:
            raise RuntimeError("Profiler.record() called before start().")
        self._descriptions.append(description)
        self._times.append(perf_counter())

    def results(self, work_size: int = 1) -> List[StageTiming]:
        if work_size <= 0:
            raise ValueError("work_size must be positive.")
        timings: List[StageTiming] = []
        for i, description in enumerate(self._descriptions):
            duration = self._times[i + 1] - self._times[i]
            timings.append(
                StageTiming(
                    description=description,
                    seconds=duration,
                    seconds_per_unit=duration / work_size,
                )
            )
        return timings

    def format_results(self, work_size: int = 1) -> List[str]:
        timings = self.results(work_size)
        width = max((len(t.description) for t in timings), default=0)
        return [
            f"{t.description:<{width}}({work_size}) {t.seconds:9,.3f} ({t.seconds_per_unit:f}·N)"
            for t in timings
        ]
