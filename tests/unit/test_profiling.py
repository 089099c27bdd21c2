from __future__ import annotations

import pytest

from tiny_graphstats.utils.profiling import Profiler


def test_profiler_records_stages() -> None:
    profiler = Profiler()
    profiler.start()
    profiler.record("load")
    profiler.record("statistics")

    timings = profiler.results(work_size=4)
    assert [t.description for t in timings] == ["load", "statistics"]
    for timing in timings:
        assert timing.seconds >= 0
        assert timing.seconds_per_unit == pytest.approx(timing.seconds / 4)

    lines = profiler.format_results(4)
    assert lines[0].startswith("load      (4)")
    assert lines[1].startswith("statistics(4)")


def test_start_resets_previous_run() -> None:
    profiler = Profiler()
    profiler.start()
    profiler.record("first")
    profiler.start()

    assert profiler.results() == []
    assert profiler.format_results() == []


def test_record_requires_start() -> None:
    with pytest.raises(RuntimeError):
        Profiler().record("load")
    with pytest.raises(ValueError):
        Profiler().results(work_size=0)
