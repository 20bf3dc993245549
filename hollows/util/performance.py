"""
Opt-in timing of generation stages.

The pipeline wraps every layer in ``measure_block(f"cavegen.{stage}")``.
Nothing is recorded until timing is enabled, so library callers pay only
for a flag check. Benchmarks and the preview script turn it on and print a
report that lists each stage's share of the total time:

    enable_timing()
    for seed in range(100):
        CaveGenerator(CaveParameters(seed=seed)).generate()
    print(timing_report("cavegen."))
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass
class TimingStats:
    """Accumulated durations of one named block, in seconds."""

    name: str
    calls: int = 0
    total: float = 0.0
    fastest: float = float("inf")
    slowest: float = 0.0

    def add(self, duration: float) -> None:
        self.calls += 1
        self.total += duration
        if duration < self.fastest:
            self.fastest = duration
        if duration > self.slowest:
            self.slowest = duration

    @property
    def mean(self) -> float:
        return self.total / self.calls if self.calls else 0.0


class StageTimer:
    """Collects ``TimingStats`` by block name while active.

    Stats are kept in first-measured order, which for the pipeline is stage
    order.
    """

    def __init__(self) -> None:
        self.active = False
        self._by_name: dict[str, TimingStats] = {}

    def clear(self) -> None:
        self._by_name.clear()

    @contextmanager
    def measure_block(self, name: str) -> Iterator[None]:
        """Time the enclosed block under ``name``.

        The duration is recorded even if the block raises, so failed stages
        still show up in the report.
        """
        if not self.active:
            yield
            return

        began = time.perf_counter()
        try:
            yield
        finally:
            self.record(name, time.perf_counter() - began)

    def record(self, name: str, duration: float) -> None:
        if name not in self._by_name:
            self._by_name[name] = TimingStats(name)
        self._by_name[name].add(duration)

    def stats_for(self, name: str) -> TimingStats | None:
        return self._by_name.get(name)

    def matching(self, prefix: str) -> list[TimingStats]:
        return [s for name, s in self._by_name.items() if name.startswith(prefix)]

    def report(self, prefix: str = "") -> str:
        """Format the collected stats as a table.

        Args:
            prefix: Only include blocks whose names start with this.
        """
        if not self._by_name:
            return "No timings recorded."

        selected = self.matching(prefix)
        if not selected:
            return f"No timings recorded under '{prefix}'."

        grand_total = sum(s.total for s in selected)
        title = f"Stage timings ({prefix}*)" if prefix else "Stage timings"
        rows = [
            title,
            f"{'Block':<24} {'Calls':>6} {'Avg(ms)':>9} {'Max(ms)':>9} {'Share':>7}",
            "-" * 59,
        ]
        for s in selected:
            share = s.total / grand_total if grand_total else 0.0
            rows.append(
                f"{s.name:<24} {s.calls:>6} {s.mean * 1000:>9.2f} "
                f"{s.slowest * 1000:>9.2f} {share:>7.1%}"
            )
        rows.append(f"{'Total':<24} {'':>6} {grand_total * 1000:>9.2f}")
        return "\n".join(rows)


# Shared by the pipeline and whoever reads the report
timer = StageTimer()


def enable_timing() -> None:
    timer.active = True


def disable_timing() -> None:
    timer.active = False


def clear_timings() -> None:
    timer.clear()


def measure_block(name: str):
    """Context manager timing a block on the shared timer.

    See StageTimer.measure_block().
    """
    return timer.measure_block(name)


def get_stats(name: str) -> TimingStats | None:
    return timer.stats_for(name)


def timing_report(prefix: str = "") -> str:
    return timer.report(prefix)
