from unittest.mock import patch

import pytest

from hollows.util import performance


def test_measure_block_collects_stats() -> None:
    times = iter([0.0, 0.05, 0.1, 0.3])
    with patch("time.perf_counter", side_effect=lambda: next(times)):
        performance.enable_timing()
        with performance.measure_block("cavegen.block"):
            pass
        with performance.measure_block("cavegen.block"):
            pass

    stats = performance.get_stats("cavegen.block")
    assert stats is not None
    assert stats.calls == 2
    assert stats.total == pytest.approx(0.25)
    assert stats.fastest == pytest.approx(0.05)
    assert stats.slowest == pytest.approx(0.2)
    assert stats.mean == pytest.approx(0.125)


def test_disabled_tracking_records_nothing() -> None:
    with performance.measure_block("ignored"):
        pass
    assert performance.get_stats("ignored") is None
    assert performance.timing_report() == "No timings recorded."


def test_report_filters_by_prefix() -> None:
    performance.enable_timing()
    with performance.measure_block("cavegen.smoothed"):
        pass
    with performance.measure_block("other"):
        pass

    report = performance.timing_report("cavegen.")
    assert "cavegen.smoothed" in report
    assert "other" not in report
    assert "No timings recorded under" in performance.timing_report("zzz")


def test_failed_block_is_still_timed() -> None:
    performance.enable_timing()
    with pytest.raises(RuntimeError), performance.measure_block("cavegen.connected"):
        raise RuntimeError("boom")
    stats = performance.get_stats("cavegen.connected")
    assert stats is not None
    assert stats.calls == 1


def test_report_lists_stages_in_order_with_shares() -> None:
    performance.enable_timing()
    tracker = performance.timer
    tracker.record("cavegen.synthesized", 0.003)
    tracker.record("cavegen.smoothed", 0.001)

    lines = performance.timing_report("cavegen.").splitlines()
    assert lines[3].startswith("cavegen.synthesized")
    assert lines[3].endswith("75.0%")
    assert lines[4].startswith("cavegen.smoothed")
    assert lines[4].endswith("25.0%")
    assert lines[-1].split() == ["Total", "4.00"]
