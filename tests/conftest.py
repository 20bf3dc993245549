from __future__ import annotations

from collections.abc import Iterator

import pytest

from hollows.util import performance


@pytest.fixture(autouse=True)
def reset_stage_timer() -> Iterator[None]:
    """Keep the shared stage timer off and empty around each test."""
    performance.disable_timing()
    performance.clear_timings()
    yield
    performance.disable_timing()
    performance.clear_timings()
