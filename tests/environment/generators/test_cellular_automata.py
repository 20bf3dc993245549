"""Tests for cellular-automata noise and smoothing."""

from __future__ import annotations

from random import Random

import numpy as np

from hollows.environment.cell_types import CellState
from hollows.environment.generators.cellular_automata import (
    count_wall_neighbors,
    enforce_solid_border,
    generate_noise,
    smooth,
    smooth_step,
)
from hollows.util.rng import RNGProvider


def _naive_wall_count(cells: np.ndarray, x: int, y: int) -> int:
    width, height = cells.shape
    count = 0
    for nx in range(x - 1, x + 2):
        for ny in range(y - 1, y + 2):
            if (nx, ny) == (x, y):
                continue
            if not (0 <= nx < width and 0 <= ny < height):
                count += 1
            elif cells[nx, ny] == CellState.SOLID:
                count += 1
    return count


def _naive_smooth_step(cells: np.ndarray, threshold: int) -> np.ndarray:
    width, height = cells.shape
    result = cells.copy()
    for x in range(width):
        for y in range(height):
            count = _naive_wall_count(cells, x, y)
            if count > threshold:
                result[x, y] = CellState.SOLID
            elif count < threshold:
                result[x, y] = CellState.OPEN
    return result


# =============================================================================
# Noise
# =============================================================================


class TestGenerateNoise:
    def test_border_is_solid(self) -> None:
        cells = generate_noise(12, 9, 0, Random(1))
        assert np.all(cells[0, :] == CellState.SOLID)
        assert np.all(cells[-1, :] == CellState.SOLID)
        assert np.all(cells[:, 0] == CellState.SOLID)
        assert np.all(cells[:, -1] == CellState.SOLID)

    def test_fill_zero_opens_interior(self) -> None:
        cells = generate_noise(12, 9, 0, Random(1))
        assert np.all(cells[1:-1, 1:-1] == CellState.OPEN)

    def test_fill_hundred_is_all_solid(self) -> None:
        cells = generate_noise(12, 9, 100, Random(1))
        assert np.all(cells == CellState.SOLID)

    def test_same_stream_same_noise(self) -> None:
        a = generate_noise(30, 20, 45, RNGProvider("seed").get("noise"))
        b = generate_noise(30, 20, 45, RNGProvider("seed").get("noise"))
        assert np.array_equal(a, b)

    def test_draws_one_value_per_interior_cell_in_row_order(self) -> None:
        rng = Random(5)
        cells = generate_noise(6, 5, 45, rng)

        replay = Random(5)
        for y in range(1, 4):
            for x in range(1, 5):
                expected = (
                    CellState.OPEN if replay.randrange(100) >= 45 else CellState.SOLID
                )
                assert cells[x, y] == expected
        assert rng.random() == replay.random()


# =============================================================================
# Smoothing
# =============================================================================


class TestSmoothing:
    def test_neighbor_count_matches_naive_loop(self) -> None:
        cells = generate_noise(15, 11, 45, Random(3))
        counts = count_wall_neighbors(cells)
        for x in range(15):
            for y in range(11):
                assert counts[x, y] == _naive_wall_count(cells, x, y)

    def test_out_of_bounds_counts_as_solid(self) -> None:
        cells = np.zeros((3, 3), dtype=np.uint8)
        counts = count_wall_neighbors(cells)
        assert counts[0, 0] == 5
        assert counts[1, 0] == 3
        assert counts[1, 1] == 0

    def test_open_square_loses_its_corners(self) -> None:
        cells = np.full((3, 3), CellState.OPEN, dtype=np.uint8)
        result = smooth_step(cells, 4)
        for corner in ((0, 0), (2, 0), (0, 2), (2, 2)):
            assert result[corner] == CellState.SOLID
        for open_cell in ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2)):
            assert result[open_cell] == CellState.OPEN

    def test_threshold_count_keeps_state(self) -> None:
        # Center sees exactly four solid neighbours.
        cells = np.array(
            [[1, 1, 1], [0, 0, 0], [1, 0, 0]], dtype=np.uint8
        )
        assert count_wall_neighbors(cells)[1, 1] == 4
        assert smooth_step(cells, 4)[1, 1] == CellState.OPEN
        cells[1, 1] = CellState.SOLID
        assert smooth_step(cells, 4)[1, 1] == CellState.SOLID

    def test_step_matches_naive_reference(self) -> None:
        cells = generate_noise(20, 14, 45, Random(11))
        for threshold in (3, 4, 5):
            assert np.array_equal(
                smooth_step(cells, threshold), _naive_smooth_step(cells, threshold)
            )

    def test_step_does_not_mutate_input(self) -> None:
        cells = generate_noise(10, 10, 45, Random(2))
        before = cells.copy()
        smooth_step(cells, 4)
        assert np.array_equal(cells, before)

    def test_zero_iterations_is_identity(self) -> None:
        cells = generate_noise(10, 10, 45, Random(2))
        assert np.array_equal(smooth(cells, 0, 4), cells)

    def test_iterations_compose(self) -> None:
        cells = generate_noise(16, 16, 45, Random(9))
        twice = smooth_step(smooth_step(cells, 4), 4)
        assert np.array_equal(smooth(cells, 2, 4), twice)

    def test_enforce_solid_border(self) -> None:
        cells = np.zeros((5, 4), dtype=np.uint8)
        enforce_solid_border(cells)
        assert cells.sum() == 5 * 4 - 3 * 2
        assert np.all(cells[1:-1, 1:-1] == CellState.OPEN)
