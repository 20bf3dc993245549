"""Tests for corridor carving."""

from __future__ import annotations

import numpy as np
import pytest

from hollows.environment.cell_types import CellState
from hollows.environment.generators.corridors import (
    carve_corridor,
    disk_offsets,
    line_between,
    stamp_disk,
)
from hollows.environment.map import CaveMap
from hollows.util.pathfinding import find_path


class TestLineBetween:
    def test_includes_both_endpoints(self) -> None:
        line = line_between((1, 1), (6, 3))
        assert line[0] == (1, 1)
        assert line[-1] == (6, 3)
        assert len(line) == 6

    def test_single_point(self) -> None:
        assert line_between((4, 4), (4, 4)) == [(4, 4)]

    def test_steps_are_unit_moves(self) -> None:
        line = line_between((2, 9), (7, 1))
        for (x0, y0), (x1, y1) in zip(line, line[1:], strict=False):
            assert max(abs(x1 - x0), abs(y1 - y0)) == 1

    def test_coordinates_are_plain_ints(self) -> None:
        assert all(
            type(x) is int and type(y) is int for x, y in line_between((0, 0), (3, 2))
        )


class TestDisk:
    @pytest.mark.parametrize(("radius", "count"), [(0, 1), (1, 5), (2, 13)])
    def test_disk_sizes(self, radius: int, count: int) -> None:
        assert len(disk_offsets(radius)) == count

    def test_stamp_skips_border_and_outside(self) -> None:
        cave_map = CaveMap(5, 5)
        stamp_disk(cave_map, (0, 0), 2)
        assert cave_map.open_count == 1
        assert cave_map.state(1, 1) == CellState.OPEN
        assert np.all(cave_map.cells[0, :] == CellState.SOLID)
        assert np.all(cave_map.cells[:, 0] == CellState.SOLID)


class TestCarveCorridor:
    def test_radius_one_carves_a_band(self) -> None:
        cave_map = CaveMap(10, 5)
        line = carve_corridor(cave_map, (6, 1), (3, 1), 1)
        assert line == [(6, 1), (5, 1), (4, 1), (3, 1)]
        for cell in ((4, 1), (5, 1), (4, 2), (5, 2)):
            assert cave_map.state(*cell) == CellState.OPEN
        assert cave_map.state(4, 0) == CellState.SOLID
        assert cave_map.state(4, 3) == CellState.SOLID

    def test_carving_only_opens(self) -> None:
        cave_map = CaveMap.from_rows(
            [
                "########",
                "#..#...#",
                "#......#",
                "########",
            ]
        )
        before = cave_map.cells.copy()
        carve_corridor(cave_map, (1, 1), (6, 2), 1)
        was_open = before == CellState.OPEN
        assert np.all(cave_map.cells[was_open] == CellState.OPEN)

    def test_carving_is_idempotent(self) -> None:
        cave_map = CaveMap(15, 10)
        carve_corridor(cave_map, (2, 2), (12, 7), 2)
        once = cave_map.cells.copy()
        carve_corridor(cave_map, (2, 2), (12, 7), 2)
        assert np.array_equal(cave_map.cells, once)

    def test_radius_zero_diagonal_is_walkable(self) -> None:
        cave_map = CaveMap(10, 10)
        carve_corridor(cave_map, (1, 1), (8, 8), 0)
        path = find_path(cave_map, (1, 1), (8, 8))
        assert path
        assert path[-1] == (8, 8)

    def test_border_never_opened(self) -> None:
        cave_map = CaveMap(12, 12)
        carve_corridor(cave_map, (1, 1), (10, 10), 3)
        assert np.all(cave_map.cells[0, :] == CellState.SOLID)
        assert np.all(cave_map.cells[-1, :] == CellState.SOLID)
        assert np.all(cave_map.cells[:, 0] == CellState.SOLID)
        assert np.all(cave_map.cells[:, -1] == CellState.SOLID)
