"""Tests for the CaveMap grid."""

from __future__ import annotations

import numpy as np
import pytest

from hollows.environment.cell_types import CellState, get_solid_map
from hollows.environment.map import CaveMap


class TestCaveMap:
    def test_new_map_is_all_solid(self) -> None:
        cave_map = CaveMap(6, 4)
        assert cave_map.cells.shape == (6, 4)
        assert cave_map.cells.dtype == np.uint8
        assert np.all(cave_map.cells == CellState.SOLID)
        assert cave_map.open_count == 0

    def test_shape_mismatch_rejected(self) -> None:
        with pytest.raises(ValueError):
            CaveMap(4, 4, np.zeros((3, 4), dtype=np.uint8))

    def test_from_rows_uses_y_as_row_index(self) -> None:
        cave_map = CaveMap.from_rows(["###", "#.#", "##."])
        assert cave_map.width == 3
        assert cave_map.height == 3
        assert cave_map.state(1, 1) == CellState.OPEN
        assert cave_map.state(2, 2) == CellState.OPEN
        assert cave_map.state(1, 2) == CellState.SOLID
        assert cave_map.open_count == 2

    def test_from_rows_rejects_ragged_rows(self) -> None:
        with pytest.raises(ValueError):
            CaveMap.from_rows(["###", "##"])

    def test_state_out_of_bounds_raises(self) -> None:
        cave_map = CaveMap(3, 3)
        with pytest.raises(IndexError):
            cave_map.state(3, 0)
        with pytest.raises(IndexError):
            cave_map.set_state(-1, 0, CellState.OPEN)

    def test_is_open_never_raises(self) -> None:
        cave_map = CaveMap.from_rows(["###", "#.#", "###"])
        assert cave_map.is_open((1, 1))
        assert not cave_map.is_open((0, 0))
        assert not cave_map.is_open((-5, 40))

    def test_border_detection(self) -> None:
        cave_map = CaveMap(4, 3)
        assert cave_map.is_border(0, 1)
        assert cave_map.is_border(3, 1)
        assert cave_map.is_border(2, 2)
        assert not cave_map.is_border(1, 1)

    def test_walkable_matches_open_cells(self) -> None:
        cave_map = CaveMap.from_rows(["#.", ".#"])
        assert cave_map.walkable.tolist() == [[False, True], [True, False]]
        assert np.array_equal(get_solid_map(cave_map.cells), ~cave_map.walkable)

    def test_freeze_blocks_writes(self) -> None:
        cave_map = CaveMap(3, 3)
        cave_map.freeze()
        assert cave_map.is_frozen
        with pytest.raises(ValueError):
            cave_map.set_state(1, 1, CellState.OPEN)

    def test_copy_is_writable_and_independent(self) -> None:
        cave_map = CaveMap(3, 3)
        cave_map.freeze()
        clone = cave_map.copy()
        assert not clone.is_frozen
        clone.set_state(1, 1, CellState.OPEN)
        assert cave_map.state(1, 1) == CellState.SOLID

    def test_to_ascii_with_marks(self) -> None:
        rows = ["####", "#..#", "####"]
        cave_map = CaveMap.from_rows(rows)
        assert cave_map.to_ascii() == "\n".join(rows)
        assert cave_map.to_ascii({(2, 1): "@"}).splitlines()[1] == "#.@#"
