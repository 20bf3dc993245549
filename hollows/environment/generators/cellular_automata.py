"""Cellular-automata cave synthesis.

Algorithm:
1. Initialize the grid with random noise: the border is solid, each interior
   cell is solid with probability fill_percent / 100.
2. For each iteration, count solid cells in the 8-directional Moore
   neighbourhood (out-of-bounds counts as solid):
   - more than wall_threshold -> cell becomes solid
   - fewer than wall_threshold -> cell becomes open
   - exactly wall_threshold -> cell keeps its state
   Every pass reads the previous grid and writes a fresh array, so the
   result does not depend on scan order.

Tuning guide:
- fill_percent=45, iterations=5 -> balanced caves
- fill_percent=35, iterations=5 -> more open areas
- fill_percent=55, iterations=3 -> tighter, more enclosed
"""

from __future__ import annotations

import numpy as np

from hollows.environment.cell_types import CELL_DTYPE, CellState
from hollows.util.rng import RNG


def generate_noise(
    width: int, height: int, fill_percent: int, rng: RNG
) -> np.ndarray:
    """Return a (width, height) grid of random solid/open cells with a solid border.

    Interior cells are drawn in row-major order (y outer, x inner) so the
    stream consumption is fixed for a given size.
    """
    cells = np.full(
        (width, height), fill_value=CellState.SOLID, dtype=CELL_DTYPE, order="F"
    )
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if rng.randrange(100) >= fill_percent:
                cells[x, y] = CellState.OPEN
    return cells


def count_wall_neighbors(cells: np.ndarray) -> np.ndarray:
    """Count solid cells in each cell's Moore neighbourhood.

    Cells outside the grid count as solid, so corner cells always see at
    least 5 solid neighbours and edge cells at least 3.
    """
    width, height = cells.shape
    padded = np.pad(
        (cells == CellState.SOLID).astype(np.int8),
        1,
        mode="constant",
        constant_values=1,
    )
    wall_count = np.zeros((width, height), dtype=np.int8)
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            wall_count += padded[1 + dx : 1 + dx + width, 1 + dy : 1 + dy + height]
    return wall_count


def smooth_step(cells: np.ndarray, wall_threshold: int) -> np.ndarray:
    """Run one smoothing pass and return the new grid."""
    wall_count = count_wall_neighbors(cells)
    new_cells = cells.copy(order="F")
    new_cells[wall_count > wall_threshold] = CellState.SOLID
    new_cells[wall_count < wall_threshold] = CellState.OPEN
    return new_cells


def smooth(cells: np.ndarray, iterations: int, wall_threshold: int) -> np.ndarray:
    """Run exactly ``iterations`` smoothing passes."""
    for _ in range(iterations):
        cells = smooth_step(cells, wall_threshold)
    return cells


def enforce_solid_border(cells: np.ndarray) -> None:
    """Set every border cell solid, in place."""
    cells[0, :] = CellState.SOLID
    cells[-1, :] = CellState.SOLID
    cells[:, 0] = CellState.SOLID
    cells[:, -1] = CellState.SOLID
