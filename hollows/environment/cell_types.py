"""
Cell states for the cave grid.

The cave map stores a NumPy array of ``CellState`` values (one byte per cell).
Helper functions turn that array into boolean property maps for systems like
walkability checks and reachability queries.
"""

from enum import IntEnum

import numpy as np


class CellState(IntEnum):
    """State of a single grid cell."""

    OPEN = 0  # Floor; walkable
    SOLID = 1  # Wall; blocks movement


CELL_DTYPE = np.uint8


def get_walkable_map(cells: np.ndarray) -> np.ndarray:
    """Boolean array of the same shape where True means the cell is walkable."""
    return cells == CellState.OPEN


def get_solid_map(cells: np.ndarray) -> np.ndarray:
    """Boolean array of the same shape where True means the cell is solid."""
    return cells == CellState.SOLID
