from __future__ import annotations

import numpy as np

from hollows import config
from hollows.environment import cell_types
from hollows.environment.cell_types import CELL_DTYPE, CellState
from hollows.types import TileCoord, WorldTilePos
from hollows.util.coordinates import is_border_tile_pos, is_valid_world_tile_pos


class CaveMap:
    """A fixed-size grid of open/solid cells.

    ``cells`` has shape (width, height) and is indexed ``cells[x, y]``.
    Generation stages mutate it in place; ``freeze()`` makes it read-only
    before it is handed to consumers.
    """

    def __init__(
        self, width: TileCoord, height: TileCoord, cells: np.ndarray | None = None
    ) -> None:
        if cells is None:
            cells = np.full(
                (width, height), fill_value=CellState.SOLID, dtype=CELL_DTYPE, order="F"
            )
        elif cells.shape != (width, height):
            raise ValueError(
                f"cells shape {cells.shape} does not match ({width}, {height})"
            )
        self.width: TileCoord = width
        self.height: TileCoord = height
        self.cells = cells

    @classmethod
    def from_rows(cls, rows: list[str]) -> CaveMap:
        """Build a map from text rows (``#`` solid, anything else open).

        Row 0 is y=0. Mostly useful for hand-written fixtures.
        """
        height = len(rows)
        width = len(rows[0]) if rows else 0
        cave_map = cls(width, height)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has length {len(row)}, expected {width}")
            for x, ch in enumerate(row):
                solid = ch == config.ASCII_SOLID_GLYPH
                cave_map.cells[x, y] = CellState.SOLID if solid else CellState.OPEN
        return cave_map

    def in_bounds(self, x: TileCoord, y: TileCoord) -> bool:
        return is_valid_world_tile_pos((x, y), self.width, self.height)

    def is_border(self, x: TileCoord, y: TileCoord) -> bool:
        return is_border_tile_pos((x, y), self.width, self.height)

    def _check_bounds(self, x: TileCoord, y: TileCoord) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"cell ({x}, {y}) outside {self.width}x{self.height} map"
            )

    def state(self, x: TileCoord, y: TileCoord) -> CellState:
        """Return the state of cell (x, y)."""
        self._check_bounds(x, y)
        return CellState(int(self.cells[x, y]))

    def set_state(self, x: TileCoord, y: TileCoord, state: CellState) -> None:
        self._check_bounds(x, y)
        self.cells[x, y] = state

    def is_open(self, pos: WorldTilePos) -> bool:
        """True if ``pos`` is inside the map and open. Never raises."""
        x, y = pos
        return self.in_bounds(x, y) and self.cells[x, y] == CellState.OPEN

    @property
    def walkable(self) -> np.ndarray:
        """Boolean array of shape (width, height) where True means walkable."""
        return cell_types.get_walkable_map(self.cells)

    @property
    def open_count(self) -> int:
        return int(np.count_nonzero(self.cells == CellState.OPEN))

    @property
    def is_frozen(self) -> bool:
        return not self.cells.flags.writeable

    def freeze(self) -> None:
        """Make the cell array read-only. Any later write raises ValueError."""
        self.cells.flags.writeable = False

    def copy(self) -> CaveMap:
        """Return an independent, writable copy."""
        return CaveMap(self.width, self.height, self.cells.copy(order="F"))

    def to_ascii(self, marks: dict[WorldTilePos, str] | None = None) -> str:
        """Render the map as text, one row per y, for debugging.

        Args:
            marks: Optional cells to draw with a custom glyph (e.g. the spawn).
        """
        marks = marks or {}
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if (x, y) in marks:
                    row.append(marks[(x, y)])
                elif self.cells[x, y] == CellState.SOLID:
                    row.append(config.ASCII_SOLID_GLYPH)
                else:
                    row.append(config.ASCII_OPEN_GLYPH)
            lines.append("".join(row))
        return "\n".join(lines)
