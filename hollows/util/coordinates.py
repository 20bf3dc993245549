"""Grid geometry: cell rectangles, bounds checks, cell <-> world conversion."""

from __future__ import annotations

import math

from hollows.types import TileCoord, WorldPos, WorldTilePos


class Rect:
    """Rectangle/bounding box in cell coordinates."""

    def __init__(self, x: TileCoord, y: TileCoord, w: TileCoord, h: TileCoord) -> None:
        self.x1: TileCoord = x
        self.y1: TileCoord = y
        self.x2: TileCoord = x + w
        self.y2: TileCoord = y + h

    @classmethod
    def from_cells(cls, cells: list[WorldTilePos]) -> Rect:
        """Create the smallest Rect covering every cell (x2/y2 exclusive)."""
        xs = [x for x, _ in cells]
        ys = [y for _, y in cells]
        return cls(min(xs), min(ys), max(xs) - min(xs) + 1, max(ys) - min(ys) + 1)

    @property
    def width(self) -> TileCoord:
        return self.x2 - self.x1

    @property
    def height(self) -> TileCoord:
        return self.y2 - self.y1

    def center(self) -> tuple[int, int]:
        return (int((self.x1 + self.x2) / 2), int((self.y1 + self.y2) / 2))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"


# =============================================================================
# BOUNDS CHECKING HELPERS
# =============================================================================


def is_valid_world_tile_pos(
    pos: WorldTilePos, map_width: TileCoord, map_height: TileCoord
) -> bool:
    """Check if a cell position is within map bounds."""
    x, y = pos
    return 0 <= x < map_width and 0 <= y < map_height


def is_border_tile_pos(
    pos: WorldTilePos, map_width: TileCoord, map_height: TileCoord
) -> bool:
    """Check if a cell position lies on the outermost ring of the map."""
    x, y = pos
    return x in (0, map_width - 1) or y in (0, map_height - 1)


class WorldGridConverter:
    """Maps between grid cells and world positions centred on the map midpoint.

    Cell (width // 2, height // 2) covers the world square [0, 1) x [0, 1).
    A cell's world position is its centre, so ``cell_to_world`` followed by
    ``world_to_cell`` returns the original cell.
    """

    def __init__(self, map_width: TileCoord, map_height: TileCoord) -> None:
        self.map_width = map_width
        self.map_height = map_height
        self.offset_x = map_width // 2
        self.offset_y = map_height // 2

    def cell_to_world(self, cell: WorldTilePos) -> WorldPos:
        """Convert a cell to the world position of its centre."""
        x, y = cell
        return (x - self.offset_x + 0.5, y - self.offset_y + 0.5)

    def world_to_cell(self, pos: WorldPos) -> WorldTilePos:
        """Convert a world position to the cell containing it.

        The result may lie outside the map; callers check bounds.
        """
        wx, wy = pos
        return (math.floor(wx + self.offset_x), math.floor(wy + self.offset_y))
