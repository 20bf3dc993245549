"""Corridor carving between two cells.

A corridor is a Bresenham line with a disk of open cells stamped at every
point, which gives a passage of consistent minimum width. Carving only ever
opens cells and never touches the border ring.
"""

from __future__ import annotations

from functools import cache

import tcod.los

from hollows.environment.cell_types import CellState
from hollows.environment.map import CaveMap
from hollows.types import WorldTilePos


def line_between(start: WorldTilePos, end: WorldTilePos) -> list[WorldTilePos]:
    """Return the Bresenham line from ``start`` to ``end``, both included."""
    return [(int(x), int(y)) for x, y in tcod.los.bresenham(start, end)]


@cache
def disk_offsets(radius: int) -> tuple[tuple[int, int], ...]:
    """All (dx, dy) offsets within ``radius`` Euclidean distance of the origin."""
    r_squared = radius * radius
    return tuple(
        (dx, dy)
        for dx in range(-radius, radius + 1)
        for dy in range(-radius, radius + 1)
        if dx * dx + dy * dy <= r_squared
    )


def _open_interior(cave_map: CaveMap, x: int, y: int) -> None:
    if 0 < x < cave_map.width - 1 and 0 < y < cave_map.height - 1:
        cave_map.cells[x, y] = CellState.OPEN


def stamp_disk(cave_map: CaveMap, center: WorldTilePos, radius: int) -> None:
    """Open every cell within ``radius`` of ``center``.

    Cells outside the map interior are skipped silently.
    """
    cx, cy = center
    for dx, dy in disk_offsets(radius):
        _open_interior(cave_map, cx + dx, cy + dy)


def carve_corridor(
    cave_map: CaveMap, start: WorldTilePos, end: WorldTilePos, radius: int
) -> list[WorldTilePos]:
    """Carve a walkable corridor from ``start`` to ``end``.

    With radius 0 a bare Bresenham line would only be diagonally connected,
    so the elbow cell of each diagonal step is opened too.

    Returns:
        The rasterized line the disks were stamped along.
    """
    line = line_between(start, end)
    previous: WorldTilePos | None = None
    for point in line:
        stamp_disk(cave_map, point, radius)
        if radius == 0 and previous is not None:
            px, py = previous
            x, y = point
            if px != x and py != y:
                _open_interior(cave_map, x, py)
        previous = point
    return line
