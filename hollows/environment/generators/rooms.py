"""Region filtering and the room model.

Small wall pockets are opened, small floor islands are filled, and every
surviving floor region becomes a ``Room``. The largest room is the main room:
the reachability root and the player's spawn area.
"""

from __future__ import annotations

import logging
from functools import cached_property

import numpy as np

from hollows.environment.cell_types import CellState
from hollows.environment.map import CaveMap
from hollows.types import WorldTilePos
from hollows.util.coordinates import Rect

from .errors import NoRoomsError
from .regions import CARDINAL_OFFSETS, Region, extract_regions

logger = logging.getLogger(__name__)


class Room:
    """A surviving floor region plus its place in the room graph."""

    def __init__(self, cells: tuple[WorldTilePos, ...], cave_map: CaveMap) -> None:
        self.cells = cells
        self.edge_tiles: tuple[WorldTilePos, ...] = find_edge_tiles(cells, cave_map)
        self.connected_rooms: list[Room] = []
        self.is_main_room = False
        self.is_accessible_from_main_room = False

    @property
    def size(self) -> int:
        return len(self.cells)

    @cached_property
    def bounds(self) -> Rect:
        return Rect.from_cells(list(self.cells))

    @cached_property
    def edge_array(self) -> np.ndarray:
        """Edge tiles as an (n, 2) int array, in ``edge_tiles`` order."""
        return np.array(self.edge_tiles, dtype=np.int64).reshape(-1, 2)

    def is_connected(self, other: Room) -> bool:
        return any(room is other for room in self.connected_rooms)

    def __repr__(self) -> str:
        if self.is_main_room:
            status = "main"
        elif self.is_accessible_from_main_room:
            status = "accessible"
        else:
            status = "isolated"
        return f"Room(size={self.size}, edges={len(self.edge_tiles)}, {status})"


def find_edge_tiles(
    cells: tuple[WorldTilePos, ...], cave_map: CaveMap
) -> tuple[WorldTilePos, ...]:
    """Return member cells with at least one solid (or off-map) cardinal neighbour.

    Diagonal neighbours are ignored. Each cell appears once, in member order.
    """
    edges: list[WorldTilePos] = []
    for x, y in cells:
        for dx, dy in CARDINAL_OFFSETS:
            nx, ny = x + dx, y + dy
            if (
                not cave_map.in_bounds(nx, ny)
                or cave_map.cells[nx, ny] == CellState.SOLID
            ):
                edges.append((x, y))
                break
    return tuple(edges)


def _fill_region(cave_map: CaveMap, region: Region, state: CellState) -> None:
    xs, ys = zip(*region.cells, strict=True)
    cave_map.cells[list(xs), list(ys)] = state


def remove_small_wall_regions(cave_map: CaveMap, min_room_size: int) -> int:
    """Open every wall region smaller than ``min_room_size``.

    Regions touching the border are kept so the map stays enclosed.

    Returns:
        The number of regions opened.
    """
    removed = 0
    for region in extract_regions(cave_map.cells, CellState.SOLID):
        if region.size >= min_room_size:
            continue
        if region.touches_border(cave_map.width, cave_map.height):
            continue
        _fill_region(cave_map, region, CellState.OPEN)
        removed += 1
    return removed


def remove_small_floor_regions(
    cave_map: CaveMap, min_room_size: int
) -> list[Region]:
    """Fill every floor region smaller than ``min_room_size``.

    Returns:
        The surviving floor regions, in extraction order.
    """
    survivors: list[Region] = []
    for region in extract_regions(cave_map.cells, CellState.OPEN):
        if region.size < min_room_size:
            _fill_region(cave_map, region, CellState.SOLID)
        else:
            survivors.append(region)
    return survivors


def filter_regions(cave_map: CaveMap, min_room_size: int) -> list[Room]:
    """Remove undersized regions and build the room list.

    Wall pockets are opened first and floor regions are extracted from the
    updated grid, so every room is a maximal region of the final map. Edge
    tiles are computed once all filling is done.

    Returns:
        Rooms sorted by size, largest first. The first room is flagged as
        the main room and accessible from itself.

    Raises:
        NoRoomsError: If no floor region is large enough.
    """
    walls_removed = remove_small_wall_regions(cave_map, min_room_size)
    floor_regions = remove_small_floor_regions(cave_map, min_room_size)

    if not floor_regions:
        raise NoRoomsError(
            f"No floor region of at least {min_room_size} cells survived filtering"
        )

    rooms = [Room(region.cells, cave_map) for region in floor_regions]
    # Stable sort: equal sizes keep extraction (row-major) order.
    rooms.sort(key=lambda room: room.size, reverse=True)

    main_room = rooms[0]
    main_room.is_main_room = True
    main_room.is_accessible_from_main_room = True

    logger.debug(
        f"Filtered regions: opened {walls_removed} wall pockets, "
        f"kept {len(rooms)} rooms (main room {main_room.size} cells)"
    )
    return rooms
