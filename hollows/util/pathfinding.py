from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np
import tcod.path

if TYPE_CHECKING:
    from hollows.environment.map import CaveMap

from hollows.types import WorldTilePos


def _cost_map(cave_map: CaveMap) -> np.ndarray:
    return np.array(cave_map.walkable, dtype=np.int8)


def find_path(
    cave_map: CaveMap, start_pos: WorldTilePos, end_pos: WorldTilePos
) -> list[WorldTilePos]:
    """
    Calculates a path from a start to an end position using A*.

    Movement is restricted to the four cardinal directions, which is the
    adjacency the generator guarantees between rooms.

    Args:
        cave_map: The map to path across; only open cells are walkable.
        start_pos: The (x, y) starting coordinate for the path.
        end_pos: The (x, y) target coordinate for the path.

    Returns:
        A list of (x, y) tuples representing the path from start to end.
        The list does not include the start point. Returns an empty list
        if no path is found.
    """
    astar = tcod.path.AStar(cost=_cost_map(cave_map), diagonal=0)
    path = astar.get_path(start_pos[0], start_pos[1], end_pos[0], end_pos[1])
    return [(int(x), int(y)) for x, y in path]


def reachable_mask(cave_map: CaveMap, start_pos: WorldTilePos) -> np.ndarray:
    """Boolean array of every open cell reachable from ``start_pos``.

    Uses a single Dijkstra flood over the walkable map with cardinal moves
    only. An unwalkable start reaches nothing.
    """
    unreached = np.iinfo(np.int32).max
    distance = tcod.path.maxarray((cave_map.width, cave_map.height), dtype=np.int32)
    if not cave_map.is_open(start_pos):
        return np.zeros((cave_map.width, cave_map.height), dtype=bool)

    distance[start_pos] = 0
    tcod.path.dijkstra2d(
        distance, _cost_map(cave_map), cardinal=1, diagonal=0, out=distance
    )
    return distance != unreached


def unreachable_cells(
    cave_map: CaveMap, start_pos: WorldTilePos, cells: Iterable[WorldTilePos]
) -> list[WorldTilePos]:
    """Return the members of ``cells`` that cannot be walked to from ``start_pos``."""
    mask = reachable_mask(cave_map, start_pos)
    return [(x, y) for x, y in cells if not mask[x, y]]
