"""Nearest-room graph connection.

Rooms that are not yet reachable from the main room (set A) are linked to
rooms that are (set B) one corridor at a time:

1. Over every unlinked (a, b) pair with a in A and b in B, and every pair of
   their edge tiles, find the globally smallest squared distance. Ties keep
   the first pair found (room-list order, then edge-tile order).
2. Carve a corridor between the two tiles, link the rooms, and spread
   accessibility across the room graph from whichever side already had it.
3. Repeat until A is empty.

Every pass moves at least one room from A to B, so the loop reaches its
fixed point after at most ``len(rooms) - 1`` passes. A pass that finds no
candidate while A is non-empty is a terminal failure.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

import numpy as np

from hollows.environment.map import CaveMap
from hollows.types import SquaredDistance, WorldTilePos

from .corridors import carve_corridor
from .errors import UnconnectableRoomsError
from .rooms import Room

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Connection:
    """One corridor carved between two rooms.

    Attributes:
        room_a: Index (in the room list) of the room that was unreachable.
        room_b: Index of the room it was linked to.
        tile_a: Edge tile of room_a the corridor starts from.
        tile_b: Edge tile of room_b the corridor ends at.
        squared_distance: Squared Euclidean distance between the tiles.
    """

    room_a: int
    room_b: int
    tile_a: WorldTilePos
    tile_b: WorldTilePos
    squared_distance: SquaredDistance


def link_rooms(room_a: Room, room_b: Room) -> None:
    """Record an undirected connection and propagate accessibility."""
    room_a.connected_rooms.append(room_b)
    room_b.connected_rooms.append(room_a)

    if room_a.is_accessible_from_main_room:
        mark_accessible(room_b)
    elif room_b.is_accessible_from_main_room:
        mark_accessible(room_a)


def mark_accessible(start: Room) -> None:
    """Flag ``start`` and every room reachable from it as accessible.

    Worklist traversal over the room graph; rooms already flagged stop the
    spread, since their neighbours were flagged along with them.
    """
    if start.is_accessible_from_main_room:
        return
    start.is_accessible_from_main_room = True
    worklist: deque[Room] = deque([start])
    while worklist:
        room = worklist.popleft()
        for neighbor in room.connected_rooms:
            if not neighbor.is_accessible_from_main_room:
                neighbor.is_accessible_from_main_room = True
                worklist.append(neighbor)


def closest_edge_pair(
    room_a: Room, room_b: Room
) -> tuple[SquaredDistance, WorldTilePos, WorldTilePos] | None:
    """Return the closest pair of edge tiles between two rooms.

    The distance matrix is indexed [tile_a, tile_b]; argmin returns the
    first minimum in row-major order, i.e. the first pair a nested
    tile_a/tile_b loop would find.
    """
    edges_a = room_a.edge_array
    edges_b = room_b.edge_array
    if len(edges_a) == 0 or len(edges_b) == 0:
        return None

    diff = edges_a[:, np.newaxis, :] - edges_b[np.newaxis, :, :]
    distances = np.einsum("ijk,ijk->ij", diff, diff)
    flat_index = int(np.argmin(distances))
    index_a, index_b = divmod(flat_index, len(edges_b))
    return (
        int(distances[index_a, index_b]),
        room_a.edge_tiles[index_a],
        room_b.edge_tiles[index_b],
    )


def _find_best_link(
    rooms: list[Room],
) -> tuple[int, int, SquaredDistance, WorldTilePos, WorldTilePos] | None:
    unreachable: list[int] = []
    reachable: list[int] = []
    for i, room in enumerate(rooms):
        if room.is_accessible_from_main_room:
            reachable.append(i)
        else:
            unreachable.append(i)

    best: tuple[int, int, SquaredDistance, WorldTilePos, WorldTilePos] | None = None
    for index_a in unreachable:
        room_a = rooms[index_a]
        for index_b in reachable:
            room_b = rooms[index_b]
            if room_a is room_b or room_a.is_connected(room_b):
                continue
            pair = closest_edge_pair(room_a, room_b)
            if pair is None:
                continue
            distance, tile_a, tile_b = pair
            if best is None or distance < best[2]:
                best = (index_a, index_b, distance, tile_a, tile_b)
    return best


def connect_rooms(
    cave_map: CaveMap, rooms: list[Room], corridor_radius: int
) -> list[Connection]:
    """Link every room to the main room's component, carving corridors.

    ``rooms`` must already have its main room flagged accessible.

    Returns:
        The connections made, in carve order. Empty for single-room maps.

    Raises:
        UnconnectableRoomsError: If rooms remain unreachable but no
            candidate link exists.
    """
    connections: list[Connection] = []

    while True:
        remaining = sum(1 for room in rooms if not room.is_accessible_from_main_room)
        if remaining == 0:
            break

        best = _find_best_link(rooms)
        if best is None:
            raise UnconnectableRoomsError(
                f"{remaining} room(s) cannot be linked to the main room",
                unreachable_count=remaining,
            )

        index_a, index_b, distance, tile_a, tile_b = best
        carve_corridor(cave_map, tile_a, tile_b, corridor_radius)
        link_rooms(rooms[index_a], rooms[index_b])

        connection = Connection(
            room_a=index_a,
            room_b=index_b,
            tile_a=tile_a,
            tile_b=tile_b,
            squared_distance=distance,
        )
        connections.append(connection)
        logger.debug(
            f"Linked room {index_a} -> {index_b} via {tile_a} -> {tile_b} "
            f"(distance^2={distance})"
        )

    return connections
