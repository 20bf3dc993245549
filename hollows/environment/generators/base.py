"""Base classes for map generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING

from hollows.environment.cell_types import CellState
from hollows.util.coordinates import WorldGridConverter

if TYPE_CHECKING:
    from hollows.environment.map import CaveMap
    from hollows.types import RandomSeed, TileCoord, WorldPos, WorldTilePos
    from hollows.util.rng import RNG

    from .room_connector import Connection
    from .rooms import Room


@dataclass(frozen=True)
class GeneratedCave:
    """Everything a finished generation run hands to its consumers.

    The grid is frozen: renderers and spawners read it but cannot change it.
    A new generation call produces a new GeneratedCave.

    Attributes:
        cave_map: The finished, read-only grid.
        rooms: Rooms sorted largest first; rooms[0] is the main room.
        connections: Corridors carved by the room connector, in carve order.
        spawn_cell: Recommended player spawn, an open cell of the main room.
        seed: The seed the run actually used (resolved if None was passed).
    """

    cave_map: CaveMap
    rooms: tuple[Room, ...]
    connections: tuple[Connection, ...]
    spawn_cell: WorldTilePos
    seed: RandomSeed
    _converter: WorldGridConverter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_converter",
            WorldGridConverter(self.cave_map.width, self.cave_map.height),
        )

    @property
    def width(self) -> TileCoord:
        return self.cave_map.width

    @property
    def height(self) -> TileCoord:
        return self.cave_map.height

    @property
    def main_room(self) -> Room:
        return self.rooms[0]

    @cached_property
    def spawn_position(self) -> WorldPos:
        """World position of the spawn cell's centre."""
        return self.cell_to_world(self.spawn_cell)

    def state(self, x: TileCoord, y: TileCoord) -> CellState:
        return self.cave_map.state(x, y)

    def cell_to_world(self, cell: WorldTilePos) -> WorldPos:
        return self._converter.cell_to_world(cell)

    def world_to_cell(self, pos: WorldPos) -> WorldTilePos:
        return self._converter.world_to_cell(pos)

    def is_walkable(self, pos: WorldPos) -> bool:
        """True if the world position lies on an open cell inside the map."""
        return self.cave_map.is_open(self.world_to_cell(pos))

    def random_walkable_position(self, rng: RNG) -> WorldPos:
        """Pick a random room, then a random cell in it, as a world position."""
        room = rng.choice(self.rooms)
        return self.cell_to_world(rng.choice(room.cells))


class BaseMapGenerator(abc.ABC):
    """Abstract base class for map generation algorithms."""

    def __init__(self, map_width: TileCoord, map_height: TileCoord) -> None:
        self.map_width = map_width
        self.map_height = map_height

    @abc.abstractmethod
    def generate(self) -> GeneratedCave:
        """Generate the map layout and its structural data."""
        raise NotImplementedError
