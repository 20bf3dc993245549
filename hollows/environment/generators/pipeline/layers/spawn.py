"""Spawn layer: picks the player spawn and seals the finished map."""

from __future__ import annotations

import logging

from hollows.environment.generators.errors import UnconnectableRoomsError
from hollows.environment.generators.pipeline.context import (
    GenerationContext,
    GenerationStage,
)
from hollows.environment.generators.pipeline.layer import GenerationLayer
from hollows.util.pathfinding import reachable_mask

logger = logging.getLogger(__name__)

SPAWN_RNG_DOMAIN = "map.cave.spawn"


class SpawnPointLayer(GenerationLayer):
    """Chooses a uniformly random main-room cell as the spawn and freezes the map.

    With ``verify_connectivity`` the layer also walks the finished grid from
    the spawn and fails the run if any room cell cannot be reached.
    """

    stage = GenerationStage.FINALIZED

    def __init__(self, verify_connectivity: bool = True) -> None:
        self.verify_connectivity = verify_connectivity

    def apply(self, ctx: GenerationContext) -> None:
        main_room = ctx.rooms[0]
        ctx.spawn_cell = ctx.rng.get(SPAWN_RNG_DOMAIN).choice(main_room.cells)

        if self.verify_connectivity:
            self._verify(ctx)

        ctx.cave_map.freeze()
        logger.debug(f"Spawn placed at {ctx.spawn_cell}")

    def _verify(self, ctx: GenerationContext) -> None:
        assert ctx.spawn_cell is not None
        mask = reachable_mask(ctx.cave_map, ctx.spawn_cell)
        stranded = [
            room
            for room in ctx.rooms
            if not all(mask[x, y] for x, y in room.cells)
        ]
        if stranded:
            raise UnconnectableRoomsError(
                f"{len(stranded)} room(s) not walkable from spawn {ctx.spawn_cell}",
                unreachable_count=len(stranded),
            )
