"""Room layers: region filtering and room graph connection.

- RegionFilterLayer: Removes undersized regions and builds the room list
- RoomConnectionLayer: Carves corridors until every room is reachable
"""

from __future__ import annotations

from hollows.environment.generators.pipeline.context import (
    GenerationContext,
    GenerationStage,
)
from hollows.environment.generators.pipeline.layer import GenerationLayer
from hollows.environment.generators.room_connector import connect_rooms
from hollows.environment.generators.rooms import filter_regions


class RegionFilterLayer(GenerationLayer):
    """Opens small wall pockets, fills small floor islands, builds rooms.

    Raises NoRoomsError when nothing survives.
    """

    stage = GenerationStage.FILTERED

    def apply(self, ctx: GenerationContext) -> None:
        ctx.rooms = filter_regions(ctx.cave_map, ctx.params.min_room_size)


class RoomConnectionLayer(GenerationLayer):
    """Links every room to the main room with carved corridors.

    Raises UnconnectableRoomsError when a disconnected room has no
    candidate link.
    """

    stage = GenerationStage.CONNECTED

    def apply(self, ctx: GenerationContext) -> None:
        ctx.connections = connect_rooms(
            ctx.cave_map, ctx.rooms, ctx.params.corridor_radius
        )
