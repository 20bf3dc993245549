"""Generation context for the cave pipeline.

The GenerationContext is a mutable container that holds all state during one
generation call. Each layer in the pipeline receives the same context and
modifies it in place. This avoids copying the grid between layers.

The context also tracks which stage of the linear generation state machine
has completed:

    UNINITIALIZED -> SYNTHESIZED -> SMOOTHED -> FILTERED -> CONNECTED -> FINALIZED
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from hollows.environment.generators.base import GeneratedCave
from hollows.environment.generators.parameters import CaveParameters
from hollows.environment.generators.room_connector import Connection
from hollows.environment.generators.rooms import Room
from hollows.environment.map import CaveMap
from hollows.types import RandomSeed, WorldTilePos
from hollows.util.rng import RNGProvider, fresh_seed


class GenerationStage(IntEnum):
    """Completed stages of a generation call, in the only legal order."""

    UNINITIALIZED = 0
    SYNTHESIZED = auto()
    SMOOTHED = auto()
    FILTERED = auto()
    CONNECTED = auto()
    FINALIZED = auto()


@dataclass
class GenerationContext:
    """Mutable state container passed through the generation pipeline.

    Attributes:
        params: The validated parameters of this run.
        seed: The resolved master seed (never None).
        cave_map: The grid being built. All solid until the noise layer runs.
        rng: Provider of per-stage random streams derived from ``seed``.
        stage: Last completed stage.
        rooms: Room list, filled by the region filter layer.
        connections: Corridors carved by the connection layer.
        spawn_cell: Chosen by the spawn layer.
    """

    params: CaveParameters
    seed: RandomSeed
    cave_map: CaveMap
    rng: RNGProvider
    stage: GenerationStage = GenerationStage.UNINITIALIZED
    rooms: list[Room] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)
    spawn_cell: WorldTilePos | None = None

    @classmethod
    def create_empty(cls, params: CaveParameters) -> GenerationContext:
        """Create a fresh context for one run.

        A None seed is replaced by a fresh one so the run can be reproduced
        from the seed stored on the result.
        """
        seed = params.seed if params.seed is not None else fresh_seed()
        return cls(
            params=params,
            seed=seed,
            cave_map=CaveMap(params.width, params.height),
            rng=RNGProvider(seed),
        )

    def require_next_stage(self, stage: GenerationStage) -> None:
        """Raise RuntimeError unless ``stage`` directly follows the current one."""
        if stage != self.stage + 1:
            raise RuntimeError(
                f"Cannot enter {stage.name} after {self.stage.name}; "
                f"stages must run in order"
            )

    def to_generated_cave(self) -> GeneratedCave:
        """Package the finished run for consumers.

        Raises:
            RuntimeError: If the pipeline has not reached FINALIZED.
        """
        if self.stage != GenerationStage.FINALIZED or self.spawn_cell is None:
            raise RuntimeError(
                f"Generation incomplete: reached {self.stage.name}, "
                f"expected {GenerationStage.FINALIZED.name}"
            )
        return GeneratedCave(
            cave_map=self.cave_map,
            rooms=tuple(self.rooms),
            connections=tuple(self.connections),
            spawn_cell=self.spawn_cell,
            seed=self.seed,
        )
