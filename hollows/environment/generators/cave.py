"""The cave generator service.

``CaveGenerator`` is constructed with its parameters and handed to whatever
needs a level. Each ``generate()`` call runs the whole pipeline from scratch
and returns a new ``GeneratedCave``; nothing is shared between calls.
"""

from __future__ import annotations

import logging

from hollows import config

from .base import BaseMapGenerator, GeneratedCave
from .errors import GenerationError
from .parameters import CaveParameters
from .pipeline import create_cave_pipeline

logger = logging.getLogger(__name__)


class CaveGenerator(BaseMapGenerator):
    """Generates connected cellular-automata caves.

    Example:
        generator = CaveGenerator(CaveParameters(width=80, height=60, seed=7))
        cave = generator.generate()
        player.teleport(cave.spawn_position)
    """

    def __init__(
        self,
        params: CaveParameters | None = None,
        verify_connectivity: bool | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            params: Generation parameters. Defaults come from ``config``.
            verify_connectivity: Passed to the spawn layer. If None, uses
                config.CAVE_VERIFY_CONNECTIVITY.
        """
        self.params = params if params is not None else CaveParameters()
        super().__init__(self.params.width, self.params.height)
        self.verify_connectivity = verify_connectivity

    def generate(self) -> GeneratedCave:
        """Run the full pipeline once.

        Raises:
            InvalidParametersError: Before any work, if parameters are invalid.
            NoRoomsError: If no region survives the size filter.
            UnconnectableRoomsError: If the room graph cannot be connected.
        """
        pipeline = create_cave_pipeline(
            self.params, verify_connectivity=self.verify_connectivity
        )
        cave = pipeline.generate()
        logger.info(
            f"Cave generated with seed {cave.seed!r}: "
            f"{cave.width}x{cave.height}, {len(cave.rooms)} rooms, "
            f"{len(cave.connections)} corridors, spawn at {cave.spawn_cell}"
        )
        return cave


def generate_with_retries(
    params: CaveParameters,
    max_attempts: int = config.CAVE_MAX_GENERATION_ATTEMPTS,
) -> GeneratedCave:
    """Generate a cave, retrying recoverable failures with derived seeds.

    Attempt 0 uses ``params.seed`` unchanged; attempt N uses
    ``f"{seed}:{N}"``. With a None seed every attempt draws a fresh seed.

    Raises:
        InvalidParametersError: Immediately; retrying cannot help.
        GenerationError: The last failure once attempts run out, or any
            non-recoverable failure.
        ValueError: If ``max_attempts`` is less than 1.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    params.validate()
    last_error: GenerationError | None = None
    for attempt in range(max_attempts):
        attempt_params = params
        if attempt > 0 and params.seed is not None:
            attempt_params = params.with_seed(f"{params.seed}:{attempt}")

        try:
            return CaveGenerator(attempt_params).generate()
        except GenerationError as e:
            if not e.recoverable:
                raise
            last_error = e
            logger.warning(
                f"Cave generation attempt {attempt + 1}/{max_attempts} "
                f"failed (seed {attempt_params.seed!r}): {e}"
            )

    assert last_error is not None
    raise last_error
