"""Terrain layers: cellular-automata synthesis of the raw cave.

- NoiseLayer: Fills the interior with random solid/open noise
- SmoothingLayer: Runs the cellular-automata smoothing passes
"""

from __future__ import annotations

import logging

from hollows.environment.generators import cellular_automata
from hollows.environment.generators.pipeline.context import (
    GenerationContext,
    GenerationStage,
)
from hollows.environment.generators.pipeline.layer import GenerationLayer

logger = logging.getLogger(__name__)

NOISE_RNG_DOMAIN = "map.cave.noise"


class NoiseLayer(GenerationLayer):
    """Replaces the grid with border-enclosed random noise."""

    stage = GenerationStage.SYNTHESIZED

    def apply(self, ctx: GenerationContext) -> None:
        params = ctx.params
        ctx.cave_map.cells = cellular_automata.generate_noise(
            params.width,
            params.height,
            params.fill_percent,
            ctx.rng.get(NOISE_RNG_DOMAIN),
        )
        logger.debug(
            f"Noise filled {params.width}x{params.height} at "
            f"{params.fill_percent}%: {ctx.cave_map.open_count} open cells"
        )


class SmoothingLayer(GenerationLayer):
    """Runs ``smooth_iterations`` majority-vote passes over the grid.

    The border is re-asserted afterwards so later stages can rely on it.
    """

    stage = GenerationStage.SMOOTHED

    def apply(self, ctx: GenerationContext) -> None:
        params = ctx.params
        cells = cellular_automata.smooth(
            ctx.cave_map.cells, params.smooth_iterations, params.wall_threshold
        )
        cellular_automata.enforce_solid_border(cells)
        ctx.cave_map.cells = cells
        logger.debug(
            f"Smoothed {params.smooth_iterations} passes: "
            f"{ctx.cave_map.open_count} open cells"
        )
