"""Pipeline generator that orchestrates layer-based cave generation.

The PipelineGenerator runs a sequence of GenerationLayers, each performing
one stage transition on a shared GenerationContext.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hollows.environment.generators.base import BaseMapGenerator, GeneratedCave
from hollows.environment.generators.parameters import CaveParameters
from hollows.util.performance import measure_block

from .context import GenerationContext

if TYPE_CHECKING:
    from .layer import GenerationLayer

logger = logging.getLogger(__name__)


class PipelineGenerator(BaseMapGenerator):
    """Map generator that runs layers sequentially on a shared context.

    Every call to generate() creates a new GenerationContext, so no state
    carries over between runs.

    Example:
        generator = PipelineGenerator(
            layers=[
                NoiseLayer(),
                SmoothingLayer(),
                RegionFilterLayer(),
                RoomConnectionLayer(),
                SpawnPointLayer(),
            ],
            params=CaveParameters(width=80, height=60, seed="test-1"),
        )
        cave = generator.generate()

    Attributes:
        layers: List of GenerationLayer instances to apply.
        params: Parameters shared by every layer.
    """

    def __init__(
        self, layers: list[GenerationLayer], params: CaveParameters
    ) -> None:
        """Initialize the pipeline generator.

        Args:
            layers: GenerationLayer instances, one per stage, in stage order.
            params: Parameters of the runs this pipeline performs.
        """
        super().__init__(params.width, params.height)
        self.layers = layers
        self.params = params

    def generate(self) -> GeneratedCave:
        """Generate a cave by running all layers in sequence.

        Returns:
            The finished cave.

        Raises:
            InvalidParametersError: If the parameters fail validation.
            NoRoomsError, UnconnectableRoomsError: If generation fails.
            RuntimeError: If the layers are not one per stage, in order.
        """
        self.params.validate()
        ctx = GenerationContext.create_empty(self.params)

        for layer in self.layers:
            ctx.require_next_stage(layer.stage)
            with measure_block(f"cavegen.{layer.stage.name.lower()}"):
                layer.apply(ctx)
            ctx.stage = layer.stage

        logger.debug(f"Random draws by domain: {ctx.rng.draw_counts()}")
        return ctx.to_generated_cave()
