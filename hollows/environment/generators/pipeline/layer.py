"""Abstract base class for generation layers.

Each layer in the pipeline implements the GenerationLayer interface and
performs exactly one transition of the generation state machine on the
shared GenerationContext.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .context import GenerationContext, GenerationStage


class GenerationLayer(ABC):
    """Abstract base class for cave generation layers.

    Layers are applied sequentially by the PipelineGenerator. Each layer
    receives a GenerationContext and modifies it in place. The pipeline
    records ``stage`` on the context once ``apply()`` returns.

    Subclasses must set ``stage`` and implement the apply() method.
    """

    stage: ClassVar[GenerationStage]

    @abstractmethod
    def apply(self, ctx: GenerationContext) -> None:
        """Apply this layer's generation logic to the context.

        This method should modify the context in place. It may:
        - Modify cells (ctx.cave_map)
        - Build or link rooms (ctx.rooms, ctx.connections)
        - Draw from ctx.rng streams for random decisions

        Args:
            ctx: The generation context to modify.
        """
        raise NotImplementedError
