"""Pipeline-based cave generation.

This package provides a layered architecture for map generation. Each layer
performs one stage of the generation state machine on a shared
GenerationContext, and the pipeline outputs a GeneratedCave.

Example usage:
    from hollows.environment.generators.pipeline import create_pipeline

    generator = create_pipeline("cave", CaveParameters(seed="test-1"))
    cave = generator.generate()
"""

from .context import GenerationContext, GenerationStage
from .factory import create_cave_pipeline, create_pipeline
from .layer import GenerationLayer
from .layers import (
    NoiseLayer,
    RegionFilterLayer,
    RoomConnectionLayer,
    SmoothingLayer,
    SpawnPointLayer,
)
from .pipeline import PipelineGenerator

__all__ = [
    "GenerationContext",
    "GenerationLayer",
    "GenerationStage",
    "NoiseLayer",
    "PipelineGenerator",
    "RegionFilterLayer",
    "RoomConnectionLayer",
    "SmoothingLayer",
    "SpawnPointLayer",
    "create_cave_pipeline",
    "create_pipeline",
]
