"""Cave generation for Hollows.

This package provides:
- CaveGenerator: Cellular-automata caves with every room connected
- PipelineGenerator: The layered pipeline CaveGenerator is built on

And the standalone building blocks the pipeline layers call:
- cellular_automata: Noise fill and smoothing
- regions: Flood-fill region extraction
- rooms: Region filtering and the Room model
- room_connector: Nearest-room graph connection
- corridors: Bresenham corridor carving
"""

from .base import BaseMapGenerator, GeneratedCave
from .cave import CaveGenerator, generate_with_retries
from .errors import (
    GenerationError,
    InvalidParametersError,
    NoRoomsError,
    UnconnectableRoomsError,
)
from .parameters import CaveParameters
from .pipeline import (
    GenerationContext,
    GenerationLayer,
    GenerationStage,
    PipelineGenerator,
    create_cave_pipeline,
    create_pipeline,
)
from .regions import Region
from .room_connector import Connection
from .rooms import Room

__all__ = [
    "BaseMapGenerator",
    "CaveGenerator",
    "CaveParameters",
    "Connection",
    "GeneratedCave",
    "GenerationContext",
    "GenerationError",
    "GenerationLayer",
    "GenerationStage",
    "InvalidParametersError",
    "NoRoomsError",
    "PipelineGenerator",
    "Region",
    "Room",
    "UnconnectableRoomsError",
    "create_cave_pipeline",
    "create_pipeline",
    "generate_with_retries",
]
