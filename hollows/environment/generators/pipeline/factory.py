"""Factory functions for creating pre-configured pipelines.

These functions provide convenient ways to create common pipeline
configurations without needing to manually assemble layers.

Currently implemented:
- "cave": Cellular-automata cave with connected rooms
"""

from __future__ import annotations

from hollows import config
from hollows.environment.generators.parameters import CaveParameters

from .layers import (
    NoiseLayer,
    RegionFilterLayer,
    RoomConnectionLayer,
    SmoothingLayer,
    SpawnPointLayer,
)
from .pipeline import PipelineGenerator


def create_pipeline(name: str, params: CaveParameters) -> PipelineGenerator:
    """Create a pre-configured pipeline by name.

    Available pipelines:
    - "cave": Cellular-automata cave with every room reachable

    Args:
        name: Name of the pipeline configuration to use.
        params: Generation parameters.

    Returns:
        A configured PipelineGenerator ready to generate maps.

    Raises:
        ValueError: If the pipeline name is not recognized.
    """
    if name == "cave":
        return create_cave_pipeline(params)
    raise ValueError(f"Unknown pipeline name: {name!r}")


def create_cave_pipeline(
    params: CaveParameters, verify_connectivity: bool | None = None
) -> PipelineGenerator:
    """Create the cave pipeline.

    The cave pipeline generates:
    1. Border-enclosed random noise (NoiseLayer)
    2. Cellular-automata smoothing (SmoothingLayer)
    3. Region filtering and room construction (RegionFilterLayer)
    4. Corridors linking every room to the main room (RoomConnectionLayer)
    5. Spawn selection and map sealing (SpawnPointLayer)

    Args:
        params: Generation parameters.
        verify_connectivity: Walk the finished map from the spawn to check
            every room is reachable. If None, uses
            config.CAVE_VERIFY_CONNECTIVITY.

    Returns:
        A configured PipelineGenerator.
    """
    if verify_connectivity is None:
        verify_connectivity = config.CAVE_VERIFY_CONNECTIVITY

    layers = [
        # 1. Random noise with a solid border
        NoiseLayer(),
        # 2. Majority-vote smoothing into cave shapes
        SmoothingLayer(),
        # 3. Drop undersized regions, build rooms
        RegionFilterLayer(),
        # 4. Carve corridors until everything is reachable
        RoomConnectionLayer(),
        # 5. Spawn point, then freeze the grid
        SpawnPointLayer(verify_connectivity=verify_connectivity),
    ]

    return PipelineGenerator(layers=layers, params=params)
