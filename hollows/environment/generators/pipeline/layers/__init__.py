"""Generation layers for the cave pipeline.

One layer per transition of the generation state machine:
- Terrain layers: Random noise, then cellular-automata smoothing
- Room layers: Region filtering, then room graph connection
- Spawn layer: Spawn selection and final sealing of the map
"""

from .rooms import RegionFilterLayer, RoomConnectionLayer
from .spawn import SpawnPointLayer
from .terrain import NoiseLayer, SmoothingLayer

__all__ = [
    "NoiseLayer",
    "RegionFilterLayer",
    "RoomConnectionLayer",
    "SmoothingLayer",
    "SpawnPointLayer",
]
