from __future__ import annotations

from typing import TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

TileCoord: TypeAlias = int  # Always integer cell position

# Grid coordinates - absolute cell positions on the cave map
WorldTileCoord: TypeAlias = TileCoord  # Example: x=5, y=3
WorldTilePos: TypeAlias = tuple[
    WorldTileCoord, WorldTileCoord
]  # Example: (5, 3) = cell 5,3 on the map

# World coordinates - continuous positions centred on the map midpoint
WorldCoord: TypeAlias = float  # Example: wx=-12.5
WorldPos: TypeAlias = tuple[WorldCoord, WorldCoord]  # Example: (-12.5, 3.5)

# Squared Euclidean distance between two cells (integer, no sqrt needed)
SquaredDistance: TypeAlias = int

# =============================================================================
# RANDOMNESS
# =============================================================================

# Seeds may be int or str; None asks for a fresh seed from system entropy.
RandomSeed: TypeAlias = int | str | None
