"""
Configuration constants.

Centralizes the default generation parameters and tuning values used
throughout the codebase. Organized by functional area for easy maintenance.
"""

from hollows.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# Fixed master seed for every run, e.g. "test-1". None draws a fresh seed.
RANDOM_SEED: RandomSeed = None

# =============================================================================
# CAVE GENERATION
# =============================================================================

# Map dimensions (cells). Both must be at least 3 so a border fits.
CAVE_WIDTH = 100
CAVE_HEIGHT = 100
CAVE_MIN_DIMENSION = 3

# Cellular automata
CAVE_FILL_PERCENT = 45  # Chance (0-100) that an interior cell starts solid
CAVE_SMOOTH_ITERATIONS = 5
CAVE_WALL_THRESHOLD = 4  # Solid-neighbour count that leaves a cell unchanged

# Rooms
CAVE_MIN_ROOM_SIZE = 50  # Regions below this many cells are filled/opened
CAVE_CORRIDOR_RADIUS = 3  # Radius of the disk stamped along each corridor

# Walk the finished map from the spawn and fail the run if a room is cut off
CAVE_VERIFY_CONNECTIVITY = True

# Retry policy for recoverable failures (no rooms, unconnectable graph)
CAVE_MAX_GENERATION_ATTEMPTS = 5

# =============================================================================
# DEBUG PREVIEW
# =============================================================================

ASCII_OPEN_GLYPH = "."
ASCII_SOLID_GLYPH = "#"
ASCII_SPAWN_GLYPH = "@"
