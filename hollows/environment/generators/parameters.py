"""Generation parameters for the cave generator."""

from __future__ import annotations

from dataclasses import dataclass, replace

from hollows import config
from hollows.types import RandomSeed

from .errors import InvalidParametersError


@dataclass(frozen=True)
class CaveParameters:
    """Immutable inputs of one generation run.

    Attributes:
        width: Map width in cells (>= 3).
        height: Map height in cells (>= 3).
        seed: Master seed. None picks a fresh one per run.
        fill_percent: Chance (0-100) that an interior cell starts solid.
        smooth_iterations: Number of cellular-automata passes (>= 0).
        wall_threshold: Solid-neighbour count (0-8) at which a cell is left
            unchanged; above it the cell becomes solid, below it open.
        min_room_size: Regions with fewer cells are removed (>= 1).
        corridor_radius: Radius of the disk stamped along corridors (>= 0).
    """

    width: int = config.CAVE_WIDTH
    height: int = config.CAVE_HEIGHT
    seed: RandomSeed = config.RANDOM_SEED
    fill_percent: int = config.CAVE_FILL_PERCENT
    smooth_iterations: int = config.CAVE_SMOOTH_ITERATIONS
    wall_threshold: int = config.CAVE_WALL_THRESHOLD
    min_room_size: int = config.CAVE_MIN_ROOM_SIZE
    corridor_radius: int = config.CAVE_CORRIDOR_RADIUS

    def validate(self) -> None:
        """Raise InvalidParametersError naming every problem found."""
        problems: list[str] = []

        for name in ("width", "height"):
            value = getattr(self, name)
            if not _is_int(value):
                problems.append(f"{name} must be an integer, got {value!r}")
            elif value < config.CAVE_MIN_DIMENSION:
                problems.append(
                    f"{name} must be at least {config.CAVE_MIN_DIMENSION} "
                    f"to hold a border, got {value}"
                )

        if self.seed is not None and not isinstance(self.seed, int | str):
            problems.append(f"seed must be int, str or None, got {self.seed!r}")

        _check_range(problems, "fill_percent", self.fill_percent, 0, 100)
        _check_range(problems, "smooth_iterations", self.smooth_iterations, 0, None)
        _check_range(problems, "wall_threshold", self.wall_threshold, 0, 8)
        _check_range(problems, "min_room_size", self.min_room_size, 1, None)
        _check_range(problems, "corridor_radius", self.corridor_radius, 0, None)

        if problems:
            raise InvalidParametersError("; ".join(problems))

    def with_seed(self, seed: RandomSeed) -> CaveParameters:
        """Return a copy with a different seed."""
        return replace(self, seed=seed)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_range(
    problems: list[str], name: str, value: object, low: int, high: int | None
) -> None:
    if not _is_int(value):
        problems.append(f"{name} must be an integer, got {value!r}")
        return
    assert isinstance(value, int)
    if value < low or (high is not None and value > high):
        bounds = f"{low}-{high}" if high is not None else f">= {low}"
        problems.append(f"{name} must be {bounds}, got {value}")
