#!/usr/bin/env python3
"""Generate a cave and print it as text, optionally benchmarking each stage."""

from __future__ import annotations

import argparse
import logging
import sys

from hollows import config
from hollows.environment.generators import (
    CaveGenerator,
    CaveParameters,
    GenerationError,
)
from hollows.util import performance


def _parse_seed(value: str) -> int | str:
    """Treat purely numeric seeds as integers, like the in-game seed entry."""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--width", type=int, default=config.CAVE_WIDTH)
    parser.add_argument("--height", type=int, default=config.CAVE_HEIGHT)
    parser.add_argument("--seed", type=_parse_seed, default=config.RANDOM_SEED)
    parser.add_argument("--fill", type=int, default=config.CAVE_FILL_PERCENT)
    parser.add_argument(
        "--iterations", type=int, default=config.CAVE_SMOOTH_ITERATIONS
    )
    parser.add_argument("--threshold", type=int, default=config.CAVE_WALL_THRESHOLD)
    parser.add_argument("--min-room", type=int, default=config.CAVE_MIN_ROOM_SIZE)
    parser.add_argument("--radius", type=int, default=config.CAVE_CORRIDOR_RADIUS)
    parser.add_argument(
        "--runs",
        type=int,
        default=1,
        help="Generate this many caves (seed suffixed with the run number)",
    )
    parser.add_argument(
        "--timings", action="store_true", help="Print per-stage timings"
    )
    parser.add_argument("--quiet", action="store_true", help="Do not print the map")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.timings:
        performance.enable_timing()

    params = CaveParameters(
        width=args.width,
        height=args.height,
        seed=args.seed,
        fill_percent=args.fill,
        smooth_iterations=args.iterations,
        wall_threshold=args.threshold,
        min_room_size=args.min_room,
        corridor_radius=args.radius,
    )

    failures = 0
    for run in range(args.runs):
        run_params = params
        if args.runs > 1 and params.seed is not None:
            run_params = params.with_seed(f"{params.seed}:{run}")
        try:
            cave = CaveGenerator(run_params).generate()
        except GenerationError as e:
            failures += 1
            print(f"Generation failed: {e}", file=sys.stderr)
            continue

        if not args.quiet:
            print(cave.cave_map.to_ascii({cave.spawn_cell: config.ASCII_SPAWN_GLYPH}))
            print()

    if args.timings:
        print(performance.timing_report("cavegen."))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
