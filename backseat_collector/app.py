"""Command that sets up a world with the ping brain and runs it."""

from __future__ import annotations

import argparse
import itertools
from typing import Sequence

from . import ping
from .runtime import BrainEngine, BrainRunner, run_brains
from .world import Drone, World


def spawn_entities(world: World, engine: BrainEngine) -> int:
    """Spawn the ping brain and one drone it controls; return the brain entity."""
    brain = world.spawn_brain(BrainRunner(engine, ping.module))
    world.spawn_drone(Drone(), brain)
    return brain


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="backseat-collector", description="Run drone brains."
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="number of updates to run (default: until interrupted)",
    )
    args = parser.parse_args(argv)
    if args.ticks is not None and args.ticks < 0:
        parser.error("--ticks must not be negative")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    world = World()
    engine = BrainEngine()
    spawn_entities(world, engine)
    ticks = itertools.count() if args.ticks is None else range(args.ticks)
    try:
        for _ in ticks:
            run_brains(world)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())