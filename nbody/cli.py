"""Command line entry point: build a torus of bodies, simulate and time it."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Sequence

from nbody.simulation import Simulation, initialize_bodies
from nbody.threaded import run_threaded


def _time_step(text: str) -> int:
    """Parse a time step; like the original program it keeps only the whole part."""
    return int(float(text))


_time_step.__name__ = "time step"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the simulation command."""
    parser = argparse.ArgumentParser(
        prog="nbody",
        description="Gravitational N-body simulation on a torus of bodies.",
    )
    parser.add_argument("bodies", type=int, help="number of bodies")
    parser.add_argument("dt", type=_time_step, help="length of one time step")
    parser.add_argument("steps", type=int, help="number of steps to simulate")
    parser.add_argument(
        "threads",
        type=int,
        nargs="?",
        default=None,
        help="number of worker threads; omitted runs sequentially",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for choosing body kinds"
    )
    parser.add_argument(
        "--positions",
        action="store_true",
        help="print the final position of every body",
    )
    return parser


def _print_positions(simulation: Simulation) -> None:
    print()
    print("=== Last Positions of Bodies ===")
    print(f"{'ID':<6} {'X':<15} {'Y':<15} {'Z':<15}")
    for index, (x, y, z) in enumerate(simulation.positions()):
        print(f"{index:<6d} {x:<15.6f} {y:<15.6f} {z:<15.6f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation command and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.steps < 0:
        parser.error("number of steps must not be negative")
    if args.threads is not None and args.threads < 1:
        parser.error("number of threads must be at least 1")

    try:
        bodies = initialize_bodies(args.bodies, random.Random(args.seed))
    except ValueError as exc:
        parser.error(str(exc))
    simulation = Simulation(bodies, args.dt)

    started = time.perf_counter()
    if args.threads is None:
        simulation.run(args.steps)
    else:
        run_threaded(simulation, args.steps, args.threads)
    elapsed = time.perf_counter() - started

    print(f"Tiempo en segundos: {elapsed:f}")
    if args.positions:
        _print_positions(simulation)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())