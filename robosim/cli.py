"""Command that loads a world from a configuration file and runs it headless."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from robosim.engine import SimulationEngine
from robosim.environment import Environment
from robosim.settings import get_config_path, set_config_path

DEFAULT_CONFIG = "examples/example1.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="robosim", description="Run a robot world for a number of steps."
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG,
        help=f"configuration file (default: {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "--steps", type=int, default=100, help="number of steps to run (default: 100)"
    )
    return parser


def _describe(engine: SimulationEngine) -> list[str]:
    lines = [
        f"Robot {r.id} {r.position[0]:.2f} {r.position[1]:.2f} {r.orientation:.2f}"
        for r in engine.robots
    ]
    lines += [
        f"Obstacle {o.id} {o.position[0]:.2f} {o.position[1]:.2f} {o.size:.2f}"
        for o in engine.obstacles
    ]
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration, run the steps and print the final world."""
    args = _build_parser().parse_args(argv)
    if args.steps < 0:
        print("--steps must not be negative", file=sys.stderr)
        return 2

    set_config_path(args.config)
    environment = Environment()
    path = get_config_path()
    try:
        environment.load_configuration(path)
    except OSError:
        print(f"Unable to open file: {path}", file=sys.stderr)
        return 1

    engine = SimulationEngine(environment)
    engine.start()
    for _ in range(args.steps):
        engine.step()
    engine.stop()

    for line in _describe(engine):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())