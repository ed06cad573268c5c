#!/usr/bin/env python3
"""
Command-line entry point for torus_life.

Usage: torus-life <filename> <iterations> <verbosity>

Loads a grid from a configuration file, runs it for the given number of
generations and prints nothing, the final grid, or every generation.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config.loader import load_grid
from .config.settings import SimulationSettings
from .core.simulator import Cadence, Simulator
from .errors import ConfigLoadError
from .render.console import ConsoleRenderer

logger = logging.getLogger(__name__)

EPILOG = """\
  <filename>   = path to the configuration file
  <iterations> = the number of steps to run the simulation
  <verbosity>  = 0 (no output),
                 1 (final output), or
                 2 (animated output)
"""


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def _verbosity(value: str) -> Cadence:
    try:
        return Cadence(int(value))
    except ValueError:
        raise argparse.ArgumentTypeError("verbosity must be 0, 1, or 2") from None


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the three positional arguments."""
    parser = argparse.ArgumentParser(
        prog="torus-life",
        description="Simulate Conway's Game of Life on a toroidal grid.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("filename", help="Path to the configuration file")
    parser.add_argument("iterations", type=_non_negative_int, help="Number of steps to run")
    parser.add_argument("verbosity", type=_verbosity, help="0, 1, or 2")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the simulator from the command line.

    Args:
        argv: Arguments without the program name (sys.argv[1:] if None)

    Returns:
        Process exit status (argparse exits with 2 on invalid arguments)
    """
    args = build_parser().parse_args(argv)
    settings = SimulationSettings.from_env()

    logging.basicConfig(level=settings.log_level, stream=sys.stderr,
                        format='%(asctime)s - %(levelname)s - %(message)s')
    logger.debug(f"Settings: {settings!r}")

    try:
        grid = load_grid(args.filename)
    except ConfigLoadError as e:
        print(e, file=sys.stderr)
        return 1

    renderer = ConsoleRenderer(clear_screen=settings.clear_screen)
    simulator = Simulator(grid, renderer=renderer, frame_delay=settings.frame_delay)
    simulator.run(args.iterations, args.verbosity)
    return 0


if __name__ == "__main__":
    sys.exit(main())
