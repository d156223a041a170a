"""Entry point for ``python -m langton``.

Parses the command line, runs one simulation and prints the end grid.
Flags given explicitly override values from ``--config``.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

import yaml

from langton.simulation.config import LOG_LEVELS, BoundaryPolicy, SimulationConfig
from langton.simulation.engine import SimulationEngine
from langton.simulation.errors import ConfigError, InvariantError
from langton.ui.text_client import TextRenderer

logger = logging.getLogger("langton")

_LEVELS: dict[str, int] = {
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "fatal": logging.CRITICAL,
}


def _positive_int(text: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        value = int(text)
    except ValueError:
        msg = f"invalid int value: {text!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if value < 1:
        msg = f"must be a positive integer, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_parser() -> argparse.ArgumentParser:
    """Return the command line parser."""
    parser = argparse.ArgumentParser(
        prog="langton",
        description="Langton's ant simulator",
    )
    parser.add_argument(
        "-s",
        dest="size",
        type=_positive_int,
        default=None,
        help="Initial size of grid (default: 10)",
    )
    parser.add_argument(
        "-n",
        dest="iterations",
        type=_positive_int,
        default=None,
        help="Number of iterations to run (default: 10)",
    )
    parser.add_argument(
        "-v",
        dest="verbosity",
        choices=LOG_LEVELS,
        default=None,
        help="Log level <info|debug|fatal> (default: info)",
    )
    parser.add_argument(
        "-p",
        "--policy",
        choices=[p.value for p in BoundaryPolicy],
        default=None,
        help="What to do when the ant leaves the grid (default: extend)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file",
    )
    return parser


def configure_logging(level_name: str) -> None:
    """Send the package's log records to stdout at the named verbosity."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(_LEVELS[level_name])
    logger.propagate = False


def load_config(args: argparse.Namespace) -> SimulationConfig:
    """Merge the optional YAML file with explicit flags.

    The command line always runs at least one iteration, whatever the
    file says.

    Raises:
        ConfigError: If the merged configuration is invalid.
    """
    config = SimulationConfig.from_yaml(args.config) if args.config else SimulationConfig()
    if args.size is not None:
        config.initial_size = args.size
    if args.iterations is not None:
        config.max_iterations = args.iterations
    if args.verbosity is not None:
        config.log_level = args.verbosity
    if args.policy is not None:
        config.boundary_policy = BoundaryPolicy.parse(args.policy)
    config.validate()
    if config.max_iterations < 1:
        msg = f"iteration count must be at least 1, got {config.max_iterations}"
        raise ConfigError(msg)
    return config


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, run the simulation, print the end grid.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except (ConfigError, OSError, yaml.YAMLError) as exc:
        parser.error(str(exc))

    configure_logging(config.log_level)
    logger.info("Grid size: %d", config.initial_size)

    engine = SimulationEngine(config=config)
    try:
        engine.run()
    except InvariantError:
        logger.critical(
            "simulation aborted at iteration %d with ant at %s on a %dx%d grid",
            engine.iteration,
            engine.ant,
            engine.grid.height,
            engine.grid.width,
            exc_info=True,
        )
        return 1

    TextRenderer(engine).show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
