"""Config — simulation parameters and their YAML loader.

The defaults match the command line defaults, so a run with no config
file and no flags is a 10x10 grid, 10 iterations, extending policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from langton.simulation.errors import ConfigError

LOG_LEVELS = ("info", "debug", "fatal")


class BoundaryPolicy(Enum):
    """What the engine does when the ant steps off the grid."""

    EXTEND = "extend"
    TERMINATE = "terminate"

    @classmethod
    def parse(cls, value: str | BoundaryPolicy) -> BoundaryPolicy:
        """Convert a policy name (case-insensitive) to a member.

        Raises:
            ConfigError: If the name is not a known policy.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(p.value for p in cls)
            msg = f"invalid boundary policy {value!r}. can be one of {names}"
            raise ConfigError(msg) from None


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        initial_size: Side length of the initial square grid.
        max_iterations: Number of steps to run.
        boundary_policy: Extend the grid or stop when the ant leaves it.
        log_level: Verbosity name, one of ``LOG_LEVELS``.
    """

    initial_size: int = 10
    max_iterations: int = 10
    boundary_policy: BoundaryPolicy = BoundaryPolicy.EXTEND
    log_level: str = "info"

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated, validated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ConfigError: If a value is invalid.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            msg = f"{path}: expected a mapping at the top level"
            raise ConfigError(msg)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SimulationConfig:
        """Build a config from a plain mapping, applying defaults."""
        config = cls(
            initial_size=data.get("initial_size", cls.initial_size),
            max_iterations=data.get("max_iterations", cls.max_iterations),
            boundary_policy=BoundaryPolicy.parse(
                data.get("boundary_policy", cls.boundary_policy),
            ),
            log_level=str(data.get("log_level", cls.log_level)).lower(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Check every field.

        Raises:
            ConfigError: On the first invalid value.
        """
        if not isinstance(self.initial_size, int) or self.initial_size < 1:
            msg = f"initial size must be a positive integer, got {self.initial_size!r}"
            raise ConfigError(msg)
        if not isinstance(self.max_iterations, int) or self.max_iterations < 0:
            msg = (
                "iteration count must be a non-negative integer, "
                f"got {self.max_iterations!r}"
            )
            raise ConfigError(msg)
        if self.log_level not in LOG_LEVELS:
            msg = (
                f"invalid debug level {self.log_level}. "
                f"can be one of {', '.join(LOG_LEVELS)}"
            )
            raise ConfigError(msg)
        self.boundary_policy = BoundaryPolicy.parse(self.boundary_policy)
