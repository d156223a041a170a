"""Shared fixtures for the Langton's ant test suite."""

from __future__ import annotations

import pytest

from langton.simulation.config import BoundaryPolicy, SimulationConfig
from langton.world.grid import Grid


@pytest.fixture
def small_grid() -> Grid:
    """A blank 4x4 grid for fast tests."""
    return Grid(4)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig()


def make_config(
    size: int = 10,
    iterations: int = 10,
    policy: BoundaryPolicy = BoundaryPolicy.EXTEND,
) -> SimulationConfig:
    """Build a config with the given size, budget and policy."""
    return SimulationConfig(
        initial_size=size,
        max_iterations=iterations,
        boundary_policy=policy,
    )


@pytest.fixture
def config_factory():
    """Return ``make_config`` so tests can build configs inline."""
    return make_config
