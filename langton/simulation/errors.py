"""Errors — the two failure categories of a simulation run.

Configuration errors are caught at start-up before any simulation state
exists.  Invariant errors mean the engine reached a state valid input
can never produce, and carry enough context to reconstruct it.
"""

from __future__ import annotations


class LangtonError(Exception):
    """Base class for every error raised by the simulator."""


class ConfigError(LangtonError, ValueError):
    """A configuration value is out of range or unrecognised."""


class InvariantError(LangtonError, RuntimeError):
    """An internal invariant of the grid, ant or turn table was broken."""
