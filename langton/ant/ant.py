"""Ant — the automaton's single agent.

The ant knows only its position and facing.  It never reads or writes
the grid: the engine hands it the colour under it and flips the
departed cell itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from langton.ant.direction import Direction, resolve, turn_for_colour

logger = logging.getLogger(__name__)


@dataclass
class Ant:
    """A Langton's ant.

    Attributes:
        row: Current row in the grid (may leave the grid for one step
            until the engine extends it or terminates).
        col: Current column in the grid.
        facing: Direction the ant points.
    """

    row: int
    col: int
    facing: Direction = Direction.UP

    def __str__(self) -> str:
        return f"row: {self.row}, column: {self.col} and pointed {self.facing}"

    @property
    def position(self) -> tuple[int, int]:
        """Return ``(row, col)``."""
        return self.row, self.col

    def step(self, colour_under_ant: bool, stride: int = 1) -> None:
        """Turn according to the colour underfoot and move forward.

        Args:
            colour_under_ant: ``True`` for black, ``False`` for white.
            stride: Number of cells to move along the new facing.
        """
        turn = turn_for_colour(colour_under_ant)
        action, facing = resolve(self.facing, turn)
        logger.debug("moving ant at %s: turn %s, %d step(s)", self, turn.value, stride)

        # Single assignment so no half-moved state is ever visible
        self.row, self.col, self.facing = (
            self.row + action.d_row * stride,
            self.col + action.d_col * stride,
            facing,
        )
