"""Direction algebra — facings, turns, and the turn table.

The ant never does arithmetic on directions.  Every turn is a lookup in
``TURN_TABLE``, which maps ``(facing, turn)`` to the grid displacement
to apply and the facing to adopt:

============  =====  ========  ==========
facing        turn   action    new facing
============  =====  ========  ==========
Up            Right  INC_COL   Right
Up            Left   DEC_COL   Left
Down          Right  DEC_COL   Left
Down          Left   INC_COL   Right
Right         Right  INC_ROW   Down
Right         Left   DEC_ROW   Up
Left          Right  DEC_ROW   Up
Left          Left   INC_ROW   Down
============  =====  ========  ==========
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from langton.simulation.errors import InvariantError


class Direction(Enum):
    """Cardinal facing of the ant; values are the display names."""

    UP = "Up"
    DOWN = "Down"
    RIGHT = "Right"
    LEFT = "Left"

    def __str__(self) -> str:
        return self.value


class Turn(Enum):
    """A 90 degree rotation relative to the current facing."""

    LEFT = "Left"
    RIGHT = "Right"


class GridAction(Enum):
    """Unit displacement applied to ``(row, col)`` after a turn."""

    INC_ROW = (1, 0)
    DEC_ROW = (-1, 0)
    INC_COL = (0, 1)
    DEC_COL = (0, -1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]


TURN_TABLE: MappingProxyType[tuple[Direction, Turn], tuple[GridAction, Direction]] = (
    MappingProxyType(
        {
            (Direction.UP, Turn.RIGHT): (GridAction.INC_COL, Direction.RIGHT),
            (Direction.UP, Turn.LEFT): (GridAction.DEC_COL, Direction.LEFT),
            (Direction.DOWN, Turn.RIGHT): (GridAction.DEC_COL, Direction.LEFT),
            (Direction.DOWN, Turn.LEFT): (GridAction.INC_COL, Direction.RIGHT),
            (Direction.RIGHT, Turn.RIGHT): (GridAction.INC_ROW, Direction.DOWN),
            (Direction.RIGHT, Turn.LEFT): (GridAction.DEC_ROW, Direction.UP),
            (Direction.LEFT, Turn.RIGHT): (GridAction.DEC_ROW, Direction.UP),
            (Direction.LEFT, Turn.LEFT): (GridAction.INC_ROW, Direction.DOWN),
        },
    )
)


def resolve(current: Direction, turn: Turn) -> tuple[GridAction, Direction]:
    """Look up the displacement and new facing for a turn.

    Args:
        current: Facing before the turn.
        turn: Requested rotation.

    Returns:
        ``(action, new_facing)`` from ``TURN_TABLE``.

    Raises:
        InvariantError: If the pair has no table entry.
    """
    try:
        return TURN_TABLE[(current, turn)]
    except KeyError:
        msg = f"no turn table entry for facing {current!s} and turn {turn!s}"
        raise InvariantError(msg) from None


def turn_for_colour(black: bool) -> Turn:
    """Langton's rule: turn left on black, right on white."""
    return Turn.LEFT if black else Turn.RIGHT
