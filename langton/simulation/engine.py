"""SimulationEngine — the Langton's ant step loop.

Each step follows a fixed order:

1. Stop if the iteration budget is spent or the ant fell off the grid.
2. Read the colour under the ant.
3. Let the ant turn and move based on that colour.
4. If the ant left the grid, extend the grid on that side (remapping
   coordinates after a prepend) or latch ``terminated``.
5. Flip the cell the ant departed.

The cell flipped is always the departed one, never the arrival cell,
and on a terminating step nothing is flipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from langton.ant.ant import Ant
from langton.ant.direction import Direction
from langton.simulation.config import BoundaryPolicy, SimulationConfig
from langton.simulation.errors import InvariantError
from langton.world.grid import Grid

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Drives one ant over one grid.

    Attributes:
        config: Validated simulation configuration.
        grid: The cell store.  Built from ``config.initial_size`` unless
            one is passed in.
        ant: The agent, starting at the grid centre facing Up.
        iteration: Number of steps taken so far.
        terminated: Latched once the ant steps off the grid under
            ``BoundaryPolicy.TERMINATE``.
        last_position: Last in-bounds ``(row, col)`` of the ant.
        row_offset: Rows prepended so far.
        col_offset: Columns prepended so far.
    """

    config: SimulationConfig
    grid: Grid = field(default=None)  # type: ignore[assignment]
    ant: Ant = field(init=False)
    iteration: int = field(init=False, default=0)
    terminated: bool = field(init=False, default=False)
    last_position: tuple[int, int] = field(init=False)
    row_offset: int = field(init=False, default=0)
    col_offset: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        """Validate config, build the grid and place the ant."""
        self.config.validate()
        if self.grid is None:
            self.grid = Grid(self.config.initial_size)
        height, width = self.grid.dimensions()
        self.ant = Ant(row=height // 2, col=width // 2, facing=Direction.UP)
        self.last_position = self.ant.position

    @property
    def halted(self) -> bool:
        """Return True once no further step will be taken."""
        return self.terminated or self.iteration >= self.config.max_iterations

    @property
    def origin(self) -> tuple[int, int]:
        """Return where the initial grid's ``(0, 0)`` now sits."""
        return self.row_offset, self.col_offset

    def absolute_position(self) -> tuple[int, int]:
        """Return the ant position in the initial grid's coordinates."""
        return self.ant.row - self.row_offset, self.ant.col - self.col_offset

    def step(self) -> bool:
        """Advance the simulation by one step.

        Returns:
            True if the engine can take another step.
        """
        if self.halted:
            return False

        self.iteration += 1
        logger.debug(
            "running iteration %d, grid size: rows: %d, cols: %d",
            self.iteration,
            self.grid.height,
            self.grid.width,
        )

        old_row, old_col = self.ant.position
        colour = self.grid.get(old_row, old_col)
        self.ant.step(colour, 1)
        logger.debug("ant new position is at %s", self.ant)

        if not self.grid.contains(self.ant.row, self.ant.col):
            if self.config.boundary_policy is BoundaryPolicy.TERMINATE:
                logger.info(
                    "ant left the %dx%d grid at iteration %d, stopping",
                    self.grid.height,
                    self.grid.width,
                    self.iteration,
                )
                self.terminated = True
                return False
            old_row, old_col = self._extend(old_row, old_col)

        if not self.grid.contains(self.ant.row, self.ant.col):
            msg = (
                f"ant at {self.ant} still outside the "
                f"{self.grid.height}x{self.grid.width} grid after extension "
                f"at iteration {self.iteration}"
            )
            raise InvariantError(msg)

        logger.debug("flipping cell at row %d col %d", old_row, old_col)
        self.grid.flip(old_row, old_col)
        self.last_position = self.ant.position
        return not self.halted

    def run(self) -> Grid:
        """Step until the iteration budget is spent or the ant falls off.

        Returns:
            The final grid.
        """
        logger.info(
            "ant starting at %s on a %dx%d grid",
            self.ant,
            self.grid.height,
            self.grid.width,
        )
        while self.step():
            pass
        logger.info(
            "finished after %d iteration(s), grid %dx%d, %d black cell(s)",
            self.iteration,
            self.grid.height,
            self.grid.width,
            self.grid.black_cells(),
        )
        return self.grid

    def _extend(self, old_row: int, old_col: int) -> tuple[int, int]:
        """Grow the grid on the side the ant walked off.

        Returns:
            The departed cell's coordinates after any prepend shift.
        """
        if self.ant.col < 0:
            self.grid.prepend_column()
            self.ant.col = 0
            self.col_offset += 1
            old_col += 1
        elif self.ant.row < 0:
            self.grid.prepend_row()
            self.ant.row = 0
            self.row_offset += 1
            old_row += 1
        elif self.ant.col >= self.grid.width:
            self.grid.append_column()
        elif self.ant.row >= self.grid.height:
            self.grid.append_row()
        return old_row, old_col
