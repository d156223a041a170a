"""Grid — the two-colour cell store the ant walks on.

Cells are held in a 2D NumPy boolean array indexed ``[row, col]``
(``False`` = white, ``True`` = black).  The grid only ever grows: each
edge-extension call adds one white row or column on one side, and a
prepend shifts every existing index on that axis up by one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from langton.simulation.errors import ConfigError, InvariantError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

logger = logging.getLogger(__name__)


class Grid:
    """A rectangular, extensible two-colour bitmap.

    Attributes:
        cells: Boolean array of shape ``(height, width)``.
    """

    def __init__(self, size: int) -> None:
        """Create a square all-white grid.

        Args:
            size: Side length, at least 1.

        Raises:
            ConfigError: If ``size`` is not positive.
        """
        if size < 1:
            msg = f"grid size must be at least 1, got {size}"
            raise ConfigError(msg)
        self.cells: NDArray[np.bool_] = np.zeros((size, size), dtype=bool)

    @classmethod
    def from_array(cls, cells: ArrayLike) -> Grid:
        """Build a grid from an existing rectangular 2D array of colours.

        Raises:
            InvariantError: If ``cells`` is not a non-empty 2D rectangle.
        """
        try:
            data = np.array(cells, dtype=bool)
        except ValueError as exc:
            msg = f"grid rows must all have the same width: {exc}"
            raise InvariantError(msg) from exc
        if data.ndim != 2 or 0 in data.shape:
            msg = f"grid must be a non-empty 2D array, got shape {data.shape}"
            raise InvariantError(msg)
        grid = cls.__new__(cls)
        grid.cells = data
        return grid

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    # -- Cell access --

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    def dimensions(self) -> tuple[int, int]:
        """Return ``(height, width)``."""
        return self.height, self.width

    def contains(self, row: int, col: int) -> bool:
        """Return True if ``(row, col)`` addresses a cell of the grid."""
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> bool:
        """Return the colour at ``(row, col)`` (``True`` = black).

        Raises:
            InvariantError: If the coordinates are out of bounds.
        """
        self._check(row, col)
        return bool(self.cells[row, col])

    def flip(self, row: int, col: int) -> None:
        """Invert the colour at ``(row, col)``.

        Raises:
            InvariantError: If the coordinates are out of bounds.
        """
        self._check(row, col)
        self.cells[row, col] = not self.cells[row, col]

    def _check(self, row: int, col: int) -> None:
        # Negative indices would silently wrap in NumPy
        if not self.contains(row, col):
            msg = f"({row}, {col}) out of bounds for {self.height}x{self.width} grid"
            raise InvariantError(msg)

    # -- Edge extension --

    def prepend_row(self) -> None:
        """Add a white row above row 0; existing rows shift down by one."""
        self.cells = np.vstack((np.zeros((1, self.width), dtype=bool), self.cells))
        logger.debug("added row on top, grid now %dx%d", self.height, self.width)

    def append_row(self) -> None:
        """Add a white row below the last row."""
        self.cells = np.vstack((self.cells, np.zeros((1, self.width), dtype=bool)))
        logger.debug("added row on bottom, grid now %dx%d", self.height, self.width)

    def prepend_column(self) -> None:
        """Add a white column left of column 0; existing columns shift right."""
        self.cells = np.hstack((np.zeros((self.height, 1), dtype=bool), self.cells))
        logger.debug("added column on left, grid now %dx%d", self.height, self.width)

    def append_column(self) -> None:
        """Add a white column right of the last column."""
        self.cells = np.hstack((self.cells, np.zeros((self.height, 1), dtype=bool)))
        logger.debug("added column on right, grid now %dx%d", self.height, self.width)

    # -- Queries --

    def black_cells(self) -> int:
        """Return the number of black cells."""
        return int(np.count_nonzero(self.cells))

    def bounding_box(self) -> tuple[int, int, int, int] | None:
        """Return ``(min_row, min_col, max_row, max_col)`` of black cells.

        Returns:
            The inclusive bounding box, or None if every cell is white.
        """
        black = np.argwhere(self.cells)
        if black.size == 0:
            return None
        (r0, c0), (r1, c1) = black.min(axis=0), black.max(axis=0)
        return int(r0), int(c0), int(r1), int(c1)

    def to_array(self) -> NDArray[np.bool_]:
        """Return a copy of the cell store."""
        return self.cells.copy()

    def render(self) -> str:
        """Render each row as ``"1 "`` / ``"0 "`` cells followed by a newline."""
        return "".join(
            "".join("1 " if cell else "0 " for cell in row) + "\n"
            for row in self.cells
        )
