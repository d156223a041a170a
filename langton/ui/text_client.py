"""Plain-text output of a finished simulation.

The renderer borrows the engine's grid read-only once the run is over;
it is a debugging aid, not a display protocol.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from langton.simulation.engine import SimulationEngine

HEADER = "End grid:"


class TextRenderer:
    """Writes the end grid of a SimulationEngine to a text stream.

    Attributes:
        engine: The simulation whose grid is rendered.
        stream: Destination, stdout unless given.
    """

    def __init__(self, engine: SimulationEngine, stream: TextIO | None = None) -> None:
        self.engine = engine
        self.stream = stream if stream is not None else sys.stdout

    def render(self) -> str:
        """Return the header line followed by the rendered grid."""
        return f"{HEADER}\n{self.engine.grid.render()}"

    def show(self) -> None:
        """Write the rendered end grid to the stream."""
        self.stream.write(self.render())
        self.stream.flush()
