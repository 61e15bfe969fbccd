"""Cell state of a single grid square."""

from enum import Enum


class CellState(Enum):
    """State of one cell on a board.

    Transitions are one-directional: EMPTY -> MISS and SHIP -> HIT.
    HIT and MISS are terminal.
    """

    EMPTY = "empty"
    SHIP = "ship"
    HIT = "hit"
    MISS = "miss"

    @property
    def is_resolved(self) -> bool:
        """True if the cell has already been fired upon."""
        return self in (CellState.HIT, CellState.MISS)
