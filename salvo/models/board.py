"""Board data model: one side's grid and fleet.

The board owns an N x N grid of cell states and the set of coordinates
occupied by ship parts. Placement only ever adds ship parts and firing only
ever changes cell states, so the ship-part set is the authoritative record
used for win detection.
"""

import logging
from typing import List, Tuple

from ..utils import BOARD_SIZE, MAX_PLACEMENT_ATTEMPTS, GameRNG
from .cell import CellState

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


class PlacementError(ValueError):
    """Raised when a ship cannot be placed on a board."""


def run_cells(row: int, col: int, size: int, horizontal: bool) -> List[Coordinate]:
    """Return the coordinates a ship run would cover.

    Args:
        row: Starting row
        col: Starting column
        size: Ship length
        horizontal: True to extend along the row, False along the column

    Returns:
        List of (row, col) tuples, starting cell first
    """
    if horizontal:
        return [(row, col + i) for i in range(size)]
    return [(row + i, col) for i in range(size)]


class Board:
    """A single player's grid with hidden ships.

    Each player owns exactly one Board. The opponent fires on it through
    fire(); the presentation layer reads it through cell() and snapshot().
    """

    def __init__(self, size: int = BOARD_SIZE):
        """Initialize an empty size x size board with no ships.

        Args:
            size: Side length of the square grid
        """
        if size < 1:
            raise ValueError(f"Invalid board size: {size} (must be >= 1)")
        self.size = size
        self.grid = [[CellState.EMPTY for _ in range(size)] for _ in range(size)]
        self._ship_parts: set[Coordinate] = set()

    @property
    def ship_parts(self) -> frozenset:
        """Coordinates occupied by ship parts (read-only view)."""
        return frozenset(self._ship_parts)

    def in_bounds(self, row: int, col: int) -> bool:
        """Return True if (row, col) lies on the grid."""
        return 0 <= row < self.size and 0 <= col < self.size

    def can_place(self, row: int, col: int, size: int, horizontal: bool) -> bool:
        """Return True if a ship of *size* fits at (*row*, *col*).

        The whole run must lie on the grid and every covered cell must be
        EMPTY. Has no side effects.
        """
        if size < 1:
            return False
        for r, c in run_cells(row, col, size, horizontal):
            if not self.in_bounds(r, c):
                return False
            if self.grid[r][c] != CellState.EMPTY:
                return False
        return True

    def place_ship(self, size: int, rng: GameRNG) -> List[Coordinate]:
        """Place a ship of *size* at a random free position.

        Random (row, col, orientation) trials are drawn from *rng* until one
        fits. After MAX_PLACEMENT_ATTEMPTS failed trials, every valid position
        is enumerated and one is picked at random, so the call always
        terminates.

        Args:
            size: Ship length (1..board size)
            rng: Randomness source

        Returns:
            Coordinates occupied by the new ship

        Raises:
            PlacementError: If size is out of range or no position is free
        """
        if not (1 <= size <= self.size):
            raise PlacementError(
                f"Invalid ship size: {size} (must be 1-{self.size})"
            )

        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            row = rng.randrange(self.size)
            col = rng.randrange(self.size)
            horizontal = rng.coin_flip()
            if self.can_place(row, col, size, horizontal):
                return self._mark_ship(row, col, size, horizontal)

        candidates = self.valid_placements(size)
        if not candidates:
            raise PlacementError(f"No room left for a ship of size {size}")

        logger.debug(
            "Random placement gave up after %d attempts, choosing from %d positions",
            MAX_PLACEMENT_ATTEMPTS,
            len(candidates),
        )
        row, col, horizontal = rng.choice(candidates)
        return self._mark_ship(row, col, size, horizontal)

    def place_ship_at(
        self, row: int, col: int, size: int, horizontal: bool
    ) -> List[Coordinate]:
        """Place a ship of *size* at an exact position.

        Raises:
            PlacementError: If the ship does not fit there
        """
        if not self.can_place(row, col, size, horizontal):
            orientation = "horizontal" if horizontal else "vertical"
            raise PlacementError(
                f"Cannot place ship of size {size} at ({row}, {col}) {orientation}"
            )
        return self._mark_ship(row, col, size, horizontal)

    def valid_placements(self, size: int) -> List[Tuple[int, int, bool]]:
        """List every (row, col, horizontal) where a ship of *size* fits."""
        return [
            (row, col, horizontal)
            for row in range(self.size)
            for col in range(self.size)
            for horizontal in (True, False)
            if self.can_place(row, col, size, horizontal)
        ]

    def _mark_ship(
        self, row: int, col: int, size: int, horizontal: bool
    ) -> List[Coordinate]:
        """Write ship cells into the grid and record them as ship parts."""
        cells = run_cells(row, col, size, horizontal)
        for r, c in cells:
            self.grid[r][c] = CellState.SHIP
            self._ship_parts.add((r, c))
        logger.debug(
            "Placed ship of size %d at (%d, %d) %s",
            size,
            row,
            col,
            "horizontal" if horizontal else "vertical",
        )
        return cells

    def fire(self, row: int, col: int) -> CellState:
        """Resolve a shot at (*row*, *col*).

        Returns:
            CellState.HIT if a ship part was struck, CellState.MISS otherwise.
            Firing on a cell that was already resolved returns MISS and
            leaves the board unchanged.

        Raises:
            ValueError: If the coordinate is off the grid
        """
        if not self.in_bounds(row, col):
            raise ValueError(
                f"Invalid target: ({row}, {col}) (must be 0-{self.size - 1})"
            )

        cell = self.grid[row][col]
        if cell == CellState.EMPTY:
            self.grid[row][col] = CellState.MISS
            return CellState.MISS
        if cell == CellState.SHIP:
            self.grid[row][col] = CellState.HIT
            return CellState.HIT

        logger.debug("Re-fire on resolved cell (%d, %d) reported as miss", row, col)
        return CellState.MISS

    def is_destroyed(self) -> bool:
        """Return True if every ship part on this board has been hit."""
        return all(self.grid[r][c] == CellState.HIT for r, c in self._ship_parts)

    def remaining_ship_parts(self) -> int:
        """Number of ship parts not yet hit."""
        return sum(1 for r, c in self._ship_parts if self.grid[r][c] == CellState.SHIP)

    def is_resolved(self, row: int, col: int) -> bool:
        """Return True if (*row*, *col*) has already been fired upon."""
        return self.cell(row, col).is_resolved

    def cell(self, row: int, col: int) -> CellState:
        """Return the state of a single cell."""
        return self.grid[row][col]

    def snapshot(self) -> List[List[CellState]]:
        """Return a copy of the full grid for rendering."""
        return [list(row) for row in self.grid]
