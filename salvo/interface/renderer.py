"""ASCII board rendering.

This module renders a board as a grid of single-character symbols. Ships
are shown only when the caller asks for them to be revealed, so the same
renderer draws both "your fleet" and "enemy waters" views.
"""

from typing import List

from ..models.board import Board
from ..models.cell import CellState

# Symbols for a revealed board (your own fleet)
REVEALED_SYMBOLS = {
    CellState.EMPTY: "□",
    CellState.SHIP: "■",
    CellState.HIT: "●",
    CellState.MISS: "·",
}

# Symbols for a hidden board (enemy waters): unresolved cells look alike
HIDDEN_SYMBOLS = {
    CellState.EMPTY: ".",
    CellState.SHIP: ".",
    CellState.HIT: "●",
    CellState.MISS: "·",
}


class BoardRenderer:
    """Renders an N x N board as text."""

    def render(self, board: Board, reveal_ships: bool) -> str:
        """Render board rows, one line per row.

        Output format (10x10 grid, cells separated by one space):
        . . . ● . . . . . .
        . · . ● . . . . . .
        ...

        Legend:
        - '■' = ship part (revealed boards only)
        - '●' = hit
        - '·' = miss
        - '□' = open water (revealed boards only)
        - '.' = unknown (hidden boards)

        Args:
            board: Board to render
            reveal_ships: If True, show ship parts and open water

        Returns:
            Multi-line string representing the grid
        """
        symbols = REVEALED_SYMBOLS if reveal_ships else HIDDEN_SYMBOLS
        lines = []
        for row in board.snapshot():
            lines.append(" ".join(symbols[cell] for cell in row))
        return "\n".join(lines)

    def render_with_coords(self, board: Board, reveal_ships: bool) -> str:
        """Render board with row and column labels.

        Args:
            board: Board to render
            reveal_ships: If True, show ship parts and open water

        Returns:
            Grid with column numbers on top and row numbers on the left
        """
        grid = self.render(board, reveal_ships)
        header = "   " + " ".join(str(i % 10) for i in range(board.size))
        numbered = [f"{i:2d} {line}" for i, line in enumerate(grid.split("\n"))]
        return header + "\n" + "\n".join(numbered)

    def render_side_by_side(
        self, left: Board, right: Board, titles: List[str], gap: int = 6
    ) -> str:
        """Render two labelled boards next to each other.

        The left board is revealed (own fleet), the right hidden (enemy).

        Args:
            left: Board drawn with ships visible
            right: Board drawn with ships hidden
            titles: Two column titles
            gap: Spaces between the two grids

        Returns:
            Combined multi-line string
        """
        left_lines = self.render_with_coords(left, reveal_ships=True).split("\n")
        right_lines = self.render_with_coords(right, reveal_ships=False).split("\n")
        width = max(len(line) for line in left_lines)
        spacer = " " * gap

        lines = [titles[0].ljust(width) + spacer + titles[1]]
        for l_line, r_line in zip(left_lines, right_lines):
            lines.append(l_line.ljust(width) + spacer + r_line)
        return "\n".join(lines)
