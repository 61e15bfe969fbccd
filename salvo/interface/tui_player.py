"""TUI-based player controller for Salvo."""

import sys

from ..models.board import Board
from ..models.game import Game
from .tui_app import SalvoTUI


class TUIPlayer:
    """Human move source using the terminal user interface (TUI)."""

    def choose_target(self, game: Game, board: Board) -> tuple[int, int]:
        """Get the next target from the player using the TUI.

        Args:
            game: Current game state
            board: Board being fired upon

        Returns:
            (row, col) on *board*
        """
        app = SalvoTUI(game, board)
        target = app.run(mouse=False)

        # None means the player quit (quit command or Ctrl+C)
        if target is None:
            print("\nGame interrupted by user. Exiting...")
            sys.exit(0)

        return target
