"""Human player controller for CLI interaction.

This module provides the HumanPlayer class which reads fire targets from
the console and re-prompts until it gets a valid coordinate.
"""

from ..models.board import Board
from ..models.game import Game
from .command_parser import CommandParser, CoordinateParseError, ErrorType
from .display import DisplayManager


class HumanPlayer:
    """Human move source.

    Blocks on console input. Malformed input is reported and re-requested
    here, so the engine only ever receives on-board coordinates.
    """

    def __init__(self, show_boards: bool = True):
        """Initialize human player controller.

        Args:
            show_boards: If True, print both boards before each prompt
        """
        self.show_boards = show_boards
        self.display = DisplayManager()

    def _format_error_message(self, error_type: ErrorType, message: str) -> str:
        """Format error message with emoji and optional help.

        Args:
            error_type: Classification of the error
            message: Error message content

        Returns:
            Formatted error message string
        """
        formatted = f"❌ {message}"

        # Only Unknown Command errors show help hint
        if error_type == ErrorType.UNKNOWN_COMMAND:
            formatted += "\n\nAvailable commands: <row>, <col> | help | quit"
            formatted += "\nExample: 3, 7"

        return formatted

    def choose_target(self, game: Game, board: Board) -> tuple[int, int]:
        """Get the next target from the human player.

        Args:
            game: Current game state
            board: Board being fired upon (the opponent's)

        Returns:
            (row, col) on *board*
        """
        if self.show_boards:
            self.display.show_boards(game)

        parser = CommandParser(board.size)

        while True:
            command = input(
                f"[Turn {game.turn + 1}] Enter coordinates to fire (row, col): "
            ).strip()

            # Empty input - ignore and re-prompt
            if not command:
                continue

            if parser.is_help(command):
                self.display.show_help(board.size)
                continue

            if parser.is_quit(command):
                print("\nExiting game. Thanks for playing!")
                raise SystemExit(0)

            try:
                target = parser.parse(command)
            except CoordinateParseError as e:
                print(self._format_error_message(e.error_type, e.message))
                continue

            return target
