"""Textual TUI application for Salvo.

This module provides a Terminal User Interface using the Textual framework.
It shows both boards side by side and a terminal panel with an inline
input for the next target.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import Footer, Header, Input, RichLog, Static

from ..models.board import Board
from ..models.game import Game
from .command_parser import CommandParser, CoordinateParseError
from .display import DisplayManager
from .renderer import BoardRenderer


class BoardPanel(Static):
    """Widget to display one board."""

    def __init__(self, reveal_ships: bool, *args, **kwargs):
        """Initialize board panel.

        Args:
            reveal_ships: If True, ship parts are drawn
        """
        super().__init__(*args, **kwargs)
        self.renderer = BoardRenderer()
        self.reveal_ships = reveal_ships

    def update_board(self, board: Board) -> None:
        """Redraw the panel from *board*."""
        self.update(self.renderer.render_with_coords(board, self.reveal_ships))


class TerminalPanel(RichLog):
    """Terminal-style panel with command echo and responses."""

    def __init__(self, *args, **kwargs):
        """Initialize terminal panel."""
        super().__init__(*args, highlight=True, markup=True, wrap=True, **kwargs)

    def show_command(self, command: str) -> None:
        """Echo the command that was entered."""
        self.write(f"[bold cyan]>[/bold cyan] {command}")

    def show_response(self, message: str, is_error: bool = False) -> None:
        """Show response to a command.

        Args:
            message: Response message to display
            is_error: If True, display in red; otherwise green
        """
        if is_error:
            self.write(f"[red]{message}[/red]")
        else:
            self.write(f"[green]{message}[/green]")

    def show_info(self, message: str) -> None:
        """Show informational message."""
        self.write(message)


class SalvoTUI(App):
    """Salvo TUI application.

    Runs for a single shot: exits with the chosen (row, col), or None if
    the player quits.
    """

    # Disable command palette (Ctrl+P) - we use custom keybindings
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #boards_row {
        height: 14;
    }

    #player_container {
        width: 1fr;
        border: solid green;
    }

    #opponent_container {
        width: 1fr;
        border: solid red;
    }

    #terminal_container {
        height: 1fr;
        border: solid cyan;
    }

    TerminalPanel {
        height: 1fr;
        border: none;
    }

    #input_row {
        dock: bottom;
        height: 1;
    }

    #prompt_label {
        width: auto;
        color: cyan;
    }

    #target_input {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=True),
    ]

    def __init__(self, game: Game, board: Board, *args, **kwargs):
        """Initialize the TUI app.

        Args:
            game: Current game state
            board: Board being fired upon
        """
        super().__init__(*args, **kwargs)
        self.game = game
        self.board = board
        self.parser = CommandParser(board.size)
        self.display_manager = DisplayManager()
        self.terminal_panel = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()

        with Horizontal(id="boards_row"):
            player_container = Container(id="player_container")
            player_container.border_title = "Your Board"
            with player_container:
                yield BoardPanel(True, id="player_board")

            opponent_container = Container(id="opponent_container")
            opponent_container.border_title = "Opponent's Board"
            with opponent_container:
                yield BoardPanel(False, id="opponent_board")

        terminal_container = Container(id="terminal_container")
        terminal_container.border_title = "Terminal"
        with terminal_container:
            self.terminal_panel = TerminalPanel()
            yield self.terminal_panel
            with Horizontal(id="input_row"):
                yield Static("fire> ", id="prompt_label")
                yield Input(placeholder="row, col", id="target_input")

        yield Footer()

    def on_mount(self) -> None:
        """Draw the boards and the last round of reports."""
        self.query_one("#player_board", BoardPanel).update_board(self.game.player_board)
        self.query_one("#opponent_board", BoardPanel).update_board(self.game.opponent_board)

        self.terminal_panel.show_info(f"[bold cyan]Turn {self.game.turn + 1}[/bold cyan]")
        for event in self.game.shot_log[-2:]:
            self.terminal_panel.show_info(self.display_manager.format_shot(event))
        self.terminal_panel.show_info("Enter a target as 'row, col' ('quit' to exit)")

        self.query_one("#target_input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle input submission.

        Args:
            event: Input submission event
        """
        command = event.value.strip()
        event.input.value = ""

        if not command:
            return

        self.terminal_panel.show_command(command)

        if self.parser.is_quit(command):
            self.exit(None)
            return

        if self.parser.is_help(command):
            self.terminal_panel.show_info(
                f"Type two numbers 0-{self.board.size - 1}, e.g. '3, 7'"
            )
            return

        try:
            target = self.parser.parse(command)
        except CoordinateParseError as e:
            self.terminal_panel.show_response(e.message, is_error=True)
            return

        self.exit(target)
