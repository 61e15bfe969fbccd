"""Turn information display for the console.

This module prints the two boards, shot reports, help text and the
end-of-game summary.
"""

from typing import List

from ..engine.turn_coordinator import ShotEvent
from ..models.game import Game
from ..utils import OPPONENT, PLAYER
from .renderer import BoardRenderer

# Event report emoji prefixes for visual differentiation
REPORT_EMOJIS = {
    "hit": "💥",
    "miss": "🌊",
    "victory": "🏆",
    "defeat": "☠️",
}

SIDE_NAMES = {
    PLAYER: "You",
    OPPONENT: "Opponent",
}


class DisplayManager:
    """Manages console output for a game session."""

    def __init__(self):
        """Initialize display manager."""
        self.renderer = BoardRenderer()

    def show_boards(self, game: Game) -> None:
        """Display the player's fleet next to the opponent's waters.

        Args:
            game: Current game state
        """
        print(f"\n{'=' * 60}")
        print(f"Turn {game.turn + 1}")
        print(f"{'=' * 60}\n")
        print(
            self.renderer.render_side_by_side(
                game.player_board,
                game.opponent_board,
                titles=["Your Board:", "Opponent's Board:"],
            )
        )
        print(
            f"Your ship parts afloat: {game.player_board.remaining_ship_parts()}"
            f"    Enemy ship parts afloat: {game.opponent_board.remaining_ship_parts()}"
        )
        print()

    def format_shot(self, event: ShotEvent) -> str:
        """Format one shot as a one-line report.

        Args:
            event: Resolved shot

        Returns:
            Report line such as "💥 You hit a ship at (3, 4)!"
        """
        where = f"({event.row}, {event.col})"
        if event.shooter == PLAYER:
            if event.is_hit:
                return f"{REPORT_EMOJIS['hit']} You hit a ship at {where}!"
            return f"{REPORT_EMOJIS['miss']} You missed at {where}."
        if event.is_hit:
            return f"{REPORT_EMOJIS['hit']} Opponent hit one of your ships at {where}!"
        return f"{REPORT_EMOJIS['miss']} Opponent missed at {where}."

    def show_shot(self, event: ShotEvent) -> None:
        """Print a shot report."""
        print(self.format_shot(event))

    def show_help(self, board_size: int) -> None:
        """Display command help."""
        print("\n=== Salvo - Command Help ===\n")
        print(f"  <row>, <col>   - Fire at a cell (each 0-{board_size - 1})")
        print("  <row> <col>    - Same, separated by a space")
        print("  help           - Show this help message")
        print("  quit           - Exit the game")
        print()
        print("Legend:")
        print("  ■  - Your ship")
        print("  ●  - Hit")
        print("  ·  - Miss")
        print("  .  - Unknown water")
        print()

    def show_victory(self, game: Game) -> None:
        """Display the end-of-game screen.

        Shows:
        1. Result banner
        2. Both boards fully revealed
        3. Per-side shot statistics
        4. Game metadata

        Args:
            game: Finished game state
        """
        print("\n" + "=" * 60)
        print("GAME OVER")
        print("=" * 60 + "\n")

        if game.winner == PLAYER:
            print(f"{REPORT_EMOJIS['victory']} Congratulations! You sank all of your opponent's ships!")
        elif game.winner == OPPONENT:
            print(f"{REPORT_EMOJIS['defeat']} Oh no! All of your ships have been sunk!")
        else:
            print("Game ended with unknown result.")
        print()

        print("Your fleet:")
        print(self.renderer.render_with_coords(game.player_board, reveal_ships=True))
        print()
        print("Opponent's fleet:")
        print(self.renderer.render_with_coords(game.opponent_board, reveal_ships=True))
        print()

        for line in self.format_statistics(game):
            print(line)

        print(f"\nGame Duration: {game.turn + 1} turns")
        print(f"Seed: {game.seed}")
        print()

    def format_statistics(self, game: Game) -> List[str]:
        """Build the shots/hits/accuracy table for both sides.

        Args:
            game: Game state (any phase)

        Returns:
            Table lines
        """
        lines = [
            f"{'':10} {'Shots':>6} {'Hits':>6} {'Accuracy':>9}",
        ]
        for side in (PLAYER, OPPONENT):
            shots = game.shots_by(side)
            hits = sum(1 for event in shots if event.is_hit)
            accuracy = f"{100 * hits / len(shots):.1f}%" if shots else "-"
            lines.append(f"{SIDE_NAMES[side]:10} {len(shots):>6} {hits:>6} {accuracy:>9}")
        return lines
