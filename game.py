#!/usr/bin/env python3
"""Salvo - Main entry point.

A two-player Battleship game: you against a computer opponent that fires
at random. Each side hides a fleet on a 10x10 grid; the first to sink
every enemy ship wins.
"""

import argparse
import logging
import random
import sys

from salvo.agent.random_player import RandomPlayer
from salvo.engine.fleet_setup import new_game
from salvo.engine.turn_coordinator import ShotEvent, TurnCoordinator
from salvo.interface.display import DisplayManager
from salvo.interface.human_player import HumanPlayer
from salvo.models.board import PlacementError
from salvo.models.game import Game
from salvo.utils import FLEET_SIZES, GameRNG

logger = logging.getLogger(__name__)


class GameOrchestrator:
    """Manages the turn loop and console reporting."""

    def __init__(self, game: Game, player_controller, opponent_controller, pause: bool = True):
        """Initialize game orchestrator.

        Args:
            game: Game in the SET_UP phase
            player_controller: Move source for the player (HumanPlayer, TUIPlayer, RandomPlayer)
            opponent_controller: Move source for the opponent
            pause: If True, wait for Enter after each shot until the game ends
        """
        self.game = game
        self.coordinator = TurnCoordinator(player_controller, opponent_controller)
        self.display = DisplayManager()
        self.pause = pause

    def run(self) -> Game:
        """Main game loop."""
        print("\n" + "=" * 60)
        print("Salvo")
        print("=" * 60)
        print("\nGoal: Sink every ship in your opponent's fleet!")
        print("Press Ctrl+C at any time to quit.\n")

        try:
            self.coordinator.run(self.game, on_shot=self._report_shot)
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user. Exiting...")
            sys.exit(0)
        except PlacementError as e:
            print(f"Error placing fleet: {e}")
            print("Game cannot continue. Exiting...")
            sys.exit(1)

        self.display.show_victory(self.game)
        return self.game

    def _report_shot(self, game: Game, event: ShotEvent) -> None:
        """Print a shot report after each shot.

        Args:
            game: Game state after the shot
            event: The shot just resolved
        """
        self.display.show_shot(event)
        if self.pause and not game.is_over:
            input("Press Enter to continue...")


def parse_fleet(value: str) -> tuple[int, ...]:
    """Parse a comma-separated list of ship sizes for --fleet."""
    try:
        sizes = tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid fleet: {value!r}")
    if not sizes or any(size < 1 for size in sizes):
        raise argparse.ArgumentTypeError(f"invalid fleet: {value!r}")
    return sizes


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Salvo - Battleship against a random-firing computer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Human vs computer (text mode)
  %(prog)s --tui                    # Human vs computer with terminal user interface
  %(prog)s --mode cvc --no-pause    # Watch two random players
  %(prog)s --seed 7                 # Specific seed
  %(prog)s --fleet 4,3,2            # Smaller fleet
        """,
    )

    parser.add_argument(
        "--mode",
        choices=["hvc", "cvc"],
        default="hvc",
        help="Game mode: hvc=human vs computer, cvc=computer vs computer (default: hvc)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for ship placement and targeting (default: a fresh seed each game)",
    )
    parser.add_argument(
        "--fleet",
        type=parse_fleet,
        default=FLEET_SIZES,
        help="Comma-separated ship sizes (default: 5,4,3,3,2)",
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Do not wait for Enter after each shot",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (placement and shot details)",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Use terminal user interface (TUI) for the human player",
    )

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if args.tui and args.mode == "cvc":
        print("Error: --tui flag does not work with --mode cvc")
        print("TUI mode requires a human player")
        sys.exit(1)

    # Fresh seed per game unless --seed is given
    seed = args.seed if args.seed is not None else random.SystemRandom().randrange(2**31)

    try:
        game = new_game(seed, fleet=args.fleet)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    # Targeting gets its own stream so placement does not shift it
    targeting_rng = GameRNG(seed + 1)

    if args.mode == "hvc":
        if args.tui:
            from salvo.interface.tui_player import TUIPlayer

            player = TUIPlayer()
        else:
            player = HumanPlayer()
    else:
        player = RandomPlayer(GameRNG(seed + 2))
    opponent = RandomPlayer(targeting_rng)

    pause = args.mode == "hvc" and not args.no_pause and not args.tui
    orchestrator = GameOrchestrator(game, player, opponent, pause=pause)
    logger.debug("Starting %s game with seed %d", args.mode, seed)
    orchestrator.run()


if __name__ == "__main__":
    main()
