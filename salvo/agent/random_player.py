"""Computer player that fires at uniformly random coordinates."""

from ..models import Board, Game
from ..utils import GameRNG


class RandomPlayer:
    """Move source drawing each target uniformly from the whole grid.

    Keeps no memory of earlier shots, so it may re-target cells that are
    already resolved (those shots report a miss).
    """

    def __init__(self, rng: GameRNG):
        """Initialize random player.

        Args:
            rng: Randomness source for targeting
        """
        self.rng = rng

    def choose_target(self, game: Game, board: Board) -> tuple[int, int]:
        """Pick a random (row, col) on *board*."""
        return self.rng.randrange(board.size), self.rng.randrange(board.size)
