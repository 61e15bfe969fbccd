"""Seedable RNG wrapper for deterministic gameplay."""

import random


class GameRNG:
    """Wrapper around Python's random.Random for deterministic game behavior.

    All randomness in the game (ship placement, computer targeting) goes
    through an instance of this class so that a seed reproduces a whole game.
    """

    def __init__(self, seed: int):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randrange(self, stop: int) -> int:
        """Return random integer in range [0, stop)."""
        return self.rng.randrange(stop)

    def coin_flip(self) -> bool:
        """Return True or False with equal probability."""
        return self.random() < 0.5

    def choice(self, seq):
        """Choose random element from non-empty sequence.

        Args:
            seq: Sequence to choose from

        Returns:
            Random element from sequence
        """
        return self.rng.choice(seq)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self.rng.random()
