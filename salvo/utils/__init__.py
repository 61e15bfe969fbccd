"""Utility functions and constants for Salvo."""

from .constants import (
    BOARD_SIZE,
    FLEET,
    FLEET_SIZES,
    MAX_PLACEMENT_ATTEMPTS,
    OPPONENT,
    PLAYER,
    RNG_SEED_DEFAULT,
)
from .rng import GameRNG

__all__ = [
    "BOARD_SIZE",
    "FLEET",
    "FLEET_SIZES",
    "MAX_PLACEMENT_ATTEMPTS",
    "OPPONENT",
    "PLAYER",
    "RNG_SEED_DEFAULT",
    "GameRNG",
]
