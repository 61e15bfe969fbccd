"""Data models for Salvo."""

from .board import Board, Coordinate, PlacementError, run_cells
from .cell import CellState
from .game import Game, GamePhase

__all__ = [
    "Board",
    "CellState",
    "Coordinate",
    "Game",
    "GamePhase",
    "PlacementError",
    "run_cells",
]
