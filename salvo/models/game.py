"""Game state container."""

from dataclasses import dataclass, field
from enum import Enum

from ..utils import FLEET_SIZES, OPPONENT, PLAYER, GameRNG
from .board import Board


class GamePhase(Enum):
    """Phases of the turn state machine."""

    SET_UP = "set_up"
    PLAYER_TURN = "player_turn"
    OPPONENT_TURN = "opponent_turn"
    PLAYER_WON = "player_won"
    OPPONENT_WON = "opponent_won"

    @property
    def is_terminal(self) -> bool:
        """True once a side has won."""
        return self in (GamePhase.PLAYER_WON, GamePhase.OPPONENT_WON)


@dataclass
class Game:
    """Main game session state.

    Holds both boards, the current phase, and the RNG that drives ship
    placement. Each board is owned by one side only; the turn coordinator
    is the only thing that fires on them.
    """

    seed: int  # RNG seed
    turn: int = 0  # Completed rounds (one player shot + one opponent shot)
    player_board: Board = field(default_factory=Board)  # Human side
    opponent_board: Board = field(default_factory=Board)  # Computer side
    phase: GamePhase = GamePhase.SET_UP
    rng: GameRNG | None = None  # Seeded RNG instance
    fleet: tuple[int, ...] = FLEET_SIZES  # Ship sizes placed on each board
    shot_log: list = field(default_factory=list)  # ShotEvent records, oldest first

    def __post_init__(self):
        """Initialize RNG if not provided and validate state."""
        if self.rng is None:
            self.rng = GameRNG(self.seed)
        if self.turn < 0:
            raise ValueError(f"Invalid turn: {self.turn} (must be >= 0)")
        if not isinstance(self.phase, GamePhase):
            raise ValueError(f"Invalid phase: {self.phase!r}")
        if self.player_board.size != self.opponent_board.size:
            raise ValueError(
                f"Board sizes differ: {self.player_board.size} vs {self.opponent_board.size}"
            )
        for size in self.fleet:
            if not (1 <= size <= self.player_board.size):
                raise ValueError(
                    f"Invalid ship size in fleet: {size} (must be 1-{self.player_board.size})"
                )

    @property
    def board_size(self) -> int:
        """Side length shared by both boards."""
        return self.player_board.size

    @property
    def is_over(self) -> bool:
        """True once a terminal phase has been reached."""
        return self.phase.is_terminal

    @property
    def winner(self) -> str | None:
        """Winning side ("player" or "opponent"), None while running."""
        if self.phase == GamePhase.PLAYER_WON:
            return PLAYER
        if self.phase == GamePhase.OPPONENT_WON:
            return OPPONENT
        return None

    def shots_by(self, shooter: str) -> list:
        """Return the ShotEvents fired by one side."""
        return [event for event in self.shot_log if event.shooter == shooter]
