"""Turn state machine.

Phases:
    SET_UP -> PLAYER_TURN                      (both fleets placed)
    PLAYER_TURN -> PLAYER_WON | OPPONENT_TURN  (after the player's shot)
    OPPONENT_TURN -> OPPONENT_WON | PLAYER_TURN (after the opponent's shot)

Each turn is a strict sequence: obtain a target from the side's move
source, fire on the enemy board, record the event, check for victory.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from ..models import Board, CellState, Game, GamePhase
from ..utils import OPPONENT, PLAYER
from .fleet_setup import deploy_fleet
from .victory import check_victory

logger = logging.getLogger(__name__)


class MoveSource(Protocol):
    """Anything that can pick the next target coordinate."""

    def choose_target(self, game: Game, board: Board) -> tuple[int, int]:
        """Return (row, col) on *board*, the board being fired upon."""
        ...


@dataclass
class ShotEvent:
    """One resolved shot."""

    turn: int
    shooter: str  # "player" or "opponent"
    row: int
    col: int
    outcome: CellState  # HIT or MISS

    @property
    def is_hit(self) -> bool:
        return self.outcome == CellState.HIT


class TurnCoordinator:
    """Alternates turns between the two sides until one fleet is destroyed."""

    def __init__(self, player_source: MoveSource, opponent_source: MoveSource):
        """Initialize coordinator.

        Args:
            player_source: Move source for the player (fires on opponent board)
            opponent_source: Move source for the opponent (fires on player board)
        """
        self.sources = {PLAYER: player_source, OPPONENT: opponent_source}

    def set_up(self, game: Game) -> Game:
        """Place the fleet on both boards and hand the first move to the player.

        Raises:
            RuntimeError: If the game is not in SET_UP
        """
        if game.phase != GamePhase.SET_UP:
            raise RuntimeError(f"Cannot set up a game in phase {game.phase.name}")

        deploy_fleet(game.player_board, game.rng, game.fleet)
        deploy_fleet(game.opponent_board, game.rng, game.fleet)
        game.phase = GamePhase.PLAYER_TURN
        logger.info("Fleets deployed (%s), player moves first", list(game.fleet))
        return game

    def play_turn(self, game: Game) -> ShotEvent:
        """Play one shot for the side whose turn it is.

        Returns:
            The resolved ShotEvent

        Raises:
            RuntimeError: If the game is in SET_UP or already over
        """
        if game.phase == GamePhase.PLAYER_TURN:
            shooter, target = PLAYER, game.opponent_board
        elif game.phase == GamePhase.OPPONENT_TURN:
            shooter, target = OPPONENT, game.player_board
        else:
            raise RuntimeError(f"No turn to play in phase {game.phase.name}")

        row, col = self.sources[shooter].choose_target(game, target)
        outcome = target.fire(row, col)
        event = ShotEvent(turn=game.turn, shooter=shooter, row=row, col=col, outcome=outcome)
        game.shot_log.append(event)
        logger.debug("Turn %d: %s fired at (%d, %d): %s", game.turn, shooter, row, col, outcome.value)

        if check_victory(game):
            logger.info("Game over on turn %d: %s wins", game.turn, shooter)
        elif shooter == PLAYER:
            game.phase = GamePhase.OPPONENT_TURN
        else:
            game.phase = GamePhase.PLAYER_TURN
            game.turn += 1

        return event

    def run(
        self,
        game: Game,
        on_shot: Optional[Callable[[Game, ShotEvent], None]] = None,
    ) -> Game:
        """Set up (if needed) and play turns until one side wins.

        Args:
            game: Game to drive
            on_shot: Optional callback invoked after every shot

        Returns:
            The finished game
        """
        if game.phase == GamePhase.SET_UP:
            self.set_up(game)

        while not game.is_over:
            event = self.play_turn(game)
            if on_shot is not None:
                on_shot(game, event)

        return game
