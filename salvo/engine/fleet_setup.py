"""Fleet deployment and new-game creation."""

import logging
from typing import Iterable, List

from ..models import Board, Coordinate, Game
from ..utils import BOARD_SIZE, FLEET, FLEET_SIZES, GameRNG

logger = logging.getLogger(__name__)


def ship_name(index: int, size: int) -> str:
    """Name of the ship at fleet position *index*.

    Positions that match the standard roster get its name (so the two
    size-3 ships are told apart); anything else is named by its size.
    """
    if index < len(FLEET) and FLEET[index][1] == size:
        return FLEET[index][0]
    return f"ship of size {size}"


def deploy_fleet(
    board: Board, rng: GameRNG, fleet: Iterable[int] = FLEET_SIZES
) -> List[List[Coordinate]]:
    """Place every ship of *fleet* on *board* at random.

    Ships are placed in the given order.

    Args:
        board: Board to populate
        rng: Randomness source
        fleet: Ship sizes to place

    Returns:
        List of ship runs (one coordinate list per ship)
    """
    ships = []
    for index, size in enumerate(fleet):
        ships.append(board.place_ship(size, rng))
        logger.debug("Placed %s", ship_name(index, size))
    logger.debug("Deployed %d ships (%d parts)", len(ships), len(board.ship_parts))
    return ships


def new_game(
    seed: int, fleet: Iterable[int] = FLEET_SIZES, board_size: int = BOARD_SIZE
) -> Game:
    """Create a fresh game in the SET_UP phase with empty boards.

    Args:
        seed: Seed for the game RNG
        fleet: Ship sizes each side will place
        board_size: Side length of both boards

    Returns:
        Game ready to be set up by the turn coordinator
    """
    return Game(
        seed=seed,
        player_board=Board(board_size),
        opponent_board=Board(board_size),
        fleet=tuple(fleet),
    )
