"""Tests for fleet deployment and new-game creation."""

import logging

import pytest

from salvo.engine.fleet_setup import deploy_fleet, new_game, ship_name
from salvo.models import Board, CellState, GamePhase
from salvo.utils import FLEET_SIZES, GameRNG


def count_cells(board, state):
    """Count cells in a given state."""
    return sum(row.count(state) for row in board.snapshot())


@pytest.mark.parametrize("seed", [0, 1, 42, 1234, 99999])
def test_standard_fleet_has_17_parts(seed):
    """Test that the standard fleet occupies 17 in-bounds cells without overlap."""
    board = Board()
    ships = deploy_fleet(board, GameRNG(seed))

    assert [len(ship) for ship in ships] == list(FLEET_SIZES)
    assert count_cells(board, CellState.SHIP) == 17
    assert len(board.ship_parts) == 17

    all_cells = [cell for ship in ships for cell in ship]
    assert len(set(all_cells)) == len(all_cells)  # no overlap
    for r, c in all_cells:
        assert 0 <= r < 10 and 0 <= c < 10


def test_every_ship_part_is_a_ship_cell():
    """Test the ship-part set matches the SHIP cells exactly."""
    board = Board()
    deploy_fleet(board, GameRNG(8))

    ship_cells = {
        (r, c)
        for r, row in enumerate(board.snapshot())
        for c, cell in enumerate(row)
        if cell == CellState.SHIP
    }
    assert ship_cells == board.ship_parts


def test_custom_fleet():
    """Test deploying a non-standard fleet."""
    board = Board()
    ships = deploy_fleet(board, GameRNG(42), fleet=(2, 2, 1))
    assert [len(ship) for ship in ships] == [2, 2, 1]
    assert len(board.ship_parts) == 5


def test_deterministic_for_seed():
    """Test that the same seed yields the same layout."""
    a = Board()
    b = Board()
    deploy_fleet(a, GameRNG(42))
    deploy_fleet(b, GameRNG(42))
    assert a.ship_parts == b.ship_parts


def test_new_game_is_in_setup():
    """Test new_game returns empty boards in SET_UP."""
    game = new_game(42)
    assert game.phase == GamePhase.SET_UP
    assert game.fleet == FLEET_SIZES
    assert game.player_board.ship_parts == frozenset()
    assert game.opponent_board.ship_parts == frozenset()


def test_new_game_custom_size():
    """Test new_game with a smaller board and fleet."""
    game = new_game(7, fleet=[3, 2], board_size=6)
    assert game.board_size == 6
    assert game.fleet == (3, 2)


def test_new_game_rejects_oversized_ship():
    """Test that a ship longer than the board is refused."""
    with pytest.raises(ValueError):
        new_game(7, fleet=(7,), board_size=6)


def test_ship_names_follow_roster_position():
    """Test the two size-3 ships get different names."""
    assert ship_name(2, 3) == "Cruiser"
    assert ship_name(3, 3) == "Submarine"
    assert ship_name(0, 5) == "Aircraft Carrier"


def test_ship_name_for_custom_fleet():
    """Test ships off the standard roster are named by size."""
    assert ship_name(0, 2) == "ship of size 2"
    assert ship_name(7, 3) == "ship of size 3"


def test_deploy_logs_each_ship_name(caplog):
    """Test deployment logs every roster name once."""
    caplog.set_level(logging.DEBUG, logger="salvo.engine.fleet_setup")
    deploy_fleet(Board(), GameRNG(42))

    placed = [
        r.getMessage()
        for r in caplog.records
        if r.name == "salvo.engine.fleet_setup" and r.getMessage().startswith("Placed ")
    ]
    assert placed == [
        "Placed Aircraft Carrier",
        "Placed Battleship",
        "Placed Cruiser",
        "Placed Submarine",
        "Placed Destroyer",
    ]
