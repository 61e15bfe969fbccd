"""Tests for the random-firing computer player."""

from salvo.agent.random_player import RandomPlayer
from salvo.models import Board, Game
from salvo.utils import GameRNG


def test_targets_in_bounds():
    """Test that every target lies on the board."""
    player = RandomPlayer(GameRNG(42))
    game = Game(seed=42)
    board = Board()

    for _ in range(300):
        row, col = player.choose_target(game, board)
        assert 0 <= row < 10
        assert 0 <= col < 10


def test_covers_whole_grid():
    """Test that targeting is not restricted to part of the board."""
    player = RandomPlayer(GameRNG(1))
    game = Game(seed=1)
    board = Board()

    seen = {player.choose_target(game, board) for _ in range(2000)}

    assert len(seen) > 90


def test_respects_board_size():
    """Test targeting on a smaller board."""
    player = RandomPlayer(GameRNG(3))
    board = Board(4)
    game = Game(seed=3, player_board=Board(4), opponent_board=board, fleet=(2,))

    targets = {player.choose_target(game, board) for _ in range(200)}

    assert targets <= {(r, c) for r in range(4) for c in range(4)}


def test_deterministic_for_seed():
    """Test the same seed gives the same targets."""
    game = Game(seed=0)
    board = Board()
    a = RandomPlayer(GameRNG(9))
    b = RandomPlayer(GameRNG(9))
    assert [a.choose_target(game, board) for _ in range(10)] == [
        b.choose_target(game, board) for _ in range(10)
    ]
