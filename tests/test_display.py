"""Tests for the console display manager."""

from salvo.engine.turn_coordinator import ShotEvent
from salvo.interface.display import DisplayManager
from salvo.models import CellState, Game, GamePhase


def make_event(shooter, outcome, row=3, col=4):
    """Create a shot event."""
    return ShotEvent(turn=0, shooter=shooter, row=row, col=col, outcome=outcome)


def test_format_player_hit():
    """Test the player hit report."""
    line = DisplayManager().format_shot(make_event("player", CellState.HIT))
    assert line == "💥 You hit a ship at (3, 4)!"


def test_format_player_miss():
    """Test the player miss report."""
    line = DisplayManager().format_shot(make_event("player", CellState.MISS))
    assert line == "🌊 You missed at (3, 4)."


def test_format_opponent_reports():
    """Test the opponent hit and miss reports."""
    display = DisplayManager()
    assert "Opponent hit one of your ships" in display.format_shot(
        make_event("opponent", CellState.HIT)
    )
    assert "Opponent missed" in display.format_shot(make_event("opponent", CellState.MISS))


def test_statistics():
    """Test shots, hits and accuracy per side."""
    game = Game(seed=42)
    game.shot_log = [
        make_event("player", CellState.HIT),
        make_event("opponent", CellState.MISS),
        make_event("player", CellState.MISS),
        make_event("opponent", CellState.MISS),
    ]

    lines = DisplayManager().format_statistics(game)

    assert lines[1].split() == ["You", "2", "1", "50.0%"]
    assert lines[2].split() == ["Opponent", "2", "0", "0.0%"]


def test_statistics_without_shots():
    """Test accuracy placeholder before any shot."""
    lines = DisplayManager().format_statistics(Game(seed=42))
    assert lines[1].split() == ["You", "0", "0", "-"]


def test_show_victory_player(capsys):
    """Test the victory screen for a player win."""
    game = Game(seed=42, phase=GamePhase.PLAYER_WON, turn=12)

    DisplayManager().show_victory(game)

    output = capsys.readouterr().out
    assert "GAME OVER" in output
    assert "You sank all of your opponent's ships" in output
    assert "Game Duration: 13 turns" in output
    assert "Seed: 42" in output


def test_show_victory_opponent(capsys):
    """Test the defeat screen."""
    game = Game(seed=7, phase=GamePhase.OPPONENT_WON)

    DisplayManager().show_victory(game)

    assert "All of your ships have been sunk" in capsys.readouterr().out


def test_show_victory_reveals_both_fleets(capsys):
    """Test the end screen shows every ship part of both sides."""
    game = Game(seed=5, phase=GamePhase.PLAYER_WON)
    game.player_board.place_ship_at(0, 0, 2, True)
    game.opponent_board.place_ship_at(4, 4, 3, False)
    game.opponent_board.fire(4, 4)

    DisplayManager().show_victory(game)

    output = capsys.readouterr().out
    assert "Your fleet:" in output
    assert "Opponent's fleet:" in output
    # 2 player parts plus 2 un-hit opponent parts; the hit part shows as ●
    assert output.count("■") == 4
    assert output.count("●") == 1


def test_show_boards(capsys):
    """Test both board titles and the turn banner."""
    DisplayManager().show_boards(Game(seed=1, turn=2))

    output = capsys.readouterr().out
    assert "Turn 3" in output
    assert "Your Board:" in output
    assert "Opponent's Board:" in output
