"""Tests for ASCII board renderer."""

from salvo.interface.renderer import BoardRenderer
from salvo.models import Board


def test_render_empty_hidden():
    """Test rendering an empty board with ships hidden."""
    renderer = BoardRenderer()

    lines = renderer.render(Board(), reveal_ships=False).split("\n")

    assert len(lines) == 10
    for line in lines:
        assert line == ". . . . . . . . . ."


def test_render_empty_revealed():
    """Test rendering an empty board with water revealed."""
    lines = BoardRenderer().render(Board(), reveal_ships=True).split("\n")
    assert lines[0] == "□ □ □ □ □ □ □ □ □ □"


def test_hidden_board_does_not_leak_ships():
    """Test that ship parts look like unknown water when hidden."""
    board = Board()
    board.place_ship_at(0, 0, 2, horizontal=True)

    hidden = BoardRenderer().render(board, reveal_ships=False)

    assert "■" not in hidden
    assert hidden.split("\n")[0] == ". . . . . . . . . ."


def test_revealed_board_shows_ships():
    """Test ship parts on a revealed board."""
    board = Board()
    board.place_ship_at(0, 0, 2, horizontal=True)

    row_0 = BoardRenderer().render(board, reveal_ships=True).split("\n")[0]

    assert row_0.split(" ")[:3] == ["■", "■", "□"]


def test_hits_and_misses_always_visible():
    """Test that resolved cells render the same in both views."""
    board = Board()
    board.place_ship_at(2, 2, 3, horizontal=False)
    board.fire(2, 2)
    board.fire(0, 9)
    renderer = BoardRenderer()

    for reveal in (True, False):
        lines = renderer.render(board, reveal_ships=reveal).split("\n")
        assert lines[2].split(" ")[2] == "●"
        assert lines[0].split(" ")[9] == "·"


def test_render_with_coords():
    """Test column header and row labels."""
    lines = BoardRenderer().render_with_coords(Board(), reveal_ships=False).split("\n")

    assert lines[0] == "   0 1 2 3 4 5 6 7 8 9"
    assert lines[1].startswith(" 0 ")
    assert lines[10].startswith(" 9 ")
    assert len(lines) == 11


def test_render_side_by_side():
    """Test two boards rendered next to each other."""
    own = Board()
    own.place_ship_at(0, 0, 2, horizontal=True)
    enemy = Board()
    enemy.place_ship_at(0, 0, 2, horizontal=True)

    output = BoardRenderer().render_side_by_side(own, enemy, titles=["Mine", "Theirs"])
    lines = output.split("\n")

    assert lines[0].startswith("Mine")
    assert lines[0].endswith("Theirs")
    assert len(lines) == 12
    # Own ships shown on the left only
    assert lines[2].count("■") == 2
