"""Victory condition checking.

After each shot, the board that was just fired upon is checked for total
destruction. Only the side that fired can win on that shot.
"""

from ..models.game import Game, GamePhase


def check_victory(game: Game) -> bool:
    """Check whether the side to move has just destroyed the enemy fleet.

    - In PLAYER_TURN, a destroyed opponent board sets PLAYER_WON.
    - In OPPONENT_TURN, a destroyed player board sets OPPONENT_WON.

    Args:
        game: Current game state (phase is the side that just fired)

    Returns:
        True if the game has a winner, False otherwise
    """
    if game.phase == GamePhase.PLAYER_TURN:
        if game.opponent_board.is_destroyed():
            game.phase = GamePhase.PLAYER_WON
            return True
    elif game.phase == GamePhase.OPPONENT_TURN:
        if game.player_board.is_destroyed():
            game.phase = GamePhase.OPPONENT_WON
            return True
    return False
