"""
Static evaluation for Go states, used as the minimax leaf oracle.

Scores are from the perspective of the player to move: positive is good for
them.
"""

from go_minimax.game.go.state import GoState

EDGE_PLAY_BONUS = 10
PASS_BONUS = 50
RESIGN_BONUS = 2**31 // 4


def stone_difference(state: GoState) -> int:
    """
    Material balance plus a judgement of the opponent's last move.

    Material counts captured stones plus stones on the board. The last move
    was made by the opponent, so a pass, a resignation or a play on the edge
    (rarely a good idea) counts in favour of the player to move.
    """
    return material_difference(state) + _last_move_bonus(state)


def material_difference(state: GoState) -> int:
    board = state.board
    next_eval = state.next_player.captured + board.number_of_stones(state.next_player.color)
    previous_eval = state.previous_player.captured + board.number_of_stones(state.previous_player.color)
    return next_eval - previous_eval


def _last_move_bonus(state: GoState) -> int:
    last_move = state.last_move
    if last_move is None:
        return 0
    if last_move.is_resign:
        return RESIGN_BONUS
    if last_move.is_pass:
        return PASS_BONUS
    return EDGE_PLAY_BONUS if state.board.is_on_edge(last_move.point) else 0
