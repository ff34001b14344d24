"""
Depth-bounded negamax search for two-player zero-sum games.

The search is generic over any `GameState` (valid_moves / apply_move /
is_over) and treats the evaluation function as an opaque oracle returning a
score for the player about to move.

Algorithm overview:

    def minimax(state, plies):
        if plies == 0 or state.is_over():
            return None, evaluate(state)

        best_move, best_value = None, -infinity
        for move in state.valid_moves():
            _, value = minimax(state.apply_move(move), plies - 1)
            # Zero-sum: the opponent's gain is our loss
            if -value > best_value:
                best_move, best_value = move, -value
        return best_move, best_value

There is no pruning, so the search visits branching**plies states. Ties go to
the first move in enumeration order.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from go_minimax.errors import NoMoveError
from go_minimax.game.game import GameState

logger = logging.getLogger(__name__)

Evaluator = Callable[[Any], int]


@dataclass
class SearchResult:
    """Result of a minimax search."""
    best_move: Optional[Any]
    value: int
    nodes_searched: int = 1


def minimax(state: GameState, plies: int, evaluate: Evaluator) -> SearchResult:
    """
    Search `plies` moves ahead and return the best move for the player to move.

    Args:
        state: Position to search from
        plies: Remaining search depth
        evaluate: Static evaluation, higher is better for the player to move

    Returns:
        SearchResult with the best move (None at leaves), its value from the
        perspective of the player to move, and the number of states visited
    """
    if plies == 0 or state.is_over():
        return SearchResult(best_move=None, value=evaluate(state))

    best_move = None
    best_value = None
    nodes_searched = 1

    for move in state.valid_moves():
        child = minimax(state.apply_move(move), plies - 1, evaluate)
        nodes_searched += child.nodes_searched
        value = -child.value

        if best_value is None or value > best_value:
            best_move = move
            best_value = value

    if best_value is None:
        # No legal moves: score the position as a leaf
        return SearchResult(best_move=None, value=evaluate(state), nodes_searched=nodes_searched)

    return SearchResult(best_move=best_move, value=best_value, nodes_searched=nodes_searched)


def select_move(state: GameState, plies: int, evaluate: Evaluator):
    """
    Run minimax and return only the chosen move.

    Raises:
        NoMoveError: If the search produced no move (terminal state,
            zero plies or no legal moves)
    """
    result = minimax(state, plies, evaluate)
    logger.debug(
        "minimax(plies=%d): move=%s value=%d nodes=%d",
        plies, result.best_move, result.value, result.nodes_searched
    )
    if result.best_move is None:
        raise NoMoveError(f"No move found for {state!r} at {plies} plies")
    return result.best_move
