import logging

from go_minimax.agents.base import Agent
from go_minimax.engine.minimax import minimax
from go_minimax.errors import NoMoveError

logger = logging.getLogger(__name__)


class MinimaxBot(Agent):
    """
    Bot that plays the best move found by a fixed-depth minimax search.

    Args:
        plies: Search depth; keep it small, cost grows as branching**plies
        evaluate: Leaf evaluation, higher is better for the player to move
    """

    def __init__(self, plies, evaluate):
        self.plies = plies
        self.evaluate = evaluate

    def select_move(self, game_state):
        result = minimax(game_state, self.plies, self.evaluate)
        if result.best_move is None:
            raise NoMoveError(f"No move found for {game_state!r}")
        logger.info("Selected %s (value %d, %d nodes)",
                    result.best_move, result.value, result.nodes_searched)
        return result.best_move
