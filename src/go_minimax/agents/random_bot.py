"""
Uniformly random bot, mostly useful as a sparring partner.
"""
import numpy as np

from go_minimax.agents.base import Agent


class RandomBot(Agent):

    def __init__(self, seed=None):
        self.rng = np.random.default_rng(seed)

    def select_move(self, game_state):
        candidates = list(game_state.valid_moves())
        if not candidates:
            raise ValueError("No valid moves available")
        return candidates[self.rng.integers(len(candidates))]
