from go_minimax.agents.base import Agent
from go_minimax.agents.random_bot import RandomBot
from go_minimax.agents.minimax_bot import MinimaxBot

__all__ = ['Agent', 'RandomBot', 'MinimaxBot']
