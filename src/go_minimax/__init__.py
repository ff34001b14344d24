"""
Go rules engine with a generic minimax search agent.
"""

__version__ = "0.1"
