"""
Configuration for go_minimax games and bots.
"""

# Game Configuration
GAME_CONFIG = {
    'board_size': 5,        # Minimax is only practical on small boards
    'zobrist_seed': 1985,   # Fixed so hashes are comparable across runs
}

# Search Configuration
SEARCH_CONFIG = {
    # Plies searched by the minimax bot (no pruning, cost is branching**plies)
    'plies': 2,
}

# Driver Configuration
PLAY_CONFIG = {
    'black': 'minimax',     # 'minimax' or 'random'
    'white': 'random',
    'num_games': 1,
    'delay_ms': 100,        # Pause between moves in single-game mode
    'step': False,          # Wait for enter before each move
    'seed': None,           # Seed for random bots
}
