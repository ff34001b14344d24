"""
Play Go between two bots in the terminal.

Usage:
    go-minimax                          # minimax (Black) vs random (White)
    go-minimax --size 4 --plies 2 --step
    go-minimax --games 20 --black random --white random
"""

import argparse
import logging
import time
from typing import Dict, Optional

from tqdm import tqdm

from go_minimax.agents import Agent, MinimaxBot, RandomBot
from go_minimax.config import GAME_CONFIG, PLAY_CONFIG, SEARCH_CONFIG
from go_minimax.game.go import Color, GoState, Move, stone_difference

BOT_CHOICES = ('minimax', 'random')


def build_bot(kind: str, plies: int, seed: Optional[int] = None) -> Agent:
    if kind == 'minimax':
        return MinimaxBot(plies, stone_difference)
    if kind == 'random':
        return RandomBot(seed)
    raise ValueError(f"Unknown bot type: {kind}")


def describe_move(color: Color, move: Move) -> str:
    if move.is_pass:
        action = "passes"
    elif move.is_resign:
        action = "resigns"
    else:
        action = f"plays in ({move.point.row},{move.point.col})"
    return f"{color} {action}"


def play_game(
    bots: Dict[Color, Agent],
    board_size: int,
    seed: int = GAME_CONFIG['zobrist_seed'],
    verbose: bool = False,
    delay_ms: int = 0,
    step: bool = False
) -> GoState:
    """
    Play one game to the end and return the final state.

    Args:
        bots: Agent for each color
        board_size: Board rows (and columns)
        seed: Zobrist seed
        verbose: Print the board and every move
        delay_ms: Pause between moves (verbose mode)
        step: Wait for enter before every move
    """
    game = GoState.new_game(board_size, seed=seed)

    while not game.is_over():
        if verbose:
            print(game.board.render())
            if step:
                input("Proceed? (press enter) ")
            elif delay_ms:
                time.sleep(delay_ms / 1000)

        color = game.next_player.color
        move = bots[color].select_move(game)
        if verbose:
            print(describe_move(color, move))
        game = game.apply_move(move)

    if verbose:
        print(game.board.render())
        print("Game over!")
    return game


def run_duel(bots: Dict[Color, Agent], num_games: int, board_size: int, seed: int) -> Dict[str, int]:
    """
    Play several games and tally how each one ended.

    Without territory scoring only resignations have a winner; games ended by
    two passes are counted as 'passed'.
    """
    tally = {'black': 0, 'white': 0, 'passed': 0}
    for _ in tqdm(range(num_games), desc="Duel", ncols=80):
        final = play_game(bots, board_size, seed=seed)
        winner = final.winner()
        if winner is Color.BLACK:
            tally['black'] += 1
        elif winner is Color.WHITE:
            tally['white'] += 1
        else:
            tally['passed'] += 1
    return tally


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Go bots with minimax search")
    parser.add_argument('--size', type=int, default=GAME_CONFIG['board_size'],
                        help='Board size (default: %(default)s)')
    parser.add_argument('--plies', type=int, default=SEARCH_CONFIG['plies'],
                        help='Minimax search depth (default: %(default)s)')
    parser.add_argument('--black', choices=BOT_CHOICES, default=PLAY_CONFIG['black'],
                        help='Bot playing Black (default: %(default)s)')
    parser.add_argument('--white', choices=BOT_CHOICES, default=PLAY_CONFIG['white'],
                        help='Bot playing White (default: %(default)s)')
    parser.add_argument('--games', type=int, default=PLAY_CONFIG['num_games'],
                        help='Number of games; more than one runs a silent duel')
    parser.add_argument('--delay-ms', type=int, default=PLAY_CONFIG['delay_ms'],
                        help='Pause between moves in single-game mode')
    parser.add_argument('--step', action='store_true', default=PLAY_CONFIG['step'],
                        help='Wait for enter before each move')
    parser.add_argument('--seed', type=int, default=PLAY_CONFIG['seed'],
                        help='Seed for random bots')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    return parser.parse_args(argv)


def run(argv=None):
    """Parse arguments and play; returns the duel tally or the final state."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    white_seed = None if args.seed is None else args.seed + 1
    bots = {
        Color.BLACK: build_bot(args.black, args.plies, args.seed),
        Color.WHITE: build_bot(args.white, args.plies, white_seed),
    }
    zobrist_seed = GAME_CONFIG['zobrist_seed']

    if args.games > 1:
        tally = run_duel(bots, args.games, args.size, zobrist_seed)
        print(f"\nBlack ({args.black}) wins: {tally['black']}")
        print(f"White ({args.white}) wins: {tally['white']}")
        print(f"Ended by passing: {tally['passed']}")
        return tally

    try:
        final = play_game(bots, args.size, seed=zobrist_seed, verbose=True,
                          delay_ms=args.delay_ms, step=args.step)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user")
        return None
    winner = final.winner()
    if winner is not None:
        print(f"{winner} wins by resignation")
    return final


def main(argv=None):
    run(argv)


if __name__ == "__main__":
    main()
