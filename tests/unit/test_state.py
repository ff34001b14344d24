"""
Unit tests for the Go game state.

Tests verify:
1. Termination after two passes or a resignation
2. Self-capture and ko rejection
3. Move enumeration order
4. States are never mutated by apply_move
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from go_minimax.errors import OccupiedPointError
from go_minimax.game.go import Board, Color, GoState, Move, Player, Point, stone_difference


def play(state, *moves):
    for move in moves:
        state = state.apply_move(move)
    return state


def ko_position():
    """Black has just captured at (2,2); White retaking would repeat a position."""
    return play(
        GoState.new_game(19),
        Move.play(Point(1, 2)),    # Black
        Move.play(Point(1, 3)),    # White
        Move.play(Point(2, 1)),    # Black
        Move.play(Point(2, 2)),    # White
        Move.play(Point(3, 2)),    # Black
        Move.play(Point(3, 3)),    # White
        Move.play(Point(10, 10)),  # Black
        Move.play(Point(2, 4)),    # White
        Move.play(Point(2, 3)),    # Black captures (2,2)
    )


class TestTermination:
    """Test is_over."""

    def test_new_game_is_not_over(self):
        assert not GoState.new_game(19).is_over()

    def test_game_is_not_over_after_one_pass(self):
        state = play(GoState.new_game(19), Move.play(Point(1, 1)), Move.pass_turn())
        assert not state.is_over()

    def test_game_is_over_after_two_consecutive_passes(self):
        state = play(GoState.new_game(19), Move.pass_turn(), Move.pass_turn())
        assert state.is_over()

    def test_passes_separated_by_play_do_not_end_game(self):
        state = play(GoState.new_game(9), Move.pass_turn(), Move.play(Point(1, 1)), Move.pass_turn())
        assert not state.is_over()

    def test_play_after_pass_keeps_game_open(self):
        state = play(GoState.new_game(9), Move.pass_turn(), Move.play(Point(5, 5)))
        assert not state.is_over()

    def test_resign_ends_game(self):
        state = play(GoState.new_game(9), Move.resign())
        assert state.is_over()
        assert state.winner() is Color.WHITE

    def test_no_winner_without_resignation(self):
        state = play(GoState.new_game(9), Move.pass_turn(), Move.pass_turn())
        assert state.winner() is None


class TestSelfCapture:
    """Test self-capture detection."""

    def test_self_capture(self):
        board = Board.from_string("""
            .o.
            o.o
            .o.
        """)
        game = GoState.from_board(board, Player.black())

        assert game.is_move_self_capture(Color.BLACK, Move.play(Point(2, 2)))

    def test_self_capture_is_not_valid_move(self):
        board = Board.from_string("""
            .o.
            o.o
            .o.
        """)
        game = GoState.from_board(board, Player.black())

        assert not game.is_valid_move(Move.play(Point(2, 2)))

    def test_move_is_not_self_capture_if_other_group_is_killed(self):
        board = Board.from_string("""
            ooo
            o.o
            ooo
        """)
        game = GoState.from_board(board, Player.black())

        assert not game.is_move_self_capture(Color.BLACK, Move.play(Point(2, 2)))
        assert game.is_valid_move(Move.play(Point(2, 2)))

    def test_predicates_are_false_for_non_placements(self):
        board = Board.from_string("""
            x..
            ...
            ...
        """)
        game = GoState.from_board(board, Player.white())

        assert not game.is_move_self_capture(Color.WHITE, Move.play(Point(1, 1)))
        assert not game.does_move_violate_ko(Color.WHITE, Move.play(Point(1, 1)))
        assert not game.is_move_self_capture(Color.WHITE, Move.pass_turn())
        assert not game.does_move_violate_ko(Color.WHITE, Move.resign())


class TestKo:
    """Test positional superko."""

    def test_move_that_violates_ko_is_recognized(self):
        state = ko_position()

        assert state.does_move_violate_ko(Color.WHITE, Move.play(Point(2, 2)))
        assert not state.does_move_violate_ko(Color.WHITE, Move.play(Point(14, 14)))

    def test_ko_move_is_not_valid(self):
        state = ko_position()

        assert state.next_player.color is Color.WHITE
        assert not state.is_valid_move(Move.play(Point(2, 2)))
        assert state.is_valid_move(Move.play(Point(14, 14)))

    def test_ko_retake_is_not_self_capture(self):
        state = ko_position()
        assert not state.is_move_self_capture(Color.WHITE, Move.play(Point(2, 2)))


class TestValidMoves:
    """Test move validation and enumeration."""

    def test_is_valid_move(self):
        board = Board.from_string("""
            .o.o.x.x.
            x.x.o.o.x
            .x.o.o.ox
            x.x.x.xx.
            xx.x.oo.o
            x.o.xx.x.
            .o.oo.o.o
            o.x.xx.x.
            .x.o.oxox
        """)
        game = GoState.from_board(board, Player.white())

        assert game.is_valid_move(Move.play(Point(7, 1)))

        board = Board.from_string("""
            .xxxoo.xx
            xxxxxxxx.
            xxxxxxxxx
            .x.xx.oxx
            xxxxxxxxx
            xx.xxxxox
            xxxxoxxox
            xxxxooxoo
            xx.xoooo.
        """)
        game = GoState.from_board(board, Player.black())

        assert game.is_valid_move(Move.play(Point(1, 7)))

    def test_occupied_and_off_board_points_are_invalid(self):
        board = Board.from_string("""
            x..
            ...
            ...
        """)
        game = GoState.from_board(board, Player.white())

        assert not game.is_valid_move(Move.play(Point(1, 1)))
        assert not game.is_valid_move(Move.play(Point(4, 4)))

    def test_pass_and_resign_are_always_valid(self):
        state = play(GoState.new_game(5), Move.pass_turn(), Move.pass_turn())

        assert state.is_valid_move(Move.pass_turn())
        assert state.is_valid_move(Move.resign())
        assert not state.is_valid_move(Move.play(Point(3, 3)))

    def test_valid_moves(self):
        board = Board.from_string("""
            ooo
            o.o
            oo.
        """)

        game = GoState.from_board(board, Player.black())
        assert list(game.valid_moves()) == [Move.pass_turn(), Move.resign()]

        game = GoState.from_board(board, Player.white())
        assert list(game.valid_moves()) == [
            Move.play(Point(2, 2)),
            Move.play(Point(3, 3)),
            Move.pass_turn(),
            Move.resign(),
        ]

    def test_finished_game_only_offers_resign(self):
        state = play(GoState.new_game(3), Move.pass_turn(), Move.pass_turn())
        assert list(state.valid_moves()) == [Move.resign()]

    def test_valid_moves_is_restartable(self):
        state = GoState.new_game(2)
        assert list(state.valid_moves()) == list(state.valid_moves())
        assert len(list(state.valid_moves())) == 4 + 2


class TestApplyMove:
    """Test state transitions."""

    def test_apply_move_does_not_mutate_state(self):
        state = GoState.new_game(5)
        board_before = state.board.copy()

        next_state = state.apply_move(Move.play(Point(3, 3)))

        assert state.board == board_before
        assert state.moves == ()
        assert state.previous_states == ()
        assert state.next_player == Player.black()
        assert next_state.board.get(Point(3, 3)) is Color.BLACK

    def test_players_alternate(self):
        state = play(GoState.new_game(5), Move.play(Point(1, 1)))
        assert state.next_player.color is Color.WHITE
        assert state.previous_player.color is Color.BLACK

        state = state.apply_move(Move.pass_turn())
        assert state.next_player.color is Color.BLACK

    def test_history_grows_by_one_entry_per_move(self):
        state = play(GoState.new_game(5), Move.play(Point(1, 1)), Move.pass_turn(), Move.play(Point(2, 2)))

        assert len(state.previous_states) == 3
        assert len(state.moves) == 3
        assert state.previous_states[-1] == (Color.WHITE, state.board.hash)
        assert state.previous_states[1][0] is Color.BLACK
        assert state.last_move == Move.play(Point(2, 2))

    def test_captures_are_tallied_on_mover(self):
        board = Board.from_string("""
            xx.
            oo.
            ...
        """)
        state = GoState.from_board(board, Player.white())

        next_state = state.apply_move(Move.play(Point(1, 3)))

        assert next_state.previous_player == Player(Color.WHITE, captured=2)
        assert next_state.next_player == Player(Color.BLACK, captured=0)
        assert state.next_player.captured == 0

    def test_playing_on_occupied_point_raises(self):
        state = play(GoState.new_game(5), Move.play(Point(1, 1)))
        with pytest.raises(OccupiedPointError):
            state.apply_move(Move.play(Point(1, 1)))


class TestEvaluation:
    """Test the stone_difference heuristic."""

    def test_new_game_is_even(self):
        assert stone_difference(GoState.new_game(5)) == 0

    def test_opponent_pass_is_rewarded(self):
        state = play(GoState.new_game(5), Move.pass_turn())
        assert stone_difference(state) == 50

    def test_opponent_edge_play_is_rewarded(self):
        state = play(GoState.new_game(5), Move.play(Point(1, 3)))
        # White to move: one Black stone against, edge bonus for
        assert stone_difference(state) == -1 + 10

    def test_centre_play_counts_material_only(self):
        state = play(GoState.new_game(5), Move.play(Point(3, 3)), Move.play(Point(2, 2)))
        assert stone_difference(state) == 0

    def test_captures_count_as_material(self):
        board = Board.from_string("""
            xx.
            oo.
            ...
        """)
        state = GoState.from_board(board, Player.white()).apply_move(Move.play(Point(1, 3)))
        # Black to move: no stones left; White has 3 stones and 2 captures, played on the edge
        assert stone_difference(state) == 0 - 5 + 10
