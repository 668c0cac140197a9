"""Tests for the game models."""

import numpy as np
import pytest

from uctsearch.games import load_game_module
from uctsearch.games.coin_toss import CoinTossMove, CoinTossState, HEADS, TAILS
from uctsearch.games.connect_four import ConnectFourMove, ConnectFourState
from uctsearch.games.tictactoe import TicTacToeMove, TicTacToeState


class TestCoinToss:
    def test_initial_state(self, coin_state):
        assert coin_state.my_score == 0
        assert coin_state.op_score == 0
        assert coin_state.round == 0
        assert coin_state.current_player == 1
        assert not coin_state.is_terminal()
        assert coin_state.get_value() is None
        assert coin_state.get_legal_moves() == [HEADS, TAILS]

    def test_moves_score(self, coin_state):
        after_heads = coin_state.apply_move(HEADS)
        assert (after_heads.my_score, after_heads.op_score, after_heads.round) == (1, 0, 1)

        after_tails = coin_state.apply_move(TAILS)
        assert (after_tails.my_score, after_tails.op_score, after_tails.round) == (0, 1, 1)

    def test_apply_is_pure(self, coin_state):
        first = coin_state.apply_move(HEADS)
        second = coin_state.apply_move(HEADS)

        assert first == second
        assert hash(first) == hash(second)
        assert coin_state == CoinTossState.initial_state()

    def test_terminal_after_ten_rounds(self, coin_state):
        state = coin_state
        for _ in range(10):
            state = state.apply_move(HEADS)

        assert state.is_terminal()
        assert state.get_value() == 1.0
        assert state.get_legal_moves() == []
        with pytest.raises(ValueError):
            state.apply_move(HEADS)

    def test_tie_is_a_loss(self):
        assert CoinTossState(my_score=5, op_score=5, round=10).get_value() == -1.0

    def test_legal_moves_per_party(self):
        state = CoinTossState(my_possible_actions=(HEADS,), op_possible_actions=(TAILS,))
        assert state.get_legal_moves(1) == [HEADS]
        assert state.get_legal_moves(-1) == [TAILS]
        with pytest.raises(ValueError):
            state.apply_move(TAILS)

    def test_move_encoding(self):
        assert CoinTossMove.decode(HEADS.encode()) == HEADS
        assert str(TAILS) == "Tails"
        with pytest.raises(ValueError):
            CoinTossMove.decode(2)


class TestTicTacToe:
    def test_initial_state(self, ttt_state):
        assert len(ttt_state.get_legal_moves()) == 9
        assert not ttt_state.is_terminal()

    def test_occupied_square(self, ttt_state):
        state = ttt_state.apply_move(TicTacToeMove(1, 1))
        assert state.current_player == -1
        with pytest.raises(ValueError):
            state.apply_move(TicTacToeMove(1, 1))

    def test_apply_is_pure(self, ttt_state):
        first = ttt_state.apply_move(TicTacToeMove(0, 0))
        second = ttt_state.apply_move(TicTacToeMove(0, 0))
        assert first == second
        assert ttt_state == TicTacToeState.initial_state()

    def test_board_is_read_only(self, ttt_state):
        with pytest.raises(ValueError):
            ttt_state.board[0, 0] = 1

    def test_win_value_is_objective(self):
        board = np.array([[1, 1, 1], [-1, -1, 0], [0, 0, 0]])
        state = TicTacToeState(board, current_player=-1)

        assert state.is_terminal()
        assert state.get_value() == 1.0
        assert state.get_legal_moves() == []

        board = np.array([[-1, -1, -1], [1, 1, 0], [1, 0, 0]])
        assert TicTacToeState(board, current_player=1).get_value() == -1.0

    def test_draw(self):
        board = np.array([[1, -1, 1], [1, -1, -1], [-1, 1, 1]])
        state = TicTacToeState(board, current_player=-1)
        assert state.is_terminal()
        assert state.get_value() == 0.0

    def test_move_encoding(self):
        move = TicTacToeMove(2, 1)
        assert move.encode() == 7
        assert TicTacToeMove.decode(7) == move


class TestConnectFour:
    def test_vertical_win(self):
        state = ConnectFourState.initial_state()
        for _ in range(3):
            state = state.apply_move(ConnectFourMove(0))
            state = state.apply_move(ConnectFourMove(1))
        state = state.apply_move(ConnectFourMove(0))

        assert state.is_terminal()
        assert state.get_value() == 1.0
        assert state.get_legal_moves() == []

    def test_full_column(self):
        state = ConnectFourState.initial_state()
        for _ in range(6):
            state = state.apply_move(ConnectFourMove(2))
        # Alternating pieces in one column never connect four
        assert not state.is_terminal()
        assert ConnectFourMove(2) not in state.get_legal_moves()
        with pytest.raises(ValueError):
            state.apply_move(ConnectFourMove(2))

    def test_full_board_from_array_is_a_draw(self):
        # Each row shifts the ++-- pattern by two columns, so no line reaches four
        rows = [[1, 1, -1, -1, 1, 1, -1], [-1, -1, 1, 1, -1, -1, 1]]
        state = ConnectFourState(np.array(rows * 3))

        assert state.move_count == 42
        assert state.is_terminal()
        assert state.get_value() == 0.0
        assert state.get_legal_moves() == []

    def test_won_board_from_array(self):
        board = np.zeros((6, 7), dtype=int)
        board[0, 0:4] = 1
        board[1, 0:3] = -1
        state = ConnectFourState(board, current_player=-1)

        assert state.move_count == 7
        assert list(state.column_heights) == [2, 2, 2, 1, 0, 0, 0]
        assert state.is_terminal()
        assert state.get_value() == 1.0
        assert state.get_legal_moves() == []
        with pytest.raises(ValueError):
            state.apply_move(ConnectFourMove(5))

    def test_diagonal_win_from_array(self):
        board = np.zeros((6, 7), dtype=int)
        for i in range(4):
            board[i, 3 + i] = -1
        # Pieces holding up the diagonal
        board[0, 4:7] = 1
        board[1, 5:7] = 1
        board[2, 6] = 1
        state = ConnectFourState(board, current_player=1)

        assert state.is_terminal()
        assert state.get_value() == -1.0

    def test_legal_moves(self):
        state = ConnectFourState.initial_state()
        assert [move.column for move in state.get_legal_moves()] == list(range(7))


class TestGameLoader:
    def test_load_known_games(self):
        for name in ("coin_toss", "tictactoe", "connect_four"):
            module = load_game_module(name)
            assert hasattr(module, "GameState")
            assert hasattr(module, "Move")

    def test_load_unknown_game(self):
        with pytest.raises(ImportError):
            load_game_module("does_not_exist")
