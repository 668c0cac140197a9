"""Tests for players and the evaluation arena."""

import sys

import numpy as np
import pytest

from uctsearch import evaluation, search_cli
from uctsearch.games import coin_toss, tictactoe
from uctsearch.games.coin_toss import HEADS
from uctsearch.games.tictactoe import TicTacToeMove, TicTacToeState
from uctsearch.players import GreedyPlayer, MCTSPlayer, Player, RandomPlayer


class FixedPlayer(Player):
    """Always plays the same move, legal or not."""

    def __init__(self, move, name="Fixed"):
        super().__init__(name)
        self.move = move

    def select_move(self, state):
        return self.move


class TestPlayers:
    def test_random_player_plays_legal_moves(self, ttt_state):
        player = RandomPlayer(seed=0)
        for _ in range(20):
            assert player.select_move(ttt_state) in ttt_state.get_legal_moves()

    def test_random_player_without_moves(self):
        state = coin_toss.CoinTossState(round=10)
        with pytest.raises(ValueError):
            RandomPlayer(seed=0).select_move(state)

    def test_mcts_player_calls_heads(self, coin_state):
        player = MCTSPlayer(iterations=500, seed=0)

        assert player.select_move(coin_state) == HEADS
        assert player.last_tree is not None
        assert player.last_tree.root.visits == 501

    def test_mcts_player_sampling(self, ttt_state):
        player = MCTSPlayer(iterations=100, temperature=1.0, seed=4)
        assert player.select_move(ttt_state) in ttt_state.get_legal_moves()

    def test_greedy_player_takes_win(self):
        board = np.array([[1, 1, 0], [-1, -1, 0], [0, 0, 0]])
        state = TicTacToeState(board, current_player=1)

        assert GreedyPlayer(seed=0).select_move(state) == TicTacToeMove(0, 2)

    def test_greedy_player_blocks(self):
        board = np.array([[1, 0, 0], [-1, -1, 0], [1, 0, 0]])
        state = TicTacToeState(board, current_player=1)

        assert GreedyPlayer(seed=0).select_move(state) == TicTacToeMove(1, 2)


class TestArena:
    def test_single_game_has_result(self):
        winner = evaluation.play_single_game(
            GreedyPlayer(seed=1), RandomPlayer(name="Rand", seed=2), tictactoe
        )
        assert winner in ("Greedy", "Rand", None)

    def test_illegal_move_forfeits(self):
        cheater = FixedPlayer(TicTacToeMove(0, 0), name="Cheater")
        winner = evaluation.play_single_game(cheater, RandomPlayer(name="Rand", seed=0), tictactoe)
        assert winner == "Rand"

    def test_play_games_totals(self):
        results = evaluation.play_games(
            GreedyPlayer(seed=1), RandomPlayer(name="Rand", seed=2), tictactoe, 6
        )
        assert results["total_games"] == 6
        assert results["player1_wins"] + results["player2_wins"] + results["draws"] == 6
        assert results["player1_win_rate"] + results["player2_win_rate"] + results[
            "draw_rate"
        ] == pytest.approx(1.0)

    def test_coin_toss_mcts_always_wins(self):
        player = MCTSPlayer(iterations=500, seed=0, name="MCTS")
        winner = evaluation.play_single_game(player, RandomPlayer(name="Rand", seed=0), coin_toss)
        assert winner == "MCTS"

    def test_create_player(self):
        assert isinstance(evaluation.create_player("mcts", iterations=10), MCTSPlayer)
        assert evaluation.create_player("random", name="R").name == "R"
        with pytest.raises(ValueError):
            evaluation.create_player("network")


class TestCommandLine:
    def test_search_command(self, monkeypatch, capsys):
        monkeypatch.setattr(
            sys, "argv", ["uctsearch-search", "--game", "coin_toss", "--iterations", "500", "--seed", "0"]
        )
        search_cli.main()

        out = capsys.readouterr().out
        assert "Best move: Heads" in out
        assert "root visits: 501" in out

    def test_search_command_rejects_bad_config(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["uctsearch-search", "--iterations", "-5"])
        with pytest.raises(SystemExit):
            search_cli.main()

    def test_eval_command(self, monkeypatch, capsys):
        monkeypatch.setattr(
            sys,
            "argv",
            ["uctsearch-eval", "--game", "tictactoe", "--player1", "greedy",
             "--player2", "random", "--games", "4", "--seed", "0"],
        )
        evaluation.main()

        out = capsys.readouterr().out
        assert "Results after 4 games" in out
