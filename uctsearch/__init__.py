"""uctsearch - Monte Carlo Tree Search with UCB1 selection and random rollouts."""

__version__ = "0.1.0"

# Example usage:
#   from uctsearch import search
#   from uctsearch.games import coin_toss
#   move = search(coin_toss.GameState.initial_state(), 1000, rng=0)
from uctsearch.mcts import search, search_tree, best_move, visit_policy
from uctsearch.tree import Node, Tree
from uctsearch.config import SearchConfig
from uctsearch.errors import MCTSError, InvariantViolation, NoMovesAvailable, NoLegalActions
from uctsearch.players import RandomPlayer, MCTSPlayer, GreedyPlayer, HumanPlayer
from uctsearch.games import load_game_module
from uctsearch.evaluation import play_games, play_single_game


__all__ = [
    "search",
    "search_tree",
    "best_move",
    "visit_policy",
    "Node",
    "Tree",
    "SearchConfig",
    "MCTSError",
    "InvariantViolation",
    "NoMovesAvailable",
    "NoLegalActions",
    "RandomPlayer",
    "MCTSPlayer",
    "GreedyPlayer",
    "HumanPlayer",
    "load_game_module",
    "play_games",
    "play_single_game",
]
