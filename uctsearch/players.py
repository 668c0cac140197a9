"""Different player implementations for game evaluation."""

import time
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from .config import DEFAULT_EXPLORATION, SearchConfig
from .games import game
from . import mcts


class Player(ABC):
    """Base class for all players."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def select_move(self, state: game.GameState) -> game.Move:
        """Select a move given the current game state."""
        pass

    def __str__(self) -> str:
        return self.name


class RandomPlayer(Player):
    """Player that selects moves uniformly at random from legal moves."""

    def __init__(self, name: str = "Random", seed: Optional[int] = None):
        super().__init__(name)
        self.rng = np.random.default_rng(seed)

    def select_move(self, state: game.GameState) -> game.Move:
        legal_moves = state.get_legal_moves()
        if not legal_moves:
            raise ValueError("No legal moves available")
        return legal_moves[int(self.rng.integers(len(legal_moves)))]


class MCTSPlayer(Player):
    """Player running a fresh UCT search with random rollouts for every move."""

    def __init__(
        self,
        iterations: int = 1000,
        exploration: float = DEFAULT_EXPLORATION,
        temperature: float = 0.0,  # Default to deterministic play for evaluation
        time_limit: Optional[float] = None,
        seed: Optional[int] = None,
        name: str = "MCTS",
    ):
        super().__init__(name)
        self.config = SearchConfig(
            iterations=iterations,
            exploration=exploration,
            temperature=temperature,
            time_limit=time_limit,
            seed=seed,
        )
        self.config.validate()
        # One generator for the whole game so successive searches differ
        self.rng = np.random.default_rng(seed)
        self.last_tree = None
        self.last_search_seconds = 0.0

    def select_move(self, state: game.GameState) -> game.Move:
        start_time = time.time()
        tree = mcts.search_tree(state, self.config, self.rng)
        self.last_tree = tree
        self.last_search_seconds = time.time() - start_time

        if self.config.temperature == 0:
            return mcts.best_move(tree)

        # Stochastic: sample from the visit distribution over the root's children
        policy = mcts.visit_policy(tree, self.config.temperature).numpy()
        moves = [child.move for child in tree.children(tree.ROOT)]
        weights = np.array([policy[move.encode()] for move in moves], dtype=float)
        weights /= weights.sum()
        return moves[int(self.rng.choice(len(moves), p=weights))]


class GreedyPlayer(Player):
    """Takes an immediate win if there is one and avoids handing the opponent one."""

    def __init__(self, name: str = "Greedy", seed: Optional[int] = None):
        super().__init__(name)
        self.rng = np.random.default_rng(seed)

    def select_move(self, state: game.GameState) -> game.Move:
        legal_moves = state.get_legal_moves()
        if not legal_moves:
            raise ValueError("No legal moves available")

        best_moves = []
        best_score = float("-inf")

        for move in legal_moves:
            next_state = state.apply_move(move)
            score = self._evaluate_state(next_state, state.current_player)

            if score > best_score:
                best_score = score
                best_moves = [move]
            elif score == best_score:
                best_moves.append(move)

        return best_moves[int(self.rng.integers(len(best_moves)))]

    def _evaluate_state(self, new_state: game.GameState, player: int) -> float:
        """Score a successor state for `player` by looking one reply ahead."""
        if new_state.is_terminal():
            return new_state.get_value() * player

        if new_state.current_player == player:
            return 0.0

        # Opponent to move: penalise states where they have a winning reply
        for reply in new_state.get_legal_moves():
            after = new_state.apply_move(reply)
            if after.is_terminal() and after.get_value() * player < 0:
                return -1.0
        return 0.0


class HumanPlayer(Player):
    """Interactive human player."""

    def __init__(self, name: str = "Human"):
        super().__init__(name)

    def select_move(self, state: game.GameState) -> game.Move:
        legal_moves = state.get_legal_moves()

        print(f"\nCurrent state:\n{state}")
        print("Legal moves:")
        for i, move in enumerate(legal_moves):
            print(f"{i}: {move}")

        while True:
            try:
                choice = int(input(f"Select move (0-{len(legal_moves) - 1}): "))
                if 0 <= choice < len(legal_moves):
                    return legal_moves[choice]
                else:
                    print("Invalid choice. Please try again.")
            except ValueError:
                print("Please enter a valid number.")
