from __future__ import annotations

import time
from typing import Optional, Union

import numpy as np
import torch
from tqdm import tqdm

from .config import DEFAULT_EXPLORATION, SearchConfig
from .errors import InvariantViolation, NoLegalActions, NoMovesAvailable
from .games import game
from .tree import Tree

RandomSource = Union[np.random.Generator, int, None]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Accept a Generator, a seed or None (fresh unseeded generator)."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def _choose(moves: list, rng: np.random.Generator):
    # index instead of rng.choice so tuple-like moves are not turned into arrays
    return moves[int(rng.integers(len(moves)))]


# ------------------------------------
# Selection
# ------------------------------------


def ucb1(tree: Tree, node_id: int, exploration: float = DEFAULT_EXPLORATION) -> float:
    """
    UCB1 score of a node as seen from its parent:
        W(s,a) / N(s,a) + C * sqrt(ln N(s) / N(s,a))

    Wins are stored from the perspective of the player who made the move into
    the node, which is the player choosing among the parent's children.
    """
    node = tree[node_id]
    if node.parent is None:
        return 0.0
    if node.visits == 0:
        return float("inf")

    parent = tree[node.parent]
    exploitation = node.wins / node.visits
    exploration_term = exploration * np.sqrt(np.log(parent.visits) / node.visits)
    return float(exploitation + exploration_term)


def is_fully_expanded(tree: Tree, node_id: int) -> bool:
    """True iff there is a child for every legal move of the acting player."""
    node = tree[node_id]
    return len(node.children) == len(node.state.get_legal_moves())


def best_child(tree: Tree, node_id: int, exploration: float = DEFAULT_EXPLORATION) -> int:
    """Child with the highest UCB1 score; the first one wins ties."""
    node = tree[node_id]
    if not node.children:
        raise InvariantViolation(f"Node {node_id} has no children to descend into")

    ucbs = [ucb1(tree, child_id, exploration) for child_id in node.children]
    return node.children[int(np.argmax(ucbs))]


def select(tree: Tree, exploration: float = DEFAULT_EXPLORATION) -> int:
    """Walk down from the root while nodes are fully expanded and not terminal."""
    node_id = Tree.ROOT
    while not tree[node_id].is_terminal() and is_fully_expanded(tree, node_id):
        node_id = best_child(tree, node_id, exploration)
    return node_id


# ------------------------------------
# Expansion
# ------------------------------------


def expand(tree: Tree, node_id: int, rng: np.random.Generator) -> int:
    """Add one child for a random untried move and return its id."""
    node = tree[node_id]
    if node.is_terminal():
        raise InvariantViolation(f"Cannot expand terminal node {node_id}")

    legal_moves = node.state.get_legal_moves()
    if len(node.children) >= len(legal_moves):
        raise InvariantViolation(f"Cannot expand fully expanded node {node_id}")

    untried = [move for move in legal_moves if not tree.has_child(node_id, move)]
    if not untried:
        raise NoLegalActions(
            f"Node {node_id} is not fully expanded but has no untried moves"
        )

    move = _choose(untried, rng)
    return tree.add_child(node_id, move, node.state.apply_move(move))


# ------------------------------------
# Simulation
# ------------------------------------


def evaluate(state: game.GameState) -> float:
    """Outcome of a terminal state from player 1's perspective."""
    if not state.is_terminal():
        raise InvariantViolation("Cannot evaluate a non-terminal state")
    value = state.get_value()
    if value is None:
        raise InvariantViolation(f"Terminal state has no value: {state}")
    return float(value)


def simulate(state: game.GameState, rng: np.random.Generator) -> float:
    """Play uniformly random moves until the game ends. The tree is not touched."""
    while not state.is_terminal():
        legal_moves = state.get_legal_moves()
        if not legal_moves:
            raise NoLegalActions(f"Non-terminal state has no legal moves: {state}")
        state = state.apply_move(_choose(legal_moves, rng))
    return evaluate(state)


# ------------------------------------
# Backpropagation
# ------------------------------------


def reward_for(outcome: float, player: int) -> float:
    """Map an outcome in [-1, 1] to a reward in [0, 1] for `player` (draw = 0.5)."""
    return float(np.clip((outcome * player + 1) / 2, 0.0, 1.0))


def backpropagate(tree: Tree, node_id: int, outcome: float) -> None:
    """Count one visit on every node from `node_id` up to the root."""
    for current_id in tree.path_to_root(node_id):
        node = tree[current_id]
        node.visits += 1
        node.wins += reward_for(outcome, node.player)


# ------------------------------------
# Move selection
# ------------------------------------


def best_move(tree: Tree) -> game.Move:
    """Move of the most visited root child; the first one wins ties."""
    children = tree.children(Tree.ROOT)
    if not children:
        raise NoMovesAvailable("Root has no children, nothing was searched")

    visits = [child.visits for child in children]
    return children[int(np.argmax(visits))].move


def apply_temperature(policy: torch.Tensor, temperature: float) -> torch.Tensor:
    """
    Apply temperature to policy probabilities to control exploration vs exploitation.

    Args:
        policy: Probability distribution over moves
        temperature: Temperature parameter
            - 0: Deterministic (pick best move)
            - 1: Use raw probabilities (unchanged)
            - >1: More exploration (flatter distribution)
            - <1: Less exploration (sharper distribution)

    Returns:
        Modified policy distribution
    """
    if temperature == 0:
        best = torch.argmax(policy)
        new_policy = torch.zeros_like(policy)
        new_policy[best] = 1.0
        return new_policy
    elif temperature == 1.0:
        return policy
    else:
        # Work in log space for numerical stability
        log_policy = torch.log(policy + 1e-8)
        log_policy = log_policy / temperature
        log_policy = log_policy - torch.max(log_policy)

        new_policy = torch.exp(log_policy)
        # Moves never visited stay at zero
        new_policy[policy == 0] = 0.0
        return new_policy / torch.sum(new_policy)


def visit_policy(tree: Tree, temperature: float = 1.0) -> torch.Tensor:
    """Distribution over all encoded moves proportional to root child visits."""
    children = tree.children(Tree.ROOT)
    if not children:
        raise NoMovesAvailable("Root has no children, nothing was searched")

    num_moves = tree.root.state.__class__.num_possible_moves()
    counts = torch.zeros(num_moves, dtype=torch.float32)
    for child in children:
        counts[child.move.encode()] = float(child.visits)

    total = counts.sum()
    if total == 0:
        # Children exist but none was backed up yet: uniform over them
        for child in children:
            counts[child.move.encode()] = 1.0
        total = counts.sum()

    policy = counts / total
    if temperature == 0:
        # Same tie-break as best_move rather than torch.argmax
        policy = torch.zeros(num_moves, dtype=torch.float32)
        policy[best_move(tree).encode()] = 1.0
        return policy
    return apply_temperature(policy, temperature)


def root_statistics(tree: Tree) -> list[dict]:
    """Per-child visit and win statistics at the root, in insertion order."""
    return [
        {
            "move": child.move,
            "visits": child.visits,
            "wins": child.wins,
            "win_rate": child.win_rate(),
        }
        for child in tree.children(Tree.ROOT)
    ]


# ------------------------------------
# Search
# ------------------------------------


def run_iteration(tree: Tree, exploration: float, rng: np.random.Generator) -> None:
    """One pass of select -> expand + simulate (or evaluate) -> backpropagate."""
    node_id = select(tree, exploration)
    node = tree[node_id]

    if node.is_terminal():
        outcome = evaluate(node.state)
    else:
        node_id = expand(tree, node_id, rng)
        outcome = simulate(tree[node_id].state, rng)

    backpropagate(tree, node_id, outcome)


def run_mcts(tree: Tree, config: SearchConfig, rng: RandomSource = None) -> int:
    """Run up to config.iterations iterations on `tree`. Returns how many ran."""
    config.validate()
    rng = make_rng(rng)
    start_time = time.time()
    completed = 0

    for _ in tqdm(
        range(config.iterations),
        desc="MCTS iterations",
        leave=False,
        disable=not config.show_progress,
    ):
        if config.time_limit is not None and time.time() - start_time >= config.time_limit:
            break
        run_iteration(tree, config.exploration, rng)
        completed += 1

    return completed


def search_tree(
    initial_state: game.GameState,
    config: Optional[SearchConfig] = None,
    rng: RandomSource = None,
) -> Tree:
    """Build a fresh tree from `initial_state` and grow it. `rng` defaults to config.seed."""
    if config is None:
        config = SearchConfig()
    if rng is None:
        rng = config.seed

    tree = Tree(initial_state)
    run_mcts(tree, config, rng)
    return tree


def search(
    initial_state: game.GameState,
    n_iterations: int,
    rng: RandomSource = None,
    exploration: float = DEFAULT_EXPLORATION,
    time_limit: Optional[float] = None,
) -> game.Move:
    """Run `n_iterations` of UCT search and return the most visited root move."""
    config = SearchConfig(
        iterations=n_iterations, exploration=exploration, time_limit=time_limit
    )
    tree = search_tree(initial_state, config, rng)
    return best_move(tree)
