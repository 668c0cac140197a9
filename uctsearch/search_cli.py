"""Run one search from a game's initial state and report the chosen move."""

import argparse
import sys

from . import mcts
from .config import DEFAULT_EXPLORATION, SearchConfig
from .errors import MCTSError
from .games import load_game_module


def main():
    parser = argparse.ArgumentParser(description="Run UCT search from a game's initial state")

    parser.add_argument("--game", default="coin_toss", help="Game module to use (default: coin_toss)")
    parser.add_argument("--iterations", type=int, default=1000,
                        help="Number of search iterations (default: 1000)")
    parser.add_argument("--exploration", type=float, default=DEFAULT_EXPLORATION,
                        help="UCB1 exploration constant (default: sqrt(2))")
    parser.add_argument("--time-limit", type=float, help="Stop after this many seconds")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible searches")
    parser.add_argument("--temperature", type=float, default=1.0,
                        help="Temperature of the printed visit policy (default: 1.0)")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("--save-config", type=str, help="Write the effective configuration to JSON")
    parser.add_argument("--config", type=str, help="Load configuration from JSON file")

    args = parser.parse_args()

    try:
        if args.config:
            print(f"📝 Loading configuration from: {args.config}")
            config = SearchConfig.load(args.config)
        else:
            config = SearchConfig(
                game_module=args.game,
                iterations=args.iterations,
                exploration=args.exploration,
                time_limit=args.time_limit,
                seed=args.seed,
                temperature=args.temperature,
                show_progress=args.progress,
            )
            config.validate()
    except (OSError, TypeError, ValueError) as e:
        print(f"❌ Invalid configuration: {e}")
        sys.exit(1)

    if args.save_config:
        config.save(args.save_config)
        print(f"💾 Configuration saved: {args.save_config}")

    try:
        game_module = load_game_module(config.game_module)
    except (ImportError, AttributeError) as e:
        print(f"❌ {e}")
        sys.exit(1)

    state = game_module.GameState.initial_state()
    print(f"🎮 Searching {config.game_module} with {config.iterations} iterations")
    print(state)

    try:
        tree = mcts.search_tree(state, config)
        move = mcts.best_move(tree)
        policy = mcts.visit_policy(tree, config.temperature)
    except MCTSError as e:
        print(f"❌ Search failed: {e}")
        sys.exit(1)

    print(f"\n🌳 Tree size: {len(tree)} nodes, root visits: {tree.root.visits}")
    for stats in mcts.root_statistics(tree):
        print(
            f"  {str(stats['move']):>10}  visits={stats['visits']:<6} "
            f"win_rate={stats['win_rate']:.3f}  "
            f"policy={policy[stats['move'].encode()].item():.3f}"
        )
    print(f"\n✅ Best move: {move}")


if __name__ == "__main__":
    main()
