"""Play players against each other on any of the game models."""

import argparse
import sys
from typing import Dict, Optional

from tqdm import tqdm

from .config import DEFAULT_EXPLORATION
from .errors import MCTSError
from .games import load_game_module
from .players import Player, RandomPlayer, MCTSPlayer, GreedyPlayer, HumanPlayer

PLAYER_TYPES = ["random", "greedy", "human", "mcts"]


def play_games(player1: Player, player2: Player, game_module, num_games: int) -> Dict[str, float]:
    """Play n games between two players and return win counts."""

    wins_p1 = 0
    wins_p2 = 0
    draws = 0

    for game_num in tqdm(
        range(num_games), desc=f"{player1.name} vs {player2.name}", leave=False
    ):
        # Alternate who goes first
        if game_num % 2 == 0:
            first_player, second_player = player1, player2
        else:
            first_player, second_player = player2, player1

        winner = play_single_game(first_player, second_player, game_module)

        # Count results (always from player1's perspective)
        if winner == player1.name:
            wins_p1 += 1
        elif winner == player2.name:
            wins_p2 += 1
        else:
            draws += 1

    return {
        "player1_wins": wins_p1,
        "player2_wins": wins_p2,
        "draws": draws,
        "total_games": num_games,
        "player1_win_rate": wins_p1 / num_games if num_games else 0.0,
        "player2_win_rate": wins_p2 / num_games if num_games else 0.0,
        "draw_rate": draws / num_games if num_games else 0.0,
    }


def play_single_game(player1: Player, player2: Player, game_module) -> Optional[str]:
    """Play a single game and return winner name (or None for draw).

    player1 acts whenever party 1 is to move, player2 whenever party -1 is.
    """

    state = game_module.GameState.initial_state()

    while not state.is_terminal():
        current_player, other_player = (
            (player1, player2) if state.current_player == 1 else (player2, player1)
        )
        try:
            move = current_player.select_move(state)
            state = state.apply_move(move)
        except ValueError as e:
            # If a player makes an invalid move, they lose
            print(
                f"ERROR: game lost due to illegal move by player {current_player.name}: {e}"
            )
            return other_player.name

    final_value = state.get_value()
    if final_value is None or final_value == 0:
        return None  # Draw
    elif final_value > 0:
        return player1.name
    else:
        return player2.name


def create_player(
    player_type: str,
    iterations: int = 1000,
    exploration: float = DEFAULT_EXPLORATION,
    time_limit: Optional[float] = None,
    seed: Optional[int] = None,
    name: Optional[str] = None,
) -> Player:
    """Create a player of the specified type."""

    if player_type == "random":
        return RandomPlayer(name=name or "Random", seed=seed)

    elif player_type == "greedy":
        return GreedyPlayer(name=name or "Greedy", seed=seed)

    elif player_type == "human":
        return HumanPlayer(name=name or "Human")

    elif player_type == "mcts":
        return MCTSPlayer(
            iterations=iterations,
            exploration=exploration,
            time_limit=time_limit,
            seed=seed,
            name=name or f"MCTS({iterations})",
        )

    else:
        raise ValueError(f"Unknown player type: {player_type}. Available: {', '.join(PLAYER_TYPES)}")


def main():
    parser = argparse.ArgumentParser(description="Evaluate players against each other")

    parser.add_argument("--game", default="tictactoe", help="Game module to use (default: tictactoe)")

    parser.add_argument("--player1", required=True, choices=PLAYER_TYPES, help="Type of player 1")
    parser.add_argument("--player2", required=True, choices=PLAYER_TYPES, help="Type of player 2")
    parser.add_argument("--player1-name", help="Custom name for player 1")
    parser.add_argument("--player2-name", help="Custom name for player 2")

    parser.add_argument("--games", type=int, default=100, help="Number of games to play (default: 100)")
    parser.add_argument("--iterations", type=int, default=1000,
                        help="MCTS iterations per move (default: 1000)")
    parser.add_argument("--exploration", type=float, default=DEFAULT_EXPLORATION,
                        help="UCB1 exploration constant (default: sqrt(2))")
    parser.add_argument("--time-limit", type=float, help="MCTS time limit per move in seconds")
    parser.add_argument("--seed", type=int, help="Random seed (player 2 uses seed + 1)")

    args = parser.parse_args()

    try:
        game_module = load_game_module(args.game)
        print(f"🎮 Loaded game module: {args.game}")
    except (ImportError, AttributeError) as e:
        print(f"❌ Failed to load game module '{args.game}': {e}")
        sys.exit(1)

    seed2 = None if args.seed is None else args.seed + 1
    try:
        player1 = create_player(args.player1, args.iterations, args.exploration, args.time_limit,
                                args.seed, args.player1_name or f"Player1({args.player1})")
        player2 = create_player(args.player2, args.iterations, args.exploration, args.time_limit,
                                seed2, args.player2_name or f"Player2({args.player2})")
    except ValueError as e:
        print(f"❌ Error creating players: {e}")
        sys.exit(1)

    print(f"👤 Player 1: {player1.name} ({args.player1})")
    print(f"👤 Player 2: {player2.name} ({args.player2})")
    print(f"🎯 Playing {args.games} games...")

    try:
        results = play_games(player1, player2, game_module, args.games)
    except MCTSError as e:
        print(f"❌ Error during evaluation: {e}")
        sys.exit(1)

    print(f"\n📊 Results after {results['total_games']} games:")
    print(f"  {player1.name}: {results['player1_wins']} wins ({results['player1_win_rate']:.1%})")
    print(f"  {player2.name}: {results['player2_wins']} wins ({results['player2_win_rate']:.1%})")
    print(f"  Draws: {results['draws']} ({results['draw_rate']:.1%})")


if __name__ == "__main__":
    main()
