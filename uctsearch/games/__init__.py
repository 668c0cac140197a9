"""Game models the search can be run on."""

import importlib

from types import ModuleType
from . import coin_toss
from . import tictactoe
from . import connect_four


def load_game_module(module_name: str) -> ModuleType:
    """Dynamically load and validate a game module."""
    try:
        full_module_name = f"uctsearch.games.{module_name}"
        game_module = importlib.import_module(full_module_name)
    except ImportError as e:
        raise ImportError(f"Could not import game module '{module_name}': {e}")

    required_classes = ["GameState", "Move"]
    for class_name in required_classes:
        if not hasattr(game_module, class_name):
            raise AttributeError(
                f"Game module '{module_name}' missing required class: {class_name}"
            )

    GameState = getattr(game_module, "GameState")
    required_gamestate_methods = [
        "num_possible_moves",
        "initial_state",
        "get_legal_moves",
        "apply_move",
        "is_terminal",
        "get_value",
    ]
    for method_name in required_gamestate_methods:
        if not hasattr(GameState, method_name):
            raise AttributeError(
                f"GameState of '{module_name}' missing required method: {method_name}"
            )

    return game_module


__all__ = ["coin_toss", "tictactoe", "connect_four", "load_game_module"]
