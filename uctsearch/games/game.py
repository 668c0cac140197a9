"""Abstract base classes for games and moves."""

from abc import ABC, abstractmethod
from typing import List, Optional


class Move(ABC):
    """Abstract base class for game moves."""

    @abstractmethod
    def encode(self) -> int:
        """Maps each move to a unique integer in [0, GameState.num_possible_moves())."""
        pass

    @classmethod
    @abstractmethod
    def decode(cls, encoded: int) -> "Move":
        """Decodes an integer back to a Move object."""
        pass

    @abstractmethod
    def __str__(self) -> str:
        """String representation of the move."""
        pass

    @abstractmethod
    def __eq__(self, other) -> bool:
        """Equality comparison for moves."""
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass


class GameState(ABC):
    """Abstract base class for game states.

    States are immutable: apply_move always returns a new state.
    """

    # 1 or -1, the party about to act
    current_player: int

    @classmethod
    @abstractmethod
    def num_possible_moves(cls) -> int:
        """The total number of possible moves in this game."""
        pass

    @classmethod
    @abstractmethod
    def initial_state(cls) -> "GameState":
        """Returns the initial game state."""
        pass

    @abstractmethod
    def get_legal_moves(self, player: Optional[int] = None) -> List[Move]:
        """Returns legal moves for `player` (default: the player to act)."""
        pass

    @abstractmethod
    def apply_move(self, move: Move) -> "GameState":
        """Returns new state after applying the move."""
        pass

    @abstractmethod
    def is_terminal(self) -> bool:
        """Returns True if game is over."""
        pass

    @abstractmethod
    def get_value(self) -> Optional[float]:
        """If terminal, returns 1, 0 or -1 from player 1's perspective. Otherwise None."""
        pass

    @abstractmethod
    def __str__(self) -> str:
        """String representation of the game state."""
        pass

    @abstractmethod
    def __eq__(self, other) -> bool:
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass
