"""TicTacToe game implementation."""

import numpy as np
from typing import List, Optional

from .game import Move, GameState


class TicTacToeMove(Move):
    """A move in TicTacToe - placing a mark at position (row, col)."""

    def __init__(self, row: int, col: int):
        if not (0 <= row < 3 and 0 <= col < 3):
            raise ValueError(f"Invalid position: ({row}, {col})")
        self.row = row
        self.col = col

    def encode(self) -> int:
        """Encode move as integer: row * 3 + col (0-8)."""
        return self.row * 3 + self.col

    @classmethod
    def decode(cls, encoded: int) -> "TicTacToeMove":
        """Decode integer back to move."""
        if not (0 <= encoded < 9):
            raise ValueError(f"Invalid encoded move: {encoded}")
        return cls(encoded // 3, encoded % 3)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"

    def __repr__(self) -> str:
        return f"TicTacToeMove({self.row}, {self.col})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TicTacToeMove):
            return False
        return self.row == other.row and self.col == other.col

    def __hash__(self) -> int:
        return hash((self.row, self.col))


class TicTacToeState(GameState):
    """TicTacToe game state."""

    def __init__(self, board: Optional[np.ndarray] = None, current_player: int = 1):
        """
        Args:
            board: 3x3 numpy array. 0=empty, 1=player 1 (X), -1=player 2 (O)
            current_player: 1 for player 1 (X), -1 for player 2 (O)
        """
        if board is None:
            self.board = np.zeros((3, 3), dtype=int)
        else:
            self.board = board.copy()
        self.board.setflags(write=False)
        self.current_player = current_player

    @classmethod
    def num_possible_moves(cls) -> int:
        """TicTacToe has 9 possible positions."""
        return 9

    @classmethod
    def initial_state(cls) -> "TicTacToeState":
        """Returns empty board with player 1 to move."""
        return cls()

    def get_legal_moves(self, player: Optional[int] = None) -> List[TicTacToeMove]:
        """Returns all moves to empty squares (none once the game is won)."""
        if self._check_winner() is not None:
            return []
        moves = []
        for row in range(3):
            for col in range(3):
                if self.board[row, col] == 0:
                    moves.append(TicTacToeMove(row, col))
        return moves

    def apply_move(self, move: TicTacToeMove) -> "TicTacToeState":
        """Returns new state after applying move."""
        if self.board[move.row, move.col] != 0:
            raise ValueError(f"Square ({move.row}, {move.col}) is not empty")
        if self._check_winner() is not None:
            raise ValueError("Game is already over")

        new_board = self.board.copy()
        new_board[move.row, move.col] = self.current_player
        return TicTacToeState(new_board, -self.current_player)

    def is_terminal(self) -> bool:
        """Check if game is over (win or draw)."""
        return self._check_winner() is not None or not (self.board == 0).any()

    def get_value(self) -> Optional[float]:
        """Returns game result from perspective of player 1."""
        if not self.is_terminal():
            return None

        winner = self._check_winner()
        if winner is None:
            return 0.0  # Draw
        return float(winner)

    def _check_winner(self) -> Optional[int]:
        """Check if there's a winner. Returns 1, -1, or None."""
        for row in range(3):
            if abs(self.board[row].sum()) == 3:
                return int(self.board[row, 0])

        for col in range(3):
            if abs(self.board[:, col].sum()) == 3:
                return int(self.board[0, col])

        if abs(np.trace(self.board)) == 3:
            return int(self.board[0, 0])
        if abs(np.trace(np.fliplr(self.board))) == 3:
            return int(self.board[0, 2])

        return None

    def __str__(self) -> str:
        """String representation of the board."""
        symbols = {0: '.', 1: 'X', -1: 'O'}
        lines = []
        for row in range(3):
            line = ' '.join(symbols[self.board[row, col]] for col in range(3))
            lines.append(line)

        player_symbol = 'X' if self.current_player == 1 else 'O'
        return "Board:\n" + "\n".join(lines) + f"\nNext: {player_symbol}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TicTacToeState):
            return False
        return np.array_equal(self.board, other.board) and self.current_player == other.current_player

    def __hash__(self) -> int:
        return hash((self.board.tobytes(), self.current_player))


# Aliases for game loader compatibility
GameState = TicTacToeState
Move = TicTacToeMove
