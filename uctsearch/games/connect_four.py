"""Connect Four game implementation."""

import numpy as np
from typing import List, Optional, Tuple

from .game import Move, GameState


class ConnectFourMove(Move):
    """A move in Connect Four - dropping a piece in a column."""

    def __init__(self, column: int):
        if not (0 <= column < 7):
            raise ValueError(f"Invalid column: {column}")
        self.column = column

    def encode(self) -> int:
        """Encode move as integer: just the column index (0-6)."""
        return self.column

    @classmethod
    def decode(cls, encoded: int) -> "ConnectFourMove":
        """Decode integer back to move."""
        if not (0 <= encoded < 7):
            raise ValueError(f"Invalid encoded move: {encoded}")
        return cls(encoded)

    def __str__(self) -> str:
        return f"Col {self.column}"

    def __repr__(self) -> str:
        return f"ConnectFourMove({self.column})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ConnectFourMove):
            return False
        return self.column == other.column

    def __hash__(self) -> int:
        return hash(self.column)


class ConnectFourState(GameState):
    """Connect Four game state."""

    ROWS = 6
    COLS = 7
    CONNECT = 4

    def __init__(
        self,
        board: Optional[np.ndarray] = None,
        current_player: int = 1,
        column_heights: Optional[np.ndarray] = None,
        move_count: Optional[int] = None,
        last_move: Optional[Tuple[int, int]] = None,
    ):
        """
        Args:
            board: 6x7 numpy array, row 0 at the bottom. 0=empty, 1=player 1, -1=player 2
            current_player: 1 for player 1, -1 for player 2
            column_heights: Number of pieces in each column
            move_count: Number of moves played so far (default: pieces on the board)
            last_move: (row, col) of the last piece placed. Without it the whole
                board is scanned for a winning line.
        """
        if board is None:
            self.board = np.zeros((self.ROWS, self.COLS), dtype=int)
        else:
            self.board = board.copy()

        if column_heights is None:
            self.column_heights = (self.board != 0).sum(axis=0).astype(int)
        else:
            self.column_heights = column_heights.copy()

        self.board.setflags(write=False)
        self.column_heights.setflags(write=False)
        self.current_player = current_player
        self.move_count = int((self.board != 0).sum()) if move_count is None else move_count
        self.last_move = last_move
        # 1 or -1 once someone has connected four, else 0
        self._winner = self._find_winner()

    @classmethod
    def num_possible_moves(cls) -> int:
        """Connect Four has 7 possible columns."""
        return cls.COLS

    @classmethod
    def initial_state(cls) -> "ConnectFourState":
        """Returns empty board with player 1 to move."""
        return cls()

    def get_legal_moves(self, player: Optional[int] = None) -> List[ConnectFourMove]:
        """Returns all moves to non-full columns."""
        if self._winner:
            return []
        return [
            ConnectFourMove(col)
            for col in range(self.COLS)
            if self.column_heights[col] < self.ROWS
        ]

    def apply_move(self, move: ConnectFourMove) -> "ConnectFourState":
        """Returns new state after dropping piece in column."""
        if self.column_heights[move.column] >= self.ROWS:
            raise ValueError(f"Column {move.column} is full")
        if self._winner:
            raise ValueError("Game is already over")

        row = int(self.column_heights[move.column])

        new_board = self.board.copy()
        new_board[row, move.column] = self.current_player

        new_heights = self.column_heights.copy()
        new_heights[move.column] += 1

        return ConnectFourState(
            board=new_board,
            current_player=-self.current_player,
            column_heights=new_heights,
            move_count=self.move_count + 1,
            last_move=(row, move.column),
        )

    def is_terminal(self) -> bool:
        """Check if game is over (win or draw)."""
        return self._winner != 0 or self.move_count >= self.ROWS * self.COLS

    def get_value(self) -> Optional[float]:
        """Returns game result from perspective of player 1."""
        if not self.is_terminal():
            return None

        if self._winner:
            return float(self._winner)
        return 0.0  # Draw

    def _find_winner(self) -> int:
        """Owner of a winning line, checking around the last move when it is known."""
        if self.last_move is not None:
            row, col = self.last_move
            return int(self.board[row, col]) if self._wins_at(row, col) else 0

        for row in range(self.ROWS):
            for col in range(self.COLS):
                if self._wins_at(row, col):
                    return int(self.board[row, col])
        return 0

    def _wins_at(self, row: int, col: int) -> bool:
        """Check if the piece at (row, col) is part of a winning line."""
        player = self.board[row, col]

        if player == 0:
            return False

        return (
            self._check_direction(row, col, 0, 1, player)  # Horizontal
            or self._check_direction(row, col, 1, 0, player)  # Vertical
            or self._check_direction(row, col, 1, 1, player)  # Diagonal /
            or self._check_direction(row, col, 1, -1, player)  # Diagonal \
        )

    def _check_direction(
        self, row: int, col: int, dr: int, dc: int, player: int
    ) -> bool:
        """Check if there are 4 consecutive pieces in a direction."""
        count = 1

        r, c = row + dr, col + dc
        while 0 <= r < self.ROWS and 0 <= c < self.COLS and self.board[r, c] == player:
            count += 1
            r += dr
            c += dc

        r, c = row - dr, col - dc
        while 0 <= r < self.ROWS and 0 <= c < self.COLS and self.board[r, c] == player:
            count += 1
            r -= dr
            c -= dc

        return count >= self.CONNECT

    def __str__(self) -> str:
        """String representation of the board."""
        symbols = {0: ".", 1: "X", -1: "O"}
        lines = []

        # Top row first
        for row in range(self.ROWS - 1, -1, -1):
            line = " ".join(symbols[self.board[row, col]] for col in range(self.COLS))
            lines.append(f"  {line}")

        lines.append("  " + " ".join(str(i) for i in range(self.COLS)))

        player_symbol = "X" if self.current_player == 1 else "O"
        return "\n".join(lines) + f"\nNext: {player_symbol}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ConnectFourState):
            return False
        return (
            np.array_equal(self.board, other.board)
            and self.current_player == other.current_player
            and self.last_move == other.last_move
        )

    def __hash__(self) -> int:
        return hash((self.board.tobytes(), self.current_player, self.last_move))


# Aliases for game loader compatibility
GameState = ConnectFourState
Move = ConnectFourMove
