"""Heads/tails accumulation game.

Every round the searching party calls heads or tails. Calling heads scores a
point for us, calling tails scores a point for the opponent. After
`max_rounds` rounds we win if we are strictly ahead; a tie counts as a loss.
"""

from typing import List, Optional, Sequence, Tuple

from .game import Move, GameState


class CoinTossMove(Move):
    """A call of heads (0) or tails (1)."""

    NAMES = ("Heads", "Tails")

    def __init__(self, side: int):
        if side not in (0, 1):
            raise ValueError(f"Invalid side: {side}")
        self.side = side

    def encode(self) -> int:
        return self.side

    @classmethod
    def decode(cls, encoded: int) -> "CoinTossMove":
        if encoded not in (0, 1):
            raise ValueError(f"Invalid encoded move: {encoded}")
        return cls(encoded)

    def __str__(self) -> str:
        return self.NAMES[self.side]

    def __repr__(self) -> str:
        return f"CoinTossMove({self.NAMES[self.side]})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, CoinTossMove):
            return False
        return self.side == other.side

    def __hash__(self) -> int:
        return hash(("coin", self.side))


HEADS = CoinTossMove(0)
TAILS = CoinTossMove(1)


class CoinTossState(GameState):
    """Coin toss game state. Player 1 (us) makes every call."""

    MAX_ROUNDS = 10

    def __init__(
        self,
        my_score: int = 0,
        op_score: int = 0,
        round: int = 0,
        my_possible_actions: Sequence[CoinTossMove] = (HEADS, TAILS),
        op_possible_actions: Sequence[CoinTossMove] = (HEADS, TAILS),
        max_rounds: int = MAX_ROUNDS,
    ):
        self.my_score = my_score
        self.op_score = op_score
        self.round = round
        self.my_possible_actions: Tuple[CoinTossMove, ...] = tuple(my_possible_actions)
        self.op_possible_actions: Tuple[CoinTossMove, ...] = tuple(op_possible_actions)
        self.max_rounds = max_rounds
        self.current_player = 1

    @classmethod
    def num_possible_moves(cls) -> int:
        return 2

    @classmethod
    def initial_state(cls) -> "CoinTossState":
        """Both scores zero, round zero."""
        return cls()

    def get_legal_moves(self, player: Optional[int] = None) -> List[CoinTossMove]:
        if self.is_terminal():
            return []
        if player is None:
            player = self.current_player
        if player == 1:
            return list(self.my_possible_actions)
        return list(self.op_possible_actions)

    def apply_move(self, move: CoinTossMove) -> "CoinTossState":
        """Returns new state with the called side scored and the round advanced."""
        if move not in self.get_legal_moves():
            raise ValueError(f"Illegal move {move} in round {self.round}")

        return CoinTossState(
            my_score=self.my_score + (1 if move == HEADS else 0),
            op_score=self.op_score + (1 if move == TAILS else 0),
            round=self.round + 1,
            my_possible_actions=self.my_possible_actions,
            op_possible_actions=self.op_possible_actions,
            max_rounds=self.max_rounds,
        )

    def is_terminal(self) -> bool:
        return self.round >= self.max_rounds

    def get_value(self) -> Optional[float]:
        if not self.is_terminal():
            return None
        return 1.0 if self.my_score > self.op_score else -1.0

    def _key(self) -> tuple:
        return (
            self.my_score,
            self.op_score,
            self.round,
            self.my_possible_actions,
            self.op_possible_actions,
            self.max_rounds,
        )

    def __str__(self) -> str:
        return (
            f"Round {self.round}/{self.max_rounds}: "
            f"me {self.my_score} - {self.op_score} opponent"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, CoinTossState):
            return False
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


# Aliases for game loader compatibility
GameState = CoinTossState
Move = CoinTossMove
