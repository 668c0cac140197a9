import numpy as np
import pytest

from uctsearch.games import coin_toss, tictactoe


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def coin_state():
    return coin_toss.CoinTossState.initial_state()


@pytest.fixture
def ttt_state():
    return tictactoe.TicTacToeState.initial_state()
