import math

import pytest

from uctsearch.config import SearchConfig


class TestSearchConfig:
    def test_defaults(self):
        config = SearchConfig()
        assert config.game_module == "coin_toss"
        assert config.iterations == 1000
        assert config.exploration == pytest.approx(math.sqrt(2))
        assert config.time_limit is None
        assert config.seed is None

    def test_save_load_round_trip(self, tmp_path):
        path = tmp_path / "search.json"
        config = SearchConfig(game_module="tictactoe", iterations=42, seed=3, time_limit=1.5)
        config.save(str(path))

        assert SearchConfig.load(str(path)) == config

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"iterations": -1},
            {"exploration": -0.1},
            {"time_limit": 0.0},
            {"temperature": -1.0},
        ],
    )
    def test_validate_rejects(self, kwargs):
        with pytest.raises(ValueError):
            SearchConfig(**kwargs).validate()

    def test_load_rejects_invalid(self, tmp_path):
        path = tmp_path / "bad.json"
        SearchConfig(iterations=-3).save(str(path))

        with pytest.raises(ValueError):
            SearchConfig.load(str(path))
