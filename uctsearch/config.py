import json
import math
from dataclasses import dataclass, asdict
from typing import Optional

DEFAULT_EXPLORATION = math.sqrt(2)


@dataclass
class SearchConfig:
    """Configuration for a UCT search run."""

    # Game selection
    game_module: str = "coin_toss"  # Module name under uctsearch.games

    # Search budget
    iterations: int = 1000
    time_limit: Optional[float] = None  # seconds, checked between iterations

    # UCB1 exploration constant C
    exploration: float = DEFAULT_EXPLORATION

    # Seed for the random generator driving expansion and rollouts (None = unseeded)
    seed: Optional[int] = None

    # Move choice from root visit counts: 0 = most visited, >0 = sample
    temperature: float = 0.0

    show_progress: bool = False

    def validate(self) -> None:
        if self.iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {self.iterations}")
        if self.exploration < 0:
            raise ValueError(f"exploration must be >= 0, got {self.exploration}")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}")
        if self.temperature < 0:
            raise ValueError(f"temperature must be >= 0, got {self.temperature}")

    def save(self, path: str) -> None:
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def load(cls, path: str) -> "SearchConfig":
        with open(path, "r") as f:
            config = cls(**json.load(f))
        config.validate()
        return config
