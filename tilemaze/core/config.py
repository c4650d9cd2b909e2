from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from tilemaze.algo.base import Algorithm

# Defaults carried over from the game build
GRID_WIDTH = 16
GRID_HEIGHT = 16
NUM_CURSORS = 1
MAZE_GEN_TIME_MS = 100


@dataclass
class GenerationConfig:
    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    algorithm: Algorithm = Algorithm.BACKTRACKING
    seed: Optional[int] = None
    cursors: int = NUM_CURSORS
    steps_per_tick: int = 1
    tick_ms: int = MAZE_GEN_TIME_MS
    max_resets: Optional[int] = None

    def __post_init__(self):
        self.algorithm = Algorithm(self.algorithm)

    def validate(self) -> "GenerationConfig":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if not 1 <= self.cursors <= 4:
            raise ValueError(f"cursors must be between 1 and 4, got {self.cursors}")
        if self.steps_per_tick < 1:
            raise ValueError(f"steps_per_tick must be positive, got {self.steps_per_tick}")
        if self.tick_ms < 0:
            raise ValueError(f"tick_ms must not be negative, got {self.tick_ms}")
        if self.max_resets is not None and self.max_resets < 0:
            raise ValueError(f"max_resets must not be negative, got {self.max_resets}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["algorithm"] = self.algorithm.value
        return data
