import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, Optional

from tilemaze.core.grid import Grid


class Algorithm(Enum):
    BACKTRACKING = "backtracking"
    KRUSKAL = "kruskal"
    WFC = "wfc"


class GenerationStalledError(RuntimeError):
    pass


class Generator(ABC):
    def __init__(self, grid: Grid, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.grid = grid
        self.seed = seed
        # An explicit rng wins over the seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0
        self.carved = 0

    @abstractmethod
    def step(self):
        """One bounded unit of work on self.grid."""

    @property
    def finished(self) -> bool:
        return self.grid.is_complete()

    def run(self) -> Iterator[str]:
        """
        Steps until finished.
        Yields status strings; the grid is modified in place.
        """
        while not self.finished:
            self.step()
            self.step_count += 1
            if self.step_count % 100 == 0:
                yield f"Regions: {self.grid.num_regions()}"
        yield "Done"

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
