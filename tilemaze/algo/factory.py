from typing import Optional
import random

from tilemaze.core.grid import Grid
from tilemaze.algo.base import Algorithm, Generator
from tilemaze.algo.backtracking import Backtracker
from tilemaze.algo.kruskal import Kruskal
from tilemaze.algo.wfc import ConstrainedRandom


def create_generator(algorithm: Algorithm, grid: Grid, seed: Optional[int] = None,
                     rng: Optional[random.Random] = None, cursors: int = 1,
                     max_resets: Optional[int] = None) -> Generator:
    algorithm = Algorithm(algorithm)
    if algorithm is Algorithm.BACKTRACKING:
        return Backtracker(grid, cursors=cursors, seed=seed, rng=rng)
    elif algorithm is Algorithm.KRUSKAL:
        return Kruskal(grid, seed=seed, rng=rng)
    elif algorithm is Algorithm.WFC:
        return ConstrainedRandom(grid, max_resets=max_resets, seed=seed, rng=rng)
    raise ValueError(f"Unknown algorithm: {algorithm}")
