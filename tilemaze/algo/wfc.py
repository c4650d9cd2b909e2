import logging
from typing import Optional

from tilemaze.core.grid import AlreadyConnectedError, Grid
from tilemaze.algo.base import Generator, GenerationStalledError

logger = logging.getLogger(__name__)


class ConstrainedRandom(Generator):
    """
    Wave-function-collapse style carver.

    Each step resolves the unfixed cell with the fewest legal moves (lowest
    "entropy"), opening each of its moves on a coin flip. When no unfixed
    cell has a move left while regions remain, every cell is unfixed again
    and the carve continues from the current walls.
    """

    def __init__(self, grid: Grid, max_resets: Optional[int] = None, **kwargs):
        super().__init__(grid, **kwargs)
        self.fixed = [False] * len(grid)
        self.resets = 0
        # None keeps retrying forever
        self.max_resets = max_resets

    def step(self):
        grid = self.grid
        best = None
        candidates = []
        for idx in range(len(grid)):
            if self.fixed[idx]:
                continue
            moves = grid.possible_moves(grid.position_of(idx))
            if not moves:
                continue
            if best is None or len(moves) < best:
                best = len(moves)
                candidates = [(idx, moves)]
            elif len(moves) == best:
                candidates.append((idx, moves))

        if not candidates:
            self.reset()
            return

        idx, moves = candidates[self.rng.randrange(len(candidates))]
        pos = grid.position_of(idx)
        for direction in moves:
            if self.rng.random() < 0.5:
                try:
                    grid.remove_wall(pos, direction)
                except AlreadyConnectedError:
                    # An earlier flip this round already joined that neighbor
                    continue
                self.carved += 1

        self.fixed[idx] = True

    def reset(self):
        self.resets += 1
        if self.max_resets is not None and self.resets > self.max_resets:
            raise GenerationStalledError(
                f"No progress after {self.max_resets} resets ({self.grid.num_regions()} regions left)"
            )
        logger.info(f"No eligible cells with {self.grid.num_regions()} regions left. Retrying (reset {self.resets})...")
        self.fixed = [False] * len(self.grid)
