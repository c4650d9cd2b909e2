from typing import List, Tuple

from tilemaze.core.grid import AlreadyConnectedError, Dir, Grid, Pos
from tilemaze.algo.base import Generator


class Kruskal(Generator):
    """
    Randomized Kruskal: every interior wall is queued once, shuffled, then
    removed greedily whenever it separates two regions.
    """

    def __init__(self, grid: Grid, **kwargs):
        super().__init__(grid, **kwargs)
        self.queue: List[Tuple[Pos, Dir]] = []
        for y in range(grid.height):
            for x in range(grid.width):
                if y > 0:
                    self.queue.append(((x, y), Dir.North))
                if x < grid.width - 1:
                    self.queue.append(((x, y), Dir.East))
        self.rng.shuffle(self.queue)
        self.exhausted = not self.queue

    @property
    def finished(self) -> bool:
        return self.exhausted

    def step(self):
        """Pops candidates until one wall is removed or the queue runs dry."""
        while self.queue:
            pos, direction = self.queue.pop()
            try:
                self.grid.remove_wall(pos, direction)
            except AlreadyConnectedError:
                continue
            self.carved += 1
            return
        self.exhausted = True
