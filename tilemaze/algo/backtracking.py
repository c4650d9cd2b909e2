from typing import List

from tilemaze.core.grid import Grid, Pos
from tilemaze.algo.base import Generator

MAX_CURSORS = 4


class MazeCursor:
    __slots__ = ('start', 'path')

    def __init__(self, start: Pos):
        self.start = start
        self.path: List[Pos] = [start]

    @property
    def idle(self) -> bool:
        return not self.path


def corners(grid: Grid) -> List[Pos]:
    w, h = grid.width - 1, grid.height - 1
    return [(0, 0), (w, h), (w, 0), (0, h)]


class Backtracker(Generator):
    """
    Randomized depth-first carver with up to four cursors, one per corner.
    Cursors share the grid, so one cursor may carve into another's region.
    """

    def __init__(self, grid: Grid, cursors: int = 1, rounds: int = 1, **kwargs):
        super().__init__(grid, **kwargs)
        if not 1 <= cursors <= MAX_CURSORS:
            raise ValueError(f"cursors must be between 1 and {MAX_CURSORS}, got {cursors}")
        if rounds < 1:
            raise ValueError(f"rounds must be positive, got {rounds}")
        self.rounds = rounds
        self.cursors = [MazeCursor(start) for start in corners(grid)[:cursors]]

    @property
    def finished(self) -> bool:
        return self.grid.is_complete() or all(c.idle for c in self.cursors)

    def step(self):
        for _ in range(self.rounds):
            for cursor in self.cursors:
                self.advance(cursor)

    def advance(self, cursor: MazeCursor):
        if cursor.idle:
            return

        pos = cursor.path[-1]
        moves = self.grid.possible_moves(pos)
        if not moves:
            # Dead end
            cursor.path.pop()
            return

        direction = moves[self.rng.randrange(len(moves))]
        # Moves are freshly filtered, so this cannot hit an already-connected pair
        cursor.path.append(self.grid.remove_wall(pos, direction))
        self.carved += 1
