from array import array
from enum import Enum
from typing import Iterator, List, Optional, Tuple

import numpy as np

from tilemaze.core.disjoint_set import DisjointSet

Pos = Tuple[int, int]


class AlreadyConnectedError(ValueError):
    """Raised when removing a wall would join two cells that already share a region."""

    def __init__(self, pos: Pos, other: Pos):
        super().__init__(f"Cells {pos} and {other} are already connected")
        self.pos = pos
        self.other = other


class Dir(Enum):
    # (bit, dx, dy). y grows downward, so North is dy = -1
    North = (0b0001, 0, -1)
    East = (0b0010, 1, 0)
    South = (0b0100, 0, 1)
    West = (0b1000, -1, 0)

    def __init__(self, bit: int, dx: int, dy: int):
        self.bit = bit
        self.dx = dx
        self.dy = dy

    @property
    def offset(self) -> Pos:
        return (self.dx, self.dy)

    def reverse(self) -> "Dir":
        return _REVERSE[self]


_REVERSE = {
    Dir.North: Dir.South,
    Dir.South: Dir.North,
    Dir.East: Dir.West,
    Dir.West: Dir.East,
}

# Fixed enumeration order for possible_moves
DIRECTIONS = (Dir.North, Dir.East, Dir.South, Dir.West)


class Grid:
    # Bit set in a cell mask = passage open in that direction
    NORTH = Dir.North.bit
    EAST = Dir.East.bit
    SOUTH = Dir.South.bit
    WEST = Dir.West.bit
    ALL_OPEN = NORTH | EAST | SOUTH | WEST

    __slots__ = ('width', 'height', 'walls', 'regions')

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        # Fully walled: no passage bits set
        self.walls = array('B', [0] * (width * height))
        self.regions = DisjointSet(width * height)

    def __len__(self) -> int:
        return self.width * self.height

    def contains(self, pos: Pos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, pos: Pos) -> int:
        x, y = pos
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def position_of(self, index: int) -> Pos:
        if not 0 <= index < self.width * self.height:
            raise IndexError(f"Cell index {index} out of bounds")
        return (index % self.width, index // self.width)

    def positions(self) -> Iterator[Pos]:
        """Row-major iteration over every cell."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def neighbor(self, pos: Pos, direction: Dir) -> Optional[Pos]:
        x, y = pos
        other = (x + direction.dx, y + direction.dy)
        if self.contains(other):
            return other
        return None

    def get_walls(self, pos: Pos) -> int:
        return self.walls[self.index_of(pos)]

    def has_wall(self, pos: Pos, direction: Dir) -> bool:
        """Boundary walls are always standing, whatever the mask says."""
        idx = self.index_of(pos)
        if self.neighbor(pos, direction) is None:
            return True
        return (self.walls[idx] & direction.bit) == 0

    def region(self, pos: Pos) -> int:
        return self.regions.find(self.index_of(pos))

    def is_visited(self, pos: Pos) -> bool:
        return not self.regions.is_singleton(self.index_of(pos))

    def possible_moves(self, pos: Pos) -> List[Dir]:
        """Directions toward an in-bounds neighbor that lives in a different region."""
        own = self.region(pos)
        moves = []
        for direction in DIRECTIONS:
            other = self.neighbor(pos, direction)
            if other is not None and self.region(other) != own:
                moves.append(direction)
        return moves

    def remove_wall(self, pos: Pos, direction: Dir) -> Pos:
        """
        Opens the wall between pos and its neighbor in 'direction'.
        Both masks are updated so the passage is symmetric.
        Returns the neighbor position.
        Raises AlreadyConnectedError (without mutating) if both cells share a region.
        """
        other = self.neighbor(pos, direction)
        if other is None:
            raise IndexError(f"Cannot carve {direction.name} out of the grid from {pos}")

        idx1 = self.index_of(pos)
        idx2 = self.index_of(other)
        if not self.regions.join(idx1, idx2):
            raise AlreadyConnectedError(pos, other)

        self.walls[idx1] |= direction.bit
        self.walls[idx2] |= direction.reverse().bit
        return other

    def num_regions(self) -> int:
        return self.regions.num_sets()

    def is_complete(self) -> bool:
        return self.regions.num_sets() == 1

    def region_ids(self) -> List[int]:
        return list(self.regions.values())

    def passages(self) -> Iterator[Tuple[Pos, Dir]]:
        """Yields every open passage once, from its West/North cell."""
        for x, y in self.positions():
            val = self.walls[y * self.width + x]
            if val & self.EAST:
                yield ((x, y), Dir.East)
            if val & self.SOUTH:
                yield ((x, y), Dir.South)

    def to_numpy(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Read-only snapshot for renderers, each shaped (height, width):
        wall masks (uint8), region ids (int64), visited flags (bool).
        """
        walls = np.frombuffer(self.walls.tobytes(), dtype=np.uint8).reshape(self.height, self.width)
        roots = np.fromiter(self.regions.values(), dtype=np.int64, count=len(self))
        sizes = np.fromiter(
            (self.regions.num_members(i) for i in range(len(self))),
            dtype=np.int64,
            count=len(self),
        )
        return (
            walls.copy(),
            roots.reshape(self.height, self.width),
            (sizes > 1).reshape(self.height, self.width),
        )
