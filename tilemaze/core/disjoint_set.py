from array import array
from typing import Iterator

class DisjointSet:
    """
    Union-find over the index space 0..n-1.

    Entries are packed into a single array:
      value >= 0  -> link to the parent index
      value <  0  -> root, component size is -value
    """

    __slots__ = ('entries', '_num_sets')

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"DisjointSet size must be non-negative, got {n}")
        self.entries = array('l', [-1] * n)
        self._num_sets = n

    def __len__(self) -> int:
        return len(self.entries)

    def _check(self, index: int):
        if not 0 <= index < len(self.entries):
            raise IndexError(f"Index {index} out of bounds for DisjointSet of size {len(self.entries)}")

    def find(self, index: int) -> int:
        """Returns the root of index's component. Does not compress."""
        self._check(index)
        i = index
        while self.entries[i] >= 0:
            i = self.entries[i]
        return i

    def _compress(self, index: int, root: int):
        i = index
        while self.entries[i] >= 0:
            parent = self.entries[i]
            self.entries[i] = root
            i = parent

    def join(self, a: int, b: int) -> bool:
        """
        Unions the components of a and b (union by size).
        Returns False if they were already joined.
        """
        a_root = self.find(a)
        b_root = self.find(b)
        if a_root == b_root:
            return False

        a_size = -self.entries[a_root]
        b_size = -self.entries[b_root]

        # Ties keep a's root
        if a_size < b_size:
            a, b = b, a
            a_root, b_root = b_root, a_root

        self.entries[b_root] = a_root
        self.entries[a_root] = -(a_size + b_size)
        self._num_sets -= 1

        self._compress(a, a_root)
        self._compress(b, a_root)
        return True

    def num_sets(self) -> int:
        return self._num_sets

    def num_members(self, index: int) -> int:
        return -self.entries[self.find(index)]

    def is_singleton(self, index: int) -> bool:
        self._check(index)
        return self.entries[index] == -1

    def values(self) -> "_Roots":
        """Lazy view of find(i) for every index. Can be iterated repeatedly."""
        return _Roots(self)

    def depth(self, index: int) -> int:
        self._check(index)
        i = index
        hops = 0
        while self.entries[i] >= 0:
            i = self.entries[i]
            hops += 1
        return hops


class _Roots:
    __slots__ = ('ds',)

    def __init__(self, ds: DisjointSet):
        self.ds = ds

    def __len__(self) -> int:
        return len(self.ds)

    def __iter__(self) -> Iterator[int]:
        for i in range(len(self.ds)):
            yield self.ds.find(i)
