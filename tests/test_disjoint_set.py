import unittest
import sys
import os
from array import array

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tilemaze.core.disjoint_set import DisjointSet

class TestDisjointSet(unittest.TestCase):
    def test_constructor(self):
        ds = DisjointSet(2)
        self.assertEqual(ds.num_sets(), 2)
        self.assertEqual(ds.find(0), 0)
        self.assertEqual(ds.find(1), 1)
        self.assertTrue(ds.is_singleton(0))
        self.assertTrue(ds.is_singleton(1))
        self.assertEqual(len(ds), 2)

    def test_find_follows_links(self):
        ds = DisjointSet(5)
        # 0 is a root of 4, 1 -> 0, 2 -> 1, 3 -> 0, 4 alone
        ds.entries = array('l', [-4, 0, 1, 0, -1])
        ds._num_sets = 2

        for i in range(4):
            self.assertEqual(ds.find(i), 0)
        self.assertEqual(ds.find(4), 4)
        self.assertEqual(ds.depth(2), 2)
        self.assertEqual(ds.depth(0), 0)
        # find never compresses
        self.assertEqual(ds.entries[2], 1)

    def test_out_of_bounds(self):
        ds = DisjointSet(3)
        with self.assertRaises(IndexError):
            ds.find(3)
        with self.assertRaises(IndexError):
            ds.find(-1)
        with self.assertRaises(IndexError):
            ds.join(0, 7)

    def test_join(self):
        ds = DisjointSet(4)
        self.assertTrue(ds.join(0, 1))
        self.assertTrue(ds.join(2, 3))

        self.assertEqual(ds.find(0), ds.find(1))
        self.assertNotEqual(ds.find(1), ds.find(2))
        self.assertEqual(ds.find(2), ds.find(3))
        self.assertEqual(ds.num_sets(), 2)
        for i in range(4):
            self.assertEqual(ds.num_members(i), 2)
            self.assertFalse(ds.is_singleton(i))

        ds.join(3, 1)
        roots = {ds.find(i) for i in range(4)}
        self.assertEqual(len(roots), 1)
        self.assertEqual(ds.num_sets(), 1)
        for i in range(4):
            self.assertEqual(ds.num_members(i), 4)

    def test_join_is_idempotent(self):
        ds = DisjointSet(3)
        self.assertTrue(ds.join(0, 2))
        snapshot = ds.entries.tobytes()
        self.assertFalse(ds.join(0, 2))
        self.assertFalse(ds.join(2, 0))
        self.assertEqual(ds.entries.tobytes(), snapshot)
        self.assertEqual(ds.num_sets(), 2)

    def test_union_by_size(self):
        ds = DisjointSet(4)
        ds.join(0, 1)
        ds.join(0, 2)
        big_root = ds.find(0)
        # Smaller component hangs under the larger one regardless of argument order
        ds.join(3, 1)
        self.assertEqual(ds.find(3), big_root)
        self.assertEqual(ds.num_members(3), 4)

    def test_tie_keeps_first_root(self):
        ds = DisjointSet(2)
        ds.join(1, 0)
        self.assertEqual(ds.find(0), 1)

    def test_join_compresses_paths(self):
        ds = DisjointSet(8)
        ds.join(0, 1)
        ds.join(2, 3)
        ds.join(4, 5)
        ds.join(6, 7)
        ds.join(1, 2)
        ds.join(4, 6)
        self.assertEqual(ds.depth(3), 2)
        self.assertEqual(ds.depth(7), 2)

        ds.join(3, 7)
        self.assertEqual(ds.num_sets(), 1)
        # Both traversed chains now point straight at the root
        for i in (3, 2, 7, 6, 4):
            self.assertLessEqual(ds.depth(i), 1)
        # 5 was not on either chain
        self.assertEqual(ds.depth(5), 2)

    def test_sizes_match_members(self):
        ds = DisjointSet(10)
        for a, b in [(0, 1), (2, 3), (1, 3), (5, 6), (7, 8), (8, 9), (6, 9)]:
            ds.join(a, b)
        roots = list(ds.values())
        for i in range(10):
            self.assertEqual(ds.num_members(i), roots.count(ds.find(i)))
        self.assertEqual(ds.num_sets(), len(set(roots)))

    def test_num_sets_decreases_by_one(self):
        ds = DisjointSet(6)
        expected = 6
        for a, b in [(0, 1), (1, 0), (2, 3), (0, 3), (4, 5), (2, 1), (5, 0)]:
            merged = ds.find(a) != ds.find(b)
            ds.join(a, b)
            if merged:
                expected -= 1
            self.assertEqual(ds.num_sets(), expected)
        self.assertEqual(expected, 1)

    def test_values_restartable(self):
        ds = DisjointSet(5)
        ds.join(0, 4)
        values = ds.values()
        first = list(values)
        second = list(values)
        self.assertEqual(first, second)
        self.assertEqual(len(first), 5)
        self.assertEqual(first[0], first[4])
        self.assertEqual(first[1], 1)

if __name__ == '__main__':
    unittest.main()
