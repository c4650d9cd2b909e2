import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tilemaze.algo.base import Algorithm
from tilemaze.core.config import GenerationConfig, GRID_WIDTH, GRID_HEIGHT, MAZE_GEN_TIME_MS

class TestConfig(unittest.TestCase):
    def test_defaults(self):
        cfg = GenerationConfig().validate()
        self.assertEqual((cfg.width, cfg.height), (GRID_WIDTH, GRID_HEIGHT))
        self.assertEqual(cfg.algorithm, Algorithm.BACKTRACKING)
        self.assertEqual(cfg.cursors, 1)
        self.assertEqual(cfg.tick_ms, MAZE_GEN_TIME_MS)
        self.assertIsNone(cfg.max_resets)

    def test_algorithm_from_string(self):
        cfg = GenerationConfig(algorithm="wfc")
        self.assertIs(cfg.algorithm, Algorithm.WFC)
        with self.assertRaises(ValueError):
            GenerationConfig(algorithm="eller")

    def test_validation(self):
        bad = [
            dict(width=0),
            dict(height=-3),
            dict(cursors=0),
            dict(cursors=5),
            dict(steps_per_tick=0),
            dict(tick_ms=-1),
            dict(max_resets=-1),
        ]
        for kwargs in bad:
            with self.assertRaises(ValueError, msg=str(kwargs)):
                GenerationConfig(**kwargs).validate()

    def test_to_dict(self):
        data = GenerationConfig(width=8, height=4, algorithm=Algorithm.KRUSKAL, seed=3).to_dict()
        self.assertEqual(data["algorithm"], "kruskal")
        self.assertEqual(data["width"], 8)
        self.assertEqual(data["seed"], 3)

if __name__ == '__main__':
    unittest.main()
