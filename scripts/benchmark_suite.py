import sys
import os
import time
from dataclasses import dataclass

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tilemaze.algo.base import Algorithm
from tilemaze.core.grid import Grid
from tilemaze.algo.factory import create_generator
from tilemaze.core.stats import calculate_stats


@dataclass
class RunResult:
    algo: str
    size: str
    time_sec: float
    steps: int
    dead_end_percent: float


def benchmark_size(width: int, height: int, seed: int = 42):
    print(f"\n--- Benchmarking {width}x{height} ({width*height} cells) ---")
    results = []

    for algo in Algorithm:
        grid = Grid(width, height)
        gen = create_generator(algo, grid, seed=seed)

        steps = 0
        gen_start = time.time()
        while not grid.is_complete():
            gen.step()
            steps += 1
        gen_time = time.time() - gen_start

        stats = calculate_stats(grid)
        results.append(RunResult(algo.value, f"{width}x{height}", gen_time, steps, stats["dead_end_percent"]))

    for r in results:
        speed = (width * height) / r.time_sec if r.time_sec > 0 else float("inf")
        print(f"{r.algo:<14} {r.time_sec:>8.4f}s  {r.steps:>8} steps  {speed:>12,.0f} cells/sec  dead ends {r.dead_end_percent:.1f}%")
    return results


def run_suite():
    # WFC rescans the whole grid every step, keep it small
    sizes = [
        (16, 16),
        (32, 32),
        (64, 64),
    ]

    for w, h in sizes:
        benchmark_size(w, h)


if __name__ == "__main__":
    run_suite()
