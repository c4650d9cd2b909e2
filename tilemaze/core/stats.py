from typing import Dict

from tilemaze.core.grid import Grid


def popcount_open(val: int) -> int:
    c = 0
    if val & Grid.NORTH: c += 1
    if val & Grid.EAST: c += 1
    if val & Grid.SOUTH: c += 1
    if val & Grid.WEST: c += 1
    return c


def calculate_stats(grid: Grid) -> Dict[str, float]:
    """
    Classifies cells by their number of open passages:
    1 = dead end, 2 = corridor, 3+ = junction, 0 = sealed (not yet carved).
    """
    dead_ends = 0
    corridors = 0
    junctions = 0
    sealed = 0
    passages = 0

    for val in grid.walls:
        exits = popcount_open(val)
        passages += exits
        if exits == 0: sealed += 1
        elif exits == 1: dead_ends += 1
        elif exits == 2: corridors += 1
        else: junctions += 1

    total = grid.width * grid.height
    return {
        "passages": passages // 2,  # each passage is counted from both sides
        "regions": grid.num_regions(),
        "dead_ends": dead_ends,
        "corridors": corridors,
        "junctions": junctions,
        "sealed": sealed,
        "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
    }
