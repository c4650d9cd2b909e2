import logging
import time
from enum import Enum
from typing import Callable, Optional, Tuple

import numpy as np

from tilemaze.core.config import GenerationConfig
from tilemaze.core.grid import Grid
from tilemaze.algo.base import Generator
from tilemaze.algo.factory import create_generator

logger = logging.getLogger(__name__)


class SessionState(Enum):
    GENERATING = "generating"
    COMPLETE = "complete"


class MazeSession:
    """
    One maze-generation episode: owns the Grid and the active generator.

    The driver calls tick() at its own cadence; renderers read the grid
    (or snapshot()) between ticks. on_complete fires once, on the tick
    where the grid collapses to a single region.
    """

    def __init__(self, config: Optional[GenerationConfig] = None,
                 on_complete: Optional[Callable[["MazeSession"], None]] = None):
        self.config = (config or GenerationConfig()).validate()
        self.on_complete = on_complete
        self.grid: Grid = None
        self.generator: Generator = None
        self.state = SessionState.GENERATING
        self.ticks = 0
        self.reset()

    def reset(self, seed: Optional[int] = None):
        """Discards the current maze and starts a new episode."""
        if seed is not None:
            self.config.seed = seed
        cfg = self.config
        self.grid = Grid(cfg.width, cfg.height)
        self.generator = create_generator(
            cfg.algorithm,
            self.grid,
            seed=cfg.seed,
            cursors=cfg.cursors,
            max_resets=cfg.max_resets,
        )
        self.state = SessionState.GENERATING
        self.ticks = 0
        logger.debug(f"New {cfg.width}x{cfg.height} session ({cfg.algorithm.value}, seed={cfg.seed})")
        # A 1x1 grid is born connected
        self._check_complete()

    @property
    def is_complete(self) -> bool:
        return self.state is SessionState.COMPLETE

    def tick(self) -> SessionState:
        if self.state is SessionState.COMPLETE:
            return self.state

        self.ticks += 1
        for _ in range(self.config.steps_per_tick):
            self.generator.step()
            if self._check_complete():
                break
        else:
            logger.debug(f"Tick {self.ticks}: {self.grid.num_regions()} regions left")
        return self.state

    def _check_complete(self) -> bool:
        if not self.grid.is_complete():
            return False
        if self.state is not SessionState.COMPLETE:
            self.state = SessionState.COMPLETE
            logger.info(f"Maze done after {self.ticks} ticks ({self.generator.carved} walls removed)")
            if self.on_complete:
                self.on_complete(self)
        return True

    def run(self, tick_interval: Optional[float] = None, max_ticks: Optional[int] = None) -> int:
        """
        Ticks until complete (or max_ticks). tick_interval is in seconds and
        defaults to the configured tick_ms. Returns the number of ticks run.
        """
        if tick_interval is None:
            tick_interval = self.config.tick_ms / 1000.0
        start = self.ticks
        while self.state is SessionState.GENERATING:
            if max_ticks is not None and self.ticks - start >= max_ticks:
                break
            self.tick()
            if tick_interval > 0 and self.state is SessionState.GENERATING:
                time.sleep(tick_interval)
        return self.ticks - start

    def snapshot(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """(walls, regions, visited) arrays for a read-only renderer."""
        return self.grid.to_numpy()
