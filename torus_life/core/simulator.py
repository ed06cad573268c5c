"""Generation loop for torus_life.

The simulator steps a grid a fixed number of times and hands snapshots to a
renderer at the requested cadence. It never writes output itself.
"""

import math
import time
from enum import IntEnum
from typing import Callable, Optional, Union
import logging

from .grid import Grid, GridSnapshot

logger = logging.getLogger(__name__)

Renderer = Callable[[GridSnapshot], None]


class Cadence(IntEnum):
    """How often snapshots are emitted; values match the CLI verbosity selector."""
    NONE = 0        # No output
    FINAL_ONLY = 1  # Snapshot after the last step
    EVERY_STEP = 2  # Snapshot after every step (animated)


class Simulator:
    """Drives repeated Grid transitions.

    Attributes:
        grid: Grid being evolved (mutated in place)
        renderer: Callable receiving snapshots, or None to drop them
        frame_delay: Seconds to pause after each EVERY_STEP frame
    """

    def __init__(self,
                 grid: Grid,
                 renderer: Optional[Renderer] = None,
                 frame_delay: float = 0.1,
                 sleep: Callable[[float], None] = time.sleep):
        """Initialize simulator.

        Args:
            grid: Initial grid; owned by the simulator for the run
            renderer: Snapshot consumer
            frame_delay: Pause after each animated frame (0 disables)
            sleep: Sleep function used for the pause

        Raises:
            ValueError: If frame_delay is not a finite number
        """
        if not math.isfinite(frame_delay):
            raise ValueError(f"Frame delay must be finite, got {frame_delay}")

        self.grid = grid
        self.renderer = renderer
        self.frame_delay = max(0.0, frame_delay)
        self._sleep = sleep

    def _emit(self) -> None:
        if self.renderer is not None:
            self.renderer(self.grid.snapshot())

    def run(self, iterations: int, cadence: Union[Cadence, int] = Cadence.NONE) -> None:
        """Advance the grid `iterations` generations.

        Args:
            iterations: Number of steps (0 performs no steps and emits nothing)
            cadence: Snapshot cadence

        Raises:
            ValueError: If iterations is negative or cadence is unknown
        """
        if iterations < 0:
            raise ValueError(f"Iterations must be non-negative, got {iterations}")
        cadence = Cadence(cadence)

        logger.info(f"Running {iterations} generations on {self.grid.rows}x{self.grid.cols} grid "
                    f"(cadence={cadence.name})")

        for i in range(iterations):
            live_count = self.grid.step()

            if cadence == Cadence.EVERY_STEP:
                self._emit()
                if self.frame_delay > 0:
                    self._sleep(self.frame_delay)
            elif cadence == Cadence.FINAL_ONLY and i == iterations - 1:
                self._emit()

            logger.debug(f"Generation {self.grid.generation}: {live_count} live cells")

        logger.info(f"Finished at generation {self.grid.generation} with "
                    f"{self.grid.live_count()} live cells")
