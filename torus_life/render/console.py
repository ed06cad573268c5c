"""Console rendering of grid snapshots.

Each row becomes one line; live cells print as ``@ `` and dead cells as
``- ``. Animated output clears the terminal before every frame.
"""

import sys
from typing import TextIO, Optional, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from ..core.grid import GridSnapshot

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"  # Erase display, cursor to home


class ConsoleRenderer:
    """Writes snapshots to a text stream.

    Instances are callables so they can be handed straight to a Simulator.
    """

    def __init__(self, stream: Optional[TextIO] = None, clear_screen: bool = True):
        """Initialize renderer.

        Args:
            stream: Output stream (sys.stdout if None, resolved at render time)
            clear_screen: Emit a clear-screen sequence before each frame
        """
        self.stream = stream
        self.clear_screen = clear_screen
        self.frames_rendered = 0

    def render(self, snapshot: 'GridSnapshot') -> None:
        """Draw one frame."""
        out = self.stream if self.stream is not None else sys.stdout

        if self.clear_screen:
            out.write(CLEAR_SCREEN)
        out.write(snapshot.to_text())
        out.write("\n")
        out.flush()

        self.frames_rendered += 1
        logger.debug(f"Rendered generation {snapshot.generation}")

    def __call__(self, snapshot: 'GridSnapshot') -> None:
        self.render(snapshot)
