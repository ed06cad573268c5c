"""Runtime settings read from the environment."""

import math
import os
import logging

logger = logging.getLogger(__name__)

DEFAULT_FRAME_DELAY = 0.1  # Seconds between animated frames
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class SimulationSettings:
    """Presentation and logging settings for a simulation run."""

    def __init__(self,
                 frame_delay: float = DEFAULT_FRAME_DELAY,
                 clear_screen: bool = True,
                 log_level: str = DEFAULT_LOG_LEVEL):
        """Initialize settings.

        Args:
            frame_delay: Pause after each animated frame in seconds (0.0+)
            clear_screen: Clear the terminal before each rendered frame
            log_level: Name of the logging level for the CLI
        """
        self.frame_delay = max(0.0, frame_delay)
        self.clear_screen = clear_screen
        self.log_level = log_level.upper()

    @classmethod
    def from_env(cls) -> 'SimulationSettings':
        """Create settings from TORUS_LIFE_* environment variables.

        Unparseable values fall back to the defaults with a warning.
        """
        frame_delay = DEFAULT_FRAME_DELAY
        raw_delay = os.getenv('TORUS_LIFE_FRAME_DELAY')
        if raw_delay is not None:
            try:
                delay = float(raw_delay)
            except ValueError:
                delay = math.nan
            if math.isfinite(delay):
                frame_delay = delay
            else:
                logger.warning(f"Ignoring invalid TORUS_LIFE_FRAME_DELAY={raw_delay!r}")

        clear_screen = True
        raw_clear = os.getenv('TORUS_LIFE_CLEAR_SCREEN')
        if raw_clear is not None:
            value = raw_clear.strip().lower()
            if value in _TRUE_VALUES:
                clear_screen = True
            elif value in _FALSE_VALUES:
                clear_screen = False
            else:
                logger.warning(f"Ignoring invalid TORUS_LIFE_CLEAR_SCREEN={raw_clear!r}")

        log_level = os.getenv('TORUS_LIFE_LOG_LEVEL', DEFAULT_LOG_LEVEL)
        if not isinstance(logging.getLevelName(log_level.upper()), int):
            logger.warning(f"Ignoring invalid TORUS_LIFE_LOG_LEVEL={log_level!r}")
            log_level = DEFAULT_LOG_LEVEL

        return cls(frame_delay=frame_delay, clear_screen=clear_screen, log_level=log_level)

    def __repr__(self) -> str:
        return (f"SimulationSettings(frame_delay={self.frame_delay}, "
                f"clear_screen={self.clear_screen}, log_level={self.log_level})")
