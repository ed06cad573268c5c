"""
torus_life: Conway's Game of Life on a toroidal grid.

The core is a Grid that steps itself under the standard rules and a
Simulator that drives it and hands snapshots to a renderer.
"""

from .core.grid import Grid, GridSnapshot
from .core.simulator import Cadence, Simulator
from .errors import TorusLifeError, ConfigLoadError, OutOfRangeCoordinate

__version__ = "0.1.0"

__all__ = [
    'Grid',
    'GridSnapshot',
    'Cadence',
    'Simulator',
    'TorusLifeError',
    'ConfigLoadError',
    'OutOfRangeCoordinate'
]
