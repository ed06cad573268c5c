"""
Grid state, transition rules and the generation loop.
"""

from .grid import Grid, GridSnapshot
from .simulator import Cadence, Simulator

__all__ = [
    'Grid',
    'GridSnapshot',
    'Cadence',
    'Simulator'
]
