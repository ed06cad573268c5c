"""
Configuration file loading and environment settings.
"""

from .loader import GridConfig, parse_config, load_config, load_grid
from .settings import SimulationSettings

__all__ = [
    'GridConfig',
    'parse_config',
    'load_config',
    'load_grid',
    'SimulationSettings'
]
