"""
Console output for torus_life grids.
"""

from .console import ConsoleRenderer

__all__ = [
    'ConsoleRenderer'
]
