"""Classic Conway test patterns as live-cell offsets.

Offsets are (row, col) relative to the pattern's top-left corner.
"""

from typing import List, Tuple

Coordinate = Tuple[int, int]

# Stable 2x2 still life
BLOCK: List[Coordinate] = [(0, 0), (0, 1), (1, 0), (1, 1)]

# Horizontal blinker, period 2
BLINKER: List[Coordinate] = [(0, 0), (0, 1), (0, 2)]

# Glider moving down and to the right, period 4
GLIDER: List[Coordinate] = [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]


def place(pattern: List[Coordinate], row: int, col: int, rows: int, cols: int) -> List[Coordinate]:
    """Translate a pattern to (row, col), wrapping onto a rows x cols torus.

    Args:
        pattern: Live-cell offsets
        row: Target row of the pattern's top-left corner
        col: Target column of the pattern's top-left corner
        rows: Grid row count
        cols: Grid column count

    Returns:
        Absolute (row, col) coordinates inside the grid
    """
    return [((row + dr) % rows, (col + dc) % cols) for dr, dc in pattern]
