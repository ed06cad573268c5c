"""Exception types raised by torus_life.

Library code raises these; only the command-line entry point turns them into
messages and exit codes.
"""

from typing import Optional


class TorusLifeError(Exception):
    """Base class for all torus_life errors."""


class ConfigLoadError(TorusLifeError):
    """Configuration source could not be opened, read or parsed.

    Attributes:
        source: Path or label of the configuration source
    """

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class OutOfRangeCoordinate(ConfigLoadError):
    """A configured live cell lies outside the grid.

    Attributes:
        row: Offending row
        col: Offending column
        rows: Grid row count
        cols: Grid column count
    """

    def __init__(self, row: int, col: int, rows: int, cols: int, source: Optional[str] = None):
        message = (f"Coordinate ({row}, {col}) out of range for {rows}x{cols} grid"
                   + (f" in {source}" if source else ""))
        super().__init__(message, source)
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
