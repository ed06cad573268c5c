"""Toroidal grid state for Conway's Game of Life.

The grid owns a flat, row-major numpy boolean buffer of ``rows * cols``
cells. Cell ``(r, c)`` lives at index ``r * cols + c`` and every neighbor
lookup wraps modulo the grid dimensions, so the topology is a torus.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np
import logging

from .conway_rules import next_generation

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]

ALIVE_GLYPH = "@"
DEAD_GLYPH = "-"


@dataclass(frozen=True, eq=False)
class GridSnapshot:
    """Read-only picture of a grid at one generation."""
    rows: int
    cols: int
    generation: int
    cells: np.ndarray  # Flat row-major copy, not writeable

    def is_alive(self, r: int, c: int) -> bool:
        """Check whether cell (r, c) was alive when the snapshot was taken."""
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(f"Coordinates ({r}, {c}) out of bounds for {self.rows}x{self.cols} grid")
        return bool(self.cells[r * self.cols + c])

    def rows_iter(self) -> Iterator[Tuple[bool, ...]]:
        """Yield one tuple of cell states per row, top to bottom."""
        for r in range(self.rows):
            start = r * self.cols
            yield tuple(bool(v) for v in self.cells[start:start + self.cols])

    def live_cells(self) -> List[Coordinate]:
        """Get (row, col) of every live cell in row-major order."""
        return [divmod(int(i), self.cols) for i in np.flatnonzero(self.cells)]

    def to_text(self, alive: str = ALIVE_GLYPH, dead: str = DEAD_GLYPH) -> str:
        """Format as text, one line per row, every cell followed by a space."""
        return "\n".join("".join(f"{alive if cell else dead} " for cell in row)
                         for row in self.rows_iter())


class Grid:
    """2D boolean grid with toroidal wrap, stored row-major.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        cells: Flat numpy boolean array of length rows * cols (True=alive)
        generation: Number of steps applied since construction
    """

    def __init__(self, rows: int, cols: int, cells: Optional[np.ndarray] = None):
        """Initialize grid with given dimensions.

        Args:
            rows: Number of rows (at least 1)
            cols: Number of columns (at least 1)
            cells: Optional initial state, flat (rows*cols,) or shaped (rows, cols)

        Raises:
            ValueError: If dimensions are invalid or cells has the wrong size
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self.generation = 0

        if cells is not None:
            cells = np.asarray(cells, dtype=bool)
            if cells.size != rows * cols:
                raise ValueError(f"Initial state has {cells.size} cells, expected {rows * cols}")
            self.cells = cells.reshape(rows * cols).copy()
        else:
            self.cells = np.zeros(rows * cols, dtype=bool)

        logger.debug(f"Created grid {rows}x{cols}")

    @classmethod
    def from_live_cells(cls, rows: int, cols: int, live_cells: Iterable[Coordinate]) -> 'Grid':
        """Create grid with the given cells alive and all others dead.

        Args:
            rows: Number of rows
            cols: Number of columns
            live_cells: (row, col) pairs to set alive

        Returns:
            Grid: New grid at generation 0

        Raises:
            IndexError: If any coordinate is outside the grid
        """
        grid = cls(rows, cols)
        for r, c in live_cells:
            grid.set(r, c, True)
        return grid

    @property
    def state(self) -> np.ndarray:
        """2D (rows, cols) view of the cell buffer; writes go through to the grid."""
        return self.cells.reshape(self.rows, self.cols)

    def index(self, r: int, c: int) -> int:
        """Get flat buffer index of cell (r, c).

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(f"Coordinates ({r}, {c}) out of bounds for {self.rows}x{self.cols} grid")
        return r * self.cols + c

    def get(self, r: int, c: int) -> bool:
        """Get cell state at (row, col)."""
        return bool(self.cells[self.index(r, c)])

    def set(self, r: int, c: int, alive: bool) -> None:
        """Set cell state at (row, col)."""
        self.cells[self.index(r, c)] = alive

    def neighbor_count(self, r: int, c: int) -> int:
        """Count live neighbors of cell (r, c) on the torus.

        Walks the 3x3 block centered on the cell and skips a block cell only
        when its wrapped coordinates are exactly (r, c). On grids with 2 or
        fewer rows or columns, wrapped neighbors coincide: the same cell can
        be counted more than once, and offsets that wrap onto the center are
        skipped. A 1x1 grid therefore always counts 0, and on a 2-wide grid
        the cell across the seam is counted twice. This is left as is.

        Args:
            r: Row of the cell
            c: Column of the cell

        Returns:
            Number of live neighbors (0-8)
        """
        self.index(r, c)

        alive = 0
        for i in range(self.rows + r - 1, self.rows + r + 2):
            for j in range(self.cols + c - 1, self.cols + c + 2):
                if i % self.rows == r and j % self.cols == c:
                    continue
                alive += int(self.cells[(i % self.rows) * self.cols + (j % self.cols)])
        return alive

    def neighbor_counts(self) -> np.ndarray:
        """Count live neighbors of every cell at once.

        Equivalent to calling neighbor_count() on each cell, including the
        small-grid coincidences: an offset is dropped exactly when it wraps
        back onto the center cell.

        Returns:
            Integer array of shape (rows, cols)
        """
        state = self.state.astype(np.int8)
        counts = np.zeros((self.rows, self.cols), dtype=np.int8)

        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr % self.rows == 0 and dc % self.cols == 0:
                    continue
                counts += np.roll(state, (-dr, -dc), axis=(0, 1))

        return counts

    def step(self) -> int:
        """Advance the grid one generation in place.

        All neighbor counts are taken from the pre-step state before any cell
        changes; the next generation is built in a second buffer and then
        copied back.

        Returns:
            Number of live cells after the step
        """
        counts = self.neighbor_counts().reshape(-1)
        self.cells[:] = next_generation(self.cells, counts)
        self.generation += 1
        return self.live_count()

    def snapshot(self) -> GridSnapshot:
        """Get a detached, read-only copy of the current state."""
        cells = self.cells.copy()
        cells.flags.writeable = False
        return GridSnapshot(self.rows, self.cols, self.generation, cells)

    def live_count(self) -> int:
        """Count total number of live cells."""
        return int(np.count_nonzero(self.cells))

    def live_cells(self) -> List[Coordinate]:
        """Get (row, col) of every live cell in row-major order."""
        return [divmod(int(i), self.cols) for i in np.flatnonzero(self.cells)]

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.cells)

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid, generation included."""
        new_grid = Grid(self.rows, self.cols, self.cells)
        new_grid.generation = self.generation
        return new_grid

    def __getitem__(self, key: Coordinate) -> bool:
        """Access cell state using grid[r, c] syntax."""
        r, c = key
        return self.get(r, c)

    def __setitem__(self, key: Coordinate, value: bool) -> None:
        """Set cell state using grid[r, c] = value syntax."""
        r, c = key
        self.set(r, c, value)

    def __eq__(self, other: object) -> bool:
        """Grids are equal when dimensions and cell states match."""
        if not isinstance(other, Grid):
            return False
        return (self.rows == other.rows and
                self.cols == other.cols and
                np.array_equal(self.cells, other.cells))

    def __str__(self) -> str:
        """Render grid with the console glyphs."""
        return self.snapshot().to_text()

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, generation={self.generation}, alive={self.live_count()})"
