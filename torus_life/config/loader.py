"""Configuration file loading for torus_life simulations.

A configuration is a stream of whitespace-separated integers:

    <rows> <cols>
    <n>
    <row> <col>     (repeated n times)

Line breaks are not significant. Every (row, col) pair must lie inside the
grid; anything outside is rejected before a grid is built.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union
import logging

from ..core.grid import Grid
from ..errors import ConfigLoadError, OutOfRangeCoordinate

logger = logging.getLogger(__name__)


@dataclass
class GridConfig:
    """Initial grid description parsed from a configuration source."""
    rows: int
    cols: int
    live_cells: List[Tuple[int, int]] = field(default_factory=list)
    source: str = "<string>"

    def build_grid(self) -> Grid:
        """Create the generation-0 grid for this configuration."""
        return Grid.from_live_cells(self.rows, self.cols, self.live_cells)


def _parse_int(token: str, what: str, source: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ConfigLoadError(f"Expected integer for {what} in {source}, got {token!r}", source) from None


def parse_config(text: str, source: str = "<string>") -> GridConfig:
    """Parse configuration text.

    Args:
        text: Configuration contents
        source: Label used in error messages

    Returns:
        GridConfig: Parsed and validated configuration

    Raises:
        ConfigLoadError: If the text is truncated, malformed or inconsistent
        OutOfRangeCoordinate: If a live cell lies outside the grid
    """
    tokens = text.split()

    if len(tokens) < 3:
        raise ConfigLoadError(f"Missing grid header in {source}: expected '<rows> <cols>' and '<n>'", source)

    rows = _parse_int(tokens[0], "rows", source)
    cols = _parse_int(tokens[1], "cols", source)
    count = _parse_int(tokens[2], "cell count", source)

    if rows < 1 or cols < 1:
        raise ConfigLoadError(f"Grid dimensions must be positive in {source}, got {rows}x{cols}", source)
    if count < 0:
        raise ConfigLoadError(f"Cell count must be non-negative in {source}, got {count}", source)

    body = tokens[3:]
    if len(body) < 2 * count:
        raise ConfigLoadError(
            f"Expected {count} coordinate pairs in {source}, found {len(body) // 2}", source)
    if len(body) > 2 * count:
        logger.warning(f"Ignoring {len(body) - 2 * count} trailing token(s) in {source}")

    live_cells = []
    for i in range(count):
        r = _parse_int(body[2 * i], f"row of pair {i + 1}", source)
        c = _parse_int(body[2 * i + 1], f"column of pair {i + 1}", source)
        if not (0 <= r < rows and 0 <= c < cols):
            raise OutOfRangeCoordinate(r, c, rows, cols, source)
        live_cells.append((r, c))

    logger.debug(f"Parsed {rows}x{cols} grid with {count} live cells from {source}")
    return GridConfig(rows, cols, live_cells, source)


def load_config(path: Union[str, Path]) -> GridConfig:
    """Read and parse a configuration file.

    Raises:
        ConfigLoadError: If the file cannot be opened or parsed
    """
    source = str(path)
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Could not open file: {source}", source) from e

    config = parse_config(text, source)
    logger.info(f"Loaded configuration {source}: {config.rows}x{config.cols}, "
                f"{len(config.live_cells)} live cells")
    return config


def load_grid(path: Union[str, Path]) -> Grid:
    """Read a configuration file and build its initial grid."""
    return load_config(path).build_grid()
