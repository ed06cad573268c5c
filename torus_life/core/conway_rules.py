"""
Conway's Game of Life Transition Rules

The four classic rules, applied to whole arrays of cells:
1. Live cell with fewer than two live neighbors dies (underpopulation).
2. Live cell with two or three live neighbors lives on.
3. Live cell with more than three live neighbors dies (overpopulation).
4. Dead cell with exactly three live neighbors becomes alive (reproduction).
"""

from typing import Set

import numpy as np


SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


def next_generation(state: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """Apply Conway's rules to every cell at once.

    Args:
        state: Boolean array of current cell states
        counts: Integer array of live-neighbor counts, same shape as state

    Returns:
        New boolean array holding the next generation; inputs are untouched
    """
    survive = state & np.isin(counts, sorted(SURVIVAL_SET))
    born = ~state & np.isin(counts, sorted(BIRTH_SET))
    return survive | born
