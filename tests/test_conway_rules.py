"""Tests for Conway's Game of Life rules.

Covers the vectorized transition and the way Grid.step() applies it:
all four rules and simultaneous updates.
"""

import pytest
import numpy as np
from torus_life.core.conway_rules import SURVIVAL_SET, BIRTH_SET, next_generation
from torus_life.core.grid import Grid


def transition(alive: bool, neighbors: int) -> bool:
    """Next state of a single cell."""
    return bool(next_generation(np.array([alive]), np.array([neighbors]))[0])


class TestSingleCellRules:
    """Test Conway rules for individual cells."""

    @pytest.mark.parametrize("neighbors", [0, 1])
    def test_live_cell_underpopulation(self, neighbors):
        """Live cell with <2 neighbors dies."""
        assert transition(True, neighbors) is False

    @pytest.mark.parametrize("neighbors", [2, 3])
    def test_live_cell_survival(self, neighbors):
        """Live cell with 2-3 neighbors survives."""
        assert transition(True, neighbors) is True

    @pytest.mark.parametrize("neighbors", [4, 5, 6, 7, 8])
    def test_live_cell_overpopulation(self, neighbors):
        """Live cell with >3 neighbors dies."""
        assert transition(True, neighbors) is False

    def test_dead_cell_reproduction(self):
        """Dead cell with exactly 3 neighbors becomes alive."""
        assert transition(False, 3) is True

    @pytest.mark.parametrize("neighbors", [0, 1, 2, 4, 5, 6, 7, 8])
    def test_dead_cell_other_counts(self, neighbors):
        """Dead cell with !=3 neighbors stays dead."""
        assert transition(False, neighbors) is False

    def test_rule_sets(self):
        """Rule constants are the classic B3/S23."""
        assert SURVIVAL_SET == {2, 3}
        assert BIRTH_SET == {3}


class TestNextGeneration:
    """Test the vectorized transition."""

    def test_all_cases_follow_rule_sets(self):
        """Every (state, count) pair follows SURVIVAL_SET and BIRTH_SET."""
        states = np.array([alive for alive in (False, True) for _ in range(9)])
        counts = np.array([n for _ in (False, True) for n in range(9)])

        result = next_generation(states, counts)
        expected = [int(n) in (SURVIVAL_SET if s else BIRTH_SET) for s, n in zip(states, counts)]
        assert result.tolist() == expected

    def test_rule_sets_drive_transition(self, monkeypatch):
        """The rule constants are the single source for the transition."""
        monkeypatch.setattr("torus_life.core.conway_rules.BIRTH_SET", {2})
        assert transition(False, 2) is True
        assert transition(False, 3) is False

    def test_works_on_2d_arrays(self):
        """Shape of the input is preserved."""
        states = np.zeros((2, 3), dtype=bool)
        counts = np.full((2, 3), 3)
        result = next_generation(states, counts)
        assert result.shape == (2, 3)
        assert result.all()

    def test_vectorized_does_not_modify_input(self):
        """next_generation() returns a new array."""
        states = np.array([True, False, True])
        counts = np.array([0, 3, 2])
        original = states.copy()

        next_generation(states, counts)
        np.testing.assert_array_equal(states, original)


class TestGridStep:
    """Test rules as applied by Grid.step()."""

    def test_lone_cell_dies(self):
        """Rule 1: an isolated live cell dies."""
        grid = Grid.from_live_cells(5, 5, [(2, 2)])
        grid.step()
        assert grid.is_empty()

    def test_l_tromino_becomes_block(self):
        """Rules 2 and 4: three cells of a square survive and fill the fourth."""
        grid = Grid.from_live_cells(5, 5, [(1, 1), (1, 2), (2, 1)])
        grid.step()
        assert grid.live_cells() == [(1, 1), (1, 2), (2, 1), (2, 2)]

    def test_overcrowded_center_dies(self):
        """Rule 3: a live cell with 4 live neighbors dies."""
        grid = Grid.from_live_cells(5, 5, [(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)])
        grid.step()
        assert grid[2, 2] is False

    def test_step_returns_live_count(self):
        """step() reports live cells after the update."""
        grid = Grid.from_live_cells(5, 5, [(2, 1), (2, 2), (2, 3)])
        assert grid.step() == 3

    def test_step_increments_generation(self):
        """Each step advances the generation counter."""
        grid = Grid(4, 4)
        grid.step()
        grid.step()
        assert grid.generation == 2

    def test_updates_are_simultaneous(self):
        """Counts come from the pre-step state, not partially updated cells."""
        grid = Grid.from_live_cells(5, 5, [(1, 0), (1, 1), (1, 2)])
        grid.step()
        assert grid.live_cells() == [(0, 1), (1, 1), (2, 1)]

    def test_step_is_deterministic(self):
        """Identical grids evolve identically."""
        rng = np.random.default_rng(7)
        initial = rng.random((12, 12)) < 0.4
        grid1 = Grid(12, 12, initial)
        grid2 = Grid(12, 12, initial)

        for generation in range(10):
            grid1.step()
            grid2.step()
            assert grid1 == grid2, f"Grids diverged at generation {generation}"

    def test_step_total_on_degenerate_grids(self):
        """Single-row, single-column and single-cell grids step without error."""
        for rows, cols in [(1, 1), (1, 6), (6, 1), (2, 2)]:
            grid = Grid(rows, cols, np.ones((rows, cols), dtype=bool))
            grid.step()
            assert grid.cells.shape == (rows * cols,)

    def test_single_cell_grid_dies(self):
        """A live 1x1 grid has no neighbors and dies."""
        grid = Grid.from_live_cells(1, 1, [(0, 0)])
        grid.step()
        assert grid.is_empty()
