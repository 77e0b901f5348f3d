"""Tests for the GameOfLife engine.

Covers construction, the public query surface, generation stepping and
the cached alive count in both maintenance modes.
"""

import logging

import pytest
import numpy as np
from src.core.config import EngineConfig
from src.core.conway import GameOfLife
from src.core.grid import CellState, Grid
from src.patterns.seeds import DEFAULT_SEED_CELLS


def _engine(rows, cols, live, config=None):
    """Build an engine with the given live cells."""
    values = np.zeros((rows, cols), dtype=bool)
    for row, col in live:
        values[row, col] = True
    return GameOfLife.from_values(rows, cols, values.ravel(), config)


class TestDefaultConstruction:
    """Test the default 5x5 seed."""

    def setup_method(self):
        self.game = GameOfLife()

    def test_default_seed(self):
        """Default grid is 5x5 with the five seeded cells."""
        grid = self.game.get_grid()

        assert grid.shape == (5, 5)
        assert grid.dtype == bool
        assert int(grid.sum()) == 5
        for row, col in DEFAULT_SEED_CELLS:
            assert self.game.get_cell_state(row, col) is CellState.ALIVE

    def test_default_alive_count(self):
        """Default alive count is 5."""
        assert self.game.get_total_alive_cells() == 5
        assert self.game.generation == 0

    def test_dies_after_four_generations(self):
        """Default seed is alive for three generations and empty after the fourth."""
        for _ in range(3):
            self.game.next_generation()
            assert self.game.is_alive()

        self.game.next_generation()
        assert not self.game.is_alive()
        assert self.game.generation == 4

    def test_alive_counts_per_generation(self):
        """Population shrinks 5, 4, 3, 2, 0."""
        counts = [self.game.get_total_alive_cells()]
        for _ in range(4):
            self.game.next_generation()
            counts.append(self.game.get_total_alive_cells())

        assert counts == [5, 4, 3, 2, 0]

    def test_dead_grid_stays_dead(self):
        """An empty grid's next generation is always empty."""
        self.game.next_generation(4)
        for _ in range(5):
            self.game.next_generation()
            assert not self.game.is_alive()
            assert not self.game.get_grid().any()


class TestConstructionFromValues:
    """Test building engines from external data."""

    def test_flat_values(self):
        """Row-major flat values fill the grid in order."""
        game = GameOfLife.from_values(2, 3, [True, False, False, False, False, True])

        assert game.rows == 2
        assert game.cols == 3
        assert game.get_cell_state(0, 0) is CellState.ALIVE
        assert game.get_cell_state(1, 2) is CellState.ALIVE
        assert game.get_cell_state(0, 1) is CellState.DEAD

    def test_nested_values(self):
        """Nested rows are accepted."""
        game = GameOfLife.from_values(2, 2, [[False, True], [True, False]])

        assert np.array_equal(game.get_grid(), np.array([[False, True], [True, False]]))

    def test_alive_count_from_values(self):
        """Alive count is derived from the loaded values."""
        game = GameOfLife.from_values(2, 2, [True, True, False, True])
        assert game.get_total_alive_cells() == 3

    def test_value_count_mismatch(self):
        """Wrong number of values raises ValueError."""
        with pytest.raises(ValueError, match="Expected 6 cell values"):
            GameOfLife.from_values(2, 3, [True, False])

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0)])
    def test_invalid_dimensions(self, rows, cols):
        """Non-positive dimensions raise ValueError."""
        with pytest.raises(ValueError, match="must be positive"):
            GameOfLife.from_values(rows, cols, [])

    @pytest.mark.parametrize("values", [
        ["false", "true", "false"],
        [2, 0, 1],
        [0.5, 0.0, 1.0],
        ["false", 2, 0.5],
    ])
    def test_non_boolean_values_rejected(self, values):
        """Truthy non-boolean values are not read as live cells."""
        with pytest.raises(ValueError, match="must be booleans"):
            GameOfLife.from_values(1, 3, values)

    def test_nested_shape_mismatch(self):
        """Nested rows must match the grid's rows and columns."""
        transposed = [[True, False], [False, False], [False, True]]

        with pytest.raises(ValueError, match=r"shape \(3, 2\) don't match"):
            GameOfLife.from_values(2, 3, transposed)

    def test_numpy_values(self):
        """Flat or 2D numpy boolean arrays are accepted."""
        cells = np.array([[True, False, True], [False, True, False]])

        assert np.array_equal(GameOfLife.from_values(2, 3, cells).get_grid(), cells)
        assert np.array_equal(GameOfLife.from_values(2, 3, cells.ravel()).get_grid(), cells)

    def test_loaded_engine_skips_default_seed(self, caplog):
        """Loading a grid doesn't build or log the default seed."""
        with caplog.at_level(logging.DEBUG, logger="src.core.conway"):
            game = GameOfLife.from_values(2, 2, [True, False, False, False])

        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["Created engine with 2x2 grid"]
        assert game.get_total_alive_cells() == 1

    def test_from_grid_copies(self):
        """Engine doesn't alias the grid it was built from."""
        grid = Grid(3, 3)
        game = GameOfLife.from_grid(grid)

        grid[1, 1] = True
        assert not game.is_alive()


class TestQueries:
    """Test the read-only query surface."""

    def test_get_grid_returns_copy(self):
        """Mutating the returned array doesn't change the engine."""
        game = GameOfLife()
        grid = game.get_grid()
        grid[:] = False

        assert game.is_alive()
        assert game.get_cell_state(1, 1) is CellState.ALIVE

    def test_cell_state_is_enum(self):
        """Cell states compare by identity and convert to bool."""
        game = GameOfLife()
        alive = game.get_cell_state(1, 1)
        dead = game.get_cell_state(0, 0)

        assert alive is CellState.ALIVE
        assert bool(alive) is True
        assert bool(dead) is False
        assert alive != True  # noqa: E712

    def test_cell_state_out_of_bounds(self):
        """Off-grid coordinates raise IndexError."""
        game = GameOfLife()

        with pytest.raises(IndexError):
            game.get_cell_state(5, 0)
        with pytest.raises(IndexError):
            game.get_cell_state(0, -1)

    def test_neighbors_out_of_bounds(self):
        """Off-grid coordinates raise IndexError."""
        game = GameOfLife()

        with pytest.raises(IndexError):
            game.num_of_alive_neighbors(-1, 0)

    def test_is_alive(self):
        """is_alive reports any live cell."""
        assert not _engine(3, 3, []).is_alive()
        assert _engine(3, 3, [(2, 2)]).is_alive()

    def test_default_seed_neighbors(self):
        """Neighbor counts of the default seed."""
        game = GameOfLife()

        assert game.num_of_alive_neighbors(2, 2) == 4
        assert game.num_of_alive_neighbors(1, 2) == 3
        assert game.num_of_alive_neighbors(1, 1) == 1
        assert game.num_of_alive_neighbors(0, 0) == 1

    def test_neighbor_range(self):
        """Neighbor counts stay within 0-8."""
        game = _engine(4, 4, [(0, 0), (0, 1), (1, 0), (3, 3), (2, 2)])
        for row in range(4):
            for col in range(4):
                assert 0 <= game.num_of_alive_neighbors(row, col) <= 8

    def test_wraparound_neighbors(self):
        """A live cell at (0,0) neighbors the wrapped corners and edges."""
        game = _engine(4, 5, [(0, 0)])

        for row, col in [(3, 4), (3, 0), (0, 4), (3, 1), (1, 4)]:
            assert game.num_of_alive_neighbors(row, col) == 1


class TestGenerationStepping:
    """Test computing and committing generations."""

    def test_compute_new_grid_is_pure(self):
        """Computing the next grid twice gives identical results and changes nothing."""
        game = GameOfLife()
        before = game.get_grid()

        first = game.compute_new_grid()
        second = game.compute_new_grid()

        assert np.array_equal(first, second)
        assert first is not second
        assert np.array_equal(game.get_grid(), before)
        assert game.generation == 0

    def test_compute_uses_snapshot(self):
        """Births and deaths are decided from the previous generation only."""
        game = _engine(5, 5, [(2, 1), (2, 2), (2, 3)])
        new_grid = game.compute_new_grid()

        expected = np.zeros((5, 5), dtype=bool)
        expected[1, 2] = expected[2, 2] = expected[3, 2] = True
        assert np.array_equal(new_grid, expected)

    def test_default_seed_first_generation(self):
        """First generation of the default seed."""
        game = GameOfLife()
        game.next_generation()

        expected = np.zeros((5, 5), dtype=bool)
        for row, col in [(1, 2), (2, 1), (3, 2), (3, 3)]:
            expected[row, col] = True
        assert np.array_equal(game.get_grid(), expected)

    @pytest.mark.parametrize("n", [0, 1, 3])
    def test_multi_step_matches_single_steps(self, n):
        """next_generation(n) equals n single steps."""
        live = [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2), (5, 5), (5, 6), (6, 5)]
        batched = _engine(8, 8, live)
        stepped = _engine(8, 8, live)

        batched.next_generation(n)
        for _ in range(n):
            stepped.next_generation()

        assert np.array_equal(batched.get_grid(), stepped.get_grid())
        assert batched.generation == stepped.generation == n

    def test_zero_generations_is_noop(self):
        """n=0 leaves the grid untouched."""
        game = GameOfLife()
        before = game.get_grid()

        game.next_generation(0)

        assert np.array_equal(game.get_grid(), before)
        assert game.generation == 0

    def test_negative_generations(self):
        """Negative generation counts raise ValueError."""
        game = GameOfLife()
        with pytest.raises(ValueError, match="non-negative"):
            game.next_generation(-1)

    def test_full_torus_dies(self):
        """Every cell of a full torus dies of overpopulation."""
        game = _engine(3, 3, [(r, c) for r in range(3) for c in range(3)])
        game.next_generation()

        assert not game.is_alive()

    def test_single_cell_torus(self):
        """A live 1x1 torus sees itself 8 times and dies."""
        game = GameOfLife.from_values(1, 1, [True])

        assert game.num_of_alive_neighbors(0, 0) == 8
        game.next_generation()
        assert not game.is_alive()


class TestAliveCountMaintenance:
    """Test the two alive-count modes."""

    def test_recomputed_by_default(self):
        """Default config tracks the live population."""
        game = GameOfLife()
        game.next_generation(2)

        assert game.get_total_alive_cells() == int(game.get_grid().sum()) == 3

    def test_legacy_count_goes_stale(self):
        """Legacy config keeps the construction-time count."""
        game = GameOfLife(EngineConfig.legacy())
        game.next_generation(4)

        assert not game.is_alive()
        assert game.get_total_alive_cells() == 5

    def test_legacy_loaded_grid_starts_at_zero(self):
        """Legacy config doesn't count cells of loaded grids."""
        game = GameOfLife.from_values(2, 2, [True, True, True, False], EngineConfig.legacy())

        assert game.get_total_alive_cells() == 0
        assert game.is_alive()


class TestLogging:
    """Test progress logging."""

    def test_progress_interval(self, caplog):
        """Progress lines are logged every log_interval generations."""
        game = GameOfLife(EngineConfig(log_interval=2))

        with caplog.at_level(logging.INFO, logger="src.core.conway"):
            game.next_generation(4)

        messages = [record.getMessage() for record in caplog.records]
        assert "Generation 2: 3 alive" in messages
        assert "Generation 4: 0 alive" in messages
        assert "Population died out at generation 4" in messages

    def test_no_progress_by_default(self, caplog):
        """No progress lines when log_interval is 0."""
        game = GameOfLife()

        with caplog.at_level(logging.INFO, logger="src.core.conway"):
            game.next_generation(2)

        assert not any(r.getMessage().startswith("Generation") for r in caplog.records)


class TestConfig:
    """Test engine configuration."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.recompute_alive_count is True
        assert config.log_interval == 0

    def test_copy_is_independent(self):
        config = EngineConfig(log_interval=3)
        copy = config.copy()
        copy.log_interval = 10

        assert config.log_interval == 3
        assert repr(copy) == "EngineConfig(recompute_alive_count=True, log_interval=10)"

    def test_negative_interval(self):
        with pytest.raises(ValueError, match="non-negative"):
            EngineConfig(log_interval=-1)
