"""Conway's Game of Life engine on a toroidal grid.

Holds the current generation, advances it with the Conway rules and
counts communities: groups of live cells joined through any of their
8 wrapped neighbors.
"""

import numpy as np
from collections import defaultdict
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union
import logging

from .config import EngineConfig
from .conway_rules import count_live_neighbors, next_state
from .grid import CellState, Grid
from .union_find import WeightedQuickUnionUF
from ..patterns.seeds import default_seed

logger = logging.getLogger(__name__)


class GameOfLife:
    """Conway's Game of Life on a torus.

    The grid is never modified in place: each generation is computed into a
    new array from the current one and swapped in once complete.
    """

    def __init__(self, config: Optional[EngineConfig] = None, grid: Optional[Grid] = None):
        """Create an engine.

        Args:
            config: Engine configuration (defaults if None)
            grid: Starting grid, copied. If None the engine holds the 5x5
                default seed with five live cells.
        """
        self.config = config or EngineConfig()
        self._generation = 0

        if grid is None:
            seed = default_seed()
            self._grid = Grid(seed.shape[0], seed.shape[1], seed)
            self._alive_count = 5
            logger.debug(f"Created engine with default {self.rows}x{self.cols} seed")
        else:
            self._grid = grid.copy()
            self._alive_count = grid.count_alive() if self.config.recompute_alive_count else 0
            logger.debug(f"Created engine with {grid.rows}x{grid.cols} grid")

    @classmethod
    def from_grid(cls, grid: Grid, config: Optional[EngineConfig] = None) -> 'GameOfLife':
        """Create an engine from an existing grid (copied)."""
        return cls(config, grid)

    @classmethod
    def from_values(cls, rows: int, cols: int, values: Iterable,
                    config: Optional[EngineConfig] = None) -> 'GameOfLife':
        """Create an engine from rows * cols booleans in row-major order.

        Args:
            rows: Number of rows
            cols: Number of columns
            values: Cell values, flat or nested as rows x cols
            config: Engine configuration

        Raises:
            ValueError: If dimensions are invalid, the value count or nested
                shape doesn't match, or any value is not a boolean
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        cells = np.asarray(list(values))
        if cells.size != rows * cols:
            raise ValueError(f"Expected {rows * cols} cell values for a {rows}x{cols} grid, got {cells.size}")
        if cells.ndim > 1 and cells.shape != (rows, cols):
            raise ValueError(f"Nested values of shape {cells.shape} don't match grid size {(rows, cols)}")
        if cells.dtype != bool:
            raise ValueError(f"Cell values must be booleans, got {cells.dtype}")

        return cls.from_grid(Grid(rows, cols, cells.reshape(rows, cols)), config)

    @classmethod
    def from_file(cls, path: Union[str, Path],
                  config: Optional[EngineConfig] = None) -> 'GameOfLife':
        """Create an engine from a grid file (see ``src.loaders.grid_file``)."""
        from ..loaders.grid_file import load_grid

        return cls.from_grid(load_grid(path), config)

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def generation(self) -> int:
        """Number of generations advanced since construction."""
        return self._generation

    def get_grid(self) -> np.ndarray:
        """Get a copy of the current grid as a boolean array."""
        return self._grid.to_array()

    def get_total_alive_cells(self) -> int:
        """Get the cached number of live cells."""
        return self._alive_count

    def get_cell_state(self, row: int, col: int) -> CellState:
        """Get the state of the cell at (row, col).

        Returns a CellState, not a bool. It is truthy only when ALIVE, so use
        ``bool(state)`` or ``state is CellState.ALIVE``; ``state == True`` is
        always False.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        return CellState.from_bool(self._grid.get(row, col))

    def is_alive(self) -> bool:
        """Check whether at least one cell is alive."""
        return not self._grid.is_empty()

    def num_of_alive_neighbors(self, row: int, col: int) -> int:
        """Count live cells among the 8 wrapped neighbors of (row, col).

        Raises:
            IndexError: If coordinates are out of bounds
        """
        return count_live_neighbors(self._grid, row, col)

    def compute_new_grid(self) -> np.ndarray:
        """Compute the next generation without changing the current one.

        Returns:
            New boolean array holding the next generation
        """
        current = self._grid.state
        new_state = np.zeros_like(current)

        for row in range(self.rows):
            for col in range(self.cols):
                state = CellState.from_bool(current[row, col])
                neighbors = count_live_neighbors(self._grid, row, col)
                new_state[row, col] = next_state(state, neighbors).value

        return new_state

    def _advance(self) -> None:
        was_alive = self.is_alive()

        self._grid = Grid(self.rows, self.cols, self.compute_new_grid())
        if self.config.recompute_alive_count:
            self._alive_count = self._grid.count_alive()
        else:
            self._alive_count = self.get_total_alive_cells()
        self._generation += 1

        interval = self.config.log_interval
        if interval and self._generation % interval == 0:
            logger.info(f"Generation {self._generation}: {self._grid.count_alive()} alive")
        if was_alive and not self.is_alive():
            logger.info(f"Population died out at generation {self._generation}")

    def next_generation(self, n: int = 1) -> None:
        """Advance the grid n generations.

        Args:
            n: Number of generations (0 leaves the grid unchanged)

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError(f"Generation count must be non-negative, got {n}")

        for _ in range(n):
            self._advance()

    def _union_communities(self) -> WeightedQuickUnionUF:
        """Join every live cell with its live wrapped neighbors."""
        grid = self._grid
        uf = WeightedQuickUnionUF(self.rows, self.cols)

        for row, col in self._live_cells():
            for nr, nc in grid.neighbors(row, col):
                if grid.state[nr, nc]:
                    uf.union(row, col, nr, nc)

        return uf

    def _live_cells(self) -> List[Tuple[int, int]]:
        return [(int(row), int(col)) for row, col in np.argwhere(self._grid.state)]

    def num_of_communities(self) -> int:
        """Count groups of live cells connected through their 8 wrapped neighbors.

        Returns:
            Number of communities (0 if no cell is alive)
        """
        uf = self._union_communities()
        roots = {uf.find(row, col) for row, col in self._live_cells()}
        return len(roots)

    def community_sizes(self) -> List[int]:
        """Get the number of live cells in each community, largest first."""
        uf = self._union_communities()
        sizes = defaultdict(int)
        for row, col in self._live_cells():
            sizes[uf.find(row, col)] += 1
        return sorted(sizes.values(), reverse=True)

    def __str__(self) -> str:
        return str(self._grid)

    def __repr__(self) -> str:
        return (f"GameOfLife({self.rows}x{self.cols}, generation={self._generation}, "
                f"alive={self._alive_count})")
