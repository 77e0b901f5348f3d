"""Toroidal grid state for Conway's Game of Life.

The grid is a 2D numpy boolean array (True=alive, False=dead) whose edges
wrap around: the left edge is adjacent to the right edge and the top edge
to the bottom edge. All neighbor lookups go through ``Grid.neighbors`` so
the wrap rule lives in exactly one place.
"""

import numpy as np
from enum import Enum
from typing import Iterator, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class CellState(Enum):
    """State of a single cell."""
    DEAD = False
    ALIVE = True

    def __bool__(self) -> bool:
        return self.value

    @classmethod
    def from_bool(cls, alive: bool) -> 'CellState':
        return cls.ALIVE if alive else cls.DEAD


# Neighbor offsets in lookup order: left column, center column, right column
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class Grid:
    """2D boolean grid on a torus.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        state: 2D numpy boolean array of shape (rows, cols)
    """

    def __init__(self, rows: int, cols: int, initial_state: Optional[np.ndarray] = None):
        """Initialize grid with given dimensions.

        Args:
            rows: Number of rows (at least 1)
            cols: Number of columns (at least 1)
            initial_state: Optional initial boolean array, copied into the grid

        Raises:
            ValueError: If dimensions are invalid or initial_state doesn't match
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols

        if initial_state is not None:
            if initial_state.shape != (rows, cols):
                raise ValueError(f"Initial state shape {initial_state.shape} doesn't match grid size {(rows, cols)}")
            if initial_state.dtype != bool:
                raise ValueError("Initial state must be boolean array")
            self.state = initial_state.copy()
        else:
            self.state = np.zeros((rows, cols), dtype=bool)

        logger.debug(f"Created {rows}x{cols} grid")

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid."""
        return Grid(self.rows, self.cols, self.state)

    def to_array(self) -> np.ndarray:
        """Get grid as a fresh numpy array."""
        return self.state.copy()

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")

    def get(self, row: int, col: int) -> bool:
        """Get cell state at coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return bool(self.state[row, col])

    def set(self, row: int, col: int, alive: bool) -> None:
        """Set cell state at coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        self.state[row, col] = bool(alive)

    def wrap(self, row: int, col: int) -> Tuple[int, int]:
        """Map a coordinate one step off the grid back onto the torus.

        A row or column of -1 becomes the last index and one equal to the
        dimension becomes 0. Any other coordinate is returned unchanged.
        """
        if row == -1:
            row = self.rows - 1
        elif row == self.rows:
            row = 0

        if col == -1:
            col = self.cols - 1
        elif col == self.cols:
            col = 0

        return row, col

    def neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """Yield the 8 wrapped neighbor coordinates of a cell.

        On grids narrower than 3 cells the same coordinate can be yielded
        more than once, and a 1x1 grid yields the cell itself 8 times.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        for dr, dc in NEIGHBOR_OFFSETS:
            yield self.wrap(row + dr, col + dc)

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self.state))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not self.state.any()

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using grid[row, col] syntax."""
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: Tuple[int, int], value: bool) -> None:
        """Set cell state using grid[row, col] = value syntax."""
        row, col = key
        self.set(row, col, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return False
        return (self.rows == other.rows and
                self.cols == other.cols and
                np.array_equal(self.state, other.state))

    def __str__(self) -> str:
        """String representation showing live cells as X."""
        return '\n'.join(
            ''.join('X' if alive else '.' for alive in row)
            for row in self.state
        )

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, alive={self.count_alive()})"
