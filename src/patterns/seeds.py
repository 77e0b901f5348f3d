"""Seed patterns for Conway's Game of Life.

Boolean numpy arrays for the engine's default starting grid and for the
classic still life, oscillator and spaceship used to check the rules.
"""

import numpy as np
from typing import Dict, Tuple


# Live cells of the 5x5 default seed. This pattern dies out after exactly
# four generations.
DEFAULT_SEED_SIZE: Tuple[int, int] = (5, 5)
DEFAULT_SEED_CELLS: Tuple[Tuple[int, int], ...] = (
    (1, 1), (1, 3),
    (2, 2),
    (3, 2), (3, 3),
)

_PATTERNS: Dict[str, np.ndarray] = {
    # 2x2 still life
    'block': np.array([
        [True, True],
        [True, True]
    ], dtype=bool),

    # Horizontal period-2 oscillator
    'blinker': np.array([[True, True, True]], dtype=bool),

    # Southeast-moving glider, period 4
    'glider': np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool),
}


def default_seed() -> np.ndarray:
    """Create the 5x5 default starting grid with five live cells."""
    seed = np.zeros(DEFAULT_SEED_SIZE, dtype=bool)
    for row, col in DEFAULT_SEED_CELLS:
        seed[row, col] = True
    return seed


def create_block_pattern() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return _PATTERNS['block'].copy()


def create_blinker_pattern() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells)."""
    return _PATTERNS['blinker'].copy()


def create_glider_pattern() -> np.ndarray:
    """Create classic glider pattern."""
    return _PATTERNS['glider'].copy()


def place_pattern(rows: int, cols: int, pattern: np.ndarray,
                  row: int = 0, col: int = 0) -> np.ndarray:
    """Place a pattern on an empty rows x cols grid array.

    Cells that fall off the bottom or right edge wrap around to the top or
    left, matching the torus the engine runs on.

    Args:
        rows: Grid rows
        cols: Grid columns
        pattern: 2D boolean pattern
        row: Row of the pattern's top-left cell
        col: Column of the pattern's top-left cell

    Returns:
        New boolean array of shape (rows, cols)

    Raises:
        ValueError: If the dimensions are not positive or the pattern
            doesn't fit on the grid
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

    pattern_rows, pattern_cols = pattern.shape
    if pattern_rows > rows or pattern_cols > cols:
        raise ValueError(f"Pattern {pattern.shape} doesn't fit on a {rows}x{cols} grid")

    grid = np.zeros((rows, cols), dtype=bool)
    for pr in range(pattern_rows):
        for pc in range(pattern_cols):
            if pattern[pr, pc]:
                grid[(row + pr) % rows, (col + pc) % cols] = True
    return grid
