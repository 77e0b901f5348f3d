"""Plain-text grid files.

A grid file is a sequence of whitespace-separated tokens: the row count,
the column count, then rows * cols cell values in row-major order. Cell
values are ``true``/``false`` (any case) or ``1``/``0``. Line breaks carry
no meaning, though ``format_grid`` writes one grid row per line::

    3
    3
    false true false
    false true false
    false true false
"""

import numpy as np
from pathlib import Path
from typing import List, Union
import logging

from ..core.grid import Grid

logger = logging.getLogger(__name__)

_TRUE_TOKENS = {'true', '1'}
_FALSE_TOKENS = {'false', '0'}


class GridFormatError(ValueError):
    """Raised when grid text is malformed."""


def _parse_dimension(token: str, name: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise GridFormatError(f"{name} count must be an integer, got {token!r}") from None
    if value < 1:
        raise GridFormatError(f"{name} count must be positive, got {value}")
    return value


def _parse_cell(token: str, position: int) -> bool:
    lowered = token.lower()
    if lowered in _TRUE_TOKENS:
        return True
    if lowered in _FALSE_TOKENS:
        return False
    raise GridFormatError(f"Cell {position} must be a boolean, got {token!r}")


def parse_grid(text: str) -> Grid:
    """Parse grid text into a Grid.

    Args:
        text: Grid file contents

    Returns:
        Grid holding the parsed cells

    Raises:
        GridFormatError: If the text is malformed
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise GridFormatError("Grid text must start with row and column counts")

    rows = _parse_dimension(tokens[0], "Row")
    cols = _parse_dimension(tokens[1], "Column")

    cells = tokens[2:]
    expected = rows * cols
    if len(cells) != expected:
        raise GridFormatError(f"Expected {expected} cell values for a {rows}x{cols} grid, got {len(cells)}")

    values: List[bool] = [_parse_cell(token, i) for i, token in enumerate(cells)]
    state = np.array(values, dtype=bool).reshape(rows, cols)
    return Grid(rows, cols, state)


def load_grid(path: Union[str, Path]) -> Grid:
    """Load a grid file from disk.

    Raises:
        FileNotFoundError: If the file doesn't exist
        GridFormatError: If the file contents are malformed
    """
    path = Path(path)
    grid = parse_grid(path.read_text())
    logger.debug(f"Loaded {grid.rows}x{grid.cols} grid from {path} ({grid.count_alive()} alive)")
    return grid


def format_grid(grid: Grid) -> str:
    """Write a grid in grid-file format, one grid row per line."""
    lines = [str(grid.rows), str(grid.cols)]
    for row in grid.state:
        lines.append(' '.join('true' if alive else 'false' for alive in row))
    return '\n'.join(lines) + '\n'
