"""Readers and writers for grid files."""

from .grid_file import GridFormatError, format_grid, load_grid, parse_grid

__all__ = [
    'GridFormatError',
    'format_grid',
    'load_grid',
    'parse_grid',
]
