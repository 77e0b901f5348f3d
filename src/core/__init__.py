"""
Core simulation: toroidal grid, Conway transition rules, the
generation engine and the union-find used for community counting.
"""

from .grid import CellState, Grid
from .config import EngineConfig
from .union_find import WeightedQuickUnionUF
from .conway import GameOfLife

__all__ = [
    'CellState',
    'Grid',
    'EngineConfig',
    'WeightedQuickUnionUF',
    'GameOfLife',
]
