"""Conway's Game of Life on a torus, with community counting."""

__version__ = "0.1.0"
