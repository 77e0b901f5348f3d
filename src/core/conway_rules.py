"""
Conway's Game of Life Transition Rules

Neighbor counting on the torus and the per-cell transition function.
Rules are applied in a fixed order:

1. Alive cell with 0-1 live neighbors dies (loneliness)
2. Dead cell with exactly 3 live neighbors becomes alive (reproduction)
3. Alive cell with 2-3 live neighbors survives
4. Alive cell with 4 or more live neighbors dies (overpopulation)
5. Any other cell keeps its state
"""

from typing import Dict, Set, Tuple

from .grid import CellState, Grid


SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


def count_live_neighbors(grid: Grid, row: int, col: int) -> int:
    """Count live neighbors of the cell at (row, col) on the torus.

    Args:
        grid: Grid to inspect
        row: Cell row
        col: Cell column

    Returns:
        Number of live neighbors (0-8)

    Raises:
        IndexError: If coordinates are out of bounds
    """
    state = grid.state
    count = 0
    for nr, nc in grid.neighbors(row, col):
        if state[nr, nc]:
            count += 1
    return count


def next_state(state: CellState, live_neighbors: int) -> CellState:
    """Apply Conway's rules to determine the next state of a cell.

    Args:
        state: Current cell state
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state
    """
    if state is CellState.ALIVE and live_neighbors <= 1:
        return CellState.DEAD      # Loneliness
    elif state is CellState.DEAD and live_neighbors in BIRTH_SET:
        return CellState.ALIVE     # Reproduction
    elif state is CellState.ALIVE and live_neighbors in SURVIVAL_SET:
        return CellState.ALIVE     # Survival
    elif state is CellState.ALIVE and live_neighbors >= 4:
        return CellState.DEAD      # Overpopulation
    return state


def rule_table() -> Dict[Tuple[CellState, int], CellState]:
    """Get the outcome for every (state, neighbor count) combination.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    return {
        (state, neighbors): next_state(state, neighbors)
        for state in CellState
        for neighbors in range(9)
    }
