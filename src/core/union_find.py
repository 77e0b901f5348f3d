"""
Weighted Quick-Union over grid coordinates.

Disjoint-set structure whose elements are the cells of a rows x cols grid.
Callers address elements by (row, col); the flat index row * cols + col is
used internally and returned by find() as the set representative.
"""

import numpy as np
import logging

logger = logging.getLogger(__name__)


class WeightedQuickUnionUF:
    """Union-find with union by size and path compression.

    Attributes:
        rows: Number of grid rows
        cols: Number of grid columns
        count: Number of disjoint sets over all rows * cols elements
    """

    def __init__(self, rows: int, cols: int):
        """Create rows * cols singleton sets.

        Raises:
            ValueError: If rows or cols is not positive
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Union-find dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self.count = rows * cols
        self._parent = np.arange(rows * cols, dtype=np.int64)
        self._size = np.ones(rows * cols, dtype=np.int64)

        logger.debug(f"Created union-find over {rows}x{cols} cells")

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.rows}x{self.cols} union-find")
        return row * self.cols + col

    def _root(self, index: int) -> int:
        parent = self._parent
        root = index
        while parent[root] != root:
            root = parent[root]

        # Point every node on the path straight at the root
        while parent[index] != root:
            next_index = parent[index]
            parent[index] = root
            index = next_index

        return int(root)

    def find(self, row: int, col: int) -> int:
        """Return the representative index of the set containing (row, col).

        Raises:
            IndexError: If coordinates are out of bounds
        """
        return self._root(self._index(row, col))

    def union(self, row1: int, col1: int, row2: int, col2: int) -> None:
        """Merge the sets containing (row1, col1) and (row2, col2).

        The root of the smaller tree is attached under the root of the larger
        one; on a tie the second root goes under the first.

        Raises:
            IndexError: If either coordinate is out of bounds
        """
        root1 = self.find(row1, col1)
        root2 = self.find(row2, col2)
        if root1 == root2:
            return

        if self._size[root1] < self._size[root2]:
            self._parent[root1] = root2
            self._size[root2] += self._size[root1]
        else:
            self._parent[root2] = root1
            self._size[root1] += self._size[root2]
        self.count -= 1

    def connected(self, row1: int, col1: int, row2: int, col2: int) -> bool:
        """Check if two cells are in the same set."""
        return self.find(row1, col1) == self.find(row2, col2)

    def component_size(self, row: int, col: int) -> int:
        """Number of cells in the set containing (row, col)."""
        return int(self._size[self.find(row, col)])

    def __repr__(self) -> str:
        return f"WeightedQuickUnionUF({self.rows}x{self.cols}, sets={self.count})"
