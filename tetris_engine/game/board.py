"""
Tetris Board - the grid of settled cells.

Row 0 is the bottom of the well and row ``height - 1`` the top. The grid is
a numpy array indexed ``[y, x]`` holding ``Shape`` values.
"""

from typing import Iterator, List, Tuple

import numpy as np

from .piece import Piece, Shape


class Board:
    """Fixed-size grid with placement checks and line clearing."""

    def __init__(self, width: int = 10, height: int = 22):
        """
        Initialize an empty board.

        Args:
            width: Board width in cells
            height: Board height in cells
        """
        self.width = width
        self.height = height
        self._grid = np.zeros((height, width), dtype=np.int8)

    def reset(self) -> None:
        """Set every cell to NO_BLOCK."""
        self._grid.fill(Shape.NO_BLOCK)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_cell(self, x: int, y: int, shape: Shape) -> None:
        """Overwrite a single cell (used to set up positions)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self.width}x{self.height} board")
        self._grid[y, x] = shape

    def is_empty_at(self, x: int, y: int) -> bool:
        """True iff (x, y) is on the board and holds no block."""
        if not self.in_bounds(x, y):
            return False
        return self._grid[y, x] == Shape.NO_BLOCK

    def can_place(self, piece: Piece, x: int, y: int) -> bool:
        """Check that every cell of the piece at pivot (x, y) is on the board and empty."""
        for cx, cy in piece.cells_at(x, y):
            if not self.is_empty_at(cx, cy):
                return False
        return True

    def commit(self, piece: Piece, x: int, y: int) -> None:
        """
        Write the piece into the grid at pivot (x, y).

        The caller must have checked can_place() for this exact placement.
        """
        for cx, cy in piece.cells_at(x, y):
            self._grid[cy, cx] = piece.shape

    def is_row_full(self, y: int) -> bool:
        return bool(np.all(self._grid[y] != Shape.NO_BLOCK))

    def clear_full_rows(self) -> int:
        """
        Remove every full row and shift the rows above it down.

        Scans bottom to top once. After a row is removed the same index is
        checked again, since it now holds the row that was above.

        Returns:
            Number of rows cleared
        """
        cleared = 0
        y = 0
        while y < self.height:
            if self.is_row_full(y):
                cleared += 1
                self._grid[y:-1] = self._grid[y + 1:].copy()
                self._grid[-1] = Shape.NO_BLOCK
            else:
                y += 1
        return cleared

    def settled_cells(self) -> Iterator[Tuple[int, int, Shape]]:
        """Yield (x, y, shape) for every occupied cell."""
        ys, xs = np.nonzero(self._grid)
        for y, x in zip(ys.tolist(), xs.tolist()):
            yield x, y, Shape(int(self._grid[y, x]))

    def to_array(self) -> np.ndarray:
        """Read-only copy of the grid, indexed [y, x]."""
        grid = self._grid.copy()
        grid.setflags(write=False)
        return grid

    def to_rows(self) -> List[List[int]]:
        """Grid as nested lists, bottom row first."""
        return self._grid.tolist()
