from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from pathfinder.heuristics.manhattan import manhattan


class Grid:
    """Dense 2-D grid backed by a numpy array, indexed (row, col) from 0."""
    def __init__(self, cells):
        arr = np.asarray(cells)
        if arr.ndim != 2:
            raise ValueError(f"grid must be 2-D, got shape {arr.shape}")
        self.cells = arr

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    def get(self, row: int, col: int):
        return self.cells[row, col].item()

    def set(self, row: int, col: int, val) -> None:
        self.cells[row, col] = val

    def in_bounds(self, row: int, col: int) -> bool:
        rows, cols = self.cells.shape
        return 0 <= row < rows and 0 <= col < cols

    def cursor_at(self, row: int, col: int) -> Optional["GridPos"]:
        if not self.in_bounds(row, col):
            return None
        return GridPos(row, col, self)

    def cursors(self) -> Iterator["GridPos"]:
        """Every cell, row-major."""
        rows, cols = self.cells.shape
        for r in range(rows):
            for c in range(cols):
                yield GridPos(r, c, self)

    def __str__(self) -> str:
        return "\n".join("".join(str(v) for v in row) for row in self.cells.tolist())


@dataclass(frozen=True)
class GridPos:
    """
    A cursor on a Grid. Equality and hashing use (row, col) only, so cursors are
    cheap dict/set keys. As a search node it moves to any in-bounds 4-neighbor.
    """
    row: int
    col: int
    grid: Grid = field(compare=False, repr=False)

    @property
    def value(self):
        return self.grid.get(self.row, self.col)

    @property
    def coord(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def move_by(self, down: int, right: int) -> Optional["GridPos"]:
        row, col = self.row + down, self.col + right
        if not self.grid.in_bounds(row, col):
            return None
        # keep subclasses (e.g. domain-specific nodes) closed under movement
        return type(self)(row, col, self.grid)

    def up(self) -> Optional["GridPos"]:    return self.move_by(-1, 0)
    def down(self) -> Optional["GridPos"]:  return self.move_by(1, 0)
    def left(self) -> Optional["GridPos"]:  return self.move_by(0, -1)
    def right(self) -> Optional["GridPos"]: return self.move_by(0, 1)

    def iter_by(self, down: int, right: int) -> Iterator["GridPos"]:
        """Step repeatedly by (down, right), excluding self, until leaving the grid."""
        cur = self.move_by(down, right)
        while cur is not None:
            yield cur
            cur = cur.move_by(down, right)

    def adjacent(self) -> List["GridPos"]:
        return [p for p in (self.left(), self.right(), self.up(), self.down()) if p is not None]

    def neighbors(self) -> List["GridPos"]:
        return self.adjacent()

    def estimate_cost_to(self, goal: "GridPos") -> int:
        return manhattan(self.coord, goal.coord)
