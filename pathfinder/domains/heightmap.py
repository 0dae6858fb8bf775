"""
Hill-climbing heightmap.

Input is a block of lowercase letters ('a' lowest, 'z' highest) with one 'S'
(start, height 'a') and one 'E' (end, height 'z'). From a cell you may step to
a 4-neighbor whose height is at most one higher than the current one; going
down any amount is allowed.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from pathfinder.domains.grid import Grid, GridPos
from pathfinder.search.a_star import find_path

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class HeightmapError(ValueError):
    pass


@dataclass(frozen=True)
class ClimbPos(GridPos):
    def neighbors(self) -> List["ClimbPos"]:
        limit = self.value + 1
        return [p for p in self.adjacent() if p.value <= limit]


@dataclass
class Heightmap:
    grid: Grid
    start: Coord
    end: Coord

    def pos(self, coord: Coord) -> ClimbPos:
        return ClimbPos(coord[0], coord[1], self.grid)

    def lowest(self) -> List[ClimbPos]:
        """Every cell at height 'a' (including S), row-major."""
        rows, cols = np.nonzero(self.grid.cells == 0)
        return [ClimbPos(int(r), int(c), self.grid) for r, c in zip(rows, cols)]


def parse_heightmap(text: str) -> Heightmap:
    start: Optional[Coord] = None
    end: Optional[Coord] = None
    rows: List[List[int]] = []
    for r, line in enumerate(text.strip().splitlines()):
        row: List[int] = []
        for c, ch in enumerate(line.strip()):
            if ch == "S":
                if start is not None:
                    raise HeightmapError(f"second start 'S' at {(r, c)}, first at {start}")
                start = (r, c)
                row.append(0)
            elif ch == "E":
                if end is not None:
                    raise HeightmapError(f"second end 'E' at {(r, c)}, first at {end}")
                end = (r, c)
                row.append(25)
            elif "a" <= ch <= "z":
                row.append(ord(ch) - ord("a"))
            else:
                raise HeightmapError(f"invalid char {ch!r} at {(r, c)}")
        if rows and len(row) != len(rows[0]):
            raise HeightmapError(f"row {r} has {len(row)} cells, expected {len(rows[0])}")
        rows.append(row)

    if start is None or end is None:
        raise HeightmapError(f"invalid start: {start} or end: {end}")

    grid = Grid(np.array(rows, dtype=np.int8))
    logger.debug("parsed heightmap %dx%d start=%s end=%s", *grid.shape, start, end)
    return Heightmap(grid=grid, start=start, end=end)


def load_heightmap(path: Path) -> Heightmap:
    return parse_heightmap(Path(path).read_text())


def shortest_climb(hm: Heightmap) -> Optional[int]:
    """Fewest steps from S to E, or None if E cannot be reached."""
    path = find_path(hm.pos(hm.start), hm.pos(hm.end))
    return None if path is None else len(path) - 1


def best_hike(hm: Heightmap) -> Optional[int]:
    """Fewest steps to E from any 'a' cell; unreachable starts are skipped."""
    end = hm.pos(hm.end)
    best: Optional[int] = None
    for start in hm.lowest():
        path = find_path(start, end)
        if path is None:
            continue
        steps = len(path) - 1
        if best is None or steps < best:
            best = steps
    return best
