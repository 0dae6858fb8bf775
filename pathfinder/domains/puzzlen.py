from __future__ import annotations
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Tuple, List, Dict, Optional
import random

State = Tuple[int, ...]

HEURISTICS = ("manhattan", "linear_conflict", "zero")


@lru_cache(maxsize=None)
def _positions(goal: State, cols: int) -> Dict[int, Tuple[int, int]]:
    return {t: divmod(i, cols) for i, t in enumerate(goal) if t != 0}


class SlidingPuzzle:
    """
    Generic R×C sliding-tile puzzle (0 is the blank).
    Works for 3×3 (8-puzzle), 3×4, 4×4 (15-puzzle), etc. Square when cols is omitted.
    """
    def __init__(self, rows: int, cols: Optional[int] = None):
        cols = rows if cols is None else cols
        if rows < 2 or cols < 2:
            raise ValueError(f"board must be at least 2x2, got {rows}x{cols}")
        self.R = rows
        self.C = cols
        self.size = rows * cols
        self.GOAL: State = tuple(list(range(1, self.size)) + [0])
        # Precompute neighbor indices for the blank
        self._nei: Dict[int, Tuple[int, ...]] = {}
        for i in range(self.size):
            r, c = divmod(i, cols)
            moves = []
            if r > 0:             moves.append(i - cols)
            if r < rows - 1:      moves.append(i + cols)
            if c > 0:             moves.append(i - 1)
            if c < cols - 1:      moves.append(i + 1)
            self._nei[i] = tuple(moves)

    # ---------- transitions ----------
    def neighbors(self, s: State) -> List[State]:
        """States one blank move away. Unit edge costs."""
        z = s.index(0)
        out: List[State] = []
        for j in self._nei[z]:
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            out.append(tuple(lst))
        return out

    # ---------- instance generation ----------
    def scramble(self, depth: int, seed: int) -> State:
        """Depth-limited random walk from GOAL with no immediate backtrack."""
        rng = random.Random(seed)
        s = self.GOAL
        last_blank = None
        for _ in range(depth):
            z = s.index(0)
            cand = list(self._nei[z])
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            last_blank = z
            s = tuple(lst)
        return s

    def is_solvable(self, s: State) -> bool:
        """
        Solvable w.r.t. GOAL. Standard parity rule:
        - width (cols) odd  -> inversions even.
        - width even        -> (inversions + blank_row_from_bottom) is ODD.
        """
        arr = [x for x in s if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.C % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self.R - s.index(0) // self.C  # 1-based
        return ((inv + blank_row_from_bottom) % 2) == 1

    # ---------- heuristics ----------
    def manhattan(self, s: State, goal: Optional[State] = None) -> int:
        pos = _positions(goal or self.GOAL, self.C)
        dist = 0
        for idx, t in enumerate(s):
            if t == 0: continue
            r, c = divmod(idx, self.C)
            gr, gc = pos[t]
            dist += abs(r - gr) + abs(c - gc)
        return dist

    def linear_conflict(self, s: State, goal: Optional[State] = None) -> int:
        """Manhattan + 2 per pair of linearly-conflicting tiles (rows & cols)."""
        pos = _positions(goal or self.GOAL, self.C)
        m = self.manhattan(s, goal)
        R, C = self.R, self.C
        # Row conflicts
        for r in range(R):
            row = s[r * C:(r + 1) * C]
            tiles = [t for t in row if t != 0 and pos[t][0] == r]
            for i in range(len(tiles)):
                gi = pos[tiles[i]][1]
                for j in range(i + 1, len(tiles)):
                    if gi > pos[tiles[j]][1]: m += 2
        # Column conflicts
        for c in range(C):
            col = [s[c + r * C] for r in range(R)]
            tiles = [t for t in col if t != 0 and pos[t][1] == c]
            for i in range(len(tiles)):
                gi = pos[tiles[i]][0]
                for j in range(i + 1, len(tiles)):
                    if gi > pos[tiles[j]][0]: m += 2
        return m

    def node(self, tiles: State, heuristic: str = "manhattan") -> "PuzzleState":
        if heuristic not in HEURISTICS:
            raise ValueError(f"unknown heuristic {heuristic!r}, expected one of {HEURISTICS}")
        if sorted(tiles) != list(range(self.size)):
            raise ValueError(f"{tiles} is not a permutation of 0..{self.size - 1}")
        return PuzzleState(tuple(tiles), self, heuristic)


@dataclass(frozen=True)
class PuzzleState:
    """Search node for a SlidingPuzzle board; equal boards are equal nodes."""
    tiles: State
    puzzle: SlidingPuzzle = field(compare=False, repr=False)
    heuristic: str = field(default="manhattan", compare=False, repr=False)

    def neighbors(self) -> List["PuzzleState"]:
        return [PuzzleState(s, self.puzzle, self.heuristic) for s in self.puzzle.neighbors(self.tiles)]

    def estimate_cost_to(self, goal: "PuzzleState") -> int:
        if self.heuristic == "zero":
            return 0
        if self.heuristic == "linear_conflict":
            return self.puzzle.linear_conflict(self.tiles, goal.tiles)
        return self.puzzle.manhattan(self.tiles, goal.tiles)
