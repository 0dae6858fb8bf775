from typing import Tuple

Coord = Tuple[int, int]

def manhattan(a: Coord, b: Coord) -> int:
    """|dr| + |dc| between two (row, col) coordinates."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
