from __future__ import annotations
from typing import Dict, List, Optional, Protocol, Sequence, Set, Tuple, TypeVar
import heapq
import itertools
import logging
import math
from time import perf_counter

logger = logging.getLogger(__name__)

TIE_BREAKS = ("fifo", "lifo", "h", "g")


class AStarNode(Protocol):
    """
    Capability a value needs to be searched: unit-cost neighbors + heuristic.
    Implementations must also be hashable, with equal positions hashing equal.
    """
    def neighbors(self) -> Sequence["AStarNode"]: ...
    def estimate_cost_to(self, goal: "AStarNode") -> float: ...


Node = TypeVar("Node", bound=AStarNode)


def reconstruct_path(came_from: Dict[Node, Node], goal: Node) -> List[Node]:
    """Walk predecessors back from goal and return the start->goal sequence."""
    path: List[Node] = [goal]
    node = goal
    while node in came_from:
        node = came_from[node]
        path.append(node)
    path.reverse()
    return path


class Frontier:
    """
    Min-heap of nodes keyed by f = g + h, with the companion 'enqueued' set.
    Entries are (key, g, node); the key always ends in a unique counter so
    nodes themselves are never compared.
    """
    def __init__(self, tie_break: str = "fifo"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r}, expected one of {TIE_BREAKS}")
        self.tie_break = tie_break
        self._heap: List[Tuple[Tuple[float, ...], int, AStarNode]] = []
        self._counter = itertools.count()
        self.enqueued: Set[AStarNode] = set()
        self.peak = 0

    def _key(self, f: float, g: int, h: float) -> Tuple[float, ...]:
        ctr = next(self._counter)
        if self.tie_break == "lifo": return (f, -ctr)
        if self.tie_break == "h":    return (f, h, ctr)
        if self.tie_break == "g":    return (f, -g, ctr)
        return (f, ctr)

    def push(self, node: AStarNode, g: int, h: float) -> None:
        heapq.heappush(self._heap, (self._key(g + h, g, h), g, node))
        self.enqueued.add(node)
        self.peak = max(self.peak, len(self._heap))

    def pop(self) -> Tuple[AStarNode, int]:
        _, g, node = heapq.heappop(self._heap)
        self.enqueued.discard(node)
        return node, g

    def __contains__(self, node: AStarNode) -> bool:
        return node in self.enqueued

    def __len__(self) -> int:
        return len(self._heap)


def a_star(
    start: Node,
    goal: Node,
    tie_break: str = "fifo",
    reprioritize: bool = True,
):
    """
    A* with unit edge costs and instrumentation.

    With reprioritize=True (default) a node whose score improves while it is
    still enqueued gets a fresh heap entry and the outdated one is skipped when
    popped. With reprioritize=False an enqueued node is never pushed again and
    keeps its old, higher priority; this does less heap work but the stale
    priority can delay the node past the goal, so the returned path is only
    guaranteed shortest when that never happens.

    Returns a dict: path (None when the goal is unreachable), g, expanded,
    generated, duplicates, reopened, peak_open, time, algorithm, tie_break,
    termination ("ok" | "exhausted").
    """
    t0 = perf_counter()
    frontier = Frontier(tie_break)

    scores: Dict[Node, int] = {start: 0}
    came_from: Dict[Node, Node] = {}
    closed: Set[Node] = set()

    expanded = 0
    generated = 0
    duplicates = 0
    reopened = 0

    frontier.push(start, 0, start.estimate_cost_to(goal))

    def result(path: Optional[List[Node]], termination: str):
        t1 = perf_counter()
        res = {
            "path": path,
            "g": len(path) - 1 if path is not None else None,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "reopened": reopened,
            "peak_open": frontier.peak,
            "time": t1 - t0,
            "algorithm": "A*" if reprioritize else "A* (approx dedup)",
            "tie_break": tie_break,
            "termination": termination,
        }
        logger.debug("%s %s: g=%s expanded=%d generated=%d peak_open=%d in %.4fs",
                     res["algorithm"], termination, res["g"], expanded, generated,
                     frontier.peak, res["time"])
        return res

    while frontier:
        cur, g_entry = frontier.pop()
        if reprioritize and g_entry > scores[cur]:
            # outdated entry, a cheaper one was pushed later
            continue

        if cur == goal:
            return result(reconstruct_path(came_from, cur), "ok")

        expanded += 1
        closed.add(cur)
        score = scores[cur] + 1

        for nxt in cur.neighbors():
            generated += 1
            known = scores.get(nxt, math.inf)
            if known != math.inf:
                duplicates += 1
            if score < known:
                scores[nxt] = score
                came_from[nxt] = cur
                if reprioritize or nxt not in frontier:
                    if nxt in closed:
                        reopened += 1
                    frontier.push(nxt, score, nxt.estimate_cost_to(goal))

    return result(None, "exhausted")


def find_path(start: Node, goal: Node) -> Optional[List[Node]]:
    """Lowest-cost start->goal path, or None if the goal is unreachable."""
    return a_star(start, goal)["path"]
