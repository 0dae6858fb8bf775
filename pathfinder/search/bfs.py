from collections import deque
from time import perf_counter
from typing import Dict, Set

from pathfinder.search.a_star import Node, reconstruct_path

def bfs(start: Node, goal: Node):
    """Breadth-first baseline; ignores estimate_cost_to. Same result dict shape as a_star."""
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[Node, Node] = {}
    expanded = generated = duplicates = 0
    seen: Set[Node] = {start}
    peak = 1
    while q:
        peak = max(peak, len(q))
        s = q.popleft()
        if s == goal:
            path = reconstruct_path(parent, s)
            return {"path": path, "g": len(path) - 1, "expanded": expanded, "generated": generated,
                    "duplicates": duplicates, "peak_open": peak,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "ok"}
        expanded += 1
        for s2 in s.neighbors():
            generated += 1
            if s2 in seen:
                duplicates += 1
                continue
            seen.add(s2); parent[s2] = s; q.append(s2)
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "duplicates": duplicates, "peak_open": peak,
            "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}
