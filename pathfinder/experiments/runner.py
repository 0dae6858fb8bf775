from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from pathfinder.domains.heightmap import load_heightmap
from pathfinder.domains.puzzlen import HEURISTICS, SlidingPuzzle
from pathfinder.search.a_star import TIE_BREAKS, a_star
from pathfinder.search.bfs import bfs

State = Tuple[int, ...]

HEADER = [
    "algorithm", "domain", "heuristic", "depth", "seed",
    "expanded", "generated", "duplicates", "reopened", "g", "time_sec",
    "peak_open", "tie_break", "termination", "solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: State

def _gen(inst_scramble, inst_is_solvable, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = inst_scramble(d, seed)
            seed += 1
            attempts += 1
            if inst_is_solvable(s):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping permutation parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)

def choose_domain(args) -> Tuple[str, SlidingPuzzle]:
    """
    Board selection precedence:
    --rows/--cols  >  --n  >  --domain (p8|p15).
    Returns (domain label, puzzle).
    """
    if args.rows is not None and args.cols is not None:
        return f"r{args.rows}x{args.cols}", SlidingPuzzle(args.rows, args.cols)
    if args.n is not None:
        return f"n{args.n}", SlidingPuzzle(args.n)
    if args.domain == "p15":
        return "p15", SlidingPuzzle(4)
    return "p8", SlidingPuzzle(3)

def selected_algos(algo: str) -> List[str]:
    return {
        "a": ["a"],
        "a_approx": ["a_approx"],
        "bfs": ["bfs"],
        "both": ["a", "a_approx"],
        "all": ["a", "a_approx", "bfs"],
    }[algo]

def run_one(algo: str, start, goal, tie_break: str):
    if algo == "a":
        return a_star(start, goal, tie_break=tie_break)
    if algo == "a_approx":
        return a_star(start, goal, tie_break=tie_break, reprioritize=False)
    if algo == "bfs":
        return bfs(start, goal)
    raise ValueError(algo)

def write_row(w, res, domain: str, heur: str, depth, seed, solvable_flag: int):
    w.writerow([
        res.get("algorithm", ""), domain, heur, depth, seed,
        res.get("expanded", ""), res.get("generated", ""), res.get("duplicates", ""),
        res.get("reopened", ""), "" if res.get("g") is None else res["g"],
        f"{res.get('time', 0.0):.6f}",
        res.get("peak_open", ""), res.get("tie_break", ""), res.get("termination", "ok"), solvable_flag,
    ])

def run_puzzles(args, w) -> int:
    domain, dom = choose_domain(args)
    insts = _gen(dom.scramble, dom.is_solvable, args.depths, args.per_depth)
    goal = dom.node(dom.GOAL, args.heuristic)
    for inst in insts:
        variants = [(inst.state, 1)]
        # Unsolvable variants exhaust the whole reachable half of the state space.
        if args.include_unsolvable:
            variants.append((make_unsolvable_variant(inst.state), 0))
        for tiles, solvable_flag in variants:
            start = dom.node(tiles, args.heuristic)
            for algo in selected_algos(args.algo):
                r = run_one(algo, start, goal, args.tie_break)
                write_row(w, r, domain, args.heuristic, inst.depth, inst.seed, solvable_flag)
    return len(insts)

def run_heightmap(args, w) -> int:
    hm = load_heightmap(args.heightmap)
    start, goal = hm.pos(hm.start), hm.pos(hm.end)
    for algo in selected_algos(args.algo):
        r = run_one(algo, start, goal, args.tie_break)
        write_row(w, r, "heightmap", "manhattan", "", "", int(r["path"] is not None))
        print(f"{r['algorithm']}: {'no path' if r['g'] is None else r['g']} "
              f"(expanded={r['expanded']}, {r['time']:.4f}s)")
    return 1

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="A* (+BFS) sliding-puzzle / heightmap experiment runner")
    ap.add_argument("--algo", choices=["a", "a_approx", "bfs", "both", "all"], default="both",
                    help="'a_approx' = A* without re-prioritisation, 'both' = A* + A*(approx), 'all' = + BFS")
    ap.add_argument("--heuristic", choices=list(HEURISTICS), default="manhattan")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18, 22, 26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="fifo")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))

    # domain selection
    ap.add_argument("--domain", choices=["p8", "p15"], default="p8", help="3x3 or 4x4 shortcut")
    ap.add_argument("--n", type=int, default=None, help="Square board size (N×N)")
    ap.add_argument("--rows", type=int, default=None, help="Rows for rectangular board")
    ap.add_argument("--cols", type=int, default=None, help="Cols for rectangular board")
    ap.add_argument("--heightmap", type=Path, default=None,
                    help="Solve a hill-climbing heightmap file instead of generated puzzles")

    ap.add_argument("--include_unsolvable", action="store_true", help="Also test unsolvable variants (small boards recommended)")
    ap.add_argument("--verbose", action="store_true", help="Log search summaries at DEBUG level")
    return ap

def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        if args.heightmap is not None:
            n = run_heightmap(args, w)
        else:
            n = run_puzzles(args, w)

    print(f"Wrote {args.out} ({n} instances)")

if __name__ == "__main__":
    main()
