#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from pathfinder.domains.heightmap import Heightmap, load_heightmap
from pathfinder.search.a_star import find_path

def draw_path(hm: Heightmap, path, out_path: Path):
    """Heightmap as an image with the path (if any) drawn on top."""
    rows, cols = hm.grid.shape
    fig, ax = plt.subplots(figsize=(max(4, cols / 8), max(3, rows / 8)))
    ax.imshow(hm.grid.cells, cmap="terrain", interpolation="nearest")
    if path:
        ax.plot([p.col for p in path], [p.row for p in path], color="red", linewidth=1.5)
    ax.scatter([hm.start[1]], [hm.start[0]], marker="o", color="black", label="S")
    ax.scatter([hm.end[1]], [hm.end[0]], marker="*", color="black", label="E")
    ax.set_xticks([]); ax.set_yticks([])
    title = "no path" if path is None else f"{len(path) - 1} steps"
    ax.set_title(title)
    ax.legend(loc="upper right")
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve a heightmap and save an image of the path.")
    p.add_argument("heightmap", type=Path)
    p.add_argument("--out", type=Path, default=Path("results/figs/heightmap_path.png"))
    args = p.parse_args(argv)

    hm = load_heightmap(args.heightmap)
    path = find_path(hm.pos(hm.start), hm.pos(hm.end))
    if path is None:
        print("No path from S to E.")
    draw_path(hm, path, args.out)
    print(f"Saved {args.out}")

if __name__ == "__main__":
    main()
