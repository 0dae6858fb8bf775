#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

METRICS = ["expanded", "generated", "duplicates", "peak_open", "time_sec"]

def load_results(paths) -> pd.DataFrame:
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = Path(p).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)
    # Only rows that reached the goal carry comparable effort numbers
    df = df[df["termination"].fillna("ok") == "ok"]
    return df[df["depth"].notna()]

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std of each metric per (algorithm, heuristic, depth)."""
    metrics = [m for m in METRICS if m in df.columns]
    out = df.groupby(["algorithm", "heuristic", "depth"])[metrics].agg(["mean", "std"])
    return out.fillna(0.0)

def plot_metric(ax, summary: pd.DataFrame, metric: str):
    for (algo, heur), part in summary.groupby(level=[0, 1]):
        xs = part.index.get_level_values("depth")
        ax.errorbar(xs, part[(metric, "mean")], yerr=part[(metric, "std")],
                    marker="o", capsize=3, label=f"{algo} | {heur}")
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± std)")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    summary = summarize(df)
    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    # Combined 3-panel figure
    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "generated", "time_sec"]):
        plot_metric(ax, summary, metric)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")
    plt.close(fig)

    # Separate single-panel figures
    for metric in ["expanded", "duplicates", "peak_open"]:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, summary, metric)
        plt.tight_layout()
        save_fig(fig, outdir, f"{base}_{metric}")
        plt.close(fig)

    summary.to_csv(outdir / f"{base}_summary.csv")
    print(f"Saved: {outdir / f'{base}_summary.csv'}")

    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
