#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    py = sys.executable
    run(f"{py} -m pathfinder.experiments.runner --depths 6 10 14 --per_depth 10 --heuristic manhattan --algo all --out results/manhattan.csv")
    run(f"{py} -m pathfinder.experiments.runner --depths 6 10 14 --per_depth 10 --heuristic linear_conflict --algo both --out results/linear_conflict.csv")
    run(f"{py} -m pathfinder.experiments.runner --depths 6 10 14 --per_depth 10 --heuristic zero --algo both --tie_break lifo --out results/zero.csv")
    run(f"{py} -m pathfinder.experiments.plot results/manhattan.csv results/linear_conflict.csv results/zero.csv --save results/plots")

if __name__ == "__main__":
    main()
