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
    run("python -m eightpuzzle.experiments.runner --depths 4 8 12 16 20 --per_depth 10 --algo both --out results/default.csv")
    run("python -m eightpuzzle.experiments.runner --depths 4 8 12 16 20 --per_depth 10 --algo ga --population_size 500 --max_generations 200 --out results/ga_large.csv")
    run("python -m eightpuzzle.experiments.runner --depths 8 12 --per_depth 5 --algo both --include_unsolvable --max_generations 30 --out results/unsolvable.csv")
    run("python -m eightpuzzle.experiments.analyze results/default.csv results/ga_large.csv")
    run("python -m eightpuzzle.experiments.plot results/default.csv")

if __name__ == "__main__":
    main()
