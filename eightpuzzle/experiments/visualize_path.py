#!/usr/bin/env python3
import argparse, os, random
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from typing import Tuple

from eightpuzzle.domains.puzzle8 import InvalidBoard, is_goal, parse_board, scramble
from eightpuzzle.experiments.plot import plot_history, save_fig
from eightpuzzle.experiments.runner import add_genetic_args
from eightpuzzle.search.a_star import a_star
from eightpuzzle.search.genetic import genetic, GeneticConfig

State = Tuple[int, ...]

def draw_board(state: State, out_path: Path, title: str = ""):
    n = 3
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1)
        ax.plot([i,i],[0,n], linewidth=1)
    # tiles
    for idx, t in enumerate(state):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--algo", choices=["a","ga"], default="a")
    p.add_argument("--board", default=None, help="Start board, e.g. 1,2,3,4,5,6,0,7,8")
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="results/figs/example_path")
    add_genetic_args(p)
    args = p.parse_args(argv)

    if args.board:
        try:
            start = parse_board(args.board)
        except InvalidBoard as e:
            p.error(str(e))
    else:
        start = scramble(args.depth, args.seed)

    outdir = Path(args.outdir)
    if args.algo == "a":
        res = a_star(start)
    else:
        res = genetic(start, GeneticConfig.from_args(args), rng=random.Random(args.seed))
        fig, ax = plt.subplots(figsize=(8, 5))
        plot_history(ax, res["history"])
        save_fig(fig, outdir, "fitness_history")
        plt.close(fig)

    path = res.get("path")
    if not path:
        print(f"No path ({res['termination']}). Try smaller depth.")
        return

    if not is_goal(path[-1]):
        print("Best individual did not reach the goal; saving its partial path.")
    for i, s in enumerate(path):
        draw_board(s, outdir / f"step_{i:03d}.png", title=f"{res['algorithm']} step {i}")
    print(f"Saved {len(path)} frames to {outdir}")

if __name__ == "__main__":
    main()
