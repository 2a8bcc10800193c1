#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import numpy as np
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.experiments.analyze import load_results, summarize

def plot_metric(ax, summary, metric, ylabel):
    algos = sorted(summary["algorithm"].unique())
    width = 0.8 / max(len(algos), 1)
    depths = sorted(summary["depth"].unique())
    x = np.arange(len(depths))
    for k, algo in enumerate(algos):
        sub = summary[summary["algorithm"] == algo].set_index("depth").reindex(depths)
        ax.bar(x + (k - (len(algos) - 1) / 2) * width, sub[metric].to_numpy(), width, label=algo)
    ax.set_xticks(x)
    ax.set_xticklabels([str(d) for d in depths])
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(ylabel)
    ax.set_title(f"{ylabel} vs depth")
    ax.grid(True, axis="y")
    ax.legend()

def plot_history(ax, history, label="GA"):
    """Best fitness per generation for one genetic run."""
    ax.plot(np.arange(len(history)), history, marker=".", label=label)
    ax.set_xlabel("Generation")
    ax.set_ylabel("Best fitness")
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
        return

    summary = summarize(df[df["solvable"] == 1])
    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, (metric, label) in zip(axes, [("success_rate", "Success rate"),
                                          ("mean_steps", "Mean solution length"),
                                          ("mean_time_sec", "Mean seconds")]):
        plot_metric(ax, summary, metric, label)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")

    if args.show:
        plt.show()
    plt.close(fig)

if __name__ == "__main__":
    main()
