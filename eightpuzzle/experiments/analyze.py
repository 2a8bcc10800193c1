#!/usr/bin/env python3
"""Summaries of runner CSVs: success rate, path length and time per algorithm and depth."""
import argparse, os
from pathlib import Path
import numpy as np
import pandas as pd

def load_results(paths):
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = os.path.basename(str(p))
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    # Enforce types where possible
    for c in ("depth","seed","solved","steps","expanded","generated","generations","best_fitness","time_sec","solvable"):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    if "solvable" not in df.columns:
        df["solvable"] = 1
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """One row per (algorithm, solvable, depth)."""
    g = df.groupby(["algorithm","solvable","depth"])
    out = pd.DataFrame({
        "runs": g.size(),
        "success_rate": g["solved"].mean(),
        "mean_steps": g["steps"].mean(),
        "mean_time_sec": g["time_sec"].mean(),
    })
    return out.reset_index()

def step_overhead(df: pd.DataFrame) -> pd.DataFrame:
    """GA path length minus A* path length on instances both solved, per depth."""
    solved = df[(df["solved"] == 1) & (df["solvable"] == 1)]
    a = solved[solved["algorithm"] == "A*"][["depth","seed","steps"]]
    ga = solved[solved["algorithm"] == "GA"][["depth","seed","steps"]]
    both = a.merge(ga, on=["depth","seed"], suffixes=("_a","_ga"))
    if both.empty:
        return pd.DataFrame(columns=["depth","pairs","mean_overhead","max_overhead"])
    both["overhead"] = both["steps_ga"] - both["steps_a"]
    out = both.groupby("depth")["overhead"].agg(
        pairs="size", mean_overhead="mean", max_overhead="max")
    out["mean_overhead"] = np.round(out["mean_overhead"], 2)
    return out.reset_index()

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize A*/GA result CSVs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to analyze. Are your CSVs empty?")
        return

    print("=" * 80)
    print("Per-depth summary")
    print("=" * 80)
    print(summarize(df).to_string(index=False))

    overhead = step_overhead(df)
    if not overhead.empty:
        print("\n" + "=" * 80)
        print("GA extra moves over A* (solved pairs)")
        print("=" * 80)
        print(overhead.to_string(index=False))

if __name__ == "__main__":
    main()
