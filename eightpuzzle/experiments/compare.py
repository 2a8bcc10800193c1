#!/usr/bin/env python3
"""Solve one board with A* and the genetic algorithm and print both results side by side."""
import argparse, random

from eightpuzzle.domains.puzzle8 import (
    InvalidBoard,
    format_board,
    is_goal,
    is_solvable,
    manhattan,
    parse_board,
    shuffle,
)
from eightpuzzle.experiments.runner import add_genetic_args
from eightpuzzle.search.a_star import a_star
from eightpuzzle.search.genetic import genetic, GeneticConfig

def progress_printer(every: int):
    def on_progress(generation, best_fitness, best):
        if generation % every == 0 or best.reached_goal:
            print(f"  gen {generation:>4}  best fitness {best_fitness:>8.0f}  "
                  f"reached goal {'YES' if best.reached_goal else 'NO'}  distance {best.final_distance}")
    return on_progress

def compare(board, config: GeneticConfig, rng: random.Random, log_every: int = 0):
    a = a_star(board)
    ga = genetic(board, config, on_progress=progress_printer(log_every) if log_every else None, rng=rng)
    return a, ga

def summarize(a: dict, ga: dict) -> str:
    lines = ["Solution Comparison", "-" * 40]
    a_path = a["path"]
    if a_path:
        lines.append(f"A* (optimal):  steps {len(a_path) - 1}  status Solved")
    else:
        lines.append(f"A* (optimal):  no path ({a['termination']})")
    lines.append(f"               expanded {a['expanded']}  time {a['time']:.3f}s")

    ga_path = ga["path"]
    if ga_path:
        status = "Solved" if is_goal(ga_path[-1]) else "Incomplete"
        lines.append(f"Genetic:       steps {len(ga_path) - 1}  status {status}  "
                     f"final distance {manhattan(ga_path[-1])}")
        lines.append(f"               generations {ga['generations']}  best fitness {ga['best_fitness']:.0f}  "
                     f"time {ga['time']:.3f}s")
        if a_path and is_goal(ga_path[-1]):
            lines.append(f"               overhead vs A*: {len(ga_path) - len(a_path)} moves")
    else:
        lines.append("Genetic:       no solution found (try a larger population or more generations)")
    return "\n".join(lines)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Compare A* and the genetic algorithm on one 8-puzzle board.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--board", help="e.g. 1,2,3,4,5,6,0,7,8 or 123456078")
    src.add_argument("--shuffle", type=int, metavar="MOVES", help="Random walk of MOVES slides from the goal")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--log_every", type=int, default=10, help="Print GA progress every N generations (0 = off)")
    add_genetic_args(ap)
    args = ap.parse_args(argv)

    rng = random.Random(args.seed)
    if args.board:
        try:
            board = parse_board(args.board)
        except InvalidBoard as e:
            ap.error(str(e))
    else:
        board = shuffle(rng, args.shuffle if args.shuffle is not None else 100)

    print(format_board(board))
    print()
    if not is_solvable(board):
        print("This puzzle configuration is not solvable!")
        return 1

    a, ga = compare(board, GeneticConfig.from_args(args), rng, log_every=args.log_every)
    print()
    print(summarize(a, ga))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
