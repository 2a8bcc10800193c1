from __future__ import annotations
import argparse, csv, random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Callable

from eightpuzzle.domains.puzzle8 import (
    scramble,
    make_unsolvable_variant,
)
from eightpuzzle.heuristics.misplaced import HEURISTICS
from eightpuzzle.search.a_star import a_star, MAX_CLOSED
from eightpuzzle.search.genetic import genetic, GeneticConfig, GENOME_LENGTH

State = Tuple[int, ...]

HEADER = [
    "algorithm","heuristic","depth","seed",
    "solved","steps","expanded","generated","generations","best_fitness",
    "time_sec","termination","solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: State

def _gen(inst_scramble: Callable[[int, int], State], depths: List[int], per_depth: int,
         start_seed: int = 0) -> List[Instance]:
    """`per_depth` scrambles per depth; a walk from GOAL is always solvable."""
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            out.append(Instance(seed=seed, depth=d, state=inst_scramble(d, seed)))
            seed += 1
    return out

def add_genetic_args(ap: argparse.ArgumentParser) -> None:
    d = GeneticConfig()
    g = ap.add_argument_group("genetic algorithm")
    g.add_argument("--population_size", type=int, default=d.population_size)
    g.add_argument("--max_generations", type=int, default=d.max_generations)
    g.add_argument("--mutation_rate", type=float, default=d.mutation_rate)
    g.add_argument("--crossover_rate", type=float, default=d.crossover_rate)
    g.add_argument("--elitism_count", type=int, default=d.elitism_count)
    g.add_argument("--genome_length", type=int, default=GENOME_LENGTH,
                   help="Moves per individual; hard boards may need more")

def run_instance(state: State, args, config: GeneticConfig, rng: random.Random,
                 want_a: bool, want_ga: bool) -> List[dict]:
    out = []
    if want_a:
        out.append(a_star(state, HEURISTICS[args.heuristic], max_closed=args.max_closed))
    if want_ga:
        out.append(genetic(state, config, rng=rng))
    return out

def write_row(w, res: dict, heur: str, inst: Instance, solvable_flag: int):
    solved = res.get("g") is not None
    best_fitness = res.get("best_fitness")
    w.writerow([
        res.get("algorithm",""), heur if res.get("algorithm") == "A*" else "", inst.depth, inst.seed,
        int(solved), res["g"] if solved else "",
        res.get("expanded",""), res.get("generated",""),
        res.get("generations",""), "" if best_fitness is None else best_fitness,
        f"{res.get('time',0.0):.6f}",
        res.get("termination","ok"), solvable_flag,
    ])

def main(argv=None):
    ap = argparse.ArgumentParser(description="A* vs genetic algorithm 8-puzzle experiment runner")
    ap.add_argument("--algo", choices=["a", "ga", "both"], default="both")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    ap.add_argument("--depths", type=int, nargs="+", default=[4,8,12,16,20])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--max_closed", type=int, default=MAX_CLOSED, help="A* closed-set cap")
    ap.add_argument("--seed", type=int, default=0, help="Seed for instances and the GA")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run unsolvable variants")
    add_genetic_args(ap)
    args = ap.parse_args(argv)

    config = GeneticConfig.from_args(args)
    rng = random.Random(args.seed)
    insts = _gen(scramble, args.depths, args.per_depth, start_seed=args.seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    want_a  = args.algo in ("a", "both")
    want_ga = args.algo in ("ga", "both")

    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for r in run_instance(inst.state, args, config, rng, want_a, want_ga):
                write_row(w, r, args.heuristic, inst, 1)

            # Optional unsolvable variants (flip parity).
            if args.include_unsolvable:
                u = make_unsolvable_variant(inst.state)
                for r in run_instance(u, args, config, rng, want_a, want_ga):
                    write_row(w, r, args.heuristic, inst, 0)

    print(f"Wrote {args.out} ({len(insts)} instances)")

if __name__ == "__main__":
    main()
