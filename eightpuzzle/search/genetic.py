from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple
from time import perf_counter
import random

from eightpuzzle.domains.puzzle8 import (
    MOVES,
    apply_move,
    is_goal,
    manhattan,
    tiles_out_of_place,
    validate_board,
)

State = Tuple[int, ...]
Genes = Tuple[str, ...]

# Hard boards can need more than GENOME_LENGTH effective moves; such runs cannot reach the goal.
GENOME_LENGTH = 50
TOURNAMENT_SIZE = 5

GOAL_FITNESS = 10000
BASE_FITNESS = 1000
DISTANCE_WEIGHT = 10
MISPLACED_WEIGHT = 5
PROGRESS_BONUS = 10


@dataclass(frozen=True)
class GeneticConfig:
    """Parameters of one genetic run. Not range-checked."""
    population_size: int = 200
    max_generations: int = 100
    mutation_rate: float = 0.1
    crossover_rate: float = 0.8
    elitism_count: int = 20
    genome_length: int = GENOME_LENGTH
    tournament_size: int = TOURNAMENT_SIZE

    @classmethod
    def from_args(cls, args) -> "GeneticConfig":
        return cls(
            population_size=args.population_size,
            max_generations=args.max_generations,
            mutation_rate=args.mutation_rate,
            crossover_rate=args.crossover_rate,
            elitism_count=args.elitism_count,
            genome_length=args.genome_length,
        )


@dataclass(frozen=True)
class Evaluation:
    fitness: float
    path: Tuple[State, ...]
    reached_goal: bool
    final_distance: int
    moves: int


@dataclass(frozen=True)
class Individual:
    genes: Genes
    evaluation: Optional[Evaluation] = None

    @property
    def fitness(self) -> float:
        return self.evaluation.fitness if self.evaluation else float("-inf")

    @property
    def path(self) -> List[State]:
        return list(self.evaluation.path) if self.evaluation else []

    @property
    def reached_goal(self) -> bool:
        return bool(self.evaluation and self.evaluation.reached_goal)

    @property
    def final_distance(self) -> Optional[int]:
        return self.evaluation.final_distance if self.evaluation else None


ProgressFn = Callable[[int, float, Individual], Optional[bool]]


def evaluate(genes: Sequence[str], start: State) -> Evaluation:
    """
    Replay `genes` from `start` and score the result.

    Blocked directions are skipped without counting as a move. Each new minimum
    Manhattan distance along the way earns PROGRESS_BONUS. Reaching the goal scores
    GOAL_FITNESS - moves, so every success outranks every failure.
    """
    s = start
    path: List[State] = [s]
    moves = 0
    best_dist = manhattan(s)
    progress = 0

    for move in genes:
        if is_goal(s):
            break
        nxt = apply_move(s, move)
        if nxt is None:
            continue
        s = nxt
        path.append(s)
        moves += 1
        d = manhattan(s)
        if d < best_dist:
            best_dist = d
            progress += PROGRESS_BONUS

    reached = is_goal(s)
    dist = manhattan(s)
    if reached:
        fitness = GOAL_FITNESS - moves
    else:
        fitness = (BASE_FITNESS - DISTANCE_WEIGHT * dist - MISPLACED_WEIGHT * tiles_out_of_place(s)
                   - moves + progress)
    return Evaluation(fitness=fitness, path=tuple(path), reached_goal=reached,
                      final_distance=dist, moves=moves)


def random_genes(rng: random.Random, length: int = GENOME_LENGTH) -> Genes:
    return tuple(rng.choice(MOVES) for _ in range(length))


def tournament_select(population: Sequence[Individual], rng: random.Random,
                      size: int = TOURNAMENT_SIZE) -> Individual:
    """Fittest of `size` individuals drawn with replacement."""
    best = population[rng.randrange(len(population))]
    for _ in range(size - 1):
        competitor = population[rng.randrange(len(population))]
        if competitor.fitness > best.fitness:
            best = competitor
    return best


def crossover(p1: Sequence[str], p2: Sequence[str], rng: random.Random) -> Genes:
    """Single-point crossover: p1 before the point, p2 from the point on."""
    limit = min(len(p1), len(p2))
    point = rng.randrange(limit) if limit > 0 else 0
    return tuple(p1[:point]) + tuple(p2[point:])


def mutate(genes: Sequence[str], rate: float, rng: random.Random) -> Genes:
    """Redraw each gene with probability `rate`."""
    return tuple(rng.choice(MOVES) if rng.random() < rate else g for g in genes)


def _rank(population: List[Genes], start: State) -> List[Individual]:
    scored = [Individual(g, evaluate(g, start)) for g in population]
    scored.sort(key=lambda ind: ind.fitness, reverse=True)
    return scored


def _next_generation(ranked: List[Individual], config: GeneticConfig,
                     rng: random.Random) -> List[Genes]:
    nxt: List[Genes] = [ind.genes for ind in ranked[:min(config.elitism_count, config.population_size)]]
    while len(nxt) < config.population_size:
        p1 = tournament_select(ranked, rng, config.tournament_size)
        p2 = tournament_select(ranked, rng, config.tournament_size)
        if rng.random() < config.crossover_rate:
            child = crossover(p1.genes, p2.genes, rng)
        else:
            child = p1.genes
        nxt.append(mutate(child, config.mutation_rate, rng))
    return nxt


def genetic(
    start: State,
    config: Optional[GeneticConfig] = None,
    on_progress: Optional[ProgressFn] = None,
    rng: Optional[random.Random] = None,
):
    """
    Generational GA over fixed-length move sequences, with instrumentation.

    on_progress(generation, best_fitness, best_individual) runs once per generation
    after ranking; returning False stops the run early. The run ends as soon as the
    generation's best reaches the goal, otherwise after max_generations with the
    best individual seen over the whole run.

    Raises InvalidBoard if `start` is not a permutation of 0..8.
    """
    start = validate_board(start)
    config = config or GeneticConfig()
    rng = rng or random.Random()
    t0 = perf_counter()

    population: List[Genes] = [random_genes(rng, config.genome_length)
                               for _ in range(config.population_size)]
    best: Optional[Individual] = None
    history: List[float] = []
    evaluations = 0
    generation = 0

    def result(ind: Optional[Individual], termination: str):
        path = ind.path if ind else []
        return {
            "individual": ind,
            "path": path,
            "g": ind.evaluation.moves if ind and ind.reached_goal else None,
            "generations": generation,
            "evaluations": evaluations,
            "best_fitness": ind.fitness if ind else None,
            "history": history,
            "time": perf_counter() - t0,
            "algorithm": "GA",
            "termination": termination,
        }

    if not population:
        return result(None, "empty")

    for generation in range(config.max_generations):
        ranked = _rank(population, start)
        evaluations += len(ranked)
        current = ranked[0]
        history.append(current.fitness)

        if best is None or current.fitness > best.fitness:
            best = Individual(current.genes, evaluate(current.genes, start))

        stop = False
        if on_progress is not None:
            stop = on_progress(generation, current.fitness, current) is False

        if current.reached_goal:
            generation += 1
            return result(current, "ok")
        if stop:
            generation += 1
            return result(best, "stopped")

        population = _next_generation(ranked, config, rng)

    generation = config.max_generations
    return result(best, "max_generations")


def solve_puzzle_genetic(
    board: State,
    config: Optional[GeneticConfig] = None,
    on_progress: Optional[ProgressFn] = None,
    rng: Optional[random.Random] = None,
) -> Optional[Individual]:
    """Best individual found, or None when the population is empty."""
    return genetic(board, config, on_progress=on_progress, rng=rng)["individual"]
