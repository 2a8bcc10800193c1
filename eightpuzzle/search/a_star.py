from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, List, Set
import heapq
from time import perf_counter
import itertools

from eightpuzzle.domains.puzzle8 import board_key, is_goal, valid_moves, validate_board
from eightpuzzle.heuristics.manhattan import manhattan

State = Tuple[int, ...]

# Closed-set size past which the search gives up and returns no path
MAX_CLOSED = 100_000

def reconstruct_path(node: "PQItem") -> List[State]:
    path: List[State] = []
    while node is not None:
        path.append(node.state)
        node = node.parent  # type: ignore[attr-defined]
    path.reverse()
    return path

@dataclass
class PQItem:
    f: int
    h: int
    g: int
    state: State
    parent: Optional["PQItem"] = None

def a_star(
    start: State,
    hfun: Callable[[State], int] = manhattan,
    max_closed: int = MAX_CLOSED,
    tie_break: str = "h",
):
    """
    A* over 8-puzzle boards with instrumentation.

    Pops the open node with the lowest g + h, goal-tests on pop, skips nodes whose
    board is already closed, and only pushes successors that are not closed.
    Gives up with an empty path when the open set empties ("exhausted") or the
    closed set grows past `max_closed` ("capped"). A capped run may miss a
    solution that exists beyond the cap.

    Raises InvalidBoard if `start` is not a permutation of 0..8.
    """
    start = validate_board(start)
    t0 = perf_counter()

    open_heap: List[Tuple[Tuple[int, int, int], int, PQItem]] = []
    counter = itertools.count()

    def priority_tuple(f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
        if tie_break == "h":   return (f, h, ctr)
        if tie_break == "g":   return (f, -g, ctr)
        if tie_break == "fifo":return (f, 0,  ctr)
        if tie_break == "lifo":return (f, 0, -ctr)
        return (f, h, ctr)

    h0 = hfun(start)
    start_item = PQItem(f=h0, h=h0, g=0, state=start, parent=None)
    heapq.heappush(open_heap, (priority_tuple(h0, 0, h0, next(counter)), next(counter), start_item))

    closed: Set[int] = set()

    expanded = 0
    generated = 0
    peak_open = 1

    def result(path: List[State], g: Optional[int], termination: str):
        return {
            "path": path,
            "g": g,
            "expanded": expanded,
            "generated": generated,
            "peak_open": peak_open,
            "peak_closed": len(closed),
            "time": perf_counter() - t0,
            "algorithm": "A*",
            "tie_break": tie_break,
            "termination": termination,
        }

    while open_heap:
        peak_open = max(peak_open, len(open_heap))
        _, _, node = heapq.heappop(open_heap)

        if is_goal(node.state):
            return result(reconstruct_path(node), node.g, "ok")

        key = board_key(node.state)
        if key in closed:
            continue
        closed.add(key)
        expanded += 1

        for s2, _move in valid_moves(node.state):
            if board_key(s2) in closed:
                continue
            g2 = node.g + 1
            h2 = hfun(s2)
            f2 = g2 + h2
            generated += 1
            child = PQItem(f=f2, h=h2, g=g2, state=s2, parent=node)
            heapq.heappush(open_heap, (priority_tuple(f2, g2, h2, next(counter)), next(counter), child))

        if len(closed) > max_closed:
            return result([], None, "capped")

    # Open exhausted without finding goal
    return result([], None, "exhausted")

def solve_a_star(board: State) -> List[State]:
    """Boards from `board` to GOAL inclusive, or [] when no path was found."""
    return a_star(board)["path"]
