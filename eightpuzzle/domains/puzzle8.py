from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple
import numbers
import random

State = Tuple[int, ...]  # 9-length tuple, 0 is blank
GOAL: State = (1,2,3,4,5,6,7,8,0)

# Direction names the neighbour of the blank that slides into the blank's cell
MOVES: Tuple[str, ...] = ("UP", "DOWN", "LEFT", "RIGHT")

# Precomputed (direction, neighbour index) pairs per blank position, in MOVES order
_NEI: Dict[int, Tuple[Tuple[str, int], ...]] = {
    0: (("DOWN", 3), ("RIGHT", 1)),
    1: (("DOWN", 4), ("LEFT", 0), ("RIGHT", 2)),
    2: (("DOWN", 5), ("LEFT", 1)),
    3: (("UP", 0), ("DOWN", 6), ("RIGHT", 4)),
    4: (("UP", 1), ("DOWN", 7), ("LEFT", 3), ("RIGHT", 5)),
    5: (("UP", 2), ("DOWN", 8), ("LEFT", 4)),
    6: (("UP", 3), ("RIGHT", 7)),
    7: (("UP", 4), ("LEFT", 6), ("RIGHT", 8)),
    8: (("UP", 5), ("LEFT", 7)),
}


class InvalidBoard(ValueError):
    """Raised when a board is not a permutation of 0..8."""


def validate_board(s: Iterable[int]) -> State:
    """Return `s` as a State or raise InvalidBoard."""
    try:
        board = tuple(s)
    except TypeError:
        raise InvalidBoard(f"board must be a sequence, got {type(s).__name__}") from None
    if len(board) != 9:
        raise InvalidBoard(f"board must have 9 cells, got {len(board)}")
    for v in board:
        if isinstance(v, bool) or not isinstance(v, numbers.Integral):
            raise InvalidBoard(f"board cells must be ints, got {v!r}")
    board = tuple(int(v) for v in board)
    if sorted(board) != list(range(9)):
        raise InvalidBoard(f"board must be a permutation of 0..8, got {board}")
    return board


def parse_board(text: str) -> State:
    """Parse '1,2,3,4,5,6,7,8,0', '1 2 3 ...' or '123456780'."""
    text = text.strip()
    if "," in text or " " in text:
        parts = [p for p in text.replace(",", " ").split() if p]
    else:
        parts = list(text)
    try:
        values = [int(p) for p in parts]
    except ValueError:
        raise InvalidBoard(f"cannot parse board {text!r}") from None
    return validate_board(values)


def format_board(s: State) -> str:
    rows = []
    for r in range(3):
        rows.append(" ".join("_" if t == 0 else str(t) for t in s[3*r:3*r+3]))
    return "\n".join(rows)


def board_key(s: State) -> int:
    """Pack a board into a single int (base-9 digits)."""
    k = 0
    for t in s:
        k = k * 9 + t
    return k


def is_goal(s: State) -> bool:
    return tuple(s) == GOAL


def valid_moves(s: State) -> List[Tuple[State, str]]:
    """Return list of (next_state, direction) in UP, DOWN, LEFT, RIGHT order."""
    i = s.index(0)
    out: List[Tuple[State, str]] = []
    for name, j in _NEI[i]:
        lst = list(s)
        lst[i], lst[j] = lst[j], lst[i]
        out.append((tuple(lst), name))
    return out


def apply_move(s: State, move: str) -> Optional[State]:
    """Board after sliding in the `move` neighbour, or None if that direction is blocked."""
    i = s.index(0)
    for name, j in _NEI[i]:
        if name == move:
            lst = list(s)
            lst[i], lst[j] = lst[j], lst[i]
            return tuple(lst)
    return None


def is_solvable(s: State) -> bool:
    """8-puzzle solvability: parity of inversions must be even."""
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return (inv % 2) == 0


def scramble(depth: int, seed: int) -> State:
    """Scramble GOAL by performing 'depth' random legal blank moves (no immediate backtracks)."""
    rng = random.Random(seed)
    s = GOAL
    last_blank = None
    for _ in range(depth):
        z = s.index(0)
        cand = [j for _, j in _NEI[z]]
        if last_blank in cand and len(cand) > 1:
            cand.remove(last_blank)
        j = rng.choice(cand)
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        last_blank = z
        s = tuple(lst)
    return s


def shuffle(rng: random.Random, moves: int = 100) -> State:
    """Random walk of `moves` legal slides from GOAL, backtracks allowed."""
    s = GOAL
    for _ in range(moves):
        s, _ = rng.choice(valid_moves(s))
    return s


def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping inversion parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1 :], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)

# ---------------- Heuristics ----------------

_goal_pos: Dict[int, Tuple[int, int]] = {GOAL[i]: (i // 3, i % 3) for i in range(9)}

def manhattan(s: State) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, 3)
        gr, gc = _goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist

def tiles_out_of_place(s: State) -> int:
    """Number of non-blank tiles not on their goal cell."""
    return sum(1 for idx, tile in enumerate(s) if tile != 0 and tile != GOAL[idx])
