import random

import numpy as np
import pytest

from eightpuzzle.domains.puzzle8 import (
    GOAL,
    InvalidBoard,
    apply_move,
    board_key,
    format_board,
    is_goal,
    is_solvable,
    make_unsolvable_variant,
    manhattan,
    parse_board,
    scramble,
    shuffle,
    tiles_out_of_place,
    valid_moves,
    validate_board,
)
from eightpuzzle.heuristics.manhattan import manhattan as manhattan_h
from eightpuzzle.heuristics.misplaced import HEURISTICS, misplaced


def board_with_blank_at(i):
    lst = list(GOAL)
    lst[8], lst[i] = lst[i], lst[8]
    return tuple(lst)


def inversions(s):
    arr = [x for x in s if x]
    return sum(1 for i in range(len(arr)) for j in range(i + 1, len(arr)) if arr[i] > arr[j])


def test_goal_heuristics_are_zero():
    assert manhattan(GOAL) == 0
    assert tiles_out_of_place(GOAL) == 0
    assert is_goal(GOAL)
    assert is_goal(list(GOAL))


def test_heuristics_one_move_from_goal():
    s = (1, 2, 3, 4, 5, 6, 7, 0, 8)
    assert manhattan(s) == 1
    assert tiles_out_of_place(s) == 1
    assert not is_goal(s)


def test_manhattan_worst_tile():
    # tile 1 in the bottom-right corner is four moves from home
    s = (8, 2, 3, 4, 5, 6, 7, 0, 1)
    assert manhattan(s) == 7
    assert tiles_out_of_place(s) == 2


def test_heuristic_wrappers_match_board_model():
    s = scramble(14, 3)
    assert manhattan_h(s) == manhattan(s)
    assert misplaced(s) == tiles_out_of_place(s)
    assert set(HEURISTICS) == {"manhattan", "misplaced"}


def test_solvable_set_is_exactly_reachable_set(goal_distances):
    assert len(goal_distances) == 181440
    rng = random.Random(7)
    sample = rng.sample(sorted(goal_distances), 2000)
    for s in sample:
        assert is_solvable(s)
        assert inversions(s) % 2 == 0
        u = make_unsolvable_variant(s)
        assert not is_solvable(u)
        assert u not in goal_distances


@pytest.mark.parametrize("board,expected", [
    ((1, 2, 3, 4, 5, 6, 7, 8, 0), True),
    ((1, 2, 3, 4, 5, 6, 7, 0, 8), True),
    ((1, 2, 3, 4, 5, 6, 8, 7, 0), False),
    ((8, 1, 2, 0, 4, 3, 7, 6, 5), False),
    ((2, 1, 3, 4, 5, 6, 7, 8, 0), False),
])
def test_is_solvable_parity(board, expected):
    assert is_solvable(board) is expected


@pytest.mark.parametrize("blank,count", [
    (0, 2), (2, 2), (6, 2), (8, 2),
    (1, 3), (3, 3), (5, 3), (7, 3),
    (4, 4),
])
def test_valid_moves_count_and_single_adjacent_swap(blank, count):
    s = board_with_blank_at(blank)
    moves = valid_moves(s)
    assert len(moves) == count
    for nxt, _ in moves:
        validate_board(nxt)
        diff = [i for i in range(9) if nxt[i] != s[i]]
        assert len(diff) == 2
        assert blank in diff
        other = diff[0] if diff[1] == blank else diff[1]
        r1, c1 = divmod(blank, 3)
        r2, c2 = divmod(other, 3)
        assert abs(r1 - r2) + abs(c1 - c2) == 1
    assert s == board_with_blank_at(blank)


def test_valid_moves_order_and_direction_labels():
    assert valid_moves(GOAL) == [
        ((1, 2, 3, 4, 5, 0, 7, 8, 6), "UP"),
        ((1, 2, 3, 4, 5, 6, 7, 0, 8), "LEFT"),
    ]
    centre = (1, 2, 3, 4, 0, 5, 6, 7, 8)
    assert [m for _, m in valid_moves(centre)] == ["UP", "DOWN", "LEFT", "RIGHT"]
    assert valid_moves(centre)[0][0] == (1, 0, 3, 4, 2, 5, 6, 7, 8)


def test_apply_move():
    assert apply_move((1, 2, 3, 4, 5, 6, 7, 0, 8), "RIGHT") == GOAL
    assert apply_move(GOAL, "DOWN") is None
    assert apply_move(GOAL, "RIGHT") is None


@pytest.mark.parametrize("bad", [
    (1, 2, 3, 4, 5, 6, 7, 8),
    (1, 2, 3, 4, 5, 6, 7, 8, 0, 0),
    (1, 1, 3, 4, 5, 6, 7, 8, 0),
    (1, 2, 3, 4, 5, 6, 7, 9, 0),
    (1, 2, 3, 4, 5, 6, 7, 8, "0"),
    (True, 2, 3, 4, 5, 6, 7, 8, 0),
    None,
])
def test_validate_board_rejects_malformed(bad):
    with pytest.raises(InvalidBoard):
        validate_board(bad)


def test_invalid_board_is_value_error():
    assert issubclass(InvalidBoard, ValueError)


def test_validate_board_returns_tuple():
    assert validate_board([1, 2, 3, 4, 5, 6, 7, 8, 0]) == GOAL


def test_validate_board_accepts_numpy_ints():
    board = validate_board(np.array([1, 2, 3, 4, 5, 6, 7, 0, 8], dtype=np.int64))
    assert board == (1, 2, 3, 4, 5, 6, 7, 0, 8)
    assert all(type(v) is int for v in board)
    with pytest.raises(InvalidBoard):
        validate_board(np.array([1, 2, 3, 4, 5, 6, 7, 0, 8], dtype=float))


@pytest.mark.parametrize("text", ["1,2,3,4,5,6,7,8,0", "1 2 3 4 5 6 7 8 0", "123456780", " 1, 2,3 4 5 6 7 8 0 "])
def test_parse_board(text):
    assert parse_board(text) == GOAL


@pytest.mark.parametrize("text", ["12345678", "1,2,3,x,5,6,7,8,0", "123456788"])
def test_parse_board_rejects(text):
    with pytest.raises(InvalidBoard):
        parse_board(text)


def test_format_board():
    assert format_board(GOAL) == "1 2 3\n4 5 6\n7 8 _"


def test_board_key_is_injective_on_reachable_boards(goal_distances):
    keys = {board_key(s) for s in goal_distances}
    assert len(keys) == len(goal_distances)


def test_scramble_is_seeded_and_within_depth(goal_distances):
    assert scramble(10, 5) == scramble(10, 5)
    for seed in range(20):
        s = scramble(10, seed)
        assert is_solvable(s)
        assert goal_distances[s] <= 10


def test_shuffle_stays_solvable():
    rng = random.Random(0)
    for _ in range(10):
        s = shuffle(rng)
        validate_board(s)
        assert is_solvable(s)
    assert shuffle(rng, moves=0) == GOAL
