from collections import deque

import pytest

from eightpuzzle.domains.puzzle8 import GOAL, valid_moves


@pytest.fixture(scope="session")
def goal_distances():
    """Exact move distance to GOAL for every reachable board (plain BFS)."""
    dist = {GOAL: 0}
    q = deque([GOAL])
    while q:
        s = q.popleft()
        for s2, _ in valid_moves(s):
            if s2 not in dist:
                dist[s2] = dist[s] + 1
                q.append(s2)
    return dist


class StubRng:
    """Replays scripted values in place of random.Random."""

    def __init__(self, randranges=(), randoms=(), choices=()):
        self._randranges = list(randranges)
        self._randoms = list(randoms)
        self._choices = list(choices)

    def randrange(self, n):
        v = self._randranges.pop(0)
        assert 0 <= v < n
        return v

    def random(self):
        return self._randoms.pop(0)

    def choice(self, seq):
        v = self._choices.pop(0)
        assert v in seq
        return v


@pytest.fixture
def stub_rng():
    return StubRng
