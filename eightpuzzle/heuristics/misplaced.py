from typing import Callable, Dict, Tuple
from eightpuzzle.domains.puzzle8 import tiles_out_of_place as _tiles_out_of_place
from eightpuzzle.heuristics.manhattan import manhattan

State = Tuple[int, ...]

def misplaced(s: State) -> int:
    return _tiles_out_of_place(s)

HEURISTICS: Dict[str, Callable[[State], int]] = {
    "manhattan": manhattan,
    "misplaced": misplaced,
}
