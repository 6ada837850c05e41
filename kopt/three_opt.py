from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .local_search import EPSILON, LocalSearch
from .segments import exchange, reverse
from .tsp import DistanceMatrix


def _reconnect(path: List[int], case: int, a: int, b: int, c: int) -> None:
    if case == 0:
        reverse(path, b, c)
    elif case == 1:
        reverse(path, a, c)
    elif case == 2:
        reverse(path, a, b)
    elif case == 3:
        reverse(path, a, b)
        exchange(path, a, b, c)
    elif case == 4:
        reverse(path, a, b)
        reverse(path, b, c)
    elif case == 5:
        reverse(path, b, c)
        exchange(path, a, b, c)
    elif case == 6:
        exchange(path, a, b, c)
    else:
        raise ValueError(f"Unknown 3-opt reconnection {case}")


class ThreeOpt(LocalSearch):
    """3-opt: drop edges (a, a+1), (b, b+1), (c, c+1) and pick the cheapest of
    seven reconnections of the segments A = [..a], B = (a, b], C = (b, c].

    Cases 0-2 are the three 2-opt moves hidden in a triple, cases 3-6 the
    pure 3-opt ones (6 keeps both segments' orientation).
    """
    name = "3-opt"

    def _sweep(self) -> int:
        D, path, n = self.D, self.path, self.n
        moves = 0
        for a in range(n):
            for b in range(a + 1, n):
                for c in range(b + 1, n):
                    pa, pa1 = path[a], path[a + 1]
                    pb, pb1 = path[b], path[b + 1]
                    pc, pc1 = path[c], path[(c + 1) % n]
                    current = D[pa][pa1] + D[pb][pb1] + D[pc][pc1]
                    swaps = (
                        D[pa][pa1] + D[pb][pc] + D[pb1][pc1],
                        D[pa][pc] + D[pb1][pb] + D[pa1][pc1],
                        D[pa][pb] + D[pa1][pb1] + D[pc][pc1],
                        D[pa][pb1] + D[pc][pb] + D[pa1][pc1],
                        D[pa][pb] + D[pa1][pc] + D[pb1][pc1],
                        D[pa][pc] + D[pb1][pa1] + D[pb][pc1],
                        D[pa][pb1] + D[pc][pa1] + D[pb][pc1],
                    )
                    best = 0
                    for k in range(1, len(swaps)):
                        if swaps[k] < swaps[best]:
                            best = k
                    if swaps[best] - current < -EPSILON:
                        _reconnect(path, best, a, b, c)
                        moves += 1
        return moves


def run3opt(matrix: DistanceMatrix, start_tour: Optional[Sequence[int]] = None) -> Tuple[float, List[int]]:
    """Returns a 3-opt tour and its length, from an optional starting tour."""
    return ThreeOpt(matrix, start_tour).run().as_pair()
