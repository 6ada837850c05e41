from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .local_search import EPSILON, LocalSearch
from .segments import reverse
from .tsp import DistanceMatrix


class TwoOpt(LocalSearch):
    """2-opt: drop edges (a, a+1) and (b, b+1), reconnect by reversing (a, b]."""
    name = "2-opt"

    def _sweep(self) -> int:
        D, path, n = self.D, self.path, self.n
        moves = 0
        for a in range(n):
            for b in range(a + 2, n):
                nb = (b + 1) % n
                delta = (D[path[a]][path[b]] + D[path[a + 1]][path[nb]]
                         - D[path[a]][path[a + 1]] - D[path[b]][path[nb]])
                if delta < -EPSILON:
                    reverse(path, a, b)
                    moves += 1
        return moves


def run2opt(matrix: DistanceMatrix, start_tour: Optional[Sequence[int]] = None) -> Tuple[float, List[int]]:
    """Returns a 2-opt tour and its length, from an optional starting tour."""
    return TwoOpt(matrix, start_tour).run().as_pair()
