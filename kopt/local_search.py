from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .tsp import DistanceMatrix, validate_tour

logger = logging.getLogger(__name__)

# Minimum improvement for a move to be accepted; keeps rounding noise from cycling forever.
EPSILON = 1e-10


@dataclass
class SearchResult:
    length: float
    tour: List[int]
    n_sweeps: int
    n_moves: int
    history_lengths: List[float] = field(default_factory=list)
    elapsed_sec: float = 0.0

    def as_pair(self):
        return self.length, self.tour


class LocalSearch:
    """First-improvement local search: sweep until a full pass makes no move.

    Subclasses implement `_sweep`, which mutates `self.path` in place and
    returns the number of moves it applied.
    """
    name = "local_search"

    def __init__(self, matrix: DistanceMatrix, start: Optional[Sequence[int]] = None):
        self.D = matrix.rows
        self.matrix = matrix
        self.n = len(matrix)
        self.path = validate_tour(start, self.n)
        self.start_length = matrix.tour_length(self.path)
        # per-sweep history for visualization
        self.history_lengths: List[float] = []
        self.history_tours: List[List[int]] = []

    def _sweep(self) -> int:
        raise NotImplementedError

    def run(self) -> SearchResult:
        start = time.time()
        self.history_lengths = []
        self.history_tours = []

        n_sweeps = 0
        n_moves = 0
        stable = False
        while not stable:
            moved = self._sweep()
            n_sweeps += 1
            n_moves += moved
            stable = moved == 0

            length = self.matrix.tour_length(self.path)
            self.history_lengths.append(length)
            self.history_tours.append(list(self.path))
            logger.debug("%s sweep %d: %d moves, length %s", self.name, n_sweeps, moved, length)

        length = self.matrix.tour_length(self.path)
        elapsed = time.time() - start
        logger.info("%s on %d points: %s -> %s in %d sweeps (%d moves, %.3fs)",
                    self.name, self.n, self.start_length, length, n_sweeps, n_moves, elapsed)
        return SearchResult(length=length, tour=list(self.path), n_sweeps=n_sweeps, n_moves=n_moves,
                            history_lengths=self.history_lengths, elapsed_sec=elapsed)
