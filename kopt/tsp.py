from __future__ import annotations
import math
import operator
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np


class InvalidTourError(ValueError):
    """A starting tour that is not a permutation of 0..n-1."""


def _sqrt(x):
    # Decimal carries its own sqrt; everything else goes through math
    sqrt = getattr(x, "sqrt", None)
    return sqrt() if callable(sqrt) else math.sqrt(x)


def euclidean(a: Sequence, b: Sequence):
    total = (a[0] - b[0]) * (a[0] - b[0])
    for k in range(1, len(a)):
        total = total + (a[k] - b[k]) * (a[k] - b[k])
    return _sqrt(total)


@dataclass(frozen=True)
class DistanceMatrix:
    """Immutable symmetric table of pairwise distances, indexed by point index."""
    rows: Tuple[Tuple, ...]

    @staticmethod
    def _build(points, dims: int) -> "DistanceMatrix":
        pts = [tuple(p) for p in points]
        for p in pts:
            if len(p) != dims:
                raise ValueError(f"Expected {dims}D points, got {p!r}")
        return DistanceMatrix(rows=tuple(tuple(euclidean(a, b) for b in pts) for a in pts))

    @staticmethod
    def build_2d(points: Sequence[Tuple[float, float]]) -> "DistanceMatrix":
        return DistanceMatrix._build(points, 2)

    @staticmethod
    def build_3d(points: Sequence[Tuple[float, float, float]]) -> "DistanceMatrix":
        return DistanceMatrix._build(points, 3)

    @staticmethod
    def from_table(table) -> "DistanceMatrix":
        rows = tuple(tuple(r) for r in table)
        n = len(rows)
        for r in rows:
            if len(r) != n:
                raise ValueError(f"Distance table must be square, got a row of {len(r)} in a {n}-row table")
        for i in range(n):
            if rows[i][i] != 0:
                raise ValueError(f"Distance table diagonal must be zero, got {rows[i][i]!r} at ({i}, {i})")
            for j in range(n):
                if rows[i][j] < 0:
                    raise ValueError(f"Distance table has negative entry {rows[i][j]!r} at ({i}, {j})")
                if rows[i][j] != rows[j][i]:
                    raise ValueError(f"Distance table must be symmetric, ({i}, {j}) != ({j}, {i})")
        return DistanceMatrix(rows=rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, i: int) -> Tuple:
        return self.rows[i]

    def tour_length(self, tour: Sequence[int]):
        n = len(tour)
        dist = 0
        for k in range(n):
            dist = dist + self.rows[tour[k]][tour[(k + 1) % n]]
        return dist

    def to_numpy(self) -> np.ndarray:
        n = len(self.rows)
        return np.array(self.rows, dtype=float).reshape(n, n)


def validate_tour(tour: Optional[Sequence[int]], n: int) -> List[int]:
    """Return a private copy of `tour` (identity when None), checked to be a permutation of 0..n-1."""
    if tour is None:
        return list(range(n))
    try:
        path = [operator.index(i) for i in tour]
    except TypeError as exc:
        raise InvalidTourError(f"Tour entries must be integers: {exc}") from exc
    if len(path) != n:
        raise InvalidTourError(f"Tour has {len(path)} entries, expected {n}")
    seen = [False] * n
    for i in path:
        if not 0 <= i < n:
            raise InvalidTourError(f"Tour index {i} out of range 0..{n - 1}")
        if seen[i]:
            raise InvalidTourError(f"Tour visits {i} more than once")
        seen[i] = True
    return path
