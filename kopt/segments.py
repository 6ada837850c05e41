from __future__ import annotations
from typing import List


def reverse(path: List, a: int, b: int) -> None:
    """Reverse positions (a, b] of `path` in place."""
    path[a + 1:b + 1] = path[a + 1:b + 1][::-1]


def exchange(path: List, a: int, b: int, c: int) -> None:
    """Swap the consecutive blocks (a, b] and (b, c] of `path` in place.

    Both blocks keep their internal order: ...A [B] [C]... becomes ...A [C] [B]....
    The shorter block is swapped pairwise into place, which leaves the same
    problem on the unmatched tail of the longer one; this repeats until one
    block is empty, so the whole exchange is O(|B| + |C|) with no extra storage.
    """
    if a > b or b > c:
        raise ValueError(f"exchange needs a <= b <= c, got {a}, {b}, {c}")
    while a < b < c:
        ab, bc = b - a, c - b
        for i in range(min(ab, bc)):
            path[a + i + 1], path[b + i + 1] = path[b + i + 1], path[a + i + 1]
        if ab < bc:
            a, b = b, b + ab
        elif ab > bc:
            a = a + bc
        else:
            break
