"""Recursive and dynamic-programming solutions to classic counting problems."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from functools import lru_cache


def _check_position(x: int, y: int) -> None:
    if x < 1 or y < 1:
        raise ValueError("board coordinates start at 1")


def chess_king_rec(x: int, y: int) -> int:
    """Count paths from (1, 1) to (x, y) moving only right or down, recursively."""
    _check_position(x, y)

    @lru_cache(maxsize=None)
    def paths(px: int, py: int) -> int:
        if px == 1 or py == 1:
            return 1
        return paths(px, py - 1) + paths(px - 1, py)

    return paths(x, y)


def chess_king_dyn(x: int, y: int) -> int:
    """Count paths from (1, 1) to (x, y) moving only right or down, row by row."""
    _check_position(x, y)
    row = [1] * (x + 1)
    for _ in range(2, y + 1):
        for j in range(2, x + 1):
            row[j] += row[j - 1]
    return row[x]


def knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Return the best total value of (weight, value) items fitting in ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity cannot be negative")
    if capacity == 0:
        return 0
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0 or value < 0:
            raise ValueError("weights and values cannot be negative")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def levenshtein_distance(a: str, b: str) -> int:
    """Return the edit distance between ``a`` and ``b``."""
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j], current[j - 1], previous[j - 1]) + 1)
        previous = current
    return previous[-1]


_LEVENSHTEIN_PAIRS = [
    ("", ""),
    ("ABCD", "ABCD"),
    ("ABCD", "AXCD"),
    ("ABCD", "XXCD"),
    ("ABCD", "XXXD"),
    ("ABCD", "XXXX"),
    ("ABCD", "XCD"),
    ("ABCD", "CD"),
    ("ABCD", "D"),
    ("ABCD", "DCBA"),
    ("ABCD", "CBAD"),
    ("ABCD", "BACD"),
    ("ABCD", "DBCD"),
    ("ABCD", "DCBX"),
    ("ABCD", "CBXX"),
    ("ABCD", "BXXX"),
    ("kitten", "sitten"),
    ("sitten", "sittin"),
    ("sittin", "sitting"),
    ("kitten", "sitting"),
]


def main(argv: list[str] | None = None) -> int:
    """Print the path counts for a 10x15 board and a set of edit distances."""
    parser = argparse.ArgumentParser(description="Show the dynamic-programming examples.")
    parser.parse_args(argv)
    print(chess_king_rec(10, 15))
    print(chess_king_dyn(10, 15))
    print()
    print("levenshtein_distance is testing...\n")
    for a, b in _LEVENSHTEIN_PAIRS:
        print(levenshtein_distance(a, b))
    return 0


if __name__ == "__main__":
    sys.exit(main())