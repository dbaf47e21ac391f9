"""Comparison sorts that rearrange a list in place, with a timing harness."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, MutableSequence
from typing import Any

INT_MAX = 2**31 - 1
DEFAULT_SIZE = 10000

SortFunc = Callable[[MutableSequence[Any]], None]


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly moving the smallest remaining element forward."""
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by inserting each element into the sorted prefix."""
    for i in range(1, len(items)):
        value = items[i]
        position = i
        while position > 0 and items[position - 1] > value:
            items[position] = items[position - 1]
            position -= 1
        items[position] = value


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by swapping adjacent out-of-order pairs."""
    count = len(items)
    for done in range(count - 1):
        for j in range(count - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]


def _merged(values: list[Any]) -> list[Any]:
    if len(values) < 2:
        return values
    middle = len(values) // 2
    left = _merged(values[:middle])
    right = _merged(values[middle:])
    result: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:
            result.append(left[li])
            li += 1
        else:
            result.append(right[ri])
            ri += 1
    result.extend(left[li:])
    result.extend(right[ri:])
    return result


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by recursive halving and merging."""
    items[:] = _merged(list(items))


def ascending_values(count: int) -> list[int]:
    """Return ``0 .. count-1`` in increasing order: the easy case for most sorts."""
    return list(range(count))


def descending_values(count: int) -> list[int]:
    """Return ``count-1 .. 0`` in decreasing order: the hard case for most sorts."""
    return list(range(count - 1, -1, -1))


def random_values(count: int) -> list[int]:
    """Return ``count`` random digits from 0 to 9."""
    return [random.randrange(10) for _ in range(count)]


def _cases(size: int) -> list[tuple[str, list[int]]]:
    return [
        ("empty case", []),
        ("single case", [1]),
        ("zeroes case", [0] * size),
        ("int_max case", [INT_MAX] * size),
        ("best case", ascending_values(size)),
        ("worst case", descending_values(size)),
        ("random case", random_values(size)),
    ]


def benchmark(sort_func: SortFunc, size: int) -> dict[str, float]:
    """Time ``sort_func`` on each standard input of ``size`` elements, in milliseconds."""
    if size < 0:
        raise ValueError("size cannot be negative")
    timings: dict[str, float] = {}
    for occasion, data in _cases(size):
        start = time.perf_counter()
        sort_func(data)
        timings[occasion] = (time.perf_counter() - start) * 1000
    return timings


_SORTS: list[tuple[SortFunc, str]] = [
    (selection_sort, "Selection sort"),
    (insertion_sort, "Insertion sort"),
    (bubble_sort, "Bubble sort"),
    (merge_sort, "Merge sort"),
]


def main(argv: list[str] | None = None) -> int:
    """Time every sort on the standard inputs and print the results."""
    parser = argparse.ArgumentParser(description="Time the sorting algorithms.")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="elements per input")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size cannot be negative")
    out = sys.stdout
    for sort_func, title in _SORTS:
        out.write(f"{title} is testing...\n")
        for occasion, millis in benchmark(sort_func, args.size).items():
            out.write(f"\n\t{occasion}\ttime spended: {millis} ms\n")
        out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())