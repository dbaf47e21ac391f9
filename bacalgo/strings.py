"""Substring search with a prefix-function scan."""

from __future__ import annotations

import argparse
import sys


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return start offsets in ``text`` where the prefix-function scan reports ``pattern``.

    The prefix values are kept over the text itself, so fall-back steps use the
    text's prefix table; an empty pattern reports offsets 1 to ``len(text)``.
    """
    size = len(pattern)

    def pattern_char(k: int) -> str | None:
        return pattern[k] if k < size else None

    prefix = [0] * (len(text) + 1)
    matches: list[int] = []
    for i, char in enumerate(text, start=1):
        k = prefix[i - 1]
        while k > 0 and char != pattern_char(k):
            k = prefix[k - 1]
        if char == pattern_char(k):
            k += 1
        prefix[i] = k
        if k == size:
            matches.append(i - size)
    return matches


def main(argv: list[str] | None = None) -> int:
    """Print the match offsets of a pattern in a text, tab separated."""
    parser = argparse.ArgumentParser(description="Find a pattern in a text.")
    parser.add_argument("pattern", nargs="?", default="aba")
    parser.add_argument("text", nargs="?", default="ababacababxs")
    args = parser.parse_args(argv)
    print("".join(f"{offset}\t" for offset in kmp_search(args.pattern, args.text)))
    return 0


if __name__ == "__main__":
    sys.exit(main())