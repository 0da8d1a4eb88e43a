"""Primes by trial division against the primes already found."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterator

_DEFAULT_GOAL = 100
_INTEGER = re.compile(r"[+-]?\d+")


def primes(goal: int) -> Iterator[int]:
    """Yield the primes up to and including ``goal`` in increasing order."""
    found: list[int] = []
    for candidate in range(2, goal + 1):
        if all(candidate % prime for prime in found):
            found.append(candidate)
            yield candidate


def _parse_goal(text: str | None) -> int:
    if text is None or not _INTEGER.fullmatch(text):
        return _DEFAULT_GOAL
    return int(text)


def main(argv: list[str] | None = None) -> int:
    """Print the primes up to a goal given on the command line (default 100)."""
    parser = argparse.ArgumentParser(prog="primes", description="Print the primes up to a goal.")
    parser.add_argument("goal", nargs="?", help="largest number to consider")
    args = parser.parse_args(argv)

    goal = _parse_goal(args.goal)
    print("goal=", goal)
    for prime in primes(goal):
        print(prime)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())