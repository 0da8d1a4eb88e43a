"""Command that sorts integers read from a file and writes them to another."""

from __future__ import annotations

import argparse
import re
import time
from collections.abc import Iterable
from pathlib import Path

from gopractice.sorting import bubble_sort, quick_sort

_INTEGER = re.compile(r"[+-]?\d+")

_ALGORITHMS = {
    "qsort": quick_sort,
    "bubblesort": bubble_sort,
}


def read_values(path: str | Path) -> list[int]:
    """Read one integer per line from ``path``.

    Raises ``OSError`` if the file cannot be opened and ``ValueError`` if a
    line is not an integer.
    """
    values = []
    with open(path, encoding="utf-8") as stream:
        for number, line in enumerate(stream, start=1):
            text = line.rstrip("\r\n")
            if not _INTEGER.fullmatch(text):
                raise ValueError(f"line {number}: invalid integer {text!r}")
            values.append(int(text))
    return values


def write_values(values: Iterable[int], path: str | Path) -> None:
    """Write each value on its own line to ``path``."""
    with open(path, "w", encoding="utf-8") as stream:
        stream.writelines(f"{value}\n" for value in values)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sorter", description="Sort integers in a file.")
    parser.add_argument("-i", dest="infile", default="infile",
                        help="File contains values for sorting")
    parser.add_argument("-o", dest="outfile", default="outfile",
                        help="File to receive sorted values")
    parser.add_argument("-a", dest="algorithm", default="qsort", help="Sort algorithm")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the sorter command; returns the exit status."""
    args = _parser().parse_args(argv)
    print("infile =", args.infile, "outfile=", args.outfile, "algorithm=", args.algorithm)

    try:
        values = read_values(args.infile)
    except OSError as exc:
        print("Failed to open the input file ", args.infile)
        print(exc)
        return 1
    except ValueError as exc:
        print(exc)
        return 1

    started = time.perf_counter()
    sort = _ALGORITHMS.get(args.algorithm)
    if sort is None:
        print("Sorting algorithm", args.algorithm, "is either unknown or unsupported.")
    else:
        sort(values)
    elapsed = time.perf_counter() - started
    print("The soring process costs", f"{elapsed:.6f}s", "to complete.")

    try:
        write_values(values, args.outfile)
    except OSError as exc:
        print("Failed to create the output file ", args.outfile)
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())