"""Command-line calculator offering addition and integer square root."""

from __future__ import annotations

import sys

from gopractice.simplemath import add, sqrt

_USAGE = (
    "USAGE: calc command [arguments] ...\n"
    "\nThe commands are:\n\tadd\tAddition of two values."
    "\n\tsqrt\tSquare root of a non-negative value."
)
_ADD_USAGE = "USAGE: calc add <integer1> <integer2>"
_SQRT_USAGE = "USAGE: calc sqrt <integer>"


def _integers(texts: list[str]) -> list[int] | None:
    try:
        return [int(text) for text in texts]
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Run the calculator; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print(_USAGE)
        return 1

    command, operands = args[0], args[1:]
    if command == "add":
        numbers = _integers(operands) if len(operands) == 2 else None
        if numbers is None:
            print(_ADD_USAGE)
            return 1
        print("Result: ", add(*numbers))
    elif command == "sqrt":
        numbers = _integers(operands) if len(operands) == 1 else None
        if numbers is None or numbers[0] < 0:
            print(_SQRT_USAGE)
            return 1
        print("Result: ", sqrt(numbers[0]))
    else:
        print(_USAGE)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())