"""Small integer arithmetic helpers."""

import math


def add(a: int, b: int) -> int:
    """Return the sum of ``a`` and ``b``."""
    return a + b


def sqrt(i: int) -> int:
    """Return the integer part of the square root of ``i``.

    Raises ``ValueError`` for negative input.
    """
    return math.isqrt(i)