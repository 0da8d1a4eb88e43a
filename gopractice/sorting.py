"""In-place integer sorting algorithms: bubble sort and quicksort."""

from __future__ import annotations

from collections.abc import MutableSequence


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place, stopping early once a pass makes no swap."""
    count = len(values)
    for done in range(count - 1):
        swapped = False
        for j in range(count - done - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break


def _partition(values: MutableSequence[int], left: int, right: int) -> int:
    """Place ``values[left]`` at its final position within ``left..right``.

    Works by moving a hole between both ends; returns the pivot's index.
    """
    pivot = values[left]
    hole = left
    i, j = left, right

    while i <= j:
        while j >= hole and values[j] >= pivot:
            j -= 1
        if j >= hole:
            values[hole] = values[j]
            hole = j

        if values[i] <= pivot and i <= hole:
            i += 1

        if i <= hole:
            values[hole] = values[i]
            hole = i

    values[hole] = pivot
    return hole


def quick_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place with quicksort, using the first item as pivot."""
    if not values:
        return
    pending = [(0, len(values) - 1)]
    while pending:
        left, right = pending.pop()
        pivot = _partition(values, left, right)
        if pivot - left > 1:
            pending.append((left, pivot - 1))
        if right - pivot > 1:
            pending.append((pivot + 1, right))