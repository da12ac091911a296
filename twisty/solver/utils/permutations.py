"""
Lexicographic permutation generator.

Used by the goal set builder to enumerate every assignment of the four side
colours to the four faces.
"""

from __future__ import annotations
from typing import Iterable, TypeVar

T = TypeVar("T")


def permutations(values: Iterable[T]) -> list[tuple[T, ...]]:
    """
    All orderings of values in strictly increasing lexicographic order.

    Args:
        values: Distinct, mutually comparable elements (any input order)

    Returns:
        List of K! tuples, first one is the sorted input

    Algorithm (next lexicographic permutation):
        1. Find the rightmost ascent i (vals[i] < vals[i + 1])
        2. Find the rightmost j with vals[i] < vals[j]
        3. Swap i and j, reverse the suffix after i
        4. Stop when no ascent exists (descending order reached)

    Example:
        >>> permutations([2, 1])
        [(1, 2), (2, 1)]
    """
    vals = sorted(values)
    n = len(vals)
    result = [tuple(vals)]

    while True:
        i = n - 2
        while i >= 0 and not vals[i] < vals[i + 1]:
            i -= 1
        if i < 0:
            return result

        j = n - 1
        while not vals[i] < vals[j]:
            j -= 1

        vals[i], vals[j] = vals[j], vals[i]
        vals[i + 1:] = reversed(vals[i + 1:])
        result.append(tuple(vals))
