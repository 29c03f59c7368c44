"""Selecting the smallest generated values and the best crossing point of two arrays."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

MODULUS = 1 << 30


def next_element(previous: int, x: int, y: int) -> int:
    """Return (previous * x + y) mod 2**30, the remainder taking the dividend's sign."""
    total = previous * x + y
    remainder = abs(total) % MODULUS
    return -remainder if total < 0 else remainder


def k_smallest_generated(n: int, k: int, start: int, x: int, y: int) -> list[int]:
    """Generate ``n`` values after ``start`` and return the ``k`` smallest, ascending."""
    if not 0 <= k <= n:
        raise ValueError("k must lie between 0 and n")
    current = start
    largest_first: list[int] = []
    for index in range(n):
        current = next_element(current, x, y)
        if index < k:
            heapq.heappush(largest_first, -current)
        elif k and current < -largest_first[0]:
            heapq.heapreplace(largest_first, -current)
    return sorted(-value for value in largest_first)


def min_max_position(first: Sequence[int], second: Sequence[int]) -> int:
    """Return the 1-based index minimising max(first[i], second[i]).

    ``first`` is expected to be non-decreasing and ``second`` non-increasing.
    """
    if len(first) != len(second):
        raise ValueError("the arrays must have the same length")
    length = len(first)
    if length == 0:
        raise ValueError("the arrays must not be empty")
    left, right = -1, length
    while right - left > 1:
        mid = (left + right) // 2
        if first[mid] > second[mid]:
            right = mid
        else:
            left = mid
    if right < length and left >= 0:
        if max(first[left], second[left]) > max(first[right], second[right]):
            return right + 1
        return left + 1
    if right >= length:
        return left + 1
    return right + 1