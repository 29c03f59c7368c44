"""Sorting, selection and inversion counting over integer sequences."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

GENERATOR_MODULUS = 10_004_321
_BYTE_MASK = 0xFF
_WORD_BITS = 64


def _partition(items: list[int], begin: int, end: int, pivot: int) -> tuple[int, int]:
    """Hoare partition of ``items[begin:end + 1]``; return the new (begin, end)."""
    low, high = begin, end
    while low <= high:
        while items[low] < pivot:
            low += 1
        while items[high] > pivot:
            high -= 1
        if low <= high:
            items[low], items[high] = items[high], items[low]
            low += 1
            high -= 1
    return low, high


def quicksort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by quicksort with a random pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        begin, end = pending.pop()
        if begin >= end:
            continue
        pivot = items[random.randrange(begin, end)]
        low, high = _partition(items, begin, end, pivot)
        pending.append((begin, high))
        pending.append((low, end))
    return items


def generate_sequence(size: int, first: int, second: int) -> list[int]:
    """Return ``size`` terms of a(i) = (123 * a(i-1) + 45 * a(i-2)) mod 10004321."""
    if size < 0:
        raise ValueError("size must not be negative")
    terms = [first, second]
    while len(terms) < size:
        terms.append((terms[-1] * 123 + terms[-2] * 45) % GENERATOR_MODULUS)
    return terms[:size]


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the ``k``-th smallest value, counting from 1, found by quickselect."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise IndexError(f"k = {k} is out of range for {len(items)} values")
    target = k - 1
    begin, end = 0, len(items) - 1
    while True:
        pivot = items[begin + (end - begin) // 2]
        low, high = _partition(items, begin, end, pivot)
        if high < target < low:
            return items[target]
        if begin <= target <= high:
            end = high
        else:
            begin = low


def _sort_counting(items: Sequence[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return list(items), 0
    middle = (len(items) + 1) // 2
    left, left_count = _sort_counting(items[:middle])
    right, right_count = _sort_counting(items[middle:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            count += len(left) - i
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(values: Iterable[int]) -> int:
    """Count pairs i < j with values[i] >= values[j]; equal values count as a pair."""
    return _sort_counting(list(values))[1]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort unsigned 64-bit integers by least significant byte first."""
    items = list(values)
    for value in items:
        if not 0 <= value < 1 << _WORD_BITS:
            raise ValueError(f"{value} is not an unsigned 64-bit integer")
    for shift in range(0, _WORD_BITS, 8):
        buckets: list[list[int]] = [[] for _ in range(_BYTE_MASK + 1)]
        for value in items:
            buckets[(value >> shift) & _BYTE_MASK].append(value)
        items = [value for bucket in buckets for value in bucket]
    return items