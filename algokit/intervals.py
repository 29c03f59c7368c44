"""Problems on points and segments of the number line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate

MAX_DISTANCE = 2_000_000_002


def _validated(coordinates: Iterable[int], groups: int) -> list[int]:
    points = sorted(coordinates)
    if not points:
        raise ValueError("at least one coordinate is required")
    if groups <= 0:
        raise ValueError("the number of groups must be positive")
    return points


def _covers(points: list[int], groups: int, length: int) -> bool:
    count = 1
    last = points[0]
    for point in points[1:]:
        if point - last > length:
            count += 1
            last = point
    return count <= groups


def covers_all(coordinates: Iterable[int], groups: int, length: int) -> bool:
    """Return True if ``groups`` segments of ``length`` cover every coordinate."""
    return _covers(_validated(coordinates, groups), groups, length)


def min_cover_length(coordinates: Iterable[int], groups: int) -> int:
    """Return the least length with which ``groups`` segments cover every coordinate."""
    points = _validated(coordinates, groups)
    left, right = 0, MAX_DISTANCE
    while right - left > 1:
        mid = left + (right - left) // 2
        if _covers(points, groups, mid):
            right = mid
        else:
            left = mid
    return left if _covers(points, groups, left) else right


def outer_minimums(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each 1-based ``(left, right)``, the minimum of values up to left and from right."""
    prefix = list(accumulate(values, min))
    suffix = list(accumulate(reversed(values), min))[::-1]
    size = len(values)
    answers = []
    for left, right in queries:
        if not (1 <= left <= size and 1 <= right <= size):
            raise IndexError(f"query ({left}, {right}) is out of range")
        answers.append(min(prefix[left - 1], suffix[right - 1]))
    return answers


def merge_segments(segments: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge overlapping or touching segments, ordered by their start."""
    merged: list[tuple[int, int]] = []
    for begin, end in sorted(segments, key=lambda segment: segment[0]):
        if merged and begin <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((begin, end))
    return merged