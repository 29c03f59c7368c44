import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.intervals import (
    covers_all,
    merge_segments,
    min_cover_length,
    outer_minimums,
)

points = st.lists(st.integers(-1000, 1000), min_size=1, max_size=30)


def test_single_point_needs_zero_length():
    assert min_cover_length([42], 1) == 0


@given(points)
def test_enough_groups_need_zero_length(coordinates):
    assert min_cover_length(coordinates, len(coordinates)) == 0


@given(points, st.integers(1, 5))
def test_min_cover_length_is_minimal(coordinates, groups):
    length = min_cover_length(coordinates, groups)
    assert covers_all(coordinates, groups, length)
    assert length == 0 or not covers_all(coordinates, groups, length - 1)


@given(points)
def test_one_group_needs_full_span(coordinates):
    assert min_cover_length(coordinates, 1) == max(coordinates) - min(coordinates)


@given(points, st.integers(1, 5), st.integers(0, 500))
def test_covers_all_is_monotone_in_length(coordinates, groups, length):
    if covers_all(coordinates, groups, length):
        assert covers_all(coordinates, groups, length + 1)


def test_invalid_arguments_raise():
    with pytest.raises(ValueError):
        min_cover_length([], 1)
    with pytest.raises(ValueError):
        covers_all([1, 2], 0, 5)


@given(st.data())
def test_outer_minimums_match_brute_force(data):
    values = data.draw(st.lists(st.integers(-50, 50), min_size=1, max_size=20))
    size = len(values)
    queries = data.draw(
        st.lists(st.tuples(st.integers(1, size), st.integers(1, size)), max_size=10)
    )
    expected = [min(values[:left] + values[right - 1:]) for left, right in queries]
    assert outer_minimums(values, queries) == expected


def test_outer_minimums_out_of_range():
    with pytest.raises(IndexError):
        outer_minimums([3, 1, 2], [(0, 2)])


def test_merge_segments_example():
    assert merge_segments([(7, 8), (2, 5), (1, 3)]) == [(1, 5), (7, 8)]


def test_merge_segments_empty():
    assert merge_segments([]) == []


segments = st.lists(
    st.tuples(st.integers(-100, 100), st.integers(0, 50)).map(
        lambda pair: (pair[0], pair[0] + pair[1])
    ),
    max_size=20,
)


@given(segments)
def test_merged_segments_are_disjoint_and_cover_input(items):
    merged = merge_segments(items)
    for (_, end), (begin, _) in zip(merged, merged[1:]):
        assert end < begin
    for begin, end in items:
        assert any(m_begin <= begin and end <= m_end for m_begin, m_end in merged)
    assert merge_segments(merged) == merged