import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.indexed_heap import IndexedMinHeap, run_commands


def test_get_min_returns_smallest():
    heap = IndexedMinHeap()
    for request, value in enumerate([5, 2, 9, 7]):
        heap.insert(value, request)
    assert heap.get_min() == 2
    assert len(heap) == 4


@given(st.lists(st.integers(-10**9, 10**9), min_size=1, max_size=60))
def test_extract_min_yields_sorted(values):
    heap = IndexedMinHeap()
    for request, value in enumerate(values):
        heap.insert(value, request)
    extracted = [heap.extract_min() for _ in values]
    assert extracted == sorted(values)
    assert len(heap) == 0


def test_decrease_key_moves_value_to_top():
    heap = IndexedMinHeap()
    heap.insert(10, 0)
    heap.insert(20, 1)
    heap.insert(30, 2)
    heap.decrease_key(2, 25)
    assert heap.get_min() == 5
    assert heap.extract_min() == 5
    assert heap.get_min() == 10


@given(
    st.lists(st.integers(-1000, 1000), min_size=1, max_size=40),
    st.data(),
)
def test_decrease_key_keeps_order(values, data):
    heap = IndexedMinHeap()
    for request, value in enumerate(values):
        heap.insert(value, request)
    target = data.draw(st.integers(0, len(values) - 1))
    delta = data.draw(st.integers(0, 500))
    heap.decrease_key(target, delta)
    expected = list(values)
    expected[target] -= delta
    assert [heap.extract_min() for _ in values] == sorted(expected)


def test_empty_heap_errors():
    heap = IndexedMinHeap()
    with pytest.raises(IndexError):
        heap.get_min()
    with pytest.raises(IndexError):
        heap.extract_min()


def test_unknown_request_raises_key_error():
    heap = IndexedMinHeap()
    heap.insert(1, 0)
    heap.extract_min()
    with pytest.raises(KeyError):
        heap.decrease_key(0, 1)


def test_duplicate_request_rejected():
    heap = IndexedMinHeap()
    heap.insert(1, 3)
    with pytest.raises(ValueError):
        heap.insert(2, 3)


def test_run_commands_protocol():
    text = "7\ninsert 3\ninsert 4\ngetMin\ndecreaseKey 2 2\ngetMin\nextractMin\ngetMin\n"
    assert run_commands(text) == ["3", "2", "3"]


def test_run_commands_unknown_command():
    with pytest.raises(ValueError):
        run_commands("1\nfrobnicate\n")