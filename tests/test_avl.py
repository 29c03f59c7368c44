import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.avl import AVLTree, run_commands


def test_iteration_is_sorted_and_distinct():
    tree = AVLTree([5, 1, 9, 1, 3, 9, 7])
    assert list(tree) == [1, 3, 5, 7, 9]
    assert len(tree) == 5


def test_contains():
    tree = AVLTree([10, 20, 30])
    assert 20 in tree
    assert 25 not in tree
    assert "20" not in tree


def test_next_at_least():
    tree = AVLTree([10, 20, 30])
    assert tree.next_at_least(20) == 20
    assert tree.next_at_least(21) == 30
    assert tree.next_at_least(-5) == 10
    assert tree.next_at_least(31) is None


def test_next_at_least_on_empty_tree():
    assert AVLTree().next_at_least(0) is None


def test_delete_removes_key():
    tree = AVLTree(range(20))
    tree.delete(7)
    tree.delete(0)
    tree.delete(19)
    assert list(tree) == [k for k in range(20) if k not in (0, 7, 19)]
    assert len(tree) == 17
    assert 7 not in tree


def test_delete_missing_raises():
    tree = AVLTree([1, 2])
    with pytest.raises(KeyError):
        tree.delete(3)
    assert list(tree) == [1, 2]


def test_sequential_inserts_stay_ordered():
    tree = AVLTree(range(1000, 0, -1))
    assert list(tree) == list(range(1, 1001))
    for key in range(1, 1001, 2):
        tree.delete(key)
    assert list(tree) == list(range(2, 1001, 2))


def test_run_commands_example():
    text = "6\n+ 1\n+ 3\n+ 3\n? 2\n+ 1\n? 4\n"
    assert run_commands(text) == ["3", "4"]


def test_run_commands_not_found():
    assert run_commands("2\n+ 5\n? 6\n") == ["-1"]


def test_run_commands_truncated_input():
    with pytest.raises(ValueError):
        run_commands("2\n+ 1\n")


@given(st.lists(st.integers(-1000, 1000)), st.integers(-1100, 1100))
def test_matches_builtin_set(keys, probe):
    tree = AVLTree(keys)
    distinct = set(keys)
    assert list(tree) == sorted(distinct)
    assert len(tree) == len(distinct)
    candidates = [k for k in distinct if k >= probe]
    assert tree.next_at_least(probe) == (min(candidates) if candidates else None)


@given(st.lists(st.integers(-100, 100)), st.lists(st.integers(-100, 100)))
def test_delete_matches_builtin_set(keys, removals):
    tree = AVLTree(keys)
    expected = set(keys)
    for key in removals:
        if key in expected:
            tree.delete(key)
            expected.remove(key)
    assert list(tree) == sorted(expected)
    assert len(tree) == len(expected)