import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.hashset import ChainedHashSet, run_commands


def test_add_and_contains():
    values = ChainedHashSet()
    values.add(5)
    values.add(5)
    assert 5 in values
    assert 6 not in values
    assert len(values) == 1


def test_discard_missing_is_silent():
    values = ChainedHashSet([1, 2])
    values.discard(3)
    values.discard(1)
    assert 1 not in values
    assert 2 in values
    assert len(values) == 1


def test_collisions_in_small_table():
    values = ChainedHashSet([1, 8, 15, -6], table_size=7)
    assert sorted(values) == [-6, 1, 8, 15]
    values.discard(8)
    assert 8 not in values
    assert 15 in values
    assert len(values) == 3


def test_non_int_is_not_contained():
    assert "1" not in ChainedHashSet([1])


def test_bad_table_size():
    with pytest.raises(ValueError):
        ChainedHashSet(table_size=0)


@given(
    st.lists(
        st.tuples(st.sampled_from(["add", "discard"]), st.integers(-50, 50)),
        max_size=100,
    )
)
def test_behaves_like_builtin_set(operations):
    values = ChainedHashSet(table_size=13)
    reference: set[int] = set()
    for name, number in operations:
        if name == "add":
            values.add(number)
            reference.add(number)
        else:
            values.discard(number)
            reference.discard(number)
    assert sorted(values) == sorted(reference)
    assert len(values) == len(reference)


def test_run_commands_protocol():
    text = "6\n+ 1\n+ 2\n? 1\n- 1\n? 1\n? 2\n"
    assert run_commands(text) == ["YES", "NO", "YES"]


def test_run_commands_truncated_input():
    with pytest.raises(ValueError):
        run_commands("2\n+ 1\n")