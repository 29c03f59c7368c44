import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.brackets import is_balanced, main

balanced = st.recursive(
    st.just(""),
    lambda inner: st.one_of(
        st.tuples(st.sampled_from(["()", "[]", "{}"]), inner).map(
            lambda pair: pair[0][0] + pair[1] + pair[0][1]
        ),
        st.tuples(inner, inner).map(lambda pair: pair[0] + pair[1]),
    ),
    max_leaves=20,
)


def test_nested_sequence_is_balanced():
    assert is_balanced("([]{})") is True


def test_crossed_brackets_are_not_balanced():
    assert is_balanced("([)]") is False


def test_unclosed_is_not_balanced():
    assert is_balanced("((") is False


def test_empty_is_balanced():
    assert is_balanced("") is True


def test_invalid_character_raises():
    with pytest.raises(ValueError):
        is_balanced("(a)")


@given(balanced)
def test_generated_sequences_are_balanced(sequence):
    assert is_balanced(sequence)


@given(balanced.filter(bool))
def test_dropping_last_char_breaks_balance(sequence):
    assert not is_balanced(sequence[:-1])


def test_main_prints_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("{[}]\n"))
    assert main() == 0
    assert capsys.readouterr().out.strip() == "NO"