"""A treap of integer keys that answers sums of keys over a range."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Iterator

MODULUS = 1_000_000_000


class _Node:
    __slots__ = ("key", "priority", "total", "left", "right")

    def __init__(self, key: int, priority: int) -> None:
        self.key = key
        self.priority = priority
        self.total = key
        self.left: _Node | None = None
        self.right: _Node | None = None


def _total(node: _Node | None) -> int:
    return 0 if node is None else node.total


def _update(node: _Node | None) -> None:
    if node is not None:
        node.total = node.key + _total(node.left) + _total(node.right)


def _split(node: _Node | None, key: int) -> tuple[_Node | None, _Node | None]:
    """Split into keys below ``key`` and keys at or above it."""
    if node is None:
        return None, None
    if node.key < key:
        node.right, right = _split(node.right, key)
        _update(node)
        return node, right
    left, node.left = _split(node.left, key)
    _update(node)
    return left, node


def _merge(left: _Node | None, right: _Node | None) -> _Node | None:
    if left is None:
        return right
    if right is None:
        return left
    if left.priority > right.priority:
        left.right = _merge(left.right, right)
        _update(left)
        return left
    right.left = _merge(left, right.left)
    _update(right)
    return right


class SumTreap:
    """Set of distinct integers with range-sum queries."""

    def __init__(self, keys: Iterable[int] = (), seed: int | None = None) -> None:
        self._random = random.Random(seed)
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        node = self._root
        while node is not None:
            if node.key == key:
                return True
            node = node.right if node.key < key else node.left
        return False

    def insert(self, key: int) -> None:
        """Add ``key``; a key already present is left as it is."""
        if key in self:
            return
        node = _Node(key, self._random.getrandbits(31))
        left, right = _split(self._root, key)
        self._root = _merge(_merge(left, node), right)
        self._size += 1

    def delete(self, key: int) -> None:
        """Remove ``key`` if it is present."""
        if key not in self:
            return
        left, rest = _split(self._root, key)
        _, right = _split(rest, key + 1)
        self._root = _merge(left, right)
        self._size -= 1

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of the keys ``k`` with ``left <= k <= right``."""
        lower, upper = _split(self._root, right + 1)
        below, middle = _split(lower, left)
        total = _total(middle)
        self._root = _merge(_merge(below, middle), upper)
        return total

    def __len__(self) -> int:
        return self._size


def _truncated_remainder(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def run_commands(text: str) -> list[str]:
    """Run a counted list of ``+ x`` and ``? l r`` commands and return the replies.

    A ``+`` that directly follows a ``?`` adds its number plus the last
    answer, taken modulo 10**9.
    """
    tokens = iter(text.split())
    count = int(_next_token(tokens))
    treap = SumTreap()
    previous = ""
    answer = 0
    output: list[str] = []
    for _ in range(count):
        command = _next_token(tokens)
        if command == "+":
            key = int(_next_token(tokens))
            if previous == "?":
                key = _truncated_remainder(key + answer, MODULUS)
            treap.insert(key)
        elif command == "?":
            left = int(_next_token(tokens))
            right = int(_next_token(tokens))
            answer = treap.range_sum(left, right)
            output.append(str(answer))
        else:
            raise ValueError(f"unknown command: {command!r}")
        previous = command
    return output


def main(argv: list[str] | None = None) -> int:
    """Read treap commands from standard input and print the replies."""
    for line in run_commands(sys.stdin.read()):
        print(line)
    return 0