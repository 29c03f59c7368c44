"""An AVL tree of integer keys with a successor query."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

MODULUS = 1_000_000_000
NOT_FOUND = -1


class _Node:
    __slots__ = ("key", "height", "left", "right")

    def __init__(self, key: int) -> None:
        self.key = key
        self.height = 1
        self.left: _Node | None = None
        self.right: _Node | None = None


def _height(node: _Node | None) -> int:
    return 0 if node is None else node.height


def _fix_height(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: _Node | None) -> int:
    return 0 if node is None else _height(node.right) - _height(node.left)


def _rotate_left(parent: _Node) -> _Node:
    child = parent.right
    assert child is not None
    parent.right = child.left
    child.left = parent
    _fix_height(parent)
    _fix_height(child)
    return child


def _rotate_right(parent: _Node) -> _Node:
    child = parent.left
    assert child is not None
    parent.left = child.right
    child.right = parent
    _fix_height(parent)
    _fix_height(child)
    return child


def _rebalance(node: _Node) -> _Node:
    _fix_height(node)
    balance = _balance_factor(node)
    if balance == 2:
        assert node.right is not None
        if _balance_factor(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if balance == -2:
        assert node.left is not None
        if _balance_factor(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: _Node | None, key: int) -> tuple[_Node, bool]:
    if node is None:
        return _Node(key), True
    if key == node.key:
        return node, False
    if key < node.key:
        node.left, added = _insert(node.left, key)
    else:
        node.right, added = _insert(node.right, key)
    return _rebalance(node), added


def _remove_max(node: _Node) -> tuple[_Node | None, _Node]:
    """Detach the largest node of the subtree; return (rest, largest)."""
    if node.right is None:
        return node.left, node
    node.right, largest = _remove_max(node.right)
    return _rebalance(node), largest


def _delete(node: _Node | None, key: int) -> _Node | None:
    if node is None:
        raise KeyError(key)
    if key == node.key:
        if node.left is None or node.right is None:
            return node.left if node.right is None else node.right
        rest, replacement = _remove_max(node.left)
        replacement.left = rest
        replacement.right = node.right
        return _rebalance(replacement)
    if key < node.key:
        node.left = _delete(node.left, key)
    else:
        node.right = _delete(node.right, key)
    return _rebalance(node)


class AVLTree:
    """Height-balanced binary search tree holding distinct integer keys."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add ``key``; a key already present is left as it is."""
        self._root, added = _insert(self._root, key)
        if added:
            self._size += 1

    def delete(self, key: int) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        self._root = _delete(self._root, key)
        self._size -= 1

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        node = self._root
        while node is not None:
            if node.key == key:
                return True
            node = node.right if node.key < key else node.left
        return False

    def next_at_least(self, key: int) -> int | None:
        """Return the smallest key not less than ``key``, or None."""
        best: int | None = None
        node = self._root
        while node is not None:
            if node.key == key:
                return key
            if node.key > key:
                best = node.key
                node = node.left
            else:
                node = node.right
        return best

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right


def _truncated_remainder(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def run_commands(text: str) -> list[str]:
    """Run a counted list of ``+ x`` and ``? x`` commands and return the replies.

    After a ``?`` query, the next ``+`` adds its number plus the last answer,
    taken modulo 10**9; ``?`` answers -1 when no key is large enough.
    """
    tokens = iter(text.split())
    count = int(_next_token(tokens))
    tree = AVLTree()
    answer = 0
    output: list[str] = []
    for _ in range(count):
        operation = _next_token(tokens)
        key = int(_next_token(tokens))
        if operation == "+":
            tree.insert(_truncated_remainder(key + answer, MODULUS))
            answer = 0
        elif operation == "?":
            found = tree.next_at_least(key)
            answer = NOT_FOUND if found is None else found
            output.append(str(answer))
    return output


def main(argv: list[str] | None = None) -> int:
    """Read tree commands from standard input and print the replies."""
    for line in run_commands(sys.stdin.read()):
        print(line)
    return 0