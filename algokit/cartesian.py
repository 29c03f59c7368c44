"""Linear-time construction of a Cartesian tree from pairs sorted by key."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class CartesianNode:
    """A node keyed by ``key``, heap-ordered by ``priority``, numbered from 1."""

    key: int
    priority: int
    index: int
    parent: CartesianNode | None = field(default=None, repr=False)
    left: CartesianNode | None = field(default=None, repr=False)
    right: CartesianNode | None = field(default=None, repr=False)


def _attach(last: CartesianNode | None, node: CartesianNode) -> CartesianNode:
    """Hang ``node`` on the right spine that ends at ``last``; return ``node``."""
    if last is None:
        return node
    anchor = last
    while anchor.priority >= node.priority:
        if anchor.parent is None:
            node.left = anchor
            anchor.parent = node
            return node
        anchor = anchor.parent
    node.parent = anchor
    if anchor.right is not None:
        node.left = anchor.right
        anchor.right.parent = node
    anchor.right = node
    return node


def build_cartesian_tree(pairs: Iterable[tuple[int, int]]) -> CartesianNode:
    """Build the tree from ``(key, priority)`` pairs given in ascending key order.

    Priorities form a min-heap: a parent's priority never exceeds its children's.
    """
    last: CartesianNode | None = None
    for index, (key, priority) in enumerate(pairs, start=1):
        last = _attach(last, CartesianNode(key, priority, index))
    if last is None:
        raise ValueError("at least one pair is required")
    while last.parent is not None:
        last = last.parent
    return last


def _in_order(root: CartesianNode) -> Iterator[CartesianNode]:
    stack: list[CartesianNode] = []
    node: CartesianNode | None = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _number(node: CartesianNode | None) -> int:
    return 0 if node is None else node.index


def describe_nodes(pairs: Iterable[tuple[int, int]]) -> list[tuple[int, int, int]]:
    """Return ``(parent, left, right)`` indices for each node in key order, 0 for none."""
    root = build_cartesian_tree(pairs)
    return [
        (_number(node.parent), _number(node.left), _number(node.right))
        for node in _in_order(root)
    ]


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many key-priority pairs; print the tree's links."""
    numbers = [int(token) for token in sys.stdin.read().split()]
    if not numbers:
        raise ValueError("the number of pairs is missing")
    count = numbers[0]
    flat = numbers[1 : 1 + 2 * count]
    if len(flat) < 2 * count:
        raise ValueError("fewer pairs than announced")
    pairs = list(zip(flat[0::2], flat[1::2]))
    print("YES")
    for parent, left, right in describe_nodes(pairs):
        print(parent, left, right)
    return 0