"""A min-max heap: constant-time minimum and maximum, logarithmic removal of either."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterable, Iterator

_Compare = Callable[[int, int], bool]


def _is_min_level(index: int) -> bool:
    """Even depths (the root's included) hold minimums, odd depths maximums."""
    return (index + 1).bit_length() % 2 == 1


def _parent(index: int) -> int:
    return 0 if index < 1 else (index - 1) // 2


def _grandparent(index: int) -> int:
    return 0 if index < 3 else _parent(_parent(index))


class MinMaxHeap:
    """Priority queue of integers that serves both its smallest and largest value."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return len(self._items)

    def _swap(self, first: int, second: int) -> None:
        items = self._items
        items[first], items[second] = items[second], items[first]

    def _best_child(self, index: int, better: _Compare) -> int | None:
        items = self._items
        left, right = 2 * index + 1, 2 * index + 2
        if left >= len(items):
            return None
        if right >= len(items):
            return left
        return left if better(items[left], items[right]) else right

    def _best_grandchild(self, index: int, better: _Compare) -> int | None:
        left = self._best_child(2 * index + 1, better)
        right = self._best_child(2 * index + 2, better)
        if left is None:
            return None
        if right is None:
            return left
        return left if better(self._items[left], self._items[right]) else right

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index != 0:
            better = operator.lt if _is_min_level(index) else operator.gt
            parent = _parent(index)
            grandparent = _grandparent(index)
            if better(items[parent], items[index]):
                self._swap(parent, index)
                index = parent
            elif grandparent != parent and better(items[index], items[grandparent]):
                self._swap(grandparent, index)
                index = grandparent
            else:
                break

    def _sift_down(self, index: int) -> None:
        items = self._items
        while 2 * index + 1 < len(items):
            better = operator.lt if _is_min_level(index) else operator.gt
            child = self._best_child(index, better)
            grandchild = self._best_grandchild(index, better)
            assert child is not None
            moved: int | None = None
            if grandchild is not None:
                if better(items[child], items[grandchild]) and better(
                    items[child], items[index]
                ):
                    self._swap(index, child)
                    moved = child
                    if better(items[grandchild], items[moved]):
                        self._swap(moved, grandchild)
                elif better(items[grandchild], items[index]):
                    self._swap(index, grandchild)
                    moved = grandchild
                    if better(items[child], items[moved]):
                        self._swap(moved, child)
            elif better(items[child], items[index]):
                self._swap(index, child)
                moved = child
            if moved is None:
                break
            index = moved

    def insert(self, value: int) -> None:
        """Add ``value`` to the heap."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def get_min(self) -> int:
        """Return the smallest value."""
        if not self._items:
            raise IndexError("min of an empty heap")
        return self._items[0]

    def get_max(self) -> int:
        """Return the largest value."""
        items = self._items
        if not items:
            raise IndexError("max of an empty heap")
        if len(items) <= 2:
            return items[-1]
        return items[2] if items[1] < items[2] else items[1]

    def extract_min(self) -> int:
        """Remove and return the smallest value."""
        items = self._items
        if not items:
            raise IndexError("extract from an empty heap")
        smallest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return smallest

    def extract_max(self) -> int:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("extract from an empty heap")
        if len(items) <= 2:
            return items.pop()
        index = 1 if items[1] > items[2] else 2
        largest = items[index]
        last = items.pop()
        if index < len(items):
            items[index] = last
            self._sift_down(index)
        return largest

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def run_commands(text: str) -> list[str]:
    """Run a counted list of heap commands and return the output lines."""
    tokens = iter(text.split())
    count = int(_next_token(tokens))
    heap = MinMaxHeap()
    queries = (
        ("extract_min", heap.extract_min),
        ("extract_max", heap.extract_max),
        ("get_min", heap.get_min),
        ("get_max", heap.get_max),
    )
    output: list[str] = []
    for _ in range(count):
        command = _next_token(tokens)
        if command.startswith("insert"):
            heap.insert(int(_next_token(tokens)))
            output.append("ok")
            continue
        action = next((act for name, act in queries if command.startswith(name)), None)
        if action is not None:
            try:
                output.append(str(action()))
            except IndexError:
                output.append("error")
        elif command.startswith("size"):
            output.append(str(len(heap)))
        elif command.startswith("clear"):
            heap.clear()
            output.append("ok")
        else:
            raise ValueError(f"unknown command: {command!r}")
    return output


def main(argv: list[str] | None = None) -> int:
    """Read heap commands from standard input and print the replies."""
    for line in run_commands(sys.stdin.read()):
        print(line)
    return 0