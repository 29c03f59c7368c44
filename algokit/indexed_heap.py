"""A binary min-heap whose entries can be found again by their request number."""

from __future__ import annotations

import sys
from collections.abc import Iterator


class IndexedMinHeap:
    """Min-heap of values, each tagged with a request number for ``decrease_key``."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []
        self._position: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def _swap(self, first: int, second: int) -> None:
        entries = self._entries
        entries[first], entries[second] = entries[second], entries[first]
        self._position[entries[first][1]] = first
        self._position[entries[second][1]] = second

    def _sift_up(self, index: int) -> None:
        entries = self._entries
        while index > 0:
            parent = (index - 1) // 2
            if entries[parent][0] <= entries[index][0]:
                break
            self._swap(parent, index)
            index = parent

    def _sift_down(self, index: int) -> None:
        entries = self._entries
        size = len(entries)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and entries[child][0] < entries[smallest][0]:
                    smallest = child
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def insert(self, value: int, request: int) -> None:
        """Add ``value`` under the number ``request``."""
        if request in self._position:
            raise ValueError(f"request {request} is already in the heap")
        self._entries.append((value, request))
        self._position[request] = len(self._entries) - 1
        self._sift_up(len(self._entries) - 1)

    def get_min(self) -> int:
        """Return the smallest value."""
        if not self._entries:
            raise IndexError("min of an empty heap")
        return self._entries[0][0]

    def extract_min(self) -> int:
        """Remove and return the smallest value."""
        if not self._entries:
            raise IndexError("extract from an empty heap")
        self._swap(0, len(self._entries) - 1)
        value, request = self._entries.pop()
        del self._position[request]
        if self._entries:
            self._sift_down(0)
        return value

    def decrease_key(self, request: int, delta: int) -> None:
        """Lower the value inserted under ``request`` by ``delta``."""
        try:
            index = self._position[request]
        except KeyError:
            raise KeyError(f"request {request} is not in the heap") from None
        value, _ = self._entries[index]
        self._entries[index] = (value - delta, request)
        self._sift_up(index)


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def run_commands(text: str) -> list[str]:
    """Run a counted list of heap commands and return the output lines.

    Each command's 0-based position is its request number; ``decreaseKey``
    names the request by its 1-based position.
    """
    tokens = iter(text.split())
    count = int(_next_token(tokens))
    heap = IndexedMinHeap()
    output: list[str] = []
    for request in range(count):
        command = _next_token(tokens)
        if command.startswith("insert"):
            heap.insert(int(_next_token(tokens)), request)
        elif command.startswith("getMin"):
            output.append(str(heap.get_min()))
        elif command.startswith("extractMin"):
            heap.extract_min()
        elif command.startswith("decreaseKey"):
            index = int(_next_token(tokens))
            delta = int(_next_token(tokens))
            heap.decrease_key(index - 1, delta)
        else:
            raise ValueError(f"unknown command: {command!r}")
    return output


def main(argv: list[str] | None = None) -> int:
    """Read heap commands from standard input and print the replies."""
    for line in run_commands(sys.stdin.read()):
        print(line)
    return 0