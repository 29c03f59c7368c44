"""A queue with constant-time minimum, built from two minimum stacks."""

from __future__ import annotations

import sys
from collections.abc import Iterator


class MinStack:
    """Stack that also tracks the minimum of its values."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        current = value if not self._items else min(value, self._items[-1][1])
        self._items.append((value, current))

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def min(self) -> int:
        """Return the smallest value in the stack."""
        if not self._items:
            raise IndexError("min of an empty stack")
        return self._items[-1][1]

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class MinQueue:
    """First-in, first-out queue with a minimum query."""

    def __init__(self) -> None:
        self._in = MinStack()
        self._out = MinStack()

    def _refill(self) -> None:
        if not self._out:
            while self._in:
                self._out.push(self._in.pop())

    def push(self, value: int) -> None:
        """Append ``value`` to the back of the queue."""
        self._in.push(value)

    def pop(self) -> int:
        """Remove and return the front value."""
        self._refill()
        if not self._out:
            raise IndexError("pop from an empty queue")
        return self._out.pop()

    def front(self) -> int:
        """Return the front value without removing it."""
        self._refill()
        if not self._out:
            raise IndexError("front of an empty queue")
        return self._out.top()

    def min(self) -> int:
        """Return the smallest value in the queue."""
        candidates = [stack.min() for stack in (self._out, self._in) if stack]
        if not candidates:
            raise IndexError("min of an empty queue")
        return min(candidates)

    def clear(self) -> None:
        """Remove every value."""
        self._in.clear()
        self._out.clear()

    def __len__(self) -> int:
        return len(self._in) + len(self._out)


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def run_commands(text: str) -> list[str]:
    """Run a counted list of queue commands and return the output lines."""
    tokens = iter(text.split())
    count = int(_next_token(tokens))
    queue = MinQueue()
    output: list[str] = []
    for _ in range(count):
        command = _next_token(tokens)
        if command == "enqueue":
            queue.push(int(_next_token(tokens)))
            output.append("ok")
        elif command == "size":
            output.append(str(len(queue)))
        elif command == "clear":
            queue.clear()
            output.append("ok")
        else:
            action = {"dequeue": queue.pop, "front": queue.front}.get(command, queue.min)
            try:
                output.append(str(action()))
            except IndexError:
                output.append("error")
    return output


def main(argv: list[str] | None = None) -> int:
    """Read queue commands from standard input and print the replies."""
    for line in run_commands(sys.stdin.read()):
        print(line)
    return 0