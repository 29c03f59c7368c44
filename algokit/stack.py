"""An integer stack and the text command protocol that drives it."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator


class IntStack:
    """Last-in, first-out stack of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def back(self) -> int:
        """Return the top value; the protocol's ``back`` also removes it."""
        if not self._items:
            raise IndexError("back of an empty stack")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


def _next_number(tokens: Iterator[str], command: str) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError(f"{command!r} needs a number") from None


def run_commands(text: str) -> list[str]:
    """Run push/pop/back/size/clear/exit commands and return the output lines."""
    stack = IntStack()
    output: list[str] = []
    tokens = iter(text.split())
    for command in tokens:
        if command == "exit":
            break
        if command == "push":
            stack.push(_next_number(tokens, command))
            output.append("ok")
        elif command in ("pop", "back"):
            try:
                value = stack.pop() if command == "pop" else stack.back()
            except IndexError:
                output.append("error")
            else:
                output.append(str(value))
        elif command == "size":
            output.append(str(len(stack)))
        elif command == "clear":
            stack.clear()
            output.append("ok")
    output.append("bye")
    return output


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input and print the replies."""
    for line in run_commands(sys.stdin.read()):
        print(line)
    return 0