"""A set of integers kept in a hash table with separate chaining."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

DEFAULT_TABLE_SIZE = 1_000_003


class ChainedHashSet:
    """Set of integers stored in buckets chosen by ``value % table_size``."""

    def __init__(self, values: Iterable[int] = (), table_size: int = DEFAULT_TABLE_SIZE) -> None:
        if table_size <= 0:
            raise ValueError("table size must be positive")
        self._table_size = table_size
        self._buckets: dict[int, list[int]] = {}
        self._count = 0
        for value in values:
            self.add(value)

    def _bucket_index(self, value: int) -> int:
        return value % self._table_size

    def add(self, value: int) -> None:
        """Insert ``value`` if it is not present yet."""
        chain = self._buckets.setdefault(self._bucket_index(value), [])
        if value not in chain:
            chain.append(value)
            self._count += 1

    def discard(self, value: int) -> None:
        """Remove ``value`` if it is present."""
        index = self._bucket_index(value)
        chain = self._buckets.get(index)
        if chain and value in chain:
            chain.remove(value)
            self._count -= 1
            if not chain:
                del self._buckets[index]

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        chain = self._buckets.get(self._bucket_index(value))
        return chain is not None and value in chain

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        for chain in self._buckets.values():
            yield from chain


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def run_commands(text: str) -> list[str]:
    """Run a counted list of ``+ x``, ``- x`` and ``? x`` commands; return replies."""
    tokens = iter(text.split())
    count = int(_next_token(tokens))
    values = ChainedHashSet()
    output: list[str] = []
    for _ in range(count):
        operation = _next_token(tokens)
        number = int(_next_token(tokens))
        if operation == "+":
            values.add(number)
        elif operation == "-":
            values.discard(number)
        elif operation == "?":
            output.append("YES" if number in values else "NO")
    return output


def main(argv: list[str] | None = None) -> int:
    """Read set commands from standard input and print the replies."""
    for line in run_commands(sys.stdin.read()):
        print(line)
    return 0