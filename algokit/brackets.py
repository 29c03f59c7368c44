"""Checking that a sequence of brackets is balanced."""

from __future__ import annotations

import sys

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


def is_balanced(sequence: str) -> bool:
    """Return True if every bracket in ``sequence`` is closed in the right order."""
    stack: list[str] = []
    for char in sequence:
        if char in _OPENING:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
        else:
            raise ValueError(f"not a bracket: {char!r}")
    return not stack


def main(argv: list[str] | None = None) -> int:
    """Read one bracket sequence from standard input and print YES or NO."""
    words = sys.stdin.read().split()
    print("YES" if is_balanced(words[0] if words else "") else "NO")
    return 0