"""Substring search with a polynomial rolling hash."""

from __future__ import annotations

BASE = 64
MODULUS = 997


def prefix_hashes(text: str) -> list[int]:
    """Return the hash of every prefix of ``text``, the empty one first."""
    hashes = [0]
    for char in text:
        hashes.append((hashes[-1] * BASE + ord(char)) % MODULUS)
    return hashes


def find_occurrences(text: str, pattern: str) -> list[int]:
    """Return every index at which ``pattern`` starts in ``text``, in order."""
    length = len(pattern)
    if length > len(text):
        return []
    text_hashes = prefix_hashes(text)
    pattern_hash = prefix_hashes(pattern)[-1]
    shift = pow(BASE, length, MODULUS)
    found = []
    for begin in range(len(text) - length + 1):
        window = (text_hashes[begin + length] - text_hashes[begin] * shift) % MODULUS
        if window == pattern_hash and text[begin : begin + length] == pattern:
            found.append(begin)
    return found