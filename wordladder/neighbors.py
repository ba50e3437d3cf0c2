"""Single-letter substitution neighbors."""

from __future__ import annotations

from typing import Container

from wordladder.constants import ALPHABET


def find_neighbors(word: str, dictionary: Container[str]) -> tuple[str, ...]:
    """Dictionary words that differ from ``word`` in exactly one position.

    Enumerates positions left to right and, within a position, letters in
    alphabet order. The result keeps that order, so searches built on it are
    deterministic.
    """
    neighbors: list[str] = []
    for i, original in enumerate(word):
        head, tail = word[:i], word[i + 1:]
        for letter in ALPHABET:
            if letter == original:
                continue
            candidate = head + letter + tail
            if candidate in dictionary:
                neighbors.append(candidate)
    return tuple(neighbors)
