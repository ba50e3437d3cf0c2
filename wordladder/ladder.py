"""Ladder finder: breadth-first search over single-letter substitutions."""

from __future__ import annotations

import logging
from collections import deque

from wordladder.dictionary import Dictionary
from wordladder.neighbors import find_neighbors

log = logging.getLogger("wordladder.search")


class LadderError(ValueError):
    """Search was asked for an invalid pair of words."""


class LadderNode:
    """One step of a ladder, linked back to the step it was reached from.

    Nodes are never modified after creation, so sibling paths share their
    common prefix safely.
    """

    __slots__ = ("word", "parent", "depth")

    def __init__(self, word: str, parent: LadderNode | None = None):
        self.word = word
        self.parent = parent
        self.depth = parent.depth + 1 if parent is not None else 1

    def extend(self, word: str) -> LadderNode:
        return LadderNode(word, self)

    def to_list(self) -> list[str]:
        """Words from the first step to this one."""
        words: list[str] = []
        node: LadderNode | None = self
        while node is not None:
            words.append(node.word)
            node = node.parent
        words.reverse()
        return words

    def __len__(self) -> int:
        return self.depth

    def __repr__(self) -> str:
        return " -> ".join(self.to_list())


class LadderFinder:
    """Finds shortest word ladders in a shared, read-only dictionary."""

    def __init__(self, dictionary: Dictionary):
        self.dict = dictionary

    # public API

    def find_ladder(self, start: str, target: str) -> list[str] | None:
        """Shortest ladder from ``start`` to ``target``, or None if none exists.

        Both words are lowercased first. Raises LadderError if they are
        empty, identical, of different lengths or not in the dictionary.
        """
        start = start.strip().lower()
        target = target.strip().lower()
        self._check_pair(start, target)

        node = self._search(start, target)
        if node is None:
            return None
        return node.to_list()

    # search

    def _check_pair(self, start: str, target: str) -> None:
        if not start or not target:
            raise LadderError("Both words must be non-empty.")
        if start == target:
            raise LadderError("The two words must be different.")
        if len(start) != len(target):
            raise LadderError("The two words must be the same length.")
        if not self.dict.is_valid(start) or not self.dict.is_valid(target):
            raise LadderError("The two words must be found in the dictionary.")

    def _search(self, start: str, target: str) -> LadderNode | None:
        visited: set[str] = {start}
        frontier: deque[LadderNode] = deque([LadderNode(start)])

        while frontier:
            node = frontier.popleft()
            for word in find_neighbors(node.word, self.dict):
                if word in visited:
                    continue
                # Mark on enqueue so no word is queued twice.
                visited.add(word)
                child = node.extend(word)
                if word == target:
                    log.debug("Found %s -> %s in %d steps (%d words visited)",
                              start, target, child.depth - 1, len(visited))
                    return child
                frontier.append(child)

        log.debug("No ladder from %s to %s (%d words visited)",
                  start, target, len(visited))
        return None


def find_ladder(dictionary: Dictionary, start: str, target: str) -> list[str] | None:
    """Convenience wrapper around :meth:`LadderFinder.find_ladder`."""
    return LadderFinder(dictionary).find_ladder(start, target)
