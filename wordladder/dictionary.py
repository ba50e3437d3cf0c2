"""Dictionary / word list with set lookup and per-length views."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator

from wordladder.constants import ALPHABET, DICT_SEARCH_PATHS, MINIMAL_WORDS

log = logging.getLogger("wordladder")

_LETTERS = frozenset(ALPHABET)


class DictionaryError(OSError):
    """A dictionary file could not be read."""


def clean_words(lines: Iterable[str]) -> set[str]:
    """Trim and lowercase raw lines, keeping words spelled only from ALPHABET."""
    words: set[str] = set()
    for line in lines:
        word = line.strip().lower()
        if word and _LETTERS.issuperset(word):
            words.add(word)
    return words


class Dictionary:
    """Read-only word list.

    Built once per run and shared by every search, so nothing here mutates
    the word set after loading.
    """

    def __init__(self, dict_path: str | None = None):
        self.words: frozenset[str] = frozenset()
        self.source: str = ""
        self._by_length: dict[int, frozenset[str]] = {}
        if dict_path:
            self._load_file(dict_path)
        else:
            self._load(DICT_SEARCH_PATHS)

    @classmethod
    def from_words(cls, words: Iterable[str], source: str = "<memory>") -> Dictionary:
        d = cls.__new__(cls)
        d.words = frozenset(clean_words(words))
        d.source = source
        d._by_length = {}
        return d

    def _load_file(self, path: str) -> None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                words = clean_words(f)
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryError(f"Unable to read dictionary {path!r}: {exc}") from exc
        self.words = frozenset(words)
        self.source = path
        log.info("Loaded %s words from %s", f"{len(self.words):,}", path)

    def _load(self, search_paths: Iterable[str]) -> None:
        for path in search_paths:
            if os.path.exists(path):
                try:
                    self._load_file(path)
                except DictionaryError as exc:
                    log.warning("%s", exc)
                    continue
                if self.words:
                    return

        log.warning("No dictionary file found -- using built-in minimal word list.")
        log.warning("Run bootstrap.py or pass --dict to use a full word list.")
        self._load_minimal()

    def _load_minimal(self) -> None:
        self.words = MINIMAL_WORDS
        self.source = "<built-in>"

    def words_of_length(self, length: int) -> frozenset[str]:
        """All words with exactly ``length`` letters (cached)."""
        cached = self._by_length.get(length)
        if cached is None:
            cached = frozenset(w for w in self.words if len(w) == length)
            self._by_length[length] = cached
        return cached

    def is_valid(self, word: str) -> bool:
        return word.strip().lower() in self.words

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self.words):,} words from {self.source})"
