"""Shared constants for the word ladder finder."""

from __future__ import annotations

import os
import string

# Substitution letters, in the order neighbors are enumerated.
ALPHABET: str = string.ascii_lowercase

DEFAULT_DICT_NAME = "dictionary.txt"

# Tried in order when no --dict path is given.
DICT_SEARCH_PATHS: tuple[str, ...] = (
    DEFAULT_DICT_NAME,
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", DEFAULT_DICT_NAME),
    "/usr/share/dict/words",
)

# Used when no word list can be found on disk.
# fmt: off
MINIMAL_WORDS: frozenset[str] = frozenset({
    "cat", "cot", "cog", "dog", "dot", "hot", "hit", "hat", "bat", "bag",
    "big", "bog", "fog", "log", "lot", "let", "lit", "sit", "sat", "pat",
    "pit", "pot", "pod", "nod", "not", "net", "wet", "bet", "bit", "but",
    "code", "cade", "cate", "date", "data", "cold", "cord", "card", "ward",
    "warm", "word", "wore", "core", "care", "cane", "lane", "line", "lime",
    "like", "lake", "make", "male", "mile", "mine", "mind", "wind", "wine",
    "fine", "fire", "hire", "here", "hare", "have", "gave", "game", "came",
    "come", "home", "hose", "rose", "rise", "wise", "wide", "ride", "rode",
    "node", "note", "vote", "dote", "dole", "pole", "pale", "sale", "same",
    "head", "heal", "teal", "tell", "tall", "tail", "mail", "main", "rain",
})
# fmt: on
