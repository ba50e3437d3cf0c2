"""Word ladder finder: shortest single-letter substitution paths."""

from wordladder.constants import ALPHABET
from wordladder.dictionary import Dictionary, DictionaryError, clean_words
from wordladder.neighbors import find_neighbors
from wordladder.ladder import LadderError, LadderFinder, LadderNode, find_ladder
from wordladder.prompt import open_dictionary, prompt_for_words, validate_pair
from wordladder.cli import format_ladder, run_cli

__all__ = [
    "ALPHABET",
    "Dictionary",
    "DictionaryError",
    "LadderError",
    "LadderFinder",
    "LadderNode",
    "clean_words",
    "find_ladder",
    "find_neighbors",
    "format_ladder",
    "open_dictionary",
    "prompt_for_words",
    "run_cli",
    "validate_pair",
]
