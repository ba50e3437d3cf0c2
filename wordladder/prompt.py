"""Interactive prompting for dictionary files and word pairs."""

from __future__ import annotations

from typing import Callable

from wordladder.dictionary import Dictionary, DictionaryError

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def validate_pair(dictionary: Dictionary, word1: str, word2: str) -> str | None:
    """First problem with the pair as a user-facing message, or None if valid."""
    if word1 == word2:
        return "The two words must be different."
    if len(word1) != len(word2):
        return "The two words must be the same length."
    same_length = dictionary.words_of_length(len(word1))
    if word1 not in same_length or word2 not in same_length:
        return "The two words must be found in the dictionary."
    return None


def _read(input_fn: InputFn, prompt: str) -> str | None:
    try:
        return input_fn(prompt).strip().lower()
    except (EOFError, KeyboardInterrupt):
        return None


def prompt_for_words(
    dictionary: Dictionary,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> tuple[str, str] | None:
    """Ask for two words until a valid pair is entered.

    Returns None when the user enters an empty word or closes the input.
    """
    output_fn("")
    while True:
        word1 = _read(input_fn, "Word 1 (or Enter to quit): ")
        if not word1:
            return None
        word2 = _read(input_fn, "Word 2 (or Enter to quit): ")
        if not word2:
            return None

        problem = validate_pair(dictionary, word1, word2)
        if problem is None:
            return word1, word2
        output_fn(problem)
        output_fn("")


def open_dictionary(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> Dictionary | None:
    """Ask for a dictionary file name until one loads. None if input closes."""
    while True:
        try:
            name = input_fn("Dictionary file name: ").strip()
        except (EOFError, KeyboardInterrupt):
            return None
        if not name:
            output_fn("Unable to open that file. Try again.")
            continue
        try:
            return Dictionary(name)
        except DictionaryError:
            output_fn("Unable to open that file. Try again.")
