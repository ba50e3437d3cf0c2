"""CLI / terminal mode for the word ladder finder."""

from __future__ import annotations

import time

from wordladder.dictionary import Dictionary
from wordladder.ladder import LadderFinder
from wordladder.prompt import InputFn, OutputFn, prompt_for_words


def format_ladder(ladder: list[str], reverse: bool = False) -> str:
    """Ladder as space-separated words, optionally target first."""
    words = list(reversed(ladder)) if reverse else ladder
    return " ".join(words)


def print_banner(output_fn: OutputFn = print) -> None:
    output_fn("Welcome to Word Ladder!")
    output_fn("Please give me two English words, and I will change the first "
              "into the second by changing one letter at a time.")


def run_cli(
    dictionary: Dictionary,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> int:
    """Prompt for word pairs until the user quits. Returns ladders found."""
    finder = LadderFinder(dictionary)
    found = 0

    while True:
        pair = prompt_for_words(dictionary, input_fn, output_fn)
        if pair is None:
            break
        start, target = pair

        t0 = time.time()
        ladder = finder.find_ladder(start, target)
        elapsed = time.time() - t0

        if ladder is None:
            output_fn(f"No word ladder found from {target} back to {start}.")
            continue

        found += 1
        output_fn(f"A ladder from {target} back to {start}:")
        output_fn(format_ladder(ladder, reverse=True))
        output_fn(f"({len(ladder)} words, {elapsed:.3f}s)")

    output_fn("Have a nice day.")
    return found
