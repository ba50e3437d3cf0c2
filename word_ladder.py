#!/usr/bin/env python3
"""
Word Ladder

Finds a shortest chain of dictionary words from one word to another,
changing a single letter at each step:

    code -> cade -> cate -> date -> data

Run with no words for the interactive prompt, or pass two words for a
single query.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordladder.cli import format_ladder, print_banner, run_cli
from wordladder.dictionary import Dictionary, DictionaryError
from wordladder.ladder import LadderError, LadderFinder
from wordladder.prompt import open_dictionary, validate_pair

log = logging.getLogger("wordladder")

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2


def run_query(dictionary: Dictionary, start: str, target: str, forward: bool = False) -> int:
    """One-shot query. Returns a process exit status."""
    start, target = start.strip().lower(), target.strip().lower()
    if not start or not target:
        problem = "Both words must be non-empty."
    else:
        problem = validate_pair(dictionary, start, target)
    if problem:
        print(problem, file=sys.stderr)
        return EXIT_INVALID

    try:
        ladder = LadderFinder(dictionary).find_ladder(start, target)
    except LadderError as exc:
        print(exc, file=sys.stderr)
        return EXIT_INVALID

    if ladder is None:
        print(f"No word ladder found from {target} back to {start}.")
        return EXIT_NOT_FOUND
    print(format_ladder(ladder, reverse=not forward))
    return EXIT_FOUND


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Word Ladder -- shortest one-letter-at-a-time path between two words",
    )
    parser.add_argument("start", nargs="?", help="First word (omit for interactive mode)")
    parser.add_argument("target", nargs="?", help="Second word")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--forward", action="store_true",
                        help="Print one-shot ladders from start to target")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if (args.start is None) != (args.target is None):
        parser.error("give both words or neither")

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.start is not None:
        try:
            dictionary = Dictionary(args.dict)
        except DictionaryError as exc:
            log.error("%s", exc)
            return EXIT_INVALID
        return run_query(dictionary, args.start, args.target, forward=args.forward)

    print_banner()
    print()
    if args.dict:
        try:
            dictionary = Dictionary(args.dict)
        except DictionaryError as exc:
            log.error("%s", exc)
            return EXIT_INVALID
    else:
        dictionary = open_dictionary(input, print)
        if dictionary is None:
            return EXIT_FOUND

    run_cli(dictionary, input, print)
    return EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())
