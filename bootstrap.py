#!/usr/bin/env python3
"""
Setup script for Word Ladder.
Builds a lowercase word dictionary next to this file.
"""

import os
import sys
import urllib.request

from wordladder.constants import DEFAULT_DICT_NAME
from wordladder.dictionary import clean_words

SYSTEM_DICT = '/usr/share/dict/words'

URLS = [
    "https://raw.githubusercontent.com/benhoyt/goawk/master/testdata/words",
]


def write_words(words, dict_path):
    """Write words sorted, one per line."""
    with open(dict_path, 'w', encoding='utf-8') as f:
        for word in sorted(words):
            f.write(word + '\n')


def build_dictionary(dict_path, system_dict=SYSTEM_DICT, urls=URLS):
    """Create ``dict_path`` from the system word list or a download.

    Returns the number of words written, 0 if the file already existed,
    or None if no source worked.
    """
    if os.path.exists(dict_path):
        print(f"Dictionary already exists: {dict_path}")
        return 0

    if os.path.exists(system_dict):
        print(f"  Using system dictionary: {system_dict}")
        with open(system_dict, encoding='utf-8', errors='ignore') as f:
            words = clean_words(f)
        write_words(words, dict_path)
        print(f"✓ Dictionary created: {len(words):,} words → {dict_path}")
        return len(words)

    for url in urls:
        try:
            print(f"  Trying {url}...")
            with urllib.request.urlopen(url, timeout=30) as resp:
                text = resp.read().decode('utf-8', errors='ignore')
        except OSError as e:
            print(f"  Failed: {e}")
            continue
        words = clean_words(text.splitlines())
        write_words(words, dict_path)
        print(f"✓ Dictionary downloaded: {len(words):,} words")
        return len(words)

    print("\n⚠ Could not build a dictionary automatically.")
    print("  Save a newline-separated word list as:")
    print(f"  {dict_path}")
    return None


def main():
    print("=" * 50)
    print("  Word Ladder — Setup")
    print("=" * 50)
    print()

    dict_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), DEFAULT_DICT_NAME)
    if build_dictionary(dict_path) is None:
        return 1

    print()
    print("=" * 50)
    print("  Setup complete! Run:")
    print()
    print("    python word_ladder.py              # interactive")
    print("    python word_ladder.py code data    # one query")
    print("=" * 50)
    return 0


if __name__ == '__main__':
    sys.exit(main())
