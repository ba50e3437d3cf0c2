import sys
from pathlib import Path

import pytest

# Make the top-level scripts importable without an install
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from wordladder.dictionary import Dictionary


@pytest.fixture
def code_data_dict():
    """Dictionary with a single five-word ladder from code to data."""
    return Dictionary.from_words(["code", "cade", "cate", "date", "data"])


@pytest.fixture
def hot_dog_dict():
    return Dictionary.from_words(["hot", "dot", "dog", "cog", "cot"])


@pytest.fixture
def word_file(tmp_path: Path):
    """Write a small word list with messy lines and return its path."""
    path = tmp_path / "words.txt"
    path.write_text(
        "Code\n  cade  \n\ncate\ndate\ndata\nit's\nhot\ndot\ndog\n",
        encoding="utf-8",
    )
    return path


class ScriptedIO:
    """Feeds canned answers to input() and records everything printed."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def output(self, line=""):
        self.lines.append(line)


@pytest.fixture
def scripted():
    return ScriptedIO
