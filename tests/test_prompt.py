"""Tests for interactive prompting and pair validation."""

import pytest

from wordladder.prompt import open_dictionary, prompt_for_words, validate_pair


@pytest.mark.parametrize("word1,word2,expected", [
    ("code", "data", None),
    ("code", "code", "The two words must be different."),
    ("code", "dat", "The two words must be the same length."),
    ("code", "zzzz", "The two words must be found in the dictionary."),
    ("zzzz", "code", "The two words must be found in the dictionary."),
])
def test_validate_pair(code_data_dict, word1, word2, expected):
    assert validate_pair(code_data_dict, word1, word2) == expected


def test_prompt_returns_normalised_pair(code_data_dict, scripted):
    io = scripted(["  CODE ", "Data"])
    assert prompt_for_words(code_data_dict, io.input, io.output) == ("code", "data")
    assert io.prompts == ["Word 1 (or Enter to quit): ", "Word 2 (or Enter to quit): "]


def test_prompt_reprompts_after_invalid_pair(code_data_dict, scripted):
    io = scripted(["code", "code", "code", "dat", "code", "date"])
    assert prompt_for_words(code_data_dict, io.input, io.output) == ("code", "date")
    assert "The two words must be different." in io.lines
    assert "The two words must be the same length." in io.lines
    assert len(io.prompts) == 6


@pytest.mark.parametrize("answers", [[""], ["code", ""], ["   "], []])
def test_prompt_quits_on_empty_or_closed_input(code_data_dict, scripted, answers):
    io = scripted(answers)
    assert prompt_for_words(code_data_dict, io.input, io.output) is None


def test_open_dictionary_retries_until_file_loads(word_file, tmp_path, scripted):
    io = scripted([str(tmp_path / "missing.txt"), "", str(word_file)])
    d = open_dictionary(io.input, io.output)
    assert d is not None
    assert "code" in d
    assert io.lines.count("Unable to open that file. Try again.") == 2


def test_open_dictionary_gives_up_on_closed_input(scripted):
    io = scripted([])
    assert open_dictionary(io.input, io.output) is None
