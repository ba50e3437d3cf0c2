"""Tests for single-letter substitution neighbors."""

from wordladder.dictionary import Dictionary
from wordladder.neighbors import find_neighbors


def _differs_by_one(a, b):
    return len(a) == len(b) and sum(1 for x, y in zip(a, b) if x != y) == 1


def test_finds_only_one_letter_changes(hot_dog_dict):
    assert set(find_neighbors("hot", hot_dog_dict)) == {"dot", "cot"}


def test_never_includes_word_itself(hot_dog_dict):
    for word in hot_dog_dict:
        assert word not in find_neighbors(word, hot_dog_dict)


def test_neighbors_are_same_length_dictionary_words():
    d = Dictionary.from_words(["cat", "cot", "cats", "at", "bat", "cab", "dog"])
    result = find_neighbors("cat", d)
    assert set(result) == {"cot", "bat", "cab"}
    for word in result:
        assert word in d
        assert _differs_by_one("cat", word)


def test_order_is_position_then_alphabet():
    d = Dictionary.from_words(["zat", "bat", "cut", "cab", "cot"])
    assert find_neighbors("cat", d) == ("bat", "zat", "cot", "cut", "cab")


def test_no_duplicates():
    d = Dictionary.from_words(["aa", "ab", "ba", "bb"])
    result = find_neighbors("aa", d)
    assert len(result) == len(set(result))
    assert set(result) == {"ab", "ba"}


def test_single_letter_words():
    d = Dictionary.from_words(["a", "b", "c"])
    assert find_neighbors("a", d) == ("b", "c")


def test_no_neighbors():
    d = Dictionary.from_words(["abc", "xyz"])
    assert find_neighbors("abc", d) == ()


def test_works_with_plain_set():
    assert find_neighbors("hot", {"hot", "hit", "dog"}) == ("hit",)
