import pytest

from algokit.strings import (
    add_binary,
    count_substrings,
    is_alnum_palindrome,
    is_anagram,
    is_valid_brackets,
    length_of_last_word,
    reverse_string,
)


@pytest.mark.parametrize(
    "a, b",
    [("11", "1"), ("1010", "1011"), ("0", "0"), ("1", "111111"), ("100", "0")],
)
def test_add_binary_matches_integer_sum(a, b):
    result = add_binary(a, b)
    assert set(result) <= {"0", "1"}
    assert int(result, 2) == int(a, 2) + int(b, 2)


def test_add_binary_zero():
    assert add_binary("0", "0") == "0"


def test_add_binary_commutes():
    assert add_binary("1101", "11") == add_binary("11", "1101")


@pytest.mark.parametrize(
    "s, t, expected",
    [
        ("anagram", "nagaram", True),
        ("rat", "car", False),
        ("ab", "abc", False),
        ("", "", True),
        ("aab", "abb", False),
    ],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


def test_count_substrings_example():
    assert count_substrings("abada", "a") == 6


def test_count_substrings_absent_character():
    assert count_substrings("bcd", "a") == 0


def test_count_substrings_at_least_single_characters():
    s = "zzxzyz"
    assert count_substrings(s, "z") >= s.count("z")


@pytest.mark.parametrize(
    "s, expected",
    [
        ("()", True),
        ("()[]{}", True),
        ("{[()]}", True),
        ("(]", False),
        ("([)]", False),
        ("(", False),
        (")", False),
        ("", True),
    ],
)
def test_is_valid_brackets(s, expected):
    assert is_valid_brackets(s) is expected


@pytest.mark.parametrize(
    "s, expected",
    [
        ("A man, a plan, a canal: Panama", True),
        ("race a car", False),
        (" ", True),
        ("0P", False),
        ("ab,BA", True),
    ],
)
def test_is_alnum_palindrome(s, expected):
    assert is_alnum_palindrome(s) is expected


@pytest.mark.parametrize(
    "s, word",
    [
        ("Hello World", "World"),
        ("   fly me   to   the moon  ", "moon"),
        ("luffy is still joyboy", "joyboy"),
        ("single", "single"),
    ],
)
def test_length_of_last_word(s, word):
    assert length_of_last_word(s) == len(word)


def test_length_of_last_word_blank():
    assert length_of_last_word("   ") == 0


def test_reverse_string_example():
    assert reverse_string("abcd") == "dcba"


@pytest.mark.parametrize("text", ["", "a", "hello world", "racecar"])
def test_reverse_string_is_involution(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)