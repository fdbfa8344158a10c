"""String algorithms: binary addition, anagrams, brackets, palindromes."""

from collections import Counter

_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_BRACKET_PAIRS.values())


def add_binary(a: str, b: str) -> str:
    """Return the sum of two binary digit strings as a binary digit string."""
    digits: list[str] = []
    i, j = len(a) - 1, len(b) - 1
    carry = 0
    while i >= 0 or j >= 0 or carry:
        total = carry
        if i >= 0:
            total += int(a[i])
            i -= 1
        if j >= 0:
            total += int(b[j])
            j -= 1
        digits.append(str(total % 2))
        carry = total // 2
    return "".join(reversed(digits))


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of the letters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def count_substrings(s: str, c: str) -> int:
    """Return how many substrings of ``s`` start and end with the character ``c``."""
    total = 0
    seen = 0
    for ch in s:
        if ch == c:
            seen += 1
            total += seen
    return total


def is_valid_brackets(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket closes the innermost open one.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack:
            return False
        expected = _BRACKET_PAIRS.get(ch)
        if expected is not None and stack[-1] != expected:
            return False
        stack.pop()
    return not stack


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def is_alnum_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [ch.lower() for ch in s if _is_ascii_alnum(ch)]
    return cleaned == cleaned[::-1]


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word of ``s``."""
    return len(s.rstrip(" ").split(" ")[-1])


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]