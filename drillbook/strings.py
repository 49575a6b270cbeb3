"""String drills: concatenation, binary addition, palindromes and pangrams."""

from __future__ import annotations

import string
from collections import Counter
from itertools import zip_longest

_BINARY_DIGITS = frozenset("01")
_LOWERCASE = frozenset(string.ascii_lowercase)


def concatenate(first: str, second: str) -> str:
    """Return ``second`` appended to ``first``."""
    return first + second


def add_binary(a: str, b: str) -> str:
    """Return the sum of two binary strings as a binary string.

    The result is at least as long as the longer operand, so leading
    zeros of the operands are kept.
    """
    for operand in (a, b):
        if not set(operand) <= _BINARY_DIGITS:
            raise ValueError(f"not a binary string: {operand!r}")
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = carry + int(x) + int(y)
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def first_unique_char(text: str) -> str | None:
    """Return the first character that occurs exactly once, or None."""
    counts = Counter(text)
    return next((char for char in text if counts[char] == 1), None)


def is_palindrome(text: str) -> bool:
    """Return True if the text reads the same forwards and backwards."""
    return text == text[::-1]


def reverse_string(text: str) -> str:
    """Return the text reversed."""
    return text[::-1]


def string_length(text: str) -> int:
    """Return the number of characters in the text."""
    return len(text)


def sort_chars(text: str) -> str:
    """Return the characters of the text in ascending order."""
    return "".join(sorted(text))


def is_pangram(text: str) -> bool:
    """Return True if every Latin letter appears, ignoring case."""
    present = {char.lower() for char in text if char in string.ascii_letters}
    return present >= _LOWERCASE


def initials(sentence: str) -> list[str]:
    """Return the first character of each space-separated word."""
    return [word[0] for word in sentence.split(" ") if word]


def code_point_at(text: str, index: int) -> int:
    """Return the code point of the character at ``index``.

    Negative indices are not accepted.
    """
    if index < 0 or index >= len(text):
        raise IndexError(f"invalid index {index} for a string of length {len(text)}")
    return ord(text[index])