"""String and character sequence routines."""

from __future__ import annotations

import bisect
import string
from collections.abc import Sequence

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def int_to_roman(num: int) -> str:
    """Write ``num`` as a Roman numeral; values below one give an empty string."""
    parts = []
    for value, letters in _ROMAN_NUMERALS:
        count, num = divmod(num, value) if num >= value else (0, num)
        parts.append(letters * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Read a Roman numeral; characters that are not numerals count as zero."""
    if not s:
        raise ValueError("empty numeral")
    values = [_ROMAN_VALUES.get(ch, 0) for ch in s]
    total = sum(-v if v < after else v for v, after in zip(values, values[1:]))
    return total + values[-1]


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("no strings given")
    first, last = min(strs), max(strs)
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]


def reverse_words(s: str) -> str:
    """Return the whitespace-separated words of ``s`` in reverse order."""
    return " ".join(reversed(s.split()))


def reverse_string(chars: list[str]) -> None:
    """Reverse the list of characters in place."""
    chars.reverse()


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz sequence for 1..n."""
    result = []
    for i in range(1, n + 1):
        if i % 15 == 0:
            result.append("FizzBuzz")
        elif i % 3 == 0:
            result.append("Fizz")
        elif i % 5 == 0:
            result.append("Buzz")
        else:
            result.append(str(i))
    return result


def detect_capital_use(word: str) -> bool:
    """Tell whether capitals are used as in "USA", "leetcode" or "Google"."""
    if not word:
        raise ValueError("empty word")
    rest = word[1:]
    if word[0] in string.ascii_uppercase and all(
        ch in string.ascii_uppercase for ch in rest
    ):
        return True
    return all(ch in string.ascii_lowercase for ch in rest)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word, ignoring trailing spaces."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def next_greatest_letter(letters: Sequence[str], target: str) -> str:
    """Return the first sorted letter greater than ``target``, wrapping round."""
    if not letters:
        raise ValueError("no letters given")
    index = bisect.bisect_right(letters, target)
    return letters[index] if index < len(letters) else letters[0]