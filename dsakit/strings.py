"""String problems: brackets, palindromes, subsequences, anagrams and Roman numerals."""

from __future__ import annotations

import re
import sys
from collections import Counter
from collections.abc import Iterable, Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_TIME_12H = re.compile(r"(\d{2})(:\d{2}:\d{2})([AP])M")


def is_balanced(sequence: str) -> bool:
    """True if every bracket in ``sequence`` is closed in the right order.

    Characters other than ``()[]{}`` are ignored.
    """
    stack: list[str] = []
    for ch in sequence:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack.pop() != _PAIRS[ch]:
                return False
    return not stack


def _expand(text: str, low: int, high: int) -> tuple[int, int]:
    while low >= 0 and high < len(text) and text[low] == text[high]:
        low -= 1
        high += 1
    return low + 1, high - low - 1


def longest_palindrome(text: str) -> str:
    """Longest palindromic substring, found by expanding around each centre.

    When several have the greatest length, the first one found wins.
    """
    if not text:
        return ""
    best = text[0]
    for centre in range(len(text)):
        for low, high in ((centre, centre + 1), (centre - 1, centre + 1)):
            start, size = _expand(text, low, high)
            if size > len(best):
                best = text[start:start + size]
    return best


def longest_palindrome_dp(text: str) -> str:
    """Longest palindromic substring by dynamic programming over lengths.

    Among palindromes of length two the last one wins; among longer ones
    the leftmost of the greatest length wins.
    """
    n = len(text)
    if n == 0:
        return ""
    start, best = 0, 1
    shorter = set(range(n))
    short = {i for i in range(n - 1) if text[i] == text[i + 1]}
    if short:
        start, best = max(short), 2
    for length in range(3, n + 1):
        current = {
            j
            for j in range(n - length + 1)
            if j + 1 in shorter and text[j] == text[j + length - 1]
        }
        if current and best < length:
            start, best = min(current), length
        shorter, short = short, current
    return text[start:start + best]


def longest_common_subsequence(first: str, second: str) -> int:
    """Length of the longest subsequence common to both strings."""
    if len(first) > len(second):
        first, second = second, first
    previous = [0] * (len(first) + 1)
    for ch in second:
        current = [0]
        for j, other in enumerate(first):
            if ch == other:
                current.append(previous[j] + 1)
            else:
                current.append(max(current[j], previous[j + 1]))
        previous = current
    return previous[-1]


def break_palindrome(text: str) -> str:
    """Change one character of a palindrome to make the smallest non-palindrome.

    A one-character palindrome cannot be broken and gives the empty string.
    """
    if not text:
        raise ValueError("text must not be empty")
    if len(text) == 1:
        return ""
    for i, ch in enumerate(text[: len(text) // 2]):
        if ch != "a":
            return text[:i] + "a" + text[i + 1:]
    return text[:-1] + "b"


def count_anagram_occurrences(pattern: str, text: str) -> int:
    """Number of windows of ``text`` that are anagrams of ``pattern``."""
    size = len(pattern)
    if size > len(text):
        return 0
    wanted = Counter(pattern)
    window = Counter(text[:size])
    count = int(window == wanted)
    for outgoing, incoming in zip(text, text[size:]):
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        window[incoming] += 1
        count += window == wanted
    return count


def neo_sort(alphabet: str, words: Iterable[str]) -> list[str]:
    """Sort words by the letter order given in ``alphabet``.

    A word that is a prefix of another comes first.  Letters missing from
    the alphabet rank with its first letter.
    """
    rank = {ch: i for i, ch in enumerate(alphabet)}
    return sorted(words, key=lambda word: [rank.get(ch, 0) for ch in word])


def min_max_char(text: str) -> tuple[str, str]:
    """Smallest and largest non-whitespace character of ``text`` by code point."""
    chars = [ch for ch in text if not ch.isspace()]
    if not chars:
        raise ValueError("text holds no non-whitespace characters")
    return min(chars), max(chars)


def is_strong_password(password: str) -> bool:
    """True if it has an upper-case and a lower-case ASCII letter, a digit and anything else."""
    upper = lower = digit = special = False
    for ch in password:
        if "A" <= ch <= "Z":
            upper = True
        elif "a" <= ch <= "z":
            lower = True
        elif "0" <= ch <= "9":
            digit = True
        else:
            special = True
    return upper and lower and digit and special


def to_24_hour(time_12h: str) -> str:
    """Convert ``hh:mm:ssAM``/``hh:mm:ssPM`` to ``hh:mm:ss`` on a 24-hour clock."""
    match = _TIME_12H.fullmatch(time_12h)
    if match is None:
        raise ValueError(f"not a 12-hour time: {time_12h!r}")
    hours, rest, half = match.groups()
    hour = int(hours)
    if half == "A":
        return "00" + rest if hour == 12 else hours + rest
    return hours + rest if hour == 12 else str(hour + 12) + rest


def _roman_values(numeral: str) -> list[int]:
    if not numeral:
        raise ValueError("numeral must not be empty")
    try:
        return [_ROMAN[ch] for ch in numeral]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral: {numeral!r}") from exc


def roman_to_int(numeral: str) -> int:
    """Value of a Roman numeral, read from right to left."""
    values = _roman_values(numeral)
    total = 0
    i = len(values) - 1
    while i >= 0:
        if i > 0 and values[i] > values[i - 1]:
            total += values[i] - values[i - 1]
            i -= 2
        else:
            total += values[i]
            i -= 1
    return total


def roman_to_decimal(numeral: str) -> int:
    """Value of a Roman numeral, read from left to right."""
    values = _roman_values(numeral)
    total = 0
    i = 0
    while i < len(values):
        current = values[i]
        if i + 1 < len(values) and current < values[i + 1]:
            total += values[i + 1] - current
            i += 2
        else:
            total += current
            i += 1
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Print the value of the Roman numeral given as the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: please provide a string of roman numerals", file=sys.stderr)
        return 0
    try:
        value = roman_to_int(args[0])
    except ValueError:
        print("Error: invalid string of roman numerals", file=sys.stderr)
        return 0
    print(value)
    return 0