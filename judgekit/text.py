"""String problems: counting words and letters, palindromes, digit games."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import groupby

_VOWELS = frozenset("aeiouAEIOU")

_OCTOPUS_DIGITS = {
    "-": 0,
    "\\": 1,
    "(": 2,
    "@": 3,
    "?": 4,
    ">": 5,
    "&": 6,
    "%": 7,
    "/": -1,
}

_DAY_SECONDS = 24 * 3600


def word_count(sentence: str) -> int:
    """Number of space-separated words, ignoring leading and trailing spaces."""
    return len(sentence.split())


def most_common_letter(word: str) -> str:
    """The most frequent letter in upper case, or ``?`` when several tie."""
    counts = Counter(word.upper()).most_common()
    if not counts or (len(counts) > 1 and counts[0][1] == counts[1][1]):
        return "?"
    return counts[0][0]


def palindrome_verdicts(lines: Iterable[str]) -> list[str]:
    """``yes`` or ``no`` for each line being a palindrome, stopping at ``0``."""
    verdicts = []
    for line in lines:
        if line == "0":
            break
        verdicts.append("yes" if line == line[::-1] else "no")
    return verdicts


def vowel_counts(lines: Iterable[str]) -> list[int]:
    """Vowels in each line, stopping at ``#``."""
    counts = []
    for line in lines:
        if line == "#":
            break
        counts.append(sum(1 for ch in line if ch in _VOWELS))
    return counts


def _seconds(clock: str) -> int:
    hours, minutes, seconds = (int(part) for part in clock.split(":"))
    return hours * 3600 + minutes * 60 + seconds


def time_until(now: str, start: str) -> str:
    """Time left from clock ``now`` until clock ``start``, as ``HH:MM:SS``."""
    remaining = (_seconds(start) - _seconds(now)) % _DAY_SECONDS
    hours, rest = divmod(remaining, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def ball_position(swaps: Iterable[tuple[int, int]]) -> int:
    """Cup holding the ball, which starts under cup 1, after the given swaps."""
    position = 1
    for first, second in swaps:
        if first == position:
            position = second
        elif second == position:
            position = first
    return position


def octopus_values(lines: Iterable[str]) -> list[int]:
    """Values of base-8 octopus numerals, one per line, stopping at ``#``."""
    values = []
    for line in lines:
        if line == "#":
            break
        value = 0
        for ch in line:
            try:
                digit = _OCTOPUS_DIGITS[ch]
            except KeyError:
                raise ValueError(f"unknown octopus digit {ch!r}") from None
            value = value * 8 + digit
        values.append(value)
    return values


def longest_runs(numbers: Iterable[str]) -> list[int]:
    """Length of the longest run of one repeated character in each string."""
    runs = []
    for number in numbers:
        if not number:
            raise ValueError("empty number")
        runs.append(max(sum(1 for _ in group) for _, group in groupby(number)))
    return runs


def repeat_characters(count: int, text: str) -> str:
    """Repeat every character of ``text`` ``count`` times in place."""
    return "".join(ch * count for ch in text)


def min_max_sum(a: int | str, b: int | str) -> tuple[int, int]:
    """Smallest and largest sums when any 5 and 6 may be read as each other."""
    first, second = str(a), str(b)
    low = int(first.replace("6", "5")) + int(second.replace("6", "5"))
    high = int(first.replace("5", "6")) + int(second.replace("5", "6"))
    return low, high


def is_valid_parentheses(text: str) -> bool:
    """Whether the parentheses in ``text`` are balanced."""
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0