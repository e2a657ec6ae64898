"""Small arithmetic problems: sums, counters, verdicts over number pairs."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Return the difference of two numbers."""
    return a - b


def divide(a: float, b: float) -> float:
    """Return the quotient of two numbers as a float."""
    return float(a) / float(b)


def bridge_count(n: int, m: int) -> int:
    """Number of ways to build ``n`` non-crossing bridges to ``m`` sites."""
    if n < 0 or m < 0:
        raise ValueError("site counts must be non-negative")
    return math.comb(m, n)


def factorial(n: int) -> int:
    """Product of 1..n; 1 for n below 1."""
    return math.prod(range(1, n + 1))


def pair_sums(pairs: Iterable[tuple[int, int]]) -> list[int]:
    """Sums of the pairs, stopping at the first ``(0, 0)``."""
    sums = []
    for a, b in pairs:
        if a == 0 and b == 0:
            break
        sums.append(a + b)
    return sums


def compare(a: int, b: int) -> str:
    """Return ``>``, ``==`` or ``<`` describing how ``a`` relates to ``b``."""
    if a > b:
        return ">"
    if a == b:
        return "=="
    return "<"


def adjusted_average(scores: Iterable[float]) -> float:
    """Average after rescaling every score so the best one becomes 100."""
    values = list(scores)
    if not values:
        raise ValueError("at least one score is required")
    best = max(values)
    return sum(score / best * 100 for score in values) / len(values)


def hex_to_int(text: str) -> int:
    """Parse a hexadecimal number."""
    return int(text, 16)


def honeycomb_distance(n: int) -> int:
    """Rooms passed from the centre of a hexagonal honeycomb to room ``n``."""
    distance, last_room = 1, 1
    while n > last_room:
        last_room += 6 * distance
        distance += 1
    return distance


def hello() -> str:
    """The greeting."""
    return "Hello World!"


def odd_summary(numbers: Iterable[int]) -> tuple[int, int] | None:
    """Sum and minimum of the odd numbers, or ``None`` when there are none."""
    odds = [n for n in numbers if n % 2 == 1]
    if not odds:
        return None
    return sum(odds), min(odds)


def digit_counts(a: int, b: int, c: int) -> list[int]:
    """How often each digit 0-9 appears in the product ``a * b * c``."""
    counts = Counter(str(abs(a * b * c)))
    return [counts[str(digit)] for digit in range(10)]


def long_multiplication(a: int, b: int) -> tuple[int, int, int, int]:
    """Partial products of ``a`` by each digit of three-digit ``b``, then the total."""
    hundreds, rest = divmod(b, 100)
    tens, ones = divmod(rest, 10)
    return a * ones, a * tens, a * hundreds, a * b


def count_up(n: int) -> list[int]:
    """The numbers 1..n in order."""
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    """The numbers n..1 in order."""
    return list(range(n, 0, -1))


def sort_three(a: int, b: int, c: int) -> tuple[int, int, int]:
    """Three numbers in ascending order."""
    low, mid, high = sorted((a, b, c))
    return low, mid, high


def snail_days(climb: int, slip: int, height: int) -> int:
    """Days for a snail climbing ``climb`` by day and slipping ``slip`` by night."""
    if climb <= slip:
        raise ValueError("the snail must climb further than it slips")
    if height <= climb:
        return 1
    daily = climb - slip
    return 1 + -(-(height - climb) // daily)


def minimum_melodies(articles: int, mean: int) -> int:
    """Fewest melodies whose per-article mean rounds up to ``mean``."""
    return articles * (mean - 1) + 1


def factor_verdicts(pairs: Iterable[tuple[int, int]]) -> list[str]:
    """``Yes`` where the first number is larger, ``No`` otherwise, until ``(0, 0)``."""
    verdicts = []
    for a, b in pairs:
        if a == 0 and b == 0:
            break
        verdicts.append("Yes" if a > b else "No")
    return verdicts


def right_triangles(triangles: Iterable[tuple[int, int, int]]) -> list[str]:
    """``right`` or ``wrong`` for each triangle, stopping at a zero first side."""
    verdicts = []
    for a, b, c in triangles:
        if a == 0:
            break
        is_right = a * a + b * b == c * c or a * a + c * c == b * b or b * b + c * c == a * a
        verdicts.append("right" if is_right else "wrong")
    return verdicts


def page_siblings(pages: int, page: int) -> tuple[int, int, int]:
    """The other three pages printed on the same sheet of a folded booklet."""
    if page > pages // 2:
        if page % 2 == 0:
            return pages - page + 1, pages - page + 2, page - 1
        return pages - page, pages - page + 1, page + 1
    if page % 2 == 0:
        return page - 1, pages - page + 1, pages - page + 2
    return page + 1, pages - page, pages - page + 1