"""Problems over lists of numbers: stacks, sorting, greedy and dynamic programming."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from functools import lru_cache
from itertools import accumulate, combinations


def zero_sum(numbers: Iterable[int]) -> int:
    """Sum of the numbers left after each 0 erases the latest one."""
    stack: list[int] = []
    for number in numbers:
        if number == 0:
            if not stack:
                raise ValueError("nothing to erase")
            stack.pop()
        else:
            stack.append(number)
    return sum(stack)


def atm_total(times: Iterable[int]) -> int:
    """Smallest total waiting time when serving people shortest first."""
    return sum(accumulate(sorted(times)))


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
    return list(heapq.merge(first, second))


def sort_numbers(numbers: Iterable[int]) -> list[int]:
    """The numbers in ascending order."""
    return sorted(numbers)


def longest_increasing(boxes: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for box in boxes:
        index = bisect_left(tails, box)
        if index == len(tails):
            tails.append(box)
        else:
            tails[index] = box
    return len(tails)


def max_wine(glasses: Sequence[int]) -> int:
    """Most wine drunk without ever taking three glasses in a row."""
    wine = [0, *glasses]
    n = len(glasses)
    best = [0] * (n + 1)
    for i in range(1, n + 1):
        if i == 1:
            best[i] = wine[1]
        elif i == 2:
            best[i] = wine[1] + wine[2]
        else:
            best[i] = max(
                best[i - 1],
                best[i - 3] + wine[i - 1] + wine[i],
                best[i - 2] + wine[i],
            )
    return best[n]


def min_fuel_cost(distances: Sequence[int], prices: Sequence[int]) -> int:
    """Cheapest cost of driving the roads, buying fuel at the cheapest city so far."""
    if len(prices) < len(distances):
        raise ValueError("every road needs a price at the city it starts from")
    cheapest = accumulate(prices[: len(distances)], min)
    return sum(price * distance for price, distance in zip(cheapest, distances))


def seven_dwarfs(heights: Iterable[int]) -> list[int]:
    """Heights, ascending, left after dropping the first pair that brings the total to 100."""
    ordered = sorted(heights)
    excess = sum(ordered) - 100
    for i, j in combinations(range(len(ordered)), 2):
        if ordered[i] + ordered[j] == excess:
            return [h for k, h in enumerate(ordered) if k not in (i, j)]
    raise ValueError("no pair of heights leaves a total of 100")


@lru_cache(maxsize=1)
def _decreasing_numbers() -> tuple[int, ...]:
    digits = "9876543210"
    numbers = (
        int("".join(combo))
        for size in range(1, len(digits) + 1)
        for combo in combinations(digits, size)
    )
    return tuple(sorted(numbers))


def nth_decreasing(n: int) -> int:
    """The ``n``-th (from 0) number whose digits strictly decrease, or -1 past the last."""
    if n < 0:
        raise ValueError("n must be non-negative")
    numbers = _decreasing_numbers()
    return numbers[n] if n < len(numbers) else -1


def line_order(taller_counts: Sequence[int]) -> list[int]:
    """Line order of people 1..N given how many taller people stand left of each."""
    slots: list[int | None] = [None] * len(taller_counts)
    for person, count in enumerate(taller_counts, start=1):
        empty = [index for index, occupant in enumerate(slots) if occupant is None]
        if not 0 <= count < len(empty):
            raise ValueError(f"impossible count {count} for person {person}")
        slots[empty[count]] = person
    return [person for person in slots if person is not None]


def line_up(draws: Sequence[int]) -> list[int]:
    """Final line when each student steps forward past as many as they drew."""
    if not draws:
        return []
    order = [1]
    for student, draw in enumerate(draws[1:], start=2):
        if not 0 <= draw <= len(order):
            raise ValueError(f"student {student} cannot pass {draw} others")
        order.insert(len(order) - draw, student)
    return order