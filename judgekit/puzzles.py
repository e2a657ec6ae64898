"""Assorted puzzles: Hanoi, primes, printer queue, match leads, tree ancestors, AC language."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from math import isqrt

_GAME_SECONDS = 48 * 60


def _hanoi(n: int, source: int, spare: int, target: int) -> Iterator[tuple[int, int]]:
    if n == 1:
        yield source, target
        return
    yield from _hanoi(n - 1, source, target, spare)
    yield source, target
    yield from _hanoi(n - 1, spare, source, target)


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Moves ``(from, to)`` that carry ``n`` discs from peg 1 to peg 3."""
    if n < 1:
        raise ValueError("at least one disc is required")
    return list(_hanoi(n, 1, 2, 3))


def primes_between(low: int, high: int) -> list[int]:
    """Primes ``p`` with ``low <= p <= high``."""
    if high < 2:
        return []
    sieve = bytearray([1]) * (high + 1)
    sieve[0] = sieve[1] = 0
    for n in range(2, isqrt(high) + 1):
        if sieve[n]:
            sieve[n * n :: n] = bytes(len(range(n * n, high + 1, n)))
    return [p for p in range(max(low, 2), high + 1) if sieve[p]]


def print_order(priorities: Sequence[int], target: int) -> int:
    """When (from 1) the document at index ``target`` comes out of the priority printer."""
    if not 0 <= target < len(priorities):
        raise ValueError("target is not in the queue")
    queue = deque((priority, index == target) for index, priority in enumerate(priorities))
    printed = 0
    while queue:
        priority, is_target = queue.popleft()
        if any(other > priority for other, _ in queue):
            queue.append((priority, is_target))
            continue
        printed += 1
        if is_target:
            return printed
    raise AssertionError("target document vanished from the queue")


def _clock_seconds(clock: str) -> int:
    minutes, seconds = clock.split(":")
    return int(minutes) * 60 + int(seconds)


def _clock_text(total: int) -> str:
    minutes, seconds = divmod(total, 60)
    return f"{minutes:02d}:{seconds:02d}"


def lead_times(goals: Iterable[tuple[int, str]]) -> tuple[str, str]:
    """How long each of teams 1 and 2 led a 48-minute game, as ``MM:SS``."""
    parsed = []
    for team, clock in goals:
        if team not in (1, 2):
            raise ValueError(f"unknown team {team}")
        parsed.append((team, _clock_seconds(clock)))
    if not parsed:
        raise ValueError("at least one goal is required")

    led = {1: 0, 2: 0}
    margin = 0
    ends = [moment for _, moment in parsed[1:]] + [_GAME_SECONDS]
    for (team, moment), until in zip(parsed, ends):
        margin += 1 if team == 1 else -1
        if margin > 0:
            led[1] += until - moment
        elif margin < 0:
            led[2] += until - moment
    return _clock_text(led[1]), _clock_text(led[2])


def lowest_common_ancestor(edges: Iterable[tuple[int, int]], a: int, b: int) -> int:
    """Deepest node that is an ancestor of both ``a`` and ``b`` in a rooted tree."""
    parent = {child: node for node, child in edges}

    ancestors: set[int] = set()
    node = a
    while node not in ancestors:
        ancestors.add(node)
        if node not in parent:
            break
        node = parent[node]

    node = b
    seen: set[int] = set()
    while node not in ancestors:
        if node not in parent or node in seen:
            raise ValueError(f"nodes {a} and {b} share no ancestor")
        seen.add(node)
        node = parent[node]
    return node


def run_ac(commands: str, values: Iterable[int]) -> list[int]:
    """Apply ``R`` (reverse) and ``D`` (drop first) commands to ``values``."""
    items = list(values)
    start, end = 0, len(items)
    reversed_ = False
    for command in commands:
        if command == "R":
            reversed_ = not reversed_
        elif command == "D":
            if start >= end:
                raise ValueError("error: nothing left to drop")
            if reversed_:
                end -= 1
            else:
                start += 1
    remaining = items[start:end]
    return remaining[::-1] if reversed_ else remaining