"""Routines over sequences of integers: subarrays, heaps, windows and combinations."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import accumulate


def max_sub_array(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of nums."""
    values = iter(nums)
    try:
        best = current = next(values)
    except StopIteration:
        raise ValueError("nums must not be empty") from None
    for value in values:
        current = value + max(current, 0)
        best = max(best, current)
    return best


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smash the two heaviest stones together until at most one is left; return its weight."""
    heap = [-stone for stone in stones]
    if not heap:
        raise ValueError("stones must not be empty")
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, -(heaviest - second))
    return -heap[0] if heap else 0


def birthday(s: Sequence[int], m: int, d: int) -> int:
    """Count the contiguous runs of length d in s whose sum is m."""
    if d < 1:
        raise ValueError("segment length must be positive")
    if len(s) < d:
        return 0
    window = sum(s[:d])
    count = int(window == m)
    for leaving, entering in zip(s, s[d:]):
        window += entering - leaving
        count += window == m
    return count


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every multiset of candidates, each usable any number of times, summing to target."""
    pool = list(candidates)
    if any(candidate <= 0 for candidate in pool):
        raise ValueError("candidates must be positive")
    if target < 0:
        raise ValueError("target must be non-negative")
    results: list[list[int]] = []
    chosen: list[int] = []

    def search(remaining: int, index: int) -> None:
        if remaining == 0:
            results.append(list(chosen))
            return
        if index >= len(pool):
            return
        candidate = pool[index]
        if candidate <= remaining:
            chosen.append(candidate)
            search(remaining - candidate, index)
            chosen.pop()
        search(remaining, index + 1)

    search(target, 0)
    return results


def range_sums(values: Iterable[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer each query (a, b) with the sum of values[a:b], using prefix sums."""
    prefix = list(accumulate(values, initial=0))
    size = len(prefix) - 1
    answers: list[int] = []
    for start, stop in queries:
        if not (0 <= start <= size and 0 <= stop <= size):
            raise IndexError(f"query ({start}, {stop}) is out of range")
        answers.append(prefix[stop] - prefix[start])
    return answers