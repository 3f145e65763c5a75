"""Solutions to short contest problems on arrays and strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import reduce
from math import gcd, isqrt
from typing import Optional


def paint_the_array(values: Sequence[int]) -> int:
    """Return a d dividing exactly one parity class of positions and none of the other, or 0."""
    if len(values) < 2:
        raise ValueError("need at least two values")
    if any(value < 1 for value in values):
        raise ValueError("values must be positive")
    evens = values[0::2]
    odds = values[1::2]
    for dividing, others in ((odds, evens), (evens, odds)):
        divisor = reduce(gcd, dividing)
        if all(value % divisor for value in others):
            return divisor
    return 0


def can_sort_by_swaps(values: Iterable[int]) -> bool:
    """Tell whether swapping only neighbours of different parity can sort values."""
    last = {0: 0, 1: 1}
    for value in values:
        parity = value % 2
        if value < last[parity]:
            return False
        last[parity] = value
    return True


def quality_vs_quantity(values: Iterable[int]) -> bool:
    """Tell whether some red set has a larger sum yet fewer elements than some blue set."""
    ordered = sorted(values)
    if len(ordered) < 3:
        return False
    blue = ordered[0]
    red = 0
    for k in range(1, (len(ordered) - 1) // 2 + 1):
        blue += ordered[k]
        red += ordered[-k]
        if red > blue:
            return True
    return False


def crossing_cost(locations: Iterable[int]) -> int:
    """Return the cost of the single jump over the water cells, or 0 if there is none."""
    water = [index for index, cell in enumerate(locations) if cell == 0]
    if not water:
        return 0
    return water[-1] - water[0] + 2


def prove_him_wrong(size: int) -> Optional[list[int]]:
    """Return a counterexample array of the given size, or None when none exists."""
    if size < 0:
        raise ValueError("size must be non-negative")
    if size >= 20:
        return None
    return [3**index for index in range(size)]


def integer_moves(a: int, b: int) -> int:
    """Return the fewest integer-length moves from the origin to (a, b)."""
    if a == 0 and b == 0:
        return 0
    squared = a * a + b * b
    if isqrt(squared) ** 2 == squared:
        return 1
    return 2


def bracket_sequence_deletion(s: str) -> tuple[int, int]:
    """Repeatedly strip the shortest good prefix; return (operations, characters left)."""
    if set(s) - {"(", ")"}:
        raise ValueError("s must contain only brackets")
    length = len(s)
    position = 0
    operations = 0
    while position + 1 < length:
        if s[position] == "(" or s[position + 1] == ")":
            position += 2
        else:
            closing = s.find(")", position + 1)
            if closing == -1:
                break
            position = closing + 1
        operations += 1
    return operations, length - position


def extra_cosplayers(cosplayers: str) -> int:
    """Return how many men must be added so every segment of two or more is not female-majority."""
    if set(cosplayers) - {"0", "1"}:
        raise ValueError("cosplayers must contain only '0' and '1'")
    extras = 0
    for index in range(len(cosplayers) - 1):
        current = cosplayers[index]
        following = cosplayers[index + 1]
        if current == "0" and following == "0":
            extras += 2
        elif current == "1" and index > 0 and cosplayers[index - 1] == "0" and following == "0":
            extras += 1
    return extras


def is_valid_power_sequence(values: Iterable[int]) -> bool:
    """Tell whether values can be the powers of all cyclic shifts of some permutation."""
    sequence = list(values)
    ones = [index for index, value in enumerate(sequence) if value == 1]
    if len(ones) != 1:
        return False
    start = ones[0]
    rotated = sequence[start:] + sequence[:start]
    return all(current <= previous + 1 for previous, current in zip(rotated, rotated[1:]))


def max_books(books: Sequence[int], time: int) -> int:
    """Return the most consecutive books readable within time minutes."""
    start = 0
    total = 0
    best = 0
    for end, minutes in enumerate(books):
        total += minutes
        while total > time:
            total -= books[start]
            start += 1
        best = max(best, end - start + 1)
    return best


@dataclass(frozen=True)
class Candy:
    """A hanging candy: kind 0 is caramel, kind 1 is fruit."""

    kind: int
    height: int
    weight: int

    def __post_init__(self) -> None:
        if self.kind not in (0, 1):
            raise ValueError("kind must be 0 or 1")


def _candies_eaten(ordered: list[Candy], jump: int, kind: int) -> int:
    remaining = list(ordered)
    eaten = 0
    while True:
        choice = next(
            (index for index, candy in enumerate(remaining) if candy.kind == kind and candy.height <= jump),
            None,
        )
        if choice is None:
            return eaten
        candy = remaining.pop(choice)
        eaten += 1
        jump += candy.weight
        kind = 1 - kind


def max_candies(candies: Iterable[Candy], x: int) -> int:
    """Return the most candies eaten alternating kinds, each raising the jump height by its weight."""
    ordered = sorted(candies, key=lambda candy: candy.weight, reverse=True)
    return max(_candies_eaten(ordered, x, 0), _candies_eaten(ordered, x, 1))