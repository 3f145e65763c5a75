"""Number-theoretic and counting routines."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007
INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)

ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def fib(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion (exponential time)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n in (0, 1):
        return n
    return fib(n - 1) + fib(n - 2)


def fib_dp(n: int) -> int:
    """Return the n-th Fibonacci number in linear time."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def binpower(a: int, b: int) -> int:
    """Return a raised to the power b by binary exponentiation."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    base = a
    while b:
        if b & 1:
            result *= base
        base *= base
        b >>= 1
    return result


def power(a: int, b: int, m: int) -> int:
    """Return a**b modulo m; an exponent of zero always gives 1."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if b == 0:
        return 1
    if m == 0:
        raise ZeroDivisionError("modulus must be non-zero")
    result = 1 % m
    base = a % m
    while b:
        if b & 1:
            result = (result * base) % m
        base = (base * base) % m
        b >>= 1
    return result


def is_ugly(n: int) -> bool:
    """Tell whether n has no prime factors other than 2, 3 and 5."""
    if n == 0:
        return False
    for factor in (2, 3, 5):
        while n % factor == 0:
            n //= factor
    return n == 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of a 32-bit integer, or 0 when that overflows."""
    if not INT32_MIN <= x <= INT32_MAX:
        raise ValueError("x must fit in a signed 32-bit integer")
    if x == INT32_MIN:
        return 0
    reversed_value = 0
    rest = abs(x)
    while rest:
        rest, digit = divmod(rest, 10)
        reversed_value = reversed_value * 10 + digit
        if reversed_value >= INT32_MAX:
            return 0
    return -reversed_value if x < 0 else reversed_value


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to its integer value."""
    try:
        values = [ROMAN_VALUES[letter] for letter in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral letter {exc.args[0]!r}") from None
    total = 0
    position = 0
    while position < len(values):
        current = values[position]
        following = values[position + 1] if position + 1 < len(values) else 0
        if current >= following:
            total += current
            position += 1
        else:
            total += following - current
            position += 2
    return total


def num_of_ways(n: int) -> int:
    """Count colourings of an n x 3 grid with 3 colours, no equal neighbours, mod 1e9+7."""
    two_colours, three_colours = 6, 6
    for _ in range(1, n):
        two_colours, three_colours = (
            (3 * two_colours + 2 * three_colours) % MOD,
            (2 * two_colours + 2 * three_colours) % MOD,
        )
    return (two_colours + three_colours) % MOD


def num_rolls_to_target(n: int, k: int, target: int) -> int:
    """Count the ways n dice with k faces sum to target, mod 1e9+7."""
    if n < 0 or target < 0:
        raise ValueError("n and target must be non-negative")
    ways = [1] + [0] * target
    for _ in range(n):
        ways = [
            sum(ways[total - face] for face in range(1, min(k, total) + 1)) % MOD
            for total in range(target + 1)
        ]
    return ways[target]


def _reverse_digits(value: int) -> int:
    return int(str(value)[::-1])


def kth_palindrome(queries: Iterable[int], int_length: int) -> list[int]:
    """Return, for each query q, the q-th smallest palindrome of int_length digits, or -1."""
    if int_length < 1:
        raise ValueError("int_length must be positive")
    half = (int_length + 1) // 2
    lowest = 10 ** (half - 1)
    limit = 9 * lowest
    answers: list[int] = []
    for query in queries:
        if query > limit:
            answers.append(-1)
            continue
        if query < 1:
            raise ValueError("queries must be positive")
        left = lowest + query - 1
        mirrored = _reverse_digits(left if int_length % 2 == 0 else left // 10)
        answers.append(left * 10 ** (int_length - half) + mirrored)
    return answers