# algokit

Small solutions to well-known algorithm and contest problems, grouped by
theme. The package uses only the standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `algokit.arithmetic`

- `fib(n)`: the n-th Fibonacci number by plain recursion. This takes
  exponential time.
- `fib_dp(n)`: the n-th Fibonacci number in linear time.
- `binpower(a, b)`: `a ** b` by exponentiation by squaring.
- `power(a, b, m)`: `a ** b` modulo `m`. An exponent of 0 always gives 1.
- `is_ugly(n)`: whether `n` has no prime factors other than 2, 3 and 5.
- `reverse_integer(x)`: the digits of a signed 32-bit integer reversed.
  Returns `0` when the result would overflow.
- `roman_to_int(s)`: the value of a Roman numeral.
- `num_of_ways(n)`: the number of ways to paint an `n x 3` grid with three
  colours so that no two neighbouring cells match, modulo 10^9 + 7.
- `num_rolls_to_target(n, k, target)`: the number of ways `n` dice with `k`
  faces can sum to `target`, modulo 10^9 + 7.
- `kth_palindrome(queries, int_length)`: for each query `q`, the q-th smallest
  palindrome with `int_length` digits, or `-1` if there is none.

Negative counts or exponents, letters that are not Roman numerals, and
integers outside the 32-bit range raise `ValueError`.

### `algokit.trees`

- `TreeNode(val=0, left=None, right=None)`: a binary tree node, defined as a
  dataclass.
- `sorted_array_to_bst(nums)`: a height-balanced search tree built from sorted
  values, with the middle element at each root.
- `max_path_sum(root)`: the largest sum along any path in the tree. An empty
  tree raises `ValueError`.
- `invert_tree(root)`: mirrors the tree in place and returns its root.

### `algokit.grids`

- `max_area_of_island(grid)`: the area of the largest 4-connected group of
  land cells (`1`).
- `solve_n_queens(n)`: every placement of `n` non-attacking queens. Each board
  is a list of strings made of `"Q"` and `"."`.
- `can_reach(arr, start)`: whether jumping `arr[i]` steps left or right from
  `start` can reach a cell that holds zero.
- `forming_magic_square(s)`: the smallest total change that turns a 3x3 grid
  into a magic square.

### `algokit.sequences`

- `max_sub_array(nums)`: the largest sum of a non-empty contiguous run.
- `last_stone_weight(stones)`: the weight left after the two heaviest stones
  are repeatedly smashed together. Returns `0` if no stone is left.
- `birthday(s, m, d)`: how many contiguous runs of length `d` sum to `m`.
- `combination_sum(candidates, target)`: every combination of positive
  candidates, each usable any number of times, that sums to `target`.
- `range_sums(values, queries)`: the sum of `values[a:b]` for each query
  `(a, b)`, computed with prefix sums. A query out of range raises
  `IndexError`.

### `algokit.contests`

Each function solves a single test case of a short contest problem.

- `paint_the_array(values)`: a divisor of every element in one parity class
  of positions that divides no element of the other class, or `0`.
- `can_sort_by_swaps(values)`: whether swapping only neighbours of different
  parity can sort the values.
- `quality_vs_quantity(values)`: whether a red set can have a larger sum than
  a blue set while having fewer elements.
- `crossing_cost(locations)`: the cost of one jump over all water cells (`0`),
  or `0` if there is no water.
- `prove_him_wrong(size)`: a counterexample array of powers of 3, or `None`
  when `size` is 20 or more.
- `integer_moves(a, b)`: the fewest moves of integer length from the origin to
  `(a, b)`.
- `bracket_sequence_deletion(s)`: `(operations, characters_left)` after
  repeatedly removing the shortest good prefix.
- `extra_cosplayers(cosplayers)`: how many people must be added to a `0`/`1`
  string so that the photo is acceptable.
- `is_valid_power_sequence(values)`: whether the values can be the powers of
  all cyclic shifts of some permutation.
- `max_books(books, time)`: the most consecutive books that can be read within
  `time`.
- `Candy(kind, height, weight)` and `max_candies(candies, x)`: the most
  candies that can be eaten while alternating kinds (0 caramel, 1 fruit)
  starting from jump height `x`.

## Example

```python
from algokit.arithmetic import power, roman_to_int
from algokit.grids import solve_n_queens

power(2, 3, 5)          # 3
roman_to_int("MCMXCIV") # 1994
len(solve_n_queens(8))  # 92
```

## What this package does not do

Everything here is a library function. The package has no command-line
program and does not read problem input from standard input. Callers parse
their own input and pass in the values for one case at a time.