"""Grid and board search routines."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

MAGIC_SQUARES = (
    (8, 1, 6, 3, 5, 7, 4, 9, 2),
    (4, 3, 8, 9, 5, 1, 2, 7, 6),
    (2, 9, 4, 7, 5, 3, 6, 1, 8),
    (6, 7, 2, 1, 5, 9, 8, 3, 4),
    (6, 1, 8, 7, 5, 3, 2, 9, 4),
    (8, 3, 4, 1, 5, 9, 6, 7, 2),
    (4, 9, 2, 3, 5, 7, 8, 1, 6),
    (2, 7, 6, 9, 5, 1, 4, 3, 8),
)


def _island_size(grid: Sequence[Sequence[int]], start: tuple[int, int], seen: set[tuple[int, int]]) -> int:
    rows, cols = len(grid), len(grid[0])
    stack = [start]
    seen.add(start)
    size = 0
    while stack:
        row, col = stack.pop()
        size += 1
        for r, c in ((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)):
            if 0 <= r < rows and 0 <= c < cols and grid[r][c] != 0 and (r, c) not in seen:
                seen.add((r, c))
                stack.append((r, c))
    return size


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest 4-connected island of land cells."""
    seen: set[tuple[int, int]] = set()
    best = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 1 and (r, c) not in seen:
                best = max(best, _island_size(grid, (r, c), seen))
    return best


def _queen_placements(n: int) -> Iterator[tuple[int, ...]]:
    rows: list[int] = []
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(column: int) -> Iterator[tuple[int, ...]]:
        if column == n:
            yield tuple(rows)
            return
        for row in range(n):
            if row in used_rows or row - column in diagonals or row + column in anti_diagonals:
                continue
            rows.append(row)
            used_rows.add(row)
            diagonals.add(row - column)
            anti_diagonals.add(row + column)
            yield from place(column + 1)
            rows.pop()
            used_rows.discard(row)
            diagonals.discard(row - column)
            anti_diagonals.discard(row + column)

    yield from place(0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens as rows of 'Q' and '.'."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return [
        ["".join("Q" if placement[col] == row else "." for col in range(n)) for row in range(n)]
        for placement in _queen_placements(n)
    ]


def can_reach(arr: Sequence[int], start: int) -> bool:
    """Tell whether jumping arr[i] left or right from start can land on a zero."""
    if not 0 <= start < len(arr):
        return False
    stack = [start]
    seen = {start}
    while stack:
        index = stack.pop()
        step = arr[index]
        if step < 0:
            continue
        if step == 0:
            return True
        for target in (index + step, index - step):
            if 0 <= target < len(arr) and target not in seen:
                seen.add(target)
                stack.append(target)
    return False


def forming_magic_square(s: Sequence[Sequence[int]]) -> int:
    """Return the least total change that turns a 3x3 grid into a magic square."""
    values = [value for row in s for value in row]
    if len(values) != 9:
        raise ValueError("expected a 3x3 grid")
    return min(
        sum(abs(expected - actual) for expected, actual in zip(square, values))
        for square in MAGIC_SQUARES
    )