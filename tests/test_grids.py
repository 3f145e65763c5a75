import copy
import itertools

import pytest

from algokit.grids import can_reach, forming_magic_square, max_area_of_island, solve_n_queens


def test_island_empty_and_water():
    assert max_area_of_island([]) == 0
    assert max_area_of_island([[0, 0], [0, 0]]) == 0


def test_island_single_blob_counts_all_land():
    grid = [
        [0, 1, 1, 0],
        [0, 1, 0, 0],
        [1, 1, 1, 1],
        [0, 0, 0, 1],
    ]
    assert max_area_of_island(grid) == sum(map(sum, grid))


def test_island_checkerboard_has_no_diagonal_links():
    grid = [[(r + c) % 2 for c in range(5)] for r in range(5)]
    assert max_area_of_island(grid) == 1


def test_island_picks_largest_and_leaves_input():
    grid = [
        [1, 1, 0, 0, 1],
        [1, 0, 0, 0, 0],
        [0, 0, 1, 1, 1],
        [0, 0, 1, 1, 0],
    ]
    snapshot = copy.deepcopy(grid)
    assert max_area_of_island(grid) == 5
    assert grid == snapshot


def _brute_queens(n):
    solutions = []
    for perm in itertools.permutations(range(n)):
        if len({r - c for c, r in enumerate(perm)}) == n and len({r + c for c, r in enumerate(perm)}) == n:
            solutions.append(perm)
    return solutions


def _placement(board):
    n = len(board)
    return tuple(next(r for r in range(n) if board[r][c] == "Q") for c in range(n))


@pytest.mark.parametrize("n", range(1, 8))
def test_queens_match_brute_force_in_order(n):
    boards = solve_n_queens(n)
    placements = [_placement(b) for b in boards]
    assert placements == _brute_queens(n)
    for board in boards:
        assert len(board) == n
        assert all(len(row) == n and row.count("Q") == 1 for row in board)


def test_queens_single():
    assert solve_n_queens(1) == [["Q"]]


def test_queens_negative():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_can_reach_examples():
    arr = [4, 2, 3, 0, 3, 1, 2]
    assert can_reach(arr, 5)
    assert can_reach(arr, 0)
    assert not can_reach([3, 0, 2, 1, 2], 2)


def test_can_reach_start_on_zero_and_out_of_range():
    assert can_reach([0], 0)
    assert not can_reach([1, 0], 5)
    assert not can_reach([1, 0], -1)


def test_can_reach_does_not_modify_input():
    arr = [4, 2, 3, 0, 3, 1, 2]
    can_reach(arr, 5)
    assert arr == [4, 2, 3, 0, 3, 1, 2]


def _rotations_and_reflections(square):
    grids = []
    grid = square
    for _ in range(4):
        grid = [list(row) for row in zip(*grid[::-1])]
        grids.append(grid)
        grids.append([row[::-1] for row in grid])
    return grids


@pytest.mark.parametrize("grid", _rotations_and_reflections([[8, 1, 6], [3, 5, 7], [4, 9, 2]]))
def test_magic_square_costs_nothing(grid):
    assert forming_magic_square(grid) == 0


def test_magic_square_example():
    assert forming_magic_square([[4, 9, 2], [3, 5, 7], [8, 1, 5]]) == 1


@pytest.mark.parametrize("row,col,delta", [(0, 0, 1), (1, 1, 3), (2, 2, -2)])
def test_magic_square_single_change(row, col, delta):
    grid = [[8, 1, 6], [3, 5, 7], [4, 9, 2]]
    grid[row][col] += delta
    assert forming_magic_square(grid) == abs(delta)


def test_magic_square_wrong_shape():
    with pytest.raises(ValueError):
        forming_magic_square([[1, 2], [3, 4]])