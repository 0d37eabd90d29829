import itertools

import pytest

from dsakit.nqueens import n_queens


def _is_valid(solution):
    n = len(solution)
    if sorted(solution) != list(range(1, n + 1)):
        return False
    for (r1, c1), (r2, c2) in itertools.combinations(enumerate(solution), 2):
        if abs(r1 - r2) == abs(c1 - c2):
            return False
    return True


def test_four_queens():
    assert n_queens(4) == [[2, 4, 1, 3], [3, 1, 4, 2]]


def test_one_queen():
    assert n_queens(1) == [[1]]


@pytest.mark.parametrize("n", [2, 3])
def test_no_solution(n):
    assert n_queens(n) == []


def test_eight_queens_count():
    assert len(n_queens(8)) == 92


@pytest.mark.parametrize("n", [5, 6, 7])
def test_solutions_valid_sorted_and_distinct(n):
    solutions = n_queens(n)
    assert solutions
    assert all(_is_valid(s) for s in solutions)
    assert solutions == sorted(solutions)
    assert len({tuple(s) for s in solutions}) == len(solutions)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        n_queens(-1)