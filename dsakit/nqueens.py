"""The N-queens puzzle solved by backtracking."""

from __future__ import annotations


def n_queens(n: int) -> list[list[int]]:
    """Every way to place ``n`` non-attacking queens on an ``n`` by ``n`` board.

    Each solution lists, row by row, the 1-based column of that row's queen.
    Solutions come in ascending order; an empty list means there is none.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    row_of_column = [0] * n
    used_rows: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()
    solutions: list[list[int]] = []

    def place(col: int) -> None:
        if col == n:
            column_of_row = [0] * n
            for column, row in enumerate(row_of_column):
                column_of_row[row] = column + 1
            solutions.append(column_of_row)
            return
        for row in range(n):
            if row in used_rows or row - col in falling or row + col in rising:
                continue
            row_of_column[col] = row
            used_rows.add(row)
            falling.add(row - col)
            rising.add(row + col)
            place(col + 1)
            used_rows.discard(row)
            falling.discard(row - col)
            rising.discard(row + col)

    place(0)
    solutions.sort()
    return solutions