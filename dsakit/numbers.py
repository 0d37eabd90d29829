"""Number and matrix routines: combinatorics, sequences, digits and patterns."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

Matrix = list[list[int]]


def binomial(n: int, k: int) -> int:
    """Binomial coefficient C(n, k); zero when k exceeds n."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    return math.comb(n, k)


def catalan(n: int) -> int:
    """The n-th Catalan number."""
    return binomial(2 * n, n) // (n + 1)


def fibonacci(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers; always at least the first two."""
    sequence = [0, 1]
    while len(sequence) < count:
        sequence.append(sequence[-2] + sequence[-1])
    return sequence


def reverse_number(n: int) -> int:
    """The digits of a positive ``n`` in reverse order; zero for ``n <= 0``."""
    result = 0
    while n > 0:
        n, digit = divmod(n, 10)
        result = result * 10 + digit
    return result


def is_palindrome_number(n: int) -> bool:
    """True if ``n`` reads the same backwards; negative numbers never do."""
    return n == reverse_number(n)


def primes_up_to(n: int) -> list[int]:
    """All primes not greater than ``n``, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, math.isqrt(n) + 1):
        if sieve[p]:
            sieve[p * p::p] = bytes(len(range(p * p, n + 1, p)))
    return [p for p, is_prime in enumerate(sieve) if is_prime]


def cube_root(x: float) -> float:
    """Real cube root of ``x``, negative for negative input."""
    if x == 0:
        return 0.0
    root = math.copysign(abs(x) ** (1.0 / 3.0), x)
    return root - (root * root * root - x) / (3.0 * root * root)


def multiplication_table(n: int) -> list[str]:
    """Lines ``n * i = product`` for i from 1 to 10."""
    return [f"{n} * {i} = {n * i}" for i in range(1, 11)]


def _hanoi(discs: int, source: str, spare: str, target: str) -> Iterator[tuple[int, str, str]]:
    if discs == 1:
        yield 1, source, target
        return
    yield from _hanoi(discs - 1, source, target, spare)
    yield discs, source, target
    yield from _hanoi(discs - 1, spare, source, target)


def hanoi_moves(
    discs: int, source: str = "A", spare: str = "B", target: str = "C"
) -> list[tuple[int, str, str]]:
    """Moves ``(disc, from, to)`` that carry a tower of ``discs`` to ``target``."""
    if discs < 1:
        raise ValueError("there must be at least one disc")
    return list(_hanoi(discs, source, spare, target))


def number_pattern(rows: int, columns: int) -> list[str]:
    """Rows of a number pattern: the diagonal plus two arms opening from the middle."""
    apex = (rows + columns + 1) // 2
    lines = []
    for i in range(1, rows + 1):
        arms = (apex + 2 - i, apex + i)
        cells = (
            str(i) if i == j else str(j) if j in arms else " "
            for j in range(1, columns + 1)
        )
        lines.append("".join(cells))
    return lines


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    columns = len(matrix[0]) if rows else 0
    if any(len(row) != columns for row in matrix):
        raise ValueError("matrix rows have different lengths")
    return rows, columns


def matrix_add(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]) -> Matrix:
    """Element-wise sum of two matrices of the same shape."""
    if _shape(first) != _shape(second):
        raise ValueError("matrices must have the same shape")
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def matrix_multiply(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]) -> Matrix:
    """Matrix product; the columns of ``first`` must match the rows of ``second``."""
    rows, inner = _shape(first)
    second_rows, columns = _shape(second)
    if inner != second_rows:
        raise ValueError("columns of the first matrix must equal rows of the second")
    transposed = [[row[j] for row in second] for j in range(columns)]
    return [[sum(a * b for a, b in zip(row, col)) for col in transposed] for row in first]