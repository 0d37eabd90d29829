"""Polynomials stored as terms in order of falling power."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple


class Term(NamedTuple):
    """One term ``coefficient * x ** power``."""

    coefficient: int
    power: int


class Polynomial:
    """A sequence of terms, expected to run from the highest power down."""

    def __init__(self, terms: Iterable[tuple[int, int]] | None = None) -> None:
        self._terms: list[Term] = []
        if terms is not None:
            for coefficient, power in terms:
                self.append(coefficient, power)

    def append(self, coefficient: int, power: int) -> None:
        """Add a term at the end."""
        self._terms.append(Term(coefficient, power))

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        left, right = self._terms, other._terms
        i = j = 0
        while i < len(left) and j < len(right):
            a, b = left[i], right[j]
            if a.power == b.power:
                result.append(a.coefficient + b.coefficient, a.power)
                i += 1
                j += 1
            elif a.power > b.power:
                result.append(*a)
                i += 1
            else:
                result.append(*b)
                j += 1
        result._terms.extend(left[i:])
        result._terms.extend(right[j:])
        return result

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __str__(self) -> str:
        if not self._terms:
            return "Empty!"
        return " + ".join(f"{t.coefficient}x^({t.power})" for t in self._terms)