"""Two small games of chance: guess the number and a craps simulation."""

from __future__ import annotations

import random
from collections.abc import Iterable
from enum import Enum

LOWEST = 1
HIGHEST = 50
ATTEMPTS = 5

_NATURALS = frozenset({7, 11})
_CRAPS = frozenset({2, 3, 12})


class Guess(Enum):
    """How a guess compares with the secret number."""

    OUT_OF_RANGE = "out of range"
    TOO_HIGH = "too high"
    TOO_LOW = "too low"
    CORRECT = "correct"


def judge_guess(secret: int, guess: int) -> Guess:
    """Compare ``guess`` with ``secret``; guesses outside 1-50 are out of range."""
    if not LOWEST <= guess <= HIGHEST:
        return Guess.OUT_OF_RANGE
    if guess > secret:
        return Guess.TOO_HIGH
    if guess < secret:
        return Guess.TOO_LOW
    return Guess.CORRECT


def play_guessing(secret: int, guesses: Iterable[int]) -> int | None:
    """Play with up to five guesses; return the attempt that won, or None.

    Every guess, even one out of range, uses up an attempt.
    """
    if not LOWEST <= secret <= HIGHEST:
        raise ValueError(f"secret must lie between {LOWEST} and {HIGHEST}")
    for attempt, guess in enumerate(guesses, start=1):
        if attempt > ATTEMPTS:
            break
        if judge_guess(secret, guess) is Guess.CORRECT:
            return attempt
    return None


def _roll(rng: random.Random) -> int:
    return rng.randint(1, 6) + rng.randint(1, 6)


def craps_round(rng: random.Random | None = None) -> tuple[bool, list[int]]:
    """Roll two dice until the round is decided; return ``(won, sums rolled)``.

    A 7 or 11 wins, as does repeating the point; 2, 3 or 12 loses; any other
    sum becomes the point and the dice are rolled again.
    """
    rng = rng if rng is not None else random.Random()
    point: int | None = None
    rolls: list[int] = []
    while True:
        total = _roll(rng)
        rolls.append(total)
        if total in _NATURALS or total == point:
            return True, rolls
        if total in _CRAPS:
            return False, rolls
        point = total


def simulate_craps(rounds: int = 1000, rng: random.Random | None = None) -> tuple[int, int]:
    """Play ``rounds`` rounds and return ``(wins, losses)``."""
    if rounds < 0:
        raise ValueError("rounds must not be negative")
    rng = rng if rng is not None else random.Random()
    wins = sum(craps_round(rng)[0] for _ in range(rounds))
    return wins, rounds - wins