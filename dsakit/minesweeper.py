"""A playable Minesweeper board with first-move safety and flood reveal."""

from __future__ import annotations

import argparse
import itertools
import random
import sys
from collections.abc import Iterator, Sequence
from enum import IntEnum

MINE = "*"
HIDDEN = "-"


class Difficulty(IntEnum):
    """Preset board sizes, selected by number."""

    BEGINNER = 0
    INTERMEDIATE = 1
    ADVANCED = 2

    @property
    def side(self) -> int:
        return _SETTINGS[self][0]

    @property
    def mine_count(self) -> int:
        return _SETTINGS[self][1]


_SETTINGS = {
    Difficulty.BEGINNER: (9, 10),
    Difficulty.INTERMEDIATE: (16, 40),
    Difficulty.ADVANCED: (24, 99),
}


class Minesweeper:
    """A square board; ``board`` is what the player sees, ``mines`` where mines lie."""

    def __init__(self, side: int, mine_count: int, rng: random.Random | None = None) -> None:
        if side < 1:
            raise ValueError("side must be at least 1")
        if not 0 <= mine_count < side * side:
            raise ValueError("mine count must leave at least one safe cell")
        self.side = side
        self.mine_count = mine_count
        self._rng = rng if rng is not None else random.Random()
        self.moves_left = side * side - mine_count
        self.lost = False
        self.won = False
        self._moves_made = 0
        self.board = [[HIDDEN] * side for _ in range(side)]
        self.mines: list[tuple[int, int]] = []
        self._real: list[list[str]] = []
        self.place_mines()

    def place_mines(self) -> None:
        """Scatter the mines over distinct random cells."""
        cells = self._rng.sample(range(self.side * self.side), self.mine_count)
        self.mines = [divmod(cell, self.side) for cell in cells]
        self._real = [[HIDDEN] * self.side for _ in range(self.side)]
        for row, col in self.mines:
            self._real[row][col] = MINE

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.side and 0 <= col < self.side):
            raise IndexError(f"cell ({row}, {col}) is off the board")

    def _neighbours(self, row: int, col: int) -> Iterator[tuple[int, int]]:
        for dr, dc in itertools.product((-1, 0, 1), repeat=2):
            r, c = row + dr, col + dc
            if (dr or dc) and 0 <= r < self.side and 0 <= c < self.side:
                yield r, c

    def adjacent_mines(self, row: int, col: int) -> int:
        """Number of mines in the up to eight cells around ``(row, col)``."""
        self._check(row, col)
        return sum(self._real[r][c] == MINE for r, c in self._neighbours(row, col))

    def _relocate_mine(self, row: int, col: int) -> None:
        for r, c in itertools.product(range(self.side), repeat=2):
            if self._real[r][c] != MINE:
                self._real[r][c] = MINE
                self._real[row][col] = HIDDEN
                self.mines[self.mines.index((row, col))] = (r, c)
                return

    def reveal(self, row: int, col: int) -> bool:
        """Open a cell; return True if it held a mine and the game is lost.

        The first move never hits a mine: a mine there is moved to the first
        free cell.  Opening a cell with no neighbouring mines opens its
        neighbours as well.
        """
        if self.lost or self.won:
            raise RuntimeError("the game is over")
        self._check(row, col)
        if self._moves_made == 0 and self._real[row][col] == MINE:
            self._relocate_mine(row, col)
        self._moves_made += 1

        if self.board[row][col] != HIDDEN:
            return False
        if self._real[row][col] == MINE:
            for r, c in self.mines:
                self.board[r][c] = MINE
            self.lost = True
            return True

        pending = [(row, col)]
        while pending:
            r, c = pending.pop()
            if self.board[r][c] != HIDDEN:
                continue
            count = self.adjacent_mines(r, c)
            self.moves_left -= 1
            self.board[r][c] = str(count)
            if count == 0:
                pending.extend(
                    (nr, nc)
                    for nr, nc in self._neighbours(r, c)
                    if self._real[nr][nc] != MINE and self.board[nr][nc] == HIDDEN
                )
        if self.moves_left == 0:
            self.won = True
        return False

    def render(self, show_mines: bool = False) -> str:
        """The board as text, with row and column numbers; optionally the mine map."""
        grid = self._real if show_mines else self.board
        lines = [" " + "".join(f"{i} " for i in range(self.side)), ""]
        lines.extend(f"{i} " + "".join(f"{cell} " for cell in row) for i, row in enumerate(grid))
        return "\n".join(lines) + "\n"


def _choose_level(level: int | None) -> Difficulty | None:
    if level is None:
        print("Enter the Difficulty Level")
        print("Press 0 for BEGINNER (9 * 9 Cells and 10 Mines)")
        print("Press 1 for INTERMEDIATE (16 * 16 Cells and 40 Mines)")
        print("Press 2 for ADVANCED (24 * 24 Cells and 99 Mines)")
        try:
            level = int(input().strip())
        except ValueError:
            return None
    try:
        return Difficulty(level)
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game of Minesweeper on the terminal."""
    parser = argparse.ArgumentParser(description="Play Minesweeper.")
    parser.add_argument("--level", type=int, help="0 beginner, 1 intermediate, 2 advanced")
    parser.add_argument("--seed", type=int, help="seed for placing the mines")
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))

    try:
        difficulty = _choose_level(args.level)
        if difficulty is None:
            print("Unknown difficulty level")
            return 1
        game = Minesweeper(difficulty.side, difficulty.mine_count, random.Random(args.seed))
        while not (game.lost or game.won):
            print("Current Status of Board : ")
            print(game.render(), end="")
            reply = input("Enter your move, (row, column) -> ")
            try:
                row, col = (int(part) for part in reply.split())
                hit = game.reveal(row, col)
            except (ValueError, IndexError):
                print("Invalid move")
                continue
            if hit:
                print(game.render(), end="")
                print("\nYou lost!")
            elif game.won:
                print("\nYou won !")
    except EOFError:
        return 1
    return 0