"""Fixed-size array of any number of dimensions kept in one flat list."""

from __future__ import annotations

import math
from typing import Any

_DEFAULT_SIZE = 10


class MultiArray:
    """An N-dimensional array stored row-major; unset cells hold None.

    ``MultiArray()`` is one-dimensional with ten cells; ``MultiArray(2, 3)``
    is two rows of three.
    """

    def __init__(self, *args: int) -> None:
        shape = args or (_DEFAULT_SIZE,)
        if any(dim < 1 for dim in shape):
            raise ValueError("every dimension must be at least 1")
        self.shape: tuple[int, ...] = tuple(shape)
        self._cells: list[Any] = [None] * math.prod(shape)

    def flat_index(self, *args: int) -> int:
        """Position in the flat store of the cell at the given indexes."""
        if len(args) != len(self.shape):
            raise IndexError(f"expected {len(self.shape)} indexes, got {len(args)}")
        index = 0
        for position, dim in zip(args, self.shape):
            if not 0 <= position < dim:
                raise IndexError(f"index {position} out of range for dimension {dim}")
            index = index * dim + position
        return index

    def _resolve(self, index: int | tuple[int, ...]) -> int:
        if isinstance(index, tuple):
            return self.flat_index(*index)
        if not 0 <= index < len(self._cells):
            raise IndexError(f"index {index} out of range")
        return index

    def __getitem__(self, index: int | tuple[int, ...]) -> Any:
        return self._cells[self._resolve(index)]

    def __setitem__(self, index: int | tuple[int, ...], value: Any) -> None:
        self._cells[self._resolve(index)] = value

    def __len__(self) -> int:
        return len(self._cells)

    def front(self) -> Any:
        """The first cell."""
        return self._cells[0]

    def back(self) -> Any:
        """The last cell."""
        return self._cells[-1]

    def is_empty(self) -> bool:
        """True if no cell has been given a value."""
        return all(cell is None for cell in self._cells)

    def is_full(self) -> bool:
        """True if every cell has been given a value."""
        return all(cell is not None for cell in self._cells)

    def shrink(self) -> None:
        """Halve an empty array, rounding up, into one dimension."""
        if not self.is_empty():
            return
        size = math.ceil(len(self._cells) / 2)
        self._cells = self._cells[:size]
        self.shape = (size,)