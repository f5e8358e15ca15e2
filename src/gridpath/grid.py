from __future__ import annotations

import numpy as np

from .errors import InvalidInput

Coord = tuple[int, int]


def as_coord(coord) -> Coord:
    """Normalise any (row, col) pair, list or numpy integers included, to a tuple of ints."""
    try:
        r, c = coord
        return (int(r), int(c))
    except (TypeError, ValueError):
        raise InvalidInput(f"expected a (row, col) pair, got {coord!r}") from None


class Grid:
    """Fixed-size wall map. True in ``blocked`` means the cell is a wall."""

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise InvalidInput(f"grid must be at least 1x1, got {rows}x{cols}")
        self._blocked = np.zeros((rows, cols), dtype=bool)

    @classmethod
    def from_array(cls, array) -> Grid:
        arr = np.asarray(array, dtype=bool)
        if arr.ndim != 2:
            raise InvalidInput(f"expected a 2D array, got {arr.ndim}D")
        grid = cls(*arr.shape)
        grid._blocked[:] = arr
        return grid

    @property
    def rows(self) -> int:
        return self._blocked.shape[0]

    @property
    def cols(self) -> int:
        return self._blocked.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._blocked.shape

    @property
    def blocked(self) -> np.ndarray:
        view = self._blocked.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, coord: Coord) -> bool:
        r, c = as_coord(coord)
        return 0 <= r < self.rows and 0 <= c < self.cols

    def _check(self, coord: Coord) -> Coord:
        coord = as_coord(coord)
        if not self.in_bounds(coord):
            raise InvalidInput(f"{coord} is outside the {self.rows}x{self.cols} grid")
        return coord

    def is_blocked(self, coord: Coord) -> bool:
        coord = self._check(coord)
        return bool(self._blocked[coord])

    def set_blocked(self, coord: Coord, blocked: bool = True) -> None:
        coord = self._check(coord)
        self._blocked[coord] = blocked

    def toggle(self, coord: Coord) -> bool:
        coord = self._check(coord)
        self._blocked[coord] = not self._blocked[coord]
        return bool(self._blocked[coord])

    def clear(self) -> None:
        self._blocked.fill(False)

    def walls(self) -> list[Coord]:
        rs, cs = np.nonzero(self._blocked)
        return [(int(r), int(c)) for r, c in zip(rs, cs)]

    def copy(self) -> Grid:
        return Grid.from_array(self._blocked)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._blocked, other._blocked))

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, walls={int(self._blocked.sum())})"
