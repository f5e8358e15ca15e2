"""Breadth-first search over a :class:`~gridpath.grid.Grid`.

:class:`SearchCursor` owns the queue, visited mask and predecessor map of a
single search and advances it one dequeue at a time, so a frame loop can pace
the animation. :func:`search` simply drains a cursor.
"""

from __future__ import annotations

from collections import deque
from typing import NamedTuple

import numpy as np

from .errors import InternalInconsistency, InvalidInput
from .grid import Coord, Grid, as_coord

# Neighbour order: down, up, right, left. Only decides ties between equally
# short paths.
DIRECTIONS: tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Found(NamedTuple):
    visit_order: tuple[Coord, ...]
    path: tuple[Coord, ...]

    @property
    def found(self) -> bool:
        return True


class NotFound(NamedTuple):
    visit_order: tuple[Coord, ...]

    @property
    def found(self) -> bool:
        return False

    @property
    def path(self) -> tuple[Coord, ...]:
        return ()


SearchResult = Found | NotFound


class StepEvent(NamedTuple):
    current: Coord
    discovered: tuple[Coord, ...]


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def validate_endpoints(grid: Grid, start: Coord | None, end: Coord | None) -> tuple[Coord, Coord]:
    if start is None or end is None:
        raise InvalidInput("start and end must both be set")
    start, end = as_coord(start), as_coord(end)
    for name, coord in (("start", start), ("end", end)):
        if not grid.in_bounds(coord):
            raise InvalidInput(f"{name} {coord} is outside the {grid.rows}x{grid.cols} grid")
        if grid.is_blocked(coord):
            raise InvalidInput(f"{name} {coord} is a wall")
    if start == end:
        raise InvalidInput(f"start and end are the same cell {start}")
    return start, end


def reconstruct_path(predecessors: dict[Coord, Coord], start: Coord, end: Coord) -> tuple[Coord, ...]:
    path = [end]
    current = end
    # A chain longer than the number of recorded links can only be a cycle.
    for _ in range(len(predecessors)):
        if current == start:
            break
        try:
            current = predecessors[current]
        except KeyError:
            raise InternalInconsistency(f"no predecessor recorded for {current}") from None
        path.append(current)
    if current != start:
        raise InternalInconsistency(f"predecessor chain from {end} never reaches {start}")
    path.reverse()
    return tuple(path)


class SearchCursor:
    def __init__(self, grid: Grid, start: Coord | None, end: Coord | None):
        self.start, self.end = validate_endpoints(grid, start, end)
        self.grid = grid
        # Snapshot so edits made mid-search cannot leak in.
        self._blocked = grid.blocked.copy()
        self._visited = np.zeros(grid.shape, dtype=bool)
        self._visited[self.start] = True
        self._predecessors: dict[Coord, Coord] = {}
        self._queue: deque[Coord] = deque([self.start])
        self._visit_order: list[Coord] = []
        self._reached = False

    @property
    def done(self) -> bool:
        return self._reached or not self._queue

    @property
    def reached(self) -> bool:
        return self._reached

    @property
    def visit_order(self) -> tuple[Coord, ...]:
        return tuple(self._visit_order)

    def step(self) -> StepEvent | None:
        """Dequeue one cell and expand it. Returns None once the search is over."""
        if self.done:
            return None

        current = self._queue.popleft()
        if current == self.end:
            self._reached = True
            return StepEvent(current, ())

        rows, cols = self._blocked.shape
        r, c = current
        discovered = []
        for dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols:
                if not self._visited[nr, nc] and not self._blocked[nr, nc]:
                    self._visited[nr, nc] = True
                    self._predecessors[(nr, nc)] = current
                    self._queue.append((nr, nc))
                    discovered.append((nr, nc))
        self._visit_order.extend(discovered)
        return StepEvent(current, tuple(discovered))

    def result(self) -> SearchResult:
        while self.step() is not None:
            pass
        if not self._reached:
            return NotFound(self.visit_order)
        return Found(self.visit_order, reconstruct_path(self._predecessors, self.start, self.end))

    run = result


def search(grid: Grid, start: Coord | None, end: Coord | None) -> SearchResult:
    return SearchCursor(grid, start, end).run()
