"""ASCII grids: ``.`` open, ``#`` wall, ``S`` start, ``E`` end.

Rendering adds ``o`` for visited cells and ``*`` for the path.
"""

from __future__ import annotations

from .errors import InvalidInput
from .grid import Coord, Grid
from .search import SearchResult

OPEN = "."
WALL = "#"
START = "S"
END = "E"
VISITED = "o"
PATH = "*"


def parse_grid(text: str, require_endpoints: bool = True) -> tuple[Grid, Coord | None, Coord | None]:
    lines = [line.rstrip("\r") for line in text.split("\n")]
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise InvalidInput("empty grid")

    width = len(lines[0])
    start: Coord | None = None
    end: Coord | None = None
    grid = Grid(len(lines), max(width, 1))

    for r, line in enumerate(lines):
        if len(line) != width:
            raise InvalidInput(f"line {r + 1}: expected {width} cells, got {len(line)}")
        for c, ch in enumerate(line):
            if ch == WALL:
                grid.set_blocked((r, c))
            elif ch == START:
                if start is not None:
                    raise InvalidInput(f"line {r + 1}: second start cell")
                start = (r, c)
            elif ch == END:
                if end is not None:
                    raise InvalidInput(f"line {r + 1}: second end cell")
                end = (r, c)
            elif ch != OPEN:
                raise InvalidInput(f"line {r + 1}: unexpected character {ch!r}")

    if require_endpoints and (start is None or end is None):
        raise InvalidInput("grid needs one S and one E")
    return grid, start, end


def render_grid(
    grid: Grid,
    start: Coord | None = None,
    end: Coord | None = None,
    result: SearchResult | None = None,
) -> str:
    cells = [[WALL if grid.blocked[r, c] else OPEN for c in range(grid.cols)] for r in range(grid.rows)]
    if result is not None:
        for r, c in result.visit_order:
            cells[r][c] = VISITED
        for r, c in result.path:
            cells[r][c] = PATH
    if start is not None:
        cells[start[0]][start[1]] = START
    if end is not None:
        cells[end[0]][end[1]] = END
    return "\n".join("".join(row) for row in cells)
