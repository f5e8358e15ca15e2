from __future__ import annotations

from ..errors import InvalidInput
from ..grid import Coord, Grid
from ..search import SearchCursor
from . import config
from .state import DONE, EDIT, PATH, SEARCH, State


def new_state(rows: int = config.ROWS, cols: int = config.COLS) -> State:
    return State(
        grid=Grid(rows, cols),
        start=None,
        end=None,
        cursor=None,
        result=None,
        path_shown=0,
        phase=EDIT,
        status="",
    )


def is_animating(state: State) -> bool:
    return state.phase in (SEARCH, PATH)


def cell_at(pos: tuple[int, int], state: State, cell_size: int) -> Coord | None:
    x, y = pos
    if x < 0 or y < 0:
        return None
    coord = (y // cell_size, x // cell_size)
    return coord if state.grid.in_bounds(coord) else None


def button_rects(width: int, top: int) -> dict[str, tuple[int, int, int, int]]:
    """Start/Clear buttons, right-aligned in the control strip below the grid."""
    total = 2 * config.BUTTON_W + config.BUTTON_GAP
    x0 = max(0, width - total - config.BUTTON_GAP)
    y = top + (config.PANEL_HEIGHT - config.BUTTON_H) // 2
    return {
        "start": (x0, y, config.BUTTON_W, config.BUTTON_H),
        "clear": (x0 + config.BUTTON_W + config.BUTTON_GAP, y, config.BUTTON_W, config.BUTTON_H),
    }


def window_width(cols: int, cell_size: int) -> int:
    """Grid width, widened when needed so the status line keeps STATUS_MIN_W left of the buttons."""
    controls = config.STATUS_X + config.STATUS_MIN_W + 2 * config.BUTTON_W + 3 * config.BUTTON_GAP
    return max(cols * cell_size, controls)


def status_width(buttons: dict[str, tuple[int, int, int, int]]) -> int:
    return max(0, buttons["start"][0] - config.BUTTON_GAP - config.STATUS_X)


def fit_text(text: str, max_width: int, measure) -> str:
    """Cut ``text`` with a trailing ellipsis until ``measure(text)`` fits in ``max_width``."""
    if measure(text) <= max_width:
        return text
    for end in range(len(text) - 1, -1, -1):
        cut = text[:end].rstrip() + "..."
        if measure(cut) <= max_width:
            return cut
    return ""


def button_at(pos: tuple[int, int], buttons: dict[str, tuple[int, int, int, int]]) -> str | None:
    px, py = pos
    for name, (x, y, w, h) in buttons.items():
        if x <= px < x + w and y <= py < y + h:
            return name
    return None


def _back_to_edit(state: State) -> State:
    return state._replace(cursor=None, result=None, path_shown=0, phase=EDIT, status="")


def handle_cell_click(state: State, coord: Coord) -> State:
    """First click places the start, the next the end, later clicks toggle walls."""
    if is_animating(state):
        return state
    state = _back_to_edit(state)

    if state.start is None:
        grid = state.grid.copy()
        grid.set_blocked(coord, False)
        return state._replace(grid=grid, start=coord)
    if state.end is None and coord != state.start:
        grid = state.grid.copy()
        grid.set_blocked(coord, False)
        return state._replace(grid=grid, end=coord)
    if coord in (state.start, state.end):
        return state

    grid = state.grid.copy()
    grid.toggle(coord)
    return state._replace(grid=grid)


def clear_grid(state: State) -> State:
    return new_state(state.grid.rows, state.grid.cols)


def start_search(state: State) -> State:
    if is_animating(state):
        return state
    state = _back_to_edit(state)
    if state.start is None or state.end is None:
        return state._replace(status=config.MSG_NEED_ENDPOINTS)
    try:
        cursor = SearchCursor(state.grid, state.start, state.end)
    except InvalidInput as e:
        return state._replace(status=str(e))
    return state._replace(cursor=cursor, phase=SEARCH)


def animation_tick(state: State) -> State:
    """Advance the animation by one frame: one BFS step, then one path cell."""
    if state.phase == SEARCH:
        if state.cursor.step() is not None and not state.cursor.done:
            return state
        result = state.cursor.result()
        if not result.found:
            return state._replace(cursor=None, result=result, phase=DONE, status=config.MSG_NO_PATH)
        return state._replace(cursor=None, result=result, phase=PATH)

    if state.phase == PATH:
        shown = state.path_shown + 1
        if shown < len(state.result.path):
            return state._replace(path_shown=shown)
        steps = len(state.result.path) - 1
        return state._replace(
            path_shown=len(state.result.path),
            phase=DONE,
            status=f"Path found: {steps} steps, {len(state.result.visit_order)} cells visited.",
        )

    return state


def visited_cells(state: State) -> tuple[Coord, ...]:
    if state.cursor is not None:
        return state.cursor.visit_order
    if state.result is not None:
        return state.result.visit_order
    return ()


def path_shades(state: State) -> dict[Coord, tuple[int, int, int]]:
    """Purple shade per revealed path cell; the start is never shaded."""
    if state.result is None or not state.result.found:
        return {}
    shades = {}
    backwards = state.result.path[::-1]
    for i, coord in enumerate(backwards[: state.path_shown]):
        if coord == state.start:
            break
        shades[coord] = (128, (config.PATH_SHADE_STEP * i) % 256, 128)
    return shades
