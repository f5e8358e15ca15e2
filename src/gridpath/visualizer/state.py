from __future__ import annotations

from collections import namedtuple

State = namedtuple(
    "State",
    ["grid", "start", "end", "cursor", "result", "path_shown", "phase", "status"],
)
# grid: gridpath.grid.Grid (replaced, never mutated, once a State holds it)
# start / end: (row, col) or None
# cursor: SearchCursor while phase == "search", else None
# result: Found / NotFound once the cursor is drained
# path_shown: path cells revealed so far, counted from the end
# phase: "edit" | "search" | "path" | "done"
# status: message for the control strip

EDIT, SEARCH, PATH, DONE = "edit", "search", "path", "done"
