from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

from .errors import GridPathError
from .search import search
from .textgrid import parse_grid, render_grid


def _solve(path: Path, quiet: bool) -> int:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"error: cannot read {path}: {e.strerror}", file=sys.stderr)
        return 2
    except UnicodeDecodeError:
        print(f"error: cannot decode {path} as UTF-8", file=sys.stderr)
        return 2

    try:
        grid, start, end = parse_grid(text)
        result = search(grid, start, end)
    except GridPathError as e:
        print(f"error: {path}: {e}", file=sys.stderr)
        return 2

    if not quiet:
        print(render_grid(grid, start, end, result))
        print()

    visited = len(result.visit_order)
    if not result.found:
        print(f"no path found, visited {visited} cells")
        return 1
    print(f"path length {len(result.path)} ({len(result.path) - 1} steps), visited {visited} cells")
    return 0


def _gui(gui_args: list[str]) -> int:
    if gui_args and gui_args[0] == "--":
        gui_args = gui_args[1:]
    # Run in a subprocess so pygame gets a fresh interpreter with __main__ semantics.
    cmd = [sys.executable, "-m", "gridpath.visualizer", *gui_args]
    return subprocess.call(cmd)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gridpath",
        description="Breadth-first shortest paths on a walled grid.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Solve a text grid (. open, # wall, S start, E end).")
    solve.add_argument("file", type=Path, help="Path to the grid file.")
    solve.add_argument("-q", "--quiet", action="store_true", help="Only print the summary line.")

    gui = sub.add_parser("gui", help="Open the interactive pygame visualizer.")
    gui.add_argument(
        "gui_args",
        nargs=argparse.REMAINDER,
        help="Arguments forwarded to the visualizer. Use `--` before the first forwarded arg.",
    )

    ns = parser.parse_args(argv)
    if ns.command == "solve":
        return _solve(ns.file, ns.quiet)
    return _gui(list(ns.gui_args))


if __name__ == "__main__":
    raise SystemExit(main())
