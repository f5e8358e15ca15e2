from __future__ import annotations

import argparse
import sys

import pygame

from . import config
from .logic import (
    animation_tick,
    button_at,
    button_rects,
    cell_at,
    clear_grid,
    handle_cell_click,
    is_animating,
    new_state,
    start_search,
    window_width,
)
from .render import draw_state


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="gridpath-gui", add_help=True)
    parser.add_argument("--rows", type=int, default=config.ROWS, help="Grid rows.")
    parser.add_argument("--cols", type=int, default=config.COLS, help="Grid columns.")
    parser.add_argument("--cell-size", type=int, default=config.CELL_SIZE, help="Cell size in pixels.")
    parser.add_argument(
        "--step-ms",
        type=int,
        default=config.STEP_MS,
        help="Milliseconds between animation steps.",
    )
    args = parser.parse_args(argv)
    if args.rows < 1 or args.cols < 1 or args.cell_size < 1 or args.step_ms < 0:
        parser.error("--rows, --cols and --cell-size must be positive and --step-ms non-negative")

    pygame.init()
    grid_h = args.rows * args.cell_size
    width = window_width(args.cols, args.cell_size)
    buttons = button_rects(width, grid_h)
    screen = pygame.display.set_mode((width, grid_h + config.PANEL_HEIGHT))
    pygame.display.set_caption("Pathfinding Visualizer")
    font = pygame.font.SysFont("arial", config.FONT_SIZE)
    clock = pygame.time.Clock()

    state = new_state(args.rows, args.cols)
    since_step = 0

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                pygame.quit()
                sys.exit()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                state = start_search(state)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_c:
                state = clear_grid(state)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                button = button_at(event.pos, buttons)
                if button == "start":
                    state = start_search(state)
                elif button == "clear":
                    state = clear_grid(state)
                else:
                    coord = cell_at(event.pos, state, args.cell_size)
                    if coord is not None:
                        state = handle_cell_click(state, coord)

        since_step += clock.get_time()
        while is_animating(state) and since_step >= args.step_ms:
            since_step -= args.step_ms
            state = animation_tick(state)
            if not is_animating(state):
                print(state.status)
            if args.step_ms == 0:
                break
        if not is_animating(state):
            since_step = 0

        draw_state(screen, state, font, args.cell_size, buttons)
        clock.tick(config.FPS)


if __name__ == "__main__":
    main()
