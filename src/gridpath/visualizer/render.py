from __future__ import annotations

import pygame

from . import config
from .logic import fit_text, path_shades, status_width, visited_cells
from .state import DONE, State

_BUTTON_LABELS = {"start": "Start BFS", "clear": "Clear Grid"}


def _fill_for(state: State, coord, visited: set, shades: dict) -> tuple[int, int, int]:
    finished = state.phase == DONE and state.result is not None and state.result.found
    if coord == state.start:
        return config.START_DONE_COLOR if finished else config.START_COLOR
    if coord == state.end and finished:
        return config.END_DONE_COLOR
    if coord in shades:
        return shades[coord]
    if coord == state.end:
        return config.END_COLOR
    if state.grid.blocked[coord]:
        return config.WALL_COLOR
    if coord in visited:
        return config.VISITED_COLOR
    return config.EMPTY_COLOR


def draw_state(
    screen: pygame.Surface,
    state: State,
    font: pygame.font.Font,
    cell_size: int,
    buttons: dict[str, tuple[int, int, int, int]],
) -> None:
    screen.fill(config.PANEL_COLOR)

    visited = set(visited_cells(state))
    shades = path_shades(state)
    for r in range(state.grid.rows):
        for c in range(state.grid.cols):
            rect = pygame.Rect(c * cell_size, r * cell_size, cell_size, cell_size)
            pygame.draw.rect(screen, _fill_for(state, (r, c), visited, shades), rect)
            pygame.draw.rect(screen, config.LINE_COLOR, rect, 1)

    for coord, glyph in ((state.start, config.START_GLYPH), (state.end, config.END_GLYPH)):
        if coord is None:
            continue
        label = font.render(glyph, True, config.TEXT_COLOR)
        r, c = coord
        center = (c * cell_size + cell_size // 2, r * cell_size + cell_size // 2)
        screen.blit(label, label.get_rect(center=center))

    top = state.grid.rows * cell_size
    for name, rect in buttons.items():
        rect = pygame.Rect(*rect)
        pygame.draw.rect(screen, config.BUTTON_COLOR, rect)
        pygame.draw.rect(screen, config.LINE_COLOR, rect, 1)
        label = font.render(_BUTTON_LABELS[name], True, config.TEXT_COLOR)
        screen.blit(label, label.get_rect(center=rect.center))

    if state.status:
        text = fit_text(state.status, status_width(buttons), lambda s: font.size(s)[0])
        label = font.render(text, True, config.TEXT_COLOR)
        screen.blit(label, label.get_rect(midleft=(config.STATUS_X, top + config.PANEL_HEIGHT // 2)))

    pygame.display.flip()
