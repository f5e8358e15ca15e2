ROWS, COLS = 20, 20
CELL_SIZE = 30
PANEL_HEIGHT = 50
FPS = 100
STEP_MS = 10

BUTTON_W, BUTTON_H = 110, 30
BUTTON_GAP = 12
STATUS_X = 8
STATUS_MIN_W = 240
FONT_SIZE = 18

WALL_COLOR = (0, 0, 0)
EMPTY_COLOR = (255, 255, 255)
VISITED_COLOR = (0, 255, 255)
START_COLOR = (76, 175, 80)
END_COLOR = (244, 67, 54)
START_DONE_COLOR = (0, 255, 0)
END_DONE_COLOR = (255, 0, 0)
LINE_COLOR = (128, 128, 128)
PANEL_COLOR = (238, 238, 238)
BUTTON_COLOR = (210, 210, 210)
TEXT_COLOR = (20, 20, 20)

# Path shades step the green channel by this much per cell, counted from the end.
PATH_SHADE_STEP = 10

START_GLYPH = "S"
END_GLYPH = "E"

MSG_NEED_ENDPOINTS = "Please set start and end points."
MSG_NO_PATH = "No path found."
