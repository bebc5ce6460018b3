GRID_SIZE = 10
COLOR_COUNT = 5

# Index 0 is the empty/background color; 1..COLOR_COUNT are tile colors.
COLOR_PALETTE = [
    (255, 255, 255),  # #FFFFFF
    (230, 25, 75),    # #E6194B
    (0, 130, 200),    # #0082C8
    (60, 180, 75),    # #3CB44B
    (255, 225, 25),   # #FFE119
    (245, 130, 49),   # #F58231
]

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Tile Breaker"

# Board footprint relative to the smaller usable window side.
BOARD_MAX_PCT = 0.90
BOTTOM_MARGIN = 20
# Strip above the board reserved for the score line.
SCORE_BAR_HEIGHT = 48
MIN_TILE_SIZE = 8
TILE_PADDING = 1
