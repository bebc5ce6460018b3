from tilebreaker.constants import BOARD_MAX_PCT, BOTTOM_MARGIN, MIN_TILE_SIZE, SCORE_BAR_HEIGHT

def compute_board_geometry(window_width: int, window_height: int, width: int):
    """Return (tile_size, start_x, start_y) for a square ``width`` x ``width`` board.

    Shared by RenderSystem and InputSystem so clicks map onto what is drawn.
    Row 0 sits at ``start_y`` (bottom of the board).
    """
    usable_height = window_height - BOTTOM_MARGIN - SCORE_BAR_HEIGHT
    side = min(window_width, usable_height) * BOARD_MAX_PCT
    tile_size = int(side / width)
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = width * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def pixel_to_cell(x: float, y: float, window_width: int, window_height: int, width: int):
    """Translate a window point into (row, column), or None when off the board."""
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, width)
    total = width * tile_size
    if x < start_x or x >= start_x + total:
        return None
    if y < start_y or y >= start_y + total:
        return None
    column = int((x - start_x) // tile_size)
    row = int((y - start_y) // tile_size)
    return row, column
