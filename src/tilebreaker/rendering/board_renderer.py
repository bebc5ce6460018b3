from __future__ import annotations

from typing import Sequence, Tuple

from tilebreaker.constants import COLOR_PALETTE


def tile_color(color: int) -> Tuple[int, int, int]:
    """Palette entry for ``color``; unknown colors fall back to the background."""
    if 0 < color < len(COLOR_PALETTE):
        return COLOR_PALETTE[color]
    return COLOR_PALETTE[0]


class BoardRenderer:
    def __init__(self, padding: int = 1):
        self._padding = padding

    def render(
        self,
        arcade,
        tiles: Sequence[Tuple[int, int, int]],
        width: int,
        tile_size: int,
        start_x: float,
        start_y: float,
    ) -> None:
        board_side = width * tile_size
        arcade.draw_lbwh_rectangle_filled(start_x, start_y, board_side, board_side, COLOR_PALETTE[0])
        draw_size = max(tile_size - self._padding, 1)
        for row, column, color in tiles:
            left = start_x + column * tile_size
            bottom = start_y + row * tile_size
            arcade.draw_lbwh_rectangle_filled(left, bottom, draw_size, draw_size, tile_color(color))
