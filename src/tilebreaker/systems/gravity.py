from __future__ import annotations

from typing import List, Tuple

from esper import World

from tilebreaker.systems.board_ops import (
    draw_colors,
    empty_columns,
    fill_column,
    get_board,
    has_tile,
    is_column_empty,
    move_tile_down,
    swap_columns,
)
from tilebreaker.systems.coordinates import Position
from tilebreaker.utils.color_source import ColorSource

FallMove = Tuple[Position, Position]


def _fall_column(world: World, column: int, width: int) -> List[FallMove]:
    # Track where each moving tile started so a tile falling several cells
    # is reported once, as (start, final).
    origin_of = {}
    changed = True
    while changed:
        changed = False
        for row in range(width - 1, 0, -1):
            if has_tile(world, row, column) and not has_tile(world, row - 1, column):
                move_tile_down(world, row, column)
                origin_of[row - 1] = origin_of.pop(row, row)
                changed = True
    return [((start, column), (end, column)) for end, start in sorted(origin_of.items())]


def apply_fall(world: World) -> List[FallMove]:
    """Let every tile drop until nothing floats above an empty cell.

    Columns are independent and vertical order within a column is preserved.
    Returns one (from, to) pair per tile that moved.
    """
    width = get_board(world).width
    moves: List[FallMove] = []
    for column in range(width):
        moves.extend(_fall_column(world, column, width))
    return moves


def shift_columns_left(world: World) -> List[Tuple[int, int]]:
    """Swap empty columns to the right until non-empty columns are left-packed.

    Scans right to left and repeats full passes until a pass swaps nothing, so
    the relative order of non-empty columns is kept.
    """
    width = get_board(world).width
    swaps: List[Tuple[int, int]] = []
    changed = True
    while changed:
        changed = False
        for column in range(width - 1, 0, -1):
            if not is_column_empty(world, column) and is_column_empty(world, column - 1):
                swap_columns(world, column, column - 1)
                swaps.append((column, column - 1))
                changed = True
    return swaps


def refill_empty_columns(world: World, color_source: ColorSource | None = None) -> List[int]:
    """Fill every empty column and return their indices.

    All colors are drawn up front so a bad color leaves the board untouched.
    """
    width = get_board(world).width
    columns = empty_columns(world)
    colors = draw_colors(world, width * len(columns), color_source)
    for index, column in enumerate(columns):
        fill_column(world, column, colors[index * width:(index + 1) * width])
    return columns
