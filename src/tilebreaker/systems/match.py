from __future__ import annotations

from typing import List, Set

from esper import World

from tilebreaker.systems.board_ops import get_board, get_tile, remove_tile, iter_tiles
from tilebreaker.systems.coordinates import Position, is_in_bounds, orthogonal_neighbors


def is_valid_move(world: World, row: int, column: int) -> bool:
    """A move is valid when the clicked tile has a same-colored orthogonal neighbor."""
    tile = get_tile(world, row, column)
    if tile is None:
        return False
    for n_row, n_col in orthogonal_neighbors(row, column):
        neighbor = get_tile(world, n_row, n_col)
        if neighbor is not None and neighbor.color == tile.color:
            return True
    return False


def find_region(world: World, row: int, column: int) -> Set[Position]:
    """Return the maximal 4-connected same-colored region containing (row, column).

    Uses an explicit stack so large boards never hit the recursion limit.
    The board is only read here.
    """
    origin = get_tile(world, row, column)
    if origin is None:
        return set()
    width = get_board(world).width
    color = origin.color
    visited: Set[Position] = {(row, column)}
    stack: List[Position] = [(row, column)]
    while stack:
        current = stack.pop()
        for n_row, n_col in orthogonal_neighbors(*current):
            pos = (n_row, n_col)
            if pos in visited or not is_in_bounds(width, n_row, n_col):
                continue
            neighbor = get_tile(world, n_row, n_col)
            if neighbor is None or neighbor.color != color:
                continue
            visited.add(pos)
            stack.append(pos)
    return visited


def resolve_move(world: World, row: int, column: int) -> Set[Position]:
    """Remove the region under (row, column) and return the cleared cells.

    Invalid moves clear nothing and return an empty set.
    """
    if not is_valid_move(world, row, column):
        return set()
    region = find_region(world, row, column)
    for r, c in region:
        remove_tile(world, r, c)
    return region


def has_valid_moves(world: World) -> bool:
    """True if any two orthogonally adjacent tiles share a color.

    Checking up and right from every tile covers every adjacency once.
    """
    for tile in iter_tiles(world):
        for n_row, n_col in ((tile.row + 1, tile.column), (tile.row, tile.column + 1)):
            neighbor = get_tile(world, n_row, n_col)
            if neighbor is not None and neighbor.color == tile.color:
                return True
    return False
