"""Coordinate helpers shared by every board operation.

The board is always square, so a single ``width`` bounds both axes.
"""
from __future__ import annotations

from typing import Tuple

Position = Tuple[int, int]

# Returned for every out-of-bounds pair; never produced for a valid cell.
OUT_OF_BOUNDS = 0


def is_in_bounds(width: int, row: int, column: int) -> bool:
    return 0 <= row < width and 0 <= column < width


def hash_coordinates(width: int, row: int, column: int) -> int:
    """Map an in-bounds (row, column) to a unique positive key.

    Keys run from 1 to ``width * width`` in row-major order.
    """
    if not is_in_bounds(width, row, column):
        return OUT_OF_BOUNDS
    return row * width + column + 1


def orthogonal_neighbors(row: int, column: int) -> Tuple[Position, ...]:
    return (
        (row + 1, column),
        (row, column + 1),
        (row - 1, column),
        (row, column - 1),
    )
