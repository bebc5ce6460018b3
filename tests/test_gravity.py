import random

from tilebreaker.systems.board_ops import is_column_empty, remove_tile, tiles_view
from tilebreaker.systems.gravity import apply_fall, refill_empty_columns, shift_columns_left
from tilebreaker.utils.color_source import SequenceColorSource
from tilebreaker.session import new_game

from helpers import grid_of, scripted_session


def column_colors(session, column):
    """Bottom-to-top colors in ``column``, gaps skipped."""
    return [row[column] for row in grid_of(session) if row[column]]


def assert_nothing_floats(session):
    grid = grid_of(session)
    for row in range(1, session.width):
        for column in range(session.width):
            if grid[row][column]:
                assert grid[row - 1][column], f"tile at ({row}, {column}) floats"


def test_fall_packs_columns_and_reports_moves():
    session = scripted_session([
        [0, 3, 0, 0],
        [1, 0, 0, 0],
        [0, 4, 0, 0],
        [2, 0, 0, 0],
    ])
    moves = apply_fall(session.world)
    assert grid_of(session) == [
        [1, 3, 0, 0],
        [2, 4, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    assert moves == [
        ((1, 0), (0, 0)),
        ((3, 0), (1, 0)),
        ((2, 1), (1, 1)),
    ]


def test_fall_on_packed_board_is_noop():
    session = scripted_session([
        [1, 2],
        [3, 0],
    ])
    assert apply_fall(session.world) == []
    assert grid_of(session) == [[1, 2], [3, 0]]


def test_fall_keeps_order_and_leaves_no_floating_tiles():
    session = new_game(8, rng=random.Random(5))
    rng = random.Random(11)
    for row in range(8):
        for column in range(8):
            if rng.random() < 0.5:
                remove_tile(session.world, row, column)
    before = {c: column_colors(session, c) for c in range(8)}
    apply_fall(session.world)
    assert_nothing_floats(session)
    assert {c: column_colors(session, c) for c in range(8)} == before


def test_shift_left_packs_non_empty_columns_in_order():
    session = scripted_session([
        [0, 1, 0, 2],
        [0, 3, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    shift_columns_left(session.world)
    assert grid_of(session) == [
        [1, 2, 0, 0],
        [3, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    empties = [is_column_empty(session.world, c) for c in range(4)]
    assert empties == [False, False, True, True]


def test_shift_left_reports_swaps():
    session = scripted_session([
        [1, 0, 2],
        [1, 0, 2],
        [1, 0, 2],
    ])
    assert shift_columns_left(session.world) == [(2, 1)]
    assert shift_columns_left(session.world) == []


def test_refill_fills_only_empty_columns():
    session = scripted_session([
        [1, 0, 0],
        [0, 0, 0],
        [0, 0, 0],
    ])
    refilled = refill_empty_columns(session.world, SequenceColorSource([4]))
    assert refilled == [1, 2]
    assert grid_of(session) == [
        [1, 4, 4],
        [0, 4, 4],
        [0, 4, 4],
    ]
    assert len(tiles_view(session.world)) == 7
