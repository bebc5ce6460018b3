import pytest

from tilebreaker.events.bus import EventBus
from tilebreaker.systems.board import BoardSystem
from tilebreaker.systems.board_ops import load_grid, tiles_view
from tilebreaker.systems.match import find_region, has_valid_moves, is_valid_move, resolve_move
from tilebreaker.utils.color_source import SequenceColorSource
from tilebreaker.world import create_world

from helpers import grid_of, scripted_session

# Color 1 forms a plus sign centred on (1, 1); the other 1s are isolated.
CROSS = [
    [2, 1, 2, 3],
    [1, 1, 1, 2],
    [3, 1, 3, 1],
    [2, 3, 1, 2],
]
CROSS_CELLS = {(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)}


def test_cross_region_from_center():
    session = scripted_session(CROSS)
    assert find_region(session.world, 1, 1) == CROSS_CELLS


@pytest.mark.parametrize("cell", sorted(CROSS_CELLS))
def test_region_is_same_from_any_member(cell):
    session = scripted_session(CROSS)
    assert find_region(session.world, *cell) == CROSS_CELLS


def test_resolve_removes_exactly_the_region():
    session = scripted_session(CROSS)
    cleared = resolve_move(session.world, 1, 1)
    assert cleared == CROSS_CELLS
    assert grid_of(session) == [
        [2, 0, 2, 3],
        [0, 0, 0, 2],
        [3, 0, 3, 1],
        [2, 3, 1, 2],
    ]


def test_validity():
    session = scripted_session(CROSS)
    assert is_valid_move(session.world, 1, 1)
    assert is_valid_move(session.world, 0, 1)
    # isolated color 1 tiles
    assert not is_valid_move(session.world, 2, 3)
    assert not is_valid_move(session.world, 3, 2)
    assert not is_valid_move(session.world, -1, 0)
    assert not is_valid_move(session.world, 0, 4)


def test_empty_cell_is_not_a_move():
    session = scripted_session([
        [1, 0],
        [1, 0],
    ])
    assert not is_valid_move(session.world, 0, 1)


def test_invalid_resolve_changes_nothing():
    session = scripted_session(CROSS)
    before = sorted(tiles_view(session.world))
    assert resolve_move(session.world, 2, 3) == set()
    assert sorted(tiles_view(session.world)) == before


def test_region_does_not_cross_empty_cells():
    session = scripted_session([
        [1, 1, 0, 1],
        [0, 0, 0, 1],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    assert find_region(session.world, 0, 0) == {(0, 0), (0, 1)}


def test_large_uniform_board_does_not_recurse():
    width = 40
    world = create_world(width, color_source=SequenceColorSource([1]))
    BoardSystem(world, EventBus(), width)
    assert len(find_region(world, 0, 0)) == width * width


def test_no_valid_moves_on_checkerboard():
    session = scripted_session([
        [1, 2, 1, 2],
        [2, 1, 2, 1],
        [1, 2, 1, 2],
        [2, 1, 2, 1],
    ])
    assert not has_valid_moves(session.world)


def test_single_pair_is_a_valid_move():
    rows = [
        [1, 2, 1, 2],
        [2, 1, 2, 1],
        [1, 2, 1, 2],
        [2, 1, 2, 2],
    ]
    session = scripted_session(rows)
    assert has_valid_moves(session.world)
    load_grid(session.world, [
        [1, 2, 1, 2],
        [2, 1, 2, 1],
        [1, 2, 1, 2],
        [1, 1, 2, 1],
    ])
    assert has_valid_moves(session.world)


def test_same_colors_separated_by_gaps_are_not_moves():
    session = scripted_session([
        [1, 0, 1],
        [0, 0, 0],
        [1, 0, 1],
    ])
    assert not has_valid_moves(session.world)
