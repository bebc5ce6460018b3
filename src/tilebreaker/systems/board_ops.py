from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from esper import World

from tilebreaker.components.board import Board
from tilebreaker.components.tile import Tile
from tilebreaker.systems.coordinates import OUT_OF_BOUNDS, hash_coordinates, is_in_bounds
from tilebreaker.utils.color_source import ColorSource

TileEntry = Tuple[int, int, int]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found; start a new game before touching the board")


def get_color_source(world: World) -> ColorSource:
    source = getattr(world, "color_source", None)
    if source is None:
        raise RuntimeError("World has no color source; create it with create_world()")
    return source


def put_tile(world: World, tile: Tile) -> int:
    """Place ``tile`` at its own position, replacing any previous occupant."""
    board = get_board(world)
    key = hash_coordinates(board.width, tile.row, tile.column)
    if key == OUT_OF_BOUNDS:
        raise ValueError(f"Tile position ({tile.row}, {tile.column}) is outside a {board.width}x{board.width} board")
    if tile.color < 1:
        raise ValueError(f"Tile color must be >= 1, got {tile.color}")
    previous = board.tiles.get(key)
    if previous is not None:
        world.delete_entity(previous, immediate=True)
    entity = world.create_entity(tile)
    board.tiles[key] = entity
    return entity


def get_tile(world: World, row: int, column: int) -> Tile | None:
    board = get_board(world)
    entity = board.tiles.get(hash_coordinates(board.width, row, column))
    if entity is None:
        return None
    return world.component_for_entity(entity, Tile)


def has_tile(world: World, row: int, column: int) -> bool:
    board = get_board(world)
    return hash_coordinates(board.width, row, column) in board.tiles


def remove_tile(world: World, row: int, column: int) -> None:
    board = get_board(world)
    entity = board.tiles.pop(hash_coordinates(board.width, row, column), None)
    if entity is not None:
        world.delete_entity(entity, immediate=True)


def _take(board: Board, row: int, column: int) -> int | None:
    """Detach the tile entity at (row, column) from the index without deleting it."""
    return board.tiles.pop(hash_coordinates(board.width, row, column), None)


def _place(board: Board, world: World, entity: int, row: int, column: int) -> None:
    tile: Tile = world.component_for_entity(entity, Tile)
    tile.row = row
    tile.column = column
    board.tiles[hash_coordinates(board.width, row, column)] = entity


def move_tile_down(world: World, row: int, column: int) -> None:
    """Move the tile at (row, column) one cell towards row 0.

    The destination is not checked; gravity only calls this over an empty cell.
    """
    board = get_board(world)
    if not is_in_bounds(board.width, row - 1, column):
        return
    entity = _take(board, row, column)
    if entity is None:
        return
    _place(board, world, entity, row - 1, column)


def draw_colors(world: World, count: int, color_source: ColorSource | None = None) -> List[int]:
    """Draw ``count`` colors and check all of them before anyone places a tile.

    Colors must be ints >= 1 and, when the world knows its color count, <= it.
    """
    source = color_source or get_color_source(world)
    limit = getattr(world, "color_count", None)
    colors = [source.next_color() for _ in range(count)]
    for color in colors:
        if isinstance(color, bool) or not isinstance(color, int) or color < 1:
            raise ValueError(f"Color source produced invalid color {color!r}")
        if limit is not None and color > limit:
            raise ValueError(f"Color source produced {color}, above the configured {limit} colors")
    return colors


def fill_column(world: World, column: int, colors: Sequence[int]) -> None:
    """Overwrite every cell of ``column``; ``colors[0]`` lands in row 0."""
    board = get_board(world)
    if not is_in_bounds(board.width, 0, column):
        return
    if len(colors) != board.width:
        raise ValueError(f"Column fill needs {board.width} colors, got {len(colors)}")
    for row, color in enumerate(colors):
        put_tile(world, Tile(row=row, column=column, color=color))


def fill_column_random(world: World, column: int, color_source: ColorSource | None = None) -> None:
    """Overwrite every cell of ``column`` with a freshly colored tile."""
    board = get_board(world)
    if not is_in_bounds(board.width, 0, column):
        return
    fill_column(world, column, draw_colors(world, board.width, color_source))


def is_column_empty(world: World, column: int) -> bool:
    board = get_board(world)
    return not any(hash_coordinates(board.width, row, column) in board.tiles for row in range(board.width))


def empty_columns(world: World) -> List[int]:
    board = get_board(world)
    return [column for column in range(board.width) if is_column_empty(world, column)]


def swap_columns(world: World, a: int, b: int) -> None:
    """Exchange the full contents of columns ``a`` and ``b`` row by row."""
    board = get_board(world)
    if a == b or not (is_in_bounds(board.width, 0, a) and is_in_bounds(board.width, 0, b)):
        return
    for row in range(board.width):
        from_a = _take(board, row, a)
        from_b = _take(board, row, b)
        if from_a is not None:
            _place(board, world, from_a, row, b)
        if from_b is not None:
            _place(board, world, from_b, row, a)


def tiles_view(world: World) -> List[TileEntry]:
    """Snapshot of every occupied cell as (row, column, color)."""
    board = get_board(world)
    snapshot: List[TileEntry] = []
    for entity in board.tiles.values():
        tile: Tile = world.component_for_entity(entity, Tile)
        snapshot.append((tile.row, tile.column, tile.color))
    return snapshot


def iter_tiles(world: World) -> Iterator[Tile]:
    board = get_board(world)
    for entity in list(board.tiles.values()):
        yield world.component_for_entity(entity, Tile)


def clear_board(world: World) -> None:
    board = get_board(world)
    for entity in board.tiles.values():
        world.delete_entity(entity, immediate=True)
    board.tiles.clear()


def load_grid(world: World, rows: Sequence[Sequence[int]]) -> None:
    """Replace the board contents with ``rows``.

    ``rows[0]`` is the bottom row; a 0 leaves the cell empty. Every row must be
    exactly ``width`` long and there must be ``width`` rows.
    """
    board = get_board(world)
    if len(rows) != board.width or any(len(r) != board.width for r in rows):
        raise ValueError(f"Grid must be {board.width}x{board.width}")
    clear_board(world)
    for row, values in enumerate(rows):
        for column, color in enumerate(values):
            if color:
                put_tile(world, Tile(row=row, column=column, color=color))


def restore_tiles(world: World, snapshot: Sequence[TileEntry]) -> None:
    """Put the board back to a ``tiles_view`` snapshot."""
    clear_board(world)
    for row, column, color in snapshot:
        put_tile(world, Tile(row=row, column=column, color=color))
