import random

from esper import World

from tilebreaker.components.game_state import GameState, GameMode
from tilebreaker.components.score import Score
from tilebreaker.constants import COLOR_COUNT, GRID_SIZE
from tilebreaker.utils.color_source import ColorSource, RandomColorSource


def validate_width(width) -> int:
    if isinstance(width, bool) or not isinstance(width, int):
        raise ValueError(f"Board width must be an int, got {width!r}")
    if width <= 0:
        raise ValueError(f"Board width must be positive, got {width}")
    return width


def validate_color_count(color_count) -> int:
    if isinstance(color_count, bool) or not isinstance(color_count, int):
        raise ValueError(f"color_count must be an int, got {color_count!r}")
    if color_count < 2:
        raise ValueError(f"color_count must be at least 2 (got {color_count}); no move would ever be possible")
    return color_count


def create_world(
    width: int = GRID_SIZE,
    *,
    color_count: int | None = None,
    rng: random.Random | None = None,
    color_source: ColorSource | None = None,
) -> World:
    """Create the world resources shared by every system.

    ``color_source`` wins over ``rng`` when both are given. An explicit
    ``color_count`` is always validated and caps the colors a source may
    produce. The board itself is created by BoardSystem.
    """
    validate_width(width)
    if color_count is not None:
        validate_color_count(color_count)
    world = World()
    setattr(world, "random", rng or random.Random())
    if color_source is None:
        color_source = RandomColorSource(color_count or COLOR_COUNT, world.random)
    setattr(world, "color_source", color_source)
    if color_count is None:
        color_count = getattr(color_source, "color_count", None)
    setattr(world, "color_count", color_count)

    world.create_entity(GameState(mode=GameMode.PLAYING), Score())
    return world


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState not found; build the world with create_world()")


def get_score(world: World) -> Score:
    for _, score in world.get_component(Score):
        return score
    raise RuntimeError("Score not found; build the world with create_world()")
