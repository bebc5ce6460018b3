import logging

from esper import World

from tilebreaker.components.board import Board
from tilebreaker.components.game_state import GameMode
from tilebreaker.constants import GRID_SIZE
from tilebreaker.events.bus import EventBus, EVENT_NEW_GAME_REQUEST, EVENT_NEW_GAME_STARTED
from tilebreaker.systems.board_ops import clear_board, fill_column_random
from tilebreaker.world import get_game_state, get_score, validate_width

logger = logging.getLogger(__name__)


class BoardSystem:
    def __init__(self, world: World, event_bus: EventBus, width: int = GRID_SIZE, *, fill: bool = True):
        self.world = world
        self.event_bus = event_bus
        self.width = validate_width(width)
        # Single board entity; tiles are separate entities indexed by it.
        self.board_entity = self.world.create_entity(Board(width=self.width))
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        if fill:
            self._fill_board()

    def _fill_board(self):
        for column in range(self.width):
            fill_column_random(self.world, column)

    def on_new_game_request(self, sender, **kwargs):
        self.reset()

    def reset(self):
        clear_board(self.world)
        self._fill_board()
        get_score(self.world).value = 0
        get_game_state(self.world).mode = GameMode.PLAYING
        logger.info("New %dx%d game started", self.width, self.width)
        self.event_bus.emit(EVENT_NEW_GAME_STARTED, width=self.width)
