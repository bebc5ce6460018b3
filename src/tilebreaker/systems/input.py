import logging

from tilebreaker.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
    EVENT_NEW_GAME_REQUEST,
)
from tilebreaker.components.board import Board
from tilebreaker.components.game_state import GameMode, GameState
from tilebreaker.ui.layout import pixel_to_cell

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1  # arcade.MOUSE_BUTTON_LEFT


class InputSystem:
    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None or button != LEFT_BUTTON:
            return
        if self._game_over():
            # Any click after the end of a game starts the next one.
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
            return
        width = self._board_width()
        if width is None:
            return
        cell = pixel_to_cell(x, y, self.window.width, self.window.height, width)
        if cell is None:
            return
        row, column = cell
        logger.debug("Click (%s, %s) -> cell (%d, %d)", x, y, row, column)
        self.event_bus.emit(EVENT_TILE_CLICK, row=row, column=column)

    def _game_over(self) -> bool:
        states = list(self.world.get_component(GameState))
        if not states:
            return False
        return states[0][1].mode == GameMode.GAME_OVER

    def _board_width(self):
        for _, board in self.world.get_component(Board):
            return board.width
        return None
