"""Entry point for the Tile Breaker puzzle.

Sets up the game session, event bus, front-end systems and the Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color, key
from rich.logging import RichHandler

from tilebreaker.constants import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE
from tilebreaker.events.bus import EVENT_MOUSE_PRESS, EVENT_NEW_GAME_REQUEST
from tilebreaker.session import new_game
from tilebreaker.systems.input import InputSystem
from tilebreaker.systems.render import RenderSystem

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler()],
)


class TileBreakerWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.session = new_game()
        self.event_bus = self.session.event_bus
        self.world = self.session.world
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        set_background_color(color.DARK_SLATE_GRAY)

    def on_resize(self, width: int, height: int):
        # pyglet may dispatch a resize before __init__ has built the render system
        render_system = getattr(self, "render_system", None)
        if render_system is not None:
            render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.N:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
        elif symbol == key.ESCAPE:
            self.close()


def main():
    TileBreakerWindow()
    run()


if __name__ == "__main__":
    main()
