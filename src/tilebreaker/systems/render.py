from esper import World

from tilebreaker.components.game_state import GameMode
from tilebreaker.constants import TILE_PADDING
from tilebreaker.events.bus import EventBus, EVENT_GAME_OVER, EVENT_NEW_GAME_STARTED
from tilebreaker.rendering.board_renderer import BoardRenderer
from tilebreaker.systems.board_ops import get_board, tiles_view
from tilebreaker.ui.layout import compute_board_geometry
from tilebreaker.world import get_game_state, get_score


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        self.event_bus.subscribe(EVENT_NEW_GAME_STARTED, self.on_new_game_started)
        self._board_renderer = BoardRenderer(padding=TILE_PADDING)
        self.banner: str | None = None
        self._window_size = (self.window.width, self.window.height)
        self.geometry = self._recalculate_geometry()

    def notify_resize(self, width: int, height: int):
        self._window_size = (width, height)
        self.geometry = self._recalculate_geometry()

    def _recalculate_geometry(self):
        """(tile_size, start_x, start_y) for the current window size."""
        width, height = self._window_size
        return compute_board_geometry(width, height, get_board(self.world).width)

    def on_game_over(self, sender, **kwargs):
        self.banner = f"Game over! Final score: {kwargs.get('score', 0)}  (click or press N)"

    def on_new_game_started(self, sender, **kwargs):
        self.banner = None

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        try:
            arcade.get_window()
        except Exception:
            return
        width = get_board(self.world).width
        tile_size, start_x, start_y = self.geometry
        self._board_renderer.render(arcade, tiles_view(self.world), width, tile_size, start_x, start_y)
        board_top = start_y + width * tile_size
        score = get_score(self.world).value
        arcade.draw_text(
            f"Score: {score}",
            start_x,
            board_top + 12,
            arcade.color.WHITE,
            18,
        )
        if get_game_state(self.world).mode == GameMode.GAME_OVER and self.banner:
            center_x = self._window_size[0] / 2
            center_y = start_y + width * tile_size / 2
            arcade.draw_lbwh_rectangle_filled(0, center_y - 30, self._window_size[0], 60, (0, 0, 0, 200))
            arcade.draw_text(
                self.banner,
                center_x,
                center_y,
                arcade.color.WHITE,
                20,
                anchor_x="center",
                anchor_y="center",
            )
