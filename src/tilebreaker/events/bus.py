from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that nobody keeps in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"            # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"              # payload: row, column


# ============================================================================
# MOVE RESOLUTION
# ============================================================================
EVENT_MOVE_REJECTED = "move_rejected"        # payload: row, column
EVENT_REGION_CLEARED = "region_cleared"      # payload: positions=[(r,c),...], color=int
EVENT_GRAVITY_APPLIED = "gravity_applied"    # payload: moves=[((r,c),(r,c)),...]
EVENT_COLUMNS_SHIFTED = "columns_shifted"    # payload: swaps=[(a,b),...]
EVENT_SCORE_CHANGED = "score_changed"        # payload: score=int, delta=int
EVENT_REFILL_COMPLETED = "refill_completed"  # payload: columns=[int,...]
EVENT_MOVE_COMPLETED = "move_completed"      # payload: result=MoveResult


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_NEW_GAME_REQUEST = "new_game_request"  # payload: None
EVENT_NEW_GAME_STARTED = "new_game_started"  # payload: width=int
EVENT_GAME_OVER = "game_over"                # payload: score=int
