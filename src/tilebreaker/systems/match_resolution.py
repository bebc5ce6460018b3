import logging
from dataclasses import dataclass, field
from typing import List, Set, Tuple

from esper import World

from tilebreaker.components.game_state import GameMode
from tilebreaker.events.bus import (EventBus, EVENT_TILE_CLICK, EVENT_MOVE_REJECTED, EVENT_REGION_CLEARED,
                                    EVENT_GRAVITY_APPLIED, EVENT_COLUMNS_SHIFTED, EVENT_SCORE_CHANGED,
                                    EVENT_REFILL_COMPLETED, EVENT_MOVE_COMPLETED, EVENT_GAME_OVER)
from tilebreaker.systems.board_ops import get_tile, restore_tiles, tiles_view
from tilebreaker.systems.coordinates import Position
from tilebreaker.systems.gravity import FallMove, apply_fall, refill_empty_columns, shift_columns_left
from tilebreaker.systems.match import has_valid_moves, is_valid_move, resolve_move
from tilebreaker.world import get_game_state, get_score

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MoveResult:
    """What a single click did to the board.

    ``score_delta`` always equals ``len(refilled_columns)``.
    """
    valid: bool
    cleared: Set[Position] = field(default_factory=set)
    color: int | None = None
    fall_moves: List[FallMove] = field(default_factory=list)
    column_swaps: List[Tuple[int, int]] = field(default_factory=list)
    refilled_columns: List[int] = field(default_factory=list)
    score_delta: int = 0


class MatchResolutionSystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        column = kwargs.get('column')
        if row is None or column is None:
            return
        if get_game_state(self.world).mode != GameMode.PLAYING:
            return
        self.perform_move(row, column)

    def perform_move(self, row: int, column: int) -> MoveResult:
        """Run one full move: clear, fall, shift left, score, refill.

        Invalid clicks leave the world untouched, and so does a move whose
        refill fails: the board is restored before the error propagates.
        """
        if not is_valid_move(self.world, row, column):
            logger.debug("Rejected move at (%s, %s)", row, column)
            self.event_bus.emit(EVENT_MOVE_REJECTED, row=row, column=column)
            return MoveResult(valid=False)

        color = get_tile(self.world, row, column).color
        snapshot = tiles_view(self.world)
        try:
            cleared = resolve_move(self.world, row, column)
            moves = apply_fall(self.world)
            swaps = shift_columns_left(self.world)
            # Scoring counts the empty columns left by the shift, i.e. the ones refilled here.
            refilled = refill_empty_columns(self.world)
        except ValueError:
            restore_tiles(self.world, snapshot)
            raise
        score = get_score(self.world)
        score.value += len(refilled)

        logger.info("Cleared %d tiles at (%s, %s)", len(cleared), row, column)
        if swaps:
            logger.debug("Column swaps: %s", swaps)
        self.event_bus.emit(EVENT_REGION_CLEARED, positions=sorted(cleared), color=color)
        self.event_bus.emit(EVENT_GRAVITY_APPLIED, moves=moves)
        self.event_bus.emit(EVENT_COLUMNS_SHIFTED, swaps=swaps)
        if refilled:
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=score.value, delta=len(refilled))
            self.event_bus.emit(EVENT_REFILL_COMPLETED, columns=refilled)

        result = MoveResult(
            valid=True,
            cleared=cleared,
            color=color,
            fall_moves=moves,
            column_swaps=swaps,
            refilled_columns=refilled,
            score_delta=len(refilled),
        )
        self.event_bus.emit(EVENT_MOVE_COMPLETED, result=result)
        self._check_game_over()
        return result

    def _check_game_over(self):
        if has_valid_moves(self.world):
            return
        state = get_game_state(self.world)
        state.mode = GameMode.GAME_OVER
        score = get_score(self.world).value
        logger.info("No valid moves left; final score %d", score)
        self.event_bus.emit(EVENT_GAME_OVER, score=score)
