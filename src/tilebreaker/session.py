"""Explicitly owned game session.

A GameSession bundles one world, one event bus and the engine systems. It is
the surface a front end talks to: query the board, submit clicks, ask whether
the game is over.
"""
from __future__ import annotations

import random
from typing import List

from tilebreaker.components.game_state import GameMode
from tilebreaker.constants import GRID_SIZE
from tilebreaker.events.bus import EventBus
from tilebreaker.systems.board import BoardSystem
from tilebreaker.systems.board_ops import TileEntry, get_board, tiles_view
from tilebreaker.systems.match import has_valid_moves, is_valid_move
from tilebreaker.systems.match_resolution import MatchResolutionSystem, MoveResult
from tilebreaker.utils.color_source import ColorSource
from tilebreaker.world import create_world, get_game_state, get_score


class GameSession:
    def __init__(
        self,
        width: int = GRID_SIZE,
        *,
        event_bus: EventBus | None = None,
        color_count: int | None = None,
        rng: random.Random | None = None,
        color_source: ColorSource | None = None,
        fill: bool = True,
    ):
        self.event_bus = event_bus or EventBus()
        self.world = create_world(width, color_count=color_count, rng=rng, color_source=color_source)
        self.board_system = BoardSystem(self.world, self.event_bus, width, fill=fill)
        self.match_resolution_system = MatchResolutionSystem(self.world, self.event_bus)

    @property
    def score(self) -> int:
        return get_score(self.world).value

    @property
    def width(self) -> int:
        return get_board(self.world).width

    @property
    def mode(self) -> GameMode:
        return get_game_state(self.world).mode

    def tiles_view(self) -> List[TileEntry]:
        """Fresh (row, column, color) snapshot of every occupied cell."""
        return tiles_view(self.world)

    def is_valid_move(self, row: int, column: int) -> bool:
        return is_valid_move(self.world, row, column)

    def perform_move(self, row: int, column: int) -> MoveResult:
        return self.match_resolution_system.perform_move(row, column)

    def has_valid_moves(self) -> bool:
        return has_valid_moves(self.world)

    def restart(self) -> None:
        self.board_system.reset()


def new_game(
    width: int = GRID_SIZE,
    *,
    color_count: int | None = None,
    rng: random.Random | None = None,
    color_source: ColorSource | None = None,
    event_bus: EventBus | None = None,
) -> GameSession:
    """Start a fresh game with every column randomly filled and score 0."""
    return GameSession(
        width,
        event_bus=event_bus,
        color_count=color_count,
        rng=rng,
        color_source=color_source,
    )
