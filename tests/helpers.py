from __future__ import annotations

from typing import Sequence

from tilebreaker.session import GameSession
from tilebreaker.systems.board_ops import load_grid, tiles_view
from tilebreaker.utils.color_source import SequenceColorSource


def scripted_session(rows: Sequence[Sequence[int]], refill: Sequence[int] = (9,)) -> GameSession:
    """Session whose board is exactly ``rows`` (rows[0] is the bottom row).

    Refilled columns draw from ``refill`` so tests can tell new tiles apart.
    """
    session = GameSession(len(rows), color_source=SequenceColorSource(refill), fill=False)
    load_grid(session.world, rows)
    return session


def grid_of(session: GameSession) -> list[list[int]]:
    """Dense rows (bottom first) with 0 for empty cells."""
    width = session.width
    grid = [[0] * width for _ in range(width)]
    for row, column, color in tiles_view(session.world):
        grid[row][column] = color
    return grid


class EventRecorder:
    def __init__(self, bus, *names: str):
        self.events: list[tuple[str, dict]] = []
        for name in names:
            bus.subscribe(name, self._make_handler(name))

    def _make_handler(self, name):
        def handler(sender, **payload):
            self.events.append((name, payload))
        return handler

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def payloads(self, name: str) -> list[dict]:
        return [payload for event, payload in self.events if event == name]
