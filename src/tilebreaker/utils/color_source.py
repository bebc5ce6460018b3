from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence


class ColorSource(Protocol):
    """Anything able to hand out the color of the next spawned tile."""

    def next_color(self) -> int:
        ...


@dataclass(slots=True)
class RandomColorSource:
    """Uniform colors in ``1..color_count`` drawn from an injectable RNG."""

    color_count: int
    rng: random.Random | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.color_count < 2:
            raise ValueError(f"color_count must be at least 2 (got {self.color_count}); no move would ever be possible")
        if self.rng is None:
            self.rng = random.Random()

    def next_color(self) -> int:
        return self.rng.randint(1, self.color_count)


@dataclass(slots=True)
class SequenceColorSource:
    """Replays a fixed list of colors, wrapping around when exhausted.

    Mostly useful for scripted boards and tests where refills must be known up front.
    """

    colors: Sequence[int]
    _values: List[int] = field(init=False, repr=False)
    _index: int = field(init=False, default=0, repr=False)

    def __post_init__(self) -> None:
        values = [int(c) for c in self.colors]
        if not values:
            raise ValueError("SequenceColorSource needs at least one color")
        invalid = [c for c in values if c < 1]
        if invalid:
            raise ValueError(f"Tile colors must be >= 1, got {invalid}")
        self._values = values

    def next_color(self) -> int:
        color = self._values[self._index % len(self._values)]
        self._index += 1
        return color
