from dataclasses import dataclass

@dataclass(slots=True)
class Tile:
    """One colored tile occupying a board cell.

    ``row`` 0 is the bottom of the board. ``color`` is 1..K; empty cells have no
    Tile at all. Position fields are rewritten when the tile falls or its column
    is shifted, the board index is updated alongside.
    """
    row: int
    column: int
    color: int
