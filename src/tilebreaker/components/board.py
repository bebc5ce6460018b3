from dataclasses import dataclass, field
from typing import Dict

@dataclass(slots=True)
class Board:
    width: int
    # coordinate hash -> tile entity; a key is present iff the cell is occupied
    tiles: Dict[int, int] = field(default_factory=dict)
