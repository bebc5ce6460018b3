from dataclasses import dataclass

@dataclass(slots=True)
class Score:
    """Singleton component holding the player's score. Only ever grows."""
    value: int = 0
