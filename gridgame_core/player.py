from __future__ import annotations

from dataclasses import dataclass

from .board import Coord
from .difficulty import Difficulty


@dataclass
class Player:
    """Mutable per-player state. Health at or below zero means dead."""
    name: str
    marker: str
    health: int
    position: Coord = (0, 0)
    has_bomb: bool = False
    has_count: bool = True  # one-shot enemy count
    cheat_mode: bool = False  # cosmetic, only affects rendering

    @classmethod
    def for_difficulty(cls, difficulty: Difficulty, name: str, marker: str) -> 'Player':
        return cls(name=name, marker=marker, health=difficulty.initial_health)

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    def toggle_cheat(self) -> bool:
        self.cheat_mode = not self.cheat_mode
        return self.cheat_mode
