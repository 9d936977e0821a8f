"""Grid coordinates for the maze game."""

from dataclasses import dataclass
from typing import Dict

from .direction import Direction


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def distance(self, other: 'Point') -> int:
        """Number of steps between the two points (Manhattan distance)."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def moved(self, direction: Direction) -> 'Point':
        dx, dy = direction.step_vector
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
