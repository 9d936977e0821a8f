"""Compass directions."""

from enum import Enum
from typing import List, Tuple


class Direction(Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @classmethod
    def all(cls) -> List['Direction']:
        return [cls.NORTH, cls.SOUTH, cls.EAST, cls.WEST]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def opposite(self) -> 'Direction':
        return _OPPOSITES[self]

    @property
    def step_vector(self) -> Tuple[int, int]:
        return _STEP_VECTORS[self]


_LABELS = {
    Direction.NORTH: "North",
    Direction.SOUTH: "South",
    Direction.EAST: "East",
    Direction.WEST: "West",
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_STEP_VECTORS = {
    Direction.NORTH: (0, 1),
    Direction.SOUTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}
