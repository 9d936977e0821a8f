"""Player state."""

from .direction import Direction
from .point import Point


class Player:
    def __init__(self):
        self.location = Point(0, 0)
        self.has_key = False

    def step(self, direction: Direction):
        self.location = self.location.moved(direction)
