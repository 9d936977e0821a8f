"""Wall configuration around the player's current junction."""

import random
from typing import Dict, List, Optional

from .direction import Direction


class WallState:
    """
    Which directions are open from the junction the player stands on.

    Only the current junction is known. Every accepted move throws the old
    configuration away, so walking back to an earlier point usually finds
    different walls.
    """

    def __init__(self, r: Optional[random.Random] = None):
        self._random = r if r is not None else random.Random()
        self._open: Dict[Direction, bool] = {direction: True for direction in Direction.all()}

    def is_open(self, direction: Direction) -> bool:
        if direction not in self._open:
            raise ValueError(f"No wall state for direction: {direction!r}")
        return self._open[direction]

    def blocked_directions(self) -> List[Direction]:
        return [direction for direction in Direction.all() if not self._open[direction]]

    def regenerate(self, after_direction: Direction):
        """Reshuffle the walls after a move in `after_direction`; the way back stays open."""
        backtrack_direction = after_direction.opposite
        for direction in Direction.all():
            if direction == backtrack_direction:
                self._open[direction] = True
            else:
                self._open[direction] = self._random.random() < 0.5

    def as_dict(self) -> Dict[str, bool]:
        return {direction.value: is_open for direction, is_open in self._open.items()}
