"""Shifting maze game implementation."""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .console import LineIO
from .direction import Direction
from .player import Player
from .point import Point
from .walls import WallState


WELCOME_TEXT = """You wake up to find yourself in a mysterious maze.

Everywhere you step, the walls twist and shift. You can always
retrace your last step, but nothing else seems constant.

Nearby you can sense the presence of a key. Can you find it
and escape the maze?
"""

DIRECTION_PROMPT = "Which direction will you go (N/S/E/W, or Q to quit)?"
QUIT_TOKEN = "q"

_DIRECTION_TOKENS = {
    "n": Direction.NORTH,
    "s": Direction.SOUTH,
    "e": Direction.EAST,
    "w": Direction.WEST,
}


class GameState(Enum):
    PLAYING = "playing"
    ESCAPED = "escaped"
    QUIT = "quit"


class InvalidDirectionError(ValueError):
    pass


@dataclass
class GameStats:
    total_turns: int = 0
    moves: int = 0
    blocked_attempts: int = 0
    invalid_inputs: int = 0
    key_found: bool = False
    outcome: str = GameState.PLAYING.value
    trail: List[Point] = None

    def __post_init__(self):
        if self.trail is None:
            self.trail = [Point(0, 0)]


def random_integer(r: random.Random, lower: int, upper: int) -> int:
    """Uniform integer from lower to upper, both ends included."""
    if upper < lower:
        raise ValueError(f"upper must be >= lower, got lower={lower}, upper={upper}")
    return r.randint(lower, upper)


def resolve_direction(text: str) -> Optional[Direction]:
    """
    Turn one line of player input into a direction.

    Returns None for the quit token. Raises InvalidDirectionError, carrying the
    message to show the player, for anything else that is not N/S/E/W.
    """
    token = text.strip()
    # Length in UTF-8 bytes.
    if len(token.encode("utf-8")) != 1:
        raise InvalidDirectionError("Error: must give a direction")

    token = token.lower()
    if token == QUIT_TOKEN:
        return None
    if token not in _DIRECTION_TOKENS:
        raise InvalidDirectionError("Error: direction must be N,S,E, or W")
    return _DIRECTION_TOKENS[token]


class MazeGame:
    def __init__(
        self,
        bound: int = 5,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            bound: key and exit are placed with both coordinates in [-bound, bound]
            seed: seed for the game's random source, ignored when rng is given
            rng: random source to use instead of a freshly seeded one
        """
        if bound < 0:
            raise ValueError(f"bound must be non-negative, got {bound}")

        self.bound = bound
        self.seed = seed
        self._injected_random = rng
        self._random: Optional[random.Random] = None
        self.player: Optional[Player] = None
        self.walls: Optional[WallState] = None
        self.key_location: Optional[Point] = None
        self.exit_location: Optional[Point] = None
        self.state: Optional[GameState] = None
        self.stats: Optional[GameStats] = None

    def reset(self, seed: Optional[int] = None) -> str:
        if seed is not None:
            self.seed = seed

        if self._injected_random is not None:
            r = self._injected_random
        else:
            r = random.Random(self.seed)
        self._random = r

        self.player = Player()
        self.key_location = Point(
            random_integer(r, -self.bound, self.bound),
            random_integer(r, -self.bound, self.bound),
        )
        self.exit_location = Point(
            random_integer(r, -self.bound, self.bound),
            random_integer(r, -self.bound, self.bound),
        )
        # First move may go anywhere.
        self.walls = WallState(r)
        self.state = GameState.PLAYING
        self.stats = GameStats()
        return WELCOME_TEXT

    def _check_playing(self):
        if self.state is None:
            raise RuntimeError("Game has not been reset. Please call reset() first.")
        if self.state is not GameState.PLAYING:
            raise RuntimeError(f"Game is already over ({self.state.value}). Please reset.")

    def objective(self) -> Tuple[str, Point]:
        if self.player.has_key:
            return "exit", self.exit_location
        return "key", self.key_location

    def wall_warnings(self) -> List[str]:
        return [f"  There is a wall to the {direction.label}" for direction in self.walls.blocked_directions()]

    def ask_direction(self, line_io: LineIO) -> Optional[Direction]:
        """Prompt until the player names a direction (returned) or quits (None)."""
        while True:
            user_input = line_io.read_line(DIRECTION_PROMPT)
            try:
                return resolve_direction(user_input)
            except InvalidDirectionError as e:
                self.stats.invalid_inputs += 1
                line_io.write_line(str(e))

    def step(self, direction: Direction) -> Tuple[List[str], bool, Dict[str, Any]]:
        self._check_playing()
        self.stats.total_turns += 1

        target, target_location = self.objective()
        last_distance = self.player.location.distance(target_location)

        if not self.walls.is_open(direction):
            self.stats.blocked_attempts += 1
            lines = ["  You can't go that way, there's a wall!"]
            return lines, False, self._info(False, False, last_distance)

        self.player.step(direction)
        self.stats.moves += 1
        self.stats.trail.append(self.player.location)

        distance = self.player.location.distance(target_location)
        key_found = False
        lines = []

        if distance == 0:
            lines.append(f"You found the {target}!")
            if self.player.has_key:
                lines.append("You have escaped, congratulations!")
                self.state = GameState.ESCAPED
                self.stats.outcome = self.state.value
                return lines, True, self._info(True, False, distance)
            lines.append("You can now sense the exit...")
            self.player.has_key = True
            self.stats.key_found = True
            key_found = True
        elif distance < last_distance:
            lines.append(f"  You sense you are getting closer to the {target}...")
        elif distance == last_distance:
            lines.append(f"  You sense the {target} is just as far as it was before...")
        else:
            lines.append(f"  You sense you are getting further from the {target}...")

        self.walls.regenerate(direction)
        return lines, False, self._info(True, key_found, distance)

    def quit(self) -> List[str]:
        self._check_playing()
        self.state = GameState.QUIT
        self.stats.outcome = self.state.value
        return ["Bye!"]

    def play(self, line_io: LineIO) -> GameState:
        if self.state is None:
            self.reset()
        self._check_playing()
        line_io.write_line(WELCOME_TEXT)

        while self.state is GameState.PLAYING:
            line_io.write_lines(self.wall_warnings())

            direction = self.ask_direction(line_io)
            if direction is None:
                line_io.write_lines(self.quit())
                break

            lines, _, _ = self.step(direction)
            line_io.write_lines(lines)

        return self.state

    def _info(self, was_valid_move: bool, key_found: bool, distance: int) -> Dict[str, Any]:
        return {
            "wasValidMove": was_valid_move,
            "keyFound": key_found,
            "escaped": self.state is GameState.ESCAPED,
            "distance": distance,
            "location": self.player.location.to_dict(),
            "hasKey": self.player.has_key,
            "moves": self.stats.moves,
            "walls": self.walls.as_dict(),
        }

    def get_record(self) -> Dict[str, Any]:
        """Summary of the session, suitable for json.dump."""
        if self.state is None:
            raise RuntimeError("Game has not been reset. Please call reset() first.")
        return {
            'outcome': self.stats.outcome,
            'key_found': self.stats.key_found,
            'total_turns': self.stats.total_turns,
            'moves': self.stats.moves,
            'blocked_attempts': self.stats.blocked_attempts,
            'invalid_inputs': self.stats.invalid_inputs,
            'bound': self.bound,
            'seed': self.seed,
            'key_location': self.key_location.to_dict(),
            'exit_location': self.exit_location.to_dict(),
            'final_location': self.player.location.to_dict(),
            'trail': [point.to_dict() for point in self.stats.trail],
        }
