"""
Shifting Maze - a small text game.

The player hunts for a hidden key and then the exit of a maze whose walls
rearrange themselves after every step.
"""

from .direction import Direction
from .game import GameState, MazeGame
from .point import Point
from .visualize import visualize_trail

__all__ = ['MazeGame', 'GameState', 'Direction', 'Point', 'visualize_trail']
__version__ = '1.0.0'
