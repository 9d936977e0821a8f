import os
import sys

import matplotlib

matplotlib.use("Agg")

# Add src to the path so tests run without installing the package
SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

import itertools
from typing import List

import pytest

from maze_game.console import LineIO


class ScriptedLineIO(LineIO):
    """Feeds canned answers to the game and records everything it prints."""

    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("Failed to read line: end of input")
        return self.answers.pop(0)

    def write_line(self, text: str = ""):
        self.lines.append(text)


class StubRandom:
    """Replays fixed values from random(), counting the draws."""

    def __init__(self, values):
        self._values = itertools.cycle(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return next(self._values)


@pytest.fixture
def scripted_io():
    return ScriptedLineIO


@pytest.fixture
def stub_random():
    return StubRandom
