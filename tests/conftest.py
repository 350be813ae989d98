"""Shared fixtures for marble draw tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path to import game modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from game.marble_game import MarbleGame


class ScriptedSource:
    """Random source that replays queued values, four per marble draw."""

    WHITE = 0.0
    BLACK = 0.99

    def __init__(self, values=()):
        self.values = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.values.pop(0)

    def queue_whites(self, *counts):
        for whites in counts:
            self.values.extend([self.WHITE] * whites + [self.BLACK] * (4 - whites))


@pytest.fixture
def source():
    return ScriptedSource()


@pytest.fixture
def game(source):
    """Fresh game drawing from the scripted source."""
    return MarbleGame(source=source)
