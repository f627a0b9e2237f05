"""Shared fixtures for the game tests."""
import random
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from flappy_dragon.console import Console
from flappy_dragon.game_state import State


@pytest.fixture
def console():
    return Console()


@pytest.fixture
def state():
    """A game state with a fixed seed so obstacle placement is repeatable."""
    return State(random.Random(1234))
