import os
import itertools

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from tetris_board import empty_board
from tetris_engine import TetrisEngine


class ScriptedRandom:
    """Deals piece names from a fixed cycle."""
    def __init__(self, pieces):
        self.seed = "scripted"
        self._it = itertools.cycle(pieces)

    def next_piece(self):
        return next(self._it)


@pytest.fixture
def board():
    return empty_board()


@pytest.fixture
def make_engine():
    def make(pieces=("T", "O"), board=None):
        return TetrisEngine(ScriptedRandom(pieces), board=board)
    return make


@pytest.fixture
def engine(make_engine):
    e = make_engine()
    e.start()
    return e
