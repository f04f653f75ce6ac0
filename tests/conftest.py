"""
Pytest configuration and fixtures for Tetris engine tests.

Provides deterministic piece selection, throwaway score files and helpers
for building board positions.
"""

import random
import sys
from pathlib import Path

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


class ShapeSequence:
    """Stand-in for random.Random that deals shapes in a fixed order."""

    def __init__(self, shapes):
        self.shapes = list(shapes)
        self.index = 0

    def choice(self, seq):
        shape = self.shapes[self.index % len(self.shapes)]
        self.index += 1
        assert shape in seq
        return shape


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def shape_sequence():
    """Factory for fixed shape sequences, e.g. shape_sequence(Shape.I, Shape.O)."""
    def make(*shapes):
        return ShapeSequence(shapes)
    return make


@pytest.fixture
def score_path(tmp_path):
    """Path of a score file that does not exist yet."""
    return tmp_path / "Tetris.score"


@pytest.fixture
def null_timer():
    """Timer that records start/stop/interval without running a thread."""
    from tetris_engine.core.timer_interface import NullTimer

    return NullTimer()


@pytest.fixture
def make_session(null_timer, score_path):
    """Factory for sessions wired to a NullTimer and a temporary score store."""
    from tetris_engine.game.config import TetrisConfig
    from tetris_engine.game.score_store import ScoreStore
    from tetris_engine.game.session import TetrisSession

    def make(rng=None, config=None, with_store=True):
        return TetrisSession(
            config=config or TetrisConfig(),
            score_store=ScoreStore(score_path) if with_store else None,
            timer=null_timer,
            rng=rng or random.Random(0),
        )
    return make


@pytest.fixture
def fill_row():
    """Fill row y of a board, leaving the given columns empty."""
    from tetris_engine.game.piece import Shape

    def fill(board, y, gaps=(), shape=Shape.O):
        for x in range(board.width):
            if x not in gaps:
                board.set_cell(x, y, shape)
    return fill
