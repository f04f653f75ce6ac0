"""
Tetris game module: pieces, board, rules engine and best-score store.
"""

from .piece import Piece, Shape, PLAYABLE_SHAPES, TETROMINO_OFFSETS
from .board import Board
from .config import TetrisConfig
from .score_store import ScoreStore, GameOverResult, NO_SCORE
from .session import TetrisSession, Command, Status

__all__ = [
    'Piece',
    'Shape',
    'PLAYABLE_SHAPES',
    'TETROMINO_OFFSETS',
    'Board',
    'TetrisConfig',
    'ScoreStore',
    'GameOverResult',
    'NO_SCORE',
    'TetrisSession',
    'Command',
    'Status',
]
