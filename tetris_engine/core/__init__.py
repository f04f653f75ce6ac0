"""
Core abstractions for the Tetris engine.

Provides abstract interfaces for the game session, its tick source and renderers.
"""

from .game_interface import GameInterface
from .timer_interface import TimerInterface, NullTimer
from .renderer_interface import RendererInterface

__all__ = [
    'GameInterface',
    'TimerInterface',
    'NullTimer',
    'RendererInterface',
]
