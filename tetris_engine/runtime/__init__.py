"""
Runtime module: the serialized event loop and its tick timer.
"""

from .driver import GameDriver, TickTimer, EventType

__all__ = [
    'GameDriver',
    'TickTimer',
    'EventType',
]
