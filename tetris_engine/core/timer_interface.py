"""
Abstract tick source for the Tetris engine.

The session starts, stops and retimes its tick source but never owns a
thread or clock itself.
"""

from abc import ABC, abstractmethod


class TimerInterface(ABC):
    """Periodic timer that drives GameInterface.tick()."""

    @abstractmethod
    def start(self) -> None:
        """Start (or resume) delivering ticks."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop delivering ticks."""
        pass

    @abstractmethod
    def set_interval(self, interval_ms: int) -> None:
        """
        Change the delay between ticks.

        Args:
            interval_ms: Milliseconds between ticks, applied immediately
        """
        pass

    @property
    def is_running(self) -> bool:
        return False


class NullTimer(TimerInterface):
    """Timer that only remembers its settings; ticks are fed by hand."""

    def __init__(self, interval_ms: int = 0):
        self.interval_ms = interval_ms
        self._running = False

    def start(self) -> None:
        self._running = True

    def stop(self) -> None:
        self._running = False

    def set_interval(self, interval_ms: int) -> None:
        self.interval_ms = interval_ms

    @property
    def is_running(self) -> bool:
        return self._running
