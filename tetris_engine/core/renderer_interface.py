"""
Abstract renderer interface for the Tetris engine.

Renderers read a session between dispatches and never mutate it.
"""

from abc import ABC, abstractmethod
from typing import Any

from .game_interface import GameInterface


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers turn the session's read-only queries into output.
    """

    @abstractmethod
    def render(self, session: GameInterface) -> Any:
        """
        Render the current session state.

        Args:
            session: The session to read from

        Returns:
            Renderer-specific output
        """
        pass

    def close(self) -> None:
        """Release any resources held by the renderer."""
        pass
