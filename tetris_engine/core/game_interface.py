"""
Abstract game interface for the Tetris engine.

The rules engine implements GameInterface; drivers and renderers only talk
to it through these methods.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List


class GameInterface(ABC):
    """
    Abstract base class for a single-player game session.

    A session handles the core logic, rules and state. It never draws,
    reads input or blocks; a driver feeds it ticks and commands.
    """

    @abstractmethod
    def start(self) -> bool:
        """
        Start (or restart) the session from a clean state.

        Returns:
            True if a new game was started
        """
        pass

    @abstractmethod
    def tick(self) -> bool:
        """
        Advance the session by one timer step.

        Returns:
            True if the session state changed
        """
        pass

    @abstractmethod
    def command(self, kind: int) -> bool:
        """
        Apply a player command.

        Args:
            kind: The command to apply (game-specific encoding)

        Returns:
            True if the command was accepted and changed the state
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    @property
    @abstractmethod
    def command_names(self) -> List[str]:
        """
        Human-readable names for each command.

        Returns:
            List of command names indexed by command number
        """
        pass

    # Optional recording support
    def start_recording(self) -> None:
        """Start recording state snapshots for replay."""
        pass

    def stop_recording(self) -> List[Dict[str, Any]]:
        """
        Stop recording and return recorded snapshots.

        Returns:
            List of state dictionaries
        """
        return []

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
