"""
Tetris rules configuration and the level speed curve.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class TetrisConfig:
    """Configuration for the Tetris rules engine."""

    # Board dimensions
    board_width: int = 10
    board_height: int = 22

    # Speed curve (milliseconds between ticks)
    min_interval: int = 100
    max_interval: int = 370
    interval_step: int = 30   # Faster by this much per level

    # Rows (= points) needed per level
    points_per_level: int = 10

    def __post_init__(self):
        if self.board_width <= 0 or self.board_height <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {self.board_width}x{self.board_height}"
            )
        if self.min_interval <= 0 or self.min_interval > self.max_interval:
            raise ValueError(
                f"Invalid tick interval range: {self.min_interval}..{self.max_interval}"
            )
        if self.interval_step < 0:
            raise ValueError(f"interval_step must not be negative, got {self.interval_step}")
        if self.points_per_level <= 0:
            raise ValueError(f"points_per_level must be positive, got {self.points_per_level}")

    def level_for(self, score: int) -> int:
        """Level reached with the given score."""
        return score // self.points_per_level

    def tick_interval_for(self, level: int) -> int:
        """Milliseconds between ticks at a level, clamped to min_interval."""
        return max(self.min_interval, self.max_interval - level * self.interval_step)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "board_width": self.board_width,
            "board_height": self.board_height,
            "min_interval": self.min_interval,
            "max_interval": self.max_interval,
            "interval_step": self.interval_step,
            "points_per_level": self.points_per_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TetrisConfig":
        """Create config from dictionary."""
        return cls(
            board_width=data.get("board_width", 10),
            board_height=data.get("board_height", 22),
            min_interval=data.get("min_interval", 100),
            max_interval=data.get("max_interval", 370),
            interval_step=data.get("interval_step", 30),
            points_per_level=data.get("points_per_level", 10),
        )
