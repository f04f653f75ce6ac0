"""
Tetromino pieces - shapes, offset tables and rotation.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple
import random


class Shape(IntEnum):
    """Cell value of the board; NO_BLOCK marks an empty cell / no active piece."""
    NO_BLOCK = 0
    Z = 1
    S = 2
    I = 3
    T = 4
    O = 5
    L = 6
    J = 7


# The 7 playable shapes (random selection never returns NO_BLOCK)
PLAYABLE_SHAPES: List[Shape] = [s for s in Shape if s != Shape.NO_BLOCK]

Offsets = Tuple[Tuple[int, int], ...]

# Canonical (x, y) offsets relative to the pivot, y counted downward
TETROMINO_OFFSETS: Dict[Shape, Offsets] = {
    Shape.NO_BLOCK: ((0, 0), (0, 0), (0, 0), (0, 0)),
    Shape.Z: ((0, -1), (0, 0), (-1, 0), (-1, 1)),
    Shape.S: ((0, -1), (0, 0), (1, 0), (1, 1)),
    Shape.I: ((0, -1), (0, 0), (0, 1), (0, 2)),
    Shape.T: ((-1, 0), (0, 0), (1, 0), (0, 1)),
    Shape.O: ((0, 0), (1, 0), (0, 1), (1, 1)),
    Shape.L: ((-1, -1), (0, -1), (0, 0), (0, 1)),
    Shape.J: ((1, -1), (0, -1), (0, 0), (0, 1)),
}


@dataclass(frozen=True)
class Piece:
    """A tetromino: shape tag, its 4 cell offsets and rotation state."""
    shape: Shape
    offsets: Offsets
    rotation: int = 0  # 0..3, number of right rotations from spawn

    @classmethod
    def from_shape(cls, shape: Shape) -> "Piece":
        """Create a piece with the canonical offsets for a shape."""
        return cls(shape=shape, offsets=TETROMINO_OFFSETS[shape], rotation=0)

    @classmethod
    def empty(cls) -> "Piece":
        """The sentinel piece used when there is no active piece."""
        return cls.from_shape(Shape.NO_BLOCK)

    @classmethod
    def random_shape(cls, rng: Optional[random.Random] = None) -> "Piece":
        """Pick one of the 7 playable shapes uniformly."""
        chooser = rng if rng is not None else random
        return cls.from_shape(chooser.choice(PLAYABLE_SHAPES))

    @property
    def is_empty(self) -> bool:
        return self.shape == Shape.NO_BLOCK

    def rotate_right(self) -> "Piece":
        """
        Return this piece rotated by one step.

        Offsets map (x, y) -> (y, -x). The square and the sentinel are
        returned unchanged. Legality is checked by the board, not here.
        """
        if self.shape in (Shape.O, Shape.NO_BLOCK):
            return self

        rotated = tuple((y, -x) for x, y in self.offsets)
        return Piece(shape=self.shape, offsets=rotated, rotation=(self.rotation + 1) % 4)

    def cell_offset(self, index: int) -> Tuple[int, int]:
        """Get the (x, y) offset of cell 0..3."""
        return self.offsets[index]

    def min_y(self) -> int:
        """Smallest y offset; used to spawn the piece flush with the top row."""
        return min(y for _, y in self.offsets)

    def cells_at(self, x: int, y: int) -> List[Tuple[int, int]]:
        """Absolute board cells when the pivot sits at (x, y)."""
        return [(x + dx, y - dy) for dx, dy in self.offsets]

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {
            "shape": int(self.shape),
            "rotation": self.rotation,
        }
