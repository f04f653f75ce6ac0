"""
Tests for tetromino shapes, rotation and random selection.
"""

import random

import pytest


class TestShapes:
    """Tests for the shape table."""

    def test_seven_playable_shapes(self):
        """Test there are 7 playable shapes and NO_BLOCK is not one of them."""
        from tetris_engine.game.piece import PLAYABLE_SHAPES, Shape

        assert len(PLAYABLE_SHAPES) == 7
        assert Shape.NO_BLOCK not in PLAYABLE_SHAPES

    def test_every_shape_has_four_distinct_cells(self):
        """Test each playable shape covers 4 different cells."""
        from tetris_engine.game.piece import PLAYABLE_SHAPES, Piece

        for shape in PLAYABLE_SHAPES:
            piece = Piece.from_shape(shape)
            assert len(set(piece.offsets)) == 4, shape

    def test_cell_offset(self):
        """Test cell_offset returns the i-th offset."""
        from tetris_engine.game.piece import Piece, Shape

        piece = Piece.from_shape(Shape.T)

        assert [piece.cell_offset(i) for i in range(4)] == [(-1, 0), (0, 0), (1, 0), (0, 1)]

    def test_min_y(self):
        """Test min_y per shape."""
        from tetris_engine.game.piece import Piece, Shape

        assert Piece.from_shape(Shape.I).min_y() == -1
        assert Piece.from_shape(Shape.T).min_y() == 0
        assert Piece.from_shape(Shape.O).min_y() == 0
        assert Piece.from_shape(Shape.L).min_y() == -1

    def test_cells_at_counts_y_downward(self):
        """Test absolute cells subtract the y offset from the pivot."""
        from tetris_engine.game.piece import Piece, Shape

        piece = Piece.from_shape(Shape.I)

        assert piece.cells_at(5, 10) == [(5, 11), (5, 10), (5, 9), (5, 8)]

    def test_empty_piece(self):
        """Test the sentinel piece."""
        from tetris_engine.game.piece import Piece, Shape

        piece = Piece.empty()

        assert piece.is_empty
        assert piece.shape == Shape.NO_BLOCK


class TestRandomShape:
    """Tests for random piece selection."""

    def test_never_returns_no_block(self):
        """Test random selection only yields playable shapes."""
        from tetris_engine.game.piece import Piece, Shape

        rng = random.Random(7)
        shapes = {Piece.random_shape(rng).shape for _ in range(500)}

        assert Shape.NO_BLOCK not in shapes
        assert len(shapes) == 7

    def test_seeded_selection_is_reproducible(self):
        """Test the same seed deals the same pieces."""
        from tetris_engine.game.piece import Piece

        first = [Piece.random_shape(random.Random(3)).shape for _ in range(5)]
        second = [Piece.random_shape(random.Random(3)).shape for _ in range(5)]

        assert first == second

    def test_random_piece_has_canonical_offsets(self):
        """Test a random piece starts unrotated."""
        from tetris_engine.game.piece import Piece, TETROMINO_OFFSETS

        piece = Piece.random_shape(random.Random(11))

        assert piece.rotation == 0
        assert piece.offsets == TETROMINO_OFFSETS[piece.shape]


class TestRotation:
    """Tests for rotate_right."""

    def test_rotation_rule(self):
        """Test offsets map (x, y) -> (y, -x)."""
        from tetris_engine.game.piece import Piece, Shape

        piece = Piece.from_shape(Shape.T).rotate_right()

        assert piece.offsets == ((0, 1), (0, 0), (0, -1), (1, 0))
        assert piece.rotation == 1

    @pytest.mark.parametrize("shape_name", ["Z", "S", "I", "T", "L", "J"])
    def test_four_rotations_restore_piece(self, shape_name):
        """Test rotating 4 times returns the original offsets."""
        from tetris_engine.game.piece import Piece, Shape

        original = Piece.from_shape(Shape[shape_name])
        piece = original
        for _ in range(4):
            piece = piece.rotate_right()

        assert piece == original

    def test_square_rotation_is_noop(self):
        """Test O has rotation order 1."""
        from tetris_engine.game.piece import Piece, Shape

        piece = Piece.from_shape(Shape.O)

        assert piece.rotate_right() is piece

    def test_rotation_returns_new_piece(self):
        """Test rotation leaves the original untouched."""
        from tetris_engine.game.piece import Piece, Shape, TETROMINO_OFFSETS

        piece = Piece.from_shape(Shape.L)
        rotated = piece.rotate_right()

        assert rotated is not piece
        assert rotated.shape == Shape.L
        assert piece.offsets == TETROMINO_OFFSETS[Shape.L]
