"""
Visualization module for the Tetris engine.

Contains:
- TextRenderer: plain text and rich terminal frames of a session
"""

from .text_renderer import TextRenderer, SHAPE_GLYPHS, SHAPE_STYLES

__all__ = [
    'TextRenderer',
    'SHAPE_GLYPHS',
    'SHAPE_STYLES',
]
