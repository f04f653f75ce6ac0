# Tetris Engine Package
"""
Tetris Engine - falling-block puzzle rules engine.

Modules:
- core: Abstract interfaces for the session, its tick source and renderers
- game: Pieces, board, rules engine and best-score store
- runtime: Serialized event loop and threaded tick timer
- visualization: Text/terminal renderer
- utils: Configuration loading and logging setup
"""
