"""
Text Renderer - draws a session as text for terminals, logs and tests.

The shape -> glyph/style mapping lives here; the rules engine only exposes
shape tags.
"""

from typing import Dict, List

from rich.panel import Panel
from rich.text import Text

from ..core.renderer_interface import RendererInterface
from ..game.piece import Shape
from ..game.session import TetrisSession


EMPTY_GLYPH = "."
GHOST_GLYPH = ":"

SHAPE_GLYPHS: Dict[Shape, str] = {
    Shape.Z: "Z",
    Shape.S: "S",
    Shape.I: "I",
    Shape.T: "T",
    Shape.O: "O",
    Shape.L: "L",
    Shape.J: "J",
}

# Rich styles per shape
SHAPE_STYLES: Dict[Shape, str] = {
    Shape.Z: "rgb(164,135,255)",
    Shape.S: "rgb(255,128,0)",
    Shape.I: "rgb(255,0,0)",
    Shape.T: "rgb(32,128,255)",
    Shape.O: "rgb(255,0,255)",
    Shape.L: "rgb(255,255,0)",
    Shape.J: "rgb(0,255,0)",
}
GHOST_STYLE = "grey42"
EMPTY_STYLE = "grey23"


class TextRenderer(RendererInterface):
    """
    Renders a TetrisSession as rows of characters.

    Layout (top row of the board first):
        Score: 3
        Level: 1
        ..........
        ....T.....
        ...TTT....
        ....::....
    """

    def __init__(self, show_ghost: bool = True, title: str = "Tetris"):
        """
        Initialize the renderer.

        Args:
            show_ghost: Draw where a hard drop would land
            title: Panel title used by render()
        """
        self.show_ghost = show_ghost
        self.title = title

    def board_glyphs(self, session: TetrisSession) -> List[List[str]]:
        """Character grid indexed [y][x], row 0 at the bottom."""
        width, height = session.board.width, session.board.height
        grid = [[EMPTY_GLYPH for _ in range(width)] for _ in range(height)]

        for x, y, shape in session.settled_cells():
            grid[y][x] = SHAPE_GLYPHS[shape]

        if self.show_ghost:
            for x, y in session.ghost_cells():
                grid[y][x] = GHOST_GLYPH

        for x, y, shape in session.active_piece_cells():
            grid[y][x] = SHAPE_GLYPHS[shape]

        return grid

    def hud_lines(self, session: TetrisSession) -> List[str]:
        """Score/level lines, or the pause banner."""
        if session.is_paused():
            return ["PAUSED", ""]
        lines = [f"Score: {session.score}", f"Level: {session.level + 1}"]
        if session.is_game_over():
            lines.append("GAME OVER")
        return lines

    def render_lines(self, session: TetrisSession) -> List[str]:
        """Plain text frame: HUD lines followed by board rows, top first."""
        grid = self.board_glyphs(session)
        rows = ["".join(row) for row in reversed(grid)]
        return self.hud_lines(session) + rows

    def render(self, session: TetrisSession) -> Panel:
        """Styled frame for a rich Console or Live display."""
        styles = {glyph: SHAPE_STYLES[shape] for shape, glyph in SHAPE_GLYPHS.items()}
        styles[GHOST_GLYPH] = GHOST_STYLE
        styles[EMPTY_GLYPH] = EMPTY_STYLE

        text = Text()
        for line in self.hud_lines(session):
            text.append(line + "\n", style="bold white")

        grid = self.board_glyphs(session)
        for row in reversed(grid):
            for glyph in row:
                text.append(glyph, style=styles[glyph])
            text.append("\n")

        return Panel(text, title=self.title, expand=False)
