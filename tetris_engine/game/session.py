"""
Tetris Session - the rules engine driving a single game.

The session owns the board, the active piece and its pivot, the score and
the speed level. A driver feeds it timer ticks and player commands one at a
time; the session never draws, blocks or prompts.
"""

import logging
import random
from enum import IntEnum
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..core.game_interface import GameInterface
from ..core.timer_interface import NullTimer, TimerInterface
from .board import Board
from .config import TetrisConfig
from .piece import Piece, Shape
from .score_store import GameOverResult, ScoreStore

logger = logging.getLogger(__name__)


class Status(IntEnum):
    """Session lifecycle states."""
    NOT_STARTED = 0
    RUNNING = 1
    PAUSED = 2
    GAME_OVER = 3


class Command(IntEnum):
    """Player commands."""
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    ROTATE_RIGHT = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    TOGGLE_PAUSE = 5


GameOverListener = Callable[[GameOverResult], None]


class TetrisSession(GameInterface):
    """
    Single Tetris game: board, active piece, scoring and speed curve.

    Rules:
    - One point per cleared row; level = score // 10
    - Tick interval shrinks by 30ms per level, clamped to 100ms
    - After a landing that clears rows, the next piece appears one tick later
    - A piece that cannot spawn ends the session (GAME_OVER)
    """

    def __init__(
        self,
        config: Optional[TetrisConfig] = None,
        score_store: Optional[ScoreStore] = None,
        timer: Optional[TimerInterface] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a session. Call start() to begin playing.

        Args:
            config: Rules configuration (board size, speed curve)
            score_store: Best-score persistence consulted at game over
            timer: Tick source started, stopped and retimed by the session
            rng: Random source for piece selection
        """
        self.config = config or TetrisConfig()
        self.score_store = score_store
        self.timer = timer or NullTimer()
        self.rng = rng or random.Random()

        self.board = Board(self.config.board_width, self.config.board_height)
        self.current_piece: Piece = Piece.empty()
        self.cur_x: int = 0
        self.cur_y: int = 0

        self.status = Status.NOT_STARTED
        self.score: int = 0
        self.tick_interval: int = self.config.tick_interval_for(0)
        self.falling_done: bool = False
        self.last_result: Optional[GameOverResult] = None

        self._game_over_listeners: List[GameOverListener] = []

        # Recording
        self.history: List[Dict[str, Any]] = []
        self.recording: bool = False

    @property
    def command_names(self) -> List[str]:
        """Human-readable command names."""
        return ["Move Left", "Move Right", "Rotate", "Soft Drop", "Hard Drop", "Pause"]

    @property
    def level(self) -> int:
        """Current speed level (score // 10)."""
        return self.config.level_for(self.score)

    def add_game_over_listener(self, listener: GameOverListener) -> None:
        """Register a callback invoked once the session reaches GAME_OVER."""
        self._game_over_listeners.append(listener)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """
        Start a fresh game. Refused while paused.

        Returns:
            True if a new game was started
        """
        if self.status == Status.PAUSED:
            return False

        self.status = Status.RUNNING
        self.falling_done = False
        self.score = 0
        self.last_result = None
        self.board.reset()
        self._update_speed()

        self.timer.start()
        self._spawn_piece()
        logger.debug("Session started")

        if self.recording:
            self._record_frame()
        return True

    def pause(self) -> bool:
        """
        Toggle pause. Only meaningful while a game is in progress.

        Returns:
            True if the pause state changed
        """
        if self.status == Status.RUNNING:
            self.status = Status.PAUSED
            self.timer.stop()
        elif self.status == Status.PAUSED:
            self.status = Status.RUNNING
            self.timer.start()
        else:
            return False
        return True

    def tick(self) -> bool:
        """Timer step: spawn after a clearing landing, else fall one row."""
        if self.status != Status.RUNNING:
            return False

        if self.falling_done:
            self.falling_done = False
            self._spawn_piece()
        else:
            self._advance_one_line()

        if self.recording:
            self._record_frame()
        return True

    def command(self, kind: int) -> bool:
        """
        Apply a player command.

        Illegal moves and commands outside a running game are ignored.

        Returns:
            True if the command changed the session state
        """
        if self.status not in (Status.RUNNING, Status.PAUSED) or self.current_piece.is_empty:
            return False

        if kind == Command.TOGGLE_PAUSE:
            changed = self.pause()
        elif self.status == Status.PAUSED:
            return False
        elif kind == Command.MOVE_LEFT:
            changed = self._try_move(self.current_piece, self.cur_x - 1, self.cur_y)
        elif kind == Command.MOVE_RIGHT:
            changed = self._try_move(self.current_piece, self.cur_x + 1, self.cur_y)
        elif kind == Command.ROTATE_RIGHT:
            changed = self._try_move(self.current_piece.rotate_right(), self.cur_x, self.cur_y)
        elif kind == Command.SOFT_DROP:
            self._advance_one_line()
            changed = True
        elif kind == Command.HARD_DROP:
            self._advance_to_end()
            changed = True
        else:
            return False

        if changed and self.recording:
            self._record_frame()
        return changed

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def _try_move(self, piece: Piece, x: int, y: int) -> bool:
        """Move the active piece to (x, y) with the given shape if it fits."""
        if not self.board.can_place(piece, x, y):
            return False
        self.current_piece = piece
        self.cur_x = x
        self.cur_y = y
        return True

    def _advance_one_line(self) -> None:
        """Fall one row; land when blocked."""
        if not self._try_move(self.current_piece, self.cur_x, self.cur_y - 1):
            self._piece_landed()

    def _advance_to_end(self) -> None:
        """Fall as far as possible, then land."""
        while self._try_move(self.current_piece, self.cur_x, self.cur_y - 1):
            pass
        self._piece_landed()

    def _piece_landed(self) -> None:
        """Commit the active piece, clear rows and bring in the next piece."""
        self.board.commit(self.current_piece, self.cur_x, self.cur_y)

        cleared = self.board.clear_full_rows()
        if cleared > 0:
            self.score += cleared
            self._update_speed()
            # Next tick spawns, leaving the cleared board visible for a beat
            self.falling_done = True
            self.current_piece = Piece.empty()
            logger.debug("Cleared %d row(s), score %d, level %d", cleared, self.score, self.level)
        else:
            self._spawn_piece()

    def _spawn_piece(self) -> None:
        """Bring a random piece in at the top; end the game if it does not fit."""
        piece = Piece.random_shape(self.rng)
        x, y = self.spawn_position(piece)

        if not self._try_move(piece, x, y):
            self.current_piece = Piece.empty()
            self._game_over()

    def spawn_position(self, piece: Piece) -> Tuple[int, int]:
        """Pivot that puts the piece's top row flush with the top of the board."""
        return self.board.width // 2 + 1, self.board.height - 1 + piece.min_y()

    def _update_speed(self) -> None:
        """Recompute the tick interval from the level and apply it."""
        self.tick_interval = self.config.tick_interval_for(self.level)
        self.timer.set_interval(self.tick_interval)

    def _game_over(self) -> None:
        self.timer.stop()
        self.status = Status.GAME_OVER

        if self.score_store is not None:
            result = self.score_store.record(self.score)
        else:
            result = GameOverResult(score=self.score, best_score=self.score, new_best=False)
        self.last_result = result
        logger.info("Game over with score %d (best: %d)", result.score, result.best_score)

        for listener in self._game_over_listeners:
            listener(result)

    # ------------------------------------------------------------------
    # Render queries
    # ------------------------------------------------------------------

    def is_paused(self) -> bool:
        return self.status == Status.PAUSED

    def is_game_over(self) -> bool:
        return self.status == Status.GAME_OVER

    def get_score(self) -> int:
        """Get current score."""
        return self.score

    def settled_cells(self):
        """Yield (x, y, shape) for every settled board cell."""
        return self.board.settled_cells()

    def active_piece_cells(self) -> List[Tuple[int, int, Shape]]:
        """Cells of the falling piece, empty when there is none."""
        if self.current_piece.is_empty:
            return []
        shape = self.current_piece.shape
        return [(x, y, shape) for x, y in self.current_piece.cells_at(self.cur_x, self.cur_y)]

    def ghost_cells(self) -> List[Tuple[int, int]]:
        """Cells where a hard drop would land the falling piece (nothing is moved)."""
        if self.current_piece.is_empty:
            return []

        ghost_y = self.cur_y
        while self.board.can_place(self.current_piece, self.cur_x, ghost_y - 1):
            ghost_y -= 1
        return self.current_piece.cells_at(self.cur_x, ghost_y)

    def get_state(self) -> Dict[str, Any]:
        """Get current game state for rendering."""
        if self.current_piece.is_empty:
            current = None
        else:
            current = dict(self.current_piece.to_dict(), x=self.cur_x, y=self.cur_y)

        return {
            "board": self.board.to_rows(),
            "current_piece": current,
            "active_cells": [(x, y, int(s)) for x, y, s in self.active_piece_cells()],
            "ghost_cells": self.ghost_cells(),
            "score": self.score,
            "level": self.level,
            "tick_interval": self.tick_interval,
            "status": self.status.name,
            "paused": self.is_paused(),
            "game_over": self.is_game_over(),
            "width": self.board.width,
            "height": self.board.height,
        }

    def start_recording(self) -> None:
        """Start recording game history."""
        self.recording = True
        self.history = []
        self._record_frame()

    def stop_recording(self) -> List[Dict[str, Any]]:
        """Stop recording and return history."""
        self.recording = False
        return self.history

    def _record_frame(self) -> None:
        """Record current frame to history."""
        self.history.append(self.get_state())
