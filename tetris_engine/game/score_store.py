"""
Score Store - persist the best score as a small plain-text file.

File format: the first line is the best score as an integer. Anything after
it is a descriptive note and is ignored when reading.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

# Returned when no valid best score is recorded; lower than any real score
NO_SCORE = -1

DEFAULT_SCORE_FILE = "Tetris.score"
DESCRIPTION_LINE = "Best score file for the Tetris engine - first line holds the score"


@dataclass(frozen=True)
class GameOverResult:
    """Outcome of a finished session, checked against the stored best."""
    score: int
    best_score: int      # Best score after this game (NO_SCORE if none)
    new_best: bool       # True if this game set a new best score


class ScoreStore:
    """Load and save a single best-score integer."""

    def __init__(self, path: Union[str, Path] = DEFAULT_SCORE_FILE):
        """
        Initialize the store.

        Args:
            path: Location of the score file
        """
        self.path = Path(path)

    def load(self) -> int:
        """
        Read the best score.

        Returns:
            The stored score, or NO_SCORE if the file is missing or unreadable
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                first_line = f.readline()
            return int(first_line.strip())
        except FileNotFoundError:
            return NO_SCORE
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable score file %s: %s", self.path, e)
            return NO_SCORE

    def save(self, score: int) -> bool:
        """
        Write the best score atomically.

        The data goes to a temporary file next to the target which then
        replaces it, so a failed write leaves the previous file intact.

        Returns:
            True if the score was written
        """
        content = f"{int(score)}\n{DESCRIPTION_LINE}\n"
        directory = self.path.parent
        tmp_path = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(directory)
            )
            try:
                f = os.fdopen(fd, "w", encoding="utf-8")
            except Exception:
                os.close(fd)
                raise
            with f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
            return True
        except OSError as e:
            logger.error("Failed to save best score to %s: %s", self.path, e)
            return False
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

    def record(self, score: int) -> GameOverResult:
        """
        Compare a final score with the stored best and persist it if higher.

        A higher score only counts as the new best once it is on disk; if
        the write fails the previous best is reported.

        Args:
            score: Final score of a session

        Returns:
            GameOverResult describing the comparison
        """
        best = self.load()
        if score > best:
            if self.save(score):
                logger.info("New best score %d (previous: %d)", score, best)
                return GameOverResult(score=score, best_score=score, new_best=True)
            logger.warning("Best score %d was not saved, keeping %d", score, best)
        return GameOverResult(score=score, best_score=best, new_best=False)
