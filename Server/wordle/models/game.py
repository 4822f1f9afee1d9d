"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..config.game_settings import ROWS, COLUMNS


class LetterStatus(Enum):
    """Per-position classification of a guessed letter."""
    CORRECT = "correct"
    MISPLACED = "misplaced"
    WRONG = "wrong"


class SessionPhase(Enum):
    """Where a session sits in the entry/submit cycle."""
    ENTERING = "entering"
    ROW_COMPLETE = "row-complete"
    REVEALED = "revealed"
    WON = "won"
    LOST = "lost"


class GuessOutcome(Enum):
    """Signal returned by a submission."""
    INCOMPLETE_ROW = "incomplete_row"
    INVALID_WORD = "invalid_word"
    CONTINUE = "continue"
    WON = "won"
    LOST = "lost"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameConfig:
    """Board dimensions for a session."""
    rows: int = ROWS
    columns: int = COLUMNS


@dataclass
class SessionState:
    """
    Mutable state of one game, owned by whoever created it.

    The grid holds one list per attempt; an empty string marks an unfilled
    slot. ``results`` grows by one row of status values per accepted guess.
    """
    target_word: str
    config: GameConfig = field(default_factory=GameConfig)
    current_row: int = 0
    current_col: int = 0
    grid: List[List[str]] = field(default_factory=list)
    results: List[List[str]] = field(default_factory=list)
    won: bool = False
    lost: bool = False

    def __post_init__(self):
        if not self.grid:
            self.grid = [[''] * self.config.columns for _ in range(self.config.rows)]

    @property
    def game_over(self) -> bool:
        return self.won or self.lost

    @property
    def phase(self) -> SessionPhase:
        if self.won:
            return SessionPhase.WON
        if self.lost:
            return SessionPhase.LOST
        if self.current_col == self.config.columns:
            return SessionPhase.ROW_COMPLETE
        return SessionPhase.ENTERING

    def current_guess(self) -> str:
        return ''.join(self.grid[self.current_row])

    def to_public_dict(self) -> Dict:
        """
        Client-facing view of the session.

        The target word is only included once the session has ended.
        """
        return {
            'rows': self.config.rows,
            'columns': self.config.columns,
            'current_row': self.current_row,
            'current_col': self.current_col,
            'grid': [row.copy() for row in self.grid],
            'results': [row.copy() for row in self.results],
            'phase': self.phase.value,
            'game_over': self.game_over,
            'won': self.won,
            'answer': self.target_word if self.game_over else None,
        }


@dataclass
class SubmissionResult:
    """What happened when the current row was submitted."""
    outcome: GuessOutcome
    guess: str = ''
    statuses: List[LetterStatus] = field(default_factory=list)
    missing_columns: List[int] = field(default_factory=list)
    answer: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.outcome in (GuessOutcome.CONTINUE, GuessOutcome.WON, GuessOutcome.LOST)

    @property
    def phase(self) -> Optional[SessionPhase]:
        """Phase the row reached on reveal; None when the submission was rejected."""
        if self.outcome == GuessOutcome.WON:
            return SessionPhase.WON
        if self.outcome == GuessOutcome.LOST:
            return SessionPhase.LOST
        if self.outcome == GuessOutcome.CONTINUE:
            return SessionPhase.REVEALED
        return None

    def to_dict(self) -> Dict:
        return {
            'outcome': self.outcome.value,
            'accepted': self.accepted,
            'guess': self.guess,
            'statuses': [status.value for status in self.statuses],
            'missing_columns': self.missing_columns.copy(),
            'answer': self.answer,
        }
