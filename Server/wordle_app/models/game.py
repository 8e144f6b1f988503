"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class LetterStatus(Enum):
    """Status of a board cell or keyboard key."""
    EMPTY = "empty"
    ACTIVE = "active"
    CORRECT = "correct"
    WRONG_LOCATION = "wrong-location"
    WRONG = "wrong"
    UNKNOWN = "unknown"  # Keyboard only: letter not guessed yet

    @property
    def is_evaluated(self) -> bool:
        return self in EVALUATED_STATUSES


EVALUATED_STATUSES = frozenset({LetterStatus.CORRECT, LetterStatus.WRONG_LOCATION, LetterStatus.WRONG})


class GameOutcome(Enum):
    """Overall result of a session. Terminal once WON or LOST."""
    IN_PROGRESS = "in-progress"
    WON = "won"
    LOST = "lost"


class GamePhase(Enum):
    """Controller sub-states."""
    AWAITING_INPUT = "awaiting-input"
    EVALUATING = "evaluating"
    ROW_COMPLETE = "row-complete"
    WON = "won"
    LOST = "lost"


class EventType(Enum):
    """Notifications emitted by a session for the presentation layer."""
    INCOMPLETE_GUESS = "incomplete_guess"
    INVALID_WORD = "invalid_word"
    CELL_EVALUATED = "cell_evaluated"
    ROW_COMPLETE = "row_complete"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GameEvent:
    """A single presentation event."""
    type: EventType
    row_index: Optional[int] = None
    cell_index: Optional[int] = None
    status: Optional[LetterStatus] = None
    secret_word: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            'type': self.type.value,
            'row_index': self.row_index,
            'cell_index': self.cell_index,
            'status': self.status.value if self.status else None,
            'secret_word': self.secret_word
        }


@dataclass
class GameState:
    """Client-facing game state representation."""
    game_id: str
    word_length: int
    max_attempts: int
    current_row: int
    phase: str
    outcome: str
    accepting_input: bool
    game_over: bool
    won: bool
    board: List[List[Dict[str, Optional[str]]]]
    guesses: List[str]
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
    created_at: Optional[str] = None
