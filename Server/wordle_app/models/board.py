"""
Board Data Models

The board is a fixed grid of max_attempts rows by word_length cells.
Rows before the current row hold evaluated guesses, the current row holds
the guess being typed, and every row after it is empty.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .game import LetterStatus


@dataclass
class LetterCell:
    """One letter slot of a guess row."""
    letter: Optional[str] = None
    status: LetterStatus = LetterStatus.EMPTY

    @property
    def is_filled(self) -> bool:
        return self.letter is not None

    def fill(self, letter: str) -> None:
        self.letter = letter
        self.status = LetterStatus.ACTIVE

    def clear(self) -> None:
        self.letter = None
        self.status = LetterStatus.EMPTY

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {'letter': self.letter, 'status': self.status.value}


@dataclass
class GuessRow:
    """An ordered row of cells, filled left to right without gaps."""
    cells: List[LetterCell]

    @classmethod
    def empty(cls, length: int) -> "GuessRow":
        return cls(cells=[LetterCell() for _ in range(length)])

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, index: int) -> LetterCell:
        return self.cells[index]

    @property
    def filled_count(self) -> int:
        return sum(1 for cell in self.cells if cell.is_filled)

    @property
    def is_full(self) -> bool:
        return self.filled_count == len(self.cells)

    @property
    def is_empty(self) -> bool:
        return self.filled_count == 0

    @property
    def is_evaluated(self) -> bool:
        return all(cell.status.is_evaluated for cell in self.cells)

    @property
    def word(self) -> str:
        return ''.join(cell.letter for cell in self.cells if cell.is_filled)

    def to_list(self) -> List[Dict[str, Optional[str]]]:
        return [cell.to_dict() for cell in self.cells]


@dataclass
class Board:
    """The full guess grid plus a pointer to the row in progress."""
    word_length: int
    max_attempts: int
    rows: List[GuessRow] = field(default_factory=list)
    current_row_index: int = 0

    def __post_init__(self):
        if self.word_length < 1:
            raise ValueError("word_length must be at least 1")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if not self.rows:
            self.rows = [GuessRow.empty(self.word_length) for _ in range(self.max_attempts)]

    @property
    def current_row(self) -> Optional[GuessRow]:
        """The row being typed, or None once every row has been used."""
        if self.current_row_index >= self.max_attempts:
            return None
        return self.rows[self.current_row_index]

    @property
    def has_remaining_rows(self) -> bool:
        """True while at least one row after the current one is still empty."""
        return self.current_row_index + 1 < self.max_attempts

    def advance(self) -> None:
        self.current_row_index += 1

    def submitted_rows(self) -> List[GuessRow]:
        return [row for row in self.rows[:self.current_row_index] if row.is_evaluated]

    def to_list(self) -> List[List[Dict[str, Optional[str]]]]:
        return [row.to_list() for row in self.rows]
