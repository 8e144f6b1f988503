"""
Keyboard Overlay State

Best-known status for every letter across all guesses made so far.
"""

from typing import Dict

from ..config.game_settings import ALPHABET
from ..models.game import LetterStatus

# Higher wins; a letter never moves to a lower rank
_PRECEDENCE = {
    LetterStatus.UNKNOWN: 0,
    LetterStatus.WRONG: 1,
    LetterStatus.WRONG_LOCATION: 2,
    LetterStatus.CORRECT: 3,
}


class KeyboardState:
    """Per-letter hint state shown on the on-screen keyboard."""

    def __init__(self, alphabet: str = ALPHABET):
        self._status: Dict[str, LetterStatus] = {letter: LetterStatus.UNKNOWN for letter in alphabet}

    def record_evaluation(self, letter: str, status: LetterStatus) -> LetterStatus:
        """
        Merge an evaluated status into the letter's best-known status.

        Returns:
            The letter's status after the merge
        """
        if status not in _PRECEDENCE or status == LetterStatus.UNKNOWN:
            raise ValueError(f"Cannot record non-evaluated status {status!r}")

        letter = letter.lower()
        current = self._status.get(letter, LetterStatus.UNKNOWN)
        if _PRECEDENCE[status] > _PRECEDENCE[current]:
            self._status[letter] = status
        return self._status[letter]

    def status_of(self, letter: str) -> LetterStatus:
        return self._status.get(letter.lower(), LetterStatus.UNKNOWN)

    def as_dict(self) -> Dict[str, str]:
        return {letter: status.value for letter, status in self._status.items()}
