"""
Raw Input Adapter

Turns physical or virtual key names into game actions. Anything that is not
Enter, Backspace/Delete or a single letter is dropped here and never reaches
the session.
"""

import re
from dataclasses import dataclass
from typing import Optional

LETTER = "letter"
DELETE = "delete"
SUBMIT = "submit"
SETTLE = "settle"

ACTIONS = (LETTER, DELETE, SUBMIT, SETTLE)

_LETTER_KEY = re.compile(r'^[a-zA-Z]$')


@dataclass(frozen=True)
class GameAction:
    """One input event for a game session."""
    kind: str
    letter: Optional[str] = None

    def __post_init__(self):
        if self.kind not in ACTIONS:
            raise ValueError(f"Unknown action '{self.kind}'")
        if self.kind == LETTER and (not self.letter or not _LETTER_KEY.match(self.letter)):
            raise ValueError(f"Letter action requires a single alphabetic character, got {self.letter!r}")


def letter(ch: str) -> GameAction:
    return GameAction(LETTER, ch.lower())


def delete() -> GameAction:
    return GameAction(DELETE)


def submit() -> GameAction:
    return GameAction(SUBMIT)


def settle() -> GameAction:
    return GameAction(SETTLE)


def parse_key(key: Optional[str]) -> Optional[GameAction]:
    """
    Map a key name to an action.

    Returns:
        The matching GameAction, or None when the key has no meaning in the game
    """
    if not key or not isinstance(key, str):
        return None

    if key == "Enter":
        return submit()

    if key in ("Backspace", "Delete"):
        return delete()

    if _LETTER_KEY.match(key):
        return letter(key)

    return None
