"""
Word Source

Supplies the secret word for a session and decides which words are legal
guesses. The choice of secret word is delegated to a selector, a callable
that receives the candidate list and returns an index into it, so sessions
never depend on the wall clock directly.
"""

import random
from datetime import date
from typing import Callable, Iterable, List, Optional, Sequence

from ..config.game_settings import DICTIONARY, TARGET_WORDS, WORD_EPOCH, WORD_LENGTH

Selector = Callable[[Sequence[str]], int]


def index_selector(index: int) -> Selector:
    """Always pick the given position, wrapping around the list."""
    def select(words: Sequence[str]) -> int:
        return index % len(words)
    return select


def seeded_selector(seed: Optional[int] = None) -> Selector:
    """Pick a random position; a fixed seed makes the pick repeatable."""
    rng = random.Random(seed)

    def select(words: Sequence[str]) -> int:
        return rng.randrange(len(words))
    return select


def daily_selector(day: date, epoch: date = WORD_EPOCH) -> Selector:
    """
    Pick the word of the day: one step through the list per day since epoch.
    """
    offset = (day - epoch).days
    if offset < 0:
        raise ValueError(f"Day {day.isoformat()} is before the word epoch {epoch.isoformat()}")
    return index_selector(offset)


class WordSource:
    """Interface for the dictionary service a session consults."""

    word_length: int = WORD_LENGTH

    def secret_word(self) -> str:
        raise NotImplementedError

    def is_valid_guess(self, word: str) -> bool:
        raise NotImplementedError


class ListWordSource(WordSource):
    """
    Word source backed by in-memory word lists.

    The secret word is chosen once, on first request, and stays fixed for
    the lifetime of the source.
    """

    def __init__(self,
                 dictionary: Optional[Iterable[str]] = None,
                 target_words: Optional[Sequence[str]] = None,
                 selector: Optional[Selector] = None,
                 word_length: int = WORD_LENGTH):
        self.word_length = word_length
        self.target_words: List[str] = [w.lower() for w in (target_words if target_words is not None else TARGET_WORDS)]
        if not self.target_words:
            raise ValueError("Target word list cannot be empty")

        for word in self.target_words:
            if len(word) != word_length or not word.isalpha():
                raise ValueError(f"Target word '{word}' is not a {word_length}-letter word")

        words = dictionary if dictionary is not None else DICTIONARY
        # Secret words are always legal guesses
        self._accepted = {w.lower() for w in words if len(w) == word_length} | set(self.target_words)

        self._selector = selector or seeded_selector()
        self._secret: Optional[str] = None

    def secret_word(self) -> str:
        if self._secret is None:
            self._secret = self.target_words[self._selector(self.target_words)]
        return self._secret

    def is_valid_guess(self, word: str) -> bool:
        if not isinstance(word, str) or len(word) != self.word_length:
            return False
        return word.lower() in self._accepted
