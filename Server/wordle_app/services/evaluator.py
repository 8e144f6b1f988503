"""
Guess Evaluator

Scores a guess against the secret word letter by letter.
"""

from typing import List, Optional, Sequence

from ..models.game import LetterStatus


def evaluate_guess(guess: Sequence[str], secret: Sequence[str]) -> List[LetterStatus]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are marked first and consume their letter from the secret.
    Remaining positions are then checked left to right against the letters
    still unconsumed, so a repeated guess letter is only marked
    WRONG_LOCATION as many times as the secret actually holds it.

    Args:
        guess: The guessed letters (string or sequence of single characters)
        secret: The secret word's letters, same length as guess

    Returns:
        One LetterStatus per position: CORRECT, WRONG_LOCATION or WRONG

    Raises:
        ValueError: If guess and secret differ in length
    """
    if len(guess) != len(secret):
        raise ValueError(f"Guess length {len(guess)} does not match secret length {len(secret)}")

    guess_chars = [letter.lower() for letter in guess]
    # Working copy of the secret; consumed letters are replaced by None
    secret_pool: List[Optional[str]] = [letter.lower() for letter in secret]
    result: List[LetterStatus] = [LetterStatus.WRONG] * len(guess_chars)

    # First pass: exact position matches
    for i, letter in enumerate(guess_chars):
        if letter == secret_pool[i]:
            result[i] = LetterStatus.CORRECT
            secret_pool[i] = None

    # Second pass: letters present elsewhere, consuming left to right
    for i, letter in enumerate(guess_chars):
        if result[i] == LetterStatus.CORRECT:
            continue

        if letter in secret_pool:
            result[i] = LetterStatus.WRONG_LOCATION
            secret_pool[secret_pool.index(letter)] = None

    return result
