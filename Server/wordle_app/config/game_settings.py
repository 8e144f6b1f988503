"""
Game Configuration Constants Module

This module defines the game rules and the bundled word lists.
All game parameters are centralized here to enable easy modification.

Two word lists ship with the package:
- target_words.json: the ordered list secret words are selected from
- dictionary.json: additional words accepted as guesses
"""

import json
import os
from datetime import date
from typing import List, Final, Optional

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in the secret word and in every guess.
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts (board rows) allowed per game.
"""

WORD_EPOCH: Final[date] = date(2022, 1, 1)
"""
Day zero of the daily word rotation: the word for a given day is
target_words[days since WORD_EPOCH].
"""

ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz"

# Alert texts shown by the client for each notification
ALERT_INCOMPLETE_GUESS: Final[str] = "Not enough letters"
ALERT_INVALID_WORD: Final[str] = "Not in word list"
ALERT_WON: Final[str] = "You Win"


def _load_word_list(file_name: str) -> List[str]:
    """
    Load a word list from a JSON file stored beside this module.

    Returns:
        List[str]: List of lowercase words, in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, file_name)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_name}: {e}")

    if not isinstance(word_list, list):
        raise ValueError(f"{file_name} must contain an array of words")

    if not word_list:
        raise ValueError(f"Word list in {file_name} cannot be empty")

    lowercase_words = [str(word).lower() for word in word_list]

    for word in lowercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' in {file_name} is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' in {file_name} contains non-alphabetic characters")

    return lowercase_words


# Secret word candidates, in rotation order
TARGET_WORDS: Final[List[str]] = _load_word_list('target_words.json')

# Every word accepted as a guess
DICTIONARY: Final[List[str]] = sorted(set(_load_word_list('dictionary.json')) | set(TARGET_WORDS))


def validate_word_list_integrity(word_list: Optional[List[str]] = None) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Args:
        word_list: List to check, defaults to TARGET_WORDS

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if word_list is None:
        word_list = TARGET_WORDS

    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(word_list: Optional[List[str]] = None) -> dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    if word_list is None:
        word_list = TARGET_WORDS

    if not word_list:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in word_list)

    letter_frequency = {}
    for word in word_list:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(word_list),
        "avg_vowel_count": round(total_vowels / len(word_list), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity(TARGET_WORDS)
        validate_word_list_integrity(DICTIONARY)
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
