"""Tests for game settings and bundled word lists."""

import pytest

from wordle_app.config import config, TestingConfig
from wordle_app.config.game_settings import (
    DICTIONARY, TARGET_WORDS, WORD_LENGTH, get_word_statistics, validate_word_list_integrity
)


class TestWordLists:
    """Tests for the bundled word lists."""

    def test_bundled_lists_are_valid(self):
        assert validate_word_list_integrity(TARGET_WORDS)
        assert validate_word_list_integrity(DICTIONARY)

    def test_targets_are_accepted_guesses(self):
        assert set(TARGET_WORDS) <= set(DICTIONARY)
        assert all(len(word) == WORD_LENGTH for word in DICTIONARY)

    @pytest.mark.parametrize("words, message", [
        ([], "cannot be empty"),
        (["cranes"], "not 5 characters"),
        (["cr4ne"], "non-alphabetic"),
        (["CRANE"], "lowercase"),
        (["crane", "crane"], "Duplicate"),
    ])
    def test_integrity_failures(self, words, message):
        with pytest.raises(ValueError, match=message):
            validate_word_list_integrity(words)

    def test_statistics(self):
        stats = get_word_statistics(["crane", "allow"])
        assert stats["total_words"] == 2
        assert stats["avg_vowel_count"] == 2.0
        assert stats["letter_frequency"]["l"] == 2
        assert get_word_statistics([]) == {"error": "Word list is empty"}


class TestAppConfig:
    """Tests for the configuration classes."""

    def test_testing_config(self):
        assert TestingConfig.TESTING
        assert TestingConfig.WORD_SELECTION == 'random'
        assert config['testing'] is TestingConfig
        assert config['default'] is config['development']

    def test_word_length_comes_from_word_lists(self):
        assert not hasattr(TestingConfig, 'WORD_LENGTH')
        assert TestingConfig.GAME_IDLE_TIMEOUT_SECONDS == 3600
