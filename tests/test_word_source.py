"""Tests for word sources and secret selection."""

from datetime import date

import pytest

from wordle_app.config.game_settings import TARGET_WORDS, WORD_EPOCH
from wordle_app.services.word_source import (
    ListWordSource, daily_selector, index_selector, seeded_selector
)

TARGETS = ["crane", "knoll", "allow"]


class TestSelectors:
    """Tests for secret selection strategies."""

    def test_index_selector_wraps(self):
        assert index_selector(1)(TARGETS) == 1
        assert index_selector(4)(TARGETS) == 1

    def test_seeded_selector_is_repeatable(self):
        first = [seeded_selector(42)(TARGETS) for _ in range(3)]
        second = [seeded_selector(42)(TARGETS) for _ in range(3)]
        assert first == second

    def test_daily_selector_counts_days_from_epoch(self):
        assert daily_selector(WORD_EPOCH)(TARGETS) == 0
        assert daily_selector(date(2022, 1, 3))(TARGETS) == 2
        assert daily_selector(date(2022, 1, 4))(TARGETS) == 0

    def test_daily_selector_rejects_days_before_epoch(self):
        with pytest.raises(ValueError):
            daily_selector(date(2021, 12, 31))


class TestListWordSource:
    """Tests for ListWordSource."""

    def test_secret_is_fixed_for_the_source(self):
        source = ListWordSource(dictionary=[], target_words=TARGETS, selector=seeded_selector())
        secret = source.secret_word()
        assert all(source.secret_word() == secret for _ in range(5))

    def test_secret_follows_selector(self):
        source = ListWordSource(dictionary=[], target_words=TARGETS, selector=index_selector(2))
        assert source.secret_word() == "allow"

    def test_membership_is_case_insensitive(self):
        source = ListWordSource(dictionary=["trace"], target_words=TARGETS)
        assert source.is_valid_guess("TRACE")
        assert source.is_valid_guess("Crane")

    def test_rejects_unknown_and_wrong_length(self):
        source = ListWordSource(dictionary=["trace", "traces"], target_words=TARGETS)
        assert not source.is_valid_guess("zzzzz")
        assert not source.is_valid_guess("traces")
        assert not source.is_valid_guess("")

    def test_rejects_bad_target_words(self):
        with pytest.raises(ValueError):
            ListWordSource(dictionary=[], target_words=[])
        with pytest.raises(ValueError):
            ListWordSource(dictionary=[], target_words=["cranes"])

    def test_defaults_to_bundled_lists(self):
        source = ListWordSource(selector=index_selector(0))
        assert source.secret_word() == TARGET_WORDS[0]
        assert source.is_valid_guess(TARGET_WORDS[-1])
