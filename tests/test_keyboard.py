"""Tests for the keyboard overlay."""

import pytest

from wordle_app.models.game import LetterStatus
from wordle_app.services.keyboard import KeyboardState


@pytest.fixture
def keyboard():
    return KeyboardState()


class TestKeyboardState:
    """Tests for KeyboardState."""

    def test_letters_start_unknown(self, keyboard):
        assert keyboard.status_of("a") == LetterStatus.UNKNOWN
        assert len(keyboard.as_dict()) == 26

    def test_upgrades_follow_precedence(self, keyboard):
        keyboard.record_evaluation("e", LetterStatus.WRONG)
        assert keyboard.status_of("e") == LetterStatus.WRONG

        keyboard.record_evaluation("e", LetterStatus.WRONG_LOCATION)
        assert keyboard.status_of("e") == LetterStatus.WRONG_LOCATION

        keyboard.record_evaluation("e", LetterStatus.CORRECT)
        assert keyboard.status_of("e") == LetterStatus.CORRECT

    def test_correct_is_never_downgraded(self, keyboard):
        keyboard.record_evaluation("r", LetterStatus.CORRECT)
        for status in (LetterStatus.WRONG_LOCATION, LetterStatus.WRONG, LetterStatus.CORRECT):
            keyboard.record_evaluation("r", status)
            assert keyboard.status_of("r") == LetterStatus.CORRECT

    def test_wrong_location_not_downgraded_to_wrong(self, keyboard):
        keyboard.record_evaluation("l", LetterStatus.WRONG_LOCATION)
        keyboard.record_evaluation("l", LetterStatus.WRONG)
        assert keyboard.status_of("l") == LetterStatus.WRONG_LOCATION

    def test_letters_are_case_insensitive(self, keyboard):
        keyboard.record_evaluation("Q", LetterStatus.WRONG)
        assert keyboard.status_of("q") == LetterStatus.WRONG
        assert keyboard.as_dict()["q"] == "wrong"

    def test_rejects_non_evaluated_status(self, keyboard):
        with pytest.raises(ValueError):
            keyboard.record_evaluation("a", LetterStatus.ACTIVE)
