"""
Game Session

A single game: one secret word, one board, one keyboard overlay, and the
controller that moves them forward one input action at a time.
"""

import logging
from datetime import datetime
from typing import List, Optional

from ..config.game_settings import MAX_ATTEMPTS
from ..models.board import Board
from ..models.game import EventType, GameEvent, GameOutcome, GamePhase
from .evaluator import evaluate_guess
from .input_accumulator import InputAccumulator
from .input_adapter import DELETE, LETTER, SETTLE, SUBMIT, GameAction
from .keyboard import KeyboardState
from .presentation import PresentationSink
from .word_source import WordSource

logger = logging.getLogger('wordle_game.session')


class GameSession:
    """
    Finite-state controller for one game.

    Phases:
    - AWAITING_INPUT: the current row accepts letters, deletes and submit
    - EVALUATING: a submitted row has been scored and the client is still
      playing its reveal; input is ignored until settle()
    - ROW_COMPLETE: transient, while the outcome of a scored row is decided
    - WON / LOST: terminal

    All state changes happen synchronously inside handle(); the sink is told
    about them afterwards.
    """

    def __init__(self,
                 word_source: WordSource,
                 sink: Optional[PresentationSink] = None,
                 max_attempts: int = MAX_ATTEMPTS,
                 auto_settle: bool = False,
                 game_id: Optional[str] = None):
        self.word_source = word_source
        self.sink = sink or PresentationSink()
        self.word_length = word_source.word_length
        self.max_attempts = max_attempts
        self.auto_settle = auto_settle
        self.game_id = game_id

        self.board: Optional[Board] = None
        self.keyboard: Optional[KeyboardState] = None
        self.accumulator: Optional[InputAccumulator] = None
        self.guesses: List[str] = []
        self.events: List[GameEvent] = []
        self.outcome = GameOutcome.IN_PROGRESS
        self.phase: Optional[GamePhase] = None
        self.created_at: Optional[datetime] = None
        self._secret: Optional[str] = None

    def start(self) -> "GameSession":
        """Fix the secret word and lay out an empty board."""
        if self.phase is not None:
            raise RuntimeError("Game session already started")

        secret = self.word_source.secret_word().lower()
        if len(secret) != self.word_length:
            raise ValueError(f"Secret word must be {self.word_length} letters, got '{secret}'")

        self._secret = secret
        self.board = Board(word_length=self.word_length, max_attempts=self.max_attempts)
        self.keyboard = KeyboardState()
        self.accumulator = InputAccumulator(self.board)
        self.created_at = datetime.now()
        self.phase = GamePhase.AWAITING_INPUT

        logger.info(f"Game {self.game_id} started ({self.word_length} letters, {self.max_attempts} attempts)")
        return self

    @property
    def secret_word(self) -> str:
        return self._secret

    @property
    def is_over(self) -> bool:
        return self.outcome != GameOutcome.IN_PROGRESS

    def accepting_input(self) -> bool:
        return self.phase == GamePhase.AWAITING_INPUT

    def handle(self, action: GameAction) -> List[GameEvent]:
        """
        Process one input action to completion.

        Returns:
            The events emitted while handling the action, in order
        """
        if self.phase is None:
            raise RuntimeError("Game session has not been started")

        first_event = len(self.events)

        if action.kind == SETTLE:
            self.settle()
        elif not self.accepting_input():
            # Input during a reveal or after the game ended is dropped silently
            logger.debug(f"Game {self.game_id}: ignored '{action.kind}' input in phase {self.phase.value}")
        elif action.kind == LETTER:
            self.accumulator.append_letter(action.letter)
        elif action.kind == DELETE:
            self.accumulator.delete_last_letter()
        elif action.kind == SUBMIT:
            self._submit()

        return self.events[first_event:]

    def settle(self) -> None:
        """End the reveal of the last scored row and reopen input."""
        if self.phase == GamePhase.EVALUATING:
            self.phase = GamePhase.AWAITING_INPUT

    def _submit(self) -> None:
        if self.accumulator.current_guess_length() != self.word_length:
            self._emit(GameEvent(EventType.INCOMPLETE_GUESS))
            return

        guess = self.accumulator.current_guess()
        if not self.word_source.is_valid_guess(guess):
            logger.debug(f"Game {self.game_id}: rejected unknown word '{guess}'")
            self._emit(GameEvent(EventType.INVALID_WORD))
            return

        self.phase = GamePhase.EVALUATING
        row_index = self.board.current_row_index
        row = self.board.current_row
        statuses = evaluate_guess(guess, self._secret)

        for cell, status in zip(row, statuses):
            cell.status = status
            self.keyboard.record_evaluation(cell.letter, status)
        self.guesses.append(guess)

        for cell_index, status in enumerate(statuses):
            self._emit(GameEvent(EventType.CELL_EVALUATED, row_index=row_index,
                                 cell_index=cell_index, status=status))

        self.phase = GamePhase.ROW_COMPLETE
        self._emit(GameEvent(EventType.ROW_COMPLETE, row_index=row_index))

        has_remaining_rows = self.board.has_remaining_rows
        self.board.advance()

        if guess == self._secret:
            self.outcome = GameOutcome.WON
            self.phase = GamePhase.WON
            logger.info(f"Game {self.game_id} won in {len(self.guesses)} guesses")
            self._emit(GameEvent(EventType.WON))
        elif not has_remaining_rows:
            self.outcome = GameOutcome.LOST
            self.phase = GamePhase.LOST
            logger.info(f"Game {self.game_id} lost, word was '{self._secret}'")
            self._emit(GameEvent(EventType.LOST, secret_word=self._secret))
        else:
            self.phase = GamePhase.AWAITING_INPUT if self.auto_settle else GamePhase.EVALUATING

    def _emit(self, event: GameEvent) -> None:
        self.events.append(event)
        self.sink.notify(event)
