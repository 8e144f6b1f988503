"""
Game Service

Keeps the game sessions of a running server and exposes them by game id.
"""

import threading
import time
import uuid
from datetime import date
from typing import Dict, List, Optional, Tuple

from ..config.app_config import Config
from ..models.game import GameEvent, GameState
from .game_session import GameSession
from .input_adapter import LETTER, GameAction, delete, parse_key, settle, submit
from .presentation import PresentationSink, SocketIOSink
from .word_source import ListWordSource, WordSource, daily_selector, seeded_selector


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Secret word selection (daily rotation or random)
    - Routing input actions to the right session
    - Game state snapshots without exposing answers to clients
    - Dropping games nobody has touched for a while

    The registry lock only guards the session dictionaries. Each session has
    its own lock, held while it handles input, so one game's events stay in
    order without blocking the others.
    """

    def __init__(self, config=Config, socketio=None):
        self.config = config
        self.socketio = socketio
        self.games: Dict[str, GameSession] = {}  # Active sessions by game_id
        self._session_locks: Dict[str, threading.Lock] = {}
        self._last_activity: Dict[str, float] = {}
        self._lock = threading.Lock()

    def _build_word_source(self, seed: Optional[int] = None, day: Optional[date] = None) -> WordSource:
        """Pick the selection strategy for a new game's secret word."""
        epoch = date.fromisoformat(self.config.WORD_EPOCH)

        if day is not None:
            selector = daily_selector(day, epoch)
        elif seed is not None:
            selector = seeded_selector(seed)
        elif self.config.WORD_SELECTION == 'daily':
            selector = daily_selector(date.today(), epoch)
        else:
            selector = seeded_selector()

        return ListWordSource(selector=selector)

    def create_new_game(self,
                        seed: Optional[int] = None,
                        day: Optional[date] = None,
                        word_source: Optional[WordSource] = None,
                        auto_settle: bool = False) -> str:
        """
        Creates and starts a new game session.

        Args:
            seed: Seed for a repeatable random secret word
            day: Play the daily word of this date
            word_source: Use this word source instead of the bundled lists;
                its word_length sets the length of the game
            auto_settle: Reopen input right after each scored row

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())

        if word_source is None:
            word_source = self._build_word_source(seed=seed, day=day)

        if self.socketio is not None:
            sink = SocketIOSink(self.socketio, room=f"game_{game_id}", game_id=game_id, config=self.config)
        else:
            sink = PresentationSink()

        session = GameSession(
            word_source,
            sink=sink,
            max_attempts=self.config.MAX_ATTEMPTS,
            auto_settle=auto_settle,
            game_id=game_id
        ).start()

        with self._lock:
            self.games[game_id] = session
            self._session_locks[game_id] = threading.Lock()
            self._last_activity[game_id] = time.monotonic()
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        with self._lock:
            return self.games.get(game_id)

    def _checkout(self, game_id: str) -> Tuple[Optional[GameSession], Optional[threading.Lock]]:
        """Look up a session and its lock, marking the game as active."""
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None, None
            self._last_activity[game_id] = time.monotonic()
            return session, self._session_locks[game_id]

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        session, session_lock = self._checkout(game_id)
        if session is None:
            return None

        with session_lock:
            return GameState(
                game_id=game_id,
                word_length=session.word_length,
                max_attempts=session.max_attempts,
                current_row=session.board.current_row_index,
                phase=session.phase.value,
                outcome=session.outcome.value,
                accepting_input=session.accepting_input(),
                game_over=session.is_over,
                won=session.outcome.value == 'won',
                board=session.board.to_list(),
                guesses=session.guesses.copy(),
                letter_status=session.keyboard.as_dict(),
                answer=session.secret_word if session.is_over else None,
                created_at=session.created_at.isoformat() if session.created_at else None
            )

    def handle_action(self, game_id: str, action: GameAction) -> Optional[List[GameEvent]]:
        """
        Forwards one input action to a session.

        Returns:
            Events emitted by the session, or None if game not found
        """
        session, session_lock = self._checkout(game_id)
        if session is None:
            return None

        with session_lock:
            return session.handle(action)

    def make_guess(self, game_id: str, guess: str) -> Optional[List[GameEvent]]:
        """
        Types a whole word into the current row and submits it.

        Any letters already on the row are replaced. The reveal is settled
        immediately so the next guess can follow straight away.

        Returns:
            Events emitted by the submit, or None if game not found
        """
        session, session_lock = self._checkout(game_id)
        if session is None:
            return None

        with session_lock:
            if not session.accepting_input():
                session.handle(settle())
            if not session.accepting_input():
                return []

            while session.accumulator.current_guess_length() > 0:
                session.handle(delete())
            for ch in guess.strip():
                action = parse_key(ch)
                if action is not None and action.kind == LETTER:
                    session.handle(action)

            events = session.handle(submit())
            session.handle(settle())
            return events

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                del self._session_locks[game_id]
                del self._last_activity[game_id]
                return True
        return False

    def cleanup_idle_games(self, max_idle_seconds: Optional[float] = None, now: Optional[float] = None) -> dict:
        """
        Removes every game with no activity for longer than max_idle_seconds.

        Args:
            max_idle_seconds: Idle limit, defaults to GAME_IDLE_TIMEOUT_SECONDS
            now: Current time.monotonic() reading

        Returns:
            dict: cleaned_count and the removed game_ids
        """
        if max_idle_seconds is None:
            max_idle_seconds = self.config.GAME_IDLE_TIMEOUT_SECONDS
        if now is None:
            now = time.monotonic()

        with self._lock:
            expired = [game_id for game_id, last_seen in self._last_activity.items()
                       if now - last_seen > max_idle_seconds]
            for game_id in expired:
                del self.games[game_id]
                del self._session_locks[game_id]
                del self._last_activity[game_id]

        return {"cleaned_count": len(expired), "game_ids": expired}


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config=Config, socketio=None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(config=config, socketio=socketio)
    return _game_service
