"""
Presentation Sinks

A session reports everything the player should see through a sink. Sinks
only render; by the time a sink is called the session state is already
committed.
"""

from typing import Dict, List, Optional

from ..config.app_config import Config
from ..config.game_settings import ALERT_INCOMPLETE_GUESS, ALERT_INVALID_WORD, ALERT_WON
from ..models.game import EventType, GameEvent, LetterStatus


class PresentationSink:
    """Receives session events. Every hook is a no-op by default."""

    def notify(self, event: GameEvent) -> None:
        """Dispatch an event to the matching on_* hook."""
        if event.type == EventType.INCOMPLETE_GUESS:
            self.on_incomplete_guess()
        elif event.type == EventType.INVALID_WORD:
            self.on_invalid_word()
        elif event.type == EventType.CELL_EVALUATED:
            self.on_cell_evaluated(event.row_index, event.cell_index, event.status)
        elif event.type == EventType.ROW_COMPLETE:
            self.on_row_complete(event.row_index)
        elif event.type == EventType.WON:
            self.on_won()
        elif event.type == EventType.LOST:
            self.on_lost(event.secret_word)

    def on_incomplete_guess(self) -> None:
        pass

    def on_invalid_word(self) -> None:
        pass

    def on_cell_evaluated(self, row_index: int, cell_index: int, status: LetterStatus) -> None:
        pass

    def on_row_complete(self, row_index: int) -> None:
        pass

    def on_won(self) -> None:
        pass

    def on_lost(self, secret_word: str) -> None:
        pass


class RecordingSink(PresentationSink):
    """Keeps every event it receives, in order."""

    def __init__(self):
        self.events: List[GameEvent] = []

    def notify(self, event: GameEvent) -> None:
        self.events.append(event)
        super().notify(event)

    def types(self) -> List[EventType]:
        return [event.type for event in self.events]

    def clear(self) -> None:
        self.events.clear()


def presentation_hints(event: GameEvent, config=Config) -> Dict:
    """
    Alert and animation hints for an event, matching the browser client:
    tiles flip one after another, winning tiles dance with a shorter stagger,
    rejected guesses shake, and the losing alert stays up until dismissed.
    """
    flip = config.FLIP_ANIMATION_DURATION_MS
    dance = config.DANCE_ANIMATION_DURATION_MS

    if event.type == EventType.INCOMPLETE_GUESS:
        return {'alert': ALERT_INCOMPLETE_GUESS, 'alert_duration_ms': config.ALERT_DURATION_MS,
                'animation': 'shake'}
    if event.type == EventType.INVALID_WORD:
        return {'alert': ALERT_INVALID_WORD, 'alert_duration_ms': config.ALERT_DURATION_MS,
                'animation': 'shake'}
    if event.type == EventType.CELL_EVALUATED:
        return {'animation': 'flip', 'duration_ms': flip,
                'delay_ms': (event.cell_index * flip) // 2}
    if event.type == EventType.WON:
        return {'alert': ALERT_WON, 'alert_duration_ms': config.WIN_ALERT_DURATION_MS,
                'animation': 'dance', 'duration_ms': dance, 'stagger_ms': dance // 5}
    if event.type == EventType.LOST:
        return {'alert': (event.secret_word or '').upper(), 'alert_duration_ms': None}
    return {}


class SocketIOSink(PresentationSink):
    """Pushes each event, with presentation hints, to a Socket.IO room."""

    def __init__(self, socketio, room: str, game_id: Optional[str] = None, config=Config):
        self.socketio = socketio
        self.room = room
        self.game_id = game_id
        self.config = config

    def notify(self, event: GameEvent) -> None:
        payload = event.to_dict()
        payload['game_id'] = self.game_id
        payload['hints'] = presentation_hints(event, self.config)
        self.socketio.emit('game_event', payload, room=self.room)
