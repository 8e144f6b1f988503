"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GameEvent, GameOutcome, GamePhase, EventType, LetterStatus
from .board import Board, GuessRow, LetterCell

__all__ = [
    'GameState', 'GameEvent', 'GameOutcome', 'GamePhase', 'EventType', 'LetterStatus',
    'Board', 'GuessRow', 'LetterCell'
]
