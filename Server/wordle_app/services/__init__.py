"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate_guess
from .game_service import GameService, get_game_service, initialize_game_service
from .game_session import GameSession
from .input_accumulator import InputAccumulator
from .input_adapter import GameAction, parse_key
from .keyboard import KeyboardState
from .presentation import PresentationSink, RecordingSink, SocketIOSink
from .word_source import ListWordSource, WordSource, daily_selector, index_selector, seeded_selector

__all__ = [
    'evaluate_guess',
    'GameService', 'get_game_service', 'initialize_game_service',
    'GameSession', 'InputAccumulator', 'GameAction', 'parse_key', 'KeyboardState',
    'PresentationSink', 'RecordingSink', 'SocketIOSink',
    'ListWordSource', 'WordSource', 'daily_selector', 'index_selector', 'seeded_selector'
]
