"""
Game Controller

Handles all game-related HTTP endpoints.
"""

import re
from dataclasses import asdict
from datetime import date

from flask import Blueprint, request, jsonify

from ..models.game import EventType
from ..services.game_service import get_game_service
from ..services.input_adapter import parse_key, settle
from ..services.presentation import presentation_hints
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)

_WORD = re.compile(r'^[a-zA-Z]+$')


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _serialize_events(events, config):
    serialized = []
    for event in events:
        payload = event.to_dict()
        payload['hints'] = presentation_hints(event, config)
        serialized.append(payload)
    return serialized


def _log_outcome(game_id, state, events, guess):
    """Log a GAME_EVENT when the events just emitted ended the game."""
    event_types = {event.type for event in events}
    if EventType.WON in event_types:
        game_logger.log_game_event(
            game_id, 'game_won', request.remote_addr,
            rounds_used=len(state.guesses), target_word=state.answer,
            winning_guess=guess
        )
    elif EventType.LOST in event_types:
        game_logger.log_game_event(
            game_id, 'game_lost', request.remote_addr,
            rounds_used=len(state.guesses), target_word=state.answer,
            final_guess=guess
        )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True) or {}
        seed = data.get('seed')
        day = data.get('day')
        auto_settle = data.get('auto_settle', False)

        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            return jsonify({
                'success': False,
                'error': 'Seed must be an integer'
            }), 400

        if not isinstance(auto_settle, bool):
            return jsonify({
                'success': False,
                'error': 'auto_settle must be a boolean'
            }), 400

        if day is not None:
            try:
                day = date.fromisoformat(day)
            except (TypeError, ValueError):
                return jsonify({
                    'success': False,
                    'error': 'Day must be an ISO date (YYYY-MM-DD)'
                }), 400

        game_logger.log_user_action(request, 'new_game', seed=seed, day=str(day) if day else None)

        game_id = game_service.create_new_game(seed=seed, day=day, auto_settle=auto_settle)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except ValueError as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_row=state.current_row, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/key', methods=['POST'])
def press_key(game_id):
    """Forward one key press (letter, Backspace/Delete or Enter) to the game."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or 'key' not in data:
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
            return jsonify(error_response), 400

        key = data['key']
        game_logger.log_user_action(request, 'key_press', game_id, key=key)

        action = parse_key(key)
        if action is None:
            error_response = {
                'success': False,
                'error': f'Unsupported key: {key!r}'
            }
            game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
            return jsonify(error_response), 400

        events = game_service.handle_action(game_id, action)
        if events is None:
            return _not_found('key_press', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'events': _serialize_events(events, game_service.config),
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'key_press', True, response_data, game_id)
        _log_outcome(game_id, state, events, state.guesses[-1] if state.guesses else None)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key_press', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/settle', methods=['POST'])
def settle_row(game_id):
    """Signal that the client finished revealing the last row."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'settle', game_id)

        events = game_service.handle_action(game_id, settle())
        if events is None:
            return _not_found('settle', game_id)

        response_data = {
            'success': True,
            'state': asdict(game_service.get_game_state(game_id))
        }
        game_logger.log_server_response(request, 'settle', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'settle', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'settle', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Type and submit a whole word in one request."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess) if isinstance(guess, str) else None
        )

        session = game_service.get_session(game_id)
        if session is None:
            return _not_found('submit_guess', game_id)

        word_length = session.word_length
        if not isinstance(guess, str) or not _WORD.match(guess.strip()) or len(guess.strip()) != word_length:
            error_response = {
                'success': False,
                'error': f'Guess must be exactly {word_length} letters'
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=error_response['error'], attempted_guess=guess
            )
            return jsonify(error_response), 400

        events = game_service.make_guess(game_id, guess)
        if events is None:
            return _not_found('submit_guess', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'events': _serialize_events(events, game_service.config),
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, round=len(state.guesses), game_over=state.game_over
        )
        _log_outcome(game_id, state, events, guess.strip().lower())

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)

        return jsonify(response_data), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
