"""
WebSocket Event Handlers

Real-time play: clients join a game room, send key presses and reveal
completion, and receive one 'game_event' per presentation event plus a
'game_state' snapshot after every action.
"""

from dataclasses import asdict

from flask import request
from flask_socketio import emit, join_room, leave_room

from ..services.game_service import get_game_service
from ..services.input_adapter import parse_key, settle
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def _broadcast_state(game_service, game_id):
        state = game_service.get_game_state(game_id)
        socketio.emit('game_state', {
            'success': True,
            'state': asdict(state)
        }, room=game_room(game_id))

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room for real-time updates."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_id = (data or {}).get('game_id')
            if not game_id:
                emit('error', {'error': 'Game ID is required'})
                return

            state = game_service.get_game_state(game_id)
            if state is None:
                emit('error', {'error': 'Game not found'})
                return

            join_room(game_room(game_id))
            game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

            emit('game_state', {
                'success': True,
                'state': asdict(state)
            })

        except Exception as e:
            game_logger.log_error(request, e, 'join_game')
            emit('error', {'error': str(e)})

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        leave_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} left game {game_id}")

    @socketio.on('key_press')
    def handle_key_press(data):
        """Forward a key press; events reach the room through the session sink."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            data = data or {}
            game_id = data.get('game_id')
            key = data.get('key')
            if not game_id or key is None:
                emit('error', {'error': 'Game ID and key are required'})
                return

            game_logger.log_user_action(request, 'key_press', game_id, key=key, transport='websocket')

            action = parse_key(key)
            if action is None:
                emit('error', {'error': f'Unsupported key: {key!r}'})
                return

            events = game_service.handle_action(game_id, action)
            if events is None:
                emit('error', {'error': 'Game not found'})
                return

            _broadcast_state(game_service, game_id)

        except Exception as e:
            game_logger.log_error(request, e, 'key_press')
            emit('error', {'error': str(e)})

    @socketio.on('settled')
    def handle_settled(data):
        """The client finished revealing the last scored row."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_id = (data or {}).get('game_id')
            if not game_id:
                emit('error', {'error': 'Game ID is required'})
                return

            if game_service.handle_action(game_id, settle()) is None:
                emit('error', {'error': 'Game not found'})
                return

            _broadcast_state(game_service, game_id)

        except Exception as e:
            game_logger.log_error(request, e, 'settled')
            emit('error', {'error': str(e)})
