"""
WebSocket Event Handlers

Relays game engine events to the Socket.IO room of each game.
"""

from dataclasses import asdict

from flask import request
from flask_socketio import emit, join_room, leave_room

from ..services.game_service import GameNotFoundError, get_game_service
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join the room of a game and receive its current state."""
        game_service = get_game_service()
        game_id = (data or {}).get('game_id')
        if not game_service or not game_id:
            emit('error', {'error': 'game_id is required'})
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        join_room(game_id)
        game_logger.log_user_action(request, 'join_game', game_id)
        emit('game_state', asdict(state))

    @socketio.on('leave_game')
    def handle_leave_game(data):
        game_id = (data or {}).get('game_id')
        if game_id:
            leave_room(game_id)

    @socketio.on('key')
    def handle_key(data):
        """Apply a key press and broadcast the resulting events to the room."""
        game_service = get_game_service()
        data = data or {}
        game_id = data.get('game_id')
        key = data.get('key')
        if not game_service or not game_id or key is None:
            emit('error', {'error': 'game_id and key are required'})
            return

        game_logger.log_user_action(request, 'key_press', game_id, key=key)

        try:
            state, events = game_service.press_key(game_id, key)
        except GameNotFoundError:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        for event in events:
            socketio.emit(event.name, {'game_id': game_id, **event.payload}, to=game_id)
        if events:
            socketio.emit('game_state', asdict(state), to=game_id)
