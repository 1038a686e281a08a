"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict

from flask import Blueprint, jsonify, request

from ..services.game_service import GameNotFoundError, get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

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
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, game_over=state.game_over
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
    """Apply one key press (letter, ENTER or BACKSPACE) to the game."""
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

        try:
            state, events = game_service.press_key(game_id, key)
        except GameNotFoundError:
            return _game_not_found('key_press', game_id)

        # Rejected keys are not errors; the event list is simply empty
        response_data = {
            'success': True,
            'state': asdict(state),
            'events': [event.to_dict() for event in events]
        }
        game_logger.log_server_response(
            request, 'key_press', True, response_data, game_id,
            events=[event.name for event in events]
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key_press', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a whole word for evaluation."""
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
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        try:
            state, events, error = game_service.make_guess(game_id, guess)
        except GameNotFoundError:
            return _game_not_found('submit_guess', game_id)

        if error is not None:
            error_response = {
                'success': False,
                'error': error.message,
                'error_kind': error.name,
                'state': asdict(state)
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'state': asdict(state),
            'events': [event.to_dict() for event in events]
        }
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            current_round=state.current_round, game_over=state.game_over
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
def reset_game(game_id):
    """Start over in the same session with a new target word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'reset_game', game_id)

        try:
            state = game_service.reset_game(game_id)
        except GameNotFoundError:
            return _game_not_found('reset_game', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'reset_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'reset_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Remove a game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'delete_game', game_id)

    if not game_service.delete_game(game_id):
        return _game_not_found('delete_game', game_id)

    response_data = {'success': True}
    game_logger.log_server_response(request, 'delete_game', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/stats', methods=['GET'])
def get_stats(game_id):
    """Statistics of the games finished in one session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'get_stats', game_id)

    try:
        stats = game_service.get_stats(game_id)
    except GameNotFoundError:
        return _game_not_found('get_stats', game_id)

    return jsonify({
        'success': True,
        'stats': stats
    })


@game_bp.route('/logs/stats', methods=['GET'])
def get_log_stats():
    """Counts of today's log entries, for monitoring."""
    stats = game_logger.get_log_stats()
    if 'error' in stats:
        return jsonify({'success': False, 'error': stats['error']}), 404
    return jsonify({
        'success': True,
        'stats': stats
    })
