"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import BOARD_COLS
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


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


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session and start its first round."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game(request.remote_addr or 'unknown')
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=BOARD_COLS, max_rounds=state.max_rounds
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


@game_bp.route('/game/<game_id>/next_round', methods=['POST'])
def next_round(game_id):
    """Start the next round of a session once the current one is over."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'next_round', game_id)

        if game_service.get_session(game_id) is None:
            return _not_found('next_round', game_id)

        started, error = game_service.start_next_round(game_id)
        if not started:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(request, 'next_round', False, error_response, game_id)
            return jsonify(error_response), 409

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'next_round', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'next_round', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'next_round', False, error_response, game_id)
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


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'guess' not in data:
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

        is_valid, error = game_service.is_valid_guess(game_id, guess)
        if not is_valid:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=error, attempted_guess=guess
            )
            status_code = 409 if session.round.is_complete else 400
            return jsonify(error_response), status_code

        state = game_service.make_guess(game_id, guess)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, round=state.current_round, game_over=state.game_over
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


@game_bp.route('/game/<game_id>/stats', methods=['GET'])
def get_stats(game_id):
    """Get the session's statistics."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'get_stats', game_id)

    stats = game_service.get_stats(game_id)
    if stats is None:
        return _not_found('get_stats', game_id)

    response_data = {
        'success': True,
        'stats': stats
    }
    game_logger.log_server_response(request, 'get_stats', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/stats', methods=['DELETE'])
def reset_stats(game_id):
    """Reset the session's statistics."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'reset_stats', game_id)

    if not game_service.reset_stats(game_id):
        return _not_found('reset_stats', game_id)

    response_data = {
        'success': True,
        'stats': game_service.get_stats(game_id)
    }
    game_logger.log_server_response(request, 'reset_stats', True, response_data, game_id)
    return jsonify(response_data)


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
    game_service = get_game_service()

    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_games': len(game_service.games) if game_service else 0,
        'accepted_words': len(game_service.word_source) if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)

    return jsonify(response_data)
