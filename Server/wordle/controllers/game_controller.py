"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service, GameNotFoundError
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


def _internal_error(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        # Log user action
        game_logger.log_user_action(request, 'new_game')
        
        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)
        
        response_data = {
            'success': True,
            'game_id': game_id,
            'state': state
        }
        
        game_logger.log_game_event(
            game_id, 'game_started', request.remote_addr,
            word_source=game_service.word_source.last_origin
        )
        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state['columns'], max_rounds=state['rows']
        )
        
        return jsonify(response_data)

    except Exception as e:
        return _internal_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        # Log user action
        game_logger.log_user_action(request, 'get_state', game_id)
        
        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': state
        }
        
        # Log successful response
        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_row=state['current_row'], game_over=state['game_over']
        )
        
        return jsonify(response_data)

    except GameNotFoundError:
        return _not_found('get_state', game_id)
    except Exception as e:
        return _internal_error('get_state', e, game_id)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
def press_key(game_id):
    """Apply one key press (letter, Backspace or Enter) to the current row."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('key'), str):
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
            return jsonify(error_response), 400
        
        key = data['key']
        
        # Log user action
        game_logger.log_user_action(request, 'key_press', game_id, key=key)
        
        action, accepted, result = game_service.handle_key(game_id, key)
        state = game_service.get_game_state(game_id)
        
        response_data = {
            'success': True,
            'action': action,
            'accepted': accepted,
            'result': result.to_dict() if result else None,
            'state': state
        }
        
        # Log successful response
        game_logger.log_server_response(
            request, 'key_press', True, response_data, game_id,
            key_action=action, accepted=accepted
        )
        if result:
            game_logger.log_submission(game_id, result, request.remote_addr, len(state['results']))
        
        return jsonify(response_data)

    except GameNotFoundError:
        return _not_found('key_press', game_id)
    except Exception as e:
        return _internal_error('key_press', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def submit_guess(game_id):
    """Submit the current row for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        # Log user action
        game_logger.log_user_action(request, 'submit_guess', game_id)
        
        result = game_service.submit_guess(game_id)
        state = game_service.get_game_state(game_id)
        
        response_data = {
            'success': result.accepted,
            'result': result.to_dict(),
            'state': state
        }
        
        if not result.accepted:
            response_data['error'] = {
                'incomplete_row': 'Not enough letters',
                'invalid_word': 'Not a valid word',
                'game_over': 'Game is already over',
            }[result.outcome.value]
            game_logger.log_server_response(
                request, 'submit_guess', False, response_data, game_id,
                validation_error=result.outcome.value, attempted_guess=result.guess
            )
            return jsonify(response_data), 400
        
        # Log successful response with game events
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=result.guess, round=len(state['results']), game_over=state['game_over']
        )
        game_logger.log_submission(game_id, result, request.remote_addr, len(state['results']))
        
        return jsonify(response_data)

    except GameNotFoundError:
        return _not_found('submit_guess', game_id)
    except Exception as e:
        return _internal_error('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        # Log user action
        game_logger.log_user_action(request, 'delete_game', game_id)
        
        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }
        
        # Log response
        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)
        
        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)
        return jsonify(response_data), 404

    except Exception as e:
        return _internal_error('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        
        # Log user action
        game_logger.log_user_action(request, 'health_check')
        
        response_data = {
            'status': 'healthy',
            'active_games': game_service.active_game_count() if game_service else 0,
            'log_stats': game_logger.get_log_stats(),
            'remote_word_api': game_service.word_source.api_url if game_service else None
        }
        
        # Log response
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
