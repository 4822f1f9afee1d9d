"""
WebSocket Event Handlers

Forwards raw key presses from the browser to the game service and emits
one event per outcome so the page can animate the grid.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.game import GuessOutcome
from ..services.game_service import get_game_service, GameNotFoundError
from ..utils.game_logger import game_logger

# Event emitted for each submission outcome
OUTCOME_EVENTS = {
    GuessOutcome.INCOMPLETE_ROW: 'incomplete_row',
    GuessOutcome.INVALID_WORD: 'invalid_word',
    GuessOutcome.CONTINUE: 'row_revealed',
    GuessOutcome.WON: 'game_won',
    GuessOutcome.LOST: 'game_lost',
    GuessOutcome.GAME_OVER: 'game_over',
}

# Games started on each socket: socket_id -> set of game_ids
connected_games = {}


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.info(f"WebSocket: client {request.sid} connected")

    @socketio.on('disconnect')
    def handle_disconnect(reason=None):
        """Drop every game the socket started and did not leave."""
        game_ids = connected_games.pop(request.sid, set())
        game_service = get_game_service()
        if not game_service:
            return

        for game_id in game_ids:
            if game_service.delete_game(game_id):
                game_logger.log_game_event(
                    game_id, 'game_deleted', request.remote_addr,
                    reason='socket_disconnected'
                )

    @socketio.on('start_game')
    def handle_start_game(data=None):
        """Create a game and join its room."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        try:
            game_id = game_service.create_new_game()
            state = game_service.get_game_state(game_id)
        except Exception as e:
            game_logger.log_error(request, e, 'start_game')
            emit('error', {'error': str(e)})
            return

        join_room(f"game_{game_id}")
        connected_games.setdefault(request.sid, set()).add(game_id)
        game_logger.log_game_event(
            game_id, 'game_started', request.remote_addr,
            word_source=game_service.word_source.last_origin, transport='websocket'
        )

        emit('game_started', {
            'success': True,
            'game_id': game_id,
            'state': state
        })

    @socketio.on('leave_game')
    def handle_leave_game(data=None):
        """Leave a game room and drop the session."""
        game_service = get_game_service()
        game_id = (data or {}).get('game_id')
        if not game_service or not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        leave_room(f"game_{game_id}")
        connected_games.get(request.sid, set()).discard(game_id)
        if game_service.delete_game(game_id):
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

    @socketio.on('get_state')
    def handle_get_state(data=None):
        """Send the current game state."""
        game_service = get_game_service()
        game_id = (data or {}).get('game_id')
        if not game_service or not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        try:
            state = game_service.get_game_state(game_id)
        except GameNotFoundError:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        emit('game_state_update', {
            'success': True,
            'game_id': game_id,
            'state': state
        })

    @socketio.on('key_press')
    def handle_key_press(data=None):
        """Apply a key press and report what it did."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = data or {}
        game_id = data.get('game_id')
        key = data.get('key')
        if not game_id or not isinstance(key, str):
            emit('error', {'error': 'Game ID and key required'})
            return

        try:
            action, accepted, result = game_service.handle_key(game_id, key)
            state = game_service.get_game_state(game_id)
        except GameNotFoundError:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return
        except Exception as e:
            game_logger.log_error(request, e, 'key_press', game_id)
            emit('error', {'error': str(e), 'game_id': game_id})
            return

        payload = {
            'game_id': game_id,
            'key': key,
            'action': action,
            'state': state
        }

        if action == 'add_letter' and accepted:
            emit('letter_added', payload)
        elif action == 'remove_letter' and accepted:
            emit('letter_removed', payload)
        elif action == 'ignored':
            emit('key_ignored', payload)
        elif result is None:
            # Letter on a full row, Backspace at column 0, or input after the game ended
            emit('key_rejected', payload)
        else:
            payload['result'] = result.to_dict()
            emit(OUTCOME_EVENTS[result.outcome], payload)
            game_logger.log_submission(game_id, result, request.remote_addr, len(state['results']))
