"""
Game Controller

Handles all game-related HTTP endpoints. The server keeps no game state:
clients send their saved record with each request and store the record that
comes back.
"""

from flask import Blueprint, request, jsonify, current_app

from ..config.game_settings import WORD_LIST, WORD_SET
from ..models.game import GameStatus
from ..models.stats import Stats
from ..services.game_service import (
    apply_guess, current_date_key, is_date_key, keyboard_view, new_game,
    overall_letter_knowledge, share_text, validate_guess
)
from ..services.stats_service import record_finished_game, win_percentage
from ..utils.decorators import require_game_state
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _knowledge_payload(state):
    return {letter: status.value for letter, status in overall_letter_knowledge(state.guesses).items()}


def _today() -> str:
    return current_date_key(tz_name=current_app.config['PUZZLE_TIMEZONE'])


@game_bp.route('/today', methods=['GET'])
def today():
    """Return the current puzzle day."""
    game_logger.log_user_action(request, 'today')
    return jsonify({'success': True, 'date_key': _today()})


@game_bp.route('/new_game', methods=['POST'])
def create_game():
    """Create the fresh game record for a day (today unless ``date_key`` is given)."""
    try:
        data = request.get_json(silent=True) or {}
        date_key = data.get('date_key') or _today()

        game_logger.log_user_action(request, 'new_game', date_key)

        if not is_date_key(date_key):
            error_response = {
                'success': False,
                'error': 'date_key must be formatted YYYY-MM-DD'
            }
            game_logger.log_server_response(request, 'new_game', False, error_response, date_key)
            return jsonify(error_response), 400

        state = new_game(
            date_key,
            max_rounds=current_app.config['MAX_ROUNDS'],
            rack_size_start=current_app.config['RACK_SIZE_START'],
            draw_per_round=current_app.config['DRAW_PER_ROUND'],
        )

        response_data = {
            'success': True,
            'state': state.to_dict(),
            'keyboard': keyboard_view(state.rack, state.guesses)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, date_key,
            max_rounds=state.max_rounds, rack_size=state.rack.total()
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


@game_bp.route('/guess', methods=['POST'])
@require_game_state
def make_guess(state):
    """Validate a guess against the submitted record and return the next record."""
    try:
        data = request.get_json(silent=True) or {}
        guess = data.get('guess')

        game_logger.log_user_action(request, 'submit_guess', state.date_key, guess=guess)

        if state.status is not GameStatus.PLAYING:
            error_response = {
                'success': False,
                'error': 'Game is already over'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, state.date_key)
            return jsonify(error_response), 400

        error = validate_guess(guess, state.rack, WORD_SET)
        if error:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, state.date_key,
                validation_error=error, attempted_guess=guess
            )
            return jsonify(error_response), 400

        next_state = apply_guess(state, guess)

        response_data = {
            'success': True,
            'state': next_state.to_dict(),
            'knowledge': _knowledge_payload(next_state),
            'keyboard': keyboard_view(next_state.rack, next_state.guesses)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, state.date_key,
            guess=guess, round=len(next_state.guesses), status=next_state.status.value
        )

        if next_state.status is GameStatus.WON:
            game_logger.log_game_event(
                state.date_key, 'game_won', request.remote_addr,
                rounds_used=len(next_state.guesses), winning_guess=guess
            )
        elif next_state.status is GameStatus.LOST:
            game_logger.log_game_event(
                state.date_key, 'game_lost', request.remote_addr,
                rounds_used=len(next_state.guesses), final_guess=guess
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', state.date_key)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, state.date_key)
        return jsonify(error_response), 500


@game_bp.route('/share', methods=['POST'])
@require_game_state
def share(state):
    """Render the share text for a game record."""
    game_logger.log_user_action(request, 'share', state.date_key)
    return jsonify({'success': True, 'text': share_text(state)})


@game_bp.route('/knowledge', methods=['POST'])
@require_game_state
def knowledge(state):
    """Best known status per guessed letter, plus the keyboard model."""
    game_logger.log_user_action(request, 'knowledge', state.date_key)
    return jsonify({
        'success': True,
        'knowledge': _knowledge_payload(state),
        'keyboard': keyboard_view(state.rack, state.guesses)
    })


@game_bp.route('/stats', methods=['POST'])
@require_game_state
def update_stats(state):
    """Fold a finished game into the client's stats record."""
    try:
        data = request.get_json(silent=True) or {}
        stats = record_finished_game(Stats.from_dict(data.get('stats')), state)

        game_logger.log_user_action(request, 'update_stats', state.date_key, status=state.status.value)

        return jsonify({
            'success': True,
            'stats': stats.to_dict(),
            'win_percentage': win_percentage(stats)
        })

    except (AttributeError, TypeError, ValueError) as e:
        game_logger.log_error(request, e, 'update_stats', state.date_key)
        return jsonify({
            'success': False,
            'error': 'Malformed stats record'
        }), 400


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_logger.log_user_action(request, 'health_check')
    return jsonify({
        'status': 'healthy',
        'word_count': len(WORD_LIST),
        'log_stats': game_logger.get_log_stats()
    })
