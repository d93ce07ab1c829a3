"""
Request Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import request, jsonify

from ..models.game import GameState
from .game_logger import game_logger


def require_game_state(f):
    """
    Decorator for endpoints that act on a client-held game record.

    Reads the ``state`` field of the JSON body, rebuilds the ``GameState`` and
    passes it to the view as ``state``. Missing or malformed records get a 400.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        data = request.get_json(silent=True) or {}
        record = data.get('state') if isinstance(data, dict) else None

        if record is None:
            return jsonify({
                'success': False,
                'error': 'Game state is required'
            }), 400

        try:
            state = GameState.from_dict(record)
        except (KeyError, TypeError, ValueError) as e:
            game_logger.log_error(request, e, f.__name__)
            return jsonify({
                'success': False,
                'error': 'Malformed game state'
            }), 400

        kwargs['state'] = state
        return f(*args, **kwargs)

    return decorated_function
