"""
Rackle Application Package

A daily five-letter word puzzle played from a rack of letter tiles. The
``services`` package holds the deterministic puzzle engine; this module wires
it into a stateless Flask application.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    from .utils.game_logger import game_logger
    game_logger.configure(app.config['LOG_DIR'], app.config['LOG_LEVEL'])

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    return app
