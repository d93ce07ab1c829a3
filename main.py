"""
Rackle Server - Main Entry Point

This is the main entry point for the Rackle puzzle server.
It validates the word list and starts the Flask application.
"""

from rackle import create_app
from rackle.config import Config, validate_word_list_integrity
from rackle.utils.game_logger import game_logger


def main():
    """Main function to validate configuration and start the server."""
    try:
        print("Validating word list...")
        validate_word_list_integrity()
        print("✓ Word list validated")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Rackle Server Starting")

        print(f"\nStarting Rackle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Rackle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
