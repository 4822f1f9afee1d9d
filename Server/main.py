"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

from wordle import create_app
from wordle.config import Config, COLUMNS, ROWS
from wordle.services.game_service import initialize_game_service
from wordle.services.word_source import WordSource
from wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        word_source = WordSource(
            word_length=COLUMNS,
            api_url=Config.RANDOM_WORD_API_URL,
            timeout=Config.RANDOM_WORD_TIMEOUT
        )
        initialize_game_service(word_source)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info(f"Wordle Server Starting - {ROWS} rows x {COLUMNS} columns, "
                                f"word API: {Config.RANDOM_WORD_API_URL or 'disabled'}")

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
