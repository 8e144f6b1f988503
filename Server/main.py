"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It builds the Flask-SocketIO application and starts serving.
"""

import threading
import time

from wordle_app import create_app
from wordle_app.config import Config, validate_word_list_integrity, TARGET_WORDS, DICTIONARY
from wordle_app.services.game_service import get_game_service
from wordle_app.utils.game_logger import game_logger


def idle_game_cleanup_worker(game_service, interval_seconds):
    """
    Background worker that periodically drops games nobody has touched
    for longer than GAME_IDLE_TIMEOUT_SECONDS.
    """
    print("Idle game cleanup worker started")
    while True:
        try:
            cleanup_result = game_service.cleanup_idle_games()

            if cleanup_result["cleaned_count"] > 0:
                print(f"Idle cleanup removed {cleanup_result['cleaned_count']} games")
                game_logger.logger.info(f"Idle cleanup: Removed {cleanup_result['cleaned_count']} games")

                for game_id in cleanup_result["game_ids"]:
                    game_logger.log_game_event(game_id, 'game_expired', None, reason='idle_timeout')

        except Exception as e:
            game_logger.logger.error(f"Error in idle game cleanup worker: {e}")

        time.sleep(interval_seconds)


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Validating word lists...")
        validate_word_list_integrity(TARGET_WORDS)
        validate_word_list_integrity(DICTIONARY)
        print(f"✓ {len(TARGET_WORDS)} target words, {len(DICTIONARY)} accepted guesses")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        # Start idle game cleanup worker in background thread
        cleanup_thread = threading.Thread(
            target=idle_game_cleanup_worker,
            args=(get_game_service(), Config.GAME_CLEANUP_INTERVAL_SECONDS),
            daemon=True
        )
        cleanup_thread.start()
        print(f"✓ Idle game cleanup worker started - checking every {Config.GAME_CLEANUP_INTERVAL_SECONDS} seconds")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Word selection: {Config.WORD_SELECTION}")
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
