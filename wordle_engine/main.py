"""
Wordle Engine Server - Main Entry Point

Initializes the word repository and game service, then starts the
Flask-SocketIO application.
"""

from . import create_app
from .config import Config, config
from .models.game import GameRules
from .services.game_service import initialize_game_service
from .services.word_repository import WordRepository
from .utils.game_logger import game_logger


def main(config_name: str = 'default'):
    config_class = config.get(config_name, Config)
    app, socketio = create_app(config_class)

    word_repository = WordRepository.from_json(
        config_class.WORD_LIST_PATH, word_length=config_class.WORD_LENGTH
    )
    rules = GameRules(word_length=config_class.WORD_LENGTH, max_guesses=config_class.MAX_GUESSES)
    initialize_game_service(word_repository, rules)

    game_logger.logger.info(
        f"Starting server on {config_class.HOST}:{config_class.PORT} "
        f"with {len(word_repository)} words"
    )
    socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG,
                 allow_unsafe_werkzeug=True)


if __name__ == '__main__':
    main()
