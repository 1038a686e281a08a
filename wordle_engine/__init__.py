"""
Wordle Engine Application Package

Guess evaluation and game-state engine for a Wordle-style game, with a
Flask / Socket.IO presentation layer serving isolated game sessions.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from .config import Config

__version__ = '1.0.0'


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
