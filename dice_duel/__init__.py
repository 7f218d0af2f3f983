from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def parse_origins(raw):
    if not raw or raw.strip() == '*':
        return '*'
    return [o.strip() for o in raw.split(',') if o.strip()]


def create_app(config_class=Config, rng=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = parse_origins(flask_app.config.get('CORS_ALLOWED_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins, send_wildcard=allowed_origins == '*')

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One authoritative game per app, delivered over the app's Socket.IO namespace
    from dice_duel.services.games import GameCoordinator, SocketIOBroadcaster
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    flask_app.extensions['dice_duel'] = GameCoordinator(SocketIOBroadcaster(socketio, namespace), rng=rng)

    from dice_duel.main import main
    flask_app.register_blueprint(main)

    from dice_duel.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace)

    from dice_duel.cli import simulate_match_command
    flask_app.cli.add_command(simulate_match_command)

    return flask_app
