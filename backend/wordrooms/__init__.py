from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(value):
    if not value or value == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def _run_inline(fn, *args, **kwargs):
    return fn(*args, **kwargs)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ALLOWED_ORIGINS'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from wordrooms.broadcast import SocketIOBroadcaster
    from wordrooms.services.rooms import GameCoordinator, RoomRegistry, RoundScheduler
    from wordrooms.services.words import get_random_word

    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    if flask_app.config.get('TESTING'):
        # In tests, deferred rounds fire inline for determinism
        scheduler = RoundScheduler(start_task=_run_inline, sleep=socketio.sleep)
    else:
        scheduler = RoundScheduler(start_task=socketio.start_background_task, sleep=socketio.sleep)

    coordinator = GameCoordinator(
        registry=RoomRegistry(code_length=int(flask_app.config.get('ROOM_CODE_LENGTH', 4))),
        broadcaster=SocketIOBroadcaster(socketio, namespace=namespace),
        word_source=get_random_word,
        scheduler=scheduler,
        max_players=int(flask_app.config.get('MAX_PLAYERS', 4)),
        min_players=int(flask_app.config.get('MIN_PLAYERS', 2)),
        new_round_delay=float(flask_app.config.get('NEW_ROUND_DELAY_SEC', 5)),
    )
    flask_app.extensions['wordrooms'] = coordinator

    from wordrooms.routes import main
    flask_app.register_blueprint(main)

    # Register Socket.IO event handlers on the freshly initialized server
    from wordrooms.socketio_events import register_socketio_handlers
    register_socketio_handlers(coordinator, namespace=namespace)

    flask_app.logger.info(f"[startup] namespace={namespace} max_players={coordinator.max_players}")
    return flask_app
