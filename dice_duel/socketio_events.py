from flask import current_app, request
from flask_socketio import emit

from dice_duel import socketio
from dice_duel.services.games import GameCoordinator


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _coordinator() -> GameCoordinator:
    return current_app.extensions['dice_duel']


def handle_connect(auth=None):
    sid = _get_sid()
    current_app.logger.info(f"[connect] sid={sid}")
    emit('connected', {'sessionId': sid})


def handle_disconnect(reason=None):
    sid = _get_sid()
    current_app.logger.info(f"[disconnect] sid={sid} reason={reason}")
    _coordinator().disconnect(sid)


def handle_join_game(data=None):
    player_name = data.get('playerName') if isinstance(data, dict) else None
    _coordinator().join(_get_sid(), player_name)


def handle_roll_dice(data=None):
    _coordinator().roll(_get_sid())


def handle_new_game(data=None):
    _coordinator().new_game(_get_sid())


def register_socketio_handlers(namespace: str = '/') -> None:
    """Bind the game's inbound events on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('join_game', handle_join_game, namespace=namespace)
    socketio.on_event('roll_dice', handle_roll_dice, namespace=namespace)
    socketio.on_event('new_game', handle_new_game, namespace=namespace)
