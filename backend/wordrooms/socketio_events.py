import logging
from enum import Enum
from typing import Any, Callable, Dict

from flask import request
from flask_socketio import emit

from wordrooms import socketio
from wordrooms.services.rooms import GameCoordinator, RoomError, normalize_room_code

logger = logging.getLogger(__name__)


class InboundEvent(str, Enum):
    CREATE_ROOM = 'createRoom'
    JOIN_ROOM = 'joinRoom'
    PLAYER_READY = 'playerReady'
    PLAYER_MOVE = 'playerMove'
    PLAYER_WIN = 'playerWin'
    LEAVE_ROOM = 'leaveRoom'


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _fields(data) -> Dict[str, Any]:
    return data if isinstance(data, dict) else {}


def _room_code(data):
    """Room code from either a bare string payload or ``{'roomCode': ...}``."""
    if isinstance(data, dict):
        data = data.get('roomCode')
    return normalize_room_code(data)


def handle_create_room(coordinator: GameCoordinator, data=None):
    coordinator.create_room(_get_sid())


def handle_join_room(coordinator: GameCoordinator, data=None):
    coordinator.join_room(_get_sid(), _room_code(data))


def handle_player_ready(coordinator: GameCoordinator, data=None):
    coordinator.player_ready(_get_sid(), _room_code(_fields(data)))


def handle_player_move(coordinator: GameCoordinator, data=None):
    fields = _fields(data)
    coordinator.player_move(
        _get_sid(),
        _room_code(fields),
        row=fields.get('row'),
        text=fields.get('text'),
        status=fields.get('status'),
    )


def handle_player_win(coordinator: GameCoordinator, data=None):
    coordinator.player_win(_get_sid(), _room_code(_fields(data)))


def handle_leave_room(coordinator: GameCoordinator, data=None):
    coordinator.leave_room(_get_sid(), _room_code(data))


EVENT_HANDLERS: Dict[InboundEvent, Callable] = {
    InboundEvent.CREATE_ROOM: handle_create_room,
    InboundEvent.JOIN_ROOM: handle_join_room,
    InboundEvent.PLAYER_READY: handle_player_ready,
    InboundEvent.PLAYER_MOVE: handle_player_move,
    InboundEvent.PLAYER_WIN: handle_player_win,
    InboundEvent.LEAVE_ROOM: handle_leave_room,
}


def _bind(coordinator: GameCoordinator, event: InboundEvent, handler: Callable) -> Callable:
    def _handler(data=None):
        try:
            handler(coordinator, data)
        except RoomError as exc:
            logger.info(f"[rejected] event={event.value} sid={_get_sid()} reason={exc.message}")
            emit('error', exc.to_payload())
    _handler.__name__ = handler.__name__
    return _handler


def register_socketio_handlers(coordinator: GameCoordinator, namespace: str = '/') -> None:
    """Register Socket.IO event handlers bound to ``coordinator``.

    Every ``InboundEvent`` must have an entry in ``EVENT_HANDLERS``;
    registration fails loudly otherwise.
    """
    missing = set(InboundEvent) - set(EVENT_HANDLERS)
    if missing:
        raise RuntimeError(f"No socket handler for: {sorted(e.value for e in missing)}")

    def handle_connect(auth=None):
        logger.info(f"[connect] sid={_get_sid()}")

    def handle_disconnect(*args):
        sid = _get_sid()
        left = coordinator.disconnect(sid)
        logger.info(f"[disconnect] sid={sid} rooms_left={left}")

    def handle_error(exc):
        logger.exception(f"[socket-error] sid={_get_sid()} event failed: {exc}")

    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    for event, handler in EVENT_HANDLERS.items():
        socketio.on_event(event.value, _bind(coordinator, event, handler), namespace=namespace)
    socketio.on_error(namespace)(handle_error)
