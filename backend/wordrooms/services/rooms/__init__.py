"""Room domain services: registry, protocol coordinator and round timers.

Everything here is transport-agnostic. Socket handlers call into
``GameCoordinator`` and receive outbound traffic through the broadcaster
object it was built with.
"""

from .coordinator import GameCoordinator
from .errors import GameInProgress, RoomError, RoomFull, RoomNotFound
from .registry import RoomRegistry, generate_room_code, normalize_room_code
from .scheduler import RoundScheduler

__all__ = [
    'GameCoordinator',
    'GameInProgress',
    'RoomError',
    'RoomFull',
    'RoomNotFound',
    'RoomRegistry',
    'RoundScheduler',
    'generate_room_code',
    'normalize_room_code',
]
