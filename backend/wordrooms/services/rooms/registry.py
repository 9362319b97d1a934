import random
import string
from typing import Dict, List, Optional

from wordrooms.models import Room

ROOM_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_room_code(registry, length=4):
    """Generate a short code that no live room is using."""
    while True:
        code = ''.join(random.choices(ROOM_CODE_ALPHABET, k=length))
        if code not in registry:
            return code


def normalize_room_code(value) -> Optional[str]:
    """Return the canonical (upper-case) form of an inbound room code.

    Anything that is not a non-empty string yields None, which every lookup
    treats as an unknown room.
    """
    if not isinstance(value, str):
        return None
    code = value.strip().upper()
    return code or None


class RoomRegistry:
    """Mapping of room code -> Room for every live room.

    Not synchronized on its own: callers hold the coordinator lock.
    """

    def __init__(self, code_length: int = 4):
        self.code_length = code_length
        self._rooms: Dict[str, Room] = {}

    def __contains__(self, code) -> bool:
        return code in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)

    def get(self, code) -> Optional[Room]:
        return self._rooms.get(normalize_room_code(code))

    def add(self, room: Room) -> None:
        if room.code in self._rooms:
            raise ValueError(f"room code {room.code} already registered")
        self._rooms[room.code] = room

    def remove(self, code: str) -> Optional[Room]:
        return self._rooms.pop(code, None)

    def codes(self) -> List[str]:
        return list(self._rooms)

    def rooms_with_player(self, player_id: str) -> List[Room]:
        return [room for room in self._rooms.values() if room.has_player(player_id)]

    def generate_code(self) -> str:
        return generate_room_code(self, self.code_length)
