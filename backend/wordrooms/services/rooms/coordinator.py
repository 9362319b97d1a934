import logging
import threading
from typing import Callable, Optional

from wordrooms.models import Room
from .errors import GameInProgress, RoomFull, RoomNotFound
from .registry import RoomRegistry
from .scheduler import RoundScheduler

logger = logging.getLogger(__name__)


class GameCoordinator:
    """Room lifecycle and event protocol.

    One method per inbound socket event. Every method takes ``self._lock``,
    so each one is atomic with respect to all room state no matter how many
    threads the Socket.IO server dispatches on, and the broadcasts it issues
    go out in order. ``join_room`` is the only operation that raises; the
    others silently ignore unknown rooms and non-members.
    """

    def __init__(
        self,
        registry: RoomRegistry,
        broadcaster,
        word_source: Callable[[], str],
        scheduler: RoundScheduler,
        max_players: int = 4,
        min_players: int = 2,
        new_round_delay: float = 5.0,
    ):
        self.registry = registry
        self.max_players = max_players
        self.min_players = min_players
        self.new_round_delay = new_round_delay
        self._broadcaster = broadcaster
        self._word_source = word_source
        self._scheduler = scheduler
        # Re-entrant: the scheduler may fire start_new_round inline
        self._lock = threading.RLock()

    # ---- inbound events ----

    def create_room(self, sid: str) -> Room:
        with self._lock:
            code = self.registry.generate_code()
            room = Room(code, sid, self._word_source())
            self.registry.add(room)
            self._broadcaster.subscribe(sid, code)
            self._broadcaster.send_to(sid, 'roomCreated', {'roomCode': code, 'playerId': sid})
            logger.info(f"[room-create] room={code} player={sid}")
            return room

    def join_room(self, sid: str, room_code) -> Room:
        with self._lock:
            room = self.registry.get(room_code)
            if room is None:
                raise RoomNotFound()
            if room.has_player(sid):
                self._broadcaster.send_to(sid, 'roomJoined', {'roomCode': room.code, 'playerId': sid})
                return room
            if room.started:
                raise GameInProgress()
            if len(room.players) >= self.max_players:
                raise RoomFull()

            room.add_player(sid)
            self._broadcaster.subscribe(sid, room.code)
            self._broadcaster.send_to(sid, 'roomJoined', {'roomCode': room.code, 'playerId': sid})
            self._broadcaster.broadcast(room.code, 'playerJoined', {'players': room.serialize_players()})
            logger.info(f"[room-join] room={room.code} player={sid} size={len(room.players)}")
            return room

    def player_ready(self, sid: str, room_code) -> None:
        with self._lock:
            room = self.registry.get(room_code)
            if room is None:
                return
            player = room.get_player(sid)
            if player:
                player.ready = True

            self._broadcaster.broadcast(room.code, 'playerReadyUpdate', {'players': room.serialize_players()})

            if not room.started and room.all_ready() and len(room.players) >= self.min_players:
                room.started = True
                self._broadcaster.broadcast(room.code, 'gameStart', {'wordToGuess': room.word_to_guess})
                logger.info(f"[game-start] room={room.code} players={len(room.players)}")

    def player_move(self, sid: str, room_code, row=None, text=None, status=None) -> None:
        with self._lock:
            room = self.registry.get(room_code)
            if room is None:
                return
            self._broadcaster.broadcast_except(room.code, sid, 'opponentMove', {
                'playerId': sid,
                'row': row,
                'text': text,
                'status': status,
            })

    def player_win(self, sid: str, room_code) -> None:
        with self._lock:
            room = self.registry.get(room_code)
            if room is None or not room.has_player(sid):
                return
            room.award_win(sid)
            self._broadcaster.broadcast(room.code, 'roundComplete', {
                'winner': sid,
                'scores': dict(room.scores),
                'wordToGuess': room.word_to_guess,
            })
            logger.info(f"[round-complete] room={room.code} winner={sid} scores={room.scores}")
            self._scheduler.schedule(room.code, self.new_round_delay, self.start_new_round)

    def leave_room(self, sid: str, room_code) -> bool:
        with self._lock:
            room = self.registry.get(room_code)
            if room is None:
                return False
            return self._remove_player(room, sid)

    def disconnect(self, sid: str) -> int:
        """Remove ``sid`` from every room it occupies; returns the room count."""
        with self._lock:
            rooms = self.registry.rooms_with_player(sid)
            for room in rooms:
                self._remove_player(room, sid)
            return len(rooms)

    # ---- deferred actions ----

    def start_new_round(self, room_code: str) -> bool:
        with self._lock:
            room = self.registry.get(room_code)
            if room is None:
                logger.info(f"[round-skip] room={room_code} no longer exists")
                return False
            room.word_to_guess = self._word_source()
            room.reset_readiness()
            self._broadcaster.broadcast(room.code, 'newRound', {'wordToGuess': room.word_to_guess})
            logger.info(f"[round-reset] room={room.code}")
            return True

    # ---- read-only views ----

    def snapshot(self, room_code) -> Optional[dict]:
        with self._lock:
            room = self.registry.get(room_code)
            return room.to_dict() if room else None

    def room_count(self) -> int:
        with self._lock:
            return len(self.registry)

    def _remove_player(self, room: Room, sid: str) -> bool:
        if not room.remove_player(sid):
            return False
        self._broadcaster.unsubscribe(sid, room.code)
        if not room.players:
            self.registry.remove(room.code)
            self._scheduler.cancel(room.code)
            logger.info(f"[room-delete] room={room.code} (empty)")
        else:
            self._broadcaster.broadcast(room.code, 'playerLeft', {'players': room.serialize_players()})
            logger.info(f"[room-leave] room={room.code} player={sid} size={len(room.players)}")
        return True
