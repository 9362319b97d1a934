import logging
import threading
from typing import Callable, Dict, Set

logger = logging.getLogger(__name__)


class RoundScheduler:
    """Run a deferred callback for a room without blocking the event thread.

    ``start_task(fn, *args)`` launches ``fn`` (``socketio.start_background_task``
    in production) and ``sleep(seconds)`` waits cooperatively
    (``socketio.sleep``). The callback receives the room code only, so it
    must re-fetch the room when it fires.

    Every ``schedule`` call gets its own token. ``cancel`` drops all tokens
    for a code; a worker whose token is gone when it wakes up does nothing.
    """

    def __init__(self, start_task: Callable, sleep: Callable[[float], None]):
        self._start_task = start_task
        self._sleep = sleep
        self._lock = threading.Lock()
        self._pending: Dict[str, Set[object]] = {}

    def schedule(self, room_code: str, delay: float, callback: Callable[[str], object]) -> object:
        token = object()
        with self._lock:
            self._pending.setdefault(room_code, set()).add(token)
        logger.debug(f"[timer-set] room={room_code} delay={delay}s")
        self._start_task(self._run, room_code, token, delay, callback)
        return token

    def cancel(self, room_code: str) -> int:
        with self._lock:
            tokens = self._pending.pop(room_code, set())
        if tokens:
            logger.debug(f"[timer-cancel] room={room_code} count={len(tokens)}")
        return len(tokens)

    def pending(self, room_code: str) -> int:
        with self._lock:
            return len(self._pending.get(room_code, ()))

    def _run(self, room_code: str, token: object, delay: float, callback: Callable[[str], object]) -> None:
        if delay > 0:
            self._sleep(delay)
        with self._lock:
            tokens = self._pending.get(room_code)
            alive = tokens is not None and token in tokens
            if alive:
                tokens.discard(token)
                if not tokens:
                    del self._pending[room_code]
        if not alive:
            logger.debug(f"[timer-abort] room={room_code} cancelled")
            return
        logger.debug(f"[timer-fire] room={room_code}")
        callback(room_code)
