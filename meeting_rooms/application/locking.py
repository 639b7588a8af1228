from threading import Lock
from typing import Dict

from ..domain import RoomId


class RoomLockRegistry:
    """Реестр блокировок: по одной на каждую комнату.

    Операции над разными комнатами выполняются параллельно, над одной
    комнатой строго по очереди.
    """

    def __init__(self) -> None:
        self._guard = Lock()
        self._locks: Dict[RoomId, Lock] = {}

    def for_room(self, room_id: RoomId) -> Lock:
        """Возвращает блокировку комнаты, создавая ее при первом обращении."""
        with self._guard:
            lock = self._locks.get(room_id)
            if lock is None:
                lock = self._locks[room_id] = Lock()
            return lock
