"""
Инфраструктурный слой: реализации каталога комнат и хранилища бронирований.
"""

from pathlib import Path
from threading import RLock
from typing import Dict, Iterable, List, Optional

from pydantic import TypeAdapter

from ..domain import (
    Booking,
    BookingDraft,
    BookingId,
    BookingStore,
    Clock,
    Room,
    RoomCatalog,
    RoomId,
    generate_id,
    now,
)

DEFAULT_ROOMS = (
    Room(
        id="room-001",
        name="Conference Room A",
        capacity=10,
        amenities=("Projector", "Whiteboard", "Video Conferencing", "TV Display"),
    ),
    Room(
        id="room-002",
        name="Meeting Room B",
        capacity=6,
        amenities=("Whiteboard", "TV Display"),
    ),
    Room(
        id="room-003",
        name="Small Room C",
        capacity=4,
        amenities=("Whiteboard",),
    ),
    Room(
        id="room-004",
        name="Executive Boardroom",
        capacity=12,
        amenities=(
            "Projector",
            "Whiteboard",
            "Video Conferencing",
            "TV Display",
            "Coffee Machine",
        ),
    ),
)


class InMemoryRoomCatalog(RoomCatalog):
    """Каталог комнат в памяти. Заполняется один раз при создании."""

    def __init__(self, rooms: Optional[Iterable[Room]] = None):
        self._rooms: Dict[RoomId, Room] = {}
        for room in DEFAULT_ROOMS if rooms is None else rooms:
            if room.id in self._rooms:
                raise ValueError(f"Room with id {room.id} already exists")
            self._rooms[room.id] = room

    def list_rooms(self) -> List[Room]:
        return list(self._rooms.values())

    def get_room(self, room_id: RoomId) -> Optional[Room]:
        return self._rooms.get(room_id)


class JsonFileRoomCatalog(InMemoryRoomCatalog):
    """Каталог комнат, загружаемый из JSON-файла."""

    def __init__(self, file_path: str):
        """
        Инициализирует каталог.

        Args:
            file_path: Путь к JSON-файлу со списком комнат
        """
        self._file_path = Path(file_path)
        super().__init__(self._load_rooms())

    def _load_rooms(self) -> List[Room]:
        """Загружает комнаты из файла."""
        if not self._file_path.exists():
            raise FileNotFoundError(f"Room catalog {self._file_path} not found")

        raw_data = self._file_path.read_text(encoding="utf-8")
        if not raw_data.strip():
            raise ValueError(f"Room catalog {self._file_path} is empty")

        return TypeAdapter(List[Room]).validate_json(raw_data)


class InMemoryBookingStore(BookingStore):
    """Реализация хранилища бронирований в памяти.

    Все операции выполняются под общей блокировкой, поэтому изменения
    сразу видны всем последующим чтениям.
    """

    def __init__(self, clock: Clock = now):
        self._bookings: Dict[BookingId, Booking] = {}
        self._clock = clock
        self._lock = RLock()

    def list_bookings(self) -> List[Booking]:
        with self._lock:
            return list(self._bookings.values())

    def get_booking(self, booking_id: BookingId) -> Optional[Booking]:
        with self._lock:
            return self._bookings.get(booking_id)

    def list_bookings_for_room(self, room_id: RoomId) -> List[Booking]:
        with self._lock:
            return [
                booking
                for booking in self._bookings.values()
                if booking.room_id == room_id
            ]

    def insert(self, draft: BookingDraft) -> Booking:
        booking = Booking.from_draft(
            draft, booking_id=generate_id(), created_at=self._clock()
        )
        with self._lock:
            self._bookings[booking.id] = booking
        return booking

    def remove(self, booking_id: BookingId) -> bool:
        with self._lock:
            return self._bookings.pop(booking_id, None) is not None

    def clear(self) -> None:
        """Удаляет все бронирования."""
        with self._lock:
            self._bookings.clear()
