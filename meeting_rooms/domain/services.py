"""
Доменные сервисы контекста бронирования.

Содержит правила проверки времени бронирования, проверку доступности
комнаты и расчет текущей занятости комнат.
"""

from datetime import datetime
from enum import Enum
from typing import Callable, List, NamedTuple, Optional

from .exceptions import InvalidIntervalError, OccupancyInvariantError, PastStartTimeError
from .models import Booking, Room
from .repositories import BookingStore, RoomCatalog
from .value_objects import BookingId, RoomId, TimeSlot, now

Clock = Callable[[], datetime]


class BookingPolicy:
    """Правила корректности времени бронирования."""

    def __init__(self, clock: Clock = now):
        self._clock = clock

    def validate_times(self, start_time: datetime, end_time: datetime) -> None:
        """Проверяет интервал бронирования.

        Правила проверяются по порядку, первое нарушенное определяет ошибку:
        1. начало не раньше текущего момента;
        2. начало строго раньше окончания.

        Raises:
            PastStartTimeError: начало бронирования в прошлом
            InvalidIntervalError: пустой или перевернутый интервал
        """
        if start_time < self._clock():
            raise PastStartTimeError()

        if TimeSlot(start=start_time, end=end_time).is_empty:
            raise InvalidIntervalError()


class AvailabilityChecker:
    """Проверка доступности комнаты на интервал времени."""

    def __init__(self, booking_store: BookingStore):
        self.booking_store = booking_store

    def find_conflicts(
        self,
        room_id: RoomId,
        start_time: datetime,
        end_time: datetime,
        exclude_booking_id: Optional[BookingId] = None,
    ) -> List[Booking]:
        """Возвращает бронирования комнаты, пересекающиеся с интервалом."""
        candidate = TimeSlot(start=start_time, end=end_time)
        return [
            booking
            for booking in self.booking_store.list_bookings_for_room(room_id)
            if booking.id != exclude_booking_id and candidate.overlaps(booking.slot)
        ]

    def is_available(
        self,
        room_id: RoomId,
        start_time: datetime,
        end_time: datetime,
        exclude_booking_id: Optional[BookingId] = None,
    ) -> bool:
        """Проверяет, свободна ли комната на указанный интервал.

        Пустой интервал (start == end) проверяется тем же предикатом: внутри
        бронирования он занят, на границе или в свободное время доступен.
        В обычном сценарии такой интервал отсекает BookingPolicy.
        """
        return not self.find_conflicts(
            room_id, start_time, end_time, exclude_booking_id=exclude_booking_id
        )


class OccupancyStatus(str, Enum):
    """Текущее состояние комнаты."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"


class RoomOccupancy(NamedTuple):
    room: Room
    status: OccupancyStatus
    booking: Optional[Booking]


class StatusProjector:
    """Расчет текущей занятости комнат по данным хранилища.

    Состояние не кэшируется и вычисляется заново при каждом запросе.
    """

    def __init__(self, room_catalog: RoomCatalog, booking_store: BookingStore):
        self.room_catalog = room_catalog
        self.booking_store = booking_store

    def project(self, instant: datetime) -> List[RoomOccupancy]:
        """Возвращает состояние каждой комнаты на момент instant.

        Raises:
            OccupancyInvariantError: комната занята несколькими бронированиями
        """
        result = []
        for room in self.room_catalog.list_rooms():
            current = [
                booking
                for booking in self.booking_store.list_bookings_for_room(room.id)
                if booking.slot.contains(instant)
            ]
            if len(current) > 1:
                raise OccupancyInvariantError(room.id, [b.id for b in current])

            if current:
                result.append(RoomOccupancy(room, OccupancyStatus.OCCUPIED, current[0]))
            else:
                result.append(RoomOccupancy(room, OccupancyStatus.AVAILABLE, None))
        return result
