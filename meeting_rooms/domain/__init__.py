"""
Доменный слой: модели, правила и порты хранилищ.
"""

from .exceptions import (
    BookingDomainError,
    BookingErrorKind,
    BookingNotFoundError,
    DomainException,
    InvalidIntervalError,
    OccupancyInvariantError,
    PastStartTimeError,
    RoomNotFoundError,
    SlotUnavailableError,
)
from .models import Booking, BookingDraft, Room
from .repositories import BookingStore, RoomCatalog
from .services import (
    AvailabilityChecker,
    BookingPolicy,
    Clock,
    OccupancyStatus,
    RoomOccupancy,
    StatusProjector,
)
from .value_objects import BookingId, RoomId, TimeSlot, as_utc, generate_id, now

__all__ = [
    # Модели
    "Room",
    "Booking",
    "BookingDraft",
    "TimeSlot",
    "RoomId",
    "BookingId",
    # Порты
    "RoomCatalog",
    "BookingStore",
    # Сервисы
    "BookingPolicy",
    "AvailabilityChecker",
    "StatusProjector",
    "OccupancyStatus",
    "RoomOccupancy",
    "Clock",
    # Исключения
    "DomainException",
    "BookingDomainError",
    "BookingErrorKind",
    "PastStartTimeError",
    "InvalidIntervalError",
    "RoomNotFoundError",
    "SlotUnavailableError",
    "BookingNotFoundError",
    "OccupancyInvariantError",
    # Утилиты
    "generate_id",
    "now",
    "as_utc",
]
