"""
Прикладной слой: сервисы, DTO и результаты операций.
"""

from .dto import (
    BookingDTO,
    CreateBookingRequest,
    CurrentBookingDTO,
    RoomDTO,
    RoomStatusDTO,
)
from .interfaces import ILogger
from .locking import RoomLockRegistry
from .results import Failure, Result, Success
from .services import BookingApplicationService, RoomApplicationService

__all__ = [
    "BookingApplicationService",
    "RoomApplicationService",
    "RoomLockRegistry",
    "ILogger",
    # DTO
    "CreateBookingRequest",
    "BookingDTO",
    "RoomDTO",
    "RoomStatusDTO",
    "CurrentBookingDTO",
    # Результаты
    "Success",
    "Failure",
    "Result",
]
