"""
Доменные исключения контекста бронирования.
"""

from enum import Enum


class BookingErrorKind(str, Enum):
    """Виды ожидаемых отказов при работе с бронированиями."""

    PAST_START_TIME = "past_start_time"
    INVALID_INTERVAL = "invalid_interval"
    ROOM_NOT_FOUND = "room_not_found"
    SLOT_UNAVAILABLE = "slot_unavailable"
    BOOKING_NOT_FOUND = "booking_not_found"
    INVALID_REQUEST = "invalid_request"


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BookingDomainError(DomainException):
    """Нарушение бизнес-правила бронирования.

    Каждый подкласс несет свой вид ошибки, по которому прикладной слой
    формирует результат для внешнего вызывающего.
    """

    kind: BookingErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PastStartTimeError(BookingDomainError):
    kind = BookingErrorKind.PAST_START_TIME

    def __init__(self):
        super().__init__("Время начала бронирования не может быть в прошлом")


class InvalidIntervalError(BookingDomainError):
    kind = BookingErrorKind.INVALID_INTERVAL

    def __init__(self):
        super().__init__("Время начала бронирования должно быть раньше времени окончания")


class RoomNotFoundError(BookingDomainError):
    kind = BookingErrorKind.ROOM_NOT_FOUND

    def __init__(self, room_id: str):
        super().__init__(f"Комната {room_id} не найдена")
        self.room_id = room_id


class SlotUnavailableError(BookingDomainError):
    kind = BookingErrorKind.SLOT_UNAVAILABLE

    def __init__(self, room_id: str):
        super().__init__(
            f"Комната {room_id} недоступна на выбранное время: "
            f"есть пересекающееся бронирование"
        )
        self.room_id = room_id


class BookingNotFoundError(BookingDomainError):
    kind = BookingErrorKind.BOOKING_NOT_FOUND

    def __init__(self, booking_id: str):
        super().__init__(f"Бронирование {booking_id} не найдено")
        self.booking_id = booking_id


class OccupancyInvariantError(DomainException):
    """Комната одновременно занята несколькими бронированиями.

    Это не ожидаемый отказ, а признак нарушенного инварианта хранилища.
    """

    def __init__(self, room_id: str, booking_ids):
        ids = ", ".join(booking_ids)
        super().__init__(
            f"Комната {room_id} одновременно занята несколькими бронированиями: {ids}"
        )
        self.room_id = room_id
        self.booking_ids = list(booking_ids)
