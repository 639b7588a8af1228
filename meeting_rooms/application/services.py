"""
Прикладной слой: сервисы бронирования и состояния комнат.

Сервисы координируют проверку правил, поиск комнат и работу с хранилищем.
Ожидаемые отказы возвращаются как Failure; исключения доменного слоя
не выходят за границу сервисов.
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import ValidationError

from ..domain import (
    AvailabilityChecker,
    Booking,
    BookingDomainError,
    BookingDraft,
    BookingErrorKind,
    BookingNotFoundError,
    BookingPolicy,
    BookingStore,
    Clock,
    OccupancyInvariantError,
    RoomCatalog,
    RoomNotFoundError,
    SlotUnavailableError,
    StatusProjector,
    as_utc,
    now,
)
from .dto import BookingDTO, CreateBookingRequest, RoomDTO, RoomStatusDTO
from .interfaces import ILogger
from .locking import RoomLockRegistry
from .results import Failure, Result, Success

Timestamp = Union[str, datetime]


class BookingApplicationService:
    """Сервис приложения для создания и отмены бронирований."""

    def __init__(
        self,
        room_catalog: RoomCatalog,
        booking_store: BookingStore,
        logger: ILogger,
        locks: Optional[RoomLockRegistry] = None,
        clock: Clock = now,
    ):
        """Инициализирует сервис."""
        self.room_catalog = room_catalog
        self.booking_store = booking_store
        self._logger = logger
        self._locks = locks or RoomLockRegistry()
        self._policy = BookingPolicy(clock)
        self._availability = AvailabilityChecker(booking_store)

    def create_booking(
        self,
        room_id: str,
        title: str,
        start_time: Timestamp,
        end_time: Timestamp,
        organizer_email: str,
    ) -> Result[BookingDTO]:
        """Создает новое бронирование."""
        try:
            request = CreateBookingRequest(
                room_id=room_id,
                title=title,
                start_time=start_time,
                end_time=end_time,
                organizer_email=organizer_email,
            )
        except ValidationError as e:
            self._logger.warning(
                "Некорректный запрос на бронирование",
                room_id=room_id,
                errors=e.errors(include_url=False),
            )
            return Failure(
                kind=BookingErrorKind.INVALID_REQUEST,
                reason="Некорректные поля запроса: "
                + ", ".join(
                    ".".join(str(part) for part in error["loc"]) for error in e.errors()
                ),
            )

        try:
            booking = self._create(request)
        except BookingDomainError as e:
            self._logger.warning(
                "Бронирование отклонено",
                room_id=request.room_id,
                kind=e.kind.value,
                reason=e.message,
            )
            return Failure.from_error(e)

        self._logger.info(
            "Бронирование создано",
            booking_id=booking.id,
            room_id=booking.room_id,
            start_time=booking.start_time,
            end_time=booking.end_time,
        )
        return Success(BookingDTO.from_domain(booking))

    def _create(self, request: CreateBookingRequest) -> Booking:
        # Проверяем время бронирования
        self._policy.validate_times(request.start_time, request.end_time)

        # Проверяем, что комната существует
        room = self.room_catalog.get_room(request.room_id)
        if room is None:
            raise RoomNotFoundError(request.room_id)

        draft = BookingDraft(
            room_id=room.id,
            title=request.title,
            start_time=request.start_time,
            end_time=request.end_time,
            organizer_email=request.organizer_email,
        )

        # Проверка доступности и вставка выполняются под блокировкой комнаты
        with self._locks.for_room(room.id):
            conflicts = self._availability.find_conflicts(
                room.id, draft.start_time, draft.end_time
            )
            if conflicts:
                self._logger.debug(
                    "Найдены пересекающиеся бронирования",
                    room_id=room.id,
                    conflicting_ids=[b.id for b in conflicts],
                )
                raise SlotUnavailableError(room.id)

            return self.booking_store.insert(draft)

    def cancel_booking(self, booking_id: str) -> Result[None]:
        """Отменяет бронирование."""
        try:
            self._cancel(booking_id)
        except BookingDomainError as e:
            self._logger.warning(
                "Отмена отклонена", booking_id=booking_id, kind=e.kind.value
            )
            return Failure.from_error(e)

        self._logger.info("Бронирование отменено", booking_id=booking_id)
        return Success(None)

    def _cancel(self, booking_id: str) -> None:
        booking = self.booking_store.get_booking(booking_id)
        if booking is None:
            raise BookingNotFoundError(booking_id)

        with self._locks.for_room(booking.room_id):
            # Бронирование могли отменить, пока мы ждали блокировку
            if not self.booking_store.remove(booking_id):
                raise BookingNotFoundError(booking_id)

    def get_booking(self, booking_id: str) -> Result[BookingDTO]:
        """Возвращает информацию о бронировании."""
        booking = self.booking_store.get_booking(booking_id)
        if booking is None:
            return Failure.from_error(BookingNotFoundError(booking_id))
        return Success(BookingDTO.from_domain(booking))

    def list_bookings_for_room(self, room_id: str) -> Result[List[BookingDTO]]:
        """Возвращает бронирования комнаты."""
        if self.room_catalog.get_room(room_id) is None:
            return Failure.from_error(RoomNotFoundError(room_id))

        bookings = self.booking_store.list_bookings_for_room(room_id)
        return Success([BookingDTO.from_domain(booking) for booking in bookings])


class RoomApplicationService:
    """Сервис приложения для работы с комнатами."""

    def __init__(
        self,
        room_catalog: RoomCatalog,
        booking_store: BookingStore,
        logger: ILogger,
        clock: Clock = now,
    ):
        """Инициализирует сервис."""
        self.room_catalog = room_catalog
        self._logger = logger
        self._clock = clock
        self._projector = StatusProjector(room_catalog, booking_store)

    def list_rooms(self) -> List[RoomDTO]:
        """Возвращает все комнаты каталога."""
        return [RoomDTO.from_domain(room) for room in self.room_catalog.list_rooms()]

    def get_room(self, room_id: str) -> Result[RoomDTO]:
        """Возвращает информацию о комнате."""
        room = self.room_catalog.get_room(room_id)
        if room is None:
            return Failure.from_error(RoomNotFoundError(room_id))
        return Success(RoomDTO.from_domain(room))

    def list_rooms_with_status(
        self, instant: Optional[datetime] = None
    ) -> List[RoomStatusDTO]:
        """Возвращает комнаты с их состоянием на указанный момент.

        Если момент не передан, используется текущее время.

        Raises:
            OccupancyInvariantError: комната занята несколькими бронированиями
        """
        instant = self._clock() if instant is None else as_utc(instant)
        try:
            occupancies = self._projector.project(instant)
        except OccupancyInvariantError as e:
            self._logger.error(
                "Нарушен инвариант занятости комнаты",
                room_id=e.room_id,
                booking_ids=e.booking_ids,
            )
            raise

        return [RoomStatusDTO.from_occupancy(occupancy) for occupancy in occupancies]
