"""
Общие фикстуры тестов.
"""

from datetime import datetime, timedelta, timezone

import pytest

from meeting_rooms.application import BookingApplicationService, RoomApplicationService
from meeting_rooms.infrastructure import (
    InMemoryBookingStore,
    InMemoryRoomCatalog,
    StandardLogger,
)

NOW = datetime(2030, 1, 15, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    """Управляемые часы для тестов."""

    def __init__(self, current: datetime = NOW):
        self.current = current

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def room_catalog() -> InMemoryRoomCatalog:
    return InMemoryRoomCatalog()


@pytest.fixture
def booking_store(clock: FakeClock) -> InMemoryBookingStore:
    return InMemoryBookingStore(clock=clock)


@pytest.fixture
def booking_service(room_catalog, booking_store, clock) -> BookingApplicationService:
    """Сервис бронирования с чистым хранилищем."""
    return BookingApplicationService(
        room_catalog=room_catalog,
        booking_store=booking_store,
        logger=StandardLogger("meeting_rooms.tests"),
        clock=clock,
    )


@pytest.fixture
def room_service(room_catalog, booking_store, clock) -> RoomApplicationService:
    return RoomApplicationService(
        room_catalog=room_catalog,
        booking_store=booking_store,
        logger=StandardLogger("meeting_rooms.tests"),
        clock=clock,
    )
