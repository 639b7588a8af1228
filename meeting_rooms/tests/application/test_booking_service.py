"""
Тесты сервиса приложения для бронирований.
"""

import uuid
from datetime import datetime, timedelta, timezone
from itertools import combinations

import pytest

from meeting_rooms.application import (
    BookingApplicationService,
    BookingDTO,
    Failure,
    Success,
)
from meeting_rooms.domain import BookingErrorKind


def at(hour: int, minute: int = 0) -> str:
    """ISO-8601 момент в день тестов (15.01.2030, UTC)."""
    return datetime(2030, 1, 15, hour, minute, tzinfo=timezone.utc).isoformat()


def create(
    service: BookingApplicationService,
    room_id="room-001",
    start=None,
    end=None,
    title="Дизайн-ревью",
    organizer_email="anna@example.com",
):
    return service.create_booking(
        room_id=room_id,
        title=title,
        start_time=at(10) if start is None else start,
        end_time=at(11) if end is None else end,
        organizer_email=organizer_email,
    )


class TestCreateBooking:
    def test_successful_booking(self, booking_service: BookingApplicationService, clock):
        result = create(booking_service)

        assert isinstance(result, Success)
        assert result.ok
        booking = result.value
        assert isinstance(booking, BookingDTO)
        assert uuid.UUID(booking.id)
        assert booking.room_id == "room-001"
        assert booking.created_at == clock()

    def test_round_trip_through_room_listing(
        self, booking_service: BookingApplicationService
    ):
        created = create(
            booking_service,
            room_id="room-002",
            title="Планерка",
            organizer_email="ivan@example.com",
        ).value

        listed = booking_service.list_bookings_for_room("room-002")

        assert isinstance(listed, Success)
        assert listed.value == [created]
        fetched = listed.value[0]
        assert fetched.title == "Планерка"
        assert fetched.start_time == datetime(2030, 1, 15, 10, tzinfo=timezone.utc)
        assert fetched.end_time == datetime(2030, 1, 15, 11, tzinfo=timezone.utc)
        assert fetched.organizer_email == "ivan@example.com"
        assert fetched.id
        assert fetched.created_at is not None

    def test_accepts_datetime_objects(self, booking_service: BookingApplicationService):
        start = datetime(2030, 1, 15, 14, tzinfo=timezone.utc)
        result = create(booking_service, start=start, end=start + timedelta(hours=1))
        assert result.ok
        assert result.value.start_time == start

    def test_past_start_fails_regardless_of_other_fields(
        self, booking_service: BookingApplicationService
    ):
        result = create(booking_service, room_id="room-999", start=at(8), end=at(7))

        assert isinstance(result, Failure)
        assert not result.ok
        assert result.kind == BookingErrorKind.PAST_START_TIME
        assert "прошлом" in result.reason

    @pytest.mark.parametrize("end_hour", [10, 9])
    def test_empty_or_inverted_interval_fails(
        self, booking_service: BookingApplicationService, end_hour: int
    ):
        result = create(booking_service, start=at(10), end=at(end_hour))
        assert result.kind == BookingErrorKind.INVALID_INTERVAL

    def test_unknown_room_fails(self, booking_service: BookingApplicationService):
        result = create(booking_service, room_id="room-999")

        assert result.kind == BookingErrorKind.ROOM_NOT_FOUND
        assert "room-999" in result.reason

    def test_back_to_back_bookings_are_accepted(
        self, booking_service: BookingApplicationService
    ):
        first = create(booking_service, start=at(10), end=at(11))
        second = create(booking_service, start=at(11), end=at(12))

        assert first.ok and second.ok
        assert len(booking_service.list_bookings_for_room("room-001").value) == 2

    def test_overlapping_booking_is_rejected(
        self, booking_service: BookingApplicationService, booking_store
    ):
        assert create(booking_service, start=at(10), end=at(11)).ok

        result = create(booking_service, start=at(10, 30), end=at(11, 30))

        assert result.kind == BookingErrorKind.SLOT_UNAVAILABLE
        assert len(booking_store.list_bookings()) == 1

    def test_same_slot_in_other_room_is_accepted(
        self, booking_service: BookingApplicationService
    ):
        assert create(booking_service, room_id="room-001").ok
        assert create(booking_service, room_id="room-002").ok

    def test_failed_booking_leaves_no_state(
        self, booking_service: BookingApplicationService, booking_store
    ):
        create(booking_service, start=at(8), end=at(9))
        create(booking_service, start=at(12), end=at(12))
        create(booking_service, room_id="room-999")
        assert booking_store.list_bookings() == []

    @pytest.mark.parametrize(
        "field, value",
        [
            ("start", "завтра в десять"),
            ("end", "2030-13-45T25:00:00Z"),
            ("start", 1894611600),
            ("end", "1894615200"),
        ],
    )
    def test_unparseable_timestamp_fails(
        self, booking_service: BookingApplicationService, field: str, value
    ):
        result = create(booking_service, **{field: value})

        assert result.kind == BookingErrorKind.INVALID_REQUEST

    @pytest.mark.parametrize("field", ["title", "organizer_email", "room_id"])
    def test_past_start_reported_before_empty_fields(
        self, booking_service: BookingApplicationService, field: str
    ):
        result = create(booking_service, start=at(8), end=at(9), **{field: ""})

        assert result.kind == BookingErrorKind.PAST_START_TIME

    def test_empty_room_id_is_unknown_room(
        self, booking_service: BookingApplicationService
    ):
        result = create(booking_service, room_id="")

        assert result.kind == BookingErrorKind.ROOM_NOT_FOUND

    def test_title_and_email_are_not_validated(
        self, booking_service: BookingApplicationService
    ):
        result = create(booking_service, title="", organizer_email="")

        assert result.ok
        assert result.value.title == ""

    def test_naive_timestamps_are_treated_as_utc(
        self, booking_service: BookingApplicationService
    ):
        result = create(booking_service, start="2030-01-15T10:00:00", end="2030-01-15T11:00:00")
        assert result.value.start_time == datetime(2030, 1, 15, 10, tzinfo=timezone.utc)

    def test_offset_timestamps_conflict_with_same_instant(
        self, booking_service: BookingApplicationService
    ):
        assert create(booking_service, start=at(10), end=at(11)).ok

        result = create(
            booking_service,
            start="2030-01-15T13:30:00+03:00",
            end="2030-01-15T14:30:00+03:00",
        )

        assert result.kind == BookingErrorKind.SLOT_UNAVAILABLE


class TestCancelBooking:
    def test_cancel_existing_booking(self, booking_service: BookingApplicationService):
        booking = create(booking_service).value

        result = booking_service.cancel_booking(booking.id)

        assert isinstance(result, Success)
        assert result.value is None
        assert booking_service.get_booking(booking.id).kind == BookingErrorKind.BOOKING_NOT_FOUND
        assert booking_service.list_bookings_for_room("room-001").value == []

    def test_cancel_twice_fails(self, booking_service: BookingApplicationService):
        booking = create(booking_service).value
        booking_service.cancel_booking(booking.id)

        result = booking_service.cancel_booking(booking.id)

        assert result.kind == BookingErrorKind.BOOKING_NOT_FOUND

    def test_cancel_unknown_booking_fails(self, booking_service: BookingApplicationService):
        result = booking_service.cancel_booking(str(uuid.uuid4()))
        assert result.kind == BookingErrorKind.BOOKING_NOT_FOUND

    def test_cancelled_slot_can_be_booked_again(
        self, booking_service: BookingApplicationService
    ):
        booking = create(booking_service).value
        booking_service.cancel_booking(booking.id)

        assert create(booking_service).ok


class TestQueries:
    def test_get_booking(self, booking_service: BookingApplicationService):
        booking = create(booking_service).value
        assert booking_service.get_booking(booking.id).value == booking

    def test_list_bookings_for_unknown_room(
        self, booking_service: BookingApplicationService
    ):
        result = booking_service.list_bookings_for_room("room-999")
        assert result.kind == BookingErrorKind.ROOM_NOT_FOUND

    def test_list_bookings_for_empty_room(self, booking_service: BookingApplicationService):
        assert booking_service.list_bookings_for_room("room-004").value == []


def test_no_overlaps_after_mixed_operations(
    booking_service: BookingApplicationService, booking_store
):
    """После любой последовательности операций бронирования комнаты не пересекаются."""
    created = []
    for room_id in ("room-001", "room-002"):
        for start_hour, end_hour in [(10, 12), (11, 13), (12, 14), (9, 10), (13, 15)]:
            result = create(
                booking_service, room_id=room_id, start=at(start_hour), end=at(end_hour)
            )
            if result.ok:
                created.append(result.value)

    booking_service.cancel_booking(created[0].id)
    create(booking_service, room_id="room-001", start=at(10, 30), end=at(11, 30))
    create(booking_service, room_id="room-001", start=at(11), end=at(12))

    for room_id in ("room-001", "room-002"):
        bookings = booking_store.list_bookings_for_room(room_id)
        for a, b in combinations(bookings, 2):
            assert not a.slot.overlaps(b.slot)
