"""
DTO (Data Transfer Objects) прикладного слоя.

Внешнее представление использует camelCase-имена полей и моменты времени
в формате ISO-8601.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from ..domain import Booking, OccupancyStatus, Room, RoomOccupancy, as_utc


def _is_number(value: str) -> bool:
    try:
        float(value.strip())
    except ValueError:
        return False
    return True


class CamelModel(BaseModel):
    """Базовая модель DTO с camelCase-псевдонимами."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_dict(self) -> dict:
        """Возвращает JSON-совместимый словарь для транспортного слоя."""
        return self.model_dump(mode="json", by_alias=True)


# DTO для входящих данных


class CreateBookingRequest(CamelModel):
    """Запрос на создание бронирования."""

    room_id: str
    title: str
    start_time: datetime
    end_time: datetime
    organizer_email: str

    # Здесь проверяется только разбор типов. Порядок времени и существование
    # комнаты проверяют BookingPolicy и каталог, каждый со своим видом ошибки.
    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def reject_epoch_numbers(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) or (isinstance(v, str) and _is_number(v)):
            raise ValueError("Ожидается момент времени в формате ISO-8601")
        return v

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


# DTO для исходящих данных


class BookingDTO(CamelModel):
    """DTO для представления бронирования."""

    id: str
    room_id: str
    title: str
    start_time: datetime
    end_time: datetime
    organizer_email: str
    created_at: datetime

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=booking.id,
            room_id=booking.room_id,
            title=booking.title,
            start_time=booking.start_time,
            end_time=booking.end_time,
            organizer_email=booking.organizer_email,
            created_at=booking.created_at,
        )


class RoomDTO(CamelModel):
    """DTO для представления комнаты."""

    id: str
    name: str
    capacity: int
    amenities: List[str]

    @classmethod
    def from_domain(cls, room: Room) -> "RoomDTO":
        return cls(
            id=room.id,
            name=room.name,
            capacity=room.capacity,
            amenities=list(room.amenities),
        )


class CurrentBookingDTO(CamelModel):
    """Краткие сведения о бронировании, занимающем комнату сейчас."""

    id: str
    title: str
    start_time: datetime
    end_time: datetime


class RoomStatusDTO(RoomDTO):
    """DTO комнаты с текущим состоянием занятости."""

    current_status: OccupancyStatus
    current_booking: Optional[CurrentBookingDTO] = None

    @classmethod
    def from_occupancy(cls, occupancy: RoomOccupancy) -> "RoomStatusDTO":
        room, status, booking = occupancy
        current_booking = None
        if booking is not None:
            current_booking = CurrentBookingDTO(
                id=booking.id,
                title=booking.title,
                start_time=booking.start_time,
                end_time=booking.end_time,
            )
        return cls(
            id=room.id,
            name=room.name,
            capacity=room.capacity,
            amenities=list(room.amenities),
            current_status=status,
            current_booking=current_booking,
        )
