"""
Доменная модель: комнаты и бронирования.
"""

from datetime import datetime
from typing import Tuple

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from .value_objects import BookingId, RoomId, TimeSlot


class Room(BaseModel):
    """Переговорная комната из каталога."""

    model_config = ConfigDict(frozen=True)

    id: RoomId = Field(..., min_length=1)
    name: str
    capacity: int = Field(..., gt=0)
    amenities: Tuple[str, ...] = ()  # Оборудование комнаты в порядке каталога


class BookingDraft(BaseModel):
    """Кандидат в бронирование: еще без идентификатора и даты создания."""

    model_config = ConfigDict(frozen=True)

    room_id: RoomId
    title: str
    start_time: AwareDatetime
    end_time: AwareDatetime
    organizer_email: str

    @property
    def slot(self) -> TimeSlot:
        return TimeSlot(start=self.start_time, end=self.end_time)


class Booking(BookingDraft):
    """Бронирование комнаты.

    Бронирование не изменяется после создания. Единственный переход
    после создания это отмена, которая удаляет его из хранилища.
    """

    id: BookingId
    created_at: datetime

    @classmethod
    def from_draft(
        cls, draft: BookingDraft, booking_id: BookingId, created_at: datetime
    ) -> "Booking":
        """Создает бронирование из кандидата."""
        return cls(id=booking_id, created_at=created_at, **draft.model_dump())
