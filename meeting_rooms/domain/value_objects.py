"""
Объекты-значения и утилиты доменного слоя.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

# Идентификаторы комнат и бронирований: непрозрачные строки
RoomId = str
BookingId = str


def generate_id() -> BookingId:
    """Генерирует новый идентификатор бронирования."""
    return str(uuid.uuid4())


def now() -> datetime:
    """Возвращает текущий момент времени в UTC."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Приводит момент времени к UTC; наивное время считается UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class TimeSlot:
    """Полуоткрытый интервал времени [start, end)."""

    start: datetime
    end: datetime

    @property
    def is_empty(self) -> bool:
        """Пустой или перевернутый интервал."""
        return self.start >= self.end

    def overlaps(self, other: TimeSlot) -> bool:
        """Проверяет пересечение интервалов.

        Интервалы, которые лишь касаются границами, не пересекаются:
        встреча до 11:00 и встреча с 11:00 допустимы одновременно.
        Пустой интервал (start == end) пересекается с интервалом, внутри
        которого лежит, но не с тем, на границе которого стоит.
        """
        return self.start < other.end and self.end > other.start

    def contains(self, instant: datetime) -> bool:
        """Проверяет, попадает ли момент времени в интервал."""
        return self.start <= instant < self.end
