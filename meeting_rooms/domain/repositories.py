from abc import ABC, abstractmethod
from typing import List, Optional

from .models import Booking, BookingDraft, Room
from .value_objects import BookingId, RoomId


class RoomCatalog(ABC):
    """Каталог комнат, доступный только для чтения."""

    @abstractmethod
    def list_rooms(self) -> List[Room]:
        """Возвращает все комнаты в порядке каталога."""
        raise NotImplementedError

    @abstractmethod
    def get_room(self, room_id: RoomId) -> Optional[Room]:
        """Находит комнату по идентификатору."""
        raise NotImplementedError


class BookingStore(ABC):
    """Хранилище бронирований.

    Хранилище не проверяет бизнес-правила: за проверку отвечает
    вызывающий код.
    """

    @abstractmethod
    def list_bookings(self) -> List[Booking]:
        raise NotImplementedError

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Optional[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_bookings_for_room(self, room_id: RoomId) -> List[Booking]:
        raise NotImplementedError

    @abstractmethod
    def insert(self, draft: BookingDraft) -> Booking:
        """Сохраняет кандидата, присваивая ему идентификатор и дату создания."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, booking_id: BookingId) -> bool:
        """Удаляет бронирование; возвращает False, если его не было."""
        raise NotImplementedError
