"""
Инфраструктурный слой: хранилища в памяти и логирование.
"""

from .logger import StandardLogger, configure_logging
from .repositories import (
    DEFAULT_ROOMS,
    InMemoryBookingStore,
    InMemoryRoomCatalog,
    JsonFileRoomCatalog,
)

__all__ = [
    "DEFAULT_ROOMS",
    "InMemoryRoomCatalog",
    "JsonFileRoomCatalog",
    "InMemoryBookingStore",
    "StandardLogger",
    "configure_logging",
]
