from typing import Any, Dict, Optional

from .application import (
    BookingApplicationService,
    RoomApplicationService,
    RoomLockRegistry,
)
from .config import Settings, load_settings
from .domain import Clock, now
from .infrastructure import (
    InMemoryBookingStore,
    InMemoryRoomCatalog,
    JsonFileRoomCatalog,
    StandardLogger,
    configure_logging,
)


def bootstrap_app(
    settings: Optional[Settings] = None, clock: Clock = now
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger = StandardLogger()

    # 1. Каталог комнат и хранилище бронирований в единственном экземпляре
    if settings.catalog_path:
        room_catalog = JsonFileRoomCatalog(settings.catalog_path)
    else:
        room_catalog = InMemoryRoomCatalog()
    booking_store = InMemoryBookingStore(clock=clock)

    # 2. Создаем сервисы, передавая им общие зависимости
    booking_service = BookingApplicationService(
        room_catalog=room_catalog,
        booking_store=booking_store,
        logger=logger,
        locks=RoomLockRegistry(),
        clock=clock,
    )
    room_service = RoomApplicationService(
        room_catalog=room_catalog,
        booking_store=booking_store,
        logger=logger,
        clock=clock,
    )

    logger.info(
        "Приложение инициализировано",
        rooms=len(room_catalog.list_rooms()),
        catalog_path=settings.catalog_path,
    )

    return {
        "settings": settings,
        "room_catalog": room_catalog,
        "booking_store": booking_store,
        "booking_service": booking_service,
        "room_service": room_service,
    }
