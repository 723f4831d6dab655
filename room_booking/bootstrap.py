from typing import Any, Dict, Optional

from .application import RoomBookingApplicationService
from .config import Settings, configure_logging, settings as default_settings
from .infrastructure import (
    InMemoryEventBus,
    InMemoryReferenceChecker,
    InMemoryRoomBookingRepository,
    JsonFileRoomBookingRepository,
    RoomBookingUnitOfWork,
)


def bootstrap_app(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or default_settings
    configure_logging(settings.logging)

    # 1. Хранилище выбирается по настройкам
    if settings.storage.backend == "json":
        repository = JsonFileRoomBookingRepository(settings.storage.path)
    else:
        repository = InMemoryRoomBookingRepository()
    uow = RoomBookingUnitOfWork(repository)

    # 2. Реестр ссылок заполняется владельцами номеров, бронирований и отелей
    reference_checker = InMemoryReferenceChecker()
    event_bus = InMemoryEventBus()

    # 3. Создаем сервис, передавая ему зависимости
    service = RoomBookingApplicationService(
        uow=uow,
        reference_checker=reference_checker,
        event_bus=event_bus,
    )

    return {
        "uow": uow,
        "reference_checker": reference_checker,
        "event_bus": event_bus,
        "room_booking_service": service,
    }
