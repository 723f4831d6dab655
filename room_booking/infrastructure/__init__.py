"""
Инфраструктурный слой: репозитории, реестр ссылок, шина событий
и единица работы.
"""

from .event_bus import InMemoryEventBus
from .references import InMemoryReferenceChecker
from .repositories import InMemoryRoomBookingRepository, JsonFileRoomBookingRepository
from .unit_of_work import RoomBookingUnitOfWork

__all__ = [
    "InMemoryEventBus",
    "InMemoryReferenceChecker",
    "InMemoryRoomBookingRepository",
    "JsonFileRoomBookingRepository",
    "RoomBookingUnitOfWork",
]
