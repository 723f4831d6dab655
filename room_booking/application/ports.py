"""
Интерфейсы (порты) для контекста бронирования номеров.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol, Type, TypeVar

from ..domain import DomainEvent, EntityId, RoomBooking, RoomBookingStatus

T_Event = TypeVar("T_Event", bound=DomainEvent)


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> Any: ...
    def error(self, message: str, **kwargs: Any) -> Any: ...
    def warning(self, message: str, **kwargs: Any) -> Any: ...
    def debug(self, message: str, **kwargs: Any) -> Any: ...


class IEventBus(Protocol):
    """Интерфейс для шины событий."""

    def publish(self, event: DomainEvent) -> None: ...
    def subscribe(
        self, event_type: Type[T_Event], handler: Callable[[T_Event], None]
    ) -> None: ...


class IRoomBookingRepository(Protocol):
    """Интерфейс репозитория для бронирований номеров."""

    def add(self, room_booking: RoomBooking) -> None: ...
    def get_by_id(self, room_booking_id: EntityId) -> RoomBooking: ...
    def update(self, room_booking: RoomBooking, expected_version: int) -> None: ...
    def find_by_booking(self, booking_id: EntityId) -> List[RoomBooking]: ...
    def find_by_status(self, status: RoomBookingStatus) -> List[RoomBooking]: ...
    def list_all(self) -> List[RoomBooking]: ...


class IReferenceChecker(Protocol):
    """Проверка существования связанных сущностей (номер, бронирование, отель)."""

    def exists(self, kind: str, entity_id: EntityId) -> bool: ...


class IRoomBookingUnitOfWork(Protocol):
    """Интерфейс Unit of Work для бронирований номеров."""

    @property
    def room_bookings(self) -> IRoomBookingRepository: ...

    def __enter__(self) -> IRoomBookingUnitOfWork: ...
    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> Optional[bool]: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...
