"""
Доменная модель бронирования номера.

Содержит сущность RoomBooking, перечисление статусов с таблицей
переходов, таблицу правил валидации и доменные события.
"""

from .events import (
    DiscountApplied,
    DomainEvent,
    RoomBookingCancelled,
    RoomBookingCheckedIn,
    RoomBookingCheckedOut,
    RoomBookingCreated,
)
from .exceptions import (
    ConcurrencyException,
    DomainException,
    InvalidTransitionError,
    RecordNotFound,
    ReferenceNotFound,
    ValidationError,
)
from .identifiers import EntityId, generate_id, now
from .room_booking import RoomBooking
from .status import (
    ALLOWED_TRANSITIONS,
    INITIAL_STATUS,
    RoomBookingStatus,
    can_transition,
    is_terminal,
)

__all__ = [
    # Сущность
    "RoomBooking",
    # Статусы
    "RoomBookingStatus",
    "ALLOWED_TRANSITIONS",
    "INITIAL_STATUS",
    "can_transition",
    "is_terminal",
    # События
    "DomainEvent",
    "RoomBookingCreated",
    "RoomBookingCheckedIn",
    "RoomBookingCheckedOut",
    "RoomBookingCancelled",
    "DiscountApplied",
    # Исключения
    "DomainException",
    "ValidationError",
    "ReferenceNotFound",
    "InvalidTransitionError",
    "ConcurrencyException",
    "RecordNotFound",
    # Утилиты
    "EntityId",
    "generate_id",
    "now",
]
