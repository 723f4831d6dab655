"""
Доменные события бронирования номера.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from .identifiers import EntityId, now


class DomainEvent(BaseModel):
    """Базовый класс для всех доменных событий."""

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on: datetime = Field(default_factory=now)
    room_booking_id: EntityId

    @property
    def event_type(self) -> str:
        return type(self).__name__


class RoomBookingCreated(DomainEvent):
    """Номер закреплен за бронированием."""

    room: EntityId
    booking: EntityId
    hotel: EntityId
    check_in_date: datetime
    check_out_date: Optional[datetime] = None


class RoomBookingCheckedIn(DomainEvent):
    """Гость заселился в номер."""

    room: EntityId


class RoomBookingCheckedOut(DomainEvent):
    """Гость выселился из номера."""

    room: EntityId
    check_out_date: datetime


class RoomBookingCancelled(DomainEvent):
    """Бронирование номера отменено."""

    room: EntityId
    reason: Optional[str] = None


class DiscountApplied(DomainEvent):
    """К бронированию номера применена скидка."""

    amount: Decimal
