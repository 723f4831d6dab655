"""
Отображение бронирования номера на документ хранилища.

Формат документа: ``_id``, ссылки ``room``/``booking``/``hotel``,
поля записи во внешних именах, отметки ``createdAt``/``updatedAt``
и номер версии ``__v``. Незаданные необязательные поля в документ
не попадают.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from ..domain import EntityId, RoomBooking, RoomBookingStatus, ValidationError
from ..domain import rules

COLLECTION = "roombookings"


class RoomBookingDocument(BaseModel):
    """Документ коллекции бронирований номеров."""

    model_config = ConfigDict(populate_by_name=True)

    id: EntityId = Field(alias="_id")
    room: EntityId
    booking: EntityId
    hotel: EntityId
    check_in: datetime = Field(alias="checkIn")
    check_out: Optional[datetime] = Field(None, alias="checkOut")
    rent: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    extra_bed: bool = Field(False, alias="extraBed")
    extra_breakfast: bool = Field(False, alias="extraBreakfast")
    status: RoomBookingStatus
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    version: int = Field(0, alias="__v")


def to_document(room_booking: RoomBooking) -> Dict[str, Any]:
    """Преобразует сущность в JSON-совместимый документ."""
    document = RoomBookingDocument(
        id=room_booking.id,
        room=room_booking.room,
        booking=room_booking.booking,
        hotel=room_booking.hotel,
        check_in=room_booking.check_in_date,
        check_out=room_booking.check_out_date,
        rent=room_booking.rent,
        discount=room_booking.discount,
        extra_bed=room_booking.extra_bed,
        extra_breakfast=room_booking.extra_breakfast,
        status=room_booking.status,
        created_at=room_booking.created_at,
        updated_at=room_booking.updated_at,
        version=room_booking.version,
    )
    return document.model_dump(by_alias=True, mode="json", exclude_none=True)


def from_document(data: Dict[str, Any]) -> RoomBooking:
    """Восстанавливает сущность из документа хранилища."""
    try:
        document = RoomBookingDocument.model_validate(data)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise ValidationError(
            f"Некорректный документ бронирования номера: {field}: {error['msg']}",
            field=field,
        ) from e

    room_booking = RoomBooking(
        id=document.id,
        room=document.room,
        booking=document.booking,
        hotel=document.hotel,
        check_in_date=document.check_in,
        check_out_date=document.check_out,
        rent=document.rent,
        discount=document.discount,
        extra_bed=document.extra_bed,
        extra_breakfast=document.extra_breakfast,
        status=document.status,
        created_at=document.created_at,
        updated_at=document.updated_at,
        version=document.version,
    )
    rules.validate(room_booking)
    return room_booking
