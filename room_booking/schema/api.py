"""
Внешняя схема API для бронирования номера.

Имена полей (checkIn, checkOut, extraBed, ...) и их обязательность
являются контрактом с внешним слоем API и не меняются вместе
с именами атрибутов доменной модели.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, NamedTuple, Optional, Type

from pydantic import BaseModel, ConfigDict, Field

from ..domain import EntityId, RoomBooking, RoomBookingStatus


class EnumTypeInfo(NamedTuple):
    """Описание перечисления, публикуемого во внешней схеме."""

    enum: Type
    name: str
    description: str


ENUM_TYPES: Dict[str, EnumTypeInfo] = {
    "RoomBookingStatus": EnumTypeInfo(
        enum=RoomBookingStatus,
        name="RoomBookingStatus",
        description="Room booking status for a booking",
    ),
}


def enum_values(name: str) -> list:
    """Значения перечисления в том виде, в каком их видит клиент API."""
    return [member.value for member in ENUM_TYPES[name].enum]


class RoomBookingType(BaseModel):
    """Бронирование номера в представлении внешнего API."""

    model_config = ConfigDict(populate_by_name=True)

    id: EntityId = Field(description="Unique identifier for the room booking")
    check_in: datetime = Field(
        alias="checkIn", description="Check-in date of the Room booking"
    )
    check_out: Optional[datetime] = Field(
        None, alias="checkOut", description="Check-out date of the Room booking"
    )
    rent: Optional[Decimal] = Field(None, description="Room rent for the booking")
    discount: Optional[Decimal] = Field(None, description="Discount for the booking")
    extra_bed: bool = Field(alias="extraBed", description="Extra bed for the booking")
    extra_breakfast: bool = Field(
        alias="extraBreakfast", description="Extra breakfast for the booking"
    )
    room: EntityId = Field(description="Room where the booking were generated")
    booking: EntityId = Field(description="Unique identifier for the booking")
    hotel: EntityId = Field(description="Hotel where the booking were generated")
    status: RoomBookingStatus = Field(
        description="Room booking status of the booking"
    )
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_domain(cls, room_booking: RoomBooking) -> "RoomBookingType":
        """Создает DTO из доменной модели."""
        return cls(
            id=room_booking.id,
            check_in=room_booking.check_in_date,
            check_out=room_booking.check_out_date,
            rent=room_booking.rent,
            discount=room_booking.discount,
            extra_bed=room_booking.extra_bed,
            extra_breakfast=room_booking.extra_breakfast,
            room=room_booking.room,
            booking=room_booking.booking,
            hotel=room_booking.hotel,
            status=room_booking.status,
            created_at=room_booking.created_at,
            updated_at=room_booking.updated_at,
        )

    def to_api(self) -> Dict[str, Any]:
        """JSON-совместимый словарь с внешними именами полей."""
        return self.model_dump(by_alias=True, mode="json")


class RoomBookingInput(BaseModel):
    """Запрос на создание бронирования номера."""

    model_config = ConfigDict(populate_by_name=True)

    room: EntityId
    booking: EntityId
    hotel: EntityId
    check_in: datetime = Field(alias="checkIn")
    check_out: Optional[datetime] = Field(None, alias="checkOut")
    rent: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    extra_bed: bool = Field(False, alias="extraBed")
    extra_breakfast: bool = Field(False, alias="extraBreakfast")
