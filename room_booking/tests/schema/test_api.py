"""
Тесты внешней схемы API.
"""
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

from room_booking.domain import RoomBookingStatus
from room_booking.schema import ENUM_TYPES, RoomBookingInput, RoomBookingType, enum_values


def test_status_enum_registration():
    info = ENUM_TYPES["RoomBookingStatus"]

    assert info.enum is RoomBookingStatus
    assert info.description == "Room booking status for a booking"
    assert enum_values("RoomBookingStatus") == [
        "BOOKED",
        "CHECKEDIN",
        "CHECKEDOUT",
        "CANCELLED",
    ]


def test_from_domain_uses_external_field_names(room_booking):
    payload = RoomBookingType.from_domain(room_booking).to_api()

    assert set(payload) == {
        "id",
        "checkIn",
        "checkOut",
        "rent",
        "discount",
        "extraBed",
        "extraBreakfast",
        "room",
        "booking",
        "hotel",
        "status",
        "createdAt",
        "updatedAt",
    }
    assert payload["id"] == str(room_booking.id)
    assert payload["room"] == str(room_booking.room)
    assert payload["checkIn"] == "2024-01-10T14:00:00"
    assert payload["checkOut"] == "2024-01-12T12:00:00"
    assert Decimal(payload["rent"]) == Decimal("200")
    assert payload["discount"] is None
    assert payload["extraBed"] is False
    assert payload["status"] == "BOOKED"


def test_optional_fields_in_schema():
    """checkOut, rent и discount необязательны, остальное обязательно."""
    schema = RoomBookingType.model_json_schema(by_alias=True)

    assert set(schema["required"]) == {
        "id",
        "checkIn",
        "extraBed",
        "extraBreakfast",
        "room",
        "booking",
        "hotel",
        "status",
        "createdAt",
        "updatedAt",
    }
    assert schema["properties"]["checkIn"]["description"] == "Check-in date of the Room booking"


def test_input_accepts_camel_case_payload():
    room, booking, hotel = uuid4(), uuid4(), uuid4()

    request = RoomBookingInput.model_validate(
        {
            "room": str(room),
            "booking": str(booking),
            "hotel": str(hotel),
            "checkIn": "2024-01-10T14:00:00",
            "rent": "200",
            "extraBed": True,
        }
    )

    assert request.room == room
    assert request.check_in == datetime(2024, 1, 10, 14, 0)
    assert request.check_out is None
    assert request.rent == Decimal("200")
    assert request.extra_bed is True
    assert request.extra_breakfast is False
