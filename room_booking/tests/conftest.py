"""
Общие фикстуры для тестов бронирования номеров.
"""
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from room_booking.domain import RoomBooking


@pytest.fixture
def references():
    """Идентификаторы номера, бронирования и отеля."""
    return {"room": uuid4(), "booking": uuid4(), "hotel": uuid4()}


@pytest.fixture
def room_booking(references) -> RoomBooking:
    """Бронирование номера в статусе BOOKED."""
    return RoomBooking.create(
        check_in_date=datetime(2024, 1, 10, 14, 0),
        check_out_date=datetime(2024, 1, 12, 12, 0),
        rent=Decimal("200"),
        **references,
    )
