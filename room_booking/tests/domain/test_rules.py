"""
Тесты таблицы правил валидации.
"""
from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from room_booking.domain import RoomBookingStatus, ValidationError
from room_booking.domain import rules


def make_record(**overrides):
    values = dict(
        id=uuid4(),
        room=uuid4(),
        booking=uuid4(),
        hotel=uuid4(),
        check_in_date=datetime(2024, 1, 10),
        check_out_date=datetime(2024, 1, 12),
        rent=Decimal("200"),
        discount=Decimal("50"),
        extra_bed=False,
        extra_breakfast=True,
        status=RoomBookingStatus.BOOKED,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_field_rules_cover_record_fields():
    assert set(rules.FIELD_RULES) == {
        "id",
        "room",
        "booking",
        "hotel",
        "check_in_date",
        "check_out_date",
        "rent",
        "discount",
        "extra_bed",
        "extra_breakfast",
        "status",
    }


def test_valid_record_passes():
    rules.validate(make_record())


@pytest.mark.parametrize(
    "field, value",
    [
        ("room", None),
        ("status", "BOOKED"),
        ("check_in_date", "2024-01-10"),
        ("rent", 10),
        ("extra_breakfast", 1),
    ],
)
def test_invalid_field_is_reported(field, value):
    with pytest.raises(ValidationError) as exc:
        rules.validate(make_record(**{field: value}))

    assert exc.value.field == field
    assert str(exc.value).startswith(f"{field}:")


@pytest.mark.parametrize("field", ["check_out_date", "rent", "discount"])
def test_optional_fields_accept_none(field):
    overrides = {field: None}
    if field == "rent":
        overrides["discount"] = None
    rules.validate(make_record(**overrides))


def test_record_rules_run_after_field_rules():
    record = make_record(check_out_date=datetime(2024, 1, 1), rent=Decimal("-1"))

    with pytest.raises(ValidationError) as exc:
        rules.validate(record)

    assert exc.value.field == "rent"


def test_discount_within_rent_rule():
    assert rules.discount_within_rent(make_record()) is None
    assert rules.discount_within_rent(make_record(discount=Decimal("201")))[0] == "discount"
