"""
Правила валидации записи о бронировании номера.

Правила хранятся отдельно от объявления полей: ``FIELD_RULES`` проверяет
значение одного поля, ``RECORD_RULES`` проверяет согласованность полей
между собой. Каждое правило возвращает текст ошибки или ``None``.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Tuple
from uuid import UUID

from .exceptions import ValidationError
from .status import RoomBookingStatus

FieldRule = Callable[[Any], Optional[str]]
RecordRule = Callable[[Any], Optional[Tuple[str, str]]]


def is_id(value: Any) -> Optional[str]:
    if not isinstance(value, UUID):
        return "должно быть идентификатором"
    return None


def is_datetime(value: Any) -> Optional[str]:
    if not isinstance(value, datetime):
        return "должно быть датой"
    return None


def is_amount(value: Any) -> Optional[str]:
    # bool является подклассом int, поэтому исключаем его явно
    if isinstance(value, bool) or not isinstance(value, Decimal):
        return "должно быть числом"
    if not value.is_finite():
        return "должно быть конечным числом"
    return None


def is_non_negative(value: Any) -> Optional[str]:
    if value < 0:
        return "не может быть отрицательным"
    return None


def is_bool(value: Any) -> Optional[str]:
    if not isinstance(value, bool):
        return "должно быть логическим значением"
    return None


def is_status(value: Any) -> Optional[str]:
    if not isinstance(value, RoomBookingStatus):
        return "должно быть статусом бронирования номера"
    return None


def optional(*rules: FieldRule) -> FieldRule:
    """Применяет правила, только если значение задано."""

    def check(value: Any) -> Optional[str]:
        if value is None:
            return None
        for rule in rules:
            error = rule(value)
            if error:
                return error
        return None

    return check


def required(*rules: FieldRule) -> FieldRule:
    """Значение обязательно и должно удовлетворять правилам."""

    def check(value: Any) -> Optional[str]:
        if value is None:
            return "обязательное поле"
        return optional(*rules)(value)

    return check


FIELD_RULES: Dict[str, FieldRule] = {
    "id": required(is_id),
    "room": required(is_id),
    "booking": required(is_id),
    "hotel": required(is_id),
    "check_in_date": required(is_datetime),
    "check_out_date": optional(is_datetime),
    "rent": optional(is_amount, is_non_negative),
    "discount": optional(is_amount, is_non_negative),
    "extra_bed": required(is_bool),
    "extra_breakfast": required(is_bool),
    "status": required(is_status),
}


def stay_dates_ordered(record: Any) -> Optional[Tuple[str, str]]:
    check_in, check_out = record.check_in_date, record.check_out_date
    if check_out is None:
        return None
    if (check_in.tzinfo is None) != (check_out.tzinfo is None):
        return (
            "check_out_date",
            "даты заезда и выезда должны быть в одном формате часового пояса",
        )
    if check_out <= check_in:
        return "check_out_date", "дата выезда должна быть позже даты заезда"
    return None


def discount_within_rent(record: Any) -> Optional[Tuple[str, str]]:
    if record.discount is None:
        return None
    if record.rent is None:
        return "discount", "скидка не может быть указана без стоимости"
    if record.discount > record.rent:
        return "discount", "скидка не может превышать стоимость"
    return None


RECORD_RULES: List[RecordRule] = [
    stay_dates_ordered,
    discount_within_rent,
]


def validate_field(name: str, value: Any) -> None:
    """Проверяет одно поле по таблице правил."""
    error = FIELD_RULES[name](value)
    if error:
        raise ValidationError(f"{name}: {error}", field=name)


def validate(record: Any) -> None:
    """Проверяет все поля записи, затем правила согласованности."""
    for name in FIELD_RULES:
        validate_field(name, getattr(record, name))

    for rule in RECORD_RULES:
        violation = rule(record)
        if violation:
            field, message = violation
            raise ValidationError(f"{field}: {message}", field=field)
