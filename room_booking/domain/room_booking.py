from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

from . import rules
from .events import (
    DiscountApplied,
    DomainEvent,
    RoomBookingCancelled,
    RoomBookingCheckedIn,
    RoomBookingCheckedOut,
    RoomBookingCreated,
)
from .exceptions import InvalidTransitionError, ValidationError
from .identifiers import EntityId, generate_id, now
from .status import INITIAL_STATUS, RoomBookingStatus, can_transition, is_terminal


def to_amount(value: Any, field_name: str) -> Optional[Decimal]:
    """Приводит денежное значение к Decimal."""
    if value is None or isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValidationError(f"{field_name}: должно быть числом", field=field_name)
    try:
        # float через str, чтобы 0.1 не превращалось в 0.1000000000000000055...
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name}: должно быть числом", field=field_name)


def to_datetime(value: Any) -> Any:
    """Дата без времени трактуется как начало дня."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    return value


@dataclass
class RoomBooking:
    """Агрегат 'Бронирование номера'."""

    room: EntityId
    booking: EntityId
    hotel: EntityId
    check_in_date: datetime
    check_out_date: Optional[datetime] = None
    rent: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    extra_bed: bool = False
    extra_breakfast: bool = False
    status: RoomBookingStatus = INITIAL_STATUS
    id: EntityId = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=now)
    updated_at: datetime = field(default_factory=now)
    version: int = 0
    _events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    @staticmethod
    def create(
        room: EntityId,
        booking: EntityId,
        hotel: EntityId,
        check_in_date: datetime,
        check_out_date: Optional[datetime] = None,
        rent: Any = None,
        discount: Any = None,
        extra_bed: bool = False,
        extra_breakfast: bool = False,
    ) -> RoomBooking:
        """Создает бронирование номера в статусе BOOKED."""
        room_booking = RoomBooking(
            room=room,
            booking=booking,
            hotel=hotel,
            check_in_date=to_datetime(check_in_date),
            check_out_date=to_datetime(check_out_date),
            rent=to_amount(rent, "rent"),
            discount=to_amount(discount, "discount"),
            extra_bed=extra_bed,
            extra_breakfast=extra_breakfast,
        )
        rules.validate(room_booking)

        room_booking._add_event(
            RoomBookingCreated(
                room_booking_id=room_booking.id,
                room=room,
                booking=booking,
                hotel=hotel,
                check_in_date=room_booking.check_in_date,
                check_out_date=room_booking.check_out_date,
            )
        )
        room_booking.version = 1
        return room_booking

    @property
    def nights(self) -> Optional[int]:
        """Количество ночей; None, если дата выезда не определена."""
        if self.check_out_date is None:
            return None
        return (self.check_out_date.date() - self.check_in_date.date()).days

    @property
    def amount_due(self) -> Optional[Decimal]:
        """Стоимость с учетом скидки."""
        if self.rent is None:
            return None
        return self.rent - (self.discount or Decimal("0"))

    def is_active(self) -> bool:
        return self.status in (RoomBookingStatus.BOOKED, RoomBookingStatus.CHECKEDIN)

    def is_terminal(self) -> bool:
        return is_terminal(self.status)

    def pull_domain_events(self) -> List[DomainEvent]:
        events = list(self._events)
        self._events.clear()
        return events

    def _add_event(self, event: DomainEvent):
        self._events.append(event)
        self.updated_at = now()
        self.version += 1

    def _ensure_transition(self, target: RoomBookingStatus):
        if not can_transition(self.status, target):
            raise InvalidTransitionError(self.status, target)

    def check_in(self) -> None:
        """Заселяет гостя в номер."""
        self._ensure_transition(RoomBookingStatus.CHECKEDIN)

        self.status = RoomBookingStatus.CHECKEDIN
        self._add_event(RoomBookingCheckedIn(room_booking_id=self.id, room=self.room))

    def check_out(self, check_out_date: Optional[datetime] = None) -> None:
        """Выселяет гостя; дату выезда можно передать при вызове."""
        self._ensure_transition(RoomBookingStatus.CHECKEDOUT)

        departure = to_datetime(check_out_date) or self.check_out_date
        if departure is None:
            raise ValidationError(
                "check_out_date: для выселения требуется дата выезда",
                field="check_out_date",
            )
        rules.validate_field("check_out_date", departure)
        if (departure.tzinfo is None) != (self.check_in_date.tzinfo is None):
            raise ValidationError(
                "check_out_date: даты заезда и выезда должны быть "
                "в одном формате часового пояса",
                field="check_out_date",
            )
        if departure <= self.check_in_date:
            raise ValidationError(
                "check_out_date: дата выезда должна быть позже даты заезда",
                field="check_out_date",
            )

        self.check_out_date = departure
        self.status = RoomBookingStatus.CHECKEDOUT
        self._add_event(
            RoomBookingCheckedOut(
                room_booking_id=self.id, room=self.room, check_out_date=departure
            )
        )

    def cancel(self, reason: Optional[str] = None) -> None:
        """Отменяет бронирование номера до или во время проживания."""
        self._ensure_transition(RoomBookingStatus.CANCELLED)

        self.status = RoomBookingStatus.CANCELLED
        self._add_event(
            RoomBookingCancelled(room_booking_id=self.id, room=self.room, reason=reason)
        )

    def apply_discount(self, amount: Any) -> None:
        """Назначает скидку; допустимо только до заселения."""
        if self.status != RoomBookingStatus.BOOKED:
            raise InvalidTransitionError(
                self.status,
                None,
                f"Скидку можно применить только в статусе BOOKED, "
                f"текущий статус {self.status.value}",
            )

        discount = to_amount(amount, "discount")
        rules.validate_field("discount", discount)
        if discount is None:
            raise ValidationError("discount: обязательное поле", field="discount")
        if self.rent is None:
            raise ValidationError(
                "discount: скидка не может быть указана без стоимости", field="discount"
            )
        if discount > self.rent:
            raise ValidationError(
                "discount: скидка не может превышать стоимость", field="discount"
            )

        self.discount = discount
        self._add_event(DiscountApplied(room_booking_id=self.id, amount=discount))

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if not isinstance(other, RoomBooking):
            return NotImplemented
        return self.id == other.id
