"""
Статусы бронирования номера и допустимые переходы между ними.
"""

from enum import Enum
from typing import Dict, FrozenSet


class RoomBookingStatus(str, Enum):
    """Статусы бронирования номера."""

    BOOKED = "BOOKED"  # Номер закреплен за бронированием
    CHECKEDIN = "CHECKEDIN"  # Гость заселен
    CHECKEDOUT = "CHECKEDOUT"  # Гость выселился
    CANCELLED = "CANCELLED"  # Бронирование номера отменено


INITIAL_STATUS = RoomBookingStatus.BOOKED

ALLOWED_TRANSITIONS: Dict[RoomBookingStatus, FrozenSet[RoomBookingStatus]] = {
    RoomBookingStatus.BOOKED: frozenset(
        {RoomBookingStatus.CHECKEDIN, RoomBookingStatus.CANCELLED}
    ),
    RoomBookingStatus.CHECKEDIN: frozenset(
        {RoomBookingStatus.CHECKEDOUT, RoomBookingStatus.CANCELLED}
    ),
    RoomBookingStatus.CHECKEDOUT: frozenset(),
    RoomBookingStatus.CANCELLED: frozenset(),
}


def can_transition(current: RoomBookingStatus, target: RoomBookingStatus) -> bool:
    """Проверяет, разрешен ли переход из current в target."""
    return target in ALLOWED_TRANSITIONS[current]


def is_terminal(status: RoomBookingStatus) -> bool:
    """Конечный статус: после него запись не изменяется."""
    return not ALLOWED_TRANSITIONS[status]
