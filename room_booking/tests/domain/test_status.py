import pytest

from room_booking.domain import (
    ALLOWED_TRANSITIONS,
    INITIAL_STATUS,
    RoomBookingStatus,
    can_transition,
    is_terminal,
)

BOOKED = RoomBookingStatus.BOOKED
CHECKEDIN = RoomBookingStatus.CHECKEDIN
CHECKEDOUT = RoomBookingStatus.CHECKEDOUT
CANCELLED = RoomBookingStatus.CANCELLED


def test_initial_status_is_booked():
    assert INITIAL_STATUS == BOOKED


def test_every_status_has_transitions_entry():
    assert set(ALLOWED_TRANSITIONS) == set(RoomBookingStatus)


@pytest.mark.parametrize(
    "current, target",
    [
        (BOOKED, CHECKEDIN),
        (BOOKED, CANCELLED),
        (CHECKEDIN, CHECKEDOUT),
        (CHECKEDIN, CANCELLED),
    ],
)
def test_allowed_transitions(current, target):
    assert can_transition(current, target)


@pytest.mark.parametrize(
    "current, target",
    [
        (BOOKED, CHECKEDOUT),
        (BOOKED, BOOKED),
        (CHECKEDIN, BOOKED),
        (CHECKEDOUT, CANCELLED),
        (CHECKEDOUT, CHECKEDIN),
        (CANCELLED, BOOKED),
        (CANCELLED, CHECKEDIN),
    ],
)
def test_forbidden_transitions(current, target):
    assert not can_transition(current, target)


def test_terminal_statuses():
    """Терминальны только выселение и отмена."""
    assert {status for status in RoomBookingStatus if is_terminal(status)} == {
        CHECKEDOUT,
        CANCELLED,
    }


def test_status_values_match_names():
    """Значения статусов совпадают с внешним контрактом."""
    assert [status.value for status in RoomBookingStatus] == [
        "BOOKED",
        "CHECKEDIN",
        "CHECKEDOUT",
        "CANCELLED",
    ]
