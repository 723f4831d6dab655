from uuid import uuid4

from room_booking.domain import (
    DomainEvent,
    RoomBookingCancelled,
    RoomBookingCheckedIn,
)
from room_booking.infrastructure import InMemoryEventBus


class ListLogger:
    def __init__(self):
        self.errors = []

    def info(self, message, **kwargs):
        pass

    def debug(self, message, **kwargs):
        pass

    def warning(self, message, **kwargs):
        pass

    def error(self, message, **kwargs):
        self.errors.append((message, kwargs))


def test_publish_to_subscribers():
    bus = InMemoryEventBus(logger=ListLogger())
    received = []
    bus.subscribe(RoomBookingCheckedIn, received.append)
    event = RoomBookingCheckedIn(room_booking_id=uuid4(), room=uuid4())

    bus.publish(event)
    bus.publish(RoomBookingCancelled(room_booking_id=uuid4(), room=uuid4()))

    assert received == [event]


def test_base_class_subscriber_receives_all_events():
    bus = InMemoryEventBus(logger=ListLogger())
    audit = []
    checked_in = []
    bus.subscribe(DomainEvent, audit.append)
    bus.subscribe(RoomBookingCheckedIn, checked_in.append)
    first = RoomBookingCheckedIn(room_booking_id=uuid4(), room=uuid4())
    second = RoomBookingCancelled(room_booking_id=uuid4(), room=uuid4())

    bus.publish(first)
    bus.publish(second)

    assert audit == [first, second]
    assert checked_in == [first]
    # Сначала обработчики точного типа, затем базового
    assert bus.handlers_for(first) == [checked_in.append, audit.append]


def test_failing_handler_does_not_stop_others():
    logger = ListLogger()
    bus = InMemoryEventBus(logger=logger)
    received = []

    def broken(event):
        raise RuntimeError("обработчик упал")

    bus.subscribe(RoomBookingCheckedIn, broken)
    bus.subscribe(RoomBookingCheckedIn, received.append)
    event = RoomBookingCheckedIn(room_booking_id=uuid4(), room=uuid4())

    bus.publish(event)

    assert received == [event]
    [(message, context)] = logger.errors
    assert message == "Error in event handler"
    assert context["event_type"] == "RoomBookingCheckedIn"
    assert context["room_booking_id"] == str(event.room_booking_id)
    assert context["error"] == "обработчик упал"
