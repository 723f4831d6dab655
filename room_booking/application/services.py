"""
Прикладной слой бронирования номеров.

Сервис загружает запись из репозитория, вызывает доменную операцию,
сохраняет результат с проверкой версии и публикует доменные события
после фиксации изменений.
"""

from datetime import datetime
from typing import Any, Callable, List, Optional

from ..config import get_logger
from ..domain import (
    EntityId,
    ReferenceNotFound,
    RoomBooking,
    RoomBookingStatus,
)
from ..schema import RoomBookingInput, RoomBookingType
from . import ports

REFERENCE_KINDS = ("room", "booking", "hotel")


class RoomBookingApplicationService:
    """Сервис приложения для управления бронированиями номеров."""

    def __init__(
        self,
        uow: ports.IRoomBookingUnitOfWork,
        reference_checker: ports.IReferenceChecker,
        event_bus: Optional[ports.IEventBus] = None,
        logger: Optional[ports.ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._uow = uow
        self._reference_checker = reference_checker
        self._event_bus = event_bus
        self._logger = logger or get_logger(__name__)

    def create_room_booking(self, request: RoomBookingInput) -> RoomBookingType:
        """Закрепляет номер за бронированием."""
        try:
            with self._uow:
                # Ссылочная целостность проверяется до создания записи
                self._ensure_references_exist(request)

                room_booking = RoomBooking.create(
                    room=request.room,
                    booking=request.booking,
                    hotel=request.hotel,
                    check_in_date=request.check_in,
                    check_out_date=request.check_out,
                    rent=request.rent,
                    discount=request.discount,
                    extra_bed=request.extra_bed,
                    extra_breakfast=request.extra_breakfast,
                )
                self._uow.room_bookings.add(room_booking)
        except Exception as e:
            self._logger.error(
                "Ошибка при создании бронирования номера",
                error=str(e),
                booking=str(request.booking),
            )
            raise

        self._publish_events(room_booking)
        self._logger.info(
            "Бронирование номера создано",
            room_booking_id=str(room_booking.id),
            room=str(room_booking.room),
        )
        return RoomBookingType.from_domain(room_booking)

    def check_in(self, room_booking_id: EntityId) -> RoomBookingType:
        """Заселяет гостя."""
        return self._change(
            room_booking_id,
            lambda room_booking: room_booking.check_in(),
            "Ошибка при заселении",
        )

    def check_out(
        self, room_booking_id: EntityId, check_out_date: Optional[datetime] = None
    ) -> RoomBookingType:
        """Выселяет гостя."""
        return self._change(
            room_booking_id,
            lambda room_booking: room_booking.check_out(check_out_date),
            "Ошибка при выселении",
        )

    def cancel(
        self, room_booking_id: EntityId, reason: Optional[str] = None
    ) -> RoomBookingType:
        """Отменяет бронирование номера."""
        return self._change(
            room_booking_id,
            lambda room_booking: room_booking.cancel(reason),
            "Ошибка при отмене бронирования номера",
        )

    def apply_discount(self, room_booking_id: EntityId, amount: Any) -> RoomBookingType:
        """Назначает скидку на бронирование номера."""
        return self._change(
            room_booking_id,
            lambda room_booking: room_booking.apply_discount(amount),
            "Ошибка при применении скидки",
        )

    def get(self, room_booking_id: EntityId) -> RoomBookingType:
        """Возвращает информацию о бронировании номера."""
        room_booking = self._uow.room_bookings.get_by_id(room_booking_id)
        return RoomBookingType.from_domain(room_booking)

    def list_by_booking(self, booking_id: EntityId) -> List[RoomBookingType]:
        """Возвращает номера, закрепленные за бронированием."""
        room_bookings = self._uow.room_bookings.find_by_booking(booking_id)
        return [RoomBookingType.from_domain(rb) for rb in room_bookings]

    def list_by_status(self, status: RoomBookingStatus) -> List[RoomBookingType]:
        """Возвращает бронирования номеров в указанном статусе."""
        room_bookings = self._uow.room_bookings.find_by_status(status)
        return [RoomBookingType.from_domain(rb) for rb in room_bookings]

    def _change(
        self,
        room_booking_id: EntityId,
        action: Callable[[RoomBooking], None],
        error_message: str,
    ) -> RoomBookingType:
        try:
            with self._uow:
                room_booking = self._uow.room_bookings.get_by_id(room_booking_id)
                expected_version = room_booking.version

                action(room_booking)

                self._uow.room_bookings.update(room_booking, expected_version)
        except Exception as e:
            self._logger.error(
                error_message,
                error=str(e),
                room_booking_id=str(room_booking_id),
            )
            raise

        self._publish_events(room_booking)
        self._logger.info(
            "Бронирование номера обновлено",
            room_booking_id=str(room_booking.id),
            status=room_booking.status.value,
        )
        return RoomBookingType.from_domain(room_booking)

    def _ensure_references_exist(self, request: RoomBookingInput) -> None:
        for kind in REFERENCE_KINDS:
            entity_id = getattr(request, kind)
            if not self._reference_checker.exists(kind, entity_id):
                raise ReferenceNotFound(
                    f"{kind}: связанная сущность {entity_id} не найдена", field=kind
                )

    def _publish_events(self, room_booking: RoomBooking) -> None:
        # События публикуются только после фиксации изменений
        events = room_booking.pull_domain_events()
        if self._event_bus is None:
            return
        for event in events:
            self._event_bus.publish(event)
