from typing import Optional

from ..application import ports
from ..config import get_logger
from .repositories import InMemoryRoomBookingRepository


class RoomBookingUnitOfWork:
    """Единица работы для бронирований номеров."""

    def __init__(
        self,
        room_bookings_repo: Optional[InMemoryRoomBookingRepository] = None,
        logger: Optional[ports.ILogger] = None,
    ):
        self._room_bookings = room_bookings_repo or InMemoryRoomBookingRepository()
        self._logger = logger or get_logger(__name__)
        self._committed = False

    @property
    def room_bookings(self) -> InMemoryRoomBookingRepository:
        return self._room_bookings

    @property
    def committed(self) -> bool:
        return self._committed

    def commit(self) -> None:
        """Фиксирует все изменения."""
        try:
            self._room_bookings.commit()
        except Exception:
            self.rollback()
            raise
        self._committed = True
        self._logger.info("RoomBookingUnitOfWork committed")

    def rollback(self) -> None:
        """Откатывает все изменения."""
        self._room_bookings.rollback()
        self._committed = False
        self._logger.warning("RoomBookingUnitOfWork rolled back")

    def __enter__(self):
        self._committed = False
        self._room_bookings.begin()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False  # Пробрасываем исключение дальше, если оно было
