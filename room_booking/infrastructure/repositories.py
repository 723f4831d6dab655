"""
Реализации репозитория бронирований номеров.

Записи хранятся в виде документов (см. ``schema.persistence``), поэтому
изменение загруженного объекта не затрагивает хранилище до вызова
``update``. Обновление выполняется с оптимистичной проверкой версии.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..domain import (
    ConcurrencyException,
    EntityId,
    RecordNotFound,
    RoomBooking,
    RoomBookingStatus,
    ValidationError,
)
from ..schema import from_document, to_document


class InMemoryRoomBookingRepository:
    """Реализация репозитория бронирований номеров в памяти."""

    def __init__(self) -> None:
        self._documents: Dict[str, Dict[str, Any]] = {}
        self._snapshot: Optional[Dict[str, Dict[str, Any]]] = None

    def add(self, room_booking: RoomBooking) -> None:
        key = str(room_booking.id)
        if key in self._documents:
            raise ValueError(f"RoomBooking with id {room_booking.id} already exists")
        self._documents[key] = to_document(room_booking)

    def get_by_id(self, room_booking_id: EntityId) -> RoomBooking:
        key = str(room_booking_id)
        if key not in self._documents:
            raise RecordNotFound(f"RoomBooking with id {room_booking_id} not found")
        return from_document(self._documents[key])

    def update(self, room_booking: RoomBooking, expected_version: int) -> None:
        key = str(room_booking.id)
        if key not in self._documents:
            raise RecordNotFound(f"RoomBooking with id {room_booking.id} not found")

        # Документ без __v считается версией 0, как и при загрузке
        stored_version = self._documents[key].get("__v", 0)
        if stored_version != expected_version:
            raise ConcurrencyException(
                f"Конфликт версий бронирования номера {room_booking.id}: "
                f"ожидалась {expected_version}, в хранилище {stored_version}"
            )
        self._documents[key] = to_document(room_booking)

    def find_by_booking(self, booking_id: EntityId) -> List[RoomBooking]:
        return [rb for rb in self.list_all() if rb.booking == booking_id]

    def find_by_status(self, status: RoomBookingStatus) -> List[RoomBooking]:
        return [rb for rb in self.list_all() if rb.status == status]

    def list_all(self) -> List[RoomBooking]:
        return [from_document(document) for document in self._documents.values()]

    def begin(self) -> None:
        """Запоминает состояние для возможного отката."""
        # Документы не изменяются на месте, достаточно поверхностной копии
        self._snapshot = dict(self._documents)

    def commit(self) -> None:
        # Снимок нужен для отката, если запись в хранилище не удалась
        self._persist()
        self._snapshot = None

    def rollback(self) -> None:
        if self._snapshot is not None:
            self._documents = self._snapshot
        self._snapshot = None

    def _persist(self) -> None:
        pass


class JsonFileRoomBookingRepository(InMemoryRoomBookingRepository):
    """Репозиторий, сохраняющий документы в JSON-файл при фиксации."""

    def __init__(self, file_path: Union[str, Path]):
        """
        Инициализирует репозиторий.

        Args:
            file_path: Путь к JSON-файлу с данными
        """
        super().__init__()
        self._file_path = Path(file_path)
        self._load_data()

    def _load_data(self) -> None:
        """Загружает данные из JSON-файла."""
        if not self._file_path.exists():
            return

        raw_data = self._file_path.read_text(encoding="utf-8")
        if not raw_data.strip():
            return

        for item in json.loads(raw_data):
            # Проверяем документ при загрузке и приводим его к каноническому виду
            room_booking = from_document(item)
            key = str(room_booking.id)
            if key in self._documents:
                raise ValidationError(
                    f"Повторяющийся идентификатор бронирования номера {key}",
                    field="_id",
                )
            self._documents[key] = to_document(room_booking)

    def _persist(self) -> None:
        """Сохраняет данные в JSON-файл."""
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        data = list(self._documents.values())
        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
