"""
Исключения доменного слоя бронирования номеров.
"""

from typing import Optional


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class ValidationError(DomainException):
    """Некорректные или несогласованные значения полей."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ReferenceNotFound(ValidationError):
    """Ссылка на несуществующий номер, бронирование или отель."""

    pass


class InvalidTransitionError(DomainException):
    """Смена статуса или операция, недопустимая из текущего состояния.

    ``target`` равен None, если операция не меняет статус.
    """

    def __init__(self, current, target=None, message: Optional[str] = None):
        if message is None:
            if target is None:
                message = f"Операция недопустима в статусе {current.value}"
            else:
                message = (
                    f"Невозможно перейти из статуса {current.value} в {target.value}"
                )
        super().__init__(message)
        self.current = current
        self.target = target


class ConcurrencyException(DomainException):
    """Исключение при конфликте версий."""

    pass


class RecordNotFound(DomainException):
    """Запись о бронировании номера не найдена."""

    pass
