"""
Шина доменных событий в памяти.

Обработчик, подписанный на базовый класс события (например, на
``DomainEvent``), получает и все его подклассы.
"""
from typing import Callable, Dict, List, Optional, Type

from ..application import ports
from ..config import get_logger
from ..domain import DomainEvent

EventHandler = Callable[[DomainEvent], None]


class InMemoryEventBus:
    """Синхронная шина событий бронирований номеров."""

    def __init__(self, logger: Optional[ports.ILogger] = None):
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = {}
        self._logger = logger or get_logger(__name__)

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Подписывает обработчик на события указанного типа и его подтипов."""
        self._handlers.setdefault(event_type, []).append(handler)
        self._logger.debug("Event handler subscribed", event_type=event_type.__name__)

    def handlers_for(self, event: DomainEvent) -> List[EventHandler]:
        """Обработчики события в порядке от точного типа к базовым."""
        handlers: List[EventHandler] = []
        for event_type in type(event).__mro__:
            handlers.extend(self._handlers.get(event_type, []))
        return handlers

    def publish(self, event: DomainEvent) -> None:
        """Передает событие всем подходящим обработчикам."""
        name = type(event).__name__
        handlers = self.handlers_for(event)
        if not handlers:
            self._logger.debug(
                "No handlers for event",
                event_type=name,
                room_booking_id=str(event.room_booking_id),
            )
            return

        self._logger.info(
            "Publishing event",
            event_type=name,
            room_booking_id=str(event.room_booking_id),
            handlers=len(handlers),
        )
        for handler in handlers:
            # Ошибка одного обработчика не мешает остальным получить событие
            try:
                handler(event)
            except Exception as e:
                self._logger.error(
                    "Error in event handler",
                    event_type=name,
                    room_booking_id=str(event.room_booking_id),
                    error=str(e),
                )
