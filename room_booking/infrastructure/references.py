from typing import Dict, Iterable, Set

from ..domain import EntityId


class InMemoryReferenceChecker:
    """Реестр известных номеров, бронирований и отелей в памяти."""

    def __init__(self) -> None:
        self._known: Dict[str, Set[EntityId]] = {}

    def register(self, kind: str, entity_ids: Iterable[EntityId]) -> None:
        """Регистрирует существующие сущности указанного вида."""
        self._known.setdefault(kind, set()).update(entity_ids)

    def exists(self, kind: str, entity_id: EntityId) -> bool:
        return entity_id in self._known.get(kind, set())
