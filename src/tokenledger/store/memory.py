from collections import defaultdict

from tokenledger.domain.enums import EntityType
from tokenledger.domain.models.ledger import LedgerEntity
from tokenledger.store.base import EntityStore, Found, LoadResult, NotFound


class InMemoryEntityStore(EntityStore):
    """Dict-backed store. Entities are copied in and out, so callers never alias stored state."""

    def __init__(self, record_writes: bool = False) -> None:
        self._data: dict[EntityType, dict[str, LedgerEntity]] = defaultdict(dict)
        self._record_writes = record_writes
        # (entity_type, id) per upsert, in order; empty unless record_writes
        self.writes: list[tuple[EntityType, str]] = []

    async def load(self, entity_type: EntityType, entity_id: str) -> LoadResult:
        entity = self._data[entity_type].get(entity_id)
        if entity is None:
            return NotFound(entity_type, entity_id)
        return Found(entity.model_copy(deep=True))

    async def upsert(self, entity: LedgerEntity) -> None:
        self._data[entity.ENTITY_TYPE][entity.id] = entity.model_copy(deep=True)
        if self._record_writes:
            self.writes.append((entity.ENTITY_TYPE, entity.id))

    def all(self, entity_type: EntityType) -> list[LedgerEntity]:
        return [e.model_copy(deep=True) for e in self._data[entity_type].values()]

    def count(self, entity_type: EntityType) -> int:
        return len(self._data[entity_type])
