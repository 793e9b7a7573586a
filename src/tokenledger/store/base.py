"""Entity store interface the ledger core reads from and writes to."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from tokenledger.domain.enums import EntityType
from tokenledger.domain.models.ledger import LedgerEntity

E = TypeVar("E")


@dataclass(frozen=True)
class Found(Generic[E]):
    entity: E


@dataclass(frozen=True)
class NotFound:
    entity_type: EntityType
    entity_id: str


LoadResult = Union[Found[E], NotFound]


class EntityStore(ABC):
    """Key-value persistence keyed by (entity type, id)."""

    @abstractmethod
    async def load(self, entity_type: EntityType, entity_id: str) -> LoadResult:
        """Return Found(entity) or NotFound. No side effects."""

    @abstractmethod
    async def upsert(self, entity: LedgerEntity) -> None:
        """Persist the full field set of entity under its id. Last write wins."""
