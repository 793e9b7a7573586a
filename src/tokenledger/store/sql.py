"""SQLAlchemy-backed entity store. Upserts flush; the caller owns commit."""

import logging

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tokenledger.db.models import CountersRecord, TransactionRecord, UserRecord
from tokenledger.db.session import Base
from tokenledger.domain.enums import EntityType
from tokenledger.domain.models.ledger import ENTITY_MODELS, LedgerEntity
from tokenledger.exceptions import EntityStoreError
from tokenledger.store.base import EntityStore, Found, LoadResult, NotFound

logger = logging.getLogger(__name__)

RECORD_MODELS: dict[EntityType, type[Base]] = {
    EntityType.COUNTERS: CountersRecord,
    EntityType.USER: UserRecord,
    EntityType.TRANSACTION: TransactionRecord,
}


def to_entity(entity_type: EntityType, record: Base) -> BaseModel:
    return ENTITY_MODELS[entity_type].model_validate(record, from_attributes=True)


def to_record(entity: LedgerEntity) -> Base:
    record_cls = RECORD_MODELS[entity.ENTITY_TYPE]
    return record_cls(**entity.model_dump(mode="json"))


class SqlEntityStore(EntityStore):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def load(self, entity_type: EntityType, entity_id: str) -> LoadResult:
        try:
            record = await self._session.get(RECORD_MODELS[entity_type], entity_id)
        except SQLAlchemyError as e:
            logger.exception("Failed to load %s %s", entity_type.value, entity_id)
            raise EntityStoreError(f"Load failed for {entity_type.value} {entity_id}") from e
        if record is None:
            return NotFound(entity_type, entity_id)
        return Found(to_entity(entity_type, record))

    async def upsert(self, entity: LedgerEntity) -> None:
        try:
            await self._session.merge(to_record(entity))
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.exception("Failed to upsert %s %s", entity.ENTITY_TYPE.value, entity.id)
            raise EntityStoreError(f"Upsert failed for {entity.ENTITY_TYPE.value} {entity.id}") from e
