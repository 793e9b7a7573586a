import logging

from tokenledger.domain.enums import EntityType, UserRole
from tokenledger.domain.models.events import TransferEvent
from tokenledger.domain.models.ledger import User
from tokenledger.ledger.counters import get_or_create_counters
from tokenledger.store.base import EntityStore, Found

logger = logging.getLogger(__name__)


async def get_or_create_user(
    store: EntityStore, role: UserRole, event: TransferEvent, token_name: str
) -> User:
    """Resolve the sender or receiver of event. Loaded users are returned untouched."""
    user_id = event.from_address if role == UserRole.SENDER else event.to_address
    result = await store.load(EntityType.USER, user_id)
    if isinstance(result, Found):
        return result.entity
    return await create_user(store, user_id, event, token_name)


async def create_user(store: EntityStore, user_id: str, event: TransferEvent, token_name: str) -> User:
    user = User(
        id=user_id,
        balance=0,
        created_at_block=event.block.number,
        created_at_timestamp=event.block.timestamp,
        modified_at_block=event.block.number,
        modified_at_timestamp=event.block.timestamp,
    )
    await store.upsert(user)

    counters = await get_or_create_counters(store, token_name)
    counters.user_count += 1
    await store.upsert(counters)

    logger.debug("Created user %s at block %d", user_id, event.block.number)
    return user
