import logging

from tokenledger.domain.enums import EntityType
from tokenledger.domain.models.ledger import GlobalCounters
from tokenledger.store.base import EntityStore, Found

logger = logging.getLogger(__name__)


async def get_or_create_counters(store: EntityStore, token_name: str) -> GlobalCounters:
    """Load the counters singleton, creating and persisting a zeroed one if absent.

    Exactly one upsert on the create path, none when the record exists.
    """
    result = await store.load(EntityType.COUNTERS, token_name)
    if isinstance(result, Found):
        return result.entity

    counters = GlobalCounters(id=token_name)
    await store.upsert(counters)
    logger.debug("Created counters for token %s", token_name)
    return counters
