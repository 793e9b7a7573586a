import logging

from tokenledger.domain.constants import ZERO_ADDRESS
from tokenledger.domain.enums import EntityType, TransactionType
from tokenledger.domain.models.events import TransferEvent
from tokenledger.domain.models.ledger import Transaction
from tokenledger.ledger.classifier import classify
from tokenledger.ledger.counters import get_or_create_counters
from tokenledger.ledger.guards import check_supply
from tokenledger.store.base import EntityStore, Found

logger = logging.getLogger(__name__)


async def get_or_create_transaction(
    store: EntityStore,
    event: TransferEvent,
    token_name: str,
    zero_address: str = ZERO_ADDRESS,
    strict: bool = False,
) -> Transaction:
    """Return the log entry for event's hash, creating it on first sighting.

    A hash that is already recorded leaves counters and supply untouched.
    """
    result = await store.load(EntityType.TRANSACTION, event.tx_hash)
    if isinstance(result, Found):
        logger.warning("Transaction %s already recorded; counters and supply unchanged", event.tx_hash)
        return result.entity
    return await create_transaction(store, event, token_name, zero_address, strict)


async def create_transaction(
    store: EntityStore,
    event: TransferEvent,
    token_name: str,
    zero_address: str = ZERO_ADDRESS,
    strict: bool = False,
) -> Transaction:
    tx_type = classify(event.from_address, event.to_address, zero_address)

    counters = await get_or_create_counters(store, token_name)
    counters.transaction_count += 1

    if tx_type == TransactionType.MINT:
        counters.total_supply += event.value
    elif tx_type == TransactionType.BURN:
        counters.total_supply -= event.value

    if strict:
        check_supply(token_name, counters.total_supply)

    transaction = Transaction(
        id=event.tx_hash,
        from_address=event.from_address,
        to_address=event.to_address,
        amount=event.value,
        gas_used=event.block.gas_used,
        gas_limit=event.transaction.gas_limit,
        gas_price=event.transaction.gas_price,
        block=event.block.number,
        timestamp=event.block.timestamp,
        type=tx_type,
    )

    await store.upsert(counters)
    await store.upsert(transaction)

    if tx_type != TransactionType.TRANSFER:
        logger.info("%s of %d at block %d (tx %s)", tx_type.value, event.value, event.block.number, event.tx_hash)
    return transaction
