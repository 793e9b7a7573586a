"""Ledger records folded from transfer events: counters, users, transactions."""

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict

from tokenledger.domain.enums import EntityType, TransactionType


class GlobalCounters(BaseModel):
    """Token-wide totals. One record per token, id = token name."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.COUNTERS

    id: str
    user_count: int = 0
    transaction_count: int = 0
    total_supply: int = 0  # Signed so a bad burn shows up as negative supply


class User(BaseModel):
    """Balance of one address (lowercase hex id)."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.USER

    id: str
    balance: int = 0
    created_at_block: int
    created_at_timestamp: int
    modified_at_block: int
    modified_at_timestamp: int


class Transaction(BaseModel):
    """Immutable log entry for a transaction hash, written at first sighting."""

    model_config = ConfigDict(frozen=True)

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.TRANSACTION

    id: str  # transaction hash
    from_address: str
    to_address: str
    amount: int
    gas_used: int
    gas_limit: int
    gas_price: int
    block: int
    timestamp: int
    type: TransactionType


LedgerEntity = Union[GlobalCounters, User, Transaction]

ENTITY_MODELS: dict[EntityType, type[BaseModel]] = {
    EntityType.COUNTERS: GlobalCounters,
    EntityType.USER: User,
    EntityType.TRANSACTION: Transaction,
}
