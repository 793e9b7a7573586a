from tokenledger.domain.models.events import BlockContext, TransactionContext, TransferEvent
from tokenledger.domain.models.ledger import ENTITY_MODELS, GlobalCounters, LedgerEntity, Transaction, User

__all__ = [
    "BlockContext",
    "ENTITY_MODELS",
    "GlobalCounters",
    "LedgerEntity",
    "Transaction",
    "TransactionContext",
    "TransferEvent",
    "User",
]
