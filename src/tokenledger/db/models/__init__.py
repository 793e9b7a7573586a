from tokenledger.db.models.counters import CountersRecord
from tokenledger.db.models.transaction import TransactionRecord
from tokenledger.db.models.user import UserRecord

__all__ = [
    "CountersRecord",
    "TransactionRecord",
    "UserRecord",
]
