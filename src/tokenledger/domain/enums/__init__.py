from tokenledger.domain.enums.entity_type import EntityType
from tokenledger.domain.enums.transaction_type import TransactionType
from tokenledger.domain.enums.user_role import UserRole

__all__ = [
    "EntityType",
    "TransactionType",
    "UserRole",
]
