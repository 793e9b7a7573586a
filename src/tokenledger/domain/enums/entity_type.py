from enum import Enum


class EntityType(str, Enum):
    """Record kinds held by the entity store."""

    COUNTERS = "COUNTERS"
    USER = "USER"
    TRANSACTION = "TRANSACTION"
