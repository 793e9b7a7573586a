from enum import Enum


class TransactionType(str, Enum):
    """Classification of a token transfer by its zero-address endpoints."""

    MINT = "MINT"
    BURN = "BURN"
    TRANSFER = "TRANSFER"
