"""Decoded transfer events, as handed over by the event source."""

import re

from pydantic import BaseModel, Field, field_validator

from tokenledger.domain.constants import UINT256_MAX

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


class BlockContext(BaseModel):
    number: int = Field(ge=0)
    timestamp: int = Field(ge=0)
    gas_used: int = Field(default=0, ge=0)


class TransactionContext(BaseModel):
    hash: str = Field(min_length=1)
    gas_limit: int = Field(default=0, ge=0)
    gas_price: int = Field(default=0, ge=0)

    @field_validator("hash")
    @classmethod
    def _lowercase_hash(cls, v: str) -> str:
        return v.lower()


class TransferEvent(BaseModel):
    """One ERC20 Transfer(from, to, value) with its block and transaction context."""

    from_address: str
    to_address: str
    value: int = Field(ge=0)  # smallest token unit
    block: BlockContext
    transaction: TransactionContext

    @field_validator("from_address", "to_address")
    @classmethod
    def _normalize_address(cls, v: str) -> str:
        if not _ADDRESS_RE.match(v):
            raise ValueError(f"Not a 20-byte hex address: {v!r}")
        return v.lower()

    @field_validator("value")
    @classmethod
    def _fits_uint256(cls, v: int) -> int:
        if v > UINT256_MAX:
            raise ValueError("Transfer value exceeds uint256")
        return v

    @property
    def tx_hash(self) -> str:
        return self.transaction.hash
