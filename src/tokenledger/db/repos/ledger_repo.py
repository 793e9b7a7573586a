from typing import Optional

from sqlalchemy import Integer, Numeric, String, case, cast, func, or_, select, type_coerce
from sqlalchemy.ext.asyncio import AsyncSession

from tokenledger.db.models import CountersRecord, TransactionRecord, UserRecord
from tokenledger.domain.constants import ZERO_ADDRESS


class LedgerRepo:
    """Read-side queries over the folded ledger tables."""

    def __init__(self, session: AsyncSession, zero_address: str = ZERO_ADDRESS) -> None:
        self._session = session
        self._zero_address = zero_address.lower()

    async def get_counters(self, token_name: str) -> Optional[CountersRecord]:
        return await self._session.get(CountersRecord, token_name)

    async def get_user(self, address: str) -> Optional[UserRecord]:
        return await self._session.get(UserRecord, address.lower())

    async def get_transaction(self, tx_hash: str) -> Optional[TransactionRecord]:
        return await self._session.get(TransactionRecord, tx_hash.lower())

    async def count_users(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(UserRecord))
        return result.scalar_one()

    async def count_transactions(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(TransactionRecord))
        return result.scalar_one()

    async def sum_balances(self) -> int:
        """Sum of all holder balances, zero-address sentinel excluded.

        Summed in Python: balances can exceed what the database's integer SUM holds.
        """
        result = await self._session.execute(
            select(UserRecord.balance).where(UserRecord.id != self._zero_address)
        )
        return sum(result.scalars().all())

    async def top_holders(self, limit: int = 10) -> list[UserRecord]:
        """Largest balances first, zero-address sentinel excluded."""
        if self._session.get_bind().dialect.name == "sqlite":
            order = _text_amount_desc(type_coerce(UserRecord.balance, String))
        else:
            order = [cast(UserRecord.balance, Numeric).desc()]
        result = await self._session.execute(
            select(UserRecord)
            .where(UserRecord.id != self._zero_address)
            .order_by(*order, UserRecord.id)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def list_transactions_for_address(
        self,
        address: str,
        tx_type: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[TransactionRecord], int]:
        address = address.lower()
        involves = or_(TransactionRecord.from_address == address, TransactionRecord.to_address == address)
        base = select(TransactionRecord).where(involves)
        count_q = select(func.count()).select_from(TransactionRecord).where(involves)

        if tx_type:
            base = base.where(TransactionRecord.type == tx_type)
            count_q = count_q.where(TransactionRecord.type == tx_type)

        total_result = await self._session.execute(count_q)
        total = total_result.scalar_one()

        result = await self._session.execute(
            base.order_by(TransactionRecord.block.desc(), TransactionRecord.id)
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all()), total


def _text_amount_desc(text) -> list:
    """Exact descending order for amounts stored as decimal strings.

    SQLite's NUMERIC cast goes through a float above 2**63, so equal-length
    digit strings are compared as text instead: sign, then length, then digits.
    """
    negative = func.substr(text, 1, 1) == "-"
    length = func.length(text, type_=Integer)
    return [
        case((negative, 1), else_=0).asc(),
        case((negative, -length), else_=length).desc(),
        case((negative, None), else_=text).desc(),
        case((negative, text), else_=None).asc(),
    ]
