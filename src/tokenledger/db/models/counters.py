from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from tokenledger.db.session import Base, TimestampMixin
from tokenledger.db.types import TokenAmount


class CountersRecord(TimestampMixin, Base):
    """Token-wide counters row. PK is the token name."""

    __tablename__ = "ledger_counters"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    user_count: Mapped[int] = mapped_column(BigInteger, default=0)
    transaction_count: Mapped[int] = mapped_column(BigInteger, default=0)
    total_supply: Mapped[int] = mapped_column(TokenAmount, default=0)
