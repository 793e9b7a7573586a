from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from tokenledger.db.session import Base, TimestampMixin
from tokenledger.db.types import TokenAmount


class UserRecord(TimestampMixin, Base):
    """Current balance of one address. PK is the lowercase hex address."""

    __tablename__ = "ledger_users"

    id: Mapped[str] = mapped_column(String(42), primary_key=True)
    balance: Mapped[int] = mapped_column(TokenAmount, default=0)
    created_at_block: Mapped[int] = mapped_column(BigInteger)
    created_at_timestamp: Mapped[int] = mapped_column(BigInteger)
    modified_at_block: Mapped[int] = mapped_column(BigInteger)
    modified_at_timestamp: Mapped[int] = mapped_column(BigInteger)
