from sqlalchemy import BigInteger, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from tokenledger.db.session import Base, TimestampMixin
from tokenledger.db.types import TokenAmount


class TransactionRecord(TimestampMixin, Base):
    """Transfer log entry. PK is the transaction hash; append-only."""

    __tablename__ = "ledger_transactions"
    __table_args__ = (
        Index("ix_ledger_transactions_from_block", "from_address", "block"),
        Index("ix_ledger_transactions_to_block", "to_address", "block"),
    )

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    from_address: Mapped[str] = mapped_column(String(42))
    to_address: Mapped[str] = mapped_column(String(42))
    amount: Mapped[int] = mapped_column(TokenAmount)
    gas_used: Mapped[int] = mapped_column(TokenAmount)
    gas_limit: Mapped[int] = mapped_column(TokenAmount)
    gas_price: Mapped[int] = mapped_column(TokenAmount)
    block: Mapped[int] = mapped_column(BigInteger, index=True)
    timestamp: Mapped[int] = mapped_column(BigInteger)
    type: Mapped[str] = mapped_column(String(20))
