"""ledger_tables

Revision ID: a1c4e2f0b7d3
Revises:
Create Date: 2026-10-19 09:12:40.118532

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "a1c4e2f0b7d3"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

AMOUNT = sa.Numeric(78, 0)


def upgrade() -> None:
    op.create_table(
        "ledger_counters",
        sa.Column("id", sa.String(100), primary_key=True),
        sa.Column("user_count", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("transaction_count", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("total_supply", AMOUNT, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_ledger_counters")),
    )

    op.create_table(
        "ledger_users",
        sa.Column("id", sa.String(42), primary_key=True),
        sa.Column("balance", AMOUNT, nullable=False, server_default="0"),
        sa.Column("created_at_block", sa.BigInteger(), nullable=False),
        sa.Column("created_at_timestamp", sa.BigInteger(), nullable=False),
        sa.Column("modified_at_block", sa.BigInteger(), nullable=False),
        sa.Column("modified_at_timestamp", sa.BigInteger(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_ledger_users")),
    )

    op.create_table(
        "ledger_transactions",
        sa.Column("id", sa.String(100), primary_key=True),
        sa.Column("from_address", sa.String(42), nullable=False),
        sa.Column("to_address", sa.String(42), nullable=False),
        sa.Column("amount", AMOUNT, nullable=False),
        sa.Column("gas_used", AMOUNT, nullable=False),
        sa.Column("gas_limit", AMOUNT, nullable=False),
        sa.Column("gas_price", AMOUNT, nullable=False),
        sa.Column("block", sa.BigInteger(), nullable=False),
        sa.Column("timestamp", sa.BigInteger(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_ledger_transactions")),
    )
    op.create_index(op.f("ix_ledger_transactions_block"), "ledger_transactions", ["block"])
    op.create_index("ix_ledger_transactions_from_block", "ledger_transactions", ["from_address", "block"])
    op.create_index("ix_ledger_transactions_to_block", "ledger_transactions", ["to_address", "block"])


def downgrade() -> None:
    op.drop_index("ix_ledger_transactions_to_block", table_name="ledger_transactions")
    op.drop_index("ix_ledger_transactions_from_block", table_name="ledger_transactions")
    op.drop_index(op.f("ix_ledger_transactions_block"), table_name="ledger_transactions")
    op.drop_table("ledger_transactions")
    op.drop_table("ledger_users")
    op.drop_table("ledger_counters")
