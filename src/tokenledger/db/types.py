"""Column type for token amounts wider than BIGINT."""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator

# uint256 needs 78 decimal digits
AMOUNT_PRECISION = 78


class TokenAmount(TypeDecorator):
    """Signed arbitrary-precision integer, returned as a Python int.

    NUMERIC(78, 0) on PostgreSQL. SQLite has no exact wide numeric, so the
    value is kept as its decimal string there.
    """

    impl = Numeric(AMOUNT_PRECISION, 0)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(AMOUNT_PRECISION + 2))
        return dialect.type_descriptor(Numeric(AMOUNT_PRECISION, 0))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if dialect.name == "sqlite":
            return str(int(value))
        return Decimal(int(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return int(value)
