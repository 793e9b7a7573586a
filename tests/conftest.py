import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from tokenledger.db.session import Base
from tokenledger.domain.models.events import TransferEvent
from tokenledger.store.memory import InMemoryEntityStore
import tokenledger.db.models  # noqa: F401  register all models


@pytest.fixture()
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest.fixture()
async def session(engine) -> AsyncSession:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as sess:
        yield sess


@pytest.fixture()
def store() -> InMemoryEntityStore:
    return InMemoryEntityStore(record_writes=True)


@pytest.fixture()
def make_event():
    """Build a TransferEvent; tx hash derived from tx_index unless given."""

    def _make(
        from_address: str,
        to_address: str,
        value: int,
        block: int = 1,
        tx_index: int = 1,
        tx_hash: str | None = None,
        timestamp: int | None = None,
    ) -> TransferEvent:
        return TransferEvent(
            from_address=from_address,
            to_address=to_address,
            value=value,
            block={
                "number": block,
                "timestamp": timestamp if timestamp is not None else 1700000000 + block * 12,
                "gas_used": 52000,
            },
            transaction={
                "hash": tx_hash or f"0x{tx_index:064x}",
                "gas_limit": 60000,
                "gas_price": 20000000000,
            },
        )

    return _make
