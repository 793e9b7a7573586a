from tokenledger.domain.enums import EntityType
from tokenledger.domain.models.ledger import GlobalCounters
from tokenledger.ledger.counters import get_or_create_counters


class TestGetOrCreateCounters:
    async def test_creates_zeroed_record(self, store):
        counters = await get_or_create_counters(store, "GAL")
        assert counters.id == "GAL"
        assert counters.user_count == 0
        assert counters.transaction_count == 0
        assert counters.total_supply == 0

    async def test_create_path_upserts_once(self, store):
        await get_or_create_counters(store, "GAL")
        assert store.writes == [(EntityType.COUNTERS, "GAL")]

    async def test_load_path_does_not_write(self, store):
        await store.upsert(GlobalCounters(id="GAL", user_count=3, transaction_count=7, total_supply=500))
        store.writes.clear()

        counters = await get_or_create_counters(store, "GAL")
        assert counters.user_count == 3
        assert counters.transaction_count == 7
        assert counters.total_supply == 500
        assert store.writes == []

    async def test_keyed_by_token_name(self, store):
        await get_or_create_counters(store, "GAL")
        await get_or_create_counters(store, "OTHER")
        assert store.count(EntityType.COUNTERS) == 2
