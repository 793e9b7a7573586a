from tokenledger.db.repos.ledger_repo import LedgerRepo
from tokenledger.domain.constants import ZERO_ADDRESS
from tokenledger.ledger.folder import EventFolder
from tokenledger.store.sql import SqlEntityStore

AAA = "0x" + "a" * 40
BBB = "0x" + "b" * 40
CCC = "0x" + "c" * 40


class TestFolderOnDatabase:
    async def test_scenarios_persist(self, session, make_event):
        folder = EventFolder(SqlEntityStore(session))
        first = make_event(AAA, BBB, 100, block=1, tx_index=1)

        await folder.on_transfer(first)
        await folder.on_transfer(make_event(ZERO_ADDRESS, CCC, 50, block=2, tx_index=2))
        await folder.on_transfer(first)
        await session.commit()
        session.expunge_all()

        repo = LedgerRepo(session)
        counters = await repo.get_counters("GAL")
        assert counters.user_count == 4
        assert counters.transaction_count == 2
        assert counters.total_supply == 50

        assert (await repo.get_user(AAA)).balance == -200
        assert (await repo.get_user(BBB)).balance == 200
        assert (await repo.get_user(CCC)).balance == 50
        assert (await repo.get_user(ZERO_ADDRESS)).balance == -50

    async def test_rollback_discards_uncommitted_fold(self, session, make_event):
        folder = EventFolder(SqlEntityStore(session))
        await folder.on_transfer(make_event(ZERO_ADDRESS, AAA, 10, tx_index=1))
        await session.commit()

        await folder.on_transfer(make_event(AAA, BBB, 4, tx_index=2))
        await session.rollback()

        repo = LedgerRepo(session)
        assert (await repo.get_user(AAA)).balance == 10
        assert await repo.get_user(BBB) is None
        assert (await repo.get_counters("GAL")).transaction_count == 1

    async def test_self_transfer_persists_receiver_write(self, session, make_event):
        folder = EventFolder(SqlEntityStore(session))
        await folder.on_transfer(make_event(ZERO_ADDRESS, AAA, 100, block=1, tx_index=1))
        await folder.on_transfer(make_event(AAA, AAA, 30, block=2, tx_index=2))
        await session.commit()
        session.expunge_all()

        repo = LedgerRepo(session)
        assert (await repo.get_user(AAA)).balance == 130
        assert (await repo.get_counters("GAL")).total_supply == 100

    async def test_netted_self_transfer_persists(self, session, make_event):
        folder = EventFolder(SqlEntityStore(session), net_self_transfers=True)
        await folder.on_transfer(make_event(ZERO_ADDRESS, AAA, 100, block=1, tx_index=1))
        await folder.on_transfer(make_event(AAA, AAA, 30, block=2, tx_index=2))
        await session.commit()
        session.expunge_all()

        repo = LedgerRepo(session)
        assert (await repo.get_user(AAA)).balance == 100
        assert await repo.sum_balances() == 100
