"""Fold a file of decoded Transfer events into the ledger database.

Usage:
    PYTHONPATH=src python scripts/replay_events.py events.jsonl

One JSON object per line, in chain order:
    {"from_address": "0x...", "to_address": "0x...", "value": 100,
     "block": {"number": 1, "timestamp": 1700000000, "gas_used": 21000},
     "transaction": {"hash": "0x...", "gas_limit": 60000, "gas_price": 20000000000}}

Not idempotent: replaying a file twice re-applies every balance delta.
Commits once, after the last event.
"""

import asyncio
import logging
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logger = logging.getLogger("replay_events")
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def read_events(path: Path):
    from tokenledger.domain.models.events import TransferEvent

    with path.open() as fh:
        for lineno, line in enumerate(fh, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                yield TransferEvent.model_validate_json(line)
            except ValueError:
                logger.error("Invalid event on line %d of %s", lineno, path)
                raise


async def main(path: Path) -> None:
    from tokenledger.container import Container
    from tokenledger.db.repos.ledger_repo import LedgerRepo
    from tokenledger.ledger.folder import fold_events

    container = Container()
    settings = container.settings()
    logger.info("Database: %s:%s/%s, token %s", settings.db_host, settings.db_port, settings.db_name, settings.token_name)

    session_factory = container.session_factory()
    async with session_factory() as session:
        try:
            folder = container.folder(session=session)
            count = await fold_events(folder, read_events(path))
            await session.commit()
        except Exception:
            await session.rollback()
            logger.exception("Replay failed; nothing committed")
            sys.exit(1)

        repo = LedgerRepo(session, zero_address=settings.zero_address)
        counters = await repo.get_counters(settings.token_name)
        if counters is not None:
            logger.info(
                "Folded %d events: users=%d transactions=%d supply=%d",
                count, counters.user_count, counters.transaction_count, counters.total_supply,
            )

    await container.engine().dispose()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    asyncio.run(main(Path(sys.argv[1])))
